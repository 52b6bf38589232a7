"""Thread-safe in-memory short code -> long URL table."""

import threading
from typing import Callable, Dict, Optional, Tuple


class Registry:
    """In-memory mapping of short codes to long URLs.

    Every operation, read or write, takes the same exclusive lock. The lock
    only ever guards a dict operation, so it is never held across I/O and
    never nested.
    """

    def __init__(self):
        self._urls: Dict[str, str] = {}
        self._lock = threading.Lock()

    def lookup(self, short_code: str) -> Tuple[Optional[str], bool]:
        """Look up a short code.

        Args:
            short_code: The short code to lookup

        Returns:
            Tuple of (long_url, found); long_url is None when not found
        """
        with self._lock:
            if short_code in self._urls:
                return self._urls[short_code], True
        return None, False

    def insert(self, short_code: str, long_url: str) -> bool:
        """Store a mapping, overwriting any existing entry for the code.

        Returns:
            True if an entry for the code already existed
        """
        with self._lock:
            existed = short_code in self._urls
            self._urls[short_code] = long_url
        return existed

    def insert_sequential(self, long_url: str, make_code: Callable[[int], str]) -> Tuple[str, bool]:
        """Derive a code from the current size and store the mapping atomically.

        Args:
            long_url: The long URL to store
            make_code: Called with the current table size, returns the code

        Returns:
            Tuple of (short_code, existed); existed is True when the derived
            code was already taken and got overwritten
        """
        with self._lock:
            short_code = make_code(len(self._urls))
            existed = short_code in self._urls
            self._urls[short_code] = long_url
        return short_code, existed

    def is_available(self, timeout: float = 1.0) -> bool:
        """Check that the lock can be taken within the timeout."""
        if not self._lock.acquire(timeout=timeout):
            return False
        self._lock.release()
        return True

    def size(self) -> int:
        """Number of stored mappings."""
        with self._lock:
            return len(self._urls)

    def snapshot(self) -> Dict[str, str]:
        """Copy of the whole table."""
        with self._lock:
            return dict(self._urls)

    def __len__(self) -> int:
        return self.size()
