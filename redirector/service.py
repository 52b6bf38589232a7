"""Business logic service for the URL redirector."""

import logging
from typing import Optional, Dict, Any, List

from .registry import Registry
from .shortcode import ShortCodeGenerator
from .common.validators import normalize_long_url, clean_custom_code, is_shadowed_by_api


class RedirectorService:
    """Service layer shared by the HTTP app and the console loop."""

    def __init__(
        self,
        registry: Registry,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        logger: Optional[logging.Logger] = None,
        lock_timeout: float = 1.0,
    ):
        """Initialize redirector service.

        Args:
            registry: Shared registry instance
            short_code_generator: Optional short code generator
            logger: Optional logger
            lock_timeout: Seconds the health check waits for the registry lock
        """
        self.registry = registry
        self.generator = short_code_generator or ShortCodeGenerator()
        self.logger = logger or logging.getLogger(__name__)
        self.lock_timeout = lock_timeout

    def create_short_url(
        self,
        original_url: str,
        custom_code: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Register a long URL under a custom or sequential short code.

        The long URL gets https:// prepended unless it already uses http or
        https. An existing mapping for the same code is overwritten.

        Args:
            original_url: The long URL as entered
            custom_code: Optional custom short code (blank means none)

        Returns:
            Dictionary with short_code, original_url and overwritten
        """
        long_url = normalize_long_url(original_url)
        custom_code = clean_custom_code(custom_code)

        if custom_code:
            overwritten = self.registry.insert(custom_code, long_url)
            short_code = custom_code
        else:
            short_code, overwritten = self.registry.insert_sequential(
                long_url, self.generator.generate_sequential
            )

        if overwritten:
            self.logger.warning(f"Short code '{short_code}' already existed and was overwritten")
        if is_shadowed_by_api(short_code):
            self.logger.warning(
                f"Short code '{short_code}' is under /api/ and may be served by the API instead of redirecting"
            )
        self.logger.info(f"Created short URL: {short_code} -> {long_url}")

        return {
            "short_code": short_code,
            "original_url": long_url,
            "overwritten": overwritten,
        }

    def get_original_url(self, short_code: str) -> Optional[str]:
        """Get the long URL for a short code.

        Args:
            short_code: The short code to lookup

        Returns:
            Long URL or None if not found
        """
        long_url, found = self.registry.lookup(short_code)

        if found:
            self.logger.debug(f"Retrieved URL: {short_code} -> {long_url}")
            return long_url

        self.logger.info(f"Short code not found: {short_code}")
        return None

    def url_exists(self, short_code: str) -> bool:
        """Check if a short code exists."""
        _, found = self.registry.lookup(short_code)
        return found

    def list_urls(self) -> List[Dict[str, str]]:
        """List every mapping, ordered by short code."""
        return [
            {"short_code": code, "original_url": url}
            for code, url in sorted(self.registry.snapshot().items())
        ]

    def get_statistics(self) -> Dict[str, Any]:
        """Get service statistics."""
        return {"total_urls": self.registry.size()}

    def health_check(self) -> Dict[str, bool]:
        """Perform health check.

        The registry is healthy if its lock can be taken within
        ``lock_timeout`` seconds.

        Returns:
            Dictionary with health status
        """
        registry_healthy = self.registry.is_available(timeout=self.lock_timeout)

        return {
            "registry": registry_healthy,
            "overall": registry_healthy,
        }
