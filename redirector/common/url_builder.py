"""URL building utilities for the URL redirector."""

from urllib.parse import quote


def build_short_url(
    short_code: str,
    base_url: str,
    path_prefix: str = "",
) -> str:
    """Build complete short URL.

    Args:
        short_code: The short code
        base_url: Base URL (e.g., http://localhost:8080)
        path_prefix: Optional path prefix (e.g., /s)

    Returns:
        Complete short URL
    """
    base = base_url.rstrip("/")
    prefix = path_prefix.strip("/")

    if prefix:
        return f"{base}/{prefix}/{short_code}"
    return f"{base}/{short_code}"


def location_header(url: str) -> str:
    """Percent-escape only the non-ASCII characters of a redirect target.

    ASCII punctuation such as ``{``, ``|`` or ``^`` is passed through
    unchanged; non-ASCII characters are UTF-8 percent-encoded so the value
    fits in an HTTP header.
    """
    return "".join(c if ord(c) < 0x80 else quote(c, safe="") for c in url)
