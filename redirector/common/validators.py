"""Input normalization for long URLs and short codes."""

from typing import Optional

ALLOWED_SCHEMES = ("http://", "https://")
DEFAULT_SCHEME = "https://"

# The JSON API is routed before the redirect route
API_PATH_PREFIX = "api/"


def is_shadowed_by_api(short_code: str) -> bool:
    """Return True if GET /<short_code> would hit the JSON API instead of redirecting."""
    return short_code.startswith(API_PATH_PREFIX)


def has_http_scheme(url: str) -> bool:
    """Return True if the URL already starts with http:// or https://."""
    return url.startswith(ALLOWED_SCHEMES)


def normalize_long_url(url: str) -> str:
    """Prefix https:// unless the URL already carries an http(s) scheme.

    No other validation happens: an empty string becomes ``https://``.

    Args:
        url: Long URL as typed by the user

    Returns:
        Normalized long URL
    """
    if has_http_scheme(url):
        return url
    return f"{DEFAULT_SCHEME}{url}"


def first_token(line: Optional[str]) -> str:
    """Return the first whitespace-delimited token of a line, or "".

    A blank line (only whitespace or a bare newline) yields "" which is the
    sentinel for "no value given".
    """
    if not line:
        return ""
    parts = line.split()
    return parts[0] if parts else ""


def clean_custom_code(custom_code: Optional[str]) -> Optional[str]:
    """Turn a blank custom code into None, strip surrounding whitespace otherwise."""
    if custom_code and custom_code.strip():
        return custom_code.strip()
    return None
