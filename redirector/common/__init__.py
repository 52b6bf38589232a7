"""Common utilities for the URL redirector."""

from .validators import (
    normalize_long_url,
    has_http_scheme,
    first_token,
    clean_custom_code,
    is_shadowed_by_api,
)
from .url_builder import build_short_url, location_header
from .logging_config import setup_logging

__all__ = [
    "normalize_long_url",
    "has_http_scheme",
    "first_token",
    "clean_custom_code",
    "is_shadowed_by_api",
    "build_short_url",
    "location_header",
    "setup_logging",
]
