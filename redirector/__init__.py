"""Core logic for the in-memory URL redirector."""

from .registry import Registry
from .shortcode import ShortCodeGenerator
from .service import RedirectorService
from .console import RegistrationLoop
from .server import RedirectServer

__all__ = [
    "Registry",
    "ShortCodeGenerator",
    "RedirectorService",
    "RegistrationLoop",
    "RedirectServer",
]
