"""HTTP layer for the URL redirector."""

from .app_factory import create_app

__all__ = ["create_app"]
