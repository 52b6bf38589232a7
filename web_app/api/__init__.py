"""JSON API for the URL redirector."""

from .routes import router as api_router

__all__ = ["api_router"]
