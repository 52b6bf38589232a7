"""Middleware for the redirector web app."""

from .logging import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
