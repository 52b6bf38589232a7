"""FastAPI application factory."""

from fastapi import FastAPI

from .api import api_router
from .web import web_router
from .middleware.logging import LoggingMiddleware


def create_app(service_instance, config, logger=None) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        service_instance: Shared RedirectorService
        config: Configuration instance
        logger: Optional logger for request logging

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="URL Redirector",
        description="In-memory short URL redirect service",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    app.state.service = service_instance
    app.state.config = config

    app.add_middleware(
        LoggingMiddleware,
        logger=logger.getChild("web") if logger else None,
    )

    # API first: the redirect route matches every path
    app.include_router(api_router, prefix="/api", tags=["API"])
    app.include_router(web_router, tags=["Web"])

    return app
