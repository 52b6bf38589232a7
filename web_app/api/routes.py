"""API routes implementation."""

import logging

from fastapi import APIRouter, Request, HTTPException, status
from datetime import datetime, timezone

from .schemas import (
    ShortenRequest,
    ShortenResponse,
    URLInfoResponse,
    URLListResponse,
    HealthResponse,
    StatisticsResponse,
)
from redirector.common.url_builder import build_short_url

router = APIRouter()
logger = logging.getLogger("redirector.web")


@router.post(
    "/shorten",
    response_model=ShortenResponse,
    summary="Create short URL",
    description="Register a long URL. Optionally provide a custom short code; an existing code is overwritten.",
)
async def shorten_url(request: Request, body: ShortenRequest):
    """Register a long URL."""
    service = request.app.state.service
    config = request.app.state.config

    try:
        result = service.create_short_url(
            original_url=body.url,
            custom_code=body.custom_code,
        )
    except Exception as e:
        logger.exception("Failed to register URL")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal error: {str(e)}",
        )

    short_url = build_short_url(
        short_code=result["short_code"],
        base_url=config.base_url,
        path_prefix=config.path_prefix,
    )

    return ShortenResponse(
        short_code=result["short_code"],
        short_url=short_url,
        original_url=result["original_url"],
        overwritten=result["overwritten"],
    )


@router.get(
    "/urls",
    response_model=URLListResponse,
    summary="List URLs",
    description="List every stored short code and its long URL.",
)
async def list_urls(request: Request):
    """List stored mappings."""
    urls = request.app.state.service.list_urls()
    return URLListResponse(count=len(urls), urls=[URLInfoResponse(**u) for u in urls])


@router.get(
    "/urls/{short_code:path}",
    response_model=URLInfoResponse,
    summary="Get URL information",
)
async def get_url_info(request: Request, short_code: str):
    """Get the long URL stored for a short code."""
    service = request.app.state.service

    original_url = service.get_original_url(short_code)

    if original_url is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Short code '{short_code}' not found",
        )

    return URLInfoResponse(short_code=short_code, original_url=original_url)


@router.get(
    "/stats",
    response_model=StatisticsResponse,
    summary="Get statistics",
)
async def get_statistics(request: Request):
    """Get service statistics."""
    stats = request.app.state.service.get_statistics()
    return StatisticsResponse(**stats)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
)
async def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    health = request.app.state.service.health_check()

    return HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        registry="healthy" if health["registry"] else "unhealthy",
        timestamp=datetime.now(timezone.utc),
    )
