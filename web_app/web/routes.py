"""Redirect route: GET /<short_code>."""

from fastapi import APIRouter, Request, HTTPException, Response, status

from redirector.common.url_builder import location_header

router = APIRouter()


@router.api_route("/{short_code:path}", methods=["GET", "HEAD"], include_in_schema=False)
async def redirect_to_url(request: Request, short_code: str):
    """Redirect to the long URL stored for everything after the first "/"."""
    service = request.app.state.service

    original_url = service.get_original_url(short_code)

    if original_url is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Short code '{short_code}' not found",
        )

    # RedirectResponse would re-quote ASCII punctuation in the stored URL
    return Response(
        status_code=status.HTTP_302_FOUND,
        headers={"location": location_header(original_url)},
    )
