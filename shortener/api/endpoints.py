"""
FastAPI Endpoints for URL Shortener Service

This module defines the URL endpoints with minimal logic.
Endpoints only handle:
- HTTP method checks
- Request decoding (delegated to validators)
- Delegating to service layer

Errors are raised as ShortenerError subclasses and rendered as plain text
by the handler registered in create_app().
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse

from shortener.api.dependencies import get_redirect_service, get_url_service
from shortener.api.schemas import ShortenResponse
from shortener.core.exceptions import MethodNotAllowedError, ShortURLNotFoundError
from shortener.core.validators import parse_shorten_request
from shortener.services.redirect_service import RedirectService
from shortener.services.url_service import URLShorteningService

# Registered for every method so the handlers can answer with their own errors
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

router = APIRouter(tags=["URL Shortener"])


@router.api_route(
    "/shorten",
    methods=ALL_METHODS,
    response_model=ShortenResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a short URL",
    description="Takes a long URL and returns a generated short identifier"
)
async def create_short_url(
    request: Request,
    url_service: URLShorteningService = Depends(get_url_service)
) -> ShortenResponse:
    """
    Create a new short URL from a long URL.

    Returns:
        ShortenResponse with short_id, original_url and short_url

    Raises:
        MethodNotAllowedError: Method is not POST (405)
        InvalidRequestBodyError: Body is not valid JSON (400)
        URLRequiredError: url is missing or empty (400)
    """
    if request.method != "POST":
        raise MethodNotAllowedError()

    body = parse_shorten_request(await request.body())
    short_url_obj = url_service.create_short_url(body.url)

    return ShortenResponse(
        short_id=short_url_obj.short_id,
        original_url=short_url_obj.original_url,
        short_url=short_url_obj.short_url
    )


@router.api_route(
    "/{short_id:path}",
    methods=ALL_METHODS,
    status_code=status.HTTP_302_FOUND,
    summary="Redirect to original URL",
    description="Resolves a short identifier. No mapping is stored, so this always answers 404"
)
async def redirect_to_url(
    short_id: str,
    redirect_service: RedirectService = Depends(get_redirect_service)
):
    """
    Redirect to the original URL for a given short identifier.

    Raises:
        ShortURLNotFoundError: Identifier is unknown (404)
    """
    original_url = redirect_service.get_redirect_url(short_id)
    if not original_url:
        raise ShortURLNotFoundError(short_id)

    return RedirectResponse(url=original_url, status_code=status.HTTP_302_FOUND)
