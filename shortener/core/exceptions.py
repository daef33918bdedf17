"""
Custom Exceptions

This module defines custom exceptions for the shortener service.
Every exception carries the HTTP status code and the plain-text message
that is sent back to the caller, so endpoints only need to raise.
"""

from typing import Optional

from fastapi import status


class ShortenerError(Exception):
    """Base exception for the URL shortener service."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidRequestBodyError(ShortenerError):
    """Raised when the request body cannot be decoded."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request body"


class URLRequiredError(ShortenerError):
    """Raised when the url field is missing or empty."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "URL is required"


class MethodNotAllowedError(ShortenerError):
    """Raised when an endpoint is called with the wrong HTTP method."""

    status_code = status.HTTP_405_METHOD_NOT_ALLOWED
    message = "Method not allowed"


class ShortURLNotFoundError(ShortenerError):
    """Raised when a short identifier cannot be resolved."""

    status_code = status.HTTP_404_NOT_FOUND
    message = "Short URL not found"

    def __init__(self, short_id: str = ""):
        self.short_id = short_id
        super().__init__()


class RequestTimeoutError(ShortenerError):
    """Raised when handling a request exceeds the configured budget."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    message = "Request timed out"
