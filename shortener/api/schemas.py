"""
API Request and Response Schemas

This module defines all Pydantic models for API requests and responses.
Separated from endpoints to keep concerns separated and enable reuse.

Design Principles:
- Request models: Define input decoding
- Response models: Define output structure
- Separation: Can be imported by other modules (services, tests, etc.)
"""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator


class ShortenRequest(BaseModel):
    """Request model for URL shortening endpoint."""
    # Missing and empty are both rejected by the endpoint, not by the model
    url: str = Field(default="", description="The long URL to shorten")

    @model_validator(mode="before")
    @classmethod
    def _match_url_key(cls, data: Any) -> Any:
        """
        Match the url key in any letter case; the last match wins.

        A null value counts as absent and leaves the previous value alone.
        """
        if not isinstance(data, dict):
            return data
        fields = {}
        for key, value in data.items():
            if isinstance(key, str) and key.lower() == "url" and value is not None:
                fields["url"] = value
        return fields


class ShortenResponse(BaseModel):
    """Response model for URL shortening endpoint."""
    short_id: str = Field(..., description="The generated short identifier")
    original_url: str = Field(..., description="The original long URL")
    short_url: str = Field(..., description="The complete short URL")


class HealthResponse(BaseModel):
    """Response model for the health and readiness probes."""
    status: Literal["healthy", "ready"]
    environment: str
    version: str
    timestamp: datetime


class ServiceInfo(BaseModel):
    """Response model for the root endpoint."""
    service: str
    version: str
    environment: str
    status: Literal["running"] = "running"
