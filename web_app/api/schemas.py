"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime


class ShortenRequest(BaseModel):
    """Request to register a long URL."""

    url: str = Field(..., description="The URL to shorten; https:// is added when no http(s) scheme is given", min_length=1)
    custom_code: Optional[str] = Field(None, description="Optional custom short code; blank assigns the next number")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "url": "example.com/very/long/path/to/resource",
                    "custom_code": None
                },
                {
                    "url": "https://github.com/user/repo",
                    "custom_code": "repo"
                }
            ]
        }
    }


class ShortenResponse(BaseModel):
    """Response after registering a URL."""

    short_code: str = Field(..., description="The assigned short code")
    short_url: str = Field(..., description="The complete short URL")
    original_url: str = Field(..., description="The normalized long URL")
    overwritten: bool = Field(False, description="Whether an existing mapping was replaced")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "short_code": "1",
                    "short_url": "http://localhost:8080/1",
                    "original_url": "https://example.com/very/long/path",
                    "overwritten": False
                }
            ]
        }
    }


class URLInfoResponse(BaseModel):
    """A single stored mapping."""

    short_code: str
    original_url: str


class URLListResponse(BaseModel):
    """Every stored mapping."""

    count: int
    urls: List[URLInfoResponse]


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    registry: str = Field(..., description="Registry status")
    timestamp: datetime = Field(..., description="Check timestamp")


class StatisticsResponse(BaseModel):
    """Statistics response."""

    total_urls: int
