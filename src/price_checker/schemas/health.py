"""Health check schemas."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import Field

from price_checker.schemas.base import APIResponse
from price_checker.schemas.enums import CacheStatus


class PriceCacheHealth(APIResponse):
    """State of the in-memory price cache."""

    status: CacheStatus = Field(..., description="Cache lifecycle state")
    last_updated: datetime | None = Field(
        default=None,
        description="Time of the last successful crawl",
    )
    last_error: str | None = Field(
        default=None,
        description="Reason the most recent refresh failed",
    )
    files_processed: int = Field(default=0, ge=0)
    record_count: int = Field(default=0, ge=0)


class HealthResponse(APIResponse):
    """Liveness response with price cache state."""

    status: str = Field(..., description="Health status", examples=["healthy"])
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="Current server timestamp",
    )
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Deployment environment")
    price_cache: PriceCacheHealth | None = Field(
        default=None,
        description="Absent when the price service failed to start",
    )
