"""Health check endpoint.

Liveness only: the service is healthy whenever it can answer, even with an
empty or degraded price cache, because reads then fall back to static prices.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from price_checker.core.config import Settings, get_settings
from price_checker.schemas.health import HealthResponse, PriceCacheHealth


router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness probe",
    description="Service liveness plus the state of the price cache.",
)
async def health_check(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    """Report liveness and the price cache lifecycle state."""
    price_cache: PriceCacheHealth | None = None
    service = getattr(request.app.state, "price_service", None)
    if service is not None:
        cache = service.cache
        snapshot = cache.snapshot
        price_cache = PriceCacheHealth(
            status=service.status,
            last_updated=cache.last_successful_crawl,
            last_error=cache.last_error,
            files_processed=snapshot.files_processed if snapshot else 0,
            record_count=snapshot.record_count if snapshot else 0,
        )

    return HealthResponse(
        status="healthy" if service is not None else "degraded",
        version=settings.app.version,
        environment=settings.APP_ENV,
        price_cache=price_cache,
    )
