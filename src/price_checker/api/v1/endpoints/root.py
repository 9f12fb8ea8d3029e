"""Root endpoint providing service information."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from price_checker.core.config import Settings, get_settings
from price_checker.schemas.root import RootResponse


router = APIRouter(tags=["Root"])


@router.get(
    "/",
    response_model=RootResponse,
    summary="Root endpoint",
    description="Basic service information and links.",
)
async def root(
    settings: Annotated[Settings, Depends(get_settings)],
) -> RootResponse:
    """Return basic service information."""
    return RootResponse(
        service=settings.app.name,
        version=settings.app.version,
        status="operational",
        docs="/docs" if settings.is_non_production else "disabled",
        health=f"{settings.api.v1_prefix}/health",
    )
