"""Price cache administration endpoint."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from price_checker.api.dependencies import get_price_service
from price_checker.observability.logging import get_logger
from price_checker.schemas.product import RefreshResponse
from price_checker.services.pricing.service import PriceService  # noqa: TC001


logger = get_logger(__name__)

router = APIRouter(tags=["Prices"])


@router.post(
    "/prices/refresh",
    response_model=RefreshResponse,
    summary="Refresh live prices",
    description=(
        "Crawls the retailer's price files now, or joins the crawl already in "
        "progress. A failed crawl keeps the previous prices."
    ),
)
async def refresh_prices(
    service: Annotated[PriceService, Depends(get_price_service)],
) -> RefreshResponse:
    """Run a price refresh and report the resulting cache state."""
    refreshed = await service.refresh()
    logger.info("Manual price refresh finished", refreshed=refreshed)
    return RefreshResponse(
        refreshed=refreshed,
        status=service.status,
        last_updated=service.cache.last_successful_crawl,
    )
