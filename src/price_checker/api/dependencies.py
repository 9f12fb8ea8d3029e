"""FastAPI dependencies for service access.

Services are created during application startup and stored in ``app.state``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Request

from price_checker.core.exceptions import ServiceUnavailableException


if TYPE_CHECKING:
    from price_checker.services.pricing.service import PriceService


async def get_price_service(request: Request) -> PriceService:
    """Get the price service from app state.

    Raises:
        ServiceUnavailableException: 503 if the service failed to start.
    """
    service: PriceService | None = getattr(request.app.state, "price_service", None)
    if service is None:
        msg = "Price service not available"
        raise ServiceUnavailableException(msg)
    return service
