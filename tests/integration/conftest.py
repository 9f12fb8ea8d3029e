"""Integration test fixtures.

The application is built by the real factory; the price service runs over a
fake crawler so no test touches the network.
"""

from __future__ import annotations

from decimal import Decimal
from types import MappingProxyType
from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from price_checker.core.config import get_settings
from price_checker.factory import create_app
from price_checker.services.pricing.cache import CacheState
from price_checker.services.pricing.models import CrawlReport, RawRecord
from price_checker.services.pricing.service import PriceService


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI

    from price_checker.core.config.settings import PricingSettings


pytestmark = pytest.mark.integration


def milk_report() -> CrawlReport:
    """Crawl report with two milk records."""
    records = (
        RawRecord(identifier="7290000066318", name="חלב 3%", price=Decimal("6.90")),
        RawRecord(identifier="7290000066325", name="חלב 3%", price=Decimal("5.90")),
    )
    return CrawlReport(
        files_located=1,
        outcomes=(),
        records=records,
        high_prices=MappingProxyType({r.identifier: r.price for r in records}),
    )


@pytest.fixture
def crawler() -> MagicMock:
    """Fake crawler returning milk prices."""
    mock = MagicMock()
    mock.crawl = AsyncMock(return_value=milk_report())
    return mock


@pytest.fixture
def price_service(
    pricing_settings: PricingSettings, crawler: MagicMock
) -> PriceService:
    """Price service over the fake crawler."""
    return PriceService(CacheState(), pricing_settings, crawler=crawler)


@pytest.fixture
def app(price_service: PriceService) -> FastAPI:
    """Application with the price service attached."""
    settings = get_settings()
    application = create_app(settings)
    application.state.price_service = price_service
    application.state.price_cache = price_service.cache
    application.dependency_overrides[get_settings] = lambda: settings
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """HTTP client bound to the application."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
