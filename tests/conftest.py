"""Shared fixtures for the price checker test suite."""

from __future__ import annotations

import os


os.environ.setdefault("APP_ENV", "test")

from datetime import UTC, datetime  # noqa: E402
from decimal import Decimal  # noqa: E402
from typing import TYPE_CHECKING  # noqa: E402

import pytest  # noqa: E402

from price_checker.core.config import get_settings  # noqa: E402
from price_checker.core.config.settings import PricingSettings  # noqa: E402
from price_checker.services.pricing.models import RawRecord  # noqa: E402


if TYPE_CHECKING:
    from collections.abc import Callable, Generator


LISTING_URL = "https://prices.example.test/"

PRICE_FILE_XML = """<?xml version="1.0" encoding="utf-8"?>
<root>
  <ChainId>7290027600007</ChainId>
  <StoreId>001</StoreId>
  <Items Count="3">
    <Item>
      <PriceUpdateDate>2024-10-17 03:00</PriceUpdateDate>
      <ItemCode>7290000066318</ItemCode>
      <ItemName>חלב תנובה 3% 1 ליטר</ItemName>
      <UnitOfMeasure>ליטר</UnitOfMeasure>
      <Quantity>1.00</Quantity>
      <ItemPrice>6.90</ItemPrice>
      <UnitOfMeasurePrice>6.90</UnitOfMeasurePrice>
    </Item>
    <Item>
      <ItemCode>2000090000004</ItemCode>
      <ItemName>בננה</ItemName>
      <ItemPrice>7.90</ItemPrice>
    </Item>
    <Item>
      <ItemCode>1234</ItemCode>
      <ItemName>פריט פגום</ItemName>
      <ItemPrice>0</ItemPrice>
    </Item>
  </Items>
</root>
"""


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Generator[None]:
    """Each test sees settings loaded from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def pricing_settings() -> PricingSettings:
    """Small, fast pricing configuration."""
    return PricingSettings(
        listing_url=LISTING_URL,
        max_files=3,
        max_concurrent_downloads=2,
        fetch_timeout=5.0,
        refresh_timeout=5.0,
        cache_ttl=3600,
        failure_backoff=60,
        max_fuzzy_matches=5,
        warm_on_startup=False,
    )


@pytest.fixture
def make_record() -> Callable[..., RawRecord]:
    """Factory for RawRecord instances with sensible defaults."""

    def _make(
        identifier: str = "7290000066318",
        price: str | Decimal = "6.90",
        name: str = "חלב 3%",
        **kwargs: object,
    ) -> RawRecord:
        return RawRecord(
            identifier=identifier,
            name=name,
            price=Decimal(price),
            **kwargs,  # type: ignore[arg-type]
        )

    return _make


@pytest.fixture
def fixed_now() -> datetime:
    """A fixed point in time."""
    return datetime(2024, 10, 17, 12, 0, tzinfo=UTC)


@pytest.fixture
def price_file_xml() -> str:
    """A small price file with two valid items and one malformed item."""
    return PRICE_FILE_XML
