"""Public product and pricing schemas.

These are the only shapes that cross the service boundary.
"""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import Field

from price_checker.schemas.base import APIResponse
from price_checker.schemas.enums import CacheStatus, Category, PriceSource, Rating


class StorePrice(APIResponse):
    """One matched retailer record backing a live price range."""

    store_name: str = Field(..., description="Retailer display name")
    store_chain: str = Field(..., description="Retailer chain name")
    item_code: str = Field(..., description="Retailer item identifier")
    item_name: str = Field(default="", description="Retailer item name")
    price: float = Field(..., gt=0, description="Lowest observed price")
    high_price: float | None = Field(
        default=None,
        description="Highest price observed for the same item across branches",
    )
    price_update_date: str | None = Field(
        default=None,
        description="Retailer-reported price update timestamp, verbatim",
    )


class Product(APIResponse):
    """Catalog product joined with its current price range."""

    id: str = Field(..., description="Catalog product identifier")
    name: str = Field(..., description="English display name")
    name_hebrew: str = Field(..., description="Hebrew display name")
    category: Category = Field(..., description="Product category")
    unit: str = Field(..., description="Unit the price refers to")
    barcode: str | None = Field(default=None, description="Primary barcode")
    image: str = Field(default="", description="Display icon")
    average_price: float = Field(..., ge=0)
    low_price: float = Field(..., ge=0)
    high_price: float = Field(..., ge=0)
    source: PriceSource = Field(..., description="crawled or fallback")
    last_updated: datetime | None = Field(
        default=None,
        description="Time of the crawl the range was derived from",
    )
    store_prices: list[StorePrice] | None = Field(default=None)


class ProductsResponse(APIResponse):
    """Response for the product listing endpoint."""

    success: bool = True
    products: list[Product]
    source: PriceSource
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    last_updated: datetime | None = None
    message: str | None = Field(
        default=None,
        description="Diagnostic message when live data was unavailable",
    )


class PriceRatingResponse(APIResponse):
    """Rating of an observed price against a product's range."""

    product_id: str
    price: float
    rating: Rating
    low_price: float
    high_price: float
    source: PriceSource


class RefreshResponse(APIResponse):
    """Result of an explicit cache refresh."""

    refreshed: bool
    status: CacheStatus
    last_updated: datetime | None = None
