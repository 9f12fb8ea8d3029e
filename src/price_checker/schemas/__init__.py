"""Pydantic schemas for the public API."""

from price_checker.schemas.base import APIResponse
from price_checker.schemas.enums import CacheStatus, Category, PriceSource, Rating
from price_checker.schemas.health import HealthResponse, PriceCacheHealth
from price_checker.schemas.product import (
    PriceRatingResponse,
    Product,
    ProductsResponse,
    RefreshResponse,
    StorePrice,
)
from price_checker.schemas.root import RootResponse


__all__ = [
    "APIResponse",
    "CacheStatus",
    "Category",
    "HealthResponse",
    "PriceCacheHealth",
    "PriceRatingResponse",
    "PriceSource",
    "Product",
    "ProductsResponse",
    "Rating",
    "RefreshResponse",
    "RootResponse",
    "StorePrice",
]
