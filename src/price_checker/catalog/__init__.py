"""Curated product catalog and static fallback prices."""

from price_checker.catalog.fallback import (
    DEFAULT_FALLBACK_PRICE,
    FALLBACK_PRICES,
    get_fallback_price,
)
from price_checker.catalog.models import CatalogProduct
from price_checker.catalog.products import (
    PRODUCT_CATALOG,
    get_catalog_product,
)


__all__ = [
    "DEFAULT_FALLBACK_PRICE",
    "FALLBACK_PRICES",
    "PRODUCT_CATALOG",
    "CatalogProduct",
    "get_catalog_product",
    "get_fallback_price",
]
