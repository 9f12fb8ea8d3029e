"""API v1 router aggregating all endpoint routers.

Mounted under the configured ``api.v1_prefix`` (``/api/v1`` by default).
"""

from __future__ import annotations

from fastapi import APIRouter

from price_checker.api.v1.endpoints import health, prices, products


router = APIRouter()

router.include_router(health.router)
router.include_router(products.router)
router.include_router(prices.router)
