"""Product endpoints.

Provides:
- GET /products for the whole catalog with current price ranges
- GET /products/{productId} for a single product
- GET /products/{productId}/rating for rating an observed shelf price
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query

from price_checker.api.dependencies import get_price_service
from price_checker.core.exceptions import NotFoundException
from price_checker.schemas.product import (
    PriceRatingResponse,
    Product,
    ProductsResponse,
)
from price_checker.services.pricing.service import PriceService  # noqa: TC001


router = APIRouter(tags=["Products"])

ProductId = Annotated[str, Path(description="Catalog product identifier")]


@router.get(
    "/products",
    response_model=ProductsResponse,
    summary="List products with price ranges",
    description=(
        "Returns every catalog product with its average, low and high price. "
        "Prices come from the latest crawl of the retailer's transparency files "
        "when available, otherwise from static estimates."
    ),
)
async def list_products(
    service: Annotated[PriceService, Depends(get_price_service)],
    fallback: Annotated[
        bool,
        Query(description="Skip live data and return static estimates"),
    ] = False,
) -> ProductsResponse:
    """List all products with their current price ranges."""
    result = await service.get_products(use_fallback=fallback)
    return ProductsResponse(
        products=result.products,
        source=result.source,
        last_updated=result.last_updated,
        message=result.message,
    )


@router.get(
    "/products/{product_id}",
    response_model=Product,
    summary="Get one product",
    responses={404: {"description": "Unknown product"}},
)
async def get_product(
    product_id: ProductId,
    service: Annotated[PriceService, Depends(get_price_service)],
) -> Product:
    """Get a single product with its current price range."""
    product = await service.get_product(product_id)
    if product is None:
        raise NotFoundException("Product", product_id)
    return product


@router.get(
    "/products/{product_id}/rating",
    response_model=PriceRatingResponse,
    summary="Rate an observed price",
    description=(
        "Rates a shelf price as great, good, average, high or expensive by its "
        "position within the product's low-high range."
    ),
    responses={404: {"description": "Unknown product"}},
)
async def rate_product_price(
    product_id: ProductId,
    price: Annotated[Decimal, Query(gt=0, description="Observed price in ILS")],
    service: Annotated[PriceService, Depends(get_price_service)],
) -> PriceRatingResponse:
    """Rate an observed price for a product."""
    rated = await service.rate_product(product_id, price)
    if rated is None:
        raise NotFoundException("Product", product_id)

    product, rating = rated
    return PriceRatingResponse(
        product_id=product.id,
        price=float(price),
        rating=rating,
        low_price=product.low_price,
        high_price=product.high_price,
        source=product.source,
    )
