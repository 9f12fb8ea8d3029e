"""One-shot price crawl that writes a static JSON price file.

Usage:
    crawl-prices --output data/prices.json
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

import orjson

from price_checker.core.config import get_settings
from price_checker.observability.logging import get_logger, setup_logging
from price_checker.schemas.enums import PriceSource
from price_checker.services.pricing.cache import CacheState
from price_checker.services.pricing.service import PriceService


if TYPE_CHECKING:
    from collections.abc import Sequence

    from price_checker.core.config.settings import PricingSettings
    from price_checker.schemas.product import Product


logger = get_logger(__name__)

DEFAULT_OUTPUT = Path("data/prices.json")


def _product_entry(product: Product) -> dict[str, Any]:
    return {
        "id": product.id,
        "name": product.name,
        "nameHebrew": product.name_hebrew,
        "category": product.category,
        "unit": product.unit,
        "image": product.image,
        "averagePrice": product.average_price,
        "lowPrice": product.low_price,
        "highPrice": product.high_price,
        "matchedItems": len(product.store_prices or []),
    }


def build_price_file(
    products: Sequence[Product],
    source: str,
    last_updated: datetime,
) -> dict[str, Any]:
    """Shape products into the static price file document."""
    return {
        "lastUpdated": last_updated.isoformat(),
        "source": source,
        "products": [_product_entry(p) for p in products],
    }


async def crawl_price_file(service: PriceService, retailer_name: str) -> dict[str, Any]:
    """Run one refresh and build the price file.

    Only products with live prices are written after a successful crawl; a
    crawl that yields nothing produces a file of fallback estimates instead.
    """
    if await service.refresh() and service.cache.snapshot is not None:
        snapshot = service.cache.snapshot
        products = [
            p
            for p in service.build_products_from_snapshot(snapshot)
            if p.source == PriceSource.CRAWLED
        ]
        logger.info(
            "Matched live prices",
            matched=len(products),
            catalog=len(service.get_fallback_products()),
        )
        return build_price_file(products, retailer_name, snapshot.crawled_at)

    logger.warning(
        "Crawl failed, writing fallback prices",
        error=service.cache.last_error,
    )
    return build_price_file(
        service.get_fallback_products(),
        PriceSource.FALLBACK.value,
        datetime.now(UTC),
    )


async def run(output: Path, settings: PricingSettings) -> dict[str, Any]:
    """Crawl once and write the price file to ``output``."""
    service = PriceService(CacheState(), settings)
    await service.initialize()
    try:
        document = await crawl_price_file(service, settings.retailer_name)
    finally:
        await service.shutdown()

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(orjson.dumps(document, option=orjson.OPT_INDENT_2))
    logger.info(
        "Wrote price file",
        path=str(output),
        source=document["source"],
        products=len(document["products"]),
    )
    return document


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Crawl retailer price files and write a static price file",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT,
        help=f"Output JSON path (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--max-files",
        type=int,
        default=None,
        help="Override the number of price files to process",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    args = parse_args(argv)
    settings = get_settings()
    setup_logging(
        log_level=settings.logging.level,
        log_format=settings.logging.format,
        is_development=settings.is_development,
    )

    pricing = settings.pricing
    if args.max_files is not None:
        pricing = pricing.model_copy(update={"max_files": max(1, args.max_files)})

    document = asyncio.run(run(args.output, pricing))
    return 0 if document["source"] != PriceSource.FALLBACK else 1


if __name__ == "__main__":
    sys.exit(main())
