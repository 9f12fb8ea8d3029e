"""Application lifespan event handlers.

Startup configures logging, creates the application's single price cache and
the price service that maintains it. Shutdown cancels any running crawl and
closes the service's HTTP client.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from price_checker.core.config import Settings, get_settings
from price_checker.observability.logging import get_logger, setup_logging
from price_checker.services.pricing.cache import CacheState
from price_checker.services.pricing.service import PriceService


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI


logger = get_logger(__name__)


async def _init_price_service(app: FastAPI, settings: Settings) -> None:
    """Create the price cache and service and attach them to app state."""
    app.state.price_cache = CacheState()
    try:
        price_service = PriceService(app.state.price_cache, settings.pricing)
        await price_service.initialize()
    except Exception:
        logger.exception("Failed to initialize PriceService - pricing unavailable")
        app.state.price_service = None
        return

    app.state.price_service = price_service
    if settings.pricing.warm_on_startup:
        price_service.schedule_refresh()
        logger.info("Initial price crawl scheduled")


async def _startup(app: FastAPI, settings: Settings) -> None:
    setup_logging(
        log_level=settings.logging.level,
        log_format=settings.logging.format,
        is_development=settings.is_development,
    )
    logger.info(
        "Starting application",
        app_name=settings.app.name,
        environment=settings.APP_ENV,
        debug=settings.app.debug,
    )

    await _init_price_service(app, settings)

    logger.info("Application startup complete")


async def _shutdown(app: FastAPI) -> None:
    logger.info("Shutting down application")

    price_service = getattr(app.state, "price_service", None)
    if price_service is not None:
        await price_service.shutdown()

    logger.info("Application shutdown complete")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None - control returns to the application to handle requests.
    """
    settings = getattr(app.state, "settings", None) or get_settings()
    await _startup(app, settings)
    yield
    await _shutdown(app)
