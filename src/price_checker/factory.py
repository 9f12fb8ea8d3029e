"""Application factory for creating FastAPI instances.

``create_app`` configures the application, registers exception handlers,
adds middleware and mounts the routers.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from price_checker.api.v1.endpoints import root
from price_checker.api.v1.router import router as v1_router
from price_checker.core.config import Settings, get_settings
from price_checker.core.events import lifespan
from price_checker.core.exceptions import setup_exception_handlers
from price_checker.core.middleware import (
    PROCESS_TIME_HEADER,
    REQUEST_ID_HEADER,
    RequestContextMiddleware,
)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure a FastAPI application instance.

    Args:
        settings: Optional settings override. If not provided, uses get_settings().

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=settings.app.name,
        version=settings.app.version,
        description=(
            "Rates grocery shelf prices against market ranges derived from "
            "retailer price-transparency files"
        ),
        lifespan=lifespan,
        docs_url="/docs" if settings.is_non_production else None,
        redoc_url="/redoc" if settings.is_non_production else None,
        openapi_url="/openapi.json" if settings.is_non_production else None,
        debug=settings.app.debug,
    )

    app.state.settings = settings

    setup_exception_handlers(app)
    _setup_middleware(app, settings)
    _setup_routers(app, settings)

    return app


def _setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Configure middleware stack.

    Last added runs first on request: request context, then GZip, then CORS.
    """
    if settings.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=[REQUEST_ID_HEADER, PROCESS_TIME_HEADER],
        )

    # The product list is large and compresses well.
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    app.add_middleware(
        RequestContextMiddleware,
        exclude_paths={f"{settings.api.v1_prefix}/health", "/favicon.ico"},
    )


def _setup_routers(app: FastAPI, settings: Settings) -> None:
    app.include_router(v1_router, prefix=settings.api.v1_prefix)
    app.include_router(root.router)
