"""Application entry point.

Usage:
    # Development with auto-reload
    uvicorn price_checker.main:app --reload

    # Or via the installed script
    price-checker
"""

from price_checker.factory import create_app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    from price_checker.core.config import get_settings

    settings = get_settings()

    uvicorn.run(
        "price_checker.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.is_development,
        log_level=settings.logging.level.lower(),
    )


if __name__ == "__main__":
    run()
