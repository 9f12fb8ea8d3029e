"""Application lifecycle events."""

from price_checker.core.events.lifespan import lifespan


__all__ = ["lifespan"]
