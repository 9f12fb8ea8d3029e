"""Configuration module with YAML and environment variable support."""

from .settings import PricingSettings, Settings, get_settings


__all__ = [
    "PricingSettings",
    "Settings",
    "get_settings",
]
