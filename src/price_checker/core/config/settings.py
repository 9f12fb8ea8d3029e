"""Application configuration using Pydantic Settings with YAML support.

Configuration is assembled from:
- YAML files organized by domain (``config/base``)
- Environment-specific overrides (``config/environments/{APP_ENV}``)
- Environment variables, using ``__`` as the nested delimiter
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Annotated

from pydantic import BaseModel, BeforeValidator, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .yaml_source import MultiYamlConfigSettingsSource


if TYPE_CHECKING:
    from pydantic_settings import PydanticBaseSettingsSource


def parse_list(v: str | list[str]) -> list[str]:
    """Parse comma-separated string or list into list of strings."""
    if isinstance(v, str):
        return [x.strip() for x in v.split(",") if x.strip()]
    return v


# =============================================================================
# Nested Configuration Models (from YAML)
# =============================================================================


class AppSettings(BaseModel):
    """Application identity settings."""

    name: str = "Grocery Price Checker"
    version: str = "0.1.0"
    debug: bool = False


class ServerSettings(BaseModel):
    """Server configuration settings."""

    host: str = "127.0.0.1"
    port: int = 8000


class ApiSettings(BaseModel):
    """API configuration settings."""

    v1_prefix: str = "/api/v1"
    cors_origins: Annotated[list[str], BeforeValidator(parse_list)] = []


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    level: str = "INFO"
    format: str = "json"


class PricingSettings(BaseModel):
    """Price aggregation engine configuration.

    Timeouts and TTLs are in seconds.
    """

    retailer_name: str = "Shufersal"
    listing_url: str = "https://prices.shufersal.co.il/"
    full_catalog_marker: str = "PriceFull"
    max_files: int = Field(default=5, ge=1)
    max_concurrent_downloads: int = Field(default=3, ge=1)
    fetch_timeout: float = 60.0
    refresh_timeout: float = 180.0
    cache_ttl: int = 3600
    failure_backoff: int = 60
    max_fuzzy_matches: int = Field(default=5, ge=1)
    warm_on_startup: bool = True


# =============================================================================
# Main Settings Class
# =============================================================================


class Settings(BaseSettings):
    """Application settings with YAML + environment variable support.

    Priority (highest to lowest):
    1. Values passed to ``Settings()``
    2. Environment variables
    3. ``.env`` file
    4. Environment-specific YAML files
    5. Base YAML files
    6. Defaults in code

    For example ``PRICING__CACHE_TTL=60`` overrides ``pricing.cache_ttl``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=False,
        env_nested_delimiter="__",
    )

    APP_ENV: str = "development"

    app: AppSettings = AppSettings()
    server: ServerSettings = ServerSettings()
    api: ApiSettings = ApiSettings()
    logging: LoggingSettings = LoggingSettings()
    pricing: PricingSettings = PricingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the YAML source below env and dotenv sources."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            MultiYamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.APP_ENV == "development"

    @property
    def is_non_production(self) -> bool:
        """Check if API docs and verbose errors should be enabled."""
        return self.APP_ENV in ("local", "test", "development")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
