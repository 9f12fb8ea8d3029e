"""Root endpoint response schema."""

from __future__ import annotations

from pydantic import Field

from price_checker.schemas.base import APIResponse


class RootResponse(APIResponse):
    """Basic service information for discovery."""

    service: str = Field(..., examples=["Grocery Price Checker"])
    version: str = Field(..., examples=["0.1.0"])
    status: str = Field(..., examples=["operational"])
    docs: str = Field(..., description="API documentation URL or 'disabled'")
    health: str = Field(..., description="Health check endpoint URL")
