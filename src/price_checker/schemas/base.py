"""Base schema configuration for all Pydantic models.

Usage:
    - APIResponse: For outgoing API response bodies
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _BaseSchema(BaseModel):
    """Private base schema with common configuration.

    Do not use directly - inherit from one of the public subclasses.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        validate_default=True,
        serialize_by_alias=True,
    )


class APIResponse(_BaseSchema):
    """Base class for outgoing API response schemas (extra fields forbidden)."""

    model_config = ConfigDict(
        extra="forbid",
    )
