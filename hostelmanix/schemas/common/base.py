"""
Base schema classes with common fields and configurations.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "BaseSchema",
    "TimestampMixin",
    "UUIDMixin",
    "BaseCreateSchema",
    "BaseUpdateSchema",
    "BaseResponseSchema",
]


class BaseSchema(BaseModel):
    """
    Base schema with common Pydantic configuration.

    All application-facing schemas inherit from this so ORM objects can be
    validated directly and string input is stripped consistently.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        use_enum_values=False,
        str_strip_whitespace=True,
        validate_assignment=True,
    )


class TimestampMixin(BaseModel):
    """Mixin for timestamp fields."""

    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")


class UUIDMixin(BaseModel):
    """Mixin for UUID primary key."""

    id: str = Field(..., description="Unique identifier")


class BaseCreateSchema(BaseSchema):
    """
    Base schema for create operations.

    Unknown fields are rejected so request bodies stay allow-listed.
    """

    model_config = ConfigDict(extra="forbid")


class BaseUpdateSchema(BaseSchema):
    """
    Base schema for partial update operations.

    Subclasses declare their fields as Optional. Only the fields the
    client actually sent are applied, see ``changes()``.
    """

    model_config = ConfigDict(extra="forbid")

    def changes(self) -> Dict[str, Any]:
        """Fields explicitly provided by the client, keyed by name."""
        return self.model_dump(exclude_unset=True)


class BaseResponseSchema(BaseSchema, UUIDMixin, TimestampMixin):
    """Base schema for API responses of persisted entities."""
    pass
