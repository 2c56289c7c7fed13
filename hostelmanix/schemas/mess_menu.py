"""
Mess menu schemas.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator

from hostelmanix.models.enums import Weekday
from hostelmanix.schemas.common.base import BaseCreateSchema, BaseResponseSchema, BaseUpdateSchema

__all__ = ["MessMenuUpsert", "MessMenuUpdate", "MessMenuResponse"]


class MessMenuUpsert(BaseCreateSchema):
    """Create the menu for a day, or replace it if it already exists."""

    day: Weekday
    breakfast: str = Field(..., min_length=1, max_length=500)
    lunch: str = Field(..., min_length=1, max_length=500)
    dinner: str = Field(..., min_length=1, max_length=500)

    @field_validator("day", mode="before")
    @classmethod
    def normalize_day(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v


class MessMenuUpdate(BaseUpdateSchema):
    breakfast: Optional[str] = Field(default=None, min_length=1, max_length=500)
    lunch: Optional[str] = Field(default=None, min_length=1, max_length=500)
    dinner: Optional[str] = Field(default=None, min_length=1, max_length=500)


class MessMenuResponse(BaseResponseSchema):
    day: Weekday
    breakfast: str
    lunch: str
    dinner: str
