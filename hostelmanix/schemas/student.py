"""
Student profile schemas.

Create and update bodies are allow-listed: unknown fields are rejected,
and the derived room membership can only change through ``room_id``.
"""

from __future__ import annotations

from typing import Optional

from pydantic import EmailStr, Field, field_validator

from hostelmanix.models.enums import AcademicYear
from hostelmanix.schemas.common.base import (
    BaseCreateSchema,
    BaseResponseSchema,
    BaseSchema,
    BaseUpdateSchema,
)
from hostelmanix.schemas.summary import RoomBrief, UserBrief

__all__ = [
    "StudentProfileFields",
    "StudentCreate",
    "StudentUpdate",
    "StudentSelfUpdate",
    "StudentResponse",
]


def blank_to_none(value):
    """Admin forms send an empty string for an unassigned room."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


class StudentProfileFields(BaseSchema):
    """Optional personal details shared by every student body."""

    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, max_length=20)
    photo_url: Optional[str] = Field(default=None, max_length=1024)
    guardian_name: Optional[str] = Field(default=None, max_length=255)
    address: Optional[str] = Field(default=None, max_length=500)
    year: Optional[AcademicYear] = None
    branch: Optional[str] = Field(default=None, max_length=100)


class StudentCreate(BaseCreateSchema, StudentProfileFields):
    """
    Admin request to create a student profile.

    ``user_id`` must reference an existing login that has no profile yet.
    """

    student_id: str = Field(..., min_length=1, max_length=50)
    name: str = Field(..., min_length=1, max_length=255)
    user_id: str = Field(..., description="Internal id of the linked login")
    room_id: Optional[str] = Field(default=None, description="Room to assign on creation")

    @field_validator("room_id", mode="before")
    @classmethod
    def blank_room_is_none(cls, v):
        return blank_to_none(v)


class StudentUpdate(BaseUpdateSchema, StudentProfileFields):
    """
    Admin partial update.

    Omitting ``room_id`` keeps the current room; sending ``null`` or an
    empty string unassigns the student.
    """

    student_id: Optional[str] = Field(default=None, min_length=1, max_length=50)
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    room_id: Optional[str] = None

    @field_validator("room_id", mode="before")
    @classmethod
    def blank_room_is_none(cls, v):
        return blank_to_none(v)


class StudentSelfUpdate(BaseUpdateSchema, StudentProfileFields):
    """Fields a student may change on their own profile."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)


class StudentResponse(BaseResponseSchema):
    """Student profile with its room and login populated."""

    student_id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    room_id: Optional[str] = None
    user_id: str
    photo_url: Optional[str] = None
    guardian_name: Optional[str] = None
    address: Optional[str] = None
    year: Optional[AcademicYear] = None
    branch: Optional[str] = None

    room: Optional[RoomBrief] = None
    user: Optional[UserBrief] = None
