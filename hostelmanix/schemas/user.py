"""
User profile schemas.
"""

from __future__ import annotations

from typing import Optional

from pydantic import EmailStr, Field

from hostelmanix.models.enums import UserRole
from hostelmanix.schemas.common.base import BaseResponseSchema, BaseSchema, BaseUpdateSchema

__all__ = ["UserResponse", "UserSelfUpdate", "ChangePasswordRequest"]


class UserResponse(BaseResponseSchema):
    """User profile; never carries the password hash."""

    username: str
    role: UserRole
    student_id: Optional[str] = None
    display_name: Optional[str] = None
    email: Optional[str] = None
    photo_url: Optional[str] = None


class UserSelfUpdate(BaseUpdateSchema):
    """Fields a user may change on their own profile."""

    display_name: Optional[str] = Field(default=None, max_length=255)
    email: Optional[EmailStr] = None
    photo_url: Optional[str] = Field(default=None, max_length=1024)


class ChangePasswordRequest(BaseSchema):
    """
    Password change.

    Students must supply ``current_password``; admins may omit it.
    """

    current_password: Optional[str] = None
    new_password: str = Field(..., min_length=1, max_length=128)
