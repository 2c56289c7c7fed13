"""
Authentication schemas: login, registration and issued tokens.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator

from hostelmanix.models.enums import UserRole
from hostelmanix.schemas.common.base import BaseCreateSchema, BaseSchema
from hostelmanix.schemas.student import StudentResponse

__all__ = [
    "LoginRequest",
    "RegisterRequest",
    "RegisterResponse",
    "LoginUser",
    "TokenResponse",
]


class LoginRequest(BaseSchema):
    """
    Login request.

    ``id`` matches either a username or a linked student id. Fields are
    optional here so that missing values are reported as a business
    validation error rather than a schema error.
    """

    id: Optional[str] = Field(default=None, description="Username or student id")
    password: Optional[str] = Field(default=None, description="Plain text password")
    role: Optional[str] = Field(default=None, description="admin or student")


class RegisterRequest(BaseCreateSchema):
    """Create a login credential."""

    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1, max_length=128)
    role: UserRole = Field(default=UserRole.STUDENT)
    student_id: Optional[str] = Field(default=None, max_length=50)

    @field_validator("role", mode="before")
    @classmethod
    def normalize_role(cls, v):
        if isinstance(v, str):
            return v.lower()
        return v

    @field_validator("password", mode="after")
    @classmethod
    def validate_password_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Password cannot be empty or whitespace")
        return v


class RegisterResponse(BaseSchema):
    message: str
    user_id: str


class LoginUser(BaseSchema):
    """Identity returned alongside a freshly issued token."""

    id: str
    username: str
    role: UserRole
    student_id: Optional[str] = None
    display_name: Optional[str] = None
    student_info: Optional[StudentResponse] = None


class TokenResponse(BaseSchema):
    token: str
    token_type: str = "bearer"
    user: LoginUser
