"""
Compact embedded representations.

Used wherever a response populates a referenced record instead of
returning its bare id.
"""

from __future__ import annotations

from typing import Optional

from hostelmanix.models.enums import RoomStatus, UserRole
from hostelmanix.schemas.common.base import BaseSchema

__all__ = ["UserBrief", "StudentBrief", "RoomBrief"]


class UserBrief(BaseSchema):
    """User reference without credentials."""

    id: str
    username: str
    role: UserRole


class StudentBrief(BaseSchema):
    """Student reference as embedded in tickets and rooms."""

    id: str
    student_id: str
    name: str
    room_id: Optional[str] = None


class RoomBrief(BaseSchema):
    """Room reference as embedded in student profiles."""

    id: str
    room_number: int
    block: str
    floor: int
    capacity: int
    occupants: int
    status: RoomStatus
