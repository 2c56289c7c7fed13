"""
Room schemas.

``occupants`` and the student list are derived by the room assignment
service and are deliberately absent from the write schemas.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field, field_validator

from hostelmanix.models.enums import RoomStatus
from hostelmanix.schemas.common.base import (
    BaseCreateSchema,
    BaseResponseSchema,
    BaseSchema,
    BaseUpdateSchema,
)
from hostelmanix.schemas.summary import StudentBrief

__all__ = [
    "RoomCreate",
    "RoomUpdate",
    "RoomResponse",
    "RoomDrift",
    "ConsistencyReport",
    "ReconcileReport",
]


class RoomCreate(BaseCreateSchema):
    room_number: int = Field(..., ge=0)
    block: str = Field(default="A", min_length=1, max_length=50)
    floor: int = Field(..., ge=0)
    capacity: int = Field(default=4, ge=1)
    status: RoomStatus = Field(default=RoomStatus.VACANT)

    @field_validator("status")
    @classmethod
    def new_room_has_no_occupants(cls, v):
        if v == RoomStatus.OCCUPIED:
            raise ValueError("A new room has no occupants; use vacant or maintenance")
        return v


class RoomUpdate(BaseUpdateSchema):
    room_number: Optional[int] = Field(default=None, ge=0)
    block: Optional[str] = Field(default=None, min_length=1, max_length=50)
    floor: Optional[int] = Field(default=None, ge=0)
    capacity: Optional[int] = Field(default=None, ge=1)
    status: Optional[RoomStatus] = None


class RoomResponse(BaseResponseSchema):
    """Room with its back-reference list and the populated students."""

    room_number: int
    block: str
    floor: int
    capacity: int
    occupants: int
    status: RoomStatus
    student_ids: List[str] = Field(default_factory=list)
    students: List[StudentBrief] = Field(default_factory=list)


class RoomDrift(BaseSchema):
    """Disagreement between a room's stored membership and student pointers."""

    room_id: str
    room_number: int
    stored_student_ids: List[str]
    expected_student_ids: List[str]
    stored_occupants: int
    status: RoomStatus
    expected_status: RoomStatus


class ConsistencyReport(BaseSchema):
    consistent: bool
    rooms_checked: int
    drifted_rooms: List[RoomDrift] = Field(default_factory=list)
    dangling_students: List[StudentBrief] = Field(
        default_factory=list,
        description="Students whose room_id points at a missing room",
    )


class ReconcileReport(BaseSchema):
    rooms_checked: int
    rooms_repaired: int
    repaired_room_ids: List[str] = Field(default_factory=list)
