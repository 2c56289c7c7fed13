"""
Attendance schemas.
"""

from __future__ import annotations

from datetime import date as Date
from typing import List, Optional

from pydantic import Field

from hostelmanix.models.enums import AttendanceStatus
from hostelmanix.schemas.common.base import (
    BaseCreateSchema,
    BaseResponseSchema,
    BaseSchema,
    BaseUpdateSchema,
)
from hostelmanix.schemas.summary import StudentBrief, UserBrief

__all__ = [
    "AttendanceCreate",
    "AttendanceBulkCreate",
    "AttendanceUpdate",
    "AttendanceResponse",
    "AttendanceStats",
]


class AttendanceCreate(BaseCreateSchema):
    """Mark one student for one day; repeats overwrite the day's status."""

    student_id: str = Field(..., min_length=1, description="External student id")
    date: Date
    status: AttendanceStatus


class AttendanceBulkCreate(BaseCreateSchema):
    """Mark several students with the same status, e.g. room-wise."""

    student_ids: List[str] = Field(..., min_length=1, description="External student ids")
    date: Date
    status: AttendanceStatus


class AttendanceUpdate(BaseUpdateSchema):
    date: Optional[Date] = None
    status: Optional[AttendanceStatus] = None


class AttendanceResponse(BaseResponseSchema):
    student_id: str
    date: Date
    status: AttendanceStatus
    marked_by: Optional[str] = None

    student: Optional[StudentBrief] = None
    marker: Optional[UserBrief] = None


class AttendanceStats(BaseSchema):
    total: int
    present: int
    absent: int
    late: int
    rate: float = Field(..., description="Present percentage, one decimal")
