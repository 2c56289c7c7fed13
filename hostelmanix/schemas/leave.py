"""
Leave application schemas.
"""

from __future__ import annotations

from datetime import date as Date
from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from hostelmanix.models.enums import LeaveStatus
from hostelmanix.schemas.common.base import BaseCreateSchema, BaseResponseSchema, BaseUpdateSchema
from hostelmanix.schemas.summary import StudentBrief, UserBrief

__all__ = ["LeaveCreate", "LeaveReview", "LeaveResponse"]


class LeaveCreate(BaseCreateSchema):
    """
    Leave application.

    ``hostel_no`` is also accepted as the applicant's external student id
    when the caller's login has no linked profile.
    """

    name: str = Field(..., min_length=1, max_length=255)
    hostel_no: str = Field(..., min_length=1, max_length=50)
    leave_type: str = Field(..., min_length=1, max_length=50)
    visit_place: str = Field(..., min_length=1, max_length=255)
    start_date: Date
    start_time: str = Field(..., min_length=1, max_length=10)
    end_date: Date
    end_time: str = Field(..., min_length=1, max_length=10)
    reason: str = Field(..., min_length=1)
    mobile: str = Field(..., min_length=1, max_length=20)
    days: int = Field(..., ge=0)

    @model_validator(mode="after")
    def validate_date_range(self) -> "LeaveCreate":
        if self.end_date < self.start_date:
            raise ValueError("end_date must be on or after start_date")
        return self


class LeaveReview(BaseUpdateSchema):
    """Admin review of a leave application."""

    status: Optional[LeaveStatus] = None
    review_notes: Optional[str] = None


class LeaveResponse(BaseResponseSchema):
    student_id: str
    name: str
    hostel_no: str
    leave_type: str
    visit_place: str
    start_date: Date
    start_time: str
    end_date: Date
    end_time: str
    reason: str
    mobile: str
    days: int
    status: LeaveStatus
    applied_on: datetime
    reviewed_by: Optional[str] = None
    reviewed_at: Optional[datetime] = None
    review_notes: Optional[str] = None

    student: Optional[StudentBrief] = None
    reviewer: Optional[UserBrief] = None
