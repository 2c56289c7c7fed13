"""
Complaint schemas.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from hostelmanix.models.enums import ComplaintCategory, ComplaintStatus
from hostelmanix.schemas.common.base import BaseCreateSchema, BaseResponseSchema, BaseUpdateSchema
from hostelmanix.schemas.summary import StudentBrief, UserBrief

__all__ = ["ComplaintCreate", "ComplaintUpdate", "ComplaintResponse"]


class ComplaintCreate(BaseCreateSchema):
    title: str = Field(..., min_length=1, max_length=255)
    category: ComplaintCategory
    description: str = Field(..., min_length=1)


class ComplaintUpdate(BaseUpdateSchema):
    status: Optional[ComplaintStatus] = None
    resolution_message: Optional[str] = None


class ComplaintResponse(BaseResponseSchema):
    student_id: str
    title: str
    category: ComplaintCategory
    description: str
    status: ComplaintStatus
    submitted_at: datetime
    resolved_at: Optional[datetime] = None
    resolution_message: Optional[str] = None
    resolved_by: Optional[str] = None

    student: Optional[StudentBrief] = None
    resolver: Optional[UserBrief] = None
