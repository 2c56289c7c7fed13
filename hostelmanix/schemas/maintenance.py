"""
Maintenance request schemas.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from hostelmanix.models.enums import MaintenanceCategory, MaintenanceStatus
from hostelmanix.schemas.common.base import BaseCreateSchema, BaseResponseSchema, BaseUpdateSchema
from hostelmanix.schemas.summary import StudentBrief, UserBrief

__all__ = ["MaintenanceCreate", "MaintenanceUpdate", "MaintenanceResponse"]


class MaintenanceCreate(BaseCreateSchema):
    room: int = Field(..., ge=0, description="Room number")
    problem_type: MaintenanceCategory
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)


class MaintenanceUpdate(BaseUpdateSchema):
    status: Optional[MaintenanceStatus] = None
    resolution_notes: Optional[str] = None


class MaintenanceResponse(BaseResponseSchema):
    student_id: str
    room: int
    problem_type: MaintenanceCategory
    title: str
    description: str
    status: MaintenanceStatus
    date: datetime
    resolved_at: Optional[datetime] = None
    resolved_by: Optional[str] = None
    resolution_notes: Optional[str] = None

    student: Optional[StudentBrief] = None
    resolver: Optional[UserBrief] = None
