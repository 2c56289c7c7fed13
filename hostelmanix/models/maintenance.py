"""Maintenance request model."""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hostelmanix.models.base import TimestampModel, enum_column, utcnow
from hostelmanix.models.enums import MaintenanceCategory, MaintenanceStatus

if TYPE_CHECKING:
    from hostelmanix.models.student import Student
    from hostelmanix.models.user import User

__all__ = ["MaintenanceRequest"]


class MaintenanceRequest(TimestampModel):
    """Repair ticket raised by a student for a room."""

    __tablename__ = "maintenance_requests"

    student_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    room: Mapped[int] = mapped_column(Integer, nullable=False, comment="Room number")
    problem_type: Mapped[MaintenanceCategory] = mapped_column(
        enum_column(MaintenanceCategory),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[MaintenanceStatus] = mapped_column(
        enum_column(MaintenanceStatus),
        nullable=False,
        default=MaintenanceStatus.OPEN,
        index=True,
    )
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    resolved_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    resolved_by: Mapped[Optional[str]] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    resolution_notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    student: Mapped["Student"] = relationship("Student")
    resolver: Mapped[Optional["User"]] = relationship("User")
