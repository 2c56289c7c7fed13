"""
Attendance record model.

At most one record per (student, calendar date); the unique constraint
backs up the upsert done by the attendance service.
"""

import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Date, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hostelmanix.models.base import TimestampModel, enum_column
from hostelmanix.models.enums import AttendanceStatus

if TYPE_CHECKING:
    from hostelmanix.models.student import Student
    from hostelmanix.models.user import User

__all__ = ["AttendanceRecord"]


class AttendanceRecord(TimestampModel):
    """Daily attendance mark for one student."""

    __tablename__ = "attendance_records"
    __table_args__ = (
        UniqueConstraint("student_id", "date", name="uq_attendance_student_date"),
    )

    student_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False, index=True)
    status: Mapped[AttendanceStatus] = mapped_column(
        enum_column(AttendanceStatus),
        nullable=False,
    )
    marked_by: Mapped[Optional[str]] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )

    student: Mapped["Student"] = relationship("Student")
    marker: Mapped[Optional["User"]] = relationship("User")
