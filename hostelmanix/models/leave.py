"""Leave application model."""

from datetime import date, datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hostelmanix.models.base import TimestampModel, enum_column, utcnow
from hostelmanix.models.enums import LeaveStatus

if TYPE_CHECKING:
    from hostelmanix.models.student import Student
    from hostelmanix.models.user import User

__all__ = ["Leave"]


class Leave(TimestampModel):
    """Out-pass request raised by a student and reviewed by an admin."""

    __tablename__ = "leaves"

    student_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    hostel_no: Mapped[str] = mapped_column(String(50), nullable=False)
    leave_type: Mapped[str] = mapped_column(String(50), nullable=False)
    visit_place: Mapped[str] = mapped_column(String(255), nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    start_time: Mapped[str] = mapped_column(String(10), nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_time: Mapped[str] = mapped_column(String(10), nullable=False)
    reason: Mapped[str] = mapped_column(Text, nullable=False)
    mobile: Mapped[str] = mapped_column(String(20), nullable=False)
    days: Mapped[int] = mapped_column(Integer, nullable=False)

    status: Mapped[LeaveStatus] = mapped_column(
        enum_column(LeaveStatus),
        nullable=False,
        default=LeaveStatus.PENDING,
        index=True,
    )
    applied_on: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    reviewed_by: Mapped[Optional[str]] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    reviewed_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    review_notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    student: Mapped["Student"] = relationship("Student")
    reviewer: Mapped[Optional["User"]] = relationship("User")
