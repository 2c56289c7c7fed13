"""Complaint model."""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hostelmanix.models.base import TimestampModel, enum_column, utcnow
from hostelmanix.models.enums import ComplaintCategory, ComplaintStatus

if TYPE_CHECKING:
    from hostelmanix.models.student import Student
    from hostelmanix.models.user import User

__all__ = ["Complaint"]


class Complaint(TimestampModel):
    """Complaint raised by a student."""

    __tablename__ = "complaints"

    student_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[ComplaintCategory] = mapped_column(
        enum_column(ComplaintCategory),
        nullable=False,
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[ComplaintStatus] = mapped_column(
        enum_column(ComplaintStatus),
        nullable=False,
        default=ComplaintStatus.PENDING,
        index=True,
    )
    submitted_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    resolved_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    resolution_message: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    resolved_by: Mapped[Optional[str]] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )

    student: Mapped["Student"] = relationship("Student")
    resolver: Mapped[Optional["User"]] = relationship("User")
