"""Fee model."""

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Date, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hostelmanix.models.base import TimestampModel, enum_column
from hostelmanix.models.enums import FeeStatus

if TYPE_CHECKING:
    from hostelmanix.models.student import Student

__all__ = ["Fee"]


class Fee(TimestampModel):
    """Fee charged to a student."""

    __tablename__ = "fees"

    student_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    due_date: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[FeeStatus] = mapped_column(
        enum_column(FeeStatus),
        nullable=False,
        default=FeeStatus.PENDING,
        index=True,
    )
    paid_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    payment_method: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    transaction_id: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    student: Mapped["Student"] = relationship("Student")
