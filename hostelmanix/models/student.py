"""
Student profile model.

``room_id`` is the authoritative pointer from a student to the room they
live in. It is a weak reference (no foreign key): rooms keep their own
back-reference list which the room assignment service keeps in step.
"""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hostelmanix.models.base import TimestampModel, enum_column
from hostelmanix.models.enums import AcademicYear

if TYPE_CHECKING:
    from hostelmanix.models.room import Room
    from hostelmanix.models.user import User

__all__ = ["Student"]


class Student(TimestampModel):
    """Student profile, one per student login."""

    __tablename__ = "students"

    student_id: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        nullable=False,
        index=True,
        comment="External student identifier",
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[Optional[str]] = mapped_column(
        String(255),
        unique=True,
        nullable=True,
    )
    phone: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)

    room_id: Mapped[Optional[str]] = mapped_column(
        String(36),
        nullable=True,
        index=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id"),
        unique=True,
        nullable=False,
    )

    photo_url: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    guardian_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    address: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    year: Mapped[Optional[AcademicYear]] = mapped_column(
        enum_column(AcademicYear),
        nullable=True,
    )
    branch: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    user: Mapped["User"] = relationship("User", lazy="joined")
    # Read-only view of the pointer; None when it dangles
    room: Mapped[Optional["Room"]] = relationship(
        "Room",
        primaryjoin="foreign(Student.room_id) == Room.id",
        viewonly=True,
    )

    def __repr__(self) -> str:
        return f"<Student(id={self.id}, student_id={self.student_id}, room_id={self.room_id})>"
