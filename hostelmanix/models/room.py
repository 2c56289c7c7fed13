"""
Room model.

``occupants`` and ``status`` are derived from ``student_ids``; they are
recomputed from the list whenever membership changes rather than being
incremented in place.
"""

from typing import List

from sqlalchemy import JSON, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from hostelmanix.models.base import TimestampModel, enum_column
from hostelmanix.models.enums import RoomStatus

__all__ = ["Room"]


class Room(TimestampModel):
    """Physical room with its occupancy back-reference list."""

    __tablename__ = "rooms"

    block: Mapped[str] = mapped_column(String(50), nullable=False, default="A")
    room_number: Mapped[int] = mapped_column(
        Integer,
        unique=True,
        nullable=False,
        index=True,
    )
    floor: Mapped[int] = mapped_column(Integer, nullable=False)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False, default=4)
    occupants: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    status: Mapped[RoomStatus] = mapped_column(
        enum_column(RoomStatus),
        nullable=False,
        default=RoomStatus.VACANT,
        index=True,
    )
    # Ordered student ids; always replaced, never mutated in place
    student_ids: Mapped[List[str]] = mapped_column(
        "students",
        JSON,
        nullable=False,
        default=list,
    )

    def __repr__(self) -> str:
        return (
            f"<Room(id={self.id}, room_number={self.room_number}, "
            f"occupants={self.occupants}, status={self.status})>"
        )
