"""Mess menu model, one row per weekday."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from hostelmanix.models.base import TimestampModel, enum_column
from hostelmanix.models.enums import Weekday

__all__ = ["MessMenu"]


class MessMenu(TimestampModel):
    """Meals served on one day of the week."""

    __tablename__ = "mess_menus"

    day: Mapped[Weekday] = mapped_column(
        enum_column(Weekday),
        unique=True,
        nullable=False,
    )
    breakfast: Mapped[str] = mapped_column(String(500), nullable=False)
    lunch: Mapped[str] = mapped_column(String(500), nullable=False)
    dinner: Mapped[str] = mapped_column(String(500), nullable=False)
