"""
Base model configuration for SQLAlchemy ORM.

Provides the declarative base and abstract base classes with common
fields and helpers for all database models.
"""

import enum
from datetime import datetime, timezone
from typing import Type
from uuid import uuid4

from sqlalchemy import DateTime, Enum as SAEnum, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Declarative base shared by every model."""


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def enum_column(enum_cls: Type[enum.Enum]) -> SAEnum:
    """Portable enum column type that stores the member values."""
    return SAEnum(
        enum_cls,
        values_callable=lambda members: [m.value for m in members],
        native_enum=False,
        validate_strings=True,
        length=32,
    )


class BaseModel(Base):
    """
    Abstract base model with a UUID primary key.
    """

    __abstract__ = True

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid4()),
        comment="Primary key (UUID)"
    )

    def __repr__(self) -> str:
        """String representation of model instance."""
        return f"<{self.__class__.__name__}(id={getattr(self, 'id', None)})>"


class TimestampModel(BaseModel):
    """
    Base model with automatic timestamp tracking.
    """

    __abstract__ = True

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        comment="Record creation timestamp"
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
        comment="Record last update timestamp"
    )
