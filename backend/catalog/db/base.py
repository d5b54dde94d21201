"""SQLAlchemy Declarative Base: shared base class and timestamp columns for all ORM models.

Invariants:
    - All models inherit from Base
    - created_at is set on insert; updated_at is set on insert and refreshed on update
    - INTEGER_MIN..INTEGER_MAX is the range every Integer column can hold on all backends
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


INTEGER_MIN = -(2**31)
INTEGER_MAX = 2**31 - 1


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all catalog ORM models."""
    pass


class TimestampMixin:
    """created_at / updated_at maintained by the storage layer."""
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )
