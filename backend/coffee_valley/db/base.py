"""SQLAlchemy Declarative Base - shared base class and record envelope for all ORM models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata
    - Every table carries created_at / updated_at / deleted_at
    - deleted_at IS NULL means the row is live; soft delete only sets the timestamp

Design Decisions:
    - Envelope as a mixin, not a joined base table: each entity stays one flat row
    - Timestamps assigned in Python (default/onupdate) so SQLite and PostgreSQL agree
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_record_id() -> str:
    """Random unique identifier for string-keyed tables."""
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    """Base class for all Coffee Valley ORM models."""
    pass


class RecordEnvelope:
    """Timestamp and soft-delete columns shared by every entity."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )
    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True,
    )

    def soft_delete(self) -> None:
        self.deleted_at = _utcnow()


class StringKeyed:
    """Primary key of varchar(255) filled with a fresh UUID string on insert."""

    id: Mapped[str] = mapped_column(
        String(255), primary_key=True, default=new_record_id,
    )
