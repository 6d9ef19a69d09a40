"""SQLAlchemy Declarative Base — shared base class and column types for all tables.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata
    - Every entity table (DocumentMixin) carries an `extra` JSON column for fields the schema doesn't name
    - Each model declares which timestamp columns the write hooks stamp

Design Decisions:
    - Separate file for Base: avoids circular imports between models
    - UTCDateTime re-attaches UTC on load: SQLite stores naive timestamps
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, JSON, String, TypeDecorator
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class UTCDateTime(TypeDecorator):
    """Timezone-aware datetime that round-trips as UTC on every backend."""
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


class Base(DeclarativeBase):
    """Base class for all TalentFlow ORM models."""
    pass


class DocumentMixin:
    """Identity, pass-through fields, and timestamp contract for entity tables."""

    # Columns stamped with the current time by the write hooks (db/timestamps.py)
    __stamp_on_insert__ = ()
    __stamp_on_update__ = ()
    # Document key -> mapped attribute, for keys that clash with ORM names
    __field_aliases__ = {}

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    extra: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
