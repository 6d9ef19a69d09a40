"""Note ORM — free-text recruiter note about a candidate (may contain @mentions)."""

from datetime import datetime

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from talentflow.db.base import Base, DocumentMixin, UTCDateTime


class Note(DocumentMixin, Base):
    __tablename__ = "notes"
    __stamp_on_insert__ = ("created_at", "updated_at")
    __stamp_on_update__ = ("updated_at",)

    candidate_id: Mapped[str] = mapped_column(
        String(36), nullable=False, index=True,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
