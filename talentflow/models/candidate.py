"""Candidate ORM — persists a person moving through the hiring pipeline.

Invariants:
    - stage in {applied, screen, tech, offer, hired, rejected}; no transition graph
    - job_id references the primary Job (nullable for pool candidates)
    - Every stage change is mirrored by exactly one stage_change timeline event

Design Decisions:
    - job_id indexed, not FK-constrained: job deletion cascades in the record service
"""

from datetime import datetime

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from talentflow.db.base import Base, DocumentMixin, UTCDateTime


class Candidate(DocumentMixin, Base):
    """Candidate entity — owns timeline events, notes, responses, applications."""
    __tablename__ = "candidates"
    __stamp_on_insert__ = ("created_at", "updated_at")
    __stamp_on_update__ = ("updated_at",)

    name: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    email: Mapped[str] = mapped_column(
        String(320), nullable=False, default="", index=True,
    )
    phone: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    stage: Mapped[str] = mapped_column(
        String(20), nullable=False, default="applied", index=True,
    )
    job_id: Mapped[str | None] = mapped_column(
        String(36), nullable=True, index=True,
    )
    cover_letter: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
