"""Job ORM — persists an open or archived position.

Invariants:
    - slug is globally unique (unique index); derived by the record service
    - order defines display sequence; swapped in place by reorder
    - status in {active, archived}, type in {full-time, part-time, contract, internship}

Design Decisions:
    - JSON columns for requirements/benefits/tags: ordered string lists stored as-is
    - No FK from children: cascades run in the record service inside one transaction
"""

from datetime import datetime

from sqlalchemy import String, Text, Integer, JSON
from sqlalchemy.orm import Mapped, mapped_column

from talentflow.db.base import Base, DocumentMixin, UTCDateTime


class Job(DocumentMixin, Base):
    """Job posting — owns candidates and assessments by job_id."""
    __tablename__ = "jobs"
    __stamp_on_insert__ = ("created_at", "updated_at")
    __stamp_on_update__ = ("updated_at",)

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    slug: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True,
    )
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    requirements: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    benefits: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    location: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    salary: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    type: Mapped[str] = mapped_column(
        String(20), nullable=False, default="full-time",
    )
    department: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="active", index=True,
    )
    order: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
