"""JobApplication ORM — one candidate's application to one job.

Invariants:
    - (candidate_id, job_id) is unique
    - status shares the candidate stage enum but is tracked independently
    - job_title is a snapshot taken at application time

Design Decisions:
    - job_title denormalized: the application stays readable after its job is deleted
"""

from datetime import datetime

from sqlalchemy import String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from talentflow.db.base import Base, DocumentMixin, UTCDateTime


class JobApplication(DocumentMixin, Base):
    __tablename__ = "job_applications"
    __table_args__ = (
        UniqueConstraint(
            "candidate_id", "job_id",
            name="uq_job_applications_candidate_job",
        ),
    )
    __stamp_on_insert__ = ("applied_at", "updated_at")
    __stamp_on_update__ = ("updated_at",)

    candidate_id: Mapped[str] = mapped_column(
        String(36), nullable=False, index=True,
    )
    job_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    job_title: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="applied", index=True,
    )
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")
    applied_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
