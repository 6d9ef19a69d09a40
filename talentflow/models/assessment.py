"""Assessment ORM — persists a questionnaire attached to a job.

Invariants:
    - job_id references the owning Job
    - sections is an ordered list of section documents, each with ordered questions
    - conditional_logic of a question only references questions of the same assessment

Design Decisions:
    - JSON for sections: the builder edits the whole tree at once, never single questions
"""

from datetime import datetime

from sqlalchemy import String, Text, JSON
from sqlalchemy.orm import Mapped, mapped_column

from talentflow.db.base import Base, DocumentMixin, UTCDateTime


class Assessment(DocumentMixin, Base):
    __tablename__ = "assessments"
    __stamp_on_insert__ = ("created_at", "updated_at")
    __stamp_on_update__ = ("updated_at",)

    job_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    sections: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
