"""TimelineEvent ORM — append-only audit record of something that happened to a candidate.

Invariants:
    - Never updated; deleted only through the candidate cascade
    - type in {stage_change, note_added, assessment_completed, job_application, status_change}
    - metadata is opaque to the store
"""

from datetime import datetime

from sqlalchemy import String, Text, JSON
from sqlalchemy.orm import Mapped, mapped_column

from talentflow.db.base import Base, DocumentMixin, UTCDateTime


class TimelineEvent(DocumentMixin, Base):
    __tablename__ = "timeline_events"
    __stamp_on_insert__ = ("created_at",)
    __field_aliases__ = {"metadata": "event_metadata"}

    candidate_id: Mapped[str] = mapped_column(
        String(36), nullable=False, index=True,
    )
    type: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    # "metadata" is reserved on declarative classes
    event_metadata: Mapped[dict] = mapped_column(
        "metadata", JSON, nullable=False, default=dict,
    )
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
