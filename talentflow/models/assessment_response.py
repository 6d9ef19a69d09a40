"""AssessmentResponse ORM — a candidate's submitted answers to one assessment.

Invariants:
    - (candidate_id, assessment_id) is unique
    - answers maps question id -> submitted value
"""

from datetime import datetime

from sqlalchemy import String, JSON, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from talentflow.db.base import Base, DocumentMixin, UTCDateTime


class AssessmentResponse(DocumentMixin, Base):
    __tablename__ = "assessment_responses"
    __table_args__ = (
        UniqueConstraint(
            "candidate_id", "assessment_id",
            name="uq_assessment_responses_candidate_assessment",
        ),
    )
    __stamp_on_insert__ = ("created_at",)

    candidate_id: Mapped[str] = mapped_column(
        String(36), nullable=False, index=True,
    )
    assessment_id: Mapped[str] = mapped_column(
        String(36), nullable=False, index=True,
    )
    answers: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
