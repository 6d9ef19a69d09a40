"""Activity Schemas — notes, assessment responses and job applications.

Invariants:
    - Every activity names the candidate it belongs to
    - NoteCreate.content is stripped and non-empty
    - Application status shares the candidate stage enum
"""

from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from talentflow.core.domain_types import CandidateStage


def _strip_content(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("content cannot be empty or whitespace")
    return v


Content = Annotated[str, AfterValidator(_strip_content)]


class NoteCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    candidate_id: str = Field(min_length=1)
    content: Content = Field(max_length=10_000)


class NoteUpdate(BaseModel):
    model_config = ConfigDict(extra="allow")

    content: Content | None = Field(None, max_length=10_000)


class AssessmentResponseCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    candidate_id: str = Field(min_length=1)
    assessment_id: str = Field(min_length=1)
    answers: dict[str, Any] = Field(default_factory=dict)


class JobApplicationCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str | None = None
    candidate_id: str = Field(min_length=1)
    job_id: str = Field(min_length=1)
    job_title: str | None = Field(None, max_length=200)
    status: CandidateStage | None = None
    notes: str | None = None


class ApplicationStatusUpdate(BaseModel):
    status: CandidateStage
    notes: str = ""


class JobApplicationUpdate(BaseModel):
    """Partial patch of an application; candidate and job are fixed at apply time."""
    model_config = ConfigDict(extra="allow")

    job_title: str | None = Field(None, max_length=200)
    status: CandidateStage | None = None
    notes: str | None = None
