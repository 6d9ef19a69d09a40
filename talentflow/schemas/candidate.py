"""Candidate Schemas — field validation for candidates and candidate list filters."""

from pydantic import BaseModel, ConfigDict, Field

from talentflow.core.domain_types import CandidateStage

_EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+$"


class CandidateCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str | None = None
    name: str = Field(min_length=1, max_length=200)
    email: str = Field(max_length=320, pattern=_EMAIL_PATTERN)
    phone: str | None = Field(None, max_length=50)
    stage: CandidateStage | None = None
    job_id: str | None = None
    cover_letter: str | None = None


class CandidateUpdate(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str | None = Field(None, min_length=1, max_length=200)
    email: str | None = Field(None, max_length=320, pattern=_EMAIL_PATTERN)
    phone: str | None = Field(None, max_length=50)
    stage: CandidateStage | None = None
    job_id: str | None = None
    cover_letter: str | None = None


class CandidateFilter(BaseModel):
    stage: CandidateStage | None = None
    job_id: str | None = None
    search: str | None = None
    page: int | None = Field(None, ge=1)
    page_size: int | None = Field(None, ge=1, le=500)
