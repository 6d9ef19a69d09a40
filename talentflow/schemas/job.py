"""Job Schemas — field validation for job creation, updates and list filters.

Invariants:
    - JobCreate.title: 1-200 chars, stripped, non-empty
    - type/status restricted to the closed enum sets
    - JobFilter pagination only applies when both page and page_size are given
"""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from talentflow.core.domain_types import JobStatus, JobType


def _strip_title(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("title cannot be empty or whitespace")
    return v


Title = Annotated[str, AfterValidator(_strip_title)]


class JobCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str | None = None
    title: Title = Field(min_length=1, max_length=200)
    slug: str | None = Field(None, max_length=200)
    description: str | None = None
    requirements: list[str] | None = None
    benefits: list[str] | None = None
    tags: list[str] | None = None
    location: str | None = Field(None, max_length=200)
    salary: str | None = Field(None, max_length=100)
    type: JobType | None = None
    department: str | None = Field(None, max_length=100)
    status: JobStatus | None = None
    order: int | None = None


class JobUpdate(BaseModel):
    """Partial patch — every field optional, same constraints as JobCreate."""
    model_config = ConfigDict(extra="allow")

    title: Title | None = Field(None, min_length=1, max_length=200)
    slug: str | None = Field(None, max_length=200)
    description: str | None = None
    requirements: list[str] | None = None
    benefits: list[str] | None = None
    tags: list[str] | None = None
    location: str | None = Field(None, max_length=200)
    salary: str | None = Field(None, max_length=100)
    type: JobType | None = None
    department: str | None = Field(None, max_length=100)
    status: JobStatus | None = None
    order: int | None = None


class JobFilter(BaseModel):
    status: JobStatus | None = None
    tags: list[str] | None = None
    search: str | None = None
    page: int | None = Field(None, ge=1)
    page_size: int | None = Field(None, ge=1, le=500)
