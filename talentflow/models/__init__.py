"""ORM Models — SQLAlchemy declarative models for every document table.

Invariants:
    - All models inherit from Base (db/base.py)
    - TABLES maps the store's public table names to their models

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all runs
"""

from talentflow.models.job import Job
from talentflow.models.candidate import Candidate
from talentflow.models.assessment import Assessment
from talentflow.models.timeline_event import TimelineEvent
from talentflow.models.note import Note
from talentflow.models.assessment_response import AssessmentResponse
from talentflow.models.job_application import JobApplication
from talentflow.models.store_meta import StoreMeta  # noqa: F401

TABLES = {
    "jobs": Job,
    "candidates": Candidate,
    "assessments": Assessment,
    "timeline_events": TimelineEvent,
    "notes": Note,
    "assessment_responses": AssessmentResponse,
    "job_applications": JobApplication,
}
