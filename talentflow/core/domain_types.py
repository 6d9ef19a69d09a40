"""Domain Types — closed value sets for every enum-like field in the store.

Invariants:
    - CandidateStage is shared by Candidate.stage and JobApplication.status
    - No transition graph: any stage is reachable from any other
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - str Enums: documents serialize to JSON and compare equal to plain strings
    - NewType ids over wrappers: zero runtime cost, full type-checker support
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

JobId = NewType("JobId", str)
CandidateId = NewType("CandidateId", str)
AssessmentId = NewType("AssessmentId", str)
ApplicationId = NewType("ApplicationId", str)
NoteId = NewType("NoteId", str)


# ─── Enums ───────────────────────────────────────────────────────

class JobStatus(str, Enum):
    ACTIVE = "active"
    ARCHIVED = "archived"


class JobType(str, Enum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CONTRACT = "contract"
    INTERNSHIP = "internship"


class CandidateStage(str, Enum):
    """Hiring pipeline position — flat closed set, not an ordered progression."""
    APPLIED = "applied"
    SCREEN = "screen"
    TECH = "tech"
    OFFER = "offer"
    HIRED = "hired"
    REJECTED = "rejected"


# Stages reported as "interview scheduled" in application summaries
INTERVIEW_STAGES = frozenset({
    CandidateStage.SCREEN, CandidateStage.TECH, CandidateStage.OFFER,
})


class QuestionType(str, Enum):
    SINGLE_CHOICE = "single_choice"
    MULTI_CHOICE = "multi_choice"
    SHORT_TEXT = "short_text"
    LONG_TEXT = "long_text"
    NUMERIC = "numeric"
    FILE_UPLOAD = "file_upload"


CHOICE_QUESTION_TYPES = frozenset({
    QuestionType.SINGLE_CHOICE, QuestionType.MULTI_CHOICE,
})


class ConditionOperator(str, Enum):
    """Comparison used by a question's conditional_logic."""
    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    CONTAINS = "contains"
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"


class TimelineEventType(str, Enum):
    STAGE_CHANGE = "stage_change"
    NOTE_ADDED = "note_added"
    ASSESSMENT_COMPLETED = "assessment_completed"
    JOB_APPLICATION = "job_application"
    STATUS_CHANGE = "status_change"
