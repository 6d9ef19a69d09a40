"""Record Factories — pure constructors that fill defaults for every entity shape.

Invariants:
    - Never raise, never touch storage, never mutate the input
    - Unknown keys pass through unchanged (forward-compatible documents)
    - An id is generated only when the caller did not supply one
    - Timestamps are NOT set here — the store's write hooks own them

Design Decisions:
    - Plain dicts over dataclasses: the store is document-oriented and extra
      fields must survive a round trip
    - Lists/dicts copied on the way in so callers can't alias stored state
"""

import re
import uuid
from typing import Any

from talentflow.core.domain_types import (
    CandidateStage, ConditionOperator, JobStatus, JobType, QuestionType,
)

_MENTION_PATTERN = re.compile(r"(?<![\w@])@([A-Za-z0-9_.-]*[A-Za-z0-9_])")


def new_id() -> str:
    return str(uuid.uuid4())


def _build(defaults: dict[str, Any], partial: dict | None) -> dict:
    record = dict(partial or {})
    for key, default in defaults.items():
        if record.get(key) is None:
            record[key] = default
        elif isinstance(record[key], list):
            record[key] = list(record[key])
        elif isinstance(record[key], dict):
            record[key] = dict(record[key])
    if not record.get("id"):
        record["id"] = new_id()
    return record


def _unique(values: list) -> list:
    """De-duplicate preserving first-seen order. Works for unhashable values too."""
    result = []
    for value in values:
        if value not in result:
            result.append(value)
    return result


# ─── Jobs & Candidates ───────────────────────────────────────────

def create_job(partial: dict | None = None) -> dict:
    record = _build({
        "title": "",
        "slug": "",
        "description": "",
        "requirements": [],
        "benefits": [],
        "tags": [],
        "location": "",
        "salary": "",
        "type": JobType.FULL_TIME.value,
        "department": "",
        "status": JobStatus.ACTIVE.value,
        "order": 0,
    }, partial)
    if isinstance(record["tags"], list):
        record["tags"] = _unique(record["tags"])
    return record


def create_candidate(partial: dict | None = None) -> dict:
    record = _build({
        "name": "",
        "email": "",
        "phone": "",
        "stage": CandidateStage.APPLIED.value,
        "cover_letter": "",
    }, partial)
    record.setdefault("job_id", None)
    return record


# ─── Assessments ─────────────────────────────────────────────────

def create_question(partial: dict | None = None) -> dict:
    record = _build({
        "type": QuestionType.SHORT_TEXT.value,
        "title": "",
        "description": "",
        "required": False,
        "options": [],
        "validation": {},
    }, partial)
    logic = record.setdefault("conditional_logic", None)
    if isinstance(logic, dict):
        record["conditional_logic"] = {
            "operator": ConditionOperator.EQUALS.value, "value": None, **logic,
        }
    return record


def create_section(partial: dict | None = None) -> dict:
    record = _build({
        "title": "",
        "description": "",
        "questions": [],
    }, partial)
    record["questions"] = [create_question(q) for q in record["questions"]]
    return record


def create_assessment(partial: dict | None = None) -> dict:
    record = _build({
        "title": "",
        "description": "",
        "sections": [],
    }, partial)
    record.setdefault("job_id", None)
    record["sections"] = [create_section(s) for s in record["sections"]]
    return record


def create_assessment_response(partial: dict | None = None) -> dict:
    record = _build({"answers": {}}, partial)
    record.setdefault("candidate_id", None)
    record.setdefault("assessment_id", None)
    return record


# ─── Candidate activity ──────────────────────────────────────────

def create_timeline_event(partial: dict | None = None) -> dict:
    record = _build({
        "type": "",
        "title": "",
        "description": "",
        "metadata": {},
    }, partial)
    record.setdefault("candidate_id", None)
    return record


def create_note(partial: dict | None = None) -> dict:
    record = _build({"content": ""}, partial)
    record.setdefault("candidate_id", None)
    return record


def create_job_application(partial: dict | None = None) -> dict:
    record = _build({
        "job_title": "",
        "status": CandidateStage.APPLIED.value,
        "notes": "",
    }, partial)
    record.setdefault("candidate_id", None)
    record.setdefault("job_id", None)
    return record


def extract_mentions(content: str) -> list[str]:
    """Return @mention handles in order of first appearance."""
    return _unique(_MENTION_PATTERN.findall(content or ""))
