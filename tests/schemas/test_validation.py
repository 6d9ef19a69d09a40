"""Boundary schemas — verifies pydantic validation surfaces as ValidationError.

Tests:
    - Required fields, stripped titles, closed enum sets
    - Only supplied fields are returned; partial mode drops explicit nulls
    - Assessment conditional logic must reference another question of the same tree
"""

import pytest

from talentflow.core.errors import ValidationError
from talentflow.schemas.activity import ApplicationStatusUpdate, NoteCreate
from talentflow.schemas.assessment import AssessmentCreate, AssessmentUpdate
from talentflow.schemas.candidate import CandidateCreate
from talentflow.schemas.job import JobCreate, JobFilter, JobUpdate
from talentflow.schemas.validation import parse


def test_job_title_required():
    with pytest.raises(ValidationError) as exc:
        parse(JobCreate, {"description": "no title"})
    assert exc.value.field == "title"


def test_job_title_stripped_and_non_blank():
    assert parse(JobCreate, {"title": "  QA  "})["title"] == "QA"
    with pytest.raises(ValidationError):
        parse(JobCreate, {"title": "   "})


def test_job_enums_are_closed():
    with pytest.raises(ValidationError) as exc:
        parse(JobCreate, {"title": "QA", "status": "paused"})
    assert exc.value.field == "status"
    with pytest.raises(ValidationError):
        parse(JobCreate, {"title": "QA", "type": "freelance"})


def test_parse_returns_only_supplied_fields_and_extras():
    fields = parse(JobCreate, {"title": "QA", "remote": True})
    assert fields == {"title": "QA", "remote": True}


def test_partial_parse_drops_explicit_nulls():
    assert parse(JobUpdate, {"title": None, "status": "archived"}, partial=True) == {
        "status": "archived",
    }


def test_job_filter_page_bounds():
    with pytest.raises(ValidationError):
        parse(JobFilter, {"page": 0, "page_size": 10})
    assert parse(JobFilter, None) == {}


def test_candidate_email_format():
    with pytest.raises(ValidationError) as exc:
        parse(CandidateCreate, {"name": "Ada", "email": "not-an-email"})
    assert exc.value.field == "email"


def test_candidate_stage_closed_set():
    with pytest.raises(ValidationError):
        parse(CandidateCreate, {"name": "Ada", "email": "a@b.c", "stage": "interview"})


def test_note_content_non_blank():
    with pytest.raises(ValidationError):
        parse(NoteCreate, {"candidate_id": "c1", "content": "  "})


def test_application_status_closed_set():
    with pytest.raises(ValidationError):
        parse(ApplicationStatusUpdate, {"status": "ghosted"})


def _assessment(questions):
    return {"job_id": "job-1", "sections": [{"title": "S", "questions": questions}]}


def test_conditional_logic_may_reference_sibling_question():
    fields = parse(AssessmentCreate, _assessment([
        {"id": "q1", "type": "single_choice", "options": ["Yes", "No"]},
        {"id": "q2", "conditional_logic": {"depends_on_question_id": "q1", "value": "Yes"}},
    ]))
    assert fields["sections"][0]["questions"][1]["conditional_logic"]["value"] == "Yes"


def test_conditional_logic_rejects_unknown_question():
    with pytest.raises(ValidationError):
        parse(AssessmentCreate, _assessment([
            {"id": "q2", "conditional_logic": {"depends_on_question_id": "missing"}},
        ]))


def test_conditional_logic_rejects_self_reference():
    with pytest.raises(ValidationError):
        parse(AssessmentUpdate, {"sections": [{"questions": [
            {"id": "q1", "conditional_logic": {"depends_on_question_id": "q1"}},
        ]}]})


def test_conditional_logic_operator_closed_set():
    with pytest.raises(ValidationError):
        parse(AssessmentCreate, _assessment([
            {"id": "q1"},
            {"id": "q2", "conditional_logic": {
                "depends_on_question_id": "q1", "operator": "matches",
            }},
        ]))


def test_question_validation_bounds_ordered():
    with pytest.raises(ValidationError):
        parse(AssessmentCreate, _assessment([
            {"id": "q1", "validation": {"min_length": 10, "max_length": 5}},
        ]))
