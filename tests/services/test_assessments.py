"""Assessments — verifies job ownership, nested normalization, responses and cascade."""

import pytest

from talentflow.core.errors import DuplicateError, NotFoundError, ValidationError


def _payload(job_id):
    return {
        "job_id": job_id,
        "title": "Backend Screen",
        "sections": [{
            "title": "Basics",
            "questions": [
                {"id": "q1", "type": "single_choice", "title": "Python?", "options": ["Yes", "No"]},
                {
                    "id": "q2", "type": "long_text", "title": "Why?",
                    "conditional_logic": {"depends_on_question_id": "q1", "value": "Yes"},
                },
            ],
        }],
        "settings": {"time_limit": 45},
    }


@pytest.fixture
async def assessment(service, job):
    return await service.create_assessment(_payload(job["id"]))


async def test_create_assessment_normalizes_tree(service, job, assessment):
    assert assessment["job_id"] == job["id"]
    assert assessment["settings"] == {"time_limit": 45}
    section = assessment["sections"][0]
    assert section["id"]
    q1, q2 = section["questions"]
    assert q1["required"] is False and q1["validation"] == {}
    assert q2["conditional_logic"]["operator"] == "equals"
    assert (await service.get_assessment_by_job_id(job["id"]))["id"] == assessment["id"]
    assert await service.get_assessment_by_id(assessment["id"]) == assessment


async def test_create_assessment_requires_job(service):
    with pytest.raises(NotFoundError):
        await service.create_assessment(_payload("missing"))
    assert await service.list_assessments() == []


async def test_update_assessment_replaces_sections(service, assessment):
    updated = await service.update_assessment(assessment["id"], {
        "title": "Backend Screen v2",
        "sections": [{"title": "Only", "questions": [{"title": "Anything else?"}]}],
    })
    assert updated["title"] == "Backend Screen v2"
    assert len(updated["sections"]) == 1
    assert updated["sections"][0]["questions"][0]["type"] == "short_text"
    assert updated["settings"] == {"time_limit": 45}


async def test_update_missing_assessment(service):
    with pytest.raises(NotFoundError):
        await service.update_assessment("missing", {"title": "x"})


async def test_response_logs_completion_event(service, candidate, assessment):
    response = await service.create_assessment_response({
        "candidate_id": candidate["id"],
        "assessment_id": assessment["id"],
        "answers": {"q1": "Yes", "q2": "Because"},
    })
    stored = await service.get_assessment_response(candidate["id"], assessment["id"])
    assert stored == response
    events = [
        e for e in await service.get_candidate_timeline(candidate["id"])
        if e["type"] == "assessment_completed"
    ]
    assert events[0]["metadata"] == {
        "assessment_id": assessment["id"], "response_id": response["id"],
    }


async def test_duplicate_response_rejected(service, candidate, assessment):
    data = {"candidate_id": candidate["id"], "assessment_id": assessment["id"], "answers": {}}
    await service.create_assessment_response(data)
    with pytest.raises(DuplicateError):
        await service.create_assessment_response(data)


async def test_response_answers_must_reference_questions(service, candidate, assessment):
    with pytest.raises(ValidationError):
        await service.create_assessment_response({
            "candidate_id": candidate["id"],
            "assessment_id": assessment["id"],
            "answers": {"q9": "?"},
        })
    assert await service.get_assessment_response(candidate["id"], assessment["id"]) is None


async def test_delete_assessment_cascades_responses(service, candidate, assessment):
    await service.create_assessment_response({
        "candidate_id": candidate["id"], "assessment_id": assessment["id"], "answers": {"q1": "No"},
    })
    assert await service.delete_assessment(assessment["id"]) == 1
    assert await service.get_assessment_response(candidate["id"], assessment["id"]) is None
    with pytest.raises(NotFoundError):
        await service.delete_assessment(assessment["id"])
