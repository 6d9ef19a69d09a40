"""Job operations — verifies slugs, ordering, filters, cascade delete and reorder.

Tests:
    - Same-title jobs get backend-engineer, backend-engineer-1, backend-engineer-2
    - Concurrent creates of one title never share a slug
    - A blank slug patch falls back to the title
    - Slug probe exhaustion raises DuplicateSlugError
    - Title changes re-derive the slug; the job's own slug never collides with itself
    - delete_job removes every record the job owns, atomically
    - reorder_jobs swaps order values or leaves every job untouched
"""

import asyncio
import re

import pytest

from talentflow.core.errors import DuplicateSlugError, NotFoundError, ValidationError
from talentflow.infrastructure.store import Transaction
from talentflow.services.record_service import RecordService


async def test_create_get_round_trip(service):
    created = await service.create_job({
        "title": "Data Scientist",
        "tags": ["Python", "ML", "Python"],
        "remote": True,
    })
    fetched = await service.get_job_by_id(created["id"])
    assert fetched == created
    assert fetched["slug"] == "data-scientist"
    assert fetched["tags"] == ["Python", "ML"]
    assert fetched["remote"] is True
    assert fetched["status"] == "active"


async def test_duplicate_titles_get_numbered_slugs(service):
    slugs = [
        (await service.create_job({"title": "Backend Engineer"}))["slug"]
        for _ in range(3)
    ]
    assert slugs == ["backend-engineer", "backend-engineer-1", "backend-engineer-2"]
    assert await service.is_slug_unique("backend-engineer-3")
    assert not await service.is_slug_unique("backend-engineer-1")


async def test_concurrent_creates_get_distinct_slugs(service):
    jobs = await asyncio.gather(*(
        service.create_job({"title": "Backend Engineer"}) for _ in range(5)
    ))
    slugs = [j["slug"] for j in jobs]
    assert len(set(slugs)) == 5
    assert all(re.fullmatch(r"backend-engineer(-\d+)?", s) for s in slugs)


async def test_caller_slug_is_normalized(service):
    job = await service.create_job({"title": "QA", "slug": "My Custom Slug!"})
    assert job["slug"] == "my-custom-slug"
    assert (await service.get_job_by_slug("my-custom-slug"))["id"] == job["id"]


async def test_slug_probe_exhaustion(store, settings):
    tight = RecordService(store, settings.model_copy(update={"slug_max_attempts": 2}))
    await tight.create_job({"title": "QA"})
    await tight.create_job({"title": "QA"})
    with pytest.raises(DuplicateSlugError):
        await tight.create_job({"title": "QA"})


async def test_create_job_validates_title(service):
    with pytest.raises(ValidationError):
        await service.create_job({"title": "   "})
    assert await service.list_jobs() == []


async def test_orders_appended_when_not_given(service):
    first = await service.create_job({"title": "A"})
    second = await service.create_job({"title": "B"})
    pinned = await service.create_job({"title": "C", "order": 10})
    assert (first["order"], second["order"], pinned["order"]) == (1, 2, 10)


async def test_caller_id_is_upserted(service):
    await service.create_job({"id": "job-1", "title": "QA Engineer"})
    replaced = await service.create_job({"id": "job-1", "title": "QA Engineer", "salary": "$1"})
    assert replaced["slug"] == "qa-engineer"
    assert replaced["salary"] == "$1"
    assert len(await service.list_jobs()) == 1


async def test_update_job_rederives_slug_on_title_change(service, job):
    await service.create_job({"title": "Platform Engineer"})
    renamed = await service.update_job(job["id"], {"title": "Platform Engineer"})
    assert renamed["slug"] == "platform-engineer-1"
    untouched = await service.update_job(job["id"], {"salary": "$100k"})
    assert untouched["slug"] == "platform-engineer-1"


async def test_update_job_keeps_own_slug(service, job):
    updated = await service.update_job(job["id"], {"slug": job["slug"], "title": job["title"]})
    assert updated["slug"] == "backend-engineer"


async def test_blank_slug_patch_rederives_from_title(service, job):
    cleared = await service.update_job(job["id"], {"slug": ""})
    assert cleared["slug"] == "backend-engineer"
    twin = await service.create_job({"title": "Backend Engineer"})
    assert twin["slug"] == "backend-engineer-1"
    other = await service.create_job({"title": "Designer"})
    renamed = await service.update_job(other["id"], {"slug": "", "title": "Backend Engineer"})
    assert renamed["slug"] == "backend-engineer-2"


async def test_update_missing_job(service):
    with pytest.raises(NotFoundError):
        await service.update_job("missing", {"title": "x"})


async def test_list_jobs_filters(service):
    await service.create_job({"title": "Frontend Dev", "tags": ["React"]})
    await service.create_job({"title": "Backend Dev", "tags": ["Python"], "status": "archived"})
    await service.create_job({"title": "Designer", "description": "Figma work", "tags": ["UX"]})

    assert [j["title"] for j in await service.list_jobs({"status": "archived"})] == ["Backend Dev"]
    assert [j["title"] for j in await service.list_jobs({"tags": ["UX", "React"]})] == [
        "Frontend Dev", "Designer",
    ]
    assert [j["title"] for j in await service.list_jobs({"search": "figma"})] == ["Designer"]


async def test_list_jobs_pagination(service):
    for i in range(5):
        await service.create_job({"title": f"Job {i}"})
    page = await service.list_jobs({"page": 2, "page_size": 2})
    assert [j["title"] for j in page["data"]] == ["Job 2", "Job 3"]
    assert page["total"] == 5 and page["total_pages"] == 3 and page["has_more"] is True
    # page alone is not enough to paginate
    assert isinstance(await service.list_jobs({"page": 1}), list)


async def test_reorder_swaps_order_values(service):
    a = await service.create_job({"title": "A"})
    b = await service.create_job({"title": "B"})
    c = await service.create_job({"title": "C"})
    ordered = await service.reorder_jobs(1, 3)
    assert [j["id"] for j in ordered] == [c["id"], b["id"], a["id"]]
    assert (await service.get_job_by_id(a["id"]))["order"] == 3


async def test_reorder_with_missing_order_is_noop(service):
    await service.create_job({"title": "A"})
    await service.create_job({"title": "B"})
    before = await service.list_jobs()
    after = await service.reorder_jobs(1, 99)
    assert after == before


async def test_delete_job_cascades(service, job, candidate):
    assessment = await service.create_assessment({
        "job_id": job["id"],
        "sections": [{"title": "S", "questions": [{"id": "q1"}]}],
    })
    await service.create_assessment_response({
        "candidate_id": candidate["id"], "assessment_id": assessment["id"], "answers": {"q1": "x"},
    })
    await service.create_note({"candidate_id": candidate["id"], "content": "Strong"})
    await service.apply_candidate_to_job(candidate["id"], job["id"])

    removed = await service.delete_job(job["id"])

    assert removed["candidates"] == 1
    assert removed["assessments"] == 1
    assert removed["assessment_responses"] == 1
    assert removed["notes"] == 1
    assert removed["job_applications"] == 1
    assert await service.get_job_by_id(job["id"]) is None
    assert await service.get_candidate_by_id(candidate["id"]) is None
    assert await service.get_candidate_timeline(candidate["id"]) == []
    assert await service.list_assessments() == []
    assert await service.get_stats() == {"jobs": 0, "candidates": 0, "assessments": 0}


async def test_delete_job_keeps_other_candidates_applications(service, job):
    other_job = await service.create_job({"title": "Designer"})
    outsider = await service.create_candidate({
        "name": "Grace", "email": "grace@example.com", "job_id": other_job["id"],
    })
    await service.apply_candidate_to_job(outsider["id"], job["id"])

    await service.delete_job(job["id"])

    applications = await service.get_candidate_job_applications(outsider["id"])
    assert len(applications) == 1
    assert applications[0]["job_title"] == "Backend Engineer"
    assert applications[0]["job_details"] is None


async def test_delete_missing_job(service):
    with pytest.raises(NotFoundError):
        await service.delete_job("missing")


async def test_failed_cascade_rolls_back(service, job, candidate, monkeypatch):
    async def failing_delete(self, table, record_id):
        raise RuntimeError("disk unplugged")

    monkeypatch.setattr(Transaction, "delete", failing_delete)
    with pytest.raises(RuntimeError):
        await service.delete_job(job["id"])
    monkeypatch.undo()

    assert await service.get_job_by_id(job["id"]) is not None
    assert await service.get_candidate_by_id(candidate["id"]) is not None
    assert len(await service.get_candidate_timeline(candidate["id"])) == 1
