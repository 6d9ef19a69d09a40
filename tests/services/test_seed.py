"""Seed generator — verifies determinism, template rules and seeding through the service.

Tests:
    - Same Random seed produces identical jobs, candidates, assessments, applications
    - Titles past the 11th job carry a "#NN" suffix; orders run 1..n
    - Primary application keeps the candidate's stage
    - seed_if_empty() writes through the record service and only into an empty store
"""

import random
import re

from talentflow.services.seed_generator import (
    generate_assessments, generate_candidates, generate_job_applications,
    generate_jobs, seed_if_empty,
)
from talentflow.main import lifespan


def _generate(seed):
    rng = random.Random(seed)
    jobs = generate_jobs(rng, 25)
    candidates = generate_candidates(rng, jobs, 50)
    assessments = generate_assessments(rng, jobs, 5)
    applications = generate_job_applications(rng, candidates, jobs)
    return jobs, candidates, assessments, applications


def test_generation_is_deterministic():
    assert _generate(42) == _generate(42)
    assert _generate(42) != _generate(43)


def test_generated_jobs_follow_templates():
    jobs = generate_jobs(random.Random(1), 25)
    assert [j["order"] for j in jobs] == list(range(1, 26))
    assert all("#" not in j["title"] for j in jobs[:11])
    assert all(re.search(r" #\d{1,2}$", j["title"]) for j in jobs[11:])
    assert all(j["tags"][-1] == f"Tag{i + 1}" for i, j in enumerate(jobs))
    assert {j["status"] for j in jobs} <= {"active", "archived"}
    assert {j["type"] for j in jobs} <= {"full-time", "part-time", "contract"}


def test_generated_candidates_reference_jobs():
    rng = random.Random(3)
    jobs = generate_jobs(rng, 5)
    candidates = generate_candidates(rng, jobs, 30)
    job_ids = {j["id"] for j in jobs}
    assert len(candidates) == 30
    assert all(c["job_id"] in job_ids for c in candidates)
    assert len({c["email"] for c in candidates}) == 30


def test_generated_assessments():
    rng = random.Random(5)
    jobs = generate_jobs(rng, 8)
    assessments = generate_assessments(rng, jobs, 5)
    assert [a["job_id"] for a in assessments] == [j["id"] for j in jobs[:5]]
    for assessment, job in zip(assessments, jobs):
        titles = [s["title"] for s in assessment["sections"]]
        assert titles[-2:] == ["Problem Solving", "Cultural Fit"]
        engineering = bool({"Frontend", "Backend", "React"} & set(job["tags"]))
        assert ("Technical Skills" in titles) == engineering
        assert assessment["settings"]["time_limit"] == 60


def test_primary_application_keeps_candidate_stage():
    rng = random.Random(9)
    jobs = generate_jobs(rng, 6)
    candidates = generate_candidates(rng, jobs, 40)
    applications = generate_job_applications(rng, candidates, jobs)
    applying = candidates[:12]
    by_candidate = {}
    for application in applications:
        by_candidate.setdefault(application["candidate_id"], []).append(application)
    assert set(by_candidate) == {c["id"] for c in applying}
    for candidate in applying:
        own = by_candidate[candidate["id"]]
        assert 1 <= len(own) <= 3
        assert own[0]["job_id"] == candidate["job_id"]
        assert own[0]["status"] == candidate["stage"]
        assert len({a["job_id"] for a in own}) == len(own)


async def test_seed_if_empty_writes_through_service(service, settings):
    counts = await seed_if_empty(service, settings)

    assert counts["jobs"] == 6
    assert counts["candidates"] == 20
    assert await service.get_stats() == {"jobs": 6, "candidates": 20, "assessments": 2}
    jobs = await service.list_jobs()
    assert len({j["slug"] for j in jobs}) == 6
    some_candidate = (await service.list_candidates())[0]
    timeline = await service.get_candidate_timeline(some_candidate["id"])
    assert timeline[-1]["title"] == "Application Submitted"


async def test_seed_skips_non_empty_store(service, settings, job):
    assert await seed_if_empty(service, settings) is None
    assert (await service.get_stats())["jobs"] == 1


async def test_lifespan_seeds_and_closes(settings):
    seeded = settings.model_copy(update={"seed_on_startup": True})
    async with lifespan(seeded) as service:
        assert (await service.get_stats())["jobs"] == 6
        store = service.store
    assert not store.is_open
