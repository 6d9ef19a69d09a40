"""Seed Generator — deterministic demo data fed through the record service.

Invariants:
    - Every generate_* function is pure given its random.Random: same seed, same output
      (ids included)
    - Generated records are plain dicts shaped by the record factories
    - seed_if_empty() only runs against an empty jobs table and writes through the
      normal create_* operations, so slugs, timestamps and timeline events follow
      the same rules as any other caller
    - Order of writes: jobs -> candidates -> assessments -> applications

Design Decisions:
    - Ids drawn from the Random instance, not uuid4(): reproducible seeds
    - A candidate's first application targets the candidate's own job and keeps the
      candidate's stage; further applications go to distinct other jobs
"""

import logging
import random
import uuid

from talentflow.config import Settings
from talentflow.core.domain_types import CandidateStage, JobStatus
from talentflow.core.records import (
    create_assessment, create_candidate, create_job, create_job_application,
    create_question, create_section,
)
from talentflow.services.seed_templates import (
    ASSESSMENT_SETTINGS, COVER_LETTER, CULTURAL_FIT_SECTION, EMAIL_DOMAINS,
    ENGINEERING_TAGS, FIRST_NAMES, JOB_TEMPLATES, LAST_NAMES,
    PROBLEM_SOLVING_SECTION, SEED_JOB_TYPES, TECHNICAL_SKILLS_SECTION,
)

logger = logging.getLogger(__name__)

ARCHIVED_RATIO = 0.2
APPLYING_CANDIDATE_RATIO = 0.3
MAX_APPLICATIONS_PER_CANDIDATE = 3
# Titles of jobs past this index get a "#NN" suffix
PLAIN_TITLE_COUNT = 11


def _seed_id(rng: random.Random) -> str:
    return str(uuid.UUID(int=rng.getrandbits(128), version=4))


def generate_jobs(rng: random.Random, count: int = 25) -> list[dict]:
    jobs = []
    for i in range(count):
        template = rng.choice(JOB_TEMPLATES)
        archived = rng.random() < ARCHIVED_RATIO
        title = template["title"]
        if i >= PLAIN_TITLE_COUNT:
            title = f"{title} #{rng.randrange(100)}"
        jobs.append(create_job({
            **template,
            "id": _seed_id(rng),
            "title": title,
            "tags": [*template["tags"], f"Tag{i + 1}"],
            "type": rng.choice(SEED_JOB_TYPES).value,
            "status": (JobStatus.ARCHIVED if archived else JobStatus.ACTIVE).value,
            "order": i + 1,
        }))
    return jobs


def generate_candidates(
    rng: random.Random, jobs: list[dict], count: int = 1000,
) -> list[dict]:
    stages = list(CandidateStage)
    candidates = []
    for i in range(count):
        first, last = rng.choice(FIRST_NAMES), rng.choice(LAST_NAMES)
        domain = rng.choice(EMAIL_DOMAINS)
        job = rng.choice(jobs) if jobs else None
        name = f"{first} {last}"
        candidates.append(create_candidate({
            "id": _seed_id(rng),
            "name": name,
            "email": f"{first.lower()}.{last.lower()}{i}@{domain}",
            "phone": (
                f"+1-{rng.randint(100, 999)}-{rng.randint(100, 999)}"
                f"-{rng.randint(1000, 9999)}"
            ),
            "stage": rng.choice(stages).value,
            "job_id": job["id"] if job else None,
            "cover_letter": COVER_LETTER.format(
                job_title=job["title"] if job else "open", name=name,
            ),
        }))
    return candidates


def _section(rng: random.Random, template: dict) -> dict:
    return create_section({
        **template,
        "id": _seed_id(rng),
        "questions": [
            create_question({**q, "id": _seed_id(rng)}) for q in template["questions"]
        ],
    })


def generate_assessments(
    rng: random.Random, jobs: list[dict], job_count: int = 5,
) -> list[dict]:
    assessments = []
    for job in jobs[:job_count]:
        sections = []
        if ENGINEERING_TAGS & set(job["tags"]):
            sections.append(_section(rng, TECHNICAL_SKILLS_SECTION))
        sections.append(_section(rng, PROBLEM_SOLVING_SECTION))
        sections.append(_section(rng, CULTURAL_FIT_SECTION))
        assessments.append(create_assessment({
            "id": _seed_id(rng),
            "job_id": job["id"],
            "title": f"{job['title']} Assessment",
            "description": f"Comprehensive assessment for the {job['title']} position",
            "sections": sections,
            "settings": dict(ASSESSMENT_SETTINGS),
        }))
    return assessments


def generate_job_applications(
    rng: random.Random, candidates: list[dict], jobs: list[dict],
) -> list[dict]:
    stages = list(CandidateStage)
    jobs_by_id = {job["id"]: job for job in jobs}
    applying = candidates[:int(len(candidates) * APPLYING_CANDIDATE_RATIO)]
    applications = []
    for candidate in applying:
        primary = jobs_by_id.get(candidate["job_id"])
        if primary is None:
            continue
        others = [job for job in jobs if job["id"] != primary["id"]]
        extra = min(rng.randint(1, MAX_APPLICATIONS_PER_CANDIDATE) - 1, len(others))
        applications.append(create_job_application({
            "id": _seed_id(rng),
            "candidate_id": candidate["id"],
            "job_id": primary["id"],
            "job_title": primary["title"],
            "status": candidate["stage"],
            "notes": "Primary application",
        }))
        for job in rng.sample(others, extra):
            applications.append(create_job_application({
                "id": _seed_id(rng),
                "candidate_id": candidate["id"],
                "job_id": job["id"],
                "job_title": job["title"],
                "status": rng.choice(stages).value,
                "notes": f"Applied to {job['title']}",
            }))
    return applications


async def seed_if_empty(service, settings: Settings) -> dict | None:
    """Populate an empty store with demo data. Returns created counts, or None if skipped."""
    stats = await service.get_stats()
    if stats["jobs"]:
        logger.info(f"Seed skipped: store already holds {stats['jobs']} jobs")
        return None

    rng = random.Random(settings.seed_random_seed)
    jobs = generate_jobs(rng, settings.seed_job_count)
    candidates = generate_candidates(rng, jobs, settings.seed_candidate_count)
    assessments = generate_assessments(rng, jobs, settings.seed_assessment_job_count)
    applications = generate_job_applications(rng, candidates, jobs)

    for job in jobs:
        await service.create_job(job)
    for candidate in candidates:
        await service.create_candidate(candidate)
    for assessment in assessments:
        await service.create_assessment(assessment)
    for application in applications:
        await service.create_job_application(application)

    counts = {
        "jobs": len(jobs),
        "candidates": len(candidates),
        "assessments": len(assessments),
        "job_applications": len(applications),
    }
    logger.info(
        f"Seeded store: {counts}",
        extra={"operation": "seed", "count": sum(counts.values())},
    )
    return counts
