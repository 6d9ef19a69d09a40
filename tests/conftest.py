"""Root conftest — shared store/service fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite store, opened and closed by the fixture
    - Settings never read the developer's .env: every value the tests rely on is explicit

Design Decisions:
    - SQLite in-memory via aiosqlite: fast, no external dependency, same engine as production
    - Seeding disabled by default; seed tests opt in with small counts
"""

import pytest

from talentflow.config import Settings
from talentflow.infrastructure.store import LocalStore
from talentflow.services.record_service import RecordService

MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        database_url=MEMORY_URL,
        seed_on_startup=False,
        seed_random_seed=7,
        seed_job_count=6,
        seed_candidate_count=20,
        seed_assessment_job_count=2,
        log_format="text",
    )


@pytest.fixture
async def store(settings):
    store = LocalStore(
        settings.database_url,
        name=settings.store_name,
        transaction_timeout=settings.transaction_timeout_seconds,
    )
    await store.open()
    yield store
    await store.close()


@pytest.fixture
def service(store, settings):
    return RecordService(store, settings)


@pytest.fixture
async def job(service):
    return await service.create_job({
        "title": "Backend Engineer",
        "description": "Build APIs",
        "tags": ["Backend", "Python"],
    })


@pytest.fixture
async def candidate(service, job):
    return await service.create_candidate({
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "job_id": job["id"],
    })
