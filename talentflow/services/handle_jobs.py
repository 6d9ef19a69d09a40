"""Job Handlers — list/get queries, create/update with unique slugs, cascade delete, reorder.

Invariants:
    - Slug uniqueness probe and the write it guards run in ONE transaction
    - Probe is sequential ("base", "base-1", "base-2", ...) and bounded by
      settings.slug_max_attempts; exhaustion raises DuplicateSlugError
    - delete_job removes the job, its candidates (with everything they own) and its
      assessments (with their responses) atomically
    - reorder_jobs swaps two order values or does nothing at all

Design Decisions:
    - Caller-supplied id means upsert (put); otherwise the store assigns the id
    - Jobs without an explicit order are appended after the current last job
    - Applications of OTHER candidates survive a job delete: job_title is their snapshot
"""

import logging

from talentflow.config import Settings
from talentflow.core.errors import DuplicateSlugError, NotFoundError
from talentflow.core.queries import job_matches, paginate
from talentflow.core.records import create_job
from talentflow.core.slugs import slug_candidates, slugify
from talentflow.infrastructure.store import LocalStore, Transaction
from talentflow.schemas.job import JobCreate, JobFilter, JobUpdate
from talentflow.schemas.validation import parse
from talentflow.services.handle_candidates import delete_candidate_records

logger = logging.getLogger(__name__)

JOB_ORDERING = ("order", "created_at")


async def _unique_slug(
    tx: Transaction, base: str, max_attempts: int, exclude_id: str | None = None,
) -> str:
    for candidate in slug_candidates(base, max_attempts):
        existing = await tx.first("jobs", slug=candidate)
        if existing is None or existing["id"] == exclude_id:
            return candidate
    raise DuplicateSlugError(base, max_attempts)


class JobQueries:
    """Read-only job operations."""

    def __init__(self, store: LocalStore, settings: Settings):
        self._store = store
        self._settings = settings

    async def list_jobs(self, filters: dict | None = None) -> list[dict] | dict:
        """Jobs ordered by `order`; a page envelope when page and page_size are given."""
        f = parse(JobFilter, filters)
        criteria = {"status": f["status"]} if f.get("status") else {}
        async with self._store.transaction() as tx:
            jobs = await tx.find("jobs", order_by=JOB_ORDERING, **criteria)
        jobs = [
            j for j in jobs
            if job_matches(j, tags=f.get("tags"), search=f.get("search"))
        ]
        if f.get("page") and f.get("page_size"):
            return paginate(jobs, f["page"], f["page_size"])
        return jobs

    async def get_job_by_id(self, job_id: str) -> dict | None:
        async with self._store.transaction() as tx:
            return await tx.get("jobs", job_id)

    async def get_job_by_slug(self, slug: str) -> dict | None:
        async with self._store.transaction() as tx:
            return await tx.first("jobs", slug=slug)

    async def is_slug_unique(self, slug: str, exclude_id: str | None = None) -> bool:
        async with self._store.transaction() as tx:
            existing = await tx.first("jobs", slug=slug)
        return existing is None or existing["id"] == exclude_id


class JobHandlers:
    """Job mutations — every method is one transaction."""

    def __init__(self, store: LocalStore, settings: Settings):
        self._store = store
        self._settings = settings

    async def create_job(self, data: dict) -> dict:
        fields = parse(JobCreate, data)
        supplied_id = fields.get("id")
        base = slugify(fields.get("slug") or fields["title"])
        async with self._store.transaction() as tx:
            fields["slug"] = await _unique_slug(
                tx, base, self._settings.slug_max_attempts, exclude_id=supplied_id,
            )
            if fields.get("order") is None:
                fields["order"] = await self._next_order(tx)
            job = create_job(fields)
            if supplied_id:
                saved = await tx.put("jobs", job)
            else:
                job.pop("id")
                saved = await tx.insert("jobs", job)
        logger.info(
            f"Job created: {saved['slug']}",
            extra={"table": "jobs", "record_id": saved["id"]},
        )
        return saved

    async def update_job(self, job_id: str, patch: dict) -> dict:
        changes = parse(JobUpdate, patch, partial=True)
        async with self._store.transaction() as tx:
            current = await tx.get("jobs", job_id)
            if current is None:
                raise NotFoundError("Job", job_id)
            title_changed = (
                "title" in changes and changes["title"] != current["title"]
            )
            if "slug" in changes or title_changed:
                base = slugify(changes.get("slug") or changes.get("title") or current["title"])
                changes["slug"] = await _unique_slug(
                    tx, base, self._settings.slug_max_attempts, exclude_id=job_id,
                )
            if "tags" in changes:
                changes["tags"] = list(dict.fromkeys(changes["tags"]))
            return await tx.update("jobs", job_id, changes)

    async def delete_job(self, job_id: str) -> dict:
        """Delete a job and cascade to its candidates and assessments. Returns counts."""
        async with self._store.transaction() as tx:
            if await tx.get("jobs", job_id) is None:
                raise NotFoundError("Job", job_id)
            candidates = await tx.find("candidates", job_id=job_id)
            removed = await delete_candidate_records(tx, [c["id"] for c in candidates])
            assessments = await tx.find("assessments", job_id=job_id)
            removed["assessment_responses"] += await tx.delete_where(
                "assessment_responses",
                assessment_id=[a["id"] for a in assessments],
            )
            removed["assessments"] = await tx.delete_where("assessments", job_id=job_id)
            await tx.delete("jobs", job_id)
        logger.info(
            f"Job {job_id} deleted with {removed['candidates']} candidates "
            f"and {removed['assessments']} assessments",
            extra={"table": "jobs", "record_id": job_id},
        )
        return removed

    async def reorder_jobs(self, from_order: int, to_order: int) -> list[dict]:
        """Swap the order values of the jobs at from_order and to_order."""
        async with self._store.transaction() as tx:
            from_job = await tx.first("jobs", order=from_order)
            to_job = await tx.first("jobs", order=to_order)
            if from_job and to_job and from_job["id"] != to_job["id"]:
                await tx.update("jobs", from_job["id"], {"order": to_order})
                await tx.update("jobs", to_job["id"], {"order": from_order})
            else:
                logger.debug(f"Reorder {from_order}->{to_order} is a no-op")
            return await tx.find("jobs", order_by=JOB_ORDERING)

    async def _next_order(self, tx: Transaction) -> int:
        last = await tx.find("jobs", order_by="order", descending=True)
        return last[0]["order"] + 1 if last else 1
