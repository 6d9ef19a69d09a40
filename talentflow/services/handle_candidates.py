"""Candidate Handlers — list/get, create/update with stage events, cascade delete.

Invariants:
    - Every stage transition writes exactly one stage_change event, in the same
      transaction as the candidate write
    - A candidate's job_id, when set, resolves to an existing job
    - delete_candidate removes timeline events, notes, assessment responses and
      job applications together with the candidate

Design Decisions:
    - No transition graph: any stage may follow any other
    - A caller-supplied id that already exists is a DuplicateError, not an upsert:
      re-creating would write a second "Application Submitted" event
"""

import logging

from talentflow.config import Settings
from talentflow.core.domain_types import TimelineEventType
from talentflow.core.errors import DuplicateError, NotFoundError
from talentflow.core.queries import candidate_matches, paginate
from talentflow.core.records import create_candidate
from talentflow.infrastructure.store import LocalStore, Transaction
from talentflow.schemas.candidate import CandidateCreate, CandidateFilter, CandidateUpdate
from talentflow.schemas.validation import parse
from talentflow.services.timeline import append_event

logger = logging.getLogger(__name__)

CANDIDATE_OWNED_TABLES = (
    "timeline_events", "notes", "assessment_responses", "job_applications",
)


async def delete_candidate_records(tx: Transaction, candidate_ids: list[str]) -> dict:
    """Delete candidates and everything they own. Returns deleted-row counts per table."""
    removed = {table: 0 for table in CANDIDATE_OWNED_TABLES}
    removed["candidates"] = 0
    if not candidate_ids:
        return removed
    for table in CANDIDATE_OWNED_TABLES:
        removed[table] = await tx.delete_where(table, candidate_id=candidate_ids)
    removed["candidates"] = await tx.delete_where("candidates", id=candidate_ids)
    return removed


async def _require_job(tx: Transaction, job_id: str | None) -> None:
    if job_id and await tx.get("jobs", job_id) is None:
        raise NotFoundError("Job", job_id)


class CandidateHandlers:
    """Candidate operations — each public method is one transaction."""

    def __init__(self, store: LocalStore, settings: Settings):
        self._store = store
        self._settings = settings

    async def list_candidates(self, filters: dict | None = None) -> list[dict] | dict:
        """Candidates newest first; a page envelope when page and page_size are given."""
        f = parse(CandidateFilter, filters)
        criteria = {key: f[key] for key in ("stage", "job_id") if f.get(key)}
        async with self._store.transaction() as tx:
            candidates = await tx.find(
                "candidates", order_by="created_at", descending=True, **criteria,
            )
        candidates = [c for c in candidates if candidate_matches(c, f.get("search"))]
        if f.get("page") and f.get("page_size"):
            return paginate(candidates, f["page"], f["page_size"])
        return candidates

    async def get_candidate_by_id(self, candidate_id: str) -> dict | None:
        async with self._store.transaction() as tx:
            return await tx.get("candidates", candidate_id)

    async def create_candidate(self, data: dict) -> dict:
        fields = parse(CandidateCreate, data)
        async with self._store.transaction() as tx:
            await _require_job(tx, fields.get("job_id"))
            if fields.get("id") and await tx.get("candidates", fields["id"]):
                raise DuplicateError("Candidate", fields["id"])
            saved = await tx.insert("candidates", create_candidate(fields))
            await append_event(
                tx, saved["id"], TimelineEventType.STAGE_CHANGE,
                "Application Submitted",
                "Candidate applied for the position",
                {"stage": saved["stage"]},
            )
        logger.info(
            f"Candidate created: {saved['id']}",
            extra={"table": "candidates", "candidate_id": saved["id"], "job_id": saved["job_id"]},
        )
        return saved

    async def update_candidate(self, candidate_id: str, patch: dict) -> dict:
        changes = parse(CandidateUpdate, patch, partial=True)
        async with self._store.transaction() as tx:
            current = await tx.get("candidates", candidate_id)
            if current is None:
                raise NotFoundError("Candidate", candidate_id)
            await _require_job(tx, changes.get("job_id"))
            updated = await tx.update("candidates", candidate_id, changes)
            new_stage = changes.get("stage")
            if new_stage and new_stage != current["stage"]:
                await append_event(
                    tx, candidate_id, TimelineEventType.STAGE_CHANGE,
                    f"Stage Changed to {new_stage}",
                    f"Candidate moved from {current['stage']} to {new_stage}",
                    {"from_stage": current["stage"], "to_stage": new_stage},
                )
        return updated

    async def delete_candidate(self, candidate_id: str) -> dict:
        """Delete a candidate and everything it owns. Returns counts."""
        async with self._store.transaction() as tx:
            if await tx.get("candidates", candidate_id) is None:
                raise NotFoundError("Candidate", candidate_id)
            removed = await delete_candidate_records(tx, [candidate_id])
        logger.info(
            f"Candidate {candidate_id} deleted with {removed['timeline_events']} events, "
            f"{removed['notes']} notes and {removed['job_applications']} applications",
            extra={"table": "candidates", "candidate_id": candidate_id},
        )
        return removed

    async def get_candidate_timeline(self, candidate_id: str) -> list[dict]:
        async with self._store.transaction() as tx:
            return await tx.find(
                "timeline_events", candidate_id=candidate_id,
                order_by="created_at", descending=True,
            )
