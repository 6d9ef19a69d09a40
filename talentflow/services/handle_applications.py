"""Application Handlers — candidate-to-job applications and their status history.

Invariants:
    - At most one application per (candidate, job): a repeat raises
      DuplicateApplicationError before any write
    - job_title is snapshotted at apply time; reads prefer the live job title and
      fall back to the snapshot when the job is gone
    - Every status update writes one status_change event in the same transaction
    - The status summary is derived on every read, never stored
    - candidate_id and job_id never change after apply

Design Decisions:
    - Job is resolved before the candidate, so an unknown job reports first
    - Empty notes on a status update keep the previous notes
"""

import logging

from talentflow.config import Settings
from talentflow.core.application_summary import summarize_applications
from talentflow.core.domain_types import CandidateStage, TimelineEventType
from talentflow.core.errors import DuplicateApplicationError, NotFoundError, ValidationError
from talentflow.core.records import create_job_application
from talentflow.infrastructure.store import LocalStore, Transaction
from talentflow.schemas.activity import (
    ApplicationStatusUpdate, JobApplicationCreate, JobApplicationUpdate,
)
from talentflow.schemas.validation import parse
from talentflow.services.timeline import append_event

logger = logging.getLogger(__name__)

_FIXED_KEYS = ("candidate_id", "job_id")


async def _by_id(tx: Transaction, table: str, ids: set[str]) -> dict[str, dict]:
    if not ids:
        return {}
    return {record["id"]: record for record in await tx.find(table, id=sorted(ids))}


def _with_job(application: dict, jobs: dict[str, dict]) -> dict:
    job = jobs.get(application["job_id"])
    return {
        **application,
        "job_title": job["title"] if job else application["job_title"],
        "job_details": job,
    }


class ApplicationHandlers:

    def __init__(self, store: LocalStore, settings: Settings):
        self._store = store
        self._settings = settings

    # ─── Writes ──────────────────────────────────────────────────

    async def create_job_application(self, data: dict) -> dict:
        fields = parse(JobApplicationCreate, data)
        async with self._store.transaction() as tx:
            application = await self._apply(tx, fields)
        logger.info(
            f"Application created: {application['job_title']}",
            extra={
                "table": "job_applications", "record_id": application["id"],
                "candidate_id": application["candidate_id"], "job_id": application["job_id"],
            },
        )
        return application

    async def apply_candidate_to_job(self, candidate_id: str, job_id: str) -> dict:
        return await self.create_job_application({
            "candidate_id": candidate_id,
            "job_id": job_id,
            "status": CandidateStage.APPLIED.value,
        })

    async def update_job_application(self, application_id: str, patch: dict) -> dict:
        """Patch an application in place. Writes no timeline event."""
        changes = parse(JobApplicationUpdate, patch, partial=True)
        for key in _FIXED_KEYS:
            changes.pop(key, None)
        async with self._store.transaction() as tx:
            updated = await tx.update("job_applications", application_id, changes)
            if updated is None:
                raise NotFoundError("JobApplication", application_id)
            return updated

    async def update_job_application_status(
        self, application_id: str, new_status: str, notes: str = "",
    ) -> dict:
        fields = parse(ApplicationStatusUpdate, {"status": new_status, "notes": notes or ""})
        async with self._store.transaction() as tx:
            current = await tx.get("job_applications", application_id)
            if current is None:
                raise NotFoundError("JobApplication", application_id)
            kept_notes = fields["notes"] or current["notes"]
            updated = await tx.update("job_applications", application_id, {
                "status": fields["status"], "notes": kept_notes,
            })
            await append_event(
                tx, current["candidate_id"], TimelineEventType.STATUS_CHANGE,
                f"Status changed to {fields['status']}",
                f"Application status changed from {current['status']} to {fields['status']}",
                {
                    "job_id": current["job_id"],
                    "application_id": application_id,
                    "old_status": current["status"],
                    "new_status": fields["status"],
                    "notes": kept_notes,
                },
            )
        return updated

    async def _apply(self, tx: Transaction, fields: dict) -> dict:
        job = await tx.get("jobs", fields["job_id"])
        if job is None:
            raise NotFoundError("Job", fields["job_id"])
        if await tx.get("candidates", fields["candidate_id"]) is None:
            raise NotFoundError("Candidate", fields["candidate_id"])
        existing = await tx.first(
            "job_applications",
            candidate_id=fields["candidate_id"], job_id=fields["job_id"],
        )
        if existing is not None:
            raise DuplicateApplicationError(fields["candidate_id"], fields["job_id"])
        record = create_job_application({
            **fields, "job_title": fields.get("job_title") or job["title"],
        })
        if not fields.get("id"):
            record.pop("id")
        application = await tx.insert("job_applications", record)
        await append_event(
            tx, application["candidate_id"], TimelineEventType.JOB_APPLICATION,
            f"Applied for {application['job_title']}",
            f"Candidate applied for the {application['job_title']} position",
            {
                "job_id": application["job_id"],
                "application_id": application["id"],
                "status": application["status"],
            },
        )
        return application

    # ─── Reads ───────────────────────────────────────────────────

    async def get_candidate_job_applications(self, candidate_id: str) -> list[dict]:
        """Applications of one candidate, each with live job_title and job_details."""
        async with self._store.transaction() as tx:
            return await self._enriched_for_candidate(tx, candidate_id)

    async def get_job_applications_by_status(self, status: str) -> list[dict]:
        try:
            status = CandidateStage(status).value
        except ValueError:
            raise ValidationError(f"Unknown application status '{status}'", "status") from None
        async with self._store.transaction() as tx:
            applications = await tx.find(
                "job_applications", status=status, order_by="applied_at",
            )
            jobs = await _by_id(tx, "jobs", {a["job_id"] for a in applications})
            candidates = await _by_id(
                tx, "candidates", {a["candidate_id"] for a in applications},
            )
        return [
            {**_with_job(a, jobs), "candidate_details": candidates.get(a["candidate_id"])}
            for a in applications
        ]

    async def get_candidate_job_status(self, candidate_id: str) -> dict:
        async with self._store.transaction() as tx:
            applications = await self._enriched_for_candidate(tx, candidate_id)
        return {
            "applications": applications,
            "status_summary": summarize_applications(applications),
        }

    async def _enriched_for_candidate(self, tx: Transaction, candidate_id: str) -> list[dict]:
        applications = await tx.find(
            "job_applications", candidate_id=candidate_id, order_by="applied_at",
        )
        jobs = await _by_id(tx, "jobs", {a["job_id"] for a in applications})
        return [_with_job(a, jobs) for a in applications]
