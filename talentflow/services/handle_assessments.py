"""Assessment Handlers — assessment CRUD and candidate responses.

Invariants:
    - An assessment always belongs to an existing job
    - At most one response per (candidate, assessment); a repeat is a DuplicateError
    - Answers are keyed by question ids of the answered assessment
    - delete_assessment removes its responses in the same transaction

Design Decisions:
    - Sections are replaced wholesale on update (the builder saves the whole tree)
    - Caller-supplied id means upsert, same as jobs
"""

import logging

from talentflow.config import Settings
from talentflow.core.domain_types import TimelineEventType
from talentflow.core.errors import DuplicateError, NotFoundError, ValidationError
from talentflow.core.records import (
    create_assessment, create_assessment_response, create_section,
)
from talentflow.infrastructure.store import LocalStore, Transaction
from talentflow.schemas.activity import AssessmentResponseCreate
from talentflow.schemas.assessment import AssessmentCreate, AssessmentUpdate
from talentflow.schemas.validation import parse
from talentflow.services.timeline import append_event

logger = logging.getLogger(__name__)


async def _require(tx: Transaction, table: str, resource_type: str, record_id: str) -> dict:
    record = await tx.get(table, record_id)
    if record is None:
        raise NotFoundError(resource_type, record_id)
    return record


def _question_ids(assessment: dict) -> set[str]:
    return {
        q["id"]
        for section in assessment.get("sections") or []
        for q in section.get("questions") or []
    }


class AssessmentHandlers:
    """Assessment definitions."""

    def __init__(self, store: LocalStore, settings: Settings):
        self._store = store
        self._settings = settings

    async def list_assessments(self) -> list[dict]:
        async with self._store.transaction() as tx:
            return await tx.find("assessments", order_by="created_at")

    async def get_assessment_by_id(self, assessment_id: str) -> dict | None:
        async with self._store.transaction() as tx:
            return await tx.get("assessments", assessment_id)

    async def get_assessment_by_job_id(self, job_id: str) -> dict | None:
        async with self._store.transaction() as tx:
            return await tx.first("assessments", job_id=job_id)

    async def create_assessment(self, data: dict) -> dict:
        fields = parse(AssessmentCreate, data)
        async with self._store.transaction() as tx:
            await _require(tx, "jobs", "Job", fields["job_id"])
            assessment = create_assessment(fields)
            if fields.get("id"):
                saved = await tx.put("assessments", assessment)
            else:
                assessment.pop("id")
                saved = await tx.insert("assessments", assessment)
        logger.info(
            f"Assessment created: {saved['title']!r}",
            extra={"table": "assessments", "record_id": saved["id"], "job_id": saved["job_id"]},
        )
        return saved

    async def update_assessment(self, assessment_id: str, patch: dict) -> dict:
        changes = parse(AssessmentUpdate, patch, partial=True)
        if "sections" in changes:
            changes["sections"] = [create_section(s) for s in changes["sections"]]
        async with self._store.transaction() as tx:
            if changes.get("job_id"):
                await _require(tx, "jobs", "Job", changes["job_id"])
            updated = await tx.update("assessments", assessment_id, changes)
            if updated is None:
                raise NotFoundError("Assessment", assessment_id)
            return updated

    async def delete_assessment(self, assessment_id: str) -> int:
        """Delete an assessment and its responses. Returns the number of responses removed."""
        async with self._store.transaction() as tx:
            await _require(tx, "assessments", "Assessment", assessment_id)
            responses = await tx.delete_where(
                "assessment_responses", assessment_id=assessment_id,
            )
            await tx.delete("assessments", assessment_id)
        logger.info(
            f"Assessment {assessment_id} deleted with {responses} responses",
            extra={"table": "assessments", "record_id": assessment_id, "count": responses},
        )
        return responses


class AssessmentResponseHandlers:
    """Candidate submissions against an assessment."""

    def __init__(self, store: LocalStore, settings: Settings):
        self._store = store
        self._settings = settings

    async def create_assessment_response(self, data: dict) -> dict:
        fields = parse(AssessmentResponseCreate, data)
        candidate_id, assessment_id = fields["candidate_id"], fields["assessment_id"]
        async with self._store.transaction() as tx:
            await _require(tx, "candidates", "Candidate", candidate_id)
            assessment = await _require(tx, "assessments", "Assessment", assessment_id)
            unknown = set(fields.get("answers") or {}) - _question_ids(assessment)
            if unknown:
                raise ValidationError(
                    f"Answers reference unknown questions: {sorted(unknown)}", "answers",
                )
            existing = await tx.first(
                "assessment_responses",
                candidate_id=candidate_id, assessment_id=assessment_id,
            )
            if existing is not None:
                raise DuplicateError(
                    "AssessmentResponse", f"{candidate_id}:{assessment_id}",
                )
            response = await tx.insert(
                "assessment_responses", create_assessment_response(fields),
            )
            await append_event(
                tx, candidate_id, TimelineEventType.ASSESSMENT_COMPLETED,
                "Assessment Completed",
                f"Completed {assessment['title'] or 'assessment'}",
                {"assessment_id": assessment_id, "response_id": response["id"]},
            )
        return response

    async def get_assessment_response(
        self, candidate_id: str, assessment_id: str,
    ) -> dict | None:
        async with self._store.transaction() as tx:
            return await tx.first(
                "assessment_responses",
                candidate_id=candidate_id, assessment_id=assessment_id,
            )
