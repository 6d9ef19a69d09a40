"""Note Handlers — candidate notes with @mention extraction."""

import logging

from talentflow.config import Settings
from talentflow.core.domain_types import TimelineEventType
from talentflow.core.errors import NotFoundError
from talentflow.core.records import create_note, extract_mentions
from talentflow.infrastructure.store import LocalStore
from talentflow.schemas.activity import NoteCreate, NoteUpdate
from talentflow.schemas.validation import parse
from talentflow.services.timeline import append_event

logger = logging.getLogger(__name__)


class NoteHandlers:

    def __init__(self, store: LocalStore, settings: Settings):
        self._store = store
        self._settings = settings

    async def create_note(self, data: dict) -> dict:
        """Insert a note and log a note_added event listing its mentions."""
        fields = parse(NoteCreate, data)
        async with self._store.transaction() as tx:
            if await tx.get("candidates", fields["candidate_id"]) is None:
                raise NotFoundError("Candidate", fields["candidate_id"])
            note = await tx.insert("notes", create_note(fields))
            mentions = extract_mentions(note["content"])
            await append_event(
                tx, note["candidate_id"], TimelineEventType.NOTE_ADDED,
                "Note Added",
                note["content"][:100],
                {"note_id": note["id"], "mentions": mentions},
            )
        logger.info(
            f"Note added with {len(mentions)} mentions",
            extra={"table": "notes", "record_id": note["id"], "candidate_id": note["candidate_id"]},
        )
        return note

    async def get_candidate_notes(self, candidate_id: str) -> list[dict]:
        async with self._store.transaction() as tx:
            return await tx.find(
                "notes", candidate_id=candidate_id,
                order_by="created_at", descending=True,
            )

    async def update_note(self, note_id: str, patch: dict) -> dict:
        changes = parse(NoteUpdate, patch, partial=True)
        changes.pop("candidate_id", None)
        async with self._store.transaction() as tx:
            updated = await tx.update("notes", note_id, changes)
            if updated is None:
                raise NotFoundError("Note", note_id)
            return updated

    async def delete_note(self, note_id: str) -> None:
        async with self._store.transaction() as tx:
            if not await tx.delete("notes", note_id):
                raise NotFoundError("Note", note_id)
