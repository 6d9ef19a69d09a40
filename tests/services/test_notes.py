"""Notes — verifies mention extraction, timeline events and note CRUD."""

import pytest

from talentflow.core.errors import NotFoundError, ValidationError


async def test_create_note_logs_mentions(service, candidate):
    note = await service.create_note({
        "candidate_id": candidate["id"],
        "content": "Great call, @maria please schedule with @dev.lead",
    })
    events = [
        e for e in await service.get_candidate_timeline(candidate["id"])
        if e["type"] == "note_added"
    ]
    assert len(events) == 1
    assert events[0]["title"] == "Note Added"
    assert events[0]["metadata"] == {"note_id": note["id"], "mentions": ["maria", "dev.lead"]}


async def test_note_requires_existing_candidate(service):
    with pytest.raises(NotFoundError):
        await service.create_note({"candidate_id": "missing", "content": "hello"})


async def test_note_content_required(service, candidate):
    with pytest.raises(ValidationError):
        await service.create_note({"candidate_id": candidate["id"], "content": "   "})


async def test_update_and_delete_note(service, candidate):
    note = await service.create_note({"candidate_id": candidate["id"], "content": "draft"})
    updated = await service.update_note(note["id"], {"content": "final"})
    assert updated["content"] == "final"
    assert updated["candidate_id"] == candidate["id"]
    assert [n["content"] for n in await service.get_candidate_notes(candidate["id"])] == ["final"]

    await service.delete_note(note["id"])
    assert await service.get_candidate_notes(candidate["id"]) == []
    with pytest.raises(NotFoundError):
        await service.delete_note(note["id"])
    with pytest.raises(NotFoundError):
        await service.update_note(note["id"], {"content": "again"})
