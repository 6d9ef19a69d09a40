"""Timeline Logging — appends audit events inside the caller's transaction.

Invariants:
    - Events are only ever inserted here; nothing updates them
    - append_event() shares the transaction of the write it records, so a record
      and its event become visible together or not at all
"""

from talentflow.core.domain_types import TimelineEventType
from talentflow.core.records import create_timeline_event
from talentflow.infrastructure.store import Transaction


async def append_event(
    tx: Transaction,
    candidate_id: str,
    event_type: TimelineEventType,
    title: str,
    description: str,
    metadata: dict | None = None,
) -> dict:
    event = create_timeline_event({
        "candidate_id": candidate_id,
        "type": event_type.value,
        "title": title,
        "description": description,
        "metadata": metadata or {},
    })
    return await tx.insert("timeline_events", event)
