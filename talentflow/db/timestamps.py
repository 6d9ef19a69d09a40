"""Timestamp Write Hooks — the only code that writes created/updated/applied timestamps.

Invariants:
    - Hooks fire synchronously inside the flush for every insert and update
    - Columns stamped are declared per model (__stamp_on_insert__, __stamp_on_update__)
    - Caller-supplied timestamp values are overwritten, never trusted

Design Decisions:
    - Mapper events on Base with propagate=True: one registration covers every table
    - register_timestamp_hooks() is explicit and idempotent: the store calls it on
      construction instead of relying on import side effects
"""

from sqlalchemy import event

from talentflow.db.base import Base, utcnow


def _stamp_on_insert(mapper, connection, target) -> None:
    now = utcnow()
    for column in getattr(target, "__stamp_on_insert__", ()):
        setattr(target, column, now)


def _stamp_on_update(mapper, connection, target) -> None:
    now = utcnow()
    for column in getattr(target, "__stamp_on_update__", ()):
        setattr(target, column, now)


def register_timestamp_hooks() -> None:
    if event.contains(Base, "before_insert", _stamp_on_insert):
        return
    event.listen(Base, "before_insert", _stamp_on_insert, propagate=True)
    event.listen(Base, "before_update", _stamp_on_update, propagate=True)
