"""Local Store — transactional, indexed document storage over async SQLAlchemy.

Invariants:
    - Every read and write happens inside transaction(); all writes of one
      transaction commit together or roll back together
    - Transactions are serialized by an asyncio.Lock: no caller observes another
      caller's half-applied transaction
    - Timestamps are stamped only by the write hooks (db/timestamps.py); any
      caller-supplied created_at/updated_at/applied_at is discarded
    - All SQLAlchemy exceptions mapped to StorageError (core/errors.py)
    - Documents are plain dicts; keys the schema doesn't name live in `extra`

Design Decisions:
    - Explicit object with open()/close(), not a module singleton: tests build a
      fresh in-memory store per test case
    - expire_on_commit=False: prevents lazy-load issues in async context
    - StaticPool for in-memory SQLite: every session must see the same database
    - Lock acquisition is bounded: a stuck writer surfaces as StorageError(timeout)
"""

import asyncio
import logging
import uuid
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncIterator, Callable, Iterable

from sqlalchemy import delete, func, inspect as sa_inspect, select
from sqlalchemy.exc import DBAPIError, IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool

from talentflow.core.errors import StorageError
from talentflow.db.base import Base
from talentflow.db.timestamps import register_timestamp_hooks
from talentflow.models import TABLES
from talentflow.models.store_meta import StoreMeta

logger = logging.getLogger(__name__)

# Bump when a table or index changes shape; additive changes are applied by create_all
SCHEMA_VERSION = 1

_TIMESTAMP_KEYS = frozenset({"created_at", "updated_at", "applied_at"})


def _model(table: str) -> type[Base]:
    try:
        return TABLES[table]
    except KeyError:
        raise StorageError(f"Unknown table '{table}'", "lookup", "io") from None


@lru_cache(maxsize=None)
def _fields(model: type[Base]) -> dict[str, str]:
    """Document key -> mapped attribute for every declared column except `extra`."""
    reverse = {attr: key for key, attr in model.__field_aliases__.items()}
    return {
        reverse.get(attr.key, attr.key): attr.key
        for attr in sa_inspect(model).column_attrs
        if attr.key != "extra"
    }


def _classify(exc: DBAPIError) -> str:
    text = str(exc.orig or exc).lower()
    if "locked" in text or "busy" in text or "timeout" in text:
        return "timeout"
    if "full" in text or "quota" in text:
        return "quota"
    if "not a database" in text or "malformed" in text or "corrupt" in text:
        return "corruption"
    return "io"


class Transaction:
    """Table-level operations bound to one open session. Created by LocalStore."""

    def __init__(self, session: AsyncSession):
        self._session = session

    # ─── Reads ───────────────────────────────────────────────────

    async def get(self, table: str, record_id: str) -> dict | None:
        row = await self._session.get(_model(table), record_id)
        return _to_document(row) if row else None

    async def first(self, table: str, **criteria) -> dict | None:
        rows = await self._select(table, criteria, order_by=None, limit=1)
        return rows[0] if rows else None

    async def find(
        self, table: str, *,
        order_by: str | Iterable[str] | None = None,
        descending: bool = False,
        **criteria,
    ) -> list[dict]:
        """Index lookup: every criterion is an equality (list value means IN)."""
        return await self._select(table, criteria, order_by, descending=descending)

    async def scan(
        self, table: str,
        predicate: Callable[[dict], bool] | None = None, *,
        order_by: str | Iterable[str] | None = None,
        descending: bool = False,
    ) -> list[dict]:
        """Full-table scan in index order, filtered in Python by predicate."""
        documents = await self._select(table, {}, order_by, descending=descending)
        if predicate is None:
            return documents
        return [d for d in documents if predicate(d)]

    async def count(self, table: str, **criteria) -> int:
        model = _model(table)
        query = select(func.count()).select_from(model)
        query = query.where(*_conditions(model, criteria))
        result = await self._session.execute(query)
        return result.scalar_one()

    # ─── Writes ──────────────────────────────────────────────────

    async def insert(self, table: str, document: dict) -> dict:
        """Insert a new document; the store assigns an id when none is given."""
        model = _model(table)
        fields = dict(document)
        row = model(id=fields.pop("id", None) or str(uuid.uuid4()), extra={})
        _apply(row, fields, merge_extra=False)
        self._session.add(row)
        await self._session.flush()
        logger.debug(f"Inserted {table}/{row.id}", extra={"table": table, "record_id": row.id})
        return _to_document(row)

    async def put(self, table: str, document: dict) -> dict:
        """Upsert by id: replace the stored document if the id exists, else insert."""
        record_id = document.get("id")
        row = await self._session.get(_model(table), record_id) if record_id else None
        if row is None:
            return await self.insert(table, document)
        fields = {k: v for k, v in document.items() if k != "id"}
        _apply(row, fields, merge_extra=False)
        await self._session.flush()
        return _to_document(row)

    async def update(self, table: str, record_id: str, patch: dict) -> dict | None:
        """Apply a partial patch. Returns the updated document, or None if absent."""
        row = await self._session.get(_model(table), record_id)
        if row is None:
            return None
        fields = {k: v for k, v in patch.items() if k != "id"}
        _apply(row, fields, merge_extra=True)
        await self._session.flush()
        return _to_document(row)

    async def delete(self, table: str, record_id: str) -> bool:
        row = await self._session.get(_model(table), record_id)
        if row is None:
            return False
        await self._session.delete(row)
        await self._session.flush()
        return True

    async def delete_where(self, table: str, **criteria) -> int:
        """Delete every row matching the criteria. Returns the number deleted."""
        model = _model(table)
        if any(isinstance(v, (list, tuple, set, frozenset)) and not v for v in criteria.values()):
            return 0
        stmt = delete(model).where(*_conditions(model, criteria))
        result = await self._session.execute(
            stmt.execution_options(synchronize_session="auto"),
        )
        return result.rowcount or 0

    # ─── Internals ───────────────────────────────────────────────

    async def _select(
        self, table: str, criteria: dict,
        order_by: str | Iterable[str] | None,
        descending: bool = False,
        limit: int | None = None,
    ) -> list[dict]:
        model = _model(table)
        query = select(model).where(*_conditions(model, criteria))
        if order_by:
            keys = [order_by] if isinstance(order_by, str) else list(order_by)
            columns = [getattr(model, _attribute(model, k)) for k in keys]
            query = query.order_by(
                *(c.desc() if descending else c.asc() for c in columns),
            )
        if limit is not None:
            query = query.limit(limit)
        result = await self._session.execute(query)
        return [_to_document(row) for row in result.scalars().all()]


def _attribute(model: type[Base], key: str) -> str:
    try:
        return _fields(model)[key]
    except KeyError:
        raise StorageError(
            f"'{key}' is not an indexed field of {model.__tablename__}",
            "query", "io",
        ) from None


def _conditions(model: type[Base], criteria: dict) -> list:
    conditions = []
    for key, value in criteria.items():
        column = getattr(model, _attribute(model, key))
        if isinstance(value, (list, tuple, set, frozenset)):
            conditions.append(column.in_(list(value)))
        elif value is None:
            conditions.append(column.is_(None))
        else:
            conditions.append(column == value)
    return conditions


def _apply(row: Base, fields: dict, merge_extra: bool) -> None:
    known = _fields(type(row))
    extra = dict(row.extra or {}) if merge_extra else {}
    for key, value in fields.items():
        if key in _TIMESTAMP_KEYS:
            continue
        if key in known:
            setattr(row, known[key], value)
        else:
            extra[key] = value
    # reassign so the JSON column is flagged dirty
    row.extra = extra


def _to_document(row: Base) -> dict:
    document = dict(row.extra or {})
    for key, attr in _fields(type(row)).items():
        document[key] = getattr(row, attr)
    return document


class LocalStore:
    """Owns the async engine, the session factory and the transaction lock."""

    def __init__(
        self,
        database_url: str,
        *,
        name: str = "TalentFlowDB",
        echo: bool = False,
        transaction_timeout: float = 30.0,
    ):
        register_timestamp_hooks()
        self.database_url = database_url
        self.name = name
        self._echo = echo
        self._transaction_timeout = transaction_timeout
        self._engine = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None
        self._lock = asyncio.Lock()

    @property
    def is_open(self) -> bool:
        return self._session_factory is not None

    async def open(self) -> None:
        """Create the engine, the tables, and verify the persisted schema version."""
        if self.is_open:
            return
        kwargs: dict = {"echo": self._echo}
        if ":memory:" in self.database_url or self.database_url.endswith("://"):
            kwargs["poolclass"] = StaticPool
            kwargs["connect_args"] = {"check_same_thread": False}
        self._engine = create_async_engine(self.database_url, **kwargs)
        self._session_factory = async_sessionmaker(
            self._engine, class_=AsyncSession, expire_on_commit=False,
        )
        try:
            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            await self._verify_identity()
        except SQLAlchemyError as e:
            await self.close()
            logger.error(f"Store open failed: {e}", extra={"operation": "open"})
            raise StorageError("Could not open local store", "open", "io") from e
        except StorageError:
            await self.close()
            raise
        logger.info(f"Store '{self.name}' opened (schema v{SCHEMA_VERSION})")

    async def close(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._session_factory = None

    async def __aenter__(self) -> "LocalStore":
        await self.open()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[Transaction]:
        """Provide a transaction with commit on success and rollback on any exception."""
        if not self.is_open:
            raise StorageError("Store is not open", "transaction", "closed")
        try:
            await asyncio.wait_for(
                self._lock.acquire(), timeout=self._transaction_timeout,
            )
        except asyncio.TimeoutError:
            raise StorageError(
                f"Waited {self._transaction_timeout}s for the store",
                "transaction", "timeout",
            ) from None
        try:
            async with self._session_factory() as session:
                try:
                    yield Transaction(session)
                    await session.commit()
                except IntegrityError as e:
                    await session.rollback()
                    logger.error(f"Store integrity error: {e}", extra={"operation": "commit"})
                    raise StorageError(
                        "Integrity constraint violated", "commit", "integrity",
                    ) from e
                except DBAPIError as e:
                    await session.rollback()
                    reason = _classify(e)
                    logger.error(f"Store driver error ({reason}): {e}", extra={"operation": "execute"})
                    raise StorageError("Database driver error", "execute", reason) from e
                except SQLAlchemyError as e:
                    await session.rollback()
                    logger.error(f"SQLAlchemy error: {e}", extra={"operation": "unknown"})
                    raise StorageError("Database operation failed", "unknown") from e
                except Exception:
                    await session.rollback()
                    raise
        finally:
            self._lock.release()

    async def _verify_identity(self) -> None:
        async with self._session_factory() as session:
            result = await session.execute(select(StoreMeta))
            meta = {m.key: m.value for m in result.scalars().all()}
            stored_version = int(meta.get("schema_version", 0))
            if stored_version > SCHEMA_VERSION:
                raise StorageError(
                    f"Store schema v{stored_version} is newer than supported v{SCHEMA_VERSION}",
                    "open", "corruption",
                )
            if "name" in meta and meta["name"] != self.name:
                logger.warning(
                    f"Store name mismatch: expected '{self.name}', found '{meta['name']}'",
                )
            await session.merge(StoreMeta(key="name", value=meta.get("name", self.name)))
            await session.merge(StoreMeta(key="schema_version", value=str(SCHEMA_VERSION)))
            await session.commit()
