"""TalentFlow Store — lifecycle entry point for host applications.

Invariants:
    - lifespan() opens exactly one LocalStore and always closes it on exit
    - Logging is configured before the store opens, so open/seed are logged
    - Seeding only ever touches an empty store

Design Decisions:
    - asynccontextmanager lifespan: the host owns the event loop and decides
      how long the service lives
    - Settings injectable for tests; defaults come from get_settings()
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from talentflow.config import Settings, get_settings
from talentflow.infrastructure.observability import setup_logging
from talentflow.infrastructure.store import LocalStore
from talentflow.services.record_service import RecordService
from talentflow.services.seed_generator import seed_if_empty

logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> LocalStore:
    return LocalStore(
        settings.database_url,
        name=settings.store_name,
        echo=settings.database_echo,
        transaction_timeout=settings.transaction_timeout_seconds,
    )


@asynccontextmanager
async def lifespan(settings: Settings | None = None) -> AsyncIterator[RecordService]:
    """Startup/shutdown lifecycle. Yields a ready RecordService."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)
    store = build_store(settings)
    await store.open()
    try:
        service = RecordService(store, settings)
        if settings.seed_on_startup:
            await seed_if_empty(service, settings)
        logger.info(f"TalentFlow store '{settings.store_name}' ready")
        yield service
    finally:
        await store.close()
        logger.info("TalentFlow store closed")
