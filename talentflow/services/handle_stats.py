"""Store-wide utilities — entity counts and a full wipe."""

import logging

from talentflow.config import Settings
from talentflow.infrastructure.store import LocalStore

logger = logging.getLogger(__name__)

# Children before parents
CLEAR_ORDER = (
    "timeline_events", "notes", "assessment_responses", "job_applications",
    "assessments", "candidates", "jobs",
)


class StatsHandlers:

    def __init__(self, store: LocalStore, settings: Settings):
        self._store = store
        self._settings = settings

    async def get_stats(self) -> dict:
        async with self._store.transaction() as tx:
            return {
                "jobs": await tx.count("jobs"),
                "candidates": await tx.count("candidates"),
                "assessments": await tx.count("assessments"),
            }

    async def clear_all_data(self) -> dict:
        """Empty every entity table in one transaction. Returns deleted-row counts."""
        async with self._store.transaction() as tx:
            removed = {table: await tx.delete_where(table) for table in CLEAR_ORDER}
        logger.warning(
            f"All data cleared: {sum(removed.values())} records",
            extra={"operation": "clear_all_data", "count": sum(removed.values())},
        )
        return removed
