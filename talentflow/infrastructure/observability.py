"""Store Logging — one-line JSON or text records for every store event.

Invariants:
    - Each JSON line carries timestamp, level, logger and message
    - Record context (table, record_id, candidate_id, job_id, error_code,
      operation, count) is copied from `extra` only when set
    - At most one handler installed by this module on the root logger

Design Decisions:
    - stdlib logging + json: host applications attach their own handlers
    - Text format keeps table/record_id visible for local debugging
"""

import logging
import json
from datetime import datetime, timezone

RECORD_CONTEXT = (
    "table", "record_id", "candidate_id", "job_id",
    "error_code", "operation", "count",
)

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _context(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key]
        for key in RECORD_CONTEXT
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """Render a log record and its store context as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_context(record),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable line with the table/record suffix when present."""

    def __init__(self):
        super().__init__(TEXT_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _context(record)
        if "table" in context and "record_id" in context:
            line += f" [{context['table']}/{context['record_id']}]"
        return line


_handler: logging.Handler | None = None


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the store handler on the root logger, replacing a previous one."""
    global _handler
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    if _handler is not None:
        logging.root.removeHandler(_handler)
    _handler = handler
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
