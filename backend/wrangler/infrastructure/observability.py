"""Structured Logging — formatters and setup for the plugin's log sink.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Request context fields (status, category, host, request_uri, method, query) surfaced when present
    - JSON format in production; key=value text otherwise, in CONTEXT_FIELDS order

Design Decisions:
    - setup_logging called once on startup via lifespan
    - Context passed through `extra=` so call sites stay plain logging calls
"""

import logging
import json
from datetime import datetime, timezone

CONTEXT_FIELDS = (
    "status", "error_code", "category", "host", "request_uri", "method", "query",
    "user_id", "team_id",
)


def context_fields(record: logging.LogRecord) -> dict:
    """Context values attached to the record, skipping absent ones."""
    return {
        key: record.__dict__[key]
        for key in CONTEXT_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **context_fields(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class KeyValueFormatter(logging.Formatter):
    """Human-readable line with context appended as key=value pairs."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        pairs = " ".join(
            f"{key}={json.dumps(value, ensure_ascii=False) if isinstance(value, str) else value}"
            for key, value in context_fields(record).items()
        )
        if not pairs:
            return line
        # Traceback, when present, stays on the lines after the first
        first, sep, rest = line.partition("\n")
        return f"{first} {pairs}{sep}{rest}"


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(KeyValueFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
