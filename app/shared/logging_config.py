"""
Logging setup for the journaling service.

Production logs are JSON lines; ``ENVIRONMENT=development`` switches to a
single readable line per record. Both formats carry the request correlation
ID, and both pass ``extra`` fields through ``sanitize_for_logging`` so entry
text and prompts never reach the log stream.

Usage:
    setup_logging(service_name="mindjournal-service")

    logger = logging.getLogger("MindJournal.Journal")
    logger.info("Journal entry saved", extra={"entry_id": entry.id, "word_count": 7})

A JSON record looks like:
    {"timestamp": "2026-10-18T10:30:00.123456+00:00", "level": "INFO",
     "logger": "MindJournal.Journal", "message": "Journal entry saved",
     "service": "mindjournal-service", "correlation_id": "1f3a9c0e",
     "entry_id": "4f1c...", "word_count": 7}
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from app.core.logging_utils import sanitize_for_logging

# Present on every LogRecord; anything else arrived through ``extra``
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {
    "message", "asctime", "correlation_id",
}

# Client libraries that log every HTTP round trip at INFO
_QUIET_LOGGERS = ("httpx", "httpcore", "hpack", "anthropic", "postgrest", "supabase", "asyncio")


def record_extras(record: logging.LogRecord) -> Dict[str, Any]:
    """The ``extra`` fields of a record, sanitized."""
    extras = {
        key: value
        for key, value in vars(record).items()
        if key not in _RECORD_ATTRS and not key.startswith("_")
    }
    return sanitize_for_logging(extras) if extras else {}


class CorrelationIdFilter(logging.Filter):
    """Stamp each record with the correlation ID of the request it belongs to."""

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "correlation_id", None) is None:
            from app.shared.correlation import get_correlation_id
            record.correlation_id = get_correlation_id() or "-"
        return True


class JSONFormatter(logging.Formatter):
    def __init__(self, service_name: str = "mindjournal-service"):
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
        }

        correlation_id = getattr(record, "correlation_id", "-")
        if correlation_id != "-":
            payload["correlation_id"] = correlation_id

        payload.update(record_extras(record))

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


class HumanReadableFormatter(logging.Formatter):
    """``12:00:01 INFO [1f3a9c0e] MindJournal.Journal: Journal entry saved | word_count=7``"""

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        line = (
            f"{stamp} {record.levelname} [{getattr(record, 'correlation_id', '-')}] "
            f"{record.name}: {record.getMessage()}"
        )

        extras = record_extras(record)
        if extras:
            line += " | " + ", ".join(f"{key}={value}" for key, value in extras.items())

        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logging(
    service_name: str,
    level: Optional[str] = None,
    json_output: Optional[bool] = None,
) -> None:
    """
    Install a single stdout handler on the root logger.

    Args:
        service_name: Written into every JSON record.
        level: Overrides ``LOG_LEVEL`` (default INFO).
        json_output: Overrides the ``ENVIRONMENT`` switch; JSON unless the
            environment is ``development``.
    """
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_level = logging.getLevelName(level_name)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    environment = os.getenv("ENVIRONMENT", "production").lower()
    if json_output is None:
        json_output = environment != "development"

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter(service_name) if json_output else HumanReadableFormatter())
    handler.addFilter(CorrelationIdFilter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(log_level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("MindJournal.Startup").info(
        "Logging configured",
        extra={"log_level": level_name, "json_output": json_output, "environment": environment},
    )
