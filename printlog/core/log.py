"""Logging setup: JSON lines on stdout for the ``printlog`` logger tree."""

import json
import logging
import sys
from datetime import datetime, timezone

LOGGER_NAME = "printlog"

# ``extra=`` keys passed by the store, the upload service and the HTTP layer
STRUCTURED_FIELDS = (
    "record_id",
    "count",
    "document",
    "path",
    "method",
    "status_code",
    "error_code",
)


class JsonFormatter(logging.Formatter):
    """
    One JSON object per line.

    ``ts`` is the moment the record was emitted (UTC). Known structured fields
    are copied through when a call site supplied them.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        entry.update(
            (field, getattr(record, field)) for field in STRUCTURED_FIELDS if hasattr(record, field)
        )
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stdout handler to the ``printlog`` logger; safe to call per app."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
    logger.propagate = False
    return logger
