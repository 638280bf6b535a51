"""
Logging for the archive service.

Every record is stamped with the request it was logged under and the
session identity serving that request, so a store mutation can be traced
back to the staff member who made it.

Usage:
    from museum_archive.logging_config import get_logger
    logger = get_logger(__name__)
    logger.info("Artifact added", extra={"artifact_id": artifact.id})
"""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Optional

# Set by RequestIdMiddleware for the duration of a request
request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

# Id of the session identity behind the current request; set when a bearer
# token resolves to the current session
session_user_var: ContextVar[Optional[str]] = ContextVar("session_user", default=None)

UNSET = "-"

# Context fields RequestContextFilter puts on every record
CONTEXT_FIELDS = ("request_id", "user_id")

# Attributes of a bare LogRecord; anything else arrived through extra=
_LOG_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime"}

# Chatty libraries held at WARNING whatever the service level
_QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "aiosqlite")


class RequestContextFilter(logging.Filter):
    """Stamp records with request_id and user_id from the request context."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get() or UNSET
        # An explicit extra={"user_id": ...} names the subject; keep it
        if getattr(record, "user_id", None) is None:
            record.user_id = session_user_var.get() or UNSET
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per record, for production log shipping."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in CONTEXT_FIELDS:
            value = getattr(record, field, UNSET)
            if value not in (None, UNSET):
                entry[field] = value

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key in _LOG_RECORD_ATTRS or key in CONTEXT_FIELDS or key in entry or value is None:
                continue
            entry[key] = value if _is_json_value(value) else str(value)

        return json.dumps(entry)


def _is_json_value(value: Any) -> bool:
    try:
        json.dumps(value)
    except (TypeError, ValueError):
        return False
    return True


def configure_logging(
    *,
    log_level: str = "INFO",
    environment: str = "development",
    debug: bool = False,
) -> None:
    """
    Install the single stderr handler on the root logger.

    Production gets JsonFormatter; anything else a one-line readable format
    showing the request and session identity. Calling again replaces the
    handler, so a reload does not duplicate output.
    """
    level = logging.DEBUG if debug else getattr(logging, log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.addFilter(RequestContextFilter())
    if environment == "production":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)-5s [%(name)s] req=%(request_id)s user=%(user_id)s %(message)s",
            datefmt="%H:%M:%S",
        ))

    root = logging.getLogger()
    root.setLevel(level)
    for existing in root.handlers[:]:
        root.removeHandler(existing)
    root.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
