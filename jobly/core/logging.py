"""Logging setup.

Production gets one JSON object per line; development gets coloured,
human-readable lines. ``LOG_FORMAT=json|console`` overrides the choice.
"""

import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from typing import Any, Optional

from .config import settings

# Attributes every LogRecord carries; anything else arrived through ``extra=``.
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime", "taskName"}

QUIET_LOGGERS = {
    "sqlalchemy.engine": logging.WARNING,
    "passlib": logging.ERROR,
    "uvicorn.access": logging.WARNING,
}


def _jsonable(value: Any) -> Any:
    try:
        json.dumps(value)
    except (TypeError, ValueError):
        return str(value)
    return value


def extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Fields attached to ``record`` via ``extra=``, made JSON-safe."""
    return {
        key: _jsonable(value)
        for key, value in record.__dict__.items()
        if key not in _RECORD_ATTRS and not key.startswith("_")
    }


class JSONFormatter(logging.Formatter):
    """Render a record as a single JSON object.

    Values passed with ``extra=`` are nested under ``"extra"`` so audit events
    and request context stay queryable downstream.
    """

    def __init__(self, include_extra: bool = True) -> None:
        super().__init__()
        self.include_extra = include_extra

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
            "line": record.lineno,
        }
        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            entry["exception"] = {
                "type": getattr(exc_type, "__name__", None),
                "message": str(exc_value) if exc_value else None,
                "traceback": traceback.format_exception(*record.exc_info),
            }
        if self.include_extra:
            extra = extra_fields(record)
            if extra:
                entry["extra"] = extra
        return json.dumps(entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """``time - LEVEL - logger - message`` with the level coloured."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self) -> None:
        super().__init__(fmt="%(asctime)s - %(levelname)s - %(name)s - %(message)s")

    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        return datetime.fromtimestamp(record.created, tz=timezone.utc).strftime("%Y-%m-%d %H:%M:%S")

    def formatMessage(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        reset = self.RESET if color else ""
        return (
            f"{record.asctime} - {color}{record.levelname:8}{reset} - "
            f"{record.name} - {record.message}"
        )


def build_formatter() -> logging.Formatter:
    chosen = (settings.log_format or "").lower()
    if chosen not in ("json", "console"):
        chosen = "json" if settings.is_production else "console"
    return JSONFormatter() if chosen == "json" else ConsoleFormatter()


def setup_logging() -> None:
    """Install a single stdout handler on the root logger.

    Safe to call more than once; earlier handlers are replaced.
    """
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(build_formatter())
    handler.setLevel(level)

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)

    for name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)

