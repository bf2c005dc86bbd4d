"""
AI FinTech Insights - Logging
=============================
One stdout handler on the root logger, emitting JSON lines by default and
short console lines for local work.

Environment:
    LOG_LEVEL   DEBUG | INFO | WARNING | ERROR | CRITICAL (default INFO)
    LOG_FORMAT  json | console (default: console in debug mode, json otherwise)

Request-scoped fields are bound by the API middleware through `LogContext`
and copied into every record emitted while that request is served.

Usage:
    from src.logging_config import get_logger, log_event

    logger = get_logger(__name__)
    logger.info("Agent added", extra={"agent_id": "ledgerly"})

    log_event("collection_seeded", collection="agents", count=8)
"""

from __future__ import annotations

import json
import logging
import os
import sys
import threading
import time
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from src.config import settings

_HANDLER_MARK = "_fintech_insights"

# Attributes every LogRecord carries; anything else arrived through `extra=`
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogContext:
    """Per-thread fields describing the request being served."""

    _local = threading.local()
    _fields = ("request_id", "client_ip", "endpoint")

    @classmethod
    def bind(cls, **fields: str | None) -> None:
        for name, value in fields.items():
            if name not in cls._fields:
                raise ValueError(f"Unknown log context field {name!r}")
            setattr(cls._local, name, value)

    @classmethod
    def clear(cls) -> None:
        for name in cls._fields:
            setattr(cls._local, name, None)

    @classmethod
    def current(cls) -> dict[str, str]:
        """Bound fields; unset ones are left out."""
        values = {name: getattr(cls._local, name, None) for name in cls._fields}
        return {name: value for name, value in values.items() if value is not None}


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {k: v for k, v in vars(record).items() if k not in _RECORD_ATTRS and not k.startswith("_")}


class StructuredFormatter(logging.Formatter):
    """One JSON object per record: fixed keys, then request context, then `extra` fields."""

    def __init__(self, *, service_name: str = "fintech-insights", environment: str = "production") -> None:
        super().__init__()
        self.service_name = service_name
        self.environment = environment

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
            "environment": self.environment,
            "location": f"{record.module}:{record.lineno}",
        }
        entry.update(LogContext.current())
        entry.update(_extra_fields(record))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str, ensure_ascii=False)


class ConsoleFormatter(logging.Formatter):
    """`HH:MM:SS.mmm LEVEL [request-id] logger: message key=value ...`"""

    def format(self, record: logging.LogRecord) -> str:
        clock = datetime.fromtimestamp(record.created, tz=timezone.utc).strftime("%H:%M:%S.%f")[:-3]
        request_id = LogContext.current().get("request_id", "-")
        line = f"{clock} {record.levelname:<8} [{request_id}] {record.name}: {record.getMessage()}"
        extras = " ".join(f"{key}={value}" for key, value in _extra_fields(record).items())
        if extras:
            line = f"{line} {extras}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def _resolve_level(level: str | int | None) -> int:
    if isinstance(level, int):
        return level
    name = (level or os.environ.get("LOG_LEVEL") or "INFO").upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def _resolve_format(log_format: str | None) -> str:
    chosen = (log_format or os.environ.get("LOG_FORMAT") or "").lower()
    if chosen in ("json", "console"):
        return chosen
    return "console" if settings.debug_mode else "json"


_configured = False


def configure_logging(
    *,
    level: str | int | None = None,
    log_format: str | None = None,
    service_name: str = "fintech-insights",
    environment: str | None = None,
) -> logging.Handler:
    """
    Install (or replace) the service's handler on the root logger.

    Handlers installed by other code are left alone. Returns the new handler.
    """
    global _configured

    root = logging.getLogger()
    root.setLevel(_resolve_level(level))
    for handler in [h for h in root.handlers if getattr(h, _HANDLER_MARK, False)]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    setattr(handler, _HANDLER_MARK, True)
    if _resolve_format(log_format) == "json":
        env = environment or ("development" if settings.debug_mode else "production")
        handler.setFormatter(StructuredFormatter(service_name=service_name, environment=env))
    else:
        handler.setFormatter(ConsoleFormatter())
    root.addHandler(handler)

    _configured = True
    return handler


def get_logger(name: str) -> logging.Logger:
    """`logging.getLogger`, configuring the root handler on first use."""
    if not _configured:
        configure_logging()
    return logging.getLogger(name)


def log_event(event_name: str, level: str | LogLevel = LogLevel.INFO, **fields: Any) -> None:
    """Log a named event whose fields become top-level keys of the JSON record."""
    name = level.value if isinstance(level, LogLevel) else str(level).upper()
    get_logger("event").log(_resolve_level(name), event_name, extra=fields)


class PerformanceTracker:
    """
    Time a block and log `<operation>_completed`, or `<operation>_failed` if it raised.

    Example:
        with PerformanceTracker("seed_store"):
            seed_store(store)
    """

    def __init__(self, operation: str, **fields: Any) -> None:
        self.operation = operation
        self.fields = fields
        self.duration_ms: float | None = None
        self._start = 0.0

    def __enter__(self) -> PerformanceTracker:
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.duration_ms = round((time.perf_counter() - self._start) * 1000, 2)
        fields = {**self.fields, "duration_ms": self.duration_ms}
        logger = get_logger("performance")
        if exc_type is None:
            logger.info("%s_completed", self.operation, extra=fields)
        else:
            logger.warning("%s_failed", self.operation, extra={**fields, "error": str(exc)})
        return False
