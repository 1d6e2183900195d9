"""Structured JSON logging for outfit generation requests."""

from __future__ import annotations

import contextlib
import contextvars
import json
import logging
import re
import time
import uuid
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional

CORRELATION_ID: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar("correlation_id", default=None)

# Attributes every LogRecord carries; anything else on a record came in via ``extra``.
_RECORD_ATTRIBUTES = frozenset(vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))) | {
    "message",
    "asctime",
}
_SENSITIVE_KEYS = frozenset({"image_ref", "photo_url", "user_id", "email"})
_EMAIL = re.compile(r"[\w.\-]+@[\w.\-]+")

LOGGER = logging.getLogger(__name__)


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        message = record.getMessage()
        document: Dict[str, Any] = {
            "ts": self.formatTime(record, "%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "event": getattr(record, "event", message),
            "message": message,
            "correlation_id": getattr(record, "correlation_id", None) or CORRELATION_ID.get(),
        }
        extras = {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRIBUTES and key not in document
        }
        document.update(redact_for_log(extras))
        if record.exc_info:
            document["exc"] = self.formatException(record.exc_info)
        return json.dumps(document, default=str)


def configure_logging(level: int | str = "INFO") -> None:
    """Send all records to stderr as JSON at ``level``."""

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level)


def redact_for_log(value: Any) -> Any:
    """Mask image references, URLs and email addresses before they reach a log line."""

    if isinstance(value, dict):
        return {
            key: "[redacted]" if key in _SENSITIVE_KEYS else redact_for_log(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [redact_for_log(item) for item in value]
    if isinstance(value, str):
        if value.lower().startswith(("http://", "https://")):
            return "[redacted-url]"
        return _EMAIL.sub("[redacted-email]", value)
    if value is None or isinstance(value, (bool, int, float)):
        return value
    return str(value)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    """Emit ``event`` with ``fields`` attached as structured extras."""

    exc_info = fields.pop("exc_info", None)
    correlation_id = fields.pop("correlation_id", None) or CORRELATION_ID.get()
    logger.log(
        level,
        event,
        exc_info=exc_info,
        extra={"event": event, "correlation_id": correlation_id, **redact_for_log(fields)},
    )


@contextlib.contextmanager
def correlation_context(correlation_id: str | None = None) -> Iterator[str]:
    """Bind a correlation id to every record logged inside the block."""

    token = CORRELATION_ID.set(correlation_id or uuid.uuid4().hex)
    try:
        yield CORRELATION_ID.get()
    finally:
        CORRELATION_ID.reset(token)


@dataclass
class GenerationTrace:
    """Outcome of one generation request, filled in while it runs."""

    vibe: Any
    weather: Any
    correlation_id: str
    status: str = "unknown"
    reason: Optional[str] = None
    attempts: Optional[int] = None

    def record(self, response: Dict[str, Any]) -> None:
        self.status = str(response.get("status", "unknown"))
        self.reason = response.get("reason")
        self.attempts = response.get("attempts")


@contextlib.contextmanager
def generation_context(vibe: Any, weather: Any, logger: logging.Logger = LOGGER) -> Iterator[GenerationTrace]:
    """Log one ``generation_started`` and one ``generation_finished`` event around a request.

    The finish event carries whatever the caller recorded on the trace: status,
    failure reason and the number of sampling attempts.
    """

    with correlation_context() as correlation_id:
        trace = GenerationTrace(vibe=vibe, weather=weather, correlation_id=correlation_id)
        started = time.perf_counter()
        log_event(logger, logging.INFO, "generation_started", vibe=vibe, weather=weather)
        try:
            yield trace
        except Exception:
            trace.status = "error"
            raise
        finally:
            log_event(
                logger,
                logging.INFO,
                "generation_finished",
                vibe=vibe,
                weather=weather,
                status=trace.status,
                reason=trace.reason,
                attempts=trace.attempts,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )


__all__ = [
    "JsonFormatter",
    "GenerationTrace",
    "configure_logging",
    "correlation_context",
    "generation_context",
    "log_event",
    "redact_for_log",
]
