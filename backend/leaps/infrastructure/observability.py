"""Structured Logging — formatters and one-shot setup for the payload service.

Invariants:
    - Every line carries timestamp (record time, UTC), level, logger and message
    - Payload context (activity_code, error_code, path, issue_count) appended when set
    - Payload bodies are never logged; only counts and codes
    - setup_logging is idempotent: a second call replaces the handler, never stacks one

Design Decisions:
    - stdlib logging with own formatters: no extra dependency, full control over keys
    - Text mode renders the same context as key=value pairs so both formats carry it
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_KEYS = ("activity_code", "error_code", "path", "issue_count")

_HANDLER_NAME = "leaps"


def _context(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key]
        for key in EXTRA_KEYS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_context(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class ContextTextFormatter(logging.Formatter):
    """Human-readable line with payload context as trailing key=value pairs."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _context(record)
        if context:
            line += " " + " ".join(f"{k}={v}" for k, v in context.items())
        return line


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install the service handler on the root logger."""
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else ContextTextFormatter())

    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
