"""Structured Logging — JSON formatter and setup for the console shell.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (drill, error_code, attempt) surfaced when present
    - Logs go to stderr; stdout carries drill output only
"""

import json
import logging
import sys
from datetime import datetime, timezone


class JSONFormatter(logging.Formatter):
    """Format logs as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in ("drill", "error_code", "attempt"):
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class ConsoleHandler(logging.StreamHandler):
    """Stderr handler installed by setup_logging (replaced on re-setup)."""


def setup_logging(level: str = "WARNING", fmt: str = "text") -> None:
    """Configure root logging. Safe to call more than once."""
    handler = ConsoleHandler(sys.stderr)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    for existing in [h for h in logging.root.handlers if isinstance(h, ConsoleHandler)]:
        logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.WARNING))
