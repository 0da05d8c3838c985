"""Structured Logging: JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Timestamp is the record's creation time (UTC), not the formatting time
    - Upstream extras (upstream_path, status_code, duration_ms, ...) surfaced when present
    - At most one jokes_api handler on the root logger, however many apps start

Design Decisions:
    - JSONFormatter on stdlib logging: no extra dependency, full control
    - setup_logging replaces its own named handler: each lifespan re-applies
      level and format without duplicating output
"""

import logging
import json
from datetime import datetime, timezone

HANDLER_NAME = "jokes_api"
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_EXTRA_KEYS = (
    "error_code", "path", "upstream_path", "status_code", "duration_ms",
)


class JSONFormatter(logging.Formatter):
    """One JSON object per line: base fields plus known request/upstream extras."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update({
            key: record.__dict__[key]
            for key in _EXTRA_KEYS
            if record.__dict__.get(key) is not None
        })
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def _build_formatter(fmt: str) -> logging.Formatter:
    if fmt == "json":
        return JSONFormatter()
    return logging.Formatter(TEXT_FORMAT)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install (or replace) the application's root handler and set the root level."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
        existing.close()

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(_build_formatter(fmt))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
