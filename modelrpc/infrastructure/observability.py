"""Structured Logging — JSON formatter and setup for client-side observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (model, operation, fault_code, status_code...) surfaced when present
    - JSON format for log shipping, human-readable otherwise

Design Decisions:
    - JSONFormatter over third-party libs: no extra dependency for one formatter
    - setup_logging called once by build_model_dispatch, never on import
"""

import logging
import json
from datetime import datetime, timezone


EXTRA_FIELDS = (
    "model", "operation", "endpoint", "error_code",
    "fault_code", "status_code", "duration_ms",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Attach one handler to the modelrpc logger. Returns it for later removal."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    package_logger = logging.getLogger("modelrpc")
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
