"""
Logging setup for the Mushaf service.

JSON records in production, human-readable lines in development. Call
``setup_logging`` once at startup; modules log through
``logging.getLogger(__name__)``.
"""

import json
import logging
from datetime import datetime, timezone

# Extra attributes surfaced in JSON records when a log call provides them
EXTRA_FIELDS = ("error_code", "path", "status_code", "surahs", "ayahs", "source")

_HANDLER_NAME = "mushaf"


class JSONFormatter(logging.Formatter):
    """Format records as one JSON object per line."""

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
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """
    Configure the root logger.

    Calling it again replaces the handler installed by a previous call
    instead of stacking another one.

    Args:
        level: Log level name
        fmt: "json" or "text"

    Returns:
        The installed handler
    """
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
