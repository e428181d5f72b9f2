"""
Structured Logging for DSRS.
Outputs JSON-formatted logs on stderr so stdout stays free for responses.
"""

import json
import logging
import sys
from datetime import datetime, timezone

LOGGER_NAME = "DSRS"

logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(logging.INFO)
logger.propagate = False


class JsonFormatter(logging.Formatter):
    """One JSON object per record; keyword extras become top-level keys."""

    # Anything a bare record already has is logging bookkeeping, not an extra
    RESERVED = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

    def format(self, record):
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "module": record.module,
        }
        entry.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in self.RESERVED and not key.startswith("_")
        )
        return json.dumps(entry, default=str)


handler = logging.StreamHandler(sys.stderr)
handler.setFormatter(JsonFormatter())
logger.addHandler(handler)


def get_logger(component: str = "SYSTEM"):
    return ComponentLogger(component)


class ComponentLogger:
    def __init__(self, component):
        self.component = component
        self.logger = logging.getLogger(LOGGER_NAME)

    def _extra(self, kwargs):
        extra = {"component": self.component}
        extra.update(kwargs)
        return extra

    def info(self, msg, **kwargs):
        self.logger.info(msg, extra=self._extra(kwargs))

    def warning(self, msg, **kwargs):
        self.logger.warning(msg, extra=self._extra(kwargs))

    def error(self, msg, **kwargs):
        self.logger.error(msg, extra=self._extra(kwargs))
