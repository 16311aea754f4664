"""Structured logging for search and CLI events.

Each record is one JSON object per line. Fields passed through ``log_event``
land at the top level next to ``ts``, ``level``, ``logger`` and ``message``.
"""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Iterator

from release_search.config import LOG_LEVEL

LOGGER_NAME = "release_search"

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RECORD_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
}


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key.startswith("_") or key in _RECORD_ATTRS:
                continue
            if key.endswith("_ms") and isinstance(value, float):
                value = round(value, 3)
            payload[key] = value
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(level: int | str = LOG_LEVEL) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    logger.setLevel(level)
    logger.addHandler(handler)
    return logger


def log_event(logger: logging.Logger, event: str, **fields: Any) -> None:
    logger.info(event, extra={"event": event, **fields})


@contextmanager
def timed_event(
    logger: logging.Logger, event: str, **fields: Any
) -> Iterator[dict[str, Any]]:
    """Log ``event`` with ``total_latency_ms`` once the block exits.

    The yielded dict can be filled inside the block with fields that are only
    known after the work is done, such as result counts.
    """
    extra: dict[str, Any] = dict(fields)
    start = time.perf_counter()
    yield extra
    extra["total_latency_ms"] = (time.perf_counter() - start) * 1000
    log_event(logger, event, **extra)
