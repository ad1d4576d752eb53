"""Structured logging configuration.

structlog loggers (``bind_context``) hand their bound key/values to the stdlib
logger as ``extra``; ``JsonFormatter`` then emits one JSON object per record
with those fields (``request_id``, ``format_type``, ``count``...) alongside
timestamp, level, logger and message. Plain ``logging.getLogger`` records go
through the same handler.
"""
from __future__ import annotations

import json
import logging as _logging
import sys
import time
from typing import Any, Dict, Optional

import structlog

from numify.config.settings import get_settings

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_RECORD_ATTRS = frozenset(vars(_logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class JsonFormatter(_logging.Formatter):
    def format(self, record: _logging.LogRecord) -> str:
        base: Dict[str, Any] = {
            "timestamp": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created)),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RECORD_ATTRS and not key.startswith("_"):
                base[key] = value
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False, default=str)


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for application startup."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.render_to_log_kwargs,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    handler = _logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())
    root = _logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level or get_settings().LOG_LEVEL)


def bind_context(name: str, **kwargs: Any):
    """Return a structlog logger for ``name`` carrying ``kwargs`` on every event."""
    return structlog.get_logger(name).bind(**kwargs)


__all__ = ["JsonFormatter", "configure_logging", "bind_context"]
