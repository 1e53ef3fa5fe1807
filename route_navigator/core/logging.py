"""Centralised logging configuration."""

from __future__ import annotations

import logging
import sys
from typing import Union

from .tracing import current_trace_id

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | trace_id=%(trace_id)s | %(message)s"


class TraceIdFilter(logging.Filter):
    """Injects the current trace identifier into log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401 - inherited
        record.trace_id = current_trace_id()
        return True


def configure_logging(service_name: str, level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Configure root logging with trace correlation."""

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(TraceIdFilter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.upper() if isinstance(level, str) else level)

    return logging.getLogger(service_name)
