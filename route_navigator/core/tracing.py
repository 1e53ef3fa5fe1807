from __future__ import annotations

import re
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterable, Iterator, Optional, Tuple
from uuid import uuid4

TRACE_HEADERS: Tuple[str, ...] = ("x-trace-id", "x-request-id")

_current: ContextVar[str] = ContextVar("route_navigator_trace_id", default="-")
_accepted = re.compile(r"^[a-fA-F0-9-]{8,64}$")


def resolve_trace_id(headers: Optional[Iterable[Tuple[str, str]]] = None) -> str:
    """Reuse a well-formed incoming trace id, otherwise mint a new one."""

    for key, value in headers or ():
        if key.lower() in TRACE_HEADERS and value and _accepted.match(value.strip()):
            return value.strip().lower()
    return uuid4().hex


@contextmanager
def bound_trace_id(trace_id: str) -> Iterator[str]:
    token = _current.set(trace_id)
    try:
        yield trace_id
    finally:
        _current.reset(token)


def current_trace_id() -> str:
    return _current.get()
