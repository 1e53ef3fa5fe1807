"""Typed success/failure values returned by the sequencing core."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from .exceptions import RouteSequencingError

T = TypeVar("T")
E = TypeVar("E", bound=RouteSequencingError)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self):
        """Raise the carried error; used where a caller wants exception flow."""
        raise self.error


Result = Union[Ok[T], Err[E]]
