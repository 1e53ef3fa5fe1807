from __future__ import annotations

from typing import Any, Dict, Sequence, Tuple


class RouteSequencingError(Exception):
    code = "route_error"

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message

    def context(self) -> Dict[str, Any]:
        return {}

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.message == other.message and self.context() == other.context()

    def __hash__(self) -> int:
        return hash((type(self), self.message))


class DuplicatePlaceError(RouteSequencingError):
    code = "duplicate_place"

    def __init__(self, place_id: str) -> None:
        super().__init__(f"Place {place_id!r} is already part of the route", status_code=409)
        self.place_id = place_id

    def context(self) -> Dict[str, Any]:
        return {"place_id": self.place_id}


class InvalidReorderError(RouteSequencingError):
    code = "invalid_reorder"

    def __init__(
        self,
        message: str = "New order must be a permutation of the current route",
        *,
        missing: Sequence[str] = (),
        unexpected: Sequence[str] = (),
        duplicated: Sequence[str] = (),
    ) -> None:
        super().__init__(message, status_code=422)
        self.missing: Tuple[str, ...] = tuple(missing)
        self.unexpected: Tuple[str, ...] = tuple(unexpected)
        self.duplicated: Tuple[str, ...] = tuple(duplicated)

    def context(self) -> Dict[str, Any]:
        return {
            "missing": list(self.missing),
            "unexpected": list(self.unexpected),
            "duplicated": list(self.duplicated),
        }


class NavigationError(RouteSequencingError):
    code = "navigation_error"

    def __init__(self, message: str, status_code: int = 422) -> None:
        super().__init__(message, status_code=status_code)


class MissingCoordinatesError(NavigationError):
    code = "missing_coordinates"

    def __init__(self, point_id: str, message: str | None = None) -> None:
        super().__init__(message or f"Route point {point_id!r} has no coordinates")
        self.point_id = point_id

    def context(self) -> Dict[str, Any]:
        return {"point_id": self.point_id}


class InvalidCoordinatesError(MissingCoordinatesError):
    code = "invalid_coordinates"

    def __init__(self, point_id: str, raw: str) -> None:
        super().__init__(point_id, f"Route point {point_id!r} has unreadable coordinate {raw!r}")
        self.raw = raw

    def context(self) -> Dict[str, Any]:
        return {"point_id": self.point_id, "raw": self.raw}


class EmptyRouteError(NavigationError):
    code = "empty_route"

    def __init__(self) -> None:
        super().__init__("Route has no points")


class UnsupportedPointCountError(NavigationError):
    code = "unsupported_point_count"

    def __init__(self, vendor: str, count: int, maximum: int) -> None:
        super().__init__(
            f"{vendor} accepts at most {maximum} points, route has {count}"
        )
        self.vendor = vendor
        self.count = count
        self.maximum = maximum

    def context(self) -> Dict[str, Any]:
        return {"vendor": self.vendor, "count": self.count, "maximum": self.maximum}


class UnknownVendorError(NavigationError):
    code = "unknown_vendor"

    def __init__(self, vendor: str) -> None:
        super().__init__(f"Unsupported navigation vendor {vendor!r}", status_code=400)
        self.vendor = vendor

    def context(self) -> Dict[str, Any]:
        return {"vendor": self.vendor}
