"""Route sequencing and navigation deep-link synthesis."""

from .coordinates import decode_coordinate, encode_coordinate, format_degrees
from .duplicates import is_probable_duplicate, strip_markup
from .exceptions import (
    DuplicatePlaceError,
    EmptyRouteError,
    InvalidCoordinatesError,
    InvalidReorderError,
    MissingCoordinatesError,
    NavigationError,
    RouteSequencingError,
    UnknownVendorError,
    UnsupportedPointCountError,
)
from .models import Place, RoutePoint, RouteRole, RouteSequence
from .navigation import NavigationUriBuilder, NavigationVendor
from .result import Err, Ok, Result
from .sequencer import RouteSequencer, assign_roles, role_for_position, suggest_route_name

__all__ = [
    "decode_coordinate",
    "encode_coordinate",
    "format_degrees",
    "is_probable_duplicate",
    "strip_markup",
    "DuplicatePlaceError",
    "EmptyRouteError",
    "InvalidCoordinatesError",
    "InvalidReorderError",
    "MissingCoordinatesError",
    "NavigationError",
    "RouteSequencingError",
    "UnknownVendorError",
    "UnsupportedPointCountError",
    "Place",
    "RoutePoint",
    "RouteRole",
    "RouteSequence",
    "NavigationUriBuilder",
    "NavigationVendor",
    "Err",
    "Ok",
    "Result",
    "RouteSequencer",
    "assign_roles",
    "role_for_position",
    "suggest_route_name",
]
