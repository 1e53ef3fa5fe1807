from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Sequence, Tuple, Union
from urllib.parse import quote

from .coordinates import decode_coordinate, format_degrees
from .duplicates import strip_markup
from .exceptions import (
    EmptyRouteError,
    InvalidCoordinatesError,
    MissingCoordinatesError,
    NavigationError,
    UnknownVendorError,
    UnsupportedPointCountError,
)
from .models import RoutePoint
from .result import Err, Ok, Result

logger = logging.getLogger(__name__)

NAVER_SCHEME = "nmap://route/car"
TMAP_SCHEME = "tmap://route"

TMAP_MAX_POINTS = 2
TMAP_MAX_PASS_POINTS = 5
TMAP_EXTENDED_MAX_POINTS = TMAP_MAX_POINTS + TMAP_MAX_PASS_POINTS

# encodeURIComponent leaves these unescaped
_URI_COMPONENT_SAFE = "-_.!~*'()"

Params = List[Tuple[str, str]]


class NavigationVendor(str, Enum):
    NAVER = "naver"
    TMAP = "tmap"
    TMAP_EXTENDED = "tmap-extended"


@dataclass(frozen=True)
class _Stop:
    lat: str
    lng: str
    name: str


def encode_component(text: str) -> str:
    return quote(text, safe=_URI_COMPONENT_SAFE)


def display_name(point: RoutePoint) -> str:
    return strip_markup(point.title) or point.id


def _resolve_stop(point: RoutePoint) -> Union[_Stop, MissingCoordinatesError]:
    coordinates = point.place.coordinates
    if coordinates is None:
        return MissingCoordinatesError(point.id)
    mapx, mapy = coordinates
    try:
        lng = decode_coordinate(mapx)
    except ValueError:
        return InvalidCoordinatesError(point.id, mapx)
    try:
        lat = decode_coordinate(mapy)
    except ValueError:
        return InvalidCoordinatesError(point.id, mapy)
    return _Stop(format_degrees(lat), format_degrees(lng), encode_component(display_name(point)))


def _join(scheme: str, params: Params) -> str:
    return scheme + "?" + "&".join(f"{key}={value}" for key, value in params)


class NavigationUriBuilder:
    """Render a sequenced route into vendor deep links.

    ``tmap_mode`` decides what a plain ``tmap`` request produces: the
    two-point scheme or the variant with numbered pass points.
    """

    def __init__(
        self,
        naver_app_name: str,
        tmap_mode: NavigationVendor = NavigationVendor.TMAP,
    ) -> None:
        tmap_mode = NavigationVendor(tmap_mode)
        if tmap_mode is NavigationVendor.NAVER:
            raise ValueError("tmap_mode must be a tmap variant")
        self.naver_app_name = naver_app_name
        self.tmap_mode = tmap_mode

    def resolve_vendor(self, vendor: Union[str, NavigationVendor]) -> Result[NavigationVendor, UnknownVendorError]:
        try:
            resolved = NavigationVendor(vendor)
        except ValueError:
            return Err(UnknownVendorError(str(vendor)))
        if resolved is NavigationVendor.TMAP:
            resolved = self.tmap_mode
        return Ok(resolved)

    def build(
        self, route: Sequence[RoutePoint], vendor: Union[str, NavigationVendor]
    ) -> Result[str, NavigationError]:
        resolved = self.resolve_vendor(vendor)
        if not resolved.ok:
            return resolved
        vendor = resolved.value

        if not route:
            return Err(EmptyRouteError())

        maximum = self._max_points(vendor)
        if maximum is not None and len(route) > maximum:
            logger.debug("%s cannot express %d points", vendor.value, len(route))
            return Err(UnsupportedPointCountError(vendor.value, len(route), maximum))

        stops: List[_Stop] = []
        for point in route:
            stop = _resolve_stop(point)
            if isinstance(stop, MissingCoordinatesError):
                logger.debug("Point %s blocks %s link: %s", point.id, vendor.value, stop.message)
                return Err(stop)
            stops.append(stop)

        if vendor is NavigationVendor.NAVER:
            return Ok(self._naver_uri(stops))
        return Ok(self._tmap_uri(stops))

    def build_all(self, route: Sequence[RoutePoint]) -> Dict[str, Result[str, NavigationError]]:
        return {
            vendor.value: self.build(route, vendor)
            for vendor in (NavigationVendor.NAVER, NavigationVendor.TMAP)
        }

    @staticmethod
    def _max_points(vendor: NavigationVendor) -> int | None:
        if vendor is NavigationVendor.TMAP:
            return TMAP_MAX_POINTS
        if vendor is NavigationVendor.TMAP_EXTENDED:
            return TMAP_EXTENDED_MAX_POINTS
        return None

    def _naver_uri(self, stops: Sequence[_Stop]) -> str:
        params: Params = []
        if len(stops) > 1:
            start = stops[0]
            params += [("slat", start.lat), ("slng", start.lng), ("sname", start.name)]
        goal = stops[-1]
        params += [("dlat", goal.lat), ("dlng", goal.lng), ("dname", goal.name)]
        for number, stop in enumerate(stops[1:-1], start=1):
            params += [
                (f"v{number}lat", stop.lat),
                (f"v{number}lng", stop.lng),
                (f"v{number}name", stop.name),
            ]
        params.append(("appname", encode_component(self.naver_app_name)))
        return _join(NAVER_SCHEME, params)

    @staticmethod
    def _tmap_uri(stops: Sequence[_Stop]) -> str:
        params: Params = []
        if len(stops) > 1:
            start = stops[0]
            params += [("startx", start.lng), ("starty", start.lat), ("startname", start.name)]
        goal = stops[-1]
        params += [("goalx", goal.lng), ("goaly", goal.lat), ("goalname", goal.name)]
        for number, stop in enumerate(stops[1:-1], start=1):
            params += [
                (f"passx{number}", stop.lng),
                (f"passy{number}", stop.lat),
                (f"passname{number}", stop.name),
            ]
        return _join(TMAP_SCHEME, params)
