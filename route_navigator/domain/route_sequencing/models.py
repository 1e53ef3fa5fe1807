from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class RouteRole(str, Enum):
    START = "start"
    WAYPOINT = "waypoint"
    END = "end"


@dataclass(frozen=True)
class Place:
    """A point of interest as delivered by search results or custom entry.

    ``mapx``/``mapy`` are longitude/latitude encoded as integer strings scaled
    by 10^7. ``title`` may carry inline markup and is kept verbatim.
    """

    id: str
    title: str
    description: Optional[str] = None
    mapx: Optional[str] = None
    mapy: Optional[str] = None
    address: Optional[str] = None
    road_address: Optional[str] = None
    link: Optional[str] = None
    blogger_name: Optional[str] = None
    image: Optional[str] = None

    @property
    def has_coordinates(self) -> bool:
        return bool(self.mapx and self.mapx.strip()) and bool(self.mapy and self.mapy.strip())

    @property
    def coordinates(self) -> Optional[Tuple[str, str]]:
        if not self.has_coordinates:
            return None
        return self.mapx.strip(), self.mapy.strip()


@dataclass(frozen=True)
class RoutePoint:
    place: Place
    role: RouteRole

    @property
    def id(self) -> str:
        return self.place.id

    @property
    def title(self) -> str:
        return self.place.title

    @property
    def mapx(self) -> Optional[str]:
        return self.place.mapx

    @property
    def mapy(self) -> Optional[str]:
        return self.place.mapy


RouteSequence = Tuple[RoutePoint, ...]
