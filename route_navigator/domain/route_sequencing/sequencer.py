from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, Iterator, List, Optional, Sequence, Union

from .duplicates import is_probable_duplicate, strip_markup
from .exceptions import DuplicatePlaceError, InvalidReorderError
from .models import Place, RoutePoint, RouteRole, RouteSequence
from .result import Err, Ok, Result

logger = logging.getLogger(__name__)

OrderItem = Union[RoutePoint, Place, str]


def role_for_position(index: int, length: int) -> RouteRole:
    if index == 0:
        return RouteRole.START
    if index == length - 1:
        return RouteRole.END
    return RouteRole.WAYPOINT


def assign_roles(places: Sequence[Place]) -> RouteSequence:
    length = len(places)
    return tuple(
        RoutePoint(place=place, role=role_for_position(index, length))
        for index, place in enumerate(places)
    )


def suggest_route_name(sequence: Sequence[RoutePoint]) -> str:
    if not sequence:
        return ""
    first = strip_markup(sequence[0].title) or sequence[0].id
    remaining = len(sequence) - 1
    if remaining:
        return f"{first} +{remaining}"
    return first


def _identify(item: OrderItem) -> str:
    if isinstance(item, str):
        return item
    return item.id


class RouteSequencer:
    """Ordered, id-unique list of places for one planning session.

    Only places are stored; start/waypoint/end roles are derived from
    position whenever a snapshot is taken.
    """

    def __init__(self) -> None:
        self._places: List[Place] = []

    def __len__(self) -> int:
        return len(self._places)

    def __iter__(self) -> Iterator[RoutePoint]:
        return iter(self.current())

    def __contains__(self, item: object) -> bool:
        if isinstance(item, (RoutePoint, Place)):
            item = item.id
        return any(place.id == item for place in self._places)

    def current(self) -> RouteSequence:
        return assign_roles(self._places)

    def add(self, place: Place) -> Result[RouteSequence, DuplicatePlaceError]:
        if place.id in self:
            logger.debug("Rejected duplicate place %s", place.id)
            return Err(DuplicatePlaceError(place.id))
        self._places.append(place)
        return Ok(self.current())

    def extend(self, places: Iterable[Place]) -> Result[RouteSequence, DuplicatePlaceError]:
        batch = list(places)
        seen = {place.id for place in self._places}
        for place in batch:
            if place.id in seen:
                logger.debug("Rejected batch with duplicate place %s", place.id)
                return Err(DuplicatePlaceError(place.id))
            seen.add(place.id)
        self._places.extend(batch)
        return Ok(self.current())

    def remove(self, place_id: str) -> RouteSequence:
        self._places = [place for place in self._places if place.id != place_id]
        return self.current()

    def reorder(self, new_order: Sequence[OrderItem]) -> Result[RouteSequence, InvalidReorderError]:
        requested = [_identify(item) for item in new_order]
        counts = Counter(requested)
        by_id = {place.id: place for place in self._places}

        duplicated = sorted(place_id for place_id, count in counts.items() if count > 1)
        missing = [place.id for place in self._places if place.id not in counts]
        unexpected = [place_id for place_id in counts if place_id not in by_id]

        if duplicated or missing or unexpected:
            logger.debug(
                "Rejected reorder: missing=%s unexpected=%s duplicated=%s",
                missing,
                unexpected,
                duplicated,
            )
            return Err(
                InvalidReorderError(missing=missing, unexpected=unexpected, duplicated=duplicated)
            )

        self._places = [by_id[place_id] for place_id in requested]
        return Ok(self.current())

    def move(self, source_index: int, destination_index: int) -> Result[RouteSequence, InvalidReorderError]:
        length = len(self._places)
        for index in (source_index, destination_index):
            if not 0 <= index < length:
                return Err(
                    InvalidReorderError(f"Index {index} is outside a route of {length} points")
                )
        reordered = list(self._places)
        item = reordered.pop(source_index)
        reordered.insert(destination_index, item)
        return self.reorder(reordered)

    def clear(self) -> RouteSequence:
        self._places = []
        return self.current()

    def find_similar(self, place: Place) -> Optional[RoutePoint]:
        """Return the first point that looks like ``place`` by coordinates or title."""

        for point in self.current():
            if is_probable_duplicate(place, point.place):
                return point
        return None
