from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence, Tuple
from uuid import uuid4

from route_navigator.domain.route_sequencing import RoutePoint, assign_roles

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SavedRoute:
    id: str
    name: str
    user_id: str
    points: Tuple[RoutePoint, ...]
    naver_uri: str
    tmap_uri: str
    created_at: datetime
    updated_at: datetime


def _now() -> datetime:
    return datetime.now(timezone.utc)


class RouteStore:
    """In-memory stand-in for the remote saved-route API."""

    def __init__(self) -> None:
        self._routes: Dict[str, SavedRoute] = {}
        self._lock = threading.Lock()

    def save(
        self,
        name: str,
        user_id: str,
        points: Sequence[RoutePoint],
        naver_uri: str = "",
        tmap_uri: str = "",
    ) -> SavedRoute:
        timestamp = _now()
        route = SavedRoute(
            id=uuid4().hex,
            name=name,
            user_id=user_id,
            points=assign_roles([point.place for point in points]),
            naver_uri=naver_uri,
            tmap_uri=tmap_uri,
            created_at=timestamp,
            updated_at=timestamp,
        )
        with self._lock:
            self._routes[route.id] = route
        logger.info("Saved route %s for user %s (%d points)", route.id, user_id, len(route.points))
        return route

    def get(self, route_id: str) -> Optional[SavedRoute]:
        return self._routes.get(route_id)

    def list_for_user(self, user_id: str) -> List[SavedRoute]:
        with self._lock:
            owned = [route for route in self._routes.values() if route.user_id == user_id]
        # insertion order is creation order
        return owned[::-1]

    def rename(self, route_id: str, name: str) -> Optional[SavedRoute]:
        with self._lock:
            route = self._routes.get(route_id)
            if route is None:
                return None
            route = replace(route, name=name, updated_at=_now())
            self._routes[route_id] = route
        return route

    def delete(self, route_id: str) -> bool:
        with self._lock:
            removed = self._routes.pop(route_id, None) is not None
        if removed:
            logger.info("Deleted saved route %s", route_id)
        return removed


route_store = RouteStore()
