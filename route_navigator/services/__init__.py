"""In-process collaborators backing the HTTP layer."""

from __future__ import annotations

__all__ = ["PlanningSessionStore", "RouteStore", "SavedRoute", "route_store", "session_store"]

from .route_store import RouteStore, SavedRoute, route_store  # noqa: E402
from .session_store import PlanningSessionStore, session_store  # noqa: E402
