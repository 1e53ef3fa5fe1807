import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from route_navigator.api.deps import get_route_store, get_session_store
from route_navigator.models.schemas import (
    RenameRouteRequest,
    SavedRouteResponse,
    SessionResponse,
    points_out,
)
from route_navigator.services import PlanningSessionStore, RouteStore, SavedRoute

logger = logging.getLogger(__name__)
router = APIRouter()


def saved_route_response(route: SavedRoute) -> SavedRouteResponse:
    return SavedRouteResponse(
        id=route.id,
        name=route.name,
        user_id=route.user_id,
        points=points_out(route.points),
        naver_uri=route.naver_uri,
        tmap_uri=route.tmap_uri,
        created_at=route.created_at,
        updated_at=route.updated_at,
    )


def _saved_route(routes: RouteStore, route_id: str) -> SavedRoute:
    route = routes.get(route_id)
    if route is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Saved route not found")
    return route


@router.get("", response_model=List[SavedRouteResponse])
async def list_routes(
    user_id: str = Query(..., min_length=1),
    routes: RouteStore = Depends(get_route_store),
) -> List[SavedRouteResponse]:
    return [saved_route_response(route) for route in routes.list_for_user(user_id)]


@router.get("/{route_id}", response_model=SavedRouteResponse)
async def get_route(route_id: str, routes: RouteStore = Depends(get_route_store)) -> SavedRouteResponse:
    return saved_route_response(_saved_route(routes, route_id))


@router.patch("/{route_id}", response_model=SavedRouteResponse)
async def rename_route(
    route_id: str,
    request: RenameRouteRequest,
    routes: RouteStore = Depends(get_route_store),
) -> SavedRouteResponse:
    renamed = routes.rename(route_id, request.name)
    if renamed is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Saved route not found")
    return saved_route_response(renamed)


@router.delete("/{route_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_route(route_id: str, routes: RouteStore = Depends(get_route_store)) -> Response:
    if not routes.delete(route_id):
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Saved route not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{route_id}/session", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
async def reopen_route(
    route_id: str,
    routes: RouteStore = Depends(get_route_store),
    store: PlanningSessionStore = Depends(get_session_store),
) -> SessionResponse:
    route = _saved_route(routes, route_id)
    session_id = store.create(point.place for point in route.points).unwrap()
    logger.info("Reopened saved route %s as session %s", route_id, session_id)
    with store.lock:
        sequencer = store.get(session_id)
        return SessionResponse.build(session_id, sequencer.current() if sequencer else ())
