import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status

from route_navigator.api.deps import get_navigation_builder, get_route_store, get_session_store
from route_navigator.domain.route_sequencing import (
    NavigationUriBuilder,
    Place,
    RouteSequencer,
    suggest_route_name,
)
from route_navigator.models.schemas import (
    MoveRequest,
    NavigationResponse,
    PlaceIn,
    ReorderRequest,
    RoutePointOut,
    SavedRouteResponse,
    SaveRouteRequest,
    SessionCreateRequest,
    SessionResponse,
    SimilarPlaceResponse,
)
from route_navigator.services import PlanningSessionStore, RouteStore

from .routes import saved_route_response

logger = logging.getLogger(__name__)
router = APIRouter()


def _sequencer(store: PlanningSessionStore, session_id: str) -> RouteSequencer:
    sequencer = store.get(session_id)
    if sequencer is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Planning session not found")
    return sequencer


@router.post("", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
async def create_session(
    request: Optional[SessionCreateRequest] = None,
    store: PlanningSessionStore = Depends(get_session_store),
) -> SessionResponse:
    places = [place.to_domain() for place in request.places] if request else []
    session_id = store.create(places).unwrap()
    with store.lock:
        return SessionResponse.build(session_id, _sequencer(store, session_id).current())


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session(
    session_id: str, store: PlanningSessionStore = Depends(get_session_store)
) -> SessionResponse:
    with store.lock:
        return SessionResponse.build(session_id, _sequencer(store, session_id).current())


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def discard_session(
    session_id: str, store: PlanningSessionStore = Depends(get_session_store)
) -> Response:
    if not store.discard(session_id):
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Planning session not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{session_id}/points", response_model=SessionResponse)
async def add_point(
    session_id: str,
    place: PlaceIn,
    store: PlanningSessionStore = Depends(get_session_store),
) -> SessionResponse:
    with store.lock:
        points = _sequencer(store, session_id).add(place.to_domain()).unwrap()
    return SessionResponse.build(session_id, points)


@router.delete("/{session_id}/points/{place_id}", response_model=SessionResponse)
async def remove_point(
    session_id: str,
    place_id: str,
    store: PlanningSessionStore = Depends(get_session_store),
) -> SessionResponse:
    with store.lock:
        points = _sequencer(store, session_id).remove(place_id)
    return SessionResponse.build(session_id, points)


@router.put("/{session_id}/order", response_model=SessionResponse)
async def reorder_points(
    session_id: str,
    request: ReorderRequest,
    store: PlanningSessionStore = Depends(get_session_store),
) -> SessionResponse:
    with store.lock:
        points = _sequencer(store, session_id).reorder(request.order).unwrap()
    return SessionResponse.build(session_id, points)


@router.post("/{session_id}/move", response_model=SessionResponse)
async def move_point(
    session_id: str,
    request: MoveRequest,
    store: PlanningSessionStore = Depends(get_session_store),
) -> SessionResponse:
    with store.lock:
        sequencer = _sequencer(store, session_id)
        points = sequencer.move(request.source_index, request.destination_index).unwrap()
    return SessionResponse.build(session_id, points)


@router.get("/{session_id}/similar", response_model=SimilarPlaceResponse)
async def find_similar_point(
    session_id: str,
    title: str = "",
    mapx: Optional[str] = None,
    mapy: Optional[str] = None,
    store: PlanningSessionStore = Depends(get_session_store),
) -> SimilarPlaceResponse:
    candidate = Place(id="", title=title, mapx=mapx, mapy=mapy)
    with store.lock:
        match = _sequencer(store, session_id).find_similar(candidate)
    return SimilarPlaceResponse(match=RoutePointOut.from_domain(match) if match else None)


@router.get("/{session_id}/navigation/{vendor}", response_model=NavigationResponse)
async def navigation_uri(
    session_id: str,
    vendor: str,
    store: PlanningSessionStore = Depends(get_session_store),
    builder: NavigationUriBuilder = Depends(get_navigation_builder),
) -> NavigationResponse:
    with store.lock:
        points = _sequencer(store, session_id).current()
    uri = builder.build(points, vendor).unwrap()
    logger.info("Built %s link for session %s (%d points)", vendor, session_id, len(points))
    return NavigationResponse(vendor=vendor, uri=uri)


@router.post("/{session_id}/save", response_model=SavedRouteResponse, status_code=status.HTTP_201_CREATED)
async def save_session(
    session_id: str,
    request: SaveRouteRequest,
    store: PlanningSessionStore = Depends(get_session_store),
    routes: RouteStore = Depends(get_route_store),
    builder: NavigationUriBuilder = Depends(get_navigation_builder),
) -> SavedRouteResponse:
    with store.lock:
        points = _sequencer(store, session_id).current()
    if not points:
        raise HTTPException(status.HTTP_422_UNPROCESSABLE_ENTITY, "Route has no points")

    uris = {}
    for vendor, result in builder.build_all(points).items():
        if result.ok:
            uris[vendor] = result.value
        else:
            logger.info("Saving without %s link: %s", vendor, result.error.message)
            uris[vendor] = ""

    saved = routes.save(
        name=request.name or suggest_route_name(points),
        user_id=request.user_id,
        points=points,
        naver_uri=uris["naver"],
        tmap_uri=uris["tmap"],
    )
    return saved_route_response(saved)
