import logging

from fastapi import APIRouter, Depends

from route_navigator.api.deps import get_navigation_builder
from route_navigator.domain.route_sequencing import NavigationUriBuilder, RouteSequencer
from route_navigator.models.schemas import NavigationRequest, NavigationResponse

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("", response_model=NavigationResponse)
async def build_navigation_uri(
    request: NavigationRequest,
    builder: NavigationUriBuilder = Depends(get_navigation_builder),
) -> NavigationResponse:
    """Build a deep link for an ad-hoc list of points in request order."""

    sequencer = RouteSequencer()
    points = sequencer.extend(place.to_domain() for place in request.route_points).unwrap()
    uri = builder.build(points, request.navigation_type).unwrap()
    logger.info("Built %s link for %d points", request.navigation_type, len(points))
    return NavigationResponse(vendor=request.navigation_type, uri=uri)
