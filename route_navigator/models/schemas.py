from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator

from route_navigator.domain.route_sequencing import Place, RoutePoint, suggest_route_name


class PlaceIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1, max_length=512)
    title: str = Field(..., max_length=1000)
    description: Optional[str] = None
    mapx: Optional[str] = None
    mapy: Optional[str] = None
    address: Optional[str] = None
    road_address: Optional[str] = Field(default=None, alias="roadAddress")
    link: Optional[str] = None
    blogger_name: Optional[str] = Field(default=None, alias="bloggerName")
    image: Optional[str] = None

    @field_validator("mapx", "mapy", mode="before")
    @classmethod
    def _stringify_coordinate(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    def to_domain(self) -> Place:
        return Place(
            id=self.id,
            title=self.title,
            description=self.description,
            mapx=self.mapx,
            mapy=self.mapy,
            address=self.address,
            road_address=self.road_address,
            link=self.link,
            blogger_name=self.blogger_name,
            image=self.image,
        )


class RoutePointOut(PlaceIn):
    type: Literal["start", "waypoint", "end"]

    @classmethod
    def from_domain(cls, point: RoutePoint) -> "RoutePointOut":
        place = point.place
        return cls(
            id=place.id,
            title=place.title,
            description=place.description,
            mapx=place.mapx,
            mapy=place.mapy,
            address=place.address,
            road_address=place.road_address,
            link=place.link,
            blogger_name=place.blogger_name,
            image=place.image,
            type=point.role.value,
        )


def points_out(points: Sequence[RoutePoint]) -> List[RoutePointOut]:
    return [RoutePointOut.from_domain(point) for point in points]


class SessionCreateRequest(BaseModel):
    places: List[PlaceIn] = Field(default_factory=list)


class SessionResponse(BaseModel):
    session_id: str
    points: List[RoutePointOut]
    suggested_name: str

    @classmethod
    def build(cls, session_id: str, points: Sequence[RoutePoint]) -> "SessionResponse":
        return cls(
            session_id=session_id,
            points=points_out(points),
            suggested_name=suggest_route_name(points),
        )


class ReorderRequest(BaseModel):
    order: List[str]


class MoveRequest(BaseModel):
    source_index: int = Field(..., ge=0)
    destination_index: int = Field(..., ge=0)


class SimilarPlaceResponse(BaseModel):
    match: Optional[RoutePointOut] = None


class NavigationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    navigation_type: str = Field(..., alias="navigationType")
    route_points: List[PlaceIn] = Field(default_factory=list, alias="routePoints")


class NavigationResponse(BaseModel):
    vendor: str
    uri: str


class SaveRouteRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(..., min_length=1, alias="userId")
    name: Optional[str] = Field(default=None, max_length=200)


class RenameRouteRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)


class SavedRouteResponse(BaseModel):
    id: str
    name: str
    user_id: str
    points: List[RoutePointOut]
    naver_uri: str
    tmap_uri: str
    created_at: datetime
    updated_at: datetime


class ErrorResponse(BaseModel):
    error: str
    detail: str
    context: Dict[str, Any] = Field(default_factory=dict)
