from fastapi import APIRouter

from route_navigator.api.endpoints import navigation, routes, sessions

api_router = APIRouter()

api_router.include_router(sessions.router, prefix="/sessions", tags=["sessions"])
api_router.include_router(navigation.router, prefix="/navigation", tags=["navigation"])
api_router.include_router(routes.router, prefix="/routes", tags=["routes"])
