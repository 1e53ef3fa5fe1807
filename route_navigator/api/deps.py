from route_navigator.core.config import settings
from route_navigator.domain.route_sequencing import NavigationUriBuilder, NavigationVendor
from route_navigator.services import PlanningSessionStore, RouteStore, route_store, session_store


def get_navigation_builder() -> NavigationUriBuilder:
    return NavigationUriBuilder(
        naver_app_name=settings.NAVER_APP_NAME,
        tmap_mode=NavigationVendor(settings.TMAP_MODE),
    )


def get_session_store() -> PlanningSessionStore:
    return session_store


def get_route_store() -> RouteStore:
    return route_store
