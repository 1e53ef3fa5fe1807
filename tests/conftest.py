import os
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("NAVER_APP_NAME", "route-navigator-test")
os.environ.setdefault("TMAP_MODE", "tmap")

import pytest

from route_navigator.domain.route_sequencing import NavigationUriBuilder, Place


def make_place(place_id: str, title: str | None = None, mapx: str | None = None, mapy: str | None = None, **extra) -> Place:
    return Place(id=place_id, title=title if title is not None else place_id.upper(), mapx=mapx, mapy=mapy, **extra)


@pytest.fixture
def seoul_tower() -> Place:
    return make_place("tower", "Seoul Tower", mapx="1270000000", mapy="370000000")


@pytest.fixture
def city_hall() -> Place:
    return make_place("hall", "City Hall", mapx="1269779692", mapy="375665350")


@pytest.fixture
def gyeongbokgung() -> Place:
    return make_place("palace", "Gyeongbokgung", mapx="1269769800", mapy="375796000")


@pytest.fixture
def builder() -> NavigationUriBuilder:
    return NavigationUriBuilder(naver_app_name="com.example.planner")
