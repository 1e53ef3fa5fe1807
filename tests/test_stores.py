from route_navigator.domain.route_sequencing import DuplicatePlaceError, RouteRole, assign_roles
from route_navigator.services import PlanningSessionStore, RouteStore

from conftest import make_place


def test_session_store_creates_independent_sequencers():
    store = PlanningSessionStore(capacity=10)

    first = store.create([make_place("a"), make_place("b")]).unwrap()
    second = store.create().unwrap()

    assert first != second
    assert len(store.get(first)) == 2
    assert len(store.get(second)) == 0

    store.get(second).add(make_place("c"))
    assert "c" not in store.get(first)


def test_session_store_rejects_duplicate_seed():
    store = PlanningSessionStore(capacity=10)

    result = store.create([make_place("a"), make_place("a")])

    assert isinstance(result.error, DuplicatePlaceError)
    assert len(store) == 0


def test_session_store_evicts_least_recently_used():
    store = PlanningSessionStore(capacity=2)
    first = store.create().unwrap()
    second = store.create().unwrap()

    store.get(first)
    third = store.create().unwrap()

    assert store.get(second) is None
    assert store.get(first) is not None
    assert store.get(third) is not None


def test_session_store_discard():
    store = PlanningSessionStore(capacity=2)
    session_id = store.create().unwrap()

    assert store.discard(session_id) is True
    assert store.discard(session_id) is False
    assert store.get(session_id) is None


def test_route_store_save_and_get():
    routes = RouteStore()
    points = assign_roles([make_place("a"), make_place("b"), make_place("c")])

    saved = routes.save("Day trip", "user-1", points, naver_uri="nmap://route/car?x", tmap_uri="")

    loaded = routes.get(saved.id)
    assert loaded == saved
    assert [point.role for point in loaded.points] == [RouteRole.START, RouteRole.WAYPOINT, RouteRole.END]
    assert loaded.tmap_uri == ""


def test_route_store_lists_newest_first_per_user():
    routes = RouteStore()
    points = assign_roles([make_place("a")])
    older = routes.save("older", "user-1", points)
    routes.save("other user", "user-2", points)
    newer = routes.save("newer", "user-1", points)

    assert [route.id for route in routes.list_for_user("user-1")] == [newer.id, older.id]
    assert routes.list_for_user("nobody") == []


def test_route_store_rename_and_delete():
    routes = RouteStore()
    saved = routes.save("before", "user-1", assign_roles([make_place("a")]))

    renamed = routes.rename(saved.id, "after")

    assert renamed.name == "after"
    assert renamed.updated_at >= saved.created_at
    assert routes.get(saved.id).name == "after"
    assert routes.rename("missing", "x") is None

    assert routes.delete(saved.id) is True
    assert routes.delete(saved.id) is False
    assert routes.get(saved.id) is None
