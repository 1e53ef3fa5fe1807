import random

import pytest

from route_navigator.domain.route_sequencing import (
    DuplicatePlaceError,
    Err,
    InvalidReorderError,
    RouteRole,
    RouteSequencer,
    assign_roles,
    suggest_route_name,
)

from conftest import make_place


def _roles(sequence):
    return [point.role for point in sequence]


def _ids(sequence):
    return [point.id for point in sequence]


def _assert_role_invariant(sequence) -> None:
    if not sequence:
        return
    if len(sequence) == 1:
        assert sequence[0].role is RouteRole.START
        return
    assert sequence[0].role is RouteRole.START
    assert sequence[-1].role is RouteRole.END
    assert all(point.role is RouteRole.WAYPOINT for point in sequence[1:-1])


@pytest.fixture
def sequencer() -> RouteSequencer:
    return RouteSequencer()


def test_empty_sequencer_has_no_points(sequencer):
    assert sequencer.current() == ()
    assert len(sequencer) == 0


def test_single_point_is_start(sequencer):
    result = sequencer.add(make_place("a"))

    assert result.ok
    assert _roles(result.value) == [RouteRole.START]


def test_adding_points_moves_end_to_the_new_tail(sequencer):
    sequencer.add(make_place("a"))
    sequencer.add(make_place("b"))
    sequence = sequencer.add(make_place("c")).unwrap()

    assert _ids(sequence) == ["a", "b", "c"]
    assert _roles(sequence) == [RouteRole.START, RouteRole.WAYPOINT, RouteRole.END]


def test_add_rejects_duplicate_id_without_changing_length(sequencer):
    sequencer.add(make_place("a", "First"))
    sequencer.add(make_place("b"))

    result = sequencer.add(make_place("a", "Same id, other title"))

    assert result == Err(DuplicatePlaceError("a"))
    assert result.error.place_id == "a"
    assert len(sequencer) == 2
    assert sequencer.current()[0].title == "First"


def test_add_does_not_apply_title_or_coordinate_heuristics(sequencer):
    sequencer.add(make_place("a", "Cafe", mapx="1270000000", mapy="370000000"))

    result = sequencer.add(make_place("b", "Cafe", mapx="1270000000", mapy="370000000"))

    assert result.ok
    assert len(sequencer) == 2


def test_extend_is_atomic_on_duplicates(sequencer):
    sequencer.add(make_place("a"))

    result = sequencer.extend([make_place("b"), make_place("c"), make_place("b")])

    assert not result.ok
    assert result.error.place_id == "b"
    assert _ids(sequencer.current()) == ["a"]


def test_extend_seeds_roles(sequencer):
    sequence = sequencer.extend([make_place("a"), make_place("b")]).unwrap()

    assert _roles(sequence) == [RouteRole.START, RouteRole.END]


def test_remove_recomputes_roles(sequencer):
    sequencer.extend([make_place("a"), make_place("b"), make_place("c")])

    sequence = sequencer.remove("c")

    assert _ids(sequence) == ["a", "b"]
    assert _roles(sequence) == [RouteRole.START, RouteRole.END]

    sequence = sequencer.remove("a")
    assert _roles(sequence) == [RouteRole.START]


def test_remove_absent_id_is_a_noop(sequencer):
    before = sequencer.extend([make_place("a"), make_place("b")]).unwrap()

    after = sequencer.remove("missing")

    assert after == before


def test_reorder_accepts_permutation_and_keeps_stored_place_data(sequencer):
    sequencer.extend([make_place("a", "Alpha"), make_place("b"), make_place("c")])

    sequence = sequencer.reorder([make_place("c"), "a", make_place("b")]).unwrap()

    assert _ids(sequence) == ["c", "a", "b"]
    assert _roles(sequence) == [RouteRole.START, RouteRole.WAYPOINT, RouteRole.END]
    assert sequence[1].title == "Alpha"


def test_reorder_accepts_route_points_from_snapshot(sequencer):
    snapshot = sequencer.extend([make_place("a"), make_place("b")]).unwrap()

    sequence = sequencer.reorder(list(reversed(snapshot))).unwrap()

    assert _ids(sequence) == ["b", "a"]
    assert _roles(sequence) == [RouteRole.START, RouteRole.END]


@pytest.mark.parametrize(
    "new_order, missing, unexpected, duplicated",
    [
        (["a", "b"], ("c",), (), ()),
        (["a", "b", "c", "d"], (), ("d",), ()),
        (["a", "a", "b", "c"], (), (), ("a",)),
        (["a", "a", "b"], ("c",), (), ("a",)),
    ],
)
def test_reorder_rejects_non_permutations(sequencer, new_order, missing, unexpected, duplicated):
    original = sequencer.extend([make_place("a"), make_place("b"), make_place("c")]).unwrap()

    result = sequencer.reorder(new_order)

    assert not result.ok
    assert isinstance(result.error, InvalidReorderError)
    assert result.error.missing == missing
    assert result.error.unexpected == unexpected
    assert result.error.duplicated == duplicated
    assert sequencer.current() == original


def test_move_reinserts_item_at_destination(sequencer):
    sequencer.extend([make_place("a"), make_place("b"), make_place("c")])

    sequence = sequencer.move(0, 2).unwrap()

    assert _ids(sequence) == ["b", "c", "a"]
    assert _roles(sequence) == [RouteRole.START, RouteRole.WAYPOINT, RouteRole.END]


def test_move_rejects_out_of_range_index(sequencer):
    sequencer.extend([make_place("a"), make_place("b")])

    result = sequencer.move(0, 5)

    assert isinstance(result.error, InvalidReorderError)
    assert _ids(sequencer.current()) == ["a", "b"]


def test_role_invariant_holds_under_random_mutations(sequencer):
    rng = random.Random(20240501)
    pool = [make_place(f"p{index}") for index in range(12)]

    for _ in range(400):
        operation = rng.choice(("add", "add", "remove", "reorder", "move"))
        if operation == "add":
            sequencer.add(rng.choice(pool))
        elif operation == "remove":
            sequencer.remove(rng.choice(pool).id)
        elif operation == "reorder":
            order = list(sequencer.current())
            rng.shuffle(order)
            assert sequencer.reorder(order).ok
        elif len(sequencer):
            last = len(sequencer) - 1
            assert sequencer.move(rng.randint(0, last), rng.randint(0, last)).ok

        sequence = sequencer.current()
        _assert_role_invariant(sequence)
        assert len(set(_ids(sequence))) == len(sequence)


def test_contains_and_iteration(sequencer):
    place = make_place("a")
    sequencer.add(place)

    assert "a" in sequencer
    assert place in sequencer
    assert "b" not in sequencer
    assert [point.id for point in sequencer] == ["a"]


def test_clear_empties_route(sequencer):
    sequencer.extend([make_place("a"), make_place("b")])

    assert sequencer.clear() == ()
    assert len(sequencer) == 0


def test_find_similar_matches_by_coordinates_before_title(sequencer):
    sequencer.extend(
        [
            make_place("a", "<b>Namsan</b> Tower", mapx="1269882266", mapy="375511694"),
            make_place("b", "Free text stop"),
        ]
    )

    by_coordinates = sequencer.find_similar(
        make_place("x", "Another label", mapx="1269882266", mapy="375511694")
    )
    by_title = sequencer.find_similar(make_place("y", "  free   TEXT stop "))
    different_coordinates = sequencer.find_similar(
        make_place("z", "Namsan Tower", mapx="1270000000", mapy="370000000")
    )

    assert by_coordinates is not None and by_coordinates.id == "a"
    assert by_title is not None and by_title.id == "b"
    assert different_coordinates is None


def test_assign_roles_for_two_points():
    sequence = assign_roles([make_place("a"), make_place("b")])

    assert _roles(sequence) == [RouteRole.START, RouteRole.END]


def test_suggest_route_name():
    assert suggest_route_name(()) == ""
    assert suggest_route_name(assign_roles([make_place("a", "<b>Seoul</b> Tower")])) == "Seoul Tower"
    assert (
        suggest_route_name(assign_roles([make_place("a", "Seoul Tower"), make_place("b"), make_place("c")]))
        == "Seoul Tower +2"
    )
