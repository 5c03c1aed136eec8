"""
Tests for choice parsing and the room-tree navigator.
"""
import pytest

from clue_catalog import ClueCatalog
from navigation import Direction, Navigator, TurnOutcome, parse_choice
from room_tree import create_room


@pytest.mark.parametrize("raw, expected", [
    ("e", Direction.LEFT),
    ("E", Direction.LEFT),
    ("l", Direction.LEFT),
    ("d", Direction.RIGHT),
    ("R", Direction.RIGHT),
    ("s", Direction.STOP),
    (" S\n", Direction.STOP),
    ("x", Direction.INVALID),
    ("", Direction.INVALID),
    ("ee", Direction.INVALID),
    ("left", Direction.INVALID),
    (None, Direction.INVALID),
])
def test_parse_choice(raw, expected):
    assert parse_choice(raw) is expected


def test_parse_choice_custom_bindings():
    bindings = {"a": "left", "b": "right", "q": "stop"}
    assert parse_choice("A", bindings) is Direction.LEFT
    assert parse_choice("e", bindings) is Direction.INVALID


def test_root_clue_collected_on_start(mansion, catalog):
    nav = Navigator(mansion, catalog)
    assert nav.current is mansion
    assert nav.entry_clue == "Porta principal foi arrombada"
    assert list(catalog) == ["Porta principal foi arrombada"]
    assert not nav.finished


def test_move_collects_clue(mansion, catalog):
    nav = Navigator(mansion, catalog)
    report = nav.step(Direction.RIGHT)
    assert report.outcome is TurnOutcome.MOVED
    assert report.room.name == "Cozinha"
    assert report.new_clue == "Faca desaparecida do bloco"
    assert len(catalog) == 2


def test_room_without_clue(mansion, catalog):
    nav = Navigator(mansion, catalog)
    report = nav.step(Direction.LEFT)
    assert report.room.name == "Sala de Estar"
    assert report.new_clue is None
    assert len(catalog) == 1


def test_no_path_keeps_room(mansion, catalog):
    nav = Navigator(mansion, catalog)
    nav.step(Direction.LEFT)
    nav.step(Direction.RIGHT)
    assert nav.current.name == "Sala de Música"

    report = nav.step(Direction.RIGHT)
    assert report.outcome is TurnOutcome.NO_PATH
    assert nav.current.name == "Sala de Música"
    assert len(nav.path) == 3


def test_invalid_keeps_room_and_catalog(mansion, catalog):
    nav = Navigator(mansion, catalog)
    report = nav.choose("?")
    assert report.outcome is TurnOutcome.INVALID
    assert nav.current is mansion
    assert list(catalog) == ["Porta principal foi arrombada"]


def test_dead_end_waits_for_stop_by_default(mansion, catalog):
    nav = Navigator(mansion, catalog)
    for direction in (Direction.RIGHT, Direction.RIGHT, Direction.RIGHT):
        report = nav.step(direction)
    assert report.room.name == "Gazebo"
    assert report.outcome is TurnOutcome.MOVED
    assert report.dead_end
    assert nav.at_dead_end
    assert not nav.finished

    assert nav.step(Direction.LEFT).outcome is TurnOutcome.NO_PATH
    assert nav.step(Direction.STOP).outcome is TurnOutcome.STOPPED
    assert nav.finished


def test_dead_end_auto_stop(mansion, catalog):
    nav = Navigator(mansion, catalog, auto_stop_at_dead_end=True)
    nav.step(Direction.RIGHT)
    nav.step(Direction.LEFT)
    assert nav.finished
    assert nav.current.name == "Despensa"
    assert "Garrafa de vinho vazia no chão" in catalog


def test_auto_stop_on_leaf_root(catalog):
    nav = Navigator(create_room("Closet", "dust"), catalog, auto_stop_at_dead_end=True)
    assert nav.finished
    assert list(catalog) == ["dust"]


def test_finished_is_absorbing(mansion, catalog):
    nav = Navigator(mansion, catalog)
    nav.step(Direction.STOP)
    for direction in Direction:
        report = nav.step(direction)
        assert report.outcome is TurnOutcome.ALREADY_FINISHED
        assert nav.current is mansion
    assert len(nav.path) == 1
    assert len(catalog) == 1


def test_path_is_simple_descent(mansion, catalog):
    nav = Navigator(mansion, catalog)
    for raw in "e x d d e s d".split():
        nav.choose(raw)
    names = [room.name for room in nav.path]
    assert len(names) == len(set(names))
    for parent, child in zip(nav.path, nav.path[1:]):
        assert child is parent.left or child is parent.right


def test_shared_clue_collected_once(catalog):
    root = create_room("A", "same")
    root.left = create_room("B", "same")
    nav = Navigator(root, catalog)
    report = nav.step(Direction.LEFT)
    assert report.new_clue is None
    assert len(catalog) == 1


def test_existing_catalog_is_borrowed(mansion):
    catalog = ClueCatalog()
    catalog.add("Faca desaparecida do bloco")
    nav = Navigator(mansion, catalog)
    assert nav.step(Direction.RIGHT).new_clue is None
    assert nav.catalog is catalog
    assert len(catalog) == 2
