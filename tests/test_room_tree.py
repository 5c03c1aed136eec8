"""
Tests for the room tree and its case-file schema.
"""
import pytest
from pydantic import ValidationError

import room_tree
from models import ConstructionError, RoomSpec
from room_tree import (
    build_room_tree,
    clue_of,
    create_room,
    has_left,
    has_right,
    is_leaf,
    iter_rooms,
    room_depth,
)


def test_create_room_is_leaf():
    room = create_room("Attic")
    assert room.name == "Attic"
    assert clue_of(room) is None
    assert is_leaf(room)
    assert not has_left(room)
    assert not has_right(room)


def test_create_room_empty_clue_means_none():
    assert clue_of(create_room("Attic", "")) is None
    assert clue_of(create_room("Attic", "dust")) == "dust"


def test_mansion_shape(mansion):
    names = [room.name for room in iter_rooms(mansion)]
    assert len(names) == 12
    assert len(set(names)) == 12
    assert names[0] == "Hall de Entrada"
    assert room_depth(mansion) == 4


def test_mansion_links(mansion):
    assert mansion.left.name == "Sala de Estar"
    assert mansion.right.name == "Cozinha"
    musica = mansion.left.right
    assert musica.name == "Sala de Música"
    assert has_left(musica) and not has_right(musica)
    assert is_leaf(mansion.right.right.right)
    assert mansion.right.right.right.name == "Gazebo"


def test_mansion_clues(mansion):
    assert clue_of(mansion) == "Porta principal foi arrombada"
    assert clue_of(mansion.left) is None
    with_clue = [room for room in iter_rooms(mansion) if clue_of(room)]
    assert len(with_clue) == 10


def test_every_room_has_one_parent(mansion):
    seen = set()
    for room in iter_rooms(mansion):
        for child in (room.left, room.right):
            if child is not None:
                assert id(child) not in seen
                seen.add(id(child))
    assert id(mansion) not in seen


def test_allocation_failure_raises_construction_error(monkeypatch):
    calls = {"n": 0}
    real_create = room_tree.create_room

    def flaky_create(name, clue=None):
        calls["n"] += 1
        if calls["n"] == 3:
            raise MemoryError
        return real_create(name, clue)

    monkeypatch.setattr(room_tree, "create_room", flaky_create)
    spec = RoomSpec(
        name="A",
        left=RoomSpec(name="B", left=RoomSpec(name="C")),
        right=RoomSpec(name="D"),
    )
    with pytest.raises(ConstructionError):
        build_room_tree(spec)


def test_blank_room_name_rejected():
    with pytest.raises(ValidationError):
        RoomSpec(name="   ")


def test_blank_clue_normalised():
    assert RoomSpec(name="A", clue="  ").clue is None


def test_duplicate_room_names_rejected(tiny_case):
    data = tiny_case.model_dump()
    data["map"]["right"]["name"] = "West"
    with pytest.raises(ValidationError):
        type(tiny_case).model_validate(data)
