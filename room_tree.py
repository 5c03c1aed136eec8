"""
room_tree.py
============
The mansion map as a binary tree of rooms.

A room owns its two optional children outright; nothing ever points back up
the tree, so the only way to move is forward into a child. Trees are built
once from a RoomSpec and read-only afterwards.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional

from models import ConstructionError, RoomSpec

logger = logging.getLogger("detective_quest.room_tree")


@dataclass(eq=False)
class Room:
    """
    One node of the room tree.

    Attributes:
        name:  Display name.
        clue:  Clue text found here, or None.
        left:  Child reached by going left.
        right: Child reached by going right.
    """

    name:  str
    clue:  Optional[str] = None
    left:  Optional[Room] = None
    right: Optional[Room] = None

    def __repr__(self) -> str:
        return f"Room({self.name!r})"


def create_room(name: str, clue: Optional[str] = None) -> Room:
    """Allocate a leaf room. An empty clue string is stored as None."""
    return Room(name=name, clue=clue or None)


def has_left(room: Room) -> bool:
    return room.left is not None


def has_right(room: Room) -> bool:
    return room.right is not None


def clue_of(room: Room) -> Optional[str]:
    return room.clue


def is_leaf(room: Room) -> bool:
    return room.left is None and room.right is None


def build_room_tree(spec: RoomSpec) -> Room:
    """
    Build the room tree described by `spec`.

    Subtrees are built before their parent is allocated and attached, so if
    an allocation fails midway no room built so far is reachable from anything
    the caller holds.

    Raises:
        ConstructionError: a room could not be allocated.
    """
    try:
        root = _build(spec)
    except MemoryError as exc:
        logger.error("Out of memory while building room tree at root=%r", spec.name)
        raise ConstructionError(f"could not build room tree rooted at {spec.name!r}") from exc

    logger.debug("Room tree built: root=%r, rooms=%d", root.name, sum(1 for _ in iter_rooms(root)))
    return root


def _build(spec: RoomSpec) -> Room:
    left  = _build(spec.left) if spec.left is not None else None
    right = _build(spec.right) if spec.right is not None else None
    room = create_room(spec.name, spec.clue)
    room.left = left
    room.right = right
    return room


def iter_rooms(root: Optional[Room]) -> Iterator[Room]:
    """Yield every room reachable from `root`, pre-order (left before right)."""
    stack: List[Room] = [root] if root is not None else []
    while stack:
        room = stack.pop()
        yield room
        if room.right is not None:
            stack.append(room.right)
        if room.left is not None:
            stack.append(room.left)


def room_depth(root: Optional[Room]) -> int:
    """Number of levels in the tree; 0 for an empty tree."""
    if root is None:
        return 0
    return 1 + max(room_depth(root.left), room_depth(root.right))
