"""
navigation.py
=============
Turn-by-turn descent through the room tree.

The Navigator is a two-state machine: it is either standing in a room or
finished. Each turn it receives one Direction and reports what happened as
a TurnReport; bad input and blocked moves are reported, never raised.
Rooms are only ever entered by moving to a child, so the path from the
entrance is always simple.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Mapping, Optional

from clue_catalog import ClueCatalog
from config import KEY_BINDINGS
from room_tree import Room, clue_of, is_leaf

logger = logging.getLogger("detective_quest.navigation")


class Direction(str, Enum):
    LEFT    = "left"
    RIGHT   = "right"
    STOP    = "stop"
    INVALID = "invalid"


class TurnOutcome(str, Enum):
    """What a single choice did."""
    MOVED            = "moved"             # entered a child room
    NO_PATH          = "no_path"           # no room that way; stayed put
    INVALID          = "invalid"           # unrecognised input; stayed put
    STOPPED          = "stopped"           # player chose stop
    DEAD_END_STOP    = "dead_end_stop"     # moved into a leaf with auto-stop on
    ALREADY_FINISHED = "already_finished"  # choice arrived after the end


@dataclass(frozen=True)
class TurnReport:
    """
    Attributes:
        outcome:  See TurnOutcome.
        room:     The room the player is in after the turn.
        new_clue: Clue added to the catalog by entering `room` this turn.
        dead_end: True when `room` has no exits.
    """
    outcome:  TurnOutcome
    room:     Room
    new_clue: Optional[str] = None
    dead_end: bool = False


def parse_choice(raw: Optional[str], bindings: Mapping[str, str] = KEY_BINDINGS) -> Direction:
    """
    Map one line of player input to a Direction.

    Surrounding whitespace is ignored; what remains must be a single bound
    character (any case). Everything else, including None and empty input,
    is INVALID.

    Examples:
        >>> parse_choice("E")
        <Direction.LEFT: 'left'>
        >>> parse_choice("left")
        <Direction.INVALID: 'invalid'>
    """
    text = (raw or "").strip().lower()
    if len(text) != 1 or text not in bindings:
        return Direction.INVALID
    return Direction(bindings[text])


class Navigator:
    """
    Walks one player from the root of a room tree towards the leaves.

    The navigator borrows the room tree and the catalog; it never replaces
    either. Entering a room (including the root, on construction) adds that
    room's clue to the catalog if it is not there yet.

    Attributes:
        current: Room the player is standing in.
        path:    Rooms entered so far, root first.
        finished: True once stop was chosen (or a dead end reached with
                  auto-stop enabled). No further moves happen after that.
    """

    def __init__(
        self,
        root: Room,
        catalog: ClueCatalog,
        auto_stop_at_dead_end: bool = False,
    ) -> None:
        self.catalog = catalog
        self.auto_stop_at_dead_end = auto_stop_at_dead_end
        self.path: List[Room] = []
        self.finished = False
        self.current = root
        self.entry_clue = self._enter(root)
        if is_leaf(root) and auto_stop_at_dead_end:
            self.finished = True

    @property
    def at_dead_end(self) -> bool:
        return is_leaf(self.current)

    def _enter(self, room: Room) -> Optional[str]:
        self.current = room
        self.path.append(room)
        logger.info("Entered room %r (depth %d)", room.name, len(self.path) - 1)

        clue = clue_of(room)
        if clue and self.catalog.add(clue):
            logger.info("Clue collected in %r: %r", room.name, clue)
            return clue
        return None

    def step(self, choice: Direction) -> TurnReport:
        """Apply one choice and report the result."""
        room = self.current

        if self.finished:
            logger.warning("Choice %s ignored: exploration already finished.", choice.value)
            return TurnReport(TurnOutcome.ALREADY_FINISHED, room, dead_end=is_leaf(room))

        if choice is Direction.STOP:
            self.finished = True
            logger.info("Exploration stopped in %r after %d rooms.", room.name, len(self.path))
            return TurnReport(TurnOutcome.STOPPED, room, dead_end=is_leaf(room))

        if choice is Direction.INVALID:
            logger.debug("Invalid option in %r.", room.name)
            return TurnReport(TurnOutcome.INVALID, room, dead_end=is_leaf(room))

        target = room.left if choice is Direction.LEFT else room.right
        if target is None:
            logger.debug("No path %s from %r.", choice.value, room.name)
            return TurnReport(TurnOutcome.NO_PATH, room, dead_end=is_leaf(room))

        new_clue = self._enter(target)
        if is_leaf(target) and self.auto_stop_at_dead_end:
            self.finished = True
            logger.info("Dead end at %r; exploration finished.", target.name)
            return TurnReport(TurnOutcome.DEAD_END_STOP, target, new_clue, dead_end=True)
        return TurnReport(TurnOutcome.MOVED, target, new_clue, dead_end=is_leaf(target))

    def choose(self, raw: Optional[str], bindings: Mapping[str, str] = KEY_BINDINGS) -> TurnReport:
        """parse_choice() then step()."""
        return self.step(parse_choice(raw, bindings))
