"""
models.py
=========
Shared data models for Detective Quest: The Mansion Mystery.

Contains:
  - RoomSpec / ClueAttribution / CaseFile : Pydantic schemas for the injected
                                            case configuration (map + evidence).
  - Verdict                               : Pydantic schema for the outcome of
                                            an accusation.
  - GameState                             : Mutable dataclass tracking
                                            per-session player progress.
  - DetectiveQuestError and subclasses    : typed failures raised by the core.

Keeping these in one module guarantees a single source of truth for data
shapes used across the data structures, game_engine.py, and both front ends.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class DetectiveQuestError(Exception):
    """Base class for every error raised by the game core."""


class ConstructionError(DetectiveQuestError):
    """
    A room, clue node or index entry could not be allocated.

    Raised in place of a bare MemoryError. Builders only publish a structure
    once it is complete, so nothing partially built is left reachable.
    """


class AccusationError(DetectiveQuestError):
    """An accusation was attempted out of turn (twice, or mid-exploration)."""


# ---------------------------------------------------------------------------
# Case configuration (validated once at startup)
# ---------------------------------------------------------------------------

class RoomSpec(BaseModel):
    """
    Declarative description of one room and the rooms below it.

    Fields:
        name:  Display name, unique across the whole map.
        clue:  Clue text found in this room. Blank strings mean "no clue".
        left:  Room reached by going left, if any.
        right: Room reached by going right, if any.
    """

    model_config = ConfigDict(frozen=True)

    name:  str
    clue:  Optional[str] = None
    left:  Optional[RoomSpec] = None
    right: Optional[RoomSpec] = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("room name must not be blank")
        return value

    @field_validator("clue")
    @classmethod
    def _blank_clue_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        return value

    def walk(self) -> Iterator[RoomSpec]:
        """Yield this spec and every descendant, pre-order."""
        stack: List[RoomSpec] = [self]
        while stack:
            spec = stack.pop()
            yield spec
            if spec.right is not None:
                stack.append(spec.right)
            if spec.left is not None:
                stack.append(spec.left)


RoomSpec.model_rebuild()


class ClueAttribution(BaseModel):
    """One clue → suspect pair loaded into the suspect index."""

    model_config = ConfigDict(frozen=True)

    clue:    str
    suspect: str

    @field_validator("clue", "suspect")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("clue and suspect must not be blank")
        return value


class CaseFile(BaseModel):
    """
    Everything a run needs that is not game logic.

    Fields:
        title:        Case title shown on the banner.
        map:          Root of the room tree.
        attributions: Clue → suspect pairs, inserted into the index in order.
        suspects:     Names offered to the player at accusation time.
    """

    model_config = ConfigDict(frozen=True)

    title:        str
    map:          RoomSpec
    attributions: List[ClueAttribution]
    suspects:     List[str]

    @model_validator(mode="after")
    def _room_names_unique(self) -> CaseFile:
        seen = set()
        for spec in self.map.walk():
            if spec.name in seen:
                raise ValueError(f"duplicate room name in map: {spec.name!r}")
            seen.add(spec.name)
        return self


# ---------------------------------------------------------------------------
# Accusation outcome
# ---------------------------------------------------------------------------

class Verdict(BaseModel):
    """
    Result of judging one accusation against the collected evidence.

    Fields:
        accused:        The name exactly as evaluated (already bounded).
        matching_clues: Collected clues attributed to the accused, ascending.
        clue_count:     len(matching_clues).
        threshold:      Conviction threshold in force for this run.
        convicted:      clue_count >= threshold.
    """

    model_config = ConfigDict(frozen=True)

    accused:        str
    matching_clues: List[str]
    clue_count:     int
    threshold:      int
    convicted:      bool


# ---------------------------------------------------------------------------
# Game state
# ---------------------------------------------------------------------------

@dataclass
class GameState:
    """
    Mutable snapshot of everything that changes as the player explores.

    Owned by DetectiveQuestGame and mutated in place as turns progress. The
    front ends read it for status lines and the sidebar.

    Attributes:
        turns_taken:     Choices processed (valid or not).
        invalid_inputs:  Choices that did not map to any direction.
        blocked_moves:   Left/right choices with no room that way.
        rooms_visited:   Room names in the order they were entered.
        finished:        True once the exploration reached its terminal state.
        accusation_made: True once make_accusation() has run.
        verdict:         The verdict of that accusation.
    """

    turns_taken:     int = 0
    invalid_inputs:  int = 0
    blocked_moves:   int = 0
    rooms_visited:   List[str] = field(default_factory=list)
    finished:        bool = False
    accusation_made: bool = False
    verdict:         Optional[Verdict] = None

    def record_visit(self, room_name: str) -> None:
        self.rooms_visited.append(room_name)

    def reset(self) -> None:
        """Reset all mutable fields to their initial values for a new game."""
        self.turns_taken     = 0
        self.invalid_inputs  = 0
        self.blocked_moves   = 0
        self.rooms_visited   = []
        self.finished        = False
        self.accusation_made = False
        self.verdict         = None
