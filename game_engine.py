"""
game_engine.py
==============
Core game engine for Detective Quest: The Mansion Mystery.

Contains:
  DetectiveQuestGame : the single orchestrating class that owns the room
                       tree, the clue catalog and the suspect index for one
                       run, and exposes a clean API consumed by both the
                       Streamlit UI (app.py) and the CLI runner (cli.py).

Public API summary:
    game = DetectiveQuestGame()
    game.current_room                    → Room
    game.choose(raw_input)               → TurnReport
    game.explore(inputs)                 → [TurnReport, ...]
    game.collected_clues()               → [str, ...] (ascending)
    game.suspect_for(clue)               → str | None
    game.make_accusation(name)           → Verdict
    game.reset()                         → None

Logging
-------
Every significant event is emitted through the standard ``logging`` module
under the ``detective_quest`` namespace, so the host application can route
and filter it without changing this file. Configure it once at the entry
point, e.g.:

    import logging
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from accusation import clamp_accused_name, evaluate_accusation
from case_data import CASE_FILE
from clue_catalog import ClueCatalog
from config import GAME_CONFIG, INDEX_CONFIG, KEY_BINDINGS, GameConfig, IndexConfig
from models import AccusationError, CaseFile, GameState, Verdict
from navigation import Direction, Navigator, TurnOutcome, TurnReport, parse_choice
from room_tree import Room, build_room_tree
from suspect_index import SuspectIndex

logger = logging.getLogger("detective_quest.game_engine")


class DetectiveQuestGame:
    """
    Main game engine.

    Owns the three data structures for the whole run; the Navigator and the
    accusation functions only borrow them.

    Attributes:
        case:      The validated case configuration this run was built from.
        config:    Game rules (threshold, input bound, dead-end policy).
        rooms:     Root of the room tree. Built once, never modified.
        index:     Clue → suspect index. Built once, never modified.
        catalog:   Clues collected so far.
        navigator: Current position and path.
        state:     Counters and the verdict, for the front ends.
    """

    def __init__(
        self,
        case: CaseFile = CASE_FILE,
        config: GameConfig = GAME_CONFIG,
        index_config: IndexConfig = INDEX_CONFIG,
    ) -> None:
        self.case   = case
        self.config = config

        self.index = SuspectIndex.from_pairs(
            ((a.clue, a.suspect) for a in case.attributions),
            bucket_count=index_config.bucket_count,
            seed=index_config.hash_seed,
            multiplier=index_config.hash_multiplier,
        )
        self.rooms: Room = build_room_tree(case.map)

        logger.info(
            "DetectiveQuestGame initialised: case=%r, attributions=%d, threshold=%d, auto_stop=%s",
            case.title,
            len(self.index),
            config.conviction_threshold,
            config.auto_stop_at_dead_end,
        )
        self._start()

    def _start(self) -> None:
        self.state     = GameState()
        self.catalog   = ClueCatalog()
        self.navigator = Navigator(self.rooms, self.catalog, self.config.auto_stop_at_dead_end)
        self.state.record_visit(self.rooms.name)
        self.state.finished = self.navigator.finished

    # ------------------------------------------------------------------
    # Exploration
    # ------------------------------------------------------------------

    @property
    def current_room(self) -> Room:
        return self.navigator.current

    @property
    def finished(self) -> bool:
        return self.navigator.finished

    @property
    def entry_clue(self) -> Optional[str]:
        """Clue collected in the entrance when the run started, if any."""
        return self.navigator.entry_clue

    def choose(self, raw: Optional[str]) -> TurnReport:
        """
        Process one line of player input.

        Args:
            raw: The typed choice. None (end of input) is treated as invalid.

        Returns:
            What the choice did. Recoverable problems (unknown key, no room
            that way) come back as outcomes; the run continues.
        """
        return self.move(parse_choice(raw, KEY_BINDINGS))

    def move(self, choice: Direction) -> TurnReport:
        """Apply an already-parsed choice and update the counters."""
        report = self.navigator.step(choice)

        if report.outcome is not TurnOutcome.ALREADY_FINISHED:
            self.state.turns_taken += 1
        if report.outcome is TurnOutcome.INVALID:
            self.state.invalid_inputs += 1
        elif report.outcome is TurnOutcome.NO_PATH:
            self.state.blocked_moves += 1
        elif report.outcome in (TurnOutcome.MOVED, TurnOutcome.DEAD_END_STOP):
            self.state.record_visit(report.room.name)
        self.state.finished = self.navigator.finished
        return report

    def explore(self, inputs: Iterable[str]) -> List[TurnReport]:
        """
        Feed a sequence of choices until it runs out or the exploration ends.

        Handy for scripted playthroughs and tests.
        """
        reports: List[TurnReport] = []
        for raw in inputs:
            if self.finished:
                break
            reports.append(self.choose(raw))
        return reports

    def stop(self) -> TurnReport:
        """End the exploration where the player stands."""
        return self.move(Direction.STOP)

    # ------------------------------------------------------------------
    # Evidence
    # ------------------------------------------------------------------

    def collected_clues(self) -> List[str]:
        return list(self.catalog)

    def suspect_for(self, clue: str) -> Optional[str]:
        return self.index.lookup(clue)

    # ------------------------------------------------------------------
    # Accusation
    # ------------------------------------------------------------------

    def make_accusation(self, accused: str) -> Verdict:
        """
        Judge the player's accusation. Allowed exactly once per run, after
        the exploration has finished.

        Args:
            accused: Typed name; trimmed and bounded to
                     GameConfig.max_accused_bytes before matching.

        Raises:
            AccusationError: exploration still running, or already accused.
        """
        if not self.finished:
            raise AccusationError("finish exploring before making an accusation")
        if self.state.accusation_made:
            raise AccusationError("an accusation has already been made this run")

        name = clamp_accused_name(accused, self.config.max_accused_bytes)
        verdict = evaluate_accusation(
            self.catalog, self.index, name, self.config.conviction_threshold
        )

        self.state.accusation_made = True
        self.state.verdict         = verdict
        return verdict

    # ------------------------------------------------------------------
    # Reset
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """
        Start a new playthrough of the same case.

        The catalog, position and state are discarded; the room tree and the
        index are reused since play never changes them.
        """
        logger.info("Game reset requested.")
        self._start()
