"""
cli.py
======
Command-line interface for Detective Quest: The Mansion Mystery.

Provides the text-based game loop. All game logic is delegated to
DetectiveQuestGame; this module only handles I/O.

Usage:
    python cli.py        (or the installed ``detective-quest`` script)

Keys during exploration (case-insensitive, one per line):
    E or L : go left
    D or R : go right
    S      : stop exploring and make the accusation
"""

from __future__ import annotations

import logging
import sys
from typing import Callable

from game_engine import DetectiveQuestGame
from ui_helpers import (
    describe_room_entry,
    describe_turn,
    format_clue_list,
    format_move_menu,
    format_room_banner,
    format_verdict,
)

InputFn  = Callable[[str], str]
OutputFn = Callable[[str], None]


def _read(input_fn: InputFn, prompt: str) -> str:
    """Read one line; end of input or an undecodable line reads as empty."""
    try:
        return input_fn(prompt)
    except (EOFError, UnicodeDecodeError):
        return ""


def run_cli(input_fn: InputFn = input, output_fn: OutputFn = print) -> int:
    """
    Main CLI game loop.

    Prints the case banner, runs the exploration until the player stops (or
    input runs out), then asks for the accused and prints the verdict.

    Args:
        input_fn:  Source of player input, called with the prompt.
        output_fn: Sink for every line shown to the player.

    Returns:
        Process exit code (always 0 on normal completion).
    """
    game = DetectiveQuestGame()

    # --- Case briefing banner ---
    output_fn("\n" + "=" * 60)
    output_fn(f"   {game.case.title.upper()}")
    output_fn("=" * 60)
    output_fn("A crime has been committed in the mansion.")
    output_fn("Explore the rooms, collect clues and find the culprit.")
    output_fn(
        f"You will need at least {game.config.conviction_threshold} clues "
        "against someone to accuse them."
    )
    output_fn("-" * 60)

    # --- Exploration ---
    output_fn(format_room_banner(game.current_room))
    for line in describe_room_entry(game.current_room, game.entry_clue, game.suspect_for):
        output_fn(line)

    while not game.finished:
        output_fn(format_move_menu(game.current_room))
        try:
            raw = input_fn("Your choice: ")
        except EOFError:
            output_fn("")
            game.stop()
            break
        except UnicodeDecodeError:
            raw = None

        report = game.choose(raw)
        for line in describe_turn(report, game.suspect_for):
            output_fn(line)

    # --- Accusation ---
    output_fn("\n" + "=" * 60)
    output_fn("   ACCUSATION PHASE")
    output_fn("=" * 60)
    output_fn("CLUES COLLECTED:")
    output_fn(format_clue_list(game.collected_clues()))
    output_fn("\nSUSPECTS:")
    output_fn(format_clue_list(game.case.suspects, bullet="  • "))

    accused = _read(input_fn, "\nWho do you accuse? Type the full name: ")
    verdict = game.make_accusation(accused)
    output_fn("")
    output_fn(format_verdict(verdict))

    output_fn("\nThanks for playing Detective Quest!")
    return 0


def main() -> int:
    # Configure logging at the entry point so all detective_quest.* loggers
    # share one handler. WARNING keeps the game text readable; raise to INFO
    # to trace rooms, clues and the verdict on stderr.
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return run_cli()


if __name__ == "__main__":
    sys.exit(main())
