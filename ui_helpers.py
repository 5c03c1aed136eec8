"""
ui_helpers.py
=============
Stateless text-rendering helpers shared by the CLI and the Streamlit UI.

These functions carry no game state of their own: they receive rooms,
reports and verdicts as arguments and return strings. Keeping them separate
from cli.py and app.py means they can be tested without a terminal or a
live Streamlit session.

Contains:
  - keys_for()            : key letters bound to a direction
  - format_room_banner()  : box with the current room's name
  - format_move_menu()    : the choices available in a room
  - describe_room_entry() : lines shown on entering a room
  - describe_turn()       : player-facing lines for a TurnReport
  - format_clue_list()    : collected clues, one per line
  - format_verdict()      : end-of-game evidence analysis
  - build_css()           : returns the dark-noir CSS string
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Mapping, Optional

from config import KEY_BINDINGS
from models import Verdict
from navigation import Direction, TurnOutcome, TurnReport
from room_tree import Room, has_left, has_right, is_leaf

_BANNER_WIDTH = 44


def keys_for(direction: Direction, bindings: Mapping[str, str] = KEY_BINDINGS) -> str:
    """
    Example:
        >>> keys_for(Direction.LEFT)
        'E/L'
    """
    return "/".join(k.upper() for k, v in bindings.items() if v == direction.value)


def format_room_banner(room: Room) -> str:
    inner = f" LOCATION: {room.name}"
    return "\n".join([
        "╔" + "═" * _BANNER_WIDTH + "╗",
        "║" + inner.ljust(_BANNER_WIDTH)[:_BANNER_WIDTH] + "║",
        "╚" + "═" * _BANNER_WIDTH + "╝",
    ])


def format_move_menu(room: Room) -> str:
    """Only directions with a room behind them are offered; stop always is."""
    lines = ["Choose your next move:"]
    if has_left(room):
        lines.append(f"  [{keys_for(Direction.LEFT)}] ← go left")
    if has_right(room):
        lines.append(f"  [{keys_for(Direction.RIGHT)}] → go right")
    lines.append(f"  [{keys_for(Direction.STOP)}] ✕ stop and accuse")
    return "\n".join(lines)


def describe_room_entry(
    room: Room,
    new_clue: Optional[str],
    suspect_for: Callable[[str], Optional[str]],
) -> List[str]:
    """Lines shown when the player walks into `room`."""
    lines: List[str] = []
    if new_clue:
        lines.append("CLUE FOUND!")
        lines.append(f'   "{new_clue}"')
        suspect = suspect_for(new_clue)
        if suspect:
            lines.append(f"   Related suspect: {suspect}")
    elif room.clue:
        lines.append("You have already noted the clue in this room.")
    else:
        lines.append("No clue in this room.")
    if is_leaf(room):
        lines.append("This room has no more paths! Choose stop to make your accusation.")
    return lines


def describe_turn(
    report: TurnReport,
    suspect_for: Callable[[str], Optional[str]],
    banner: bool = True,
) -> List[str]:
    """Player-facing lines for the outcome of one choice."""
    outcome = report.outcome
    if outcome is TurnOutcome.NO_PATH:
        return ["There is no path that way!"]
    if outcome is TurnOutcome.INVALID:
        return ["Invalid option!"]
    if outcome is TurnOutcome.STOPPED:
        return ["Ending the exploration..."]
    if outcome is TurnOutcome.ALREADY_FINISHED:
        return ["The exploration is already over."]

    lines = [format_room_banner(report.room)] if banner else []
    lines.extend(describe_room_entry(report.room, report.new_clue, suspect_for))
    if outcome is TurnOutcome.DEAD_END_STOP:
        lines.append("Dead end. Ending the exploration...")
    return lines


def format_clue_list(clues: Iterable[str], bullet: str = "   ") -> str:
    lines = [f"{bullet}{clue}" for clue in clues]
    return "\n".join(lines) if lines else f"{bullet}(no clues collected)"


def choose_accused(typed: Optional[str], selected: str) -> str:
    """The typed name wins over the selected suspect unless it is blank."""
    return (typed or "").strip() or selected


def format_verdict(verdict: Verdict) -> str:
    """
    Render the evidence analysis for a verdict.

    Lists the matching clues (if any), then either the conviction or the
    insufficient-evidence message with the threshold that was applied.
    """
    lines = [
        "EVIDENCE ANALYSIS",
        "─" * _BANNER_WIDTH,
        f"Accused        : {verdict.accused}",
        f"Clues matching : {verdict.clue_count}",
    ]
    if verdict.matching_clues:
        lines.append("")
        lines.append(f"EVIDENCE AGAINST {verdict.accused}:")
        lines.append(format_clue_list(verdict.matching_clues, bullet="   • "))

    lines.append("")
    if verdict.convicted:
        lines.append("CASE SOLVED!")
        lines.append(
            f"You gathered enough evidence ({verdict.clue_count} clues) "
            f"to prove that {verdict.accused} is guilty."
        )
    else:
        lines.append("INSUFFICIENT EVIDENCE")
        lines.append(
            f"You only found {verdict.clue_count} clue(s) against {verdict.accused}; "
            f"at least {verdict.threshold} are needed. The suspect walks free."
        )
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Dark-noir CSS
# ---------------------------------------------------------------------------

def build_css() -> str:
    """
    Return the dark-noir CSS string injected into the Streamlit app.

    Returns:
        A raw CSS string without <style> tags; the caller wraps it.
    """
    return """
    @import url('https://fonts.googleapis.com/css2?family=Special+Elite&family=Courier+Prime:wght@400;700&display=swap');

    /* ── Global dark background ── */
    html, body, .stApp, .main, .block-container {
        background: linear-gradient(180deg, #0a0a0a 0%, #141414 60%, #0d0d0d 100%) !important;
        color: #c0c0c0 !important;
    }

    /* ── Sidebar ── */
    [data-testid="stSidebar"], section[data-testid="stSidebar"] > div {
        background-color: #0d0d0d !important;
        border-right: 1px solid #222 !important;
    }
    [data-testid="stSidebar"] p,
    [data-testid="stSidebar"] span,
    [data-testid="stSidebar"] li { color: #c0c0c0 !important; }

    /* ── Typography ── */
    .main-header {
        text-align: center; color: #8B0000;
        font-family: 'Special Elite', cursive;
        text-shadow: 2px 2px 4px #000; letter-spacing: 3px;
    }
    .sidebar-header {
        color: #8B0000; font-family: 'Special Elite', cursive;
        letter-spacing: 2px; text-align: center; padding: 10px;
        border-bottom: 1px solid #333;
    }

    /* ── Room card ── */
    .room-card {
        background: linear-gradient(145deg, #1a1a1a, #2d2d2d);
        padding: 25px; border-radius: 5px;
        border-left: 4px solid #8B0000; border-top: 1px solid #333;
        box-shadow: 0 4px 15px rgba(0,0,0,0.5);
        font-family: 'Courier Prime', monospace;
    }
    .room-card h3 { color: #8B0000; font-family: 'Special Elite', cursive; letter-spacing: 2px; }
    .clue-found { color: #d4af37; font-family: 'Special Elite', cursive; }

    /* ── Verdict ── */
    .verdict-solved   { text-align: center; font-family: 'Special Elite', cursive; font-size: 40px; color: #228B22; }
    .verdict-unsolved { text-align: center; font-family: 'Special Elite', cursive; font-size: 40px; color: #8B0000; }

    /* ── Buttons ── */
    .stButton > button {
        background: linear-gradient(145deg, #2d2d2d, #1a1a1a);
        color: #c0c0c0; border: 1px solid #444;
        font-family: 'Courier Prime', monospace; min-height: 50px;
    }
    .stButton > button:hover { border-color: #8B0000; color: #8B0000; }
    .stButton > button[kind="primary"] {
        background: linear-gradient(145deg, #8B0000, #5a0000); color: #fff; border: none;
    }

    /* ── Inputs ── */
    .stTextInput input {
        background-color: #141414 !important; color: #c0c0c0 !important;
        border: 1px solid #333 !important; font-family: 'Courier Prime', monospace;
    }
"""
