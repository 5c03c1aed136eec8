"""
Tests for the stateless text-rendering helpers.
"""
from models import Verdict
from navigation import Direction, TurnOutcome, TurnReport
from room_tree import create_room
from ui_helpers import (
    build_css,
    choose_accused,
    describe_turn,
    format_clue_list,
    format_move_menu,
    format_room_banner,
    format_verdict,
    keys_for,
)


def no_suspect(_clue):
    return None


def test_keys_for_default_bindings():
    assert keys_for(Direction.LEFT) == "E/L"
    assert keys_for(Direction.RIGHT) == "D/R"
    assert keys_for(Direction.STOP) == "S"


def test_room_banner_contains_name():
    assert "LOCATION: Cozinha" in format_room_banner(create_room("Cozinha"))


def test_menu_offers_only_existing_paths():
    room = create_room("Sala de Música")
    room.left = create_room("Piano Room")
    menu = format_move_menu(room)
    assert "go left" in menu
    assert "go right" not in menu
    assert "stop and accuse" in menu


def test_describe_turn_outcomes():
    room = create_room("Hall", "mud")
    assert describe_turn(TurnReport(TurnOutcome.NO_PATH, room), no_suspect) == ["There is no path that way!"]
    assert describe_turn(TurnReport(TurnOutcome.INVALID, room), no_suspect) == ["Invalid option!"]

    moved = describe_turn(TurnReport(TurnOutcome.MOVED, room, "mud", True), lambda c: "Ann")
    assert "CLUE FOUND!" in moved
    assert "   Related suspect: Ann" in moved
    assert any("no more paths" in line for line in moved)


def test_describe_turn_without_banner():
    room = create_room("Hall")
    lines = describe_turn(TurnReport(TurnOutcome.MOVED, room), no_suspect, banner=False)
    assert lines == ["No clue in this room.", "This room has no more paths! Choose stop to make your accusation."]


def test_clue_list():
    assert format_clue_list(["a", "b"]) == "   a\n   b"
    assert "no clues" in format_clue_list([])


def test_verdict_text():
    solved = Verdict(accused="Ann", matching_clues=["ash", "mud"], clue_count=2, threshold=2, convicted=True)
    text = format_verdict(solved)
    assert "CASE SOLVED!" in text
    assert "   • ash" in text

    unsolved = Verdict(accused="Bob", matching_clues=[], clue_count=0, threshold=2, convicted=False)
    text = format_verdict(unsolved)
    assert "INSUFFICIENT EVIDENCE" in text
    assert "EVIDENCE AGAINST" not in text


def test_css_has_room_card():
    assert ".room-card" in build_css()


def test_choose_accused_prefers_typed_name():
    assert choose_accused("Chef Marcel", "Lady Elizabeth") == "Chef Marcel"


def test_choose_accused_ignores_blank_typed_name():
    assert choose_accused("   ", "Lady Elizabeth") == "Lady Elizabeth"
    assert choose_accused("", "Lady Elizabeth") == "Lady Elizabeth"
    assert choose_accused(None, "Lady Elizabeth") == "Lady Elizabeth"
