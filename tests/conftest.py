import pytest

from case_data import CASE_FILE
from clue_catalog import ClueCatalog
from game_engine import DetectiveQuestGame
from models import CaseFile, RoomSpec
from room_tree import build_room_tree
from suspect_index import SuspectIndex


@pytest.fixture
def case():
    return CASE_FILE


@pytest.fixture
def game():
    """Fresh run over the mansion case with the default rules."""
    return DetectiveQuestGame()


@pytest.fixture
def mansion():
    return build_room_tree(CASE_FILE.map)


@pytest.fixture
def catalog():
    return ClueCatalog()


@pytest.fixture
def index():
    return SuspectIndex.from_pairs((a.clue, a.suspect) for a in CASE_FILE.attributions)


@pytest.fixture
def tiny_case():
    """Three rooms: a root with two leaf children, two suspects."""
    return CaseFile(
        title="Tiny",
        map=RoomSpec(
            name="Root",
            clue="mud",
            left=RoomSpec(name="West", clue="ash"),
            right=RoomSpec(name="East", clue="wax"),
        ),
        attributions=[
            {"clue": "mud", "suspect": "Ann"},
            {"clue": "ash", "suspect": "Ann"},
            {"clue": "wax", "suspect": "Bob"},
        ],
        suspects=["Ann", "Bob"],
    )
