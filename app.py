"""
app.py
======
Streamlit web UI for Detective Quest: The Mansion Mystery.

Responsibilities:
  - Configure and render the Streamlit page (layout, dark-noir theme).
  - Manage session state initialisation and reset.
  - Render sidebar components (collected clues, exploration stats).
  - Render main-panel components (room card, move buttons, accusation form,
    verdict screen).

This file contains only UI logic. All game logic lives in game_engine.py,
all narrative data in case_data.py, and all text rendering in ui_helpers.py.

Run with:
    streamlit run app.py
"""

from __future__ import annotations

import logging

import streamlit as st

# ---------------------------------------------------------------------------
# Logging configuration
#
# basicConfig is called here, at the Streamlit entry point, so it runs exactly
# once per process regardless of how many times Streamlit reruns the script.
# All modules under "detective_quest.*" emit to this handler automatically.
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("detective_quest.app")

from game_engine import DetectiveQuestGame
from navigation import Direction
from room_tree import has_left, has_right
from ui_helpers import (
    build_css,
    choose_accused,
    describe_room_entry,
    describe_turn,
    format_verdict,
)


# ============================================================
# PAGE CONFIGURATION
# ============================================================

st.set_page_config(
    page_title="Detective Quest",
    page_icon="🔍",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown(f"<style>{build_css()}</style>", unsafe_allow_html=True)


# ============================================================
# SESSION STATE
# ============================================================

def init_session_state() -> None:
    """
    Initialise all Streamlit session state variables on first run.

    Uses a defaults dict so new keys can be added in one place.
    """
    if "game" not in st.session_state:
        st.session_state.game = DetectiveQuestGame()
    defaults: dict = {
        "last_lines": describe_room_entry(
            st.session_state.game.current_room,
            st.session_state.game.entry_clue,
            st.session_state.game.suspect_for,
        ),
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def reset_game() -> None:
    """Start a new playthrough of the same case."""
    game = st.session_state.game
    game.reset()
    st.session_state.last_lines = describe_room_entry(
        game.current_room, game.entry_clue, game.suspect_for
    )


def _move(direction: Direction) -> None:
    game   = st.session_state.game
    report = game.move(direction)
    # The room card already shows the room name.
    st.session_state.last_lines = describe_turn(report, game.suspect_for, banner=False)


# ============================================================
# SIDEBAR COMPONENTS
# ============================================================

def render_sidebar() -> None:
    """Render the notebook (collected clues, ascending) and exploration stats."""
    game  = st.session_state.game
    state = game.state

    st.sidebar.markdown(
        '<div class="sidebar-header">📓 NOTEBOOK</div>', unsafe_allow_html=True
    )
    clues = game.collected_clues()
    if clues:
        for clue in clues:
            st.sidebar.markdown(f"- {clue}")
    else:
        st.sidebar.markdown("*No clues collected yet.*")

    st.sidebar.markdown("---")
    st.sidebar.markdown(
        '<div class="sidebar-header">📊 INVESTIGATION</div>', unsafe_allow_html=True
    )
    st.sidebar.markdown(f"**Rooms visited:** {len(state.rooms_visited)}")
    st.sidebar.markdown(f"**Turns taken:** {state.turns_taken}")
    st.sidebar.markdown(
        f"**Clues needed to convict:** {game.config.conviction_threshold}"
    )

    st.sidebar.markdown("---")
    if st.sidebar.button("🔄 NEW CASE", use_container_width=True):
        reset_game()
        st.rerun()


# ============================================================
# MAIN-PANEL COMPONENTS
# ============================================================

def render_room() -> None:
    """Render the current room card, the last turn's messages and the move buttons."""
    game = st.session_state.game
    room = game.current_room

    path = " → ".join(game.state.rooms_visited)
    st.markdown(f"""
    <div class="room-card">
        <h3>🚪 {room.name}</h3>
        <p style="color: #666; font-size: 12px;">{path}</p>
    </div>
    """, unsafe_allow_html=True)

    for line in st.session_state.last_lines:
        if line.startswith("CLUE FOUND"):
            st.markdown(f"<p class='clue-found'>🔎 {line}</p>", unsafe_allow_html=True)
        else:
            st.markdown(line)

    col1, col2, col3 = st.columns(3)
    with col1:
        if st.button("← LEFT", use_container_width=True, disabled=not has_left(room)):
            _move(Direction.LEFT)
            st.rerun()
    with col2:
        if st.button("RIGHT →", use_container_width=True, disabled=not has_right(room)):
            _move(Direction.RIGHT)
            st.rerun()
    with col3:
        if st.button("✕ STOP & ACCUSE", type="primary", use_container_width=True):
            _move(Direction.STOP)
            st.rerun()


def render_accusation_form() -> None:
    """Render the one-shot accusation form shown once exploration is over."""
    game = st.session_state.game

    st.markdown("### ⚖️ ACCUSATION PHASE")
    st.markdown("**Clues collected:**")
    for clue in game.collected_clues() or ["(none)"]:
        st.markdown(f"- {clue}")

    accused = st.selectbox(
        "Who committed the crime?",
        options=game.case.suspects,
    )
    typed = st.text_input("…or type another name", value="")

    st.warning("⚠️ This is your FINAL accusation. There is no going back.")
    if st.button("🔨 I ACCUSE…", type="primary", use_container_width=True):
        game.make_accusation(choose_accused(typed, accused))
        st.rerun()


def render_game_result() -> None:
    """Render the verdict banner and the evidence analysis."""
    verdict = st.session_state.game.state.verdict

    if verdict.convicted:
        st.balloons()
        st.markdown("<div class='verdict-solved'>🎉 CASE SOLVED</div>", unsafe_allow_html=True)
    else:
        st.markdown(
            "<div class='verdict-unsolved'>❌ INSUFFICIENT EVIDENCE</div>",
            unsafe_allow_html=True,
        )

    with st.expander("📋 Evidence Analysis", expanded=True):
        st.text(format_verdict(verdict))

    if st.button("🔄 NEW CASE", type="primary", use_container_width=True):
        reset_game()
        st.rerun()


# ============================================================
# MAIN
# ============================================================

def main() -> None:
    """
    Streamlit entry point:
      1. Initialise session state.
      2. Render the header and sidebar.
      3. Render the room, the accusation form, or the result.
    """
    init_session_state()
    game = st.session_state.game

    st.markdown(
        f"<h1 class='main-header'>🔍 {game.case.title.upper()}</h1>",
        unsafe_allow_html=True,
    )
    render_sidebar()

    if game.state.accusation_made:
        render_game_result()
    elif game.finished:
        render_accusation_form()
    else:
        render_room()


if __name__ == "__main__":
    main()
