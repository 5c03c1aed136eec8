"""
config.py
=========
Central configuration module for Detective Quest: The Mansion Mystery.

All tunable constants (hash-table sizing, verdict threshold, input bounds,
key bindings) live here so they can be adjusted without touching the data
structures or the game engine.

Usage:
    from config import GAME_CONFIG, INDEX_CONFIG, KEY_BINDINGS
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


# ---------------------------------------------------------------------------
# Suspect index sizing
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class IndexConfig:
    """
    Parameters of the clue → suspect hash table.

    Attributes:
        bucket_count:    Number of bucket chains. Any constant at or above the
                         dataset size divided by the desired load factor works;
                         the reference mansion has 10 attributions.
        hash_seed:       Initial accumulator of the rolling string hash.
        hash_multiplier: Per-byte multiplier of the rolling string hash.
    """
    bucket_count:    int = 20
    hash_seed:       int = 5381
    hash_multiplier: int = 33


# ---------------------------------------------------------------------------
# Game rules
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GameConfig:
    """
    Rules of a single exploration + accusation run.

    Attributes:
        conviction_threshold:  Minimum number of collected clues attributed to
                               the accused for a conviction.
        max_accused_bytes:     Upper bound (UTF-8 bytes) of the accused name.
                               Longer input is truncated on a character
                               boundary.
        auto_stop_at_dead_end: When True, entering a room with no exits ends the
                               exploration immediately. When False the player
                               stays in the room and must choose stop.
    """
    conviction_threshold:  int  = 2
    max_accused_bytes:     int  = 49
    auto_stop_at_dead_end: bool = False


# ---------------------------------------------------------------------------
# Singleton instances (import-ready)
# ---------------------------------------------------------------------------

INDEX_CONFIG = IndexConfig()
GAME_CONFIG  = GameConfig()


# ---------------------------------------------------------------------------
# Per-turn key bindings
# ---------------------------------------------------------------------------

KEY_BINDINGS: Mapping[str, str] = MappingProxyType({
    # Portuguese letters used by the mansion dataset
    "e": "left",    # esquerda
    "d": "right",   # direita
    "s": "stop",    # sair
    # English letters
    "l": "left",
    "r": "right",
})
"""
Single lowercase character → direction name.

Input is lowercased before lookup, so upper-case letters work too. Values
must be one of "left", "right" or "stop"; navigation.parse_choice maps them
onto the Direction enum.
"""
