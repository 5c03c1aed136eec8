"""
accusation.py
=============
Deterministic, side-effect-free accusation logic.

Extracted from the game engine so it can be unit-tested against any catalog
and index, and tuned through GameConfig.conviction_threshold without touching
game or UI code.
"""

from __future__ import annotations

import logging
from typing import Iterator

from clue_catalog import ClueCatalog
from config import GAME_CONFIG
from models import Verdict
from suspect_index import SuspectIndex

logger = logging.getLogger("detective_quest.accusation")


def list_clues(catalog: ClueCatalog, index: SuspectIndex, accused: str) -> Iterator[str]:
    """
    Lazily yield the collected clues attributed to `accused`, ascending.

    Matching is exact and case-sensitive. A clue with no indexed suspect never
    matches.
    """
    for clue in catalog:
        if index.lookup(clue) == accused:
            yield clue


def count_clues(catalog: ClueCatalog, index: SuspectIndex, accused: str) -> int:
    """Number of collected clues attributed to `accused`; 0 for an empty catalog."""
    return sum(1 for _ in list_clues(catalog, index, accused))


def clamp_accused_name(raw: str, max_bytes: int = GAME_CONFIG.max_accused_bytes) -> str:
    """
    Bound a typed accused name.

    Strips the trailing line break and surrounding whitespace, then cuts the
    name to at most `max_bytes` UTF-8 bytes without splitting a character.
    Characters that cannot be encoded (lone surrogates left by undecodable
    input) become "?".

    Examples:
        >>> clamp_accused_name("Mordomo James\\n")
        'Mordomo James'
        >>> clamp_accused_name("ééé", max_bytes=5)
        'éé'
        >>> clamp_accused_name("Mordomo \\udcff")
        'Mordomo ?'
    """
    encoded = (raw or "").strip().encode("utf-8", errors="replace")
    if len(encoded) <= max_bytes:
        return encoded.decode("utf-8")
    clamped = encoded[:max_bytes].decode("utf-8", errors="ignore")
    logger.warning("Accused name truncated from %d to %d bytes.", len(encoded), len(clamped.encode("utf-8")))
    return clamped


def evaluate_accusation(
    catalog: ClueCatalog,
    index: SuspectIndex,
    accused: str,
    threshold: int = GAME_CONFIG.conviction_threshold,
) -> Verdict:
    """
    Judge `accused` against the evidence collected so far.

    The accused is convicted iff at least `threshold` collected clues are
    attributed to them. Who is "really" guilty in the dataset plays no part:
    an accusation the evidence does not support is an acquittal, not an error.

    Args:
        catalog:   Clues the player collected.
        index:     Clue → suspect attributions.
        accused:   Name to judge, compared exactly against index values.
        threshold: Minimum matching clues for a conviction (default 2).

    Returns:
        A Verdict listing the matching clues in ascending order.
    """
    matching = list(list_clues(catalog, index, accused))
    verdict = Verdict(
        accused=accused,
        matching_clues=matching,
        clue_count=len(matching),
        threshold=threshold,
        convicted=len(matching) >= threshold,
    )
    logger.info(
        "Accusation judged: accused=%r, matching=%d/%d collected, threshold=%d, convicted=%s",
        accused,
        verdict.clue_count,
        len(catalog),
        threshold,
        verdict.convicted,
    )
    return verdict
