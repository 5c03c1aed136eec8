"""
case_data.py
============
All narrative content for the mansion case.

Centralising story data here means you can swap out the entire mystery
(room layout, clues, suspects) without touching any data structure, engine,
or UI logic. None of the core modules import this file; it is handed to
DetectiveQuestGame by whoever starts the run.

To create a new case:
    1. Replace the constants below with your new story.
    2. Keep the dict shapes identical so CaseFile validation still passes.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from models import CaseFile


# ---------------------------------------------------------------------------
# Room → clue
# ---------------------------------------------------------------------------

ROOM_CLUES: Dict[str, str] = {
    "Hall de Entrada":    "Porta principal foi arrombada",
    "Cozinha":            "Faca desaparecida do bloco",
    "Biblioteca":         "Livro de venenos aberto na página 13",
    "Despensa":           "Garrafa de vinho vazia no chão",
    "Jardim":             "Pegadas levam ao gazebo",
    "Escritório Secreto": "Carta ameaçadora no cofre",
    "Sala de Troféus":    "Troféu de prata manchado",
    "Piano Room":         "Partitura rasgada",
    "Estufa":             "Planta venenosa recém-cortada",
    "Gazebo":             "Relógio parado às 23:47",
}
"""Rooms absent from this dict (Sala de Estar, Sala de Música) hold no clue."""


# ---------------------------------------------------------------------------
# Clue → suspect
# ---------------------------------------------------------------------------

CLUE_SUSPECTS: List[Tuple[str, str]] = [
    ("Porta principal foi arrombada",        "Mordomo James"),
    ("Faca desaparecida do bloco",           "Chef Marcel"),
    ("Livro de venenos aberto na página 13", "Professor Harrington"),
    ("Garrafa de vinho vazia no chão",       "Lady Elizabeth"),
    ("Pegadas levam ao gazebo",              "Mordomo James"),
    ("Carta ameaçadora no cofre",            "Lady Elizabeth"),
    ("Troféu de prata manchado",             "Professor Harrington"),
    ("Partitura rasgada",                    "Lady Elizabeth"),
    ("Planta venenosa recém-cortada",        "Professor Harrington"),
    ("Relógio parado às 23:47",              "Mordomo James"),
]
"""
Insertion order into the suspect index. No clue appears twice, so no entry
ever shadows another.
"""

SUSPECT_NAMES: List[str] = [
    "Lady Elizabeth",
    "Professor Harrington",
    "Chef Marcel",
    "Mordomo James",
]


# ---------------------------------------------------------------------------
# Mansion layout
# ---------------------------------------------------------------------------

def _room(name: str, left: Optional[Dict] = None, right: Optional[Dict] = None) -> Dict:
    return {"name": name, "clue": ROOM_CLUES.get(name), "left": left, "right": right}


MANSION_MAP: Dict = _room(
    "Hall de Entrada",
    left=_room(
        "Sala de Estar",
        left=_room(
            "Biblioteca",
            left=_room("Escritório Secreto"),
            right=_room("Sala de Troféus"),
        ),
        right=_room(
            "Sala de Música",
            left=_room("Piano Room"),
        ),
    ),
    right=_room(
        "Cozinha",
        left=_room("Despensa"),
        right=_room(
            "Jardim",
            left=_room("Estufa"),
            right=_room("Gazebo"),
        ),
    ),
)
"""
Four levels, uneven branching:

    Hall de Entrada
    ├── Sala de Estar
    │   ├── Biblioteca
    │   │   ├── Escritório Secreto
    │   │   └── Sala de Troféus
    │   └── Sala de Música
    │       └── Piano Room          (left only)
    └── Cozinha
        ├── Despensa
        └── Jardim
            ├── Estufa
            └── Gazebo
"""


# ---------------------------------------------------------------------------
# Validated case file
# ---------------------------------------------------------------------------

CASE_FILE: CaseFile = CaseFile.model_validate({
    "title": "Detective Quest: The Mansion Mystery",
    "map": MANSION_MAP,
    "attributions": [
        {"clue": clue, "suspect": suspect} for clue, suspect in CLUE_SUSPECTS
    ],
    "suspects": SUSPECT_NAMES,
})
