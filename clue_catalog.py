"""
clue_catalog.py
===============
Ordered set of collected clues, backed by an unbalanced binary search tree.

Clue texts are compared with the normal ``str`` ordering. Python compares
strings by code point, which gives the same order as comparing their UTF-8
bytes, so "ascending" here means byte-wise lexicographic order.

Two layers:
  - insert_clue() / iter_in_order() / count_nodes() work on bare nodes and
    can be used on any subtree.
  - ClueCatalog owns a root and is what the game engine holds.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional

from models import ConstructionError

logger = logging.getLogger("detective_quest.clue_catalog")


@dataclass(eq=False)
class ClueNode:
    text:  str
    left:  Optional[ClueNode] = None
    right: Optional[ClueNode] = None


# ---------------------------------------------------------------------------
# Node-level operations
# ---------------------------------------------------------------------------

def insert_clue(root: Optional[ClueNode], text: str) -> ClueNode:
    """
    Insert `text` below `root` and return the (possibly new) root.

    An empty tree becomes a single node. Inserting a text that is already
    present changes nothing.

    Raises:
        ConstructionError: the new node could not be allocated. The tree is
                           left exactly as it was.
    """
    try:
        if root is None:
            return ClueNode(text)

        node = root
        while True:
            if text < node.text:
                if node.left is None:
                    node.left = ClueNode(text)
                    break
                node = node.left
            elif text > node.text:
                if node.right is None:
                    node.right = ClueNode(text)
                    break
                node = node.right
            else:
                break
    except MemoryError as exc:
        raise ConstructionError(f"could not store clue {text!r}") from exc
    return root


def find_clue(root: Optional[ClueNode], text: str) -> Optional[ClueNode]:
    node = root
    while node is not None:
        if text < node.text:
            node = node.left
        elif text > node.text:
            node = node.right
        else:
            return node
    return None


def iter_in_order(root: Optional[ClueNode]) -> Iterator[str]:
    """
    Lazily yield clue texts in ascending order.

    Uses an explicit stack, so depth is not limited by the recursion limit.
    The tree is not modified; call again to restart.
    """
    stack: List[ClueNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.text
        node = node.right


def count_nodes(root: Optional[ClueNode]) -> int:
    return sum(1 for _ in iter_in_order(root))


# ---------------------------------------------------------------------------
# Owning wrapper
# ---------------------------------------------------------------------------

class ClueCatalog:
    """
    The player's notebook: every distinct clue found so far, kept sorted.

    Starts empty and only grows during a run. Iterating yields clue texts in
    ascending order; len() walks the whole tree.
    """

    def __init__(self) -> None:
        self.root: Optional[ClueNode] = None

    def add(self, text: str) -> bool:
        """
        Record `text`.

        Returns:
            True if the clue is new, False if it was already in the catalog.
        """
        if text in self:
            logger.debug("Clue already catalogued: %r", text)
            return False
        self.root = insert_clue(self.root, text)
        logger.debug("Clue catalogued: %r", text)
        return True

    def clear(self) -> None:
        self.root = None

    def __contains__(self, text: object) -> bool:
        return isinstance(text, str) and find_clue(self.root, text) is not None

    def __iter__(self) -> Iterator[str]:
        return iter_in_order(self.root)

    def __len__(self) -> int:
        return count_nodes(self.root)

    def __bool__(self) -> bool:
        return self.root is not None

    def __repr__(self) -> str:
        return f"ClueCatalog({list(self)!r})"
