"""
suspect_index.py
================
Clue text → suspect name lookup, as a fixed-size hash table whose buckets
are singly linked chains.

Populated once before play and only read afterwards. Inserting never checks
for an existing key: the new entry is prepended to its chain, so the most
recent insert of a key is the one lookup() finds. Earlier entries for the
same key stay in the chain, shadowed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from config import INDEX_CONFIG
from models import ConstructionError

logger = logging.getLogger("detective_quest.suspect_index")

_MASK_64 = (1 << 64) - 1


def djb2_bucket(
    key: str,
    bucket_count: int,
    seed: int = INDEX_CONFIG.hash_seed,
    multiplier: int = INDEX_CONFIG.hash_multiplier,
) -> int:
    """
    Map `key` to a bucket in [0, bucket_count).

    Rolling hash over the UTF-8 bytes of the key: start at `seed`, then
    ``acc = acc * multiplier + byte`` for every byte, wrapping at 64 bits.

    Examples:
        >>> djb2_bucket("", 20)
        1
        >>> djb2_bucket("a", 20) == (5381 * 33 + 97) % 20
        True
    """
    acc = seed
    for byte in key.encode("utf-8", errors="surrogatepass"):
        acc = (acc * multiplier + byte) & _MASK_64
    return acc % bucket_count


@dataclass(eq=False)
class SuspectIndexEntry:
    clue:    str
    suspect: str
    next:    Optional[SuspectIndexEntry] = None


class SuspectIndex:
    """
    Chained hash map from clue text to suspect name.

    Attributes:
        bucket_count: Number of chains; fixed for the life of the index.
        seed:         Starting value of the bucket hash.
        multiplier:   Per-byte factor of the bucket hash.
        buckets:      Head entry of each chain, or None for an empty chain.
    """

    def __init__(
        self,
        bucket_count: int = INDEX_CONFIG.bucket_count,
        seed: int = INDEX_CONFIG.hash_seed,
        multiplier: int = INDEX_CONFIG.hash_multiplier,
    ) -> None:
        if bucket_count < 1:
            raise ValueError(f"bucket_count must be positive, got {bucket_count}")
        self.bucket_count = bucket_count
        self.seed         = seed
        self.multiplier   = multiplier
        self.buckets: List[Optional[SuspectIndexEntry]] = [None] * bucket_count
        self._size = 0

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[Tuple[str, str]],
        bucket_count: int = INDEX_CONFIG.bucket_count,
        seed: int = INDEX_CONFIG.hash_seed,
        multiplier: int = INDEX_CONFIG.hash_multiplier,
    ) -> SuspectIndex:
        """
        Build a populated index from (clue, suspect) pairs, inserted in order.

        The index is only returned once every pair is in; on failure the
        half-filled index is dropped.

        Raises:
            ConstructionError: an entry could not be allocated.
        """
        index = cls(bucket_count, seed, multiplier)
        for clue, suspect in pairs:
            index.insert(clue, suspect)
        logger.debug(
            "Suspect index built: entries=%d, buckets=%d, longest_chain=%d",
            len(index),
            index.bucket_count,
            max(index.chain_lengths()),
        )
        return index

    def bucket_of(self, clue: str) -> int:
        return djb2_bucket(clue, self.bucket_count, self.seed, self.multiplier)

    def insert(self, clue: str, suspect: str) -> None:
        """Prepend a (clue, suspect) entry to the clue's bucket chain."""
        bucket = self.bucket_of(clue)
        if self._find(bucket, clue) is not None:
            logger.warning(
                "Clue %r inserted again; the new suspect %r now shadows the earlier entry.",
                clue,
                suspect,
            )
        try:
            entry = SuspectIndexEntry(clue, suspect, self.buckets[bucket])
        except MemoryError as exc:
            raise ConstructionError(f"could not index clue {clue!r}") from exc
        self.buckets[bucket] = entry
        self._size += 1

    def lookup(self, clue: str) -> Optional[str]:
        """Return the suspect attributed to `clue`, or None if it was never indexed."""
        entry = self._find(self.bucket_of(clue), clue)
        return entry.suspect if entry is not None else None

    def _find(self, bucket: int, clue: str) -> Optional[SuspectIndexEntry]:
        entry = self.buckets[bucket]
        while entry is not None:
            if entry.clue == clue:
                return entry
            entry = entry.next
        return None

    def chain_lengths(self) -> List[int]:
        lengths = []
        for head in self.buckets:
            length = 0
            entry = head
            while entry is not None:
                length += 1
                entry = entry.next
            lengths.append(length)
        return lengths

    def entries(self) -> Iterator[SuspectIndexEntry]:
        """Yield every entry, bucket by bucket, newest first within a chain."""
        for head in self.buckets:
            entry = head
            while entry is not None:
                yield entry
                entry = entry.next

    def __contains__(self, clue: object) -> bool:
        return isinstance(clue, str) and self.lookup(clue) is not None

    def __len__(self) -> int:
        return self._size
