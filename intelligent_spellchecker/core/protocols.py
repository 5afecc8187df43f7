# intelligent_spellchecker/core/protocols.py
"""
Protocol interfaces for the two dictionary structures the checker consults.

`check` depends on these rather than on BloomFilter/BKTree directly, so tests (or a
different filter/tree) can stand in for them.
"""

from __future__ import annotations

from typing import List, Protocol, Tuple, runtime_checkable


@runtime_checkable
class MembershipFilterProtocol(Protocol):
    """Probabilistic pre-check: False means definitely absent."""

    def might_contain(self, word: str) -> bool:
        ...


@runtime_checkable
class BKTreeProtocol(Protocol):
    """Interface for a BK-tree used to confirm words and provide fuzzy matches."""

    def contains(self, word: str) -> bool:
        ...

    def query(self, word: str, radius: int) -> List[Tuple[str, int]]:
        """
        Return list of (matched_word, distance) in discovery order.
        """
        ...
