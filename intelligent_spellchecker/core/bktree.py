# bktree.py
# BK-tree for exact lookup and typo-tolerant suggestions over a dictionary.
# Insert words once, then confirm membership or query for close matches within a radius.
# - Each child hangs off its parent at its exact edit distance from the parent's word.
# - Query uses an explicit stack (no recursion) and prunes using the triangle property.
# - No rebalancing: shape depends on insertion order, correctness does not.

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from intelligent_spellchecker.core.distance import damerau_levenshtein

logger = logging.getLogger(__name__)

DistanceFn = Callable[[str, str], int]
Match = Tuple[str, int]


class BKTree:
    """BK-tree over strings keyed by an edit-distance metric."""

    class Node:
        __slots__ = ("word", "children")

        def __init__(self, word: str):
            self.word = word
            self.children: Dict[int, "BKTree.Node"] = {}

    def __init__(self, distance_fn: DistanceFn = damerau_levenshtein):
        self.root: Optional[BKTree.Node] = None
        self.distance_fn = distance_fn
        self._size = 0

    # insertion/building -------------------------------------------------------------
    def insert(self, word: str) -> None:
        """Insert a single word. Inserting a word already present is a no-op."""
        if self.root is None:
            self.root = BKTree.Node(word)
            self._size = 1
            return

        dist = self.distance_fn
        node = self.root
        while True:
            d = dist(word, node.word)
            if d == 0:
                return
            child = node.children.get(d)
            if child is None:
                node.children[d] = BKTree.Node(word)
                self._size += 1
                return
            node = child

    def insert_many(self, words: Iterable[str]) -> None:
        for w in words:
            self.insert(w)

    # query ---------------------------------------------------------------------------
    def contains(self, word: str) -> bool:
        """Exact membership: follows one edge per level, never mutates."""
        dist = self.distance_fn
        node = self.root
        while node is not None:
            d = dist(word, node.word)
            if d == 0:
                return True
            node = node.children.get(d)
        return False

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def query(self, word: str, radius: int) -> List[Match]:
        """
        Return [(word, distance)] for every stored word within `radius` of `word`.
        Distances are exact. Order is depth-first discovery order, children visited
        in the order they were attached, so it is stable for a given tree.
        """
        if radius < 0:
            raise ValueError(f"radius must be non-negative, got {radius}")
        if self.root is None:
            return []

        dist = self.distance_fn
        results: List[Match] = []
        stack = [self.root]
        while stack:
            node = stack.pop()
            d = dist(word, node.word)
            if d <= radius:
                results.append((node.word, d))

            # anything under edge c is at least |c - d| away from the query
            low = d - radius
            high = d + radius
            eligible = [child for c, child in node.children.items() if low <= c <= high]
            stack.extend(reversed(eligible))
        return results

    # utilities -------------------------------------------------------------------
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 for an empty tree)."""
        if self.root is None:
            return 0
        best = 0
        stack = [(self.root, 1)]
        while stack:
            node, depth = stack.pop()
            if depth > best:
                best = depth
            for child in node.children.values():
                stack.append((child, depth + 1))
        return best

    def words(self) -> Iterator[str]:
        """Yield every stored word, depth first."""
        if self.root is None:
            return
        stack = [self.root]
        while stack:
            n = stack.pop()
            yield n.word
            stack.extend(reversed(list(n.children.values())))

    def __iter__(self) -> Iterator[str]:
        return self.words()


def build_tree(words: Iterable[str], distance_fn: DistanceFn = damerau_levenshtein) -> BKTree:
    """Build a BK-tree from `words`; the first word becomes the root."""
    tree = BKTree(distance_fn)
    tree.insert_many(words)
    logger.debug("built bk-tree: %d nodes, height %d", tree.size(), tree.height())
    return tree
