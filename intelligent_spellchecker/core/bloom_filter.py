# bloom_filter.py
# Bloom filter for fast dictionary membership tests.
# Answers "definitely absent" or "possibly present"; never gives a false negative.
# - Sized once from the expected word count and target false-positive rate (no resizing).
# - k probes come from one BLAKE2b digest split into two halves (double hashing).
# - Bits live in a NumPy bool array; they are only ever set, never cleared.

from __future__ import annotations

import hashlib
import logging
import math
from typing import Iterable, List

import numpy as np

from intelligent_spellchecker.utils.config_manager import ConfigError

logger = logging.getLogger(__name__)

_LN2 = math.log(2)


def optimal_size(expected_count: int, fp_rate: float) -> int:
    """Bit array length m = ceil(-n * ln(p) / (ln 2)^2), at least 1."""
    return max(1, math.ceil(-expected_count * math.log(fp_rate) / (_LN2 ** 2)))


def optimal_hash_count(size: int, expected_count: int) -> int:
    """Number of probes k = round((m / n) * ln 2), at least 1."""
    return max(1, round(size / expected_count * _LN2))


class BloomFilter:
    """Fixed-size Bloom filter over strings."""

    def __init__(self, expected_count: int, fp_rate: float = 0.01):
        if expected_count <= 0:
            raise ConfigError(f"expected_count must be positive, got {expected_count!r}")
        if not 0.0 < fp_rate < 1.0:
            raise ConfigError(f"fp_rate must be in (0, 1), got {fp_rate!r}")

        self.expected_count = int(expected_count)
        self.fp_rate = fp_rate
        self.size = optimal_size(expected_count, fp_rate)
        self.hash_count = optimal_hash_count(self.size, expected_count)
        self._bits = np.zeros(self.size, dtype=bool)
        self._inserted = 0
        self._overfull_warned = False

    # hashing ---------------------------------------------------------------------
    def _probes(self, word: str) -> List[int]:
        digest = hashlib.blake2b(word.encode("utf-8"), digest_size=16).digest()
        h1 = int.from_bytes(digest[:8], "little")
        m = self.size
        h2 = (int.from_bytes(digest[8:], "little") % m) or 1  # step of 0 mod m would hit one slot k times
        return [(h1 + i * h2) % m for i in range(self.hash_count)]

    # insertion/building -------------------------------------------------------------
    def insert(self, word: str) -> None:
        self._bits[self._probes(word)] = True
        self._inserted += 1
        if self._inserted > self.expected_count and not self._overfull_warned:
            self._overfull_warned = True
            logger.warning(
                "bloom filter sized for %d words now holds %d; false-positive rate will exceed %.4f",
                self.expected_count,
                self._inserted,
                self.fp_rate,
            )

    def insert_many(self, words: Iterable[str]) -> None:
        for w in words:
            self.insert(w)

    # query ---------------------------------------------------------------------------
    def might_contain(self, word: str) -> bool:
        """False = definitely absent, True = possibly present."""
        bits = self._bits
        for pos in self._probes(word):
            if not bits[pos]:
                return False
        return True

    def __contains__(self, word: str) -> bool:
        return self.might_contain(word)

    # utilities -------------------------------------------------------------------
    def __len__(self) -> int:
        """Number of insert calls (duplicates included)."""
        return self._inserted

    @property
    def fill_ratio(self) -> float:
        return float(np.count_nonzero(self._bits)) / self.size

    @property
    def estimated_fp_rate(self) -> float:
        """Probability a non-member passes every probe, given the current fill."""
        return self.fill_ratio ** self.hash_count

    def __repr__(self) -> str:
        return (
            f"BloomFilter(expected_count={self.expected_count}, fp_rate={self.fp_rate}, "
            f"size={self.size}, hash_count={self.hash_count}, inserted={self._inserted})"
        )


def build_filter(words: Iterable[str], expected_count: int, target_fp_rate: float) -> BloomFilter:
    """Create a filter sized for expected_count words and insert all of `words`."""
    bf = BloomFilter(expected_count, target_fp_rate)
    bf.insert_many(words)
    logger.debug("built %r", bf)
    return bf
