# spell_checker.py
"""
SpellChecker - word verification and correction over a Bloom filter + BK-tree pair.

check(word) protocol:
 1. filter says "definitely absent"  -> skip straight to suggestions
 2. filter says "possibly present"   -> confirm with an exact tree lookup
 3. not confirmed                    -> query the tree at radius 1, 2, ... max_radius and
                                        return the matches of the first radius that has any

The filter's negative answer is trusted, which holds as long as both structures were built
from the same word list (SpellChecker.from_words guarantees that).

Results are a tagged union: Confirmed | Suggestions. Suggestions are sorted by distance;
ties keep BK-tree discovery order, or go alphabetic with tie_break="alphabetic".

The SpellChecker facade owns one filter and one tree, builds them concurrently and adds
token/line handling (punctuation, case) for the CLI.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union

from intelligent_spellchecker.context.normalizer import match_case, normalize_word
from intelligent_spellchecker.context.tokenizer import (
    get_words,
    join_word,
    split_keep_spacing,
    split_word,
)
from intelligent_spellchecker.core.bktree import BKTree, build_tree
from intelligent_spellchecker.core.bloom_filter import BloomFilter, build_filter
from intelligent_spellchecker.core.protocols import BKTreeProtocol, MembershipFilterProtocol
from intelligent_spellchecker.utils.config_manager import TIE_BREAKS, Config, ConfigError
from intelligent_spellchecker.utils.logger_utils import Log
from intelligent_spellchecker.utils.threaded_runner import run_parallel, run_serial

logger = logging.getLogger(__name__)

Match = Tuple[str, int]


# -------------------------
# Result types
# -------------------------
@dataclass(frozen=True)
class Confirmed:
    """The word is in the dictionary."""

    word: str


@dataclass(frozen=True)
class Suggestions:
    """
    The word is not in the dictionary.
    candidates: (word, distance) pairs, ascending distance; empty if nothing was within range.
    """

    word: str
    candidates: Tuple[Match, ...] = ()

    def words(self) -> List[str]:
        return [w for w, _ in self.candidates]


CheckResult = Union[Confirmed, Suggestions]


def _rank(matches: List[Match], tie_break: str) -> Tuple[Match, ...]:
    if tie_break == "alphabetic":
        return tuple(sorted(matches, key=lambda m: (m[1], m[0])))
    # sorted() is stable: equal distances keep discovery order
    return tuple(sorted(matches, key=lambda m: m[1]))


def check(
    word: str,
    bloom: MembershipFilterProtocol,
    tree: BKTreeProtocol,
    max_radius: int = 2,
    tie_break: str = "discovery",
) -> CheckResult:
    """Verify `word` (already normalized) and propose corrections if it is not a dictionary word."""
    if tie_break not in TIE_BREAKS:
        raise ConfigError(f"tie_break must be one of {TIE_BREAKS}, got {tie_break!r}")

    if bloom.might_contain(word):
        if tree.contains(word):
            return Confirmed(word)
        logger.debug("filter false positive for %r", word)

    for radius in range(1, max_radius + 1):
        matches = tree.query(word, radius)
        if matches:
            return Suggestions(word, _rank(matches, tie_break))
    return Suggestions(word)


# -------------------------
# Token level
# -------------------------
@dataclass(frozen=True)
class TokenCheck:
    """
    One whitespace token after punctuation split.
    result is None for tokens with nothing to check (pure punctuation, numbers).
    """

    token: str
    leading: str
    core: str
    trailing: str
    result: Optional[CheckResult]

    @property
    def needs_correction(self) -> bool:
        return isinstance(self.result, Suggestions)

    @property
    def suggestions(self) -> Tuple[Match, ...]:
        if isinstance(self.result, Suggestions):
            return self.result.candidates
        return ()

    def replace(self, word: str) -> str:
        """Rebuild the token around `word`, keeping punctuation and the original capitalisation."""
        return join_word(self.leading, match_case(self.core, word), self.trailing)


# chooser(token_check) -> replacement core word, or None to keep the token unchanged
Chooser = Callable[[TokenCheck], Optional[str]]


# -------------------------
# Facade
# -------------------------
class SpellChecker:
    """Owns one filter and one tree. Read-only once constructed; safe to query from many threads."""

    def __init__(self, bloom: BloomFilter, tree: BKTree, config: Optional[Config] = None):
        self.bloom = bloom
        self.tree = tree
        self.config = config or Config()
        self.build_seconds = 0.0

    @classmethod
    def from_words(cls, words: Iterable[str], config: Optional[Config] = None) -> "SpellChecker":
        """
        Build filter and tree from `words` (normalized, ideally deduplicated).
        Both builds run as separate thread-pool tasks when parallel_build is on; either
        failing fails construction.
        """
        cfg = config or Config()
        words = list(words)
        fp_rate = cfg["fp_rate"]

        tasks = [
            lambda: build_filter(words, len(words), fp_rate),
            lambda: build_tree(words),
        ]
        runner = run_parallel if cfg["parallel_build"] else run_serial
        with Log.time_block(f"build dictionary structures ({len(words)} words)") as t:
            bloom, tree = runner(tasks)

        sc = cls(bloom, tree, cfg)
        sc.build_seconds = t.elapsed
        logger.info(
            "filter: m=%d bits, k=%d hashes; tree: %d nodes, height %d",
            bloom.size,
            bloom.hash_count,
            tree.size(),
            tree.height(),
        )
        return sc

    # word level ----------------------------------------------------------------
    def check(self, word: str) -> CheckResult:
        w = normalize_word(word, self.config["lowercase"])
        res = check(
            w,
            self.bloom,
            self.tree,
            max_radius=self.config["max_radius"],
            tie_break=self.config["tie_break"],
        )
        logger.debug("check %r -> %s", w, res)
        return res

    def is_valid(self, word: str) -> bool:
        return isinstance(self.check(word), Confirmed)

    def suggest(self, word: str) -> List[Match]:
        res = self.check(word)
        return list(res.candidates) if isinstance(res, Suggestions) else []

    # token/line level ------------------------------------------------------------
    def check_token(self, token: str) -> TokenCheck:
        leading, core, trailing = split_word(token)
        result = self.check(core) if any(ch.isalpha() for ch in core) else None
        return TokenCheck(token, leading, core, trailing, result)

    def check_line(self, line: str) -> List[TokenCheck]:
        return [self.check_token(t) for t in get_words(line)]

    def correct_line(self, line: str, chooser: Chooser) -> str:
        """
        Return `line` with misspelled tokens replaced by whatever `chooser` picks.
        Whitespace between tokens is kept as is.
        """
        out = []
        for piece in split_keep_spacing(line):
            if piece.isspace():
                out.append(piece)
                continue
            tc = self.check_token(piece)
            if tc.needs_correction:
                choice = chooser(tc)
                if choice:
                    out.append(tc.replace(choice))
                    continue
            out.append(piece)
        return "".join(out)

    # utilities -------------------------------------------------------------------
    def stats(self) -> Dict[str, Any]:
        return {
            "words": self.tree.size(),
            "filter_bits": self.bloom.size,
            "filter_hashes": self.bloom.hash_count,
            "filter_fill": round(self.bloom.fill_ratio, 4),
            "filter_est_fp_rate": self.bloom.estimated_fp_rate,
            "tree_height": self.tree.height(),
            "build_seconds": round(self.build_seconds, 3),
        }
