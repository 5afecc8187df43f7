"""
intelligent_spellchecker.core

The engine behind the spellchecker:
 - Damerau-Levenshtein edit distance (distance)
 - Bloom filter for fast "definitely absent" answers (BloomFilter)
 - BK-tree for exact confirmation and radius-bounded suggestions (BKTree)
 - the check protocol combining both, and the SpellChecker facade
 - word list loading (Dictionary)
"""

from .bktree import BKTree, build_tree
from .bloom_filter import BloomFilter, build_filter
from .dictionary import Dictionary, DictionaryError, load_dictionary
from .distance import damerau_levenshtein, distance
from .spell_checker import (
    CheckResult,
    Confirmed,
    SpellChecker,
    Suggestions,
    TokenCheck,
    check,
)

__all__ = [
    "BKTree",
    "build_tree",
    "BloomFilter",
    "build_filter",
    "Dictionary",
    "DictionaryError",
    "load_dictionary",
    "damerau_levenshtein",
    "distance",
    "CheckResult",
    "Confirmed",
    "Suggestions",
    "SpellChecker",
    "TokenCheck",
    "check",
]
