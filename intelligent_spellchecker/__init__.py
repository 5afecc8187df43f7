"""
intelligent_spellchecker

Dictionary spellchecker: a Bloom filter answers "definitely not a word" quickly, a BK-tree
over Damerau-Levenshtein distance confirms words and proposes corrections.

    from intelligent_spellchecker import SpellChecker, load_dictionary
    sc = SpellChecker.from_words(load_dictionary("dictionary.txt"))
    sc.check("teh")  # Suggestions(word='teh', candidates=(('the', 1), ...))
"""

from .core import (
    BKTree,
    BloomFilter,
    CheckResult,
    Confirmed,
    Dictionary,
    DictionaryError,
    SpellChecker,
    Suggestions,
    TokenCheck,
    build_filter,
    build_tree,
    check,
    distance,
    load_dictionary,
)
from .utils.config_manager import Config, ConfigError

__all__ = [
    "BKTree",
    "BloomFilter",
    "CheckResult",
    "Confirmed",
    "Dictionary",
    "DictionaryError",
    "SpellChecker",
    "Suggestions",
    "TokenCheck",
    "build_filter",
    "build_tree",
    "check",
    "distance",
    "load_dictionary",
    "Config",
    "ConfigError",
]

__version__ = "0.1.0"
