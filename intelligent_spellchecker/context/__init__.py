# intelligent_spellchecker/context/__init__.py
# token handling around the core: splitting punctuation off words and case policy

from .normalizer import match_case, normalize_word  # case policy for core words
from .tokenizer import (  # line -> tokens -> (lead, core, trail)
    get_words,
    join_word,
    split_keep_spacing,
    split_word,
)

__all__ = [
    "get_words",
    "split_keep_spacing",
    "split_word",
    "join_word",
    "normalize_word",
    "match_case",
]
