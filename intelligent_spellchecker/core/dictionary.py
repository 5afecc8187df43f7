# dictionary.py
# Loads the word list the filter and tree are built from: one word per line.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Tuple

from intelligent_spellchecker.context.normalizer import normalize_word

logger = logging.getLogger(__name__)


class DictionaryError(ValueError):
    """Raised when a word list yields no usable words."""


@dataclass(frozen=True)
class Dictionary:
    """
    Deduplicated, normalized word list.
    words: in first-seen order (the first word ends up as the BK-tree root)
    max_word_length: longest word, useful for sizing/diagnostics
    """

    words: Tuple[str, ...]
    max_word_length: int

    @classmethod
    def from_lines(cls, lines: Iterable[str], lowercase: bool = True) -> "Dictionary":
        seen = set()
        words = []
        skipped = 0
        for line in lines:
            w = line.strip()
            if not w or w.startswith("#"):
                continue
            w = normalize_word(w, lowercase)
            if w in seen:
                skipped += 1
                continue
            seen.add(w)
            words.append(w)

        if not words:
            raise DictionaryError("dictionary contains no words")
        if skipped:
            logger.debug("dropped %d duplicate dictionary entries", skipped)
        return cls(words=tuple(words), max_word_length=max(len(w) for w in words))

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self):
        return iter(self.words)


def load_dictionary(path: str, lowercase: bool = True, encoding: str = "utf-8") -> Dictionary:
    """Read a word list from `path`. A missing file raises FileNotFoundError."""
    with open(path, "r", encoding=encoding) as f:
        try:
            d = Dictionary.from_lines(f, lowercase=lowercase)
        except DictionaryError as e:
            raise DictionaryError(f"{path}: {e}") from e
    logger.info("loaded %d words from %s (longest %d)", len(d), path, d.max_word_length)
    return d
