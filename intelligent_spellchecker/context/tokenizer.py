# intelligent_spellchecker/context/tokenizer.py
# splits lines into tokens and tokens into punctuation + core word

import re
from typing import List, Tuple

_space_re = re.compile(r"(\s+)")


def get_words(line: str) -> List[str]:
    """Whitespace-separated tokens, punctuation still attached."""
    if not line:
        return []
    return line.split()


def split_keep_spacing(line: str) -> List[str]:
    """
    Like get_words but keeps the whitespace runs as their own items, so
    "".join(split_keep_spacing(line)) == line. Whitespace items sit at odd
    indexes when the line starts with a token.
    """
    if not line:
        return []
    return [p for p in _space_re.split(line) if p]


def split_word(token: str) -> Tuple[str, str, str]:
    """
    Split a token into (leading, core, trailing).
    leading/trailing are the runs of non-alphanumeric characters at either end,
    e.g. '"Hello,' -> ('"', 'Hello', ','). A token with no alphanumerics is all leading.
    """
    start = 0
    end = len(token)
    while start < end and not token[start].isalnum():
        start += 1
    while end > start and not token[end - 1].isalnum():
        end -= 1
    return token[:start], token[start:end], token[end:]


def join_word(leading: str, core: str, trailing: str) -> str:
    return f"{leading}{core}{trailing}"
