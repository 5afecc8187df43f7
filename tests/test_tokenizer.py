# tests/test_tokenizer.py

import pytest

from intelligent_spellchecker.context import (
    get_words,
    join_word,
    match_case,
    normalize_word,
    split_keep_spacing,
    split_word,
)


def test_get_words():
    assert get_words("Hello, world!") == ["Hello,", "world!"]
    assert get_words("") == []
    assert get_words("  spaced   out ") == ["spaced", "out"]


@pytest.mark.parametrize(
    "token, parts",
    [
        ("!!!Hello,", ("!!!", "Hello", ",")),
        ("world!!!", ("", "world", "!!!")),
        ("plain", ("", "plain", "")),
        ("don't", ("", "don't", "")),
        ("(e.g.)", ("(", "e.g", ".)")),
        ("...", ("...", "", "")),
        ("", ("", "", "")),
    ],
)
def test_split_word(token, parts):
    assert split_word(token) == parts
    assert join_word(*parts) == token


def test_split_keep_spacing_round_trips():
    line = "  two  spaces\tand a tab "
    pieces = split_keep_spacing(line)
    assert "".join(pieces) == line
    assert [p for p in pieces if not p.isspace()] == ["two", "spaces", "and", "a", "tab"]


def test_normalize_word():
    assert normalize_word("House") == "house"
    assert normalize_word("House", lowercase=False) == "House"
    assert normalize_word(" padded ") == "padded"
    assert normalize_word("") == ""


@pytest.mark.parametrize(
    "original, replacement, expected",
    [
        ("teh", "the", "the"),
        ("Teh", "the", "The"),
        ("TEH", "the", "THE"),
        ("I", "a", "A"),
        ("x", "", ""),
    ],
)
def test_match_case(original, replacement, expected):
    assert match_case(original, replacement) == expected
