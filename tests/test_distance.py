# tests/test_distance.py
# Damerau-Levenshtein values and metric properties

import itertools
import random

import pytest

from intelligent_spellchecker.core.distance import damerau_levenshtein, distance


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("", "", 0),
        ("", "abc", 3),
        ("abc", "", 3),
        ("house", "house", 0),
        ("kitten", "sitting", 3),
        ("teh", "the", 1),  # adjacent swap is one edit, not two
        ("ab", "ba", 1),
        ("cwt", "cat", 1),
        ("cwt", "cut", 1),
        ("cwt", "bat", 2),
        ("cwt", "cats", 2),
        ("flaw", "lawn", 2),
        ("ca", "abc", 2),  # unrestricted form: swap then insert
    ],
)
def test_known_distances(a, b, expected):
    assert damerau_levenshtein(a, b) == expected


def test_alias_is_same_function():
    assert distance is damerau_levenshtein


def _random_words(n, seed=7):
    rng = random.Random(seed)
    return ["".join(rng.choice("abc") for _ in range(rng.randint(0, 5))) for _ in range(n)]


def test_identity_and_symmetry():
    words = _random_words(60)
    for a in words:
        assert damerau_levenshtein(a, a) == 0
    for a, b in itertools.combinations(words, 2):
        d = damerau_levenshtein(a, b)
        assert d == damerau_levenshtein(b, a)
        assert (d == 0) == (a == b)
        assert d >= abs(len(a) - len(b))


def test_triangle_inequality():
    words = _random_words(25, seed=11)
    for a, b, c in itertools.product(words, repeat=3):
        assert damerau_levenshtein(a, c) <= damerau_levenshtein(a, b) + damerau_levenshtein(b, c)
