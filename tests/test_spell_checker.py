# tests/test_spell_checker.py
# check() protocol, result ordering, and the SpellChecker facade

from concurrent.futures import ThreadPoolExecutor

import pytest

from intelligent_spellchecker.core.bktree import build_tree
from intelligent_spellchecker.core.bloom_filter import build_filter
from intelligent_spellchecker.core.spell_checker import (
    Confirmed,
    SpellChecker,
    Suggestions,
    check,
)
from intelligent_spellchecker.utils.config_manager import Config, ConfigError

ANIMALS = ["cat", "cats", "bat", "hat", "cut"]
ENGLISH = ["the", "then", "they", "house", "mouse", "cat", "sat", "on", "mat", "a", "tea"]


class SpyTree:
    """Wraps a real tree and records which methods check() used."""

    def __init__(self, words):
        self.tree = build_tree(words)
        self.contains_calls = 0
        self.query_radii = []

    def contains(self, word):
        self.contains_calls += 1
        return self.tree.contains(word)

    def query(self, word, radius):
        self.query_radii.append(radius)
        return self.tree.query(word, radius)


class FixedFilter:
    def __init__(self, answer):
        self.answer = answer

    def might_contain(self, word):
        return self.answer


@pytest.fixture
def checker():
    return SpellChecker.from_words(ENGLISH)


def test_confirmed_word(checker):
    assert checker.check("house") == Confirmed("house")
    assert checker.is_valid("house")


def test_transposition_suggestion(checker):
    res = checker.check("teh")
    assert isinstance(res, Suggestions)
    assert ("the", 1) in res.candidates


def test_cwt_scenario():
    bloom = build_filter(ANIMALS, len(ANIMALS), 0.01)
    tree = build_tree(ANIMALS)
    res = check("cwt", bloom, tree, max_radius=2)
    assert isinstance(res, Suggestions)
    assert res.words()[:2] == ["cat", "cut"]
    assert all(d == 1 for _, d in res.candidates)


def test_stops_at_first_radius_with_matches():
    tree = SpyTree(ANIMALS)
    check("cwt", FixedFilter(False), tree, max_radius=3)
    assert tree.query_radii == [1]


def test_definitely_absent_skips_confirmation():
    tree = SpyTree(ANIMALS)
    res = check("dog", FixedFilter(False), tree, max_radius=2)
    assert tree.contains_calls == 0
    assert tree.query_radii == [1, 2]
    assert isinstance(res, Suggestions)


def test_filter_false_positive_falls_through_to_suggestions():
    tree = SpyTree(ANIMALS)
    res = check("cwt", FixedFilter(True), tree)
    assert tree.contains_calls == 1
    assert isinstance(res, Suggestions)
    assert res.words() == ["cat", "cut"]


def test_nothing_in_range_gives_empty_suggestions():
    bloom = build_filter(ANIMALS, len(ANIMALS), 0.01)
    tree = build_tree(ANIMALS)
    res = check("elephant", bloom, tree, max_radius=2)
    assert res == Suggestions("elephant", ())
    assert check("cwt", bloom, tree, max_radius=0) == Suggestions("cwt", ())


def test_sorted_by_distance_with_stable_ties():
    words = ["bbbb", "abcd", "abce", "abxd"]
    bloom = build_filter(words, len(words), 0.01)
    tree = build_tree(words)
    res = check("abcx", bloom, tree, max_radius=2)
    dists = [d for _, d in res.candidates]
    assert dists == sorted(dists)
    discovery = [w for w, _ in tree.query("abcx", 2)]
    ones = [w for w, d in res.candidates if d == 1]
    assert ones == [w for w in discovery if w in ones]


def test_alphabetic_tie_break():
    words = ["cut", "cat"]
    bloom = build_filter(words, len(words), 0.01)
    tree = build_tree(words)
    assert check("cwt", bloom, tree, tie_break="alphabetic").words() == ["cat", "cut"]
    with pytest.raises(ConfigError):
        check("cwt", bloom, tree, tie_break="random")


def test_lowercase_policy(checker):
    assert checker.check("HOUSE") == Confirmed("house")
    cs = SpellChecker.from_words(["House"], Config(lowercase=False))
    assert isinstance(cs.check("house"), Suggestions)
    assert cs.check("House") == Confirmed("House")


def test_check_token_strips_punctuation(checker):
    tc = checker.check_token('"Teh,')
    assert (tc.leading, tc.core, tc.trailing) == ('"', "Teh", ",")
    assert tc.needs_correction
    assert tc.replace("the") == '"The,'
    assert checker.check_token("(house).").result == Confirmed("house")


@pytest.mark.parametrize("token", ["42", "...", "--", "3.14"])
def test_tokens_without_letters_are_skipped(checker, token):
    tc = checker.check_token(token)
    assert tc.result is None
    assert not tc.needs_correction


def test_correct_line_keeps_spacing_and_punctuation(checker):
    def first(tc):
        return tc.suggestions[0][0] if tc.suggestions else None

    assert checker.correct_line("Teh  cat sat on teh mat.", first) == "The  cat sat on the mat."
    assert checker.correct_line("the cat", first) == "the cat"


def test_correct_line_chooser_can_keep_word(checker):
    assert checker.correct_line("teh cat", lambda tc: None) == "teh cat"


def test_check_line(checker):
    flagged = [tc.core for tc in checker.check_line("the hosue sat on teh mat") if tc.needs_correction]
    assert flagged == ["hosue", "teh"]


def test_serial_and_parallel_builds_agree():
    serial = SpellChecker.from_words(ENGLISH, Config(parallel_build=False))
    parallel = SpellChecker.from_words(ENGLISH, Config(parallel_build=True))
    for w in ["teh", "hous", "cat", "zzz", "moose"]:
        assert serial.check(w) == parallel.check(w)


def test_concurrent_checks_match_serial(checker):
    words = ["teh", "hous", "cat", "zzz", "moose", "Then", "ta", "mat"] * 25
    expected = [checker.check(w) for w in words]
    with ThreadPoolExecutor(max_workers=8) as ex:
        got = list(ex.map(checker.check, words))
    assert got == expected


def test_empty_word_list_fails_construction():
    with pytest.raises(ConfigError):
        SpellChecker.from_words([])


def test_stats(checker):
    s = checker.stats()
    assert s["words"] == len(ENGLISH)
    assert s["filter_bits"] > 0
    assert s["filter_hashes"] >= 1
    assert s["tree_height"] >= 1
    assert s["build_seconds"] >= 0


def test_suggest_returns_plain_list(checker):
    assert checker.suggest("house") == []
    assert ("the", 1) in checker.suggest("teh")
