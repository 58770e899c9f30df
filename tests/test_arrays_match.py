# tests/test_arrays_match.py
from __future__ import annotations

import logging
import re

import pytest

from textshape import Keyed
from textshape.arrays import BestMatch, MatchMapping, find_best_match, match, matching_score

# ─────────────────────────────────────────────────────────────────────────────
# matching_score
# ─────────────────────────────────────────────────────────────────────────────


def test_matching_score_counts_every_occurrence():
    assert matching_score("foobarfoobarfoo", "foo") == 9
    assert matching_score("foobarfoobarfoo", "bar") == 6


def test_matching_score_swaps_when_matcher_is_longer():
    assert matching_score("foo", "foobarfoobarfoo") == 9


def test_matching_score_escapes_literal_needles():
    assert matching_score("abc", ".") == 0
    assert matching_score("a.c", ".") == 1
    assert matching_score("f(x)", "(") == 1
    assert matching_score("a+", "aaa+ a+") == 4


def test_matching_score_uses_patterns_as_given():
    assert matching_score("Foo bar foobar foo", re.compile("[Ff]oo")) == 9


def test_matching_score_empty_needle_is_zero():
    assert matching_score("abc", "") == 0
    assert matching_score("", "abc") == 0


# ─────────────────────────────────────────────────────────────────────────────
# find_best_match
# ─────────────────────────────────────────────────────────────────────────────


def test_find_best_match_input_longer_than_candidates():
    assert find_best_match("foobarfoobarfoo", ["foo", "bar"]) == BestMatch("foo", 9)


def test_find_best_match_input_shorter_than_candidates():
    best = find_best_match("foo", ["foobarfoobarfoo", "barfoobarfoobar"])
    assert best == BestMatch("foobarfoobarfoo", 9)


def test_find_best_match_pattern_candidates():
    foo, bar = re.compile("[Ff]oo"), re.compile("[Bb]ar")
    best = find_best_match("Foo bar foobar foo", [foo, bar])
    assert best.match is foo
    assert best.score == 9


def test_find_best_match_with_key():
    candidates = [{"name": "foo"}, {"name": "bar"}]
    best = find_best_match("foobarfoobarfoo", candidates, lambda c: c["name"])
    assert best.match is candidates[0]
    assert best.score == 9


def test_find_best_match_key_returning_none_falls_back_to_candidate():
    assert find_best_match("foofoo", ["foo"], lambda c: None) == BestMatch("foo", 6)


def test_find_best_match_stringifies_other_values():
    assert find_best_match("4", [4]) == BestMatch(4, 1)


def test_find_best_match_ties_keep_earliest():
    assert find_best_match("aXbX", ["a", "b"]) == BestMatch("a", 1)


def test_find_best_match_nothing_scores():
    assert find_best_match("xyz", ["a", "b"]) == BestMatch(None, 0)


def test_find_best_match_empty_candidates():
    best = find_best_match("anything", [])
    assert best.match is None
    assert best.score == 0


def test_find_best_match_debug_logs_scores(caplog):
    caplog.set_level(logging.DEBUG, logger="textshape.arrays.best_match")
    find_best_match("foobar", ["foo", "baz"], debug=True)
    assert "[SCORE]" in caplog.text
    assert "[BEST]" in caplog.text


# ─────────────────────────────────────────────────────────────────────────────
# match
# ─────────────────────────────────────────────────────────────────────────────


def test_match_strings():
    out = match(["abbbc", "baaac", "acccb"], ["a", "b", "c", "cccb"])
    assert isinstance(out, MatchMapping)
    assert out == {"abbbc": "b", "baaac": "a", "acccb": "cccb"}
    assert list(out) == ["abbbc", "baaac", "acccb"]


def test_match_keyed_objects_keep_identity():
    inputs = [{"input_prop": "abbbc"}, {"input_prop": "baaac"}]
    candidates = [{"candidate_prop": "a"}, {"candidate_prop": "b"}]
    out = match(
        Keyed(inputs, lambda i: i["input_prop"]),
        Keyed(candidates, lambda c: c["candidate_prop"]),
    )
    assert list(out.items()) == [(inputs[0], candidates[1]), (inputs[1], candidates[0])]
    assert out[inputs[0]] is candidates[1]
    # unhashable keys are looked up by identity, not by value
    assert {"input_prop": "abbbc"} not in out


def test_match_keyword_keys():
    inputs = [{"p": "abbbc"}, {"p": "baaac"}]
    candidates = [{"q": "a"}, {"q": "b"}]
    out = match(
        inputs,
        candidates,
        input_key=lambda i: i["p"],
        candidate_key=lambda c: c["q"],
    )
    assert [v["q"] for v in out.values()] == ["b", "a"]


def test_match_non_string_inputs_are_stringified():
    assert match([10, 20], ["1", "2"]) == {10: "1", 20: "2"}


def test_match_without_any_score_maps_to_none():
    out = match(["xyz"], ["a"])
    assert out["xyz"] is None


def test_match_duplicate_inputs_collapse():
    out = match(["ab", "ab"], ["a"])
    assert len(out) == 1


def test_match_empty_inputs():
    out = match([], ["a"])
    assert len(out) == 0
    assert out == {}


def test_match_rejects_key_given_twice():
    with pytest.raises(ValueError):
        match(Keyed(["a"], str.upper), ["a"], input_key=str.lower)


def test_match_mapping_missing_key_raises():
    out = match(["a"], ["a"])
    with pytest.raises(KeyError):
        out["b"]
