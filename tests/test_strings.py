import itertools
from math import factorial

import pytest

from algodrills.strings import (
    non_repeating_chars,
    permutations,
    reverse,
    upper_lower,
    word_score,
)


def test_reverse():
    assert reverse("hello") == "olleh"


@pytest.mark.parametrize("text", ["", "a", "racecar", "Alyani", "two words"])
def test_reverse_round_trip(text):
    assert reverse(reverse(text)) == text


def test_non_repeating_chars_ordered_by_code_point():
    assert non_repeating_chars("abca") == "bc"


def test_non_repeating_chars_each_occurs_once():
    text = "mississippi river"
    result = non_repeating_chars(text)
    assert all(text.count(char) == 1 for char in result)
    assert list(result) == sorted(result)


def test_non_repeating_chars_none():
    assert non_repeating_chars("aabb") == ""


def test_word_score():
    assert word_score("abc") == 6


def test_word_score_ignores_case():
    assert word_score("Alyani") == word_score("ALYANI") == word_score("alyani")


def test_word_score_empty():
    assert word_score("") == 0


def test_upper_lower():
    assert upper_lower("Hello World!") == ("HELLO WORLD", "hello world")


def test_upper_lower_drops_digits_and_punctuation():
    upper, lower = upper_lower("a1b2-c")
    assert upper == "ABC"
    assert lower == "abc"


def test_permutations_order():
    assert list(permutations("abc")) == ["abc", "acb", "bac", "bca", "cba", "cab"]


def test_permutations_cover_all_arrangements():
    text = "Alyani"
    result = list(permutations(text))
    assert len(result) == factorial(len(text))
    expected = sorted("".join(p) for p in itertools.permutations(text))
    assert sorted(result) == expected


def test_permutations_single_character():
    assert list(permutations("x")) == ["x"]


def test_permutations_empty_text():
    assert list(permutations("")) == []