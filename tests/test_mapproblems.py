import pytest

from practica.mapproblems import (
    consists_of,
    count_arrays_for_number,
    count_letters,
    is_anagram,
    min_remove,
    numbers_close,
    repeating_numbers,
)


@pytest.mark.parametrize(
    "line, words, expected",
    [
        ("bomba", ["ba", "bom"], True),
        ("IloveGo", ["loveG", "I", "paper", "Go", "hate", "love"], True),
        ("abacababba", ["abacab", "aba", "ab", "ca", "cab", "bab", "ba"], True),
        ("we need to cook", ["cook", "we", "oooh", "Jessie?"], False),
    ],
)
def test_consists_of(line, words, expected):
    assert consists_of(line, words) is expected


def test_consists_of_uses_each_word_once():
    assert consists_of("abab", ["ab"]) is False
    assert consists_of("abab", ["ab", "ab"]) is True


def test_consists_of_leaves_words_untouched():
    words = ["ba", "bom"]
    consists_of("bomba", words)
    assert words == ["ba", "bom"]


@pytest.mark.parametrize(
    "first, second, expected",
    [
        ("IloveGo", "IhateGo", False),
        ("debitcard", "badcredit", True),
        ("abab", "aabbc", False),
    ],
)
def test_is_anagram(first, second, expected):
    assert is_anagram(first, second) is expected


def test_count_letters():
    assert count_letters("abab") == {"a": 2, "b": 2}


@pytest.mark.parametrize(
    "numbers, expected",
    [
        ([1, 2, 3, 4, 5], 3),
        ([1, 1, 2, 3, 5, 5, 2, 2, 1, 5], 4),
        ([3, 3, 3, 4, 4, 4, 4], 0),
    ],
)
def test_min_remove(numbers, expected):
    assert min_remove(numbers) == expected


def test_min_remove_empty():
    assert min_remove([]) == 0


@pytest.mark.parametrize(
    "numbers, window, expected",
    [
        ([8, 1, 2, 1, 3, 4], 3, True),
        ([1, 2, 3, 4, 5, 6, 7], 4, False),
        ([1, 1, 1, 1], 0, False),
    ],
)
def test_numbers_close(numbers, window, expected):
    assert numbers_close(numbers, window) is expected


@pytest.mark.parametrize(
    "arrays, k, expected",
    [
        ([[10, 20, 30], [60, 20], [10, 50, 60, 70], [80]], 2, [30, 50, 70, 80]),
        ([[1, 2], [1, 3, 4], [2], [1, 2, 5, 6], [3, 7]], 3, [3, 4, 5, 6, 7]),
    ],
)
def test_repeating_numbers(arrays, k, expected):
    assert repeating_numbers(arrays, k) == expected


def test_count_arrays_for_number():
    arrays = [[10, 20, 30], [60, 20], [10, 50, 60, 70], [80]]
    assert count_arrays_for_number(arrays, 20) == 2
    assert count_arrays_for_number(arrays, 99) == 0