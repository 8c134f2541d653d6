"""Hash-map exercises: word splitting, anagrams, counting and windows."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence


def consists_of(s: str, words: Sequence[str]) -> bool:
    """Tell whether s is a concatenation of some of the words, each used once."""
    words = list(words)
    for index, word in enumerate(words):
        if word == s:
            return True
        if s.startswith(word):
            rest = words[:index] + words[index + 1 :]
            if consists_of(s[len(word) :], rest):
                return True
    return False


def count_letters(word: str) -> Counter[str]:
    """Return how many times each character occurs in word."""
    return Counter(word)


def is_anagram(first: str, second: str) -> bool:
    """Tell whether the two strings use exactly the same characters."""
    return count_letters(first) == count_letters(second)


def min_remove(numbers: Sequence[int]) -> int:
    """Return the fewest removals leaving values that differ by at most one."""
    counts = Counter(numbers)
    keep = max(
        (count + counts.get(number + 1, 0) for number, count in counts.items()),
        default=0,
    )
    return len(numbers) - keep


def numbers_close(arr: Iterable[int], window: int) -> bool:
    """Tell whether some value repeats within ``window`` positions."""
    last_seen: dict[int, int] = {}
    for index, number in enumerate(arr):
        previous = last_seen.get(number)
        if previous is not None and index - previous <= window:
            return True
        last_seen[number] = index
    return False


def count_arrays_for_number(arrays: Iterable[Sequence[int]], number: int) -> int:
    """Return how many of the arrays contain number."""
    return sum(1 for array in arrays if number in array)


def repeating_numbers(arrays: Sequence[Sequence[int]], k: int) -> list[int]:
    """Return, sorted, the numbers found in fewer than k of the arrays."""
    found = {
        number
        for array in arrays
        for number in array
        if count_arrays_for_number(arrays, number) < k
    }
    return sorted(found)