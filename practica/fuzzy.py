"""Fuzzy filtering of words: substring matches first, edit distance after."""

from __future__ import annotations

from typing import Iterable, Sequence


def filter_words(words: Sequence[str], query: str) -> list[str]:
    """Return the words matching query.

    Words containing the query (ignoring case) are preferred; failing that,
    the words sharing a letter with the query and closest to it by edit
    distance are returned.
    """
    if not words:
        return []
    query = query.lower()

    containing = contains_filter(words, query)
    if containing:
        return containing

    candidates = with_common_letters(words, query)
    if not candidates:
        return []
    return best_matches((word, levenshtein_distance(word, query)) for word in candidates)


def contains_filter(words: Iterable[str], word: str) -> list[str]:
    """Return the words that contain word, ignoring case."""
    needle = word.lower()
    return [candidate for candidate in words if needle in candidate.lower()]


def starts_with_filter(words: Iterable[str], prefix: str) -> list[str]:
    """Return the words that start with prefix, ignoring case."""
    start = prefix.lower()
    return [candidate for candidate in words if candidate.lower().startswith(start)]


def best_matches(items: Iterable[tuple[str, int]]) -> list[str]:
    """Return the words of the (word, distance) pairs with the least distance."""
    pairs = list(items)
    if not pairs:
        raise ValueError("no items to choose from")
    least = min(distance for _, distance in pairs)
    return [word for word, distance in pairs if distance == least]


def levenshtein_distance(a: str, b: str) -> int:
    """Return the edit distance between a and b."""
    if not a:
        return len(b)
    if not b:
        return len(a)
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            cost = 0 if char_a == char_b else 1
            current.append(min(current[j - 1] + 1, previous[j] + 1, previous[j - 1] + cost))
        previous = current
    return previous[-1]


def with_common_letters(words: Iterable[str], word: str) -> list[str]:
    """Return the words sharing at least one letter a-z with word, ignoring case."""
    target = letter_set(word.lower())
    return [candidate for candidate in words if letter_set(candidate.lower()) & target]


def letter_set(word: str) -> int:
    """Return a bit mask of the lower-case letters a-z found in word."""
    mask = 0
    for char in word:
        if "a" <= char <= "z":
            mask |= 1 << (ord(char) - ord("a"))
    return mask