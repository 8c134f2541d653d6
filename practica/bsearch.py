"""Binary-search exercises: pyramid sizes, closest numbers, window sums, bounds."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from itertools import accumulate
from typing import Iterable, Sequence


def _pyramid_size(k: int) -> int:
    return k * (k + 1) * (k + 5) // 6 - 1


def max_k(n: int) -> int:
    """Return the largest k whose pyramid of k levels needs at most n objects."""
    low, high = 0, n
    answer = 0
    while low <= high:
        mid = (low + high) // 2
        if _pyramid_size(mid) <= n:
            answer = mid
            low = mid + 1
        else:
            high = mid - 1
    return answer


def closest_number(array: Sequence[int], target: int) -> int:
    """Return the element closest to target, scanning linearly.

    On a tie the element that comes first in the array wins.
    """
    if not array:
        raise ValueError("sequence should not be empty")
    return min(array, key=lambda number: abs(number - target))


def closest_number_bin(array: Sequence[int], target: int) -> int:
    """Return the element closest to target using binary search.

    On a tie the smaller element wins.
    """
    if not array:
        raise ValueError("sequence should not be empty")
    nums = sorted(array)
    index = bisect_left(nums, target)
    candidates = nums[max(index - 1, 0) : index + 1]
    return min(candidates, key=lambda number: (abs(number - target), number))


def subarray_sum_start(nums: Sequence[int], size: int, total: int) -> int:
    """Return the start of the first window of ``size`` items summing to ``total``.

    Windows starting at positions ``0 .. len(nums) - size - 1`` are examined;
    -1 is returned when none matches.
    """
    if size < 1:
        raise ValueError("window size must be positive")
    prefix = [0, *accumulate(nums)]
    for start in range(len(nums) - size):
        if prefix[start + size] - prefix[start] == total:
            return start
    return -1


def right_find(nums_sorted: Sequence[int], target: int) -> int:
    """Return the index of the last occurrence of target, or -1."""
    index = bisect_right(nums_sorted, target) - 1
    if index >= 0 and nums_sorted[index] == target:
        return index
    return -1


def left_find(nums_sorted: Sequence[int], target: int) -> int:
    """Return the index of the first occurrence of target, or -1."""
    index = bisect_left(nums_sorted, target)
    if index < len(nums_sorted) and nums_sorted[index] == target:
        return index
    return -1


def _one_based(index: int) -> int:
    return index + 1 if index != -1 else -1


def right_find_multiple(nums_sorted: Sequence[int], targets: Iterable[int]) -> list[int]:
    """Return 1-based last positions of each target, -1 where absent."""
    return [_one_based(right_find(nums_sorted, target)) for target in targets]


def left_find_multiple(nums_sorted: Sequence[int], targets: Iterable[int]) -> list[int]:
    """Return 1-based first positions of each target, -1 where absent."""
    return [_one_based(left_find(nums_sorted, target)) for target in targets]