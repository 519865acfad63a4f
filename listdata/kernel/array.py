"""
ListData Kernel — Array Primitives

Positional editing of an ordered sequence. Both functions are pure:
the input sequence is never modified, and every element that is not
inserted keeps its identity in the result.

  insert(original, index, *values)   → new list with values spliced in before index
  move(original, index, indices)     → new list with indices relocated before index

Out-of-range positions are clamped or ignored, never raised.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")


def _clamp(index: int, n: int) -> int:
    return min(max(index, 0), n)


def insert(original: Sequence[T], index: int, *values: T) -> Sequence[T]:
    """
    Produce a new list by inserting values into original before index.

    Returns original itself when there is nothing to insert.
    index is clamped into [0, len(original)].
    """
    if not values:
        return original

    n = len(original)
    m = len(values)
    index = _clamp(index, n)

    # Single pass over original, leaving a gap of m slots at index
    result: list[T | None] = [None] * (n + m)
    for oi in range(n):
        result[oi if oi < index else oi + m] = original[oi]

    result[index:index + m] = values
    return result  # type: ignore[return-value]


def move(original: Sequence[T], index: int, indices: Iterable[int]) -> Sequence[T]:
    """
    Produce a new list by moving the elements at indices to the position
    before index.

    Invalid entries in indices (negative, >= len(original)) are dropped.
    The rest are sorted ascending, so the moved block keeps the original
    relative order no matter how indices was ordered.

    Returns original itself when it is empty or no valid index remains.
    """
    n = len(original)

    # Guard against -1 from a failed key lookup as well as anything past the end.
    # O(m log m) where m = number of valid indices
    to_move = sorted({i for i in indices if 0 <= i < n})

    if n == 0 or not to_move:
        return original

    index = _clamp(index, n)
    moved = set(to_move)
    result: list[T] = []

    for oi in range(index):
        if oi not in moved:
            result.append(original[oi])

    for i in to_move:
        result.append(original[i])

    for oi in range(index, n):
        if oi not in moved:
            result.append(original[oi])

    return result
