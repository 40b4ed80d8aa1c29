"""Ready-made three-way comparators for :class:`priorityheap.MinHeap`.

A comparator takes two items and returns a negative number when the first
sorts before the second, zero when they rank equally and a positive number
otherwise.
"""

from __future__ import annotations
from typing import Any, Callable


def natural_order(a: Any, b: Any) -> int:
    """Compare two items with their own ``<`` operator."""
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def by_key(key: Callable[[Any], Any]) -> Callable[[Any, Any], int]:
    """Build a comparator ranking items by ``key(item)`` ascending.

    Example:
        MinHeap(by_key(lambda p: p["age"]))
    """

    def compare(a: Any, b: Any) -> int:
        return natural_order(key(a), key(b))

    return compare


def reverse(compare: Callable[[Any, Any], int]) -> Callable[[Any, Any], int]:
    """Invert a comparator, e.g. to turn a min-heap into a max-heap."""

    def reversed_compare(a: Any, b: Any) -> int:
        return compare(b, a)

    return reversed_compare
