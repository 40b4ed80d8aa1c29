from __future__ import annotations
from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

from .comparators import natural_order

T = TypeVar("T")

Comparator = Callable[[T, T], int]


# -----------------------------
# Index arithmetic over a plain list
# -----------------------------
def sift_up(data: List[T], idx: int, compare: Comparator) -> None:
    """Move ``data[idx]`` toward the root until its parent is not larger."""
    while idx > 0:
        parent = (idx - 1) // 2
        if compare(data[idx], data[parent]) >= 0:
            break  # ties stop the climb
        data[parent], data[idx] = data[idx], data[parent]
        idx = parent


def sift_down(data: List[T], idx: int, compare: Comparator) -> None:
    """Move ``data[idx]`` toward the leaves until no child is smaller.

    The right child only wins when strictly smaller than the left one.
    """
    n = len(data)
    while True:
        left = 2 * idx + 1
        right = 2 * idx + 2
        smallest = idx
        if left < n and compare(data[left], data[smallest]) < 0:
            smallest = left
        if right < n and compare(data[right], data[smallest]) < 0:
            smallest = right
        if smallest == idx:
            break
        data[idx], data[smallest] = data[smallest], data[idx]
        idx = smallest


class MinHeap(Generic[T]):
    """A binary min-heap ordered by a caller-supplied three-way comparator.

    ``compare(a, b)`` returns a negative number when ``a`` sorts before ``b``,
    zero for equal rank and a positive number otherwise. Empty-heap queries
    (``peek``/``extract_min``) return ``None`` instead of raising.
    """

    __slots__ = ("_data", "_compare")

    def __init__(self, compare: Optional[Comparator] = None, it: Optional[Iterable[T]] = None) -> None:
        if compare is None:
            compare = natural_order
        if not callable(compare):
            raise TypeError("compare must be callable")
        self._compare: Comparator = compare
        self._data: List[T] = []
        if it:
            self._data = list(it)
            self._heapify()  # Bulk build in O(n) instead of repeated inserts

    def _heapify(self) -> None:
        """Transform the current list into a heap in-place in O(n) time."""
        n = len(self._data)
        for i in reversed(range(n // 2)):
            sift_down(self._data, i, self._compare)

    # -----------------------------
    # Public API
    # -----------------------------
    @property
    def comparator(self) -> Comparator:
        return self._compare

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return not self._data

    def insert(self, value: T) -> None:
        """Insert value into the heap (O(log n))."""
        self._data.append(value)
        sift_up(self._data, len(self._data) - 1, self._compare)

    def peek(self) -> Optional[T]:
        """Return the smallest item without removing it, or None if empty (O(1))."""
        return self._data[0] if self._data else None

    def extract_min(self) -> Optional[T]:
        """Remove and return the smallest item, or None if empty (O(log n))."""
        data = self._data
        if not data:
            return None
        top = data[0]
        last = data.pop()
        if data:
            data[0] = last
            sift_down(data, 0, self._compare)
        return top

    def pushpop(self, value: T) -> T:
        """Insert value then extract the smallest item in a single O(log n) pass."""
        data = self._data
        if data and self._compare(data[0], value) < 0:
            value, data[0] = data[0], value
            sift_down(data, 0, self._compare)
        return value

    def replace(self, value: T) -> Optional[T]:
        """Extract the smallest item, then insert value (O(log n)).

        On an empty heap value is simply inserted and None is returned.
        """
        data = self._data
        if not data:
            data.append(value)
            return None
        top = data[0]
        data[0] = value
        sift_down(data, 0, self._compare)
        return top

    def drain(self) -> Iterator[T]:
        """Extract items until the heap is empty, smallest first."""
        while self._data:
            yield self.extract_min()  # type: ignore[misc]

    def clear(self) -> None:
        self._data = []

    def to_list(self) -> List[T]:
        """Return a copy of the backing list (heap order, not sorted order)."""
        return list(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __iter__(self) -> Iterator[T]:
        # Iterate over the internal array (heap order, not sorted order)
        return iter(self._data)

    def __repr__(self) -> str:
        return f"MinHeap({self._data!r})"


def heap_sort(it: Iterable[T], compare: Optional[Comparator] = None) -> List[T]:
    """Return the items of ``it`` in non-decreasing order under ``compare``."""
    return list(MinHeap(compare, it).drain())
