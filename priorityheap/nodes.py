"""Scheduler-style heap helpers over a plain list of nodes.

Unlike :class:`~priorityheap.heap.MinHeap`, the caller owns the list and the
functions below mutate it in place. Nodes are ordered by ``sort_index`` and
ties fall back to ``id``, so equal-priority nodes come out in id order.

Example:
    queue = []
    push(queue, HeapNode(1, sort_index=10))
    push(queue, HeapNode(2, sort_index=5))
    pop(queue).id  # -> 2
"""

from __future__ import annotations
from typing import Any, List, Optional

from .heap import sift_down, sift_up


class HeapNode:
    """A prioritized record: lower ``sort_index`` is served first."""

    __slots__ = ("id", "sort_index", "payload")

    def __init__(self, id: int, sort_index: float, payload: Any = None) -> None:
        self.id = id
        self.sort_index = sort_index
        self.payload = payload

    def __repr__(self) -> str:
        return f"HeapNode(id={self.id!r}, sort_index={self.sort_index!r})"


def compare_nodes(a: HeapNode, b: HeapNode) -> int:
    diff = a.sort_index - b.sort_index
    if diff:
        return -1 if diff < 0 else 1
    return a.id - b.id


def push(heap: List[HeapNode], node: HeapNode) -> None:
    heap.append(node)
    sift_up(heap, len(heap) - 1, compare_nodes)


def peek(heap: List[HeapNode]) -> Optional[HeapNode]:
    return heap[0] if heap else None


def pop(heap: List[HeapNode]) -> Optional[HeapNode]:
    """Remove and return the first node, or None if the list is empty."""
    if not heap:
        return None
    first = heap[0]
    last = heap.pop()
    if heap:
        heap[0] = last
        sift_down(heap, 0, compare_nodes)
    return first
