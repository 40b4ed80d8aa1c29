from .comparators import by_key, natural_order, reverse
from .heap import MinHeap, heap_sort, sift_down, sift_up
from .nodes import HeapNode, compare_nodes

__all__ = [
    "MinHeap",
    "heap_sort",
    "sift_up",
    "sift_down",
    "natural_order",
    "by_key",
    "reverse",
    "HeapNode",
    "compare_nodes",
]
