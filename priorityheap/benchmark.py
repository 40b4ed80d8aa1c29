"""
Heap benchmark command-line interface.

Times the core heap operations over exponentially growing random inputs and
writes one CSV row per (operation, input size) pair.

Usage examples:
    python -m priorityheap.benchmark
    python -m priorityheap.benchmark --output report.csv --base-input 50 --steps 6
    priorityheap-bench --iterations 3 --seed 7
"""

from __future__ import annotations

import argparse
import csv
import random
import statistics
import sys
import time
from typing import Callable, Dict, List, Optional

from .heap import MinHeap, heap_sort

# Defaults, overridable from the command line
DEFAULT_OUTPUT_CSV = "min_heap_performance.csv"
DEFAULT_BASE_INPUT = 100
DEFAULT_STEPS = 12
DEFAULT_ITERATIONS = 5
SPACE_ITERATIONS = 3
MAX_RANDOM_VALUE = 1_000_000

CSV_HEADER = [
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Standard Deviation (ms)",
    "Average Space (bytes)",
]

Operation = Callable[[List[int]], MinHeap]


# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_list(size: int, rng: Optional[random.Random] = None) -> List[int]:
    """Generate a list of random integers of given size."""
    rng = rng or random.Random()
    return [rng.randint(0, MAX_RANDOM_VALUE) for _ in range(size)]


def measure_operation_time(operation: Operation, input_size: int, iterations: int = DEFAULT_ITERATIONS,
                           rng: Optional[random.Random] = None):
    """Run the operation multiple times and return average + std deviation (ms)."""
    times = []
    for _ in range(iterations):
        data = generate_random_list(input_size, rng)
        start = time.perf_counter()
        operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev


def measure_space_efficiency(operation: Operation, input_size: int, iterations: int = SPACE_ITERATIONS,
                             rng: Optional[random.Random] = None) -> float:
    """Return average memory held by the heap left behind by `operation` (bytes)."""
    sizes = []
    for _ in range(iterations):
        data = generate_random_list(input_size, rng)
        heap = operation(data)
        total_size = sys.getsizeof(heap) + sys.getsizeof(heap._data)
        # Include all elements still held by the heap
        for item in heap._data:
            total_size += sys.getsizeof(item)
        sizes.append(total_size)
    return statistics.mean(sizes)


# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_insert(data: List[int]) -> MinHeap:
    heap: MinHeap[int] = MinHeap()
    for item in data:
        heap.insert(item)
    return heap


def bench_extract_min(data: List[int]) -> MinHeap:
    heap = bench_insert(data)
    while heap:
        heap.extract_min()
    return heap


def bench_peek(data: List[int]) -> MinHeap:
    heap = bench_insert(data)
    for _ in range(min(3, len(data))):
        heap.peek()
    return heap


def bench_heap_sort(data: List[int]) -> MinHeap:
    # A sorted list already satisfies heap order, so heapify only verifies it
    return MinHeap(None, heap_sort(data))


OPERATIONS: Dict[str, Operation] = {
    "insert": bench_insert,
    "extract_min": bench_extract_min,
    "peek": bench_peek,
    "heap_sort": bench_heap_sort,
}


# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = DEFAULT_BASE_INPUT, steps: int = DEFAULT_STEPS,
                   iterations: int = DEFAULT_ITERATIONS, seed: Optional[int] = None) -> List[list]:
    """Run exponential performance tests for MinHeap operations.

    Input sizes are ``base_input * 2**i`` for ``i in range(steps)``. Returns the
    rows written to `output_file` (header excluded).
    """
    if base_input <= 0:
        raise ValueError("base_input must be > 0")
    if steps <= 0:
        raise ValueError("steps must be > 0")
    if iterations <= 0:
        raise ValueError("iterations must be > 0")

    rng = random.Random(seed)
    input_sizes = [base_input * (2 ** i) for i in range(steps)]
    rows: List[list] = []

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CSV_HEADER)

        for op_name, op_func in OPERATIONS.items():
            for size in input_sizes:
                avg_time, std_time = measure_operation_time(op_func, size, iterations, rng)
                avg_space = measure_space_efficiency(op_func, size, min(iterations, SPACE_ITERATIONS), rng)
                row = [size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}", f"{avg_space:.0f}"]
                writer.writerow(row)
                rows.append(row)
                print(f"{op_name:<12} | Size: {size:<8} | Avg Time: {avg_time:.3f} ms | "
                      f"Std: {std_time:.3f} ms | Avg Space: {avg_space:.0f} bytes")

    print(f"\nBenchmark completed. Results saved to {output_file}")
    return rows


# ----------------------------
# Main Entry Point
# ----------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="priorityheap-bench", description="Benchmark MinHeap operations.")
    parser.add_argument("--output", default=DEFAULT_OUTPUT_CSV, help="CSV report path")
    parser.add_argument("--base-input", type=int, default=DEFAULT_BASE_INPUT, help="smallest input size")
    parser.add_argument("--steps", type=int, default=DEFAULT_STEPS, help="number of doublings of the input size")
    parser.add_argument("--iterations", type=int, default=DEFAULT_ITERATIONS, help="timed runs per size")
    parser.add_argument("--seed", type=int, default=None, help="random seed for reproducible inputs")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        run_benchmarks(args.output, base_input=args.base_input, steps=args.steps,
                       iterations=args.iterations, seed=args.seed)
    except ValueError as e:
        parser.error(str(e))
    return 0


if __name__ == "__main__":
    sys.exit(main())
