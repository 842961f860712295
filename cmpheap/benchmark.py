"""Timing and memory benchmarks for `Heap` operations.

Each operation is run over exponentially growing random inputs and the
results are written as CSV rows.
"""

import csv
import logging
import random
import statistics
import sys
import time

from .datastructures import Heap, ascending

logger = logging.getLogger(__name__)

HEADER = [
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Standard Deviation (ms)",
    "Average Space (bytes)",
]

# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_list(size: int, rng=random):
    """Generate a list of random integers of given size."""
    return [rng.randint(0, 1000000) for _ in range(size)]


def measure_operation_time(operation, input_size: int, iterations: int = 5, rng=random):
    """Run the operation multiple times and return average + std deviation (ms)."""
    times = []
    for _ in range(iterations):
        data = generate_random_list(input_size, rng)
        start = time.perf_counter()
        operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev


def measure_space_efficiency(operation, input_size: int, iterations: int = 3, rng=random):
    """Return average memory held by the resulting heap (bytes)."""
    sizes = []
    for _ in range(iterations):
        data = generate_random_list(input_size, rng)
        heap = operation(data)
        items = heap.to_list()
        total_size = sys.getsizeof(heap) + sys.getsizeof(items)
        for item in items:
            total_size += sys.getsizeof(item)
        sizes.append(total_size)
    return statistics.mean(sizes)

# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_push(data):
    heap = Heap(ascending)
    for item in data:
        heap.push(item)
    return heap


def bench_pop(data):
    heap = Heap.from_iterable(data, ascending)
    while len(heap) > 0:
        heap.pop()
    return heap


def bench_pushpop(data):
    heap = Heap.from_iterable(data, ascending)
    for item in data:
        heap.pushpop(item)
    return heap


def bench_replace(data):
    heap = Heap.from_iterable(data, ascending)
    if heap:
        for item in data:
            heap.replace(item)
    return heap


def bench_from_iterable(data):
    return Heap.from_iterable(data, ascending)


OPERATIONS = {
    "push": bench_push,
    "pop": bench_pop,
    "pushpop": bench_pushpop,
    "replace": bench_replace,
    "from_iterable": bench_from_iterable,
}

# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(out, base_input: int = 100, rounds: int = 12, iterations: int = 5, rng=random):
    """Write one CSV row per (operation, input size) to the text stream `out`.

    Returns the rows written, header excluded.
    """
    input_sizes = [base_input * (2 ** i) for i in range(rounds)]
    writer = csv.writer(out)
    writer.writerow(HEADER)

    rows = []
    for op_name, op_func in OPERATIONS.items():
        for size in input_sizes:
            avg_time, std_time = measure_operation_time(op_func, size, iterations, rng)
            avg_space = measure_space_efficiency(op_func, size, rng=rng)
            row = [size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}", f"{avg_space:.0f}"]
            writer.writerow(row)
            rows.append(row)
            logger.info(
                "%-13s | size: %-8d | avg: %.3f ms | std: %.3f ms | space: %.0f bytes",
                op_name, size, avg_time, std_time, avg_space,
            )
    return rows
