"""Sequential and thread-parallel merge sort with a simple benchmark."""

from __future__ import annotations

import argparse
import random
import sys
import threading
import time
from typing import Callable, MutableSequence, Sequence

THRESHOLD = 10000
MAX_PARALLEL_DEPTH = 3


def merge(data: MutableSequence, left: int, mid: int, right: int) -> None:
    """Merge the sorted runs ``data[left:mid]`` and ``data[mid:right]`` in place."""
    merged = []
    i, j = left, mid
    while i < mid and j < right:
        if data[i] < data[j]:
            merged.append(data[i])
            i += 1
        else:
            merged.append(data[j])
            j += 1
    merged.extend(data[i:mid])
    merged.extend(data[j:right])
    data[left:right] = merged


def _sequential(data: MutableSequence, left: int, right: int) -> None:
    if right - left <= 1:
        return
    mid = (left + right) // 2
    _sequential(data, left, mid)
    _sequential(data, mid, right)
    merge(data, left, mid, right)


def _concurrent(data: MutableSequence, left: int, right: int, depth: int) -> None:
    if right - left <= 1:
        return
    mid = (left + right) // 2
    if right - left < THRESHOLD or depth > MAX_PARALLEL_DEPTH:
        _concurrent(data, left, mid, depth + 1)
        _concurrent(data, mid, right, depth + 1)
    else:
        halves = [
            threading.Thread(target=_concurrent, args=(data, left, mid, depth + 1)),
            threading.Thread(target=_concurrent, args=(data, mid, right, depth + 1)),
        ]
        for thread in halves:
            thread.start()
        for thread in halves:
            thread.join()
    merge(data, left, mid, right)


def sequential_merge_sort(data: MutableSequence) -> None:
    """Sort ``data`` in place with a recursive merge sort."""
    _sequential(data, 0, len(data))


def concurrent_merge_sort(data: MutableSequence) -> None:
    """Sort ``data`` in place, sorting large halves on separate threads."""
    _concurrent(data, 0, len(data), 0)


def benchmark(data: Sequence, sorter: Callable[[list], None], label: str) -> float:
    """Time ``sorter`` on a copy of ``data``, print and return the seconds taken."""
    work = list(data)
    start = time.perf_counter()
    sorter(work)
    elapsed = time.perf_counter() - start
    print(f"{label}: {elapsed:g} seconds")
    return elapsed


def main(argv: list[str] | None = None) -> int:
    """Compare sequential and concurrent merge sort on random integers."""
    parser = argparse.ArgumentParser(description="Merge sort benchmark.")
    parser.add_argument("--size", type=int, default=1_000_000, help="number of elements")
    parser.add_argument("--seed", type=int, default=42, help="random seed")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    original = [rng.randint(0, 1_000_000) for _ in range(args.size)]
    benchmark(original, sequential_merge_sort, " Sequential Merge Sort")
    benchmark(original, concurrent_merge_sort, "Concurrent Merge Sort")
    return 0


if __name__ == "__main__":
    sys.exit(main())