"""Descriptive statistics: mean, median, variance and standard deviation."""

from __future__ import annotations

import argparse
import math
import sys
from typing import Sequence

SAMPLE_DATA = (16, 24, 22, 3, 43, 14, 43, 5, 22)


def _require_data(data: Sequence[float]) -> None:
    if not data:
        raise ValueError("data must not be empty")


def mean(data: Sequence[float]) -> float:
    """Arithmetic mean."""
    _require_data(data)
    return sum(data, 0.0) / len(data)


def median(data: Sequence[float]) -> float:
    """Middle value, or the average of the two middle values."""
    _require_data(data)
    ordered = sorted(data)
    half, odd = divmod(len(ordered), 2)
    if odd:
        return float(ordered[half])
    return (ordered[half - 1] + ordered[half]) / 2.0


def variance(data: Sequence[float], mean_value: float) -> float:
    """Population variance around ``mean_value``."""
    _require_data(data)
    return sum((value - mean_value) ** 2 for value in data) / len(data)


def standard_deviation(variance_value: float) -> float:
    """Square root of a variance."""
    return math.sqrt(variance_value)


def main(argv: list[str] | None = None) -> int:
    """Print statistics for a fixed sample."""
    argparse.ArgumentParser(description="Descriptive statistics demonstration.").parse_args(argv)
    data = list(SAMPLE_DATA)
    mean_value = mean(data)
    median_value = median(data)
    variance_value = variance(data, mean_value)
    deviation = standard_deviation(variance_value)
    print(f"Mean: {mean_value:g}")
    print(f"Median: {median_value:g}")
    print(f"Variance: {variance_value:g}")
    print(f"Standard Deviation: {deviation:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())