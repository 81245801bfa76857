"""Monte Carlo estimation of pi."""

from __future__ import annotations

import argparse
import random
import sys

SAMPLES = (100, 500, 1030, 1400, 2480, 1000000)
# The demonstration runs over the first five sample sizes only.
DEMO_RUNS = 5


def estimate_pi(total_points: int, rng: random.Random | None = None) -> float:
    """Estimate pi from random points in the unit square."""
    if total_points <= 0:
        raise ValueError("total_points must be positive")
    rng = rng if rng is not None else random.Random()
    inside = sum(
        1
        for _ in range(total_points)
        if rng.random() ** 2 + rng.random() ** 2 <= 1.0
    )
    return 4.0 * inside / total_points


def main(argv: list[str] | None = None) -> int:
    """Print pi estimates for several sample sizes."""
    parser = argparse.ArgumentParser(description="Monte Carlo estimation of pi.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    print("Monte Carlo Pi Estimation:")
    print("---------------------------")
    for total in SAMPLES[:DEMO_RUNS]:
        pi = estimate_pi(total, rng)
        print(f"Samples: {total} -> Estimated Pi: {pi:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())