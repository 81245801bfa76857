"""Numerical integration by the trapezoidal and Simpson's rules."""

from __future__ import annotations

import argparse
import sys
import warnings
from typing import Callable


def _step(a: float, b: float, n: int) -> float:
    if n <= 0:
        raise ValueError("n must be positive")
    return (b - a) / n


def trapezoidal(f: Callable[[float], float], a: float, b: float, n: int) -> float:
    """Integrate ``f`` over [a, b] with ``n`` trapezoids."""
    h = _step(a, b, n)
    total = (f(a) + f(b)) / 2.0 + sum(f(a + i * h) for i in range(1, n))
    return h * total


def simpsons(f: Callable[[float], float], a: float, b: float, n: int) -> float:
    """Integrate ``f`` over [a, b] with Simpson's rule; odd ``n`` is raised by one."""
    if n % 2 != 0:
        warnings.warn(
            "Simpson's rule requires even number of intervals. Increasing n by 1.",
            RuntimeWarning,
            stacklevel=2,
        )
        n += 1
    h = _step(a, b, n)
    total = f(a) + f(b) + sum(
        (2 if i % 2 == 0 else 4) * f(a + i * h) for i in range(1, n)
    )
    return h / 3 * total


def main(argv: list[str] | None = None) -> int:
    """Integrate x^2 over [0, 3] with both rules and report the errors."""
    argparse.ArgumentParser(description="Numerical integration demonstration.").parse_args(argv)
    a, b, n = 0.0, 3.0, 10
    exact = 9.0

    def square(x: float) -> float:
        return x * x

    print(f"Numerical Integration of f(x) = x^2 from {a:.6f} to {b:.6f}")
    print(f"Using {n} intervals:")
    trap = trapezoidal(square, a, b, n)
    simp = simpsons(square, a, b, n)
    print(f"Trapezoidal Rule Result = {trap:.6f} (Error = {abs(trap - exact):.6f})")
    print(f"Simpson's Rule Result   = {simp:.6f} (Error = {abs(simp - exact):.6f})")
    print(f"Exact Result            = {exact:.6f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())