"""Polynomials with real coefficients and Newton-Raphson root finding."""

from __future__ import annotations

import argparse
import sys
import warnings
from functools import reduce
from itertools import zip_longest
from typing import Iterable

MAX_ITERATIONS = 100
EPSILON = 1e-6


class Polynomial:
    """A polynomial whose i-th coefficient multiplies x**i."""

    __slots__ = ("_coeffs",)

    def __init__(self, coeffs: Iterable[float]) -> None:
        self._coeffs = tuple(float(c) for c in coeffs)

    @property
    def coeffs(self) -> tuple[float, ...]:
        """Coefficients from the constant term upwards."""
        return self._coeffs

    def __str__(self) -> str:
        top = len(self._coeffs) - 1
        parts = []
        for power, coeff in reversed(list(enumerate(self._coeffs))):
            if coeff == 0:
                continue
            sign = "+" if power != top and coeff > 0 else ""
            suffix = f"x^{power} " if power > 0 else ""
            parts.append(f"{sign}{coeff:g}{suffix}")
        return "".join(parts)

    def __repr__(self) -> str:
        return f"Polynomial({list(self._coeffs)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._coeffs == other._coeffs

    def __hash__(self) -> int:
        return hash(self._coeffs)

    def __call__(self, x: float) -> float:
        return self.evaluate(x)

    def evaluate(self, x: float) -> float:
        """Value at ``x`` by Horner's rule."""
        return reduce(lambda acc, c: acc * x + c, reversed(self._coeffs), 0.0)

    def derivative(self) -> "Polynomial":
        """First derivative."""
        return Polynomial(power * c for power, c in enumerate(self._coeffs) if power > 0)

    def __add__(self, other: object) -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(a + b for a, b in zip_longest(self._coeffs, other._coeffs, fillvalue=0.0))

    def __sub__(self, other: object) -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(a - b for a, b in zip_longest(self._coeffs, other._coeffs, fillvalue=0.0))

    def __mul__(self, other: object) -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        if not self._coeffs or not other._coeffs:
            return Polynomial([])
        result = [0.0] * (len(self._coeffs) + len(other._coeffs) - 1)
        for i, a in enumerate(self._coeffs):
            for j, b in enumerate(other._coeffs):
                result[i + j] += a * b
        return Polynomial(result)

    def find_root(self, guess: float) -> float:
        """Approximate a root by Newton-Raphson iteration starting at ``guess``."""
        slope = self.derivative()
        for _ in range(MAX_ITERATIONS):
            fx = self.evaluate(guess)
            fpx = slope.evaluate(guess)
            if abs(fpx) < EPSILON:
                warnings.warn("Derivative too small. Stopping.", RuntimeWarning, stacklevel=2)
                break
            next_guess = guess - fx / fpx
            if abs(next_guess - guess) < EPSILON:
                return next_guess
            guess = next_guess
        return guess


def main(argv: list[str] | None = None) -> int:
    """Print a short demonstration of polynomial arithmetic."""
    argparse.ArgumentParser(description="Polynomial demonstration.").parse_args(argv)
    p = Polynomial([-10, 0, 4, 1])
    q = Polynomial([2, 0, 1])
    print(f"Given Polynomial: {p}")
    print(f"\nPolynomial + (x^2 + 2): {p + q}")
    print(f"Polynomial - (x^2 + 2): {p - q}")
    print(f"Polynomial * (x^2 + 2): {p * q}")
    root = p.find_root(1.5)
    print(f"\nFound root near 1.5: x = {root:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())