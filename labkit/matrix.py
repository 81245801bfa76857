"""Dense two-dimensional matrices with addition, subtraction and multiplication."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Iterable, Sequence


class Matrix:
    """A rectangular grid of numbers stored row by row."""

    __slots__ = ("_data", "_cols")

    def __init__(self, data: Iterable[Sequence[Any]]) -> None:
        rows = [list(row) for row in data]
        if not rows or not rows[0]:
            raise ValueError("Matrix dimensions cannot be zero.")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("Inconsistent row sizes.")
        self._data = rows
        self._cols = width

    @classmethod
    def filled(cls, rows: int, cols: int, value: Any = 0) -> "Matrix":
        """Build a ``rows`` x ``cols`` matrix with every element set to ``value``."""
        if rows < 0 or cols < 0:
            raise ValueError("Matrix dimensions cannot be negative.")
        matrix = cls.__new__(cls)
        matrix._data = [[value] * cols for _ in range(rows)]
        matrix._cols = cols
        return matrix

    @property
    def rows(self) -> int:
        """Number of rows."""
        return len(self._data)

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    def __getitem__(self, index: int) -> list:
        return self._data[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self.rows, self.cols) == (other.rows, other.cols) and self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def _require_same_shape(self, other: "Matrix", operation: str) -> None:
        if (self.rows, self.cols) != (other.rows, other.cols):
            raise ValueError(f"Matrix sizes must match for {operation}.")

    def _combine(self, other: "Matrix", op) -> "Matrix":
        result = Matrix.filled(self.rows, self.cols)
        result._data = [
            [op(a, b) for a, b in zip(mine, theirs)]
            for mine, theirs in zip(self._data, other._data)
        ]
        return result

    def __add__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other, "addition")
        return self._combine(other, lambda a, b: a + b)

    def __sub__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other, "subtraction")
        return self._combine(other, lambda a, b: a - b)

    def __mul__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.cols != other.rows:
            raise ValueError("Inner dimensions must match for multiplication.")
        columns = list(zip(*other._data)) if other._data else [()] * other.cols
        result = Matrix.filled(self.rows, other.cols)
        result._data = [
            [sum((a * b for a, b in zip(row, column)), 0) for column in columns]
            for row in self._data
        ]
        return result

    def __str__(self) -> str:
        return "".join(
            "".join(f"{value!s:>6} " for value in row) + "\n" for row in self._data
        )

    def __repr__(self) -> str:
        return f"Matrix({self._data!r})"


def main(argv: list[str] | None = None) -> int:
    """Print a short demonstration of matrix arithmetic."""
    argparse.ArgumentParser(description="Matrix arithmetic demonstration.").parse_args(argv)
    a = Matrix([[1, 2], [3, 4]])
    b = Matrix([[5, 6], [7, 8]])
    c = Matrix([[4, 2, 3], [8, 4, 6]])
    try:
        print("Matrix A:\n" + str(a), end="")
        print("Matrix B:\n" + str(b), end="")
        print("\nA + B:\n" + str(a + b), end="")
        print("A - B:\n" + str(a - b), end="")
        print("A * B:\n" + str(a * b), end="")
        print("\nMatrix C:\n" + str(c), end="")
        print("A * C:\n" + str(a * c), end="")
        print("C * B (invalid):")
        print(str(c * b), end="")
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())