"""Three-dimensional vectors."""

from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass
from numbers import Real


@dataclass(frozen=True)
class Vector3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: object) -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __mul__(self, scalar: object) -> "Vector3":
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def dot(self, other: "Vector3") -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        """Cross product."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def normalize(self) -> "Vector3":
        """Unit vector in the same direction."""
        length = math.sqrt(self.dot(self))
        if length == 0:
            raise ValueError("cannot normalize a zero-length vector")
        return Vector3(self.x / length, self.y / length, self.z / length)

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g}, {self.z:g})"


def main(argv: list[str] | None = None) -> int:
    """Print a short demonstration of vector operations."""
    argparse.ArgumentParser(description="Vector demonstration.").parse_args(argv)
    a = Vector3(1.0, 5.0, 3.0)
    b = Vector3(7.0, 4.0, 8.0)
    print(f"a + b = {a + b}")
    print(f"a * 2 = {a * 2.0}")
    print(f"a . b = {a.dot(b):g}")
    print(f"a x b = {a.cross(b)}")
    print(f"normalized a = {a.normalize()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())