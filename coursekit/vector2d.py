"""A two-dimensional vector that keeps count of its live instances."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Sequence


class Vector2d:
    """A mutable 2D vector; calling it returns its length."""

    _count = 0
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)
        Vector2d._count += 1
        self._counted = True

    def __del__(self) -> None:
        if getattr(self, "_counted", False):
            self._counted = False
            Vector2d._count -= 1

    def __copy__(self) -> Vector2d:
        return Vector2d(self.x, self.y)

    def __add__(self, other: Vector2d) -> Vector2d:
        if not isinstance(other, Vector2d):
            return NotImplemented
        return Vector2d(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2d) -> Vector2d:
        if not isinstance(other, Vector2d):
            return NotImplemented
        return Vector2d(self.x - other.x, self.y - other.y)

    def __call__(self) -> float:
        return math.hypot(self.x, self.y)

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError("Index out of range")

    def __setitem__(self, index: int, value: float) -> None:
        if index == 0:
            self.x = float(value)
        elif index == 1:
            self.y = float(value)
        else:
            raise IndexError("Index out of range")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2d):
            return NotImplemented
        return (self.x, self.y) == (other.x, other.y)

    def __str__(self) -> str:
        return f"{{{self.x:g}; {self.y:g}}}"

    def __repr__(self) -> str:
        return f"Vector2d({self.x!r}, {self.y!r})"

    @classmethod
    def parse(cls, text: str) -> Vector2d:
        """Build a vector from text of the form 'x y'."""
        parts = text.split()
        if len(parts) != 2:
            raise ValueError(f"expected two numbers 'x y', got {text!r}")
        return cls(float(parts[0]), float(parts[1]))

    @classmethod
    def live_count(cls) -> int:
        """Number of vectors currently alive."""
        return Vector2d._count


def main(argv: Sequence[str] | None = None) -> int:
    """Read a vector and show sum, difference and length against a fixed one."""
    argparse.ArgumentParser(description="Vector arithmetic demo.").parse_args(argv)

    test_vec = Vector2d(1.2, 5.6)
    print(f"Initial count: {Vector2d.live_count()}")
    print(f"Vector: {test_vec}")
    print("Enter new vector (format: x y): ", end="", flush=True)
    try:
        new_vec = Vector2d.parse(sys.stdin.readline())
    except ValueError:
        print("\nInvalid vector.")
        return 1

    print(f"Sum of vectors: {test_vec + new_vec}")
    print(f"Difference of vectors: {test_vec - new_vec}")
    print(f"Vector length: {test_vec():g}")
    print(f"Final count: {Vector2d.live_count()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())