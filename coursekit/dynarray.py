"""Growable arrays: one reallocating on every resize, one with a capacity."""

from __future__ import annotations

import argparse
import operator
import sys
from collections.abc import Iterator, Sequence
from itertools import islice
from typing import Any

_FILL = 0


def _check_size(size: int) -> int:
    size = operator.index(size)
    if size < 0:
        raise ValueError("size must not be negative")
    return size


class IntArray:
    """An array whose contents are discarded whenever it is resized."""

    def __init__(self, size: int = 0) -> None:
        self._items: list[Any] = [_FILL] * _check_size(size)

    def _position(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < len(self._items):
            raise IndexError("Index out of bounds")
        return index

    def __getitem__(self, index: int) -> Any:
        return self._items[self._position(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[self._position(index)] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"IntArray({self._items!r})"

    def resize(self, new_size: int) -> None:
        """Reallocate to new_size elements; old contents are not kept."""
        self._items = [_FILL] * _check_size(new_size)

    def clear(self) -> None:
        """Drop all elements."""
        self._items = []

    def append(self, element: Any) -> None:
        """Add element at the end."""
        self._items.append(element)


class DynamicArray:
    """An array with separate size and capacity that doubles when full."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, size: int = 0) -> None:
        size = _check_size(size)
        self._storage: list[Any] = [_FILL] * size
        self._size = size

    @property
    def capacity(self) -> int:
        """Number of slots allocated."""
        return len(self._storage)

    def _position(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < self._size:
            raise IndexError("Index out of bounds")
        return index

    def __getitem__(self, index: int) -> Any:
        return self._storage[self._position(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._storage[self._position(index)] = value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return islice(self._storage, self._size)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicArray):
            return NotImplemented
        return list(self) == list(other)

    def __repr__(self) -> str:
        return f"DynamicArray({list(self)!r}, capacity={self.capacity})"

    def resize(self, new_size: int) -> None:
        """Change the size; slots inside the capacity keep their old values."""
        new_size = _check_size(new_size)
        if new_size > self.capacity:
            self.reserve(new_size)
        self._size = new_size

    def clear(self) -> None:
        """Drop all elements and release the storage."""
        self._storage = []
        self._size = 0

    def append(self, element: Any) -> None:
        """Add element at the end, doubling the capacity when full."""
        if self._size >= self.capacity:
            self.reserve(1 if self.capacity == 0 else self.capacity * 2)
        self._storage[self._size] = element
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the last element; an empty array is left as is."""
        if not self._size:
            return None
        self._size -= 1
        return self._storage[self._size]

    def back(self) -> Any:
        """The last element."""
        if not self._size:
            raise IndexError("Empty array")
        return self._storage[self._size - 1]

    def reserve(self, capacity: int) -> None:
        """Grow the storage to at least capacity slots, keeping the elements."""
        capacity = operator.index(capacity)
        if capacity > self.capacity:
            self._storage = self._storage[: self._size] + [_FILL] * (capacity - self._size)

    def shrink_to_fit(self) -> None:
        """Release slots beyond the current size."""
        del self._storage[self._size :]


def _joined(values) -> str:
    return "".join(f"{value} " for value in values)


def main(argv: Sequence[str] | None = None) -> int:
    """Show both arrays at work."""
    argparse.ArgumentParser(description="Dynamic array demo.").parse_args(argv)

    arr = IntArray(3)
    arr[0], arr[1], arr[2] = 1, 2, 3
    print(f"Initial Array: {_joined(arr)}")
    arr.resize(5)
    arr.append(4)
    arr.append(5)
    print(f"Array after resizing and pushing: {_joined(arr)}")
    arr.clear()
    print(f"Size after clear: {len(arr)}")

    container = DynamicArray()
    container.reserve(4)
    for value in (25, 30, 10, 39):
        container.append(value)
    print(f"Current Size: {len(container)}")
    print(f"Current Capacity: {container.capacity}")

    container.append(55)
    print("After adding 55:")
    print(f"Current Size: {len(container)}")
    print(f"Current Capacity: {container.capacity}")

    container.pop()
    print("After popping back:")
    print(f"Current Size: {len(container)}")
    print(f"Current Capacity: {container.capacity}")
    return 0


if __name__ == "__main__":
    sys.exit(main())