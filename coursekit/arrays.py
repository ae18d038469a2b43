"""Small algorithms over flat sequences and rectangular grids."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum
from itertools import pairwise
from typing import Any, TypeVar

T = TypeVar("T")


class Order(Enum):
    """Direction a sequence is expected to be sorted in."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


class GridAxis(Enum):
    """Axis along which a grid is sorted."""

    BY_ROWS = "rows"
    BY_COLUMNS = "columns"


def swap(a: T, b: T) -> tuple[T, T]:
    """Return the two values in exchanged order."""
    return b, a


def calculate_sum(values: Sequence[float]) -> float:
    """Sum the values; an empty sequence is an error."""
    if not values:
        raise ValueError("cannot sum an empty sequence")
    return sum(values, 0.0)


def contains(values: Iterable[Any], elem: Any) -> bool:
    """Tell whether elem occurs in values."""
    return any(value == elem for value in values)


def grid_contains(grid: Iterable[Iterable[Any]], value: Any) -> bool:
    """Tell whether value occurs anywhere in the grid."""
    return any(contains(row, value) for row in grid)


def is_sorted(values: Sequence[Any], direction: Order) -> bool:
    """Tell whether values are ordered in the given direction."""
    if direction is Order.ASCENDING:
        return all(left <= right for left, right in pairwise(values))
    if direction is Order.DESCENDING:
        return all(left >= right for left, right in pairwise(values))
    raise ValueError(f"invalid sorting direction: {direction!r}")


def traverse_columns_reversed(grid: Sequence[Sequence[T]]) -> list[T]:
    """Walk columns from the last to the first, each from top to bottom."""
    width = len(grid[0]) if grid else 0
    return [row[col] for col in reversed(range(width)) for row in grid]


def traverse_snake(grid: Sequence[Sequence[T]]) -> list[T]:
    """Walk rows from the bottom up; even-indexed rows are read right to left."""
    result: list[T] = []
    for index in reversed(range(len(grid))):
        row = grid[index]
        result.extend(reversed(row) if index % 2 == 0 else row)
    return result


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Return the values in ascending order, sorted by bubble sort."""
    items = list(values)
    size = len(items)
    for i in range(size - 1):
        for j in range(size - i - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def partition(values: list[Any], start: int, end: int) -> int:
    """Partition values[start:end+1] around its first element, in place.

    Returns the final index of the pivot.
    """
    pivot = values[start]
    count = sum(1 for value in values[start + 1 : end + 1] if value <= pivot)
    pivot_index = start + count
    values[pivot_index], values[start] = values[start], values[pivot_index]

    i, j = start, end
    while i < pivot_index and j > pivot_index:
        while values[i] <= pivot:
            i += 1
        while values[j] > pivot:
            j -= 1
        if i < pivot_index and j > pivot_index:
            values[i], values[j] = values[j], values[i]
            i += 1
            j -= 1
    return pivot_index


def quick_sort(values: list[Any], start: int = 0, end: int | None = None) -> None:
    """Sort values[start:end+1] in place; end defaults to the last index."""
    if end is None:
        end = len(values) - 1
    if start >= end:
        return
    pivot = partition(values, start, end)
    quick_sort(values, start, pivot - 1)
    quick_sort(values, pivot + 1, end)


def sort_grid(grid: Sequence[Sequence[T]], axis: GridAxis) -> list[list[T]]:
    """Return a copy of the grid with each row or each column sorted."""
    rows = [list(row) for row in grid]
    if axis is GridAxis.BY_ROWS:
        for row in rows:
            quick_sort(row)
        return rows
    if axis is GridAxis.BY_COLUMNS:
        columns = [list(column) for column in zip(*rows)]
        for column in columns:
            quick_sort(column)
        return [list(row) for row in zip(*columns)]
    raise ValueError(f"invalid grid axis: {axis!r}")


def format_grid(grid: Iterable[Iterable[Any]]) -> str:
    """Render the grid one row per line, values separated by spaces."""
    return "\n".join(" ".join(str(value) for value in row) for row in grid)