"""Word, bracket and linked-list utilities."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset(_PAIRS.values())


def compare_by_length(first: str, second: str) -> bool:
    """True when first is strictly shorter than second."""
    return len(first) < len(second)


class LengthComparator:
    """Callable that orders strings by length."""

    def __call__(self, first: str, second: str) -> bool:
        return compare_by_length(first, second)


def sort_by_length(words: Iterable[str]) -> list[str]:
    """Return the words ordered from shortest to longest."""
    return sorted(words, key=len)


def count_divisible_by(values: Iterable[int], number: int) -> int:
    """Count values that number divides evenly."""
    return sum(1 for value in values if value % number == 0)


def unique_words_count(line: str) -> int:
    """Number of distinct whitespace-separated words."""
    return len(set(line.split()))


def most_occurred_words(line: str) -> list[str]:
    """All words sharing the highest count, in order of first appearance."""
    counts = Counter(line.split())
    if not counts:
        return []
    highest = max(counts.values())
    return [word for word, count in counts.items() if count == highest]


def is_balanced(expression: str) -> bool:
    """Tell whether (), [] and {} are properly nested; other text is ignored."""
    stack: list[str] = []
    for ch in expression:
        if ch in _OPENING:
            stack.append(ch)
        elif ch in _PAIRS:
            if not stack or stack[-1] != _PAIRS[ch]:
                return False
            stack.pop()
    return not stack


@dataclass(eq=False)
class Node:
    """A singly linked list node."""

    data: int
    next: Node | None = None


def has_cycle(head: Node | None) -> bool:
    """Detect a cycle with the slow and fast pointer walk."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False