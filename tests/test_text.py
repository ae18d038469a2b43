import pytest

from coursekit.text import (
    LengthComparator,
    Node,
    compare_by_length,
    count_divisible_by,
    has_cycle,
    is_balanced,
    most_occurred_words,
    sort_by_length,
    unique_words_count,
)

FRUITS = ["apple", "banana", "orange", "grape", "kiwi"]


def test_compare_by_length():
    assert compare_by_length("kiwi", "apple") is True
    assert compare_by_length("apple", "kiwi") is False
    assert compare_by_length("apple", "grape") is False


def test_length_comparator_agrees_with_function():
    comparator = LengthComparator()
    for a in FRUITS:
        for b in FRUITS:
            assert comparator(a, b) == compare_by_length(a, b)


def test_sort_by_length():
    result = sort_by_length(FRUITS)
    assert result[0] == "kiwi"
    assert sorted(result) == sorted(FRUITS)
    assert all(len(a) <= len(b) for a, b in zip(result, result[1:]))


def test_count_divisible_by_source_example():
    assert count_divisible_by([2, 4, 6, 8, 10, 12, 14, 16, 18, 20], 4) == 5


def test_count_divisible_by_one_counts_everything():
    values = [3, -7, 0, 11]
    assert count_divisible_by(values, 1) == len(values)
    assert count_divisible_by([], 3) == 0


def test_count_divisible_by_zero():
    with pytest.raises(ZeroDivisionError):
        count_divisible_by([1, 2], 0)


def test_unique_words_count():
    assert unique_words_count("the cat and the hat") == 4
    assert unique_words_count("   ") == 0


def test_most_occurred_words_ties_in_order():
    assert most_occurred_words("x y x y z") == ["x", "y"]


def test_most_occurred_words_single_winner_and_empty():
    assert most_occurred_words("a b a") == ["a"]
    assert most_occurred_words("") == []


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("{[()]}", True),
        ("f(a[1]) {x}", True),
        ("", True),
        ("([)]", False),
        ("((", False),
        ("}", False),
    ],
)
def test_is_balanced(expression, expected):
    assert is_balanced(expression) is expected


def test_has_cycle_false_for_source_list():
    head = Node(1)
    head.next = Node(2)
    assert has_cycle(head) is False
    assert has_cycle(None) is False


def test_has_cycle_true():
    head = Node(1)
    head.next = Node(2)
    head.next.next = Node(3, head)
    assert has_cycle(head) is True


def test_has_cycle_self_loop():
    node = Node(1)
    node.next = node
    assert has_cycle(node) is True