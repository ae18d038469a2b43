import io
import re

import pytest

from coursekit.vector2d import Vector2d, main


def test_addition_and_subtraction_round_trip():
    a = Vector2d(1.5, -2.0)
    b = Vector2d(0.25, 4.0)
    assert (a + b) - b == a
    assert a + b == b + a


def test_sum_components():
    total = Vector2d(1.5, -2.0) + Vector2d(0.5, 2.0)
    assert total[0] == 2.0
    assert total[1] == 0.0


def test_length():
    assert Vector2d(3, 4)() == 5.0


def test_str_format():
    assert str(Vector2d(1.2, 5.6)) == "{1.2; 5.6}"
    assert str(Vector2d()) == "{0; 0}"


def test_index_access():
    v = Vector2d(1.5, 2.5)
    assert v[0] == 1.5
    assert v[1] == 2.5
    v[0] = 7
    v[1] = -3
    assert v == Vector2d(7, -3)


@pytest.mark.parametrize("index", [2, -1])
def test_bad_index_raises(index):
    v = Vector2d(1.0, 2.0)
    with pytest.raises(IndexError):
        v[index]
    with pytest.raises(IndexError):
        v[index] = 9.0
    assert (v[0], v[1]) == (1.0, 2.0)


def test_parse():
    assert Vector2d.parse("1.5 -2") == Vector2d(1.5, -2)
    assert Vector2d.parse("  3\t4\n") == Vector2d(3, 4)


@pytest.mark.parametrize("text", ["1", "a b", "1 2 3", ""])
def test_parse_rejects_bad_text(text):
    with pytest.raises(ValueError):
        Vector2d.parse(text)


def test_live_count_tracks_instances():
    before = Vector2d.live_count()
    v = Vector2d(1, 1)
    assert Vector2d.live_count() == before + 1
    w = v + v
    assert Vector2d.live_count() == before + 2
    del w
    del v
    assert Vector2d.live_count() == before


def test_main_reports_counts(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 1\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    initial = int(re.search(r"Initial count: (-?\d+)", out).group(1))
    final = int(re.search(r"Final count: (-?\d+)", out).group(1))
    assert final == initial + 1
    assert "Vector: {1.2; 5.6}" in out


def test_main_rejects_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("oops\n"))
    assert main([]) == 1
    assert "Invalid vector." in capsys.readouterr().out