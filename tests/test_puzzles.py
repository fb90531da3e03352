import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.puzzles import hanoi_moves, pyramid


def _play(n, moves, source="p", target="q", spare="r"):
    poles = {source: list(range(n, 0, -1)), target: [], spare: []}
    for disk, start, goal in moves:
        assert poles[start] and poles[start][-1] == disk
        assert not poles[goal] or poles[goal][-1] > disk
        poles[goal].append(poles[start].pop())
    return poles


@given(st.integers(0, 8))
def test_hanoi_moves_are_legal_and_complete(n):
    poles = _play(n, hanoi_moves(n))
    assert poles["q"] == list(range(n, 0, -1))
    assert poles["p"] == [] and poles["r"] == []


@given(st.integers(1, 8))
def test_largest_disk_moves_once_in_the_middle(n):
    moves = list(hanoi_moves(n))
    largest = [index for index, move in enumerate(moves) if move[0] == n]
    assert len(largest) == 1
    assert largest[0] == len(moves) // 2
    assert moves[largest[0]] == (n, "p", "q")


def test_source_example_first_move():
    moves = list(hanoi_moves(3, "p", "q", "r"))
    assert moves[0] == (1, "p", "q")


def test_hanoi_custom_poles():
    poles = _play(4, hanoi_moves(4, "a", "c", "b"), "a", "c", "b")
    assert poles["c"] == [4, 3, 2, 1]


def test_hanoi_zero_and_negative():
    assert list(hanoi_moves(0)) == []
    with pytest.raises(ValueError):
        hanoi_moves(-1)


@given(st.integers(1, 20))
def test_pyramid_shape(rows):
    lines = pyramid(rows)
    assert len(lines) == rows
    stars = [line.count("*") for line in lines]
    assert stars[0] == 1
    assert all(b - a == 2 for a, b in zip(stars, stars[1:]))
    indents = [len(line) - len(line.lstrip(" ")) for line in lines]
    assert indents[-1] == 0
    assert all(a - b == 2 for a, b in zip(indents, indents[1:]))
    assert all(set(line.strip()) <= {"*", " "} for line in lines)


def test_pyramid_single_row():
    assert pyramid(1) == ["* "]


def test_pyramid_no_rows():
    assert pyramid(0) == []
    assert pyramid(-3) == []