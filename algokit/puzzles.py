"""Tower of Hanoi moves and a text star pyramid."""

from __future__ import annotations

from collections.abc import Iterator


def hanoi_moves(
    n: int, source: str = "p", target: str = "q", spare: str = "r"
) -> Iterator[tuple[int, str, str]]:
    """Yield ``(disk, from_pole, to_pole)`` moves that shift ``n`` disks to ``target``."""
    if n < 0:
        raise ValueError("number of disks must not be negative")

    def solve(count: int, start: str, goal: str, aux: str) -> Iterator[tuple[int, str, str]]:
        if count == 0:
            return
        yield from solve(count - 1, start, aux, goal)
        yield count, start, goal
        yield from solve(count - 1, aux, goal, start)

    return solve(n, source, target, spare)


def pyramid(rows: int) -> list[str]:
    """Return the lines of a centred pyramid of ``* `` cells with ``rows`` rows."""
    return ["  " * (rows - i) + "* " * (2 * i - 1) for i in range(1, rows + 1)]