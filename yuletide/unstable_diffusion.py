"""Unstable diffusion: elves spread out over the ground in rounds."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator
from itertools import count

from yuletide.runner import run

Point = tuple[int, int]

_N: Point = (-1, 0)
_NE: Point = (-1, 1)
_E: Point = (0, 1)
_SE: Point = (1, 1)
_S: Point = (1, 0)
_SW: Point = (1, -1)
_W: Point = (0, -1)
_NW: Point = (-1, -1)

_AROUND = (_N, _NE, _E, _SE, _S, _SW, _W, _NW)
_CHECKS = (
    (_N, (_N, _NE, _NW)),
    (_S, (_S, _SE, _SW)),
    (_W, (_W, _NW, _SW)),
    (_E, (_E, _NE, _SE)),
)


def parse_elves(content: str) -> set[Point]:
    """Positions (row, column) of every ``#`` in the grid."""
    return {
        (i, j)
        for i, row in enumerate(content.rstrip().splitlines())
        for j, ch in enumerate(row)
        if ch == "#"
    }


def _shift(pos: Point, delta: Point) -> Point:
    return pos[0] + delta[0], pos[1] + delta[1]


def _any_elf(elves: frozenset[Point], pos: Point, deltas: Iterable[Point]) -> bool:
    return any(_shift(pos, delta) in elves for delta in deltas)


def simulate(elves: Iterable[Point]) -> Iterator[tuple[int, frozenset[Point], bool]]:
    """Yield (round number, elf positions, finished) after each round.

    A round is finished when no elf proposed a move; the generator stops
    after that round.
    """
    current = frozenset(elves)
    for number in count(1):
        finished = True
        moves: dict[Point, Point] = {}
        for pos in current:
            target = pos
            if _any_elf(current, pos, _AROUND):
                for k in range(len(_CHECKS)):
                    step, look = _CHECKS[(number - 1 + k) % len(_CHECKS)]
                    if not _any_elf(current, pos, look):
                        target = _shift(pos, step)
                        finished = False
                        break
            moves[pos] = target
        claims = Counter(moves.values())
        current = frozenset(
            target if claims[target] == 1 else pos for pos, target in moves.items()
        )
        yield number, current, finished
        if finished:
            return


def _bounds(elves: Iterable[Point]) -> tuple[int, int, int, int]:
    points = list(elves)
    if not points:
        raise ValueError("there are no elves")
    rows = [i for i, _ in points]
    cols = [j for _, j in points]
    return min(rows), min(cols), max(rows), max(cols)


def empty_ground(elves: Iterable[Point]) -> int:
    """Empty tiles in the smallest rectangle containing every elf."""
    points = set(elves)
    min_i, min_j, max_i, max_j = _bounds(points)
    return (max_i + 1 - min_i) * (max_j + 1 - min_j) - len(points)


def render(elves: Iterable[Point]) -> str:
    """Draw the elves with a one-tile margin around them."""
    points = set(elves)
    min_i, min_j, max_i, max_j = _bounds(points)
    return "\n".join(
        "".join("#" if (i, j) in points else "." for j in range(min_j - 1, max_j + 2))
        for i in range(min_i - 1, max_i + 2)
    )


def part1(content: str) -> int:
    """Empty ground after round 10 (or after the final round, if earlier)."""
    state: frozenset[Point] = frozenset()
    for number, state, _ in simulate(parse_elves(content)):
        if number == 10:
            break
    return empty_ground(state)


def part2(content: str) -> int:
    """The first round in which no elf moves."""
    number = 0
    for number, _, finished in simulate(parse_elves(content)):
        if finished:
            break
    return number


def _report(content: str) -> str:
    lines = []
    for number, state, finished in simulate(parse_elves(content)):
        if number == 10 or finished:
            lines.append("---")
            lines.append(render(state))
            lines.append(f"after round {number}, space = {empty_ground(state)}")
    return "\n".join(lines)


def main(argv=None) -> int:
    return run(_report, argv, "input1.txt")