"""Blizzard basin: cross a valley of wrapping blizzards as quickly as possible."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from yuletide.runner import run

Point = tuple[int, int]

_ARROWS = {"^": (-1, 0), ">": (0, 1), "v": (1, 0), "<": (0, -1)}
_MOVES = ((0, 0), (-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass
class Blizzard:
    """A blizzard's position and the direction it travels."""

    i: int
    j: int
    delta_i: int
    delta_j: int


class Basin:
    """A walled valley with its blizzards; the entrance and exit are gaps in the walls."""

    def __init__(self, width: int, height: int, blizzards: Iterable[Blizzard]):
        if width < 3 or height < 3:
            raise ValueError("the basin must be at least 3 by 3")
        self.width = width
        self.height = height
        self.blizzards = list(blizzards)
        for b in self.blizzards:
            if not (0 < b.i < height - 1 and 0 < b.j < width - 1):
                raise ValueError(f"blizzard at ({b.i}, {b.j}) is not inside the basin")
        self.time = 0
        self._occupied: Counter[Point] = Counter()
        self._refresh()

    @property
    def start(self) -> Point:
        return 0, 1

    @property
    def end(self) -> Point:
        return self.height - 1, self.width - 2

    def _refresh(self) -> None:
        self._occupied = Counter((b.i, b.j) for b in self.blizzards)

    def step(self) -> None:
        """Move every blizzard one tile, wrapping at the walls."""
        for b in self.blizzards:
            b.i += b.delta_i
            if b.i == 0:
                b.i = self.height - 2
            if b.i == self.height - 1:
                b.i = 1
            b.j += b.delta_j
            if b.j == 0:
                b.j = self.width - 2
            if b.j == self.width - 1:
                b.j = 1
        self.time += 1
        self._refresh()

    def is_open(self, i: int, j: int) -> bool:
        """Whether the tile is neither wall nor blizzard."""
        inside = 0 < i < self.height - 1 and 0 < j < self.width - 1
        if not inside and (i, j) not in (self.start, self.end):
            return False
        return (i, j) not in self._occupied


def parse_basin(content: str) -> Basin:
    """Parse the valley map; its width is that of the first line."""
    lines = content.rstrip().splitlines()
    if len(lines) < 3:
        raise ValueError("the basin needs at least three rows")
    blizzards = [
        Blizzard(i, j, *_ARROWS[ch])
        for i, row in enumerate(lines)
        for j, ch in enumerate(row)
        if ch in _ARROWS
    ]
    return Basin(len(lines[0]), len(lines), blizzards)


def travel(basin: Basin, start: Point, end: Point) -> int:
    """Minutes needed to get from ``start`` to ``end``, advancing the basin as it goes."""
    period = math.lcm(basin.width - 2, basin.height - 2)
    positions = {start}
    seen: set[tuple[int, frozenset[Point]]] = set()
    minutes = 0
    while True:
        basin.step()
        minutes += 1
        positions = {
            (i + di, j + dj)
            for i, j in positions
            for di, dj in _MOVES
            if basin.is_open(i + di, j + dj)
        }
        if end in positions:
            return minutes
        key = (basin.time % period, frozenset(positions))
        if not positions or key in seen:
            raise ValueError(f"{end} cannot be reached from {start}")
        seen.add(key)


def part1(content: str) -> int:
    """Minutes to cross from the entrance to the exit."""
    basin = parse_basin(content)
    return travel(basin, basin.start, basin.end)


def part2(content: str) -> int:
    """Minutes to cross, go back for the snacks, and cross again."""
    basin = parse_basin(content)
    legs = ((basin.start, basin.end), (basin.end, basin.start), (basin.start, basin.end))
    return sum(travel(basin, start, end) for start, end in legs)


def _report(content: str) -> str:
    basin = parse_basin(content)
    lines = []
    total = 0
    for start, end in ((basin.start, basin.end), (basin.end, basin.start), (basin.start, basin.end)):
        minutes = travel(basin, start, end)
        total += minutes
        lines.append(f"From {start} to {end}: {minutes} minutes (minute {total})")
    return "\n".join(lines)


def main(argv=None) -> int:
    return run(_report, argv, "input1.txt")