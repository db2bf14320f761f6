"""Cosmic expansion: sum the distances between galaxies in an expanding universe."""

from __future__ import annotations

from collections.abc import Collection, Iterable

from yuletide.runner import run

Point = tuple[int, int]

PART1_GROWTH = 1
PART2_GROWTH = 999_999


def parse_galaxies(content: str) -> list[Point]:
    """Positions (row, column) of every ``#``, ignoring blank lines."""
    rows = (line for line in content.splitlines() if line)
    return [
        (i, j)
        for i, line in enumerate(rows)
        for j, ch in enumerate(line)
        if ch == "#"
    ]


def expansion(occupied: Collection[int], length: int, growth: int = PART1_GROWTH) -> list[int]:
    """Expanded position of each index below ``length``.

    Every index not in ``occupied`` pushes the indexes after it ``growth``
    further along.
    """
    occupied = set(occupied)
    positions = []
    shift = 0
    for index in range(length):
        positions.append(index + shift)
        if index not in occupied:
            shift += growth
    return positions


def _pairwise_spread(values: Iterable[int]) -> int:
    """Sum of absolute differences over all unordered pairs."""
    ordered = sorted(values)
    count = len(ordered)
    return sum(value * (2 * rank - count + 1) for rank, value in enumerate(ordered))


def distance_sum(content: str, growth: int = PART1_GROWTH) -> int:
    """Sum of Manhattan distances between every pair of galaxies after expansion."""
    galaxies = parse_galaxies(content)
    if not galaxies:
        raise ValueError("there are no galaxies")
    rows = {i for i, _ in galaxies}
    cols = {j for _, j in galaxies}
    row_map = expansion(rows, max(rows) + 1, growth)
    col_map = expansion(cols, max(cols) + 1, growth)
    return _pairwise_spread(row_map[i] for i, _ in galaxies) + _pairwise_spread(
        col_map[j] for _, j in galaxies
    )


def _report(content: str) -> str:
    return (
        f"part 1: sum = {distance_sum(content, PART1_GROWTH)}\n"
        f"part 2: sum = {distance_sum(content, PART2_GROWTH)}"
    )


def main(argv=None) -> int:
    return run(_report, argv, "input1.txt")