"""Sonar sweep: count how often the sea-floor depth increases."""

from __future__ import annotations

from collections.abc import Iterable

from yuletide.runner import run


def parse_depths(content: str) -> list[int]:
    """Parse one depth per line."""
    return [int(line) for line in content.rstrip().splitlines()]


def count_increases(depths: Iterable[int], window: int = 1) -> int:
    """Count sliding windows of ``window`` readings whose sum exceeds the previous one's."""
    values = list(depths)
    # Consecutive windows share all but one reading, so comparing the
    # readings ``window`` apart is the same as comparing the sums.
    return sum(later > earlier for earlier, later in zip(values, values[window:]))


def part1(content: str) -> int:
    return count_increases(parse_depths(content), 1)


def part2(content: str) -> int:
    return count_increases(parse_depths(content), 3)


def _report(content: str) -> str:
    return (
        f"#depth increases == {part1(content)}\n"
        f"#depth increases (3-window) == {part2(content)}"
    )


def main(argv=None) -> int:
    return run(_report, argv, "input.txt")