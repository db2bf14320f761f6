"""Parabolic reflector dish: tilt the platform and measure the load on its north beams."""

from __future__ import annotations

from collections.abc import Sequence

from yuletide.runner import run

Platform = tuple[str, ...]

TARGET_CYCLES = 1_000_000_000
_SYMBOLS = set(".#O")


def parse_platform(content: str) -> Platform:
    """Parse the platform as a tuple of rows."""
    rows = tuple(content.strip().splitlines())
    if not rows:
        raise ValueError("the platform is empty")
    width = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(f"row {i} of the platform has a different width")
        unknown = set(row) - _SYMBOLS
        if unknown:
            raise ValueError(f"unknown symbols {sorted(unknown)} on row {i}")
    return rows


def _settle(segment: str) -> str:
    rocks = segment.count("O")
    return "O" * rocks + "." * (len(segment) - rocks)


def slide_north(platform: Sequence[str]) -> Platform:
    """Roll every round rock as far north as it can go."""
    columns = ("".join(col) for col in zip(*platform))
    tilted = ["#".join(_settle(seg) for seg in col.split("#")) for col in columns]
    return tuple("".join(row) for row in zip(*tilted))


def rotate(platform: Sequence[str]) -> Platform:
    """Rotate the platform a quarter turn clockwise."""
    return tuple("".join(col) for col in zip(*reversed(platform)))


def spin_cycle(platform: Sequence[str]) -> Platform:
    """Tilt north, west, south and east in turn."""
    result = tuple(platform)
    for _ in range(4):
        result = rotate(slide_north(result))
    return result


def north_load(platform: Sequence[str]) -> int:
    """Total load: each round rock weighs its distance from the south edge."""
    height = len(platform)
    return sum(row.count("O") * (height - i) for i, row in enumerate(platform))


def part1(content: str) -> int:
    """Load after tilting north once."""
    return north_load(slide_north(parse_platform(content)))


def part2(content: str, cycles: int = TARGET_CYCLES) -> int:
    """Load after ``cycles`` spin cycles, skipping ahead once the states repeat."""
    platform = parse_platform(content)
    history = [platform]
    seen = {platform: 0}
    while len(history) - 1 < cycles:
        platform = spin_cycle(platform)
        count = len(history)
        if platform in seen:
            start = seen[platform]
            period = count - start
            platform = history[start + (cycles - start) % period]
            break
        seen[platform] = count
        history.append(platform)
    return north_load(platform)


def _report(content: str) -> str:
    return f"part 1: sum = {part1(content)}\npart 2: sum = {part2(content)}"


def main(argv=None) -> int:
    return run(_report, argv, "input1.txt")