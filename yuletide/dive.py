"""Dive: follow submarine steering commands."""

from __future__ import annotations

from yuletide.runner import run


def parse_commands(content: str) -> list[tuple[str, int]]:
    """Parse lines of ``<direction> <amount>``."""
    commands = []
    for line in content.rstrip().splitlines():
        direction, sep, amount = line.partition(" ")
        if not sep:
            raise ValueError(f"malformed command: {line!r}")
        commands.append((direction, int(amount)))
    return commands


def part1(content: str) -> tuple[int, int]:
    """Return (horizontal position, depth) with commands moving directly."""
    x = depth = 0
    for direction, amount in parse_commands(content):
        if direction == "forward":
            x += amount
        elif direction == "up":
            depth -= amount
        else:
            depth += amount
    return x, depth


def part2(content: str) -> tuple[int, int]:
    """Return (horizontal position, depth) with up/down steering the aim."""
    aim = x = depth = 0
    for direction, amount in parse_commands(content):
        if direction == "up":
            aim -= amount
        elif direction == "down":
            aim += amount
        else:
            x += amount
            depth += aim * amount
    return x, depth


def _describe(position: tuple[int, int]) -> str:
    x, depth = position
    return f"x=={x}, depth=={depth}, product={x * depth}"


def _report(content: str) -> str:
    return f"{_describe(part1(content))}\n{_describe(part2(content))}"


def main(argv=None) -> int:
    return run(_report, argv, "../inputs/day02_input.txt")