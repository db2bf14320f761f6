"""Grove positioning: mix an encrypted list and read the grove coordinates."""

from __future__ import annotations

from collections.abc import Sequence

from yuletide.runner import run

DECRYPTION_KEY = 811589153
OFFSETS = (1000, 2000, 3000)


def parse_numbers(content: str) -> list[int]:
    """Parse one integer per line, skipping lines that are not integers."""
    numbers = []
    for line in content.splitlines():
        try:
            numbers.append(int(line))
        except ValueError:
            continue
    return numbers


def mix(numbers: Sequence[int], rounds: int = 1) -> list[int]:
    """Move each number (in original order) forward or back by its own value."""
    if not numbers:
        return []
    if len(numbers) == 1:
        raise ValueError("cannot mix a single number")
    cycle = len(numbers) - 1
    order = list(range(len(numbers)))
    for _ in range(rounds):
        for identity, value in enumerate(numbers):
            position = order.index(identity)
            order.pop(position)
            order.insert((position + value) % cycle, identity)
    return [numbers[identity] for identity in order]


def grove_coordinates(numbers: Sequence[int]) -> tuple[int, int, int]:
    """The values 1000, 2000 and 3000 places after the zero, wrapping around."""
    try:
        zero = list(numbers).index(0)
    except ValueError:
        raise ValueError("the list holds no zero") from None
    first, second, third = (numbers[(zero + offset) % len(numbers)] for offset in OFFSETS)
    return first, second, third


def part1(content: str) -> tuple[int, int, int]:
    return grove_coordinates(mix(parse_numbers(content), 1))


def part2(content: str) -> tuple[int, int, int]:
    keyed = [n * DECRYPTION_KEY for n in parse_numbers(content)]
    return grove_coordinates(mix(keyed, 10))


def _describe(coords: tuple[int, int, int]) -> str:
    n1, n2, n3 = coords
    return f"n1 = {n1}, n2 = {n2}, n3 = {n3}, sum = {n1 + n2 + n3}"


def _report(content: str) -> str:
    return f"{_describe(part1(content))}\n{_describe(part2(content))}"


def main(argv=None) -> int:
    return run(_report, argv, "input1.txt")