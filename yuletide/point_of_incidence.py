"""Point of incidence: find the lines of reflection in patterns of ash and rock."""

from __future__ import annotations

from collections.abc import Sequence

from yuletide.runner import run


def parse_pattern(text: str) -> tuple[list[int], list[int]]:
    """Encode each row and each column of a pattern as a bitmask of its rocks.

    Bit ``j`` of row ``i`` and bit ``i`` of column ``j`` are set when the
    tile at (i, j) is ``#``.
    """
    lines = text.strip().splitlines()
    if not lines:
        raise ValueError("the pattern is empty")
    width = len(lines[0])
    rows: list[int] = []
    cols = [0] * width
    for i, line in enumerate(lines):
        if len(line) != width:
            raise ValueError(f"row {i} of the pattern has a different width")
        value = 0
        for j, ch in enumerate(line):
            if ch == "#":
                value |= 1 << j
                cols[j] |= 1 << i
        rows.append(value)
    return rows, cols


def find_reflection(numbers: Sequence[int], smudged: bool = False) -> int:
    """Count of lines before the first mirror line, or 0 if there is none.

    With ``smudged``, the reflection must be off by exactly one tile.
    """
    wanted = 1 if smudged else 0
    for split in range(1, len(numbers)):
        differences = sum(
            (a ^ b).bit_count()
            for a, b in zip(reversed(numbers[:split]), numbers[split:])
        )
        if differences == wanted:
            return split
    return 0


def summarize(content: str, smudged: bool = False) -> int:
    """Sum of 100 times each row reflection plus each column reflection."""
    total = 0
    for block in content.split("\n\n"):
        if not block.strip():
            continue
        rows, cols = parse_pattern(block)
        total += 100 * find_reflection(rows, smudged) + find_reflection(cols, smudged)
    return total


def _report(content: str) -> str:
    return (
        f"part 1: sum = {summarize(content, False)}\n"
        f"part 2: sum = {summarize(content, True)}"
    )


def main(argv=None) -> int:
    return run(_report, argv, "input1.txt")