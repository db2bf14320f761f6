"""Hot springs: count the arrangements of broken springs that fit the records."""

from __future__ import annotations

from collections.abc import Sequence

from yuletide.runner import run

UNFOLD = 5
_SYMBOLS = set(".#?")


def parse_record(line: str) -> tuple[str, tuple[int, ...]]:
    """Parse ``???.### 1,1,3`` into the springs and the broken-group sizes."""
    springs, sep, groups = line.partition(" ")
    if not sep:
        raise ValueError(f"malformed record: {line!r}")
    try:
        sizes = tuple(int(token) for token in groups.split(","))
    except ValueError:
        raise ValueError(f"bad group sizes in {line!r}") from None
    return springs, sizes


def count_arrangements(springs: str, groups: Sequence[int]) -> int:
    """Number of ways to fill in the ``?`` springs consistently with ``groups``."""
    unknown = set(springs) - _SYMBOLS
    if unknown:
        raise ValueError(f"unknown spring symbols {sorted(unknown)} in {springs!r}")
    cells = springs + "."
    sizes = tuple(groups)
    n, m = len(cells), len(sizes)

    # ways[s][g]: arrangements of cells[s:] using sizes[g:]
    ways = [[0] * (m + 1) for _ in range(n + 1)]
    ways[n][m] = 1
    tail_ok = 1
    for s in range(n - 1, -1, -1):
        if cells[s] == "#":
            tail_ok = 0
        ways[s][m] = tail_ok

    for s in range(n - 1, -1, -1):
        ch = cells[s]
        for g in range(m - 1, -1, -1):
            total = 0
            size = sizes[g]
            if (
                ch in "#?"
                and s + size < n
                and "." not in cells[s + 1 : s + size]
                and cells[s + size] != "#"
            ):
                total += ways[s + size + 1][g + 1]
            if ch in ".?":
                total += ways[s + 1][g]
            ways[s][g] = total
    return ways[0][0]


def _records(content: str) -> list[tuple[str, tuple[int, ...]]]:
    return [parse_record(line) for line in content.splitlines() if line]


def _unfold(springs: str, groups: tuple[int, ...]) -> tuple[str, tuple[int, ...]]:
    return "?".join([springs] * UNFOLD), groups * UNFOLD


def part1(content: str) -> int:
    """Sum of arrangement counts over every record."""
    return sum(count_arrangements(springs, groups) for springs, groups in _records(content))


def part2(content: str) -> int:
    """Sum of arrangement counts after unfolding every record five times."""
    return sum(
        count_arrangements(*_unfold(springs, groups)) for springs, groups in _records(content)
    )


def _report(content: str) -> str:
    lines = []
    for springs, groups in _records(content):
        lines.append(
            f"springs={springs!r}, groups={list(groups)} => "
            f"arrangements={count_arrangements(springs, groups)}"
        )
    lines.append(f"sum = {part1(content)}")
    lines.append(f"unfolded sum = {part2(content)}")
    return "\n".join(lines)


def main(argv=None) -> int:
    return run(_report, argv, "input1.txt")