"""Calorie counting: total each elf's food and find the best-stocked elves."""

from __future__ import annotations

import heapq
import sys
from collections.abc import Iterable


def elf_totals(lines: Iterable[str]) -> list[int]:
    """Sum blank-line separated groups; unparseable lines count as zero."""
    totals = []
    current = 0
    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line:
            totals.append(current)
            current = 0
            continue
        try:
            current += int(line)
        except ValueError:
            pass
    totals.append(current)
    return totals


def richest_elf(totals: Iterable[int]) -> tuple[int, int]:
    """Return (1-based elf number, calories) of the first elf carrying the most."""
    best = (0, -1)
    for elf, calories in enumerate(totals, 1):
        if best[1] < calories:
            best = (elf, calories)
    return best


def top_three(totals: Iterable[int]) -> tuple[int, int, int]:
    """The three largest totals in descending order, padded with zeros."""
    first, second, third = heapq.nlargest(3, [*totals, 0, 0, 0])
    return first, second, third


def main(argv=None) -> int:
    """Read calorie lists from standard input and report the totals."""
    totals = elf_totals(sys.stdin)
    for elf, calories in enumerate(totals, 1):
        print(f"Elf {elf} is carrying {calories} calories.")
    elf, calories = richest_elf(totals)
    print(f"---\nMaximum\n---\nElf {elf} is carrying {calories} calories.")
    high = top_three(totals)
    print(
        f"---\nThe top three elves are carrying {high[0]}, {high[1]} and {high[2]} "
        f"calories, summing to {sum(high)}."
    )
    return 0