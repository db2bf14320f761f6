"""Giant squid: play bingo and find the first and last winning boards."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass, field

from yuletide.runner import run

BOARD_SIZE = 5


@dataclass
class Board:
    """A bingo board tracking its unmarked total and marks per row and column."""

    coords: dict[int, tuple[int, int]]
    unmarked_sum: int
    row_counts: Counter = field(default_factory=Counter)
    col_counts: Counter = field(default_factory=Counter)
    has_won: bool = False

    def mark(self, number: int) -> bool:
        """Mark ``number``; return True if this completes a row or column."""
        position = self.coords.get(number)
        if position is None:
            return False
        i, j = position
        self.row_counts[i] += 1
        self.col_counts[j] += 1
        self.unmarked_sum -= number
        if self.row_counts[i] == BOARD_SIZE or self.col_counts[j] == BOARD_SIZE:
            self.has_won = True
            return True
        return False


def _parse_board(text: str) -> Board:
    coords: dict[int, tuple[int, int]] = {}
    total = 0
    for i, row in enumerate(text.split("\n")):
        for j, token in enumerate(row.split()):
            value = int(token)
            total += value
            coords[value] = (i, j)
    return Board(coords, total)


def parse_bingo(content: str) -> tuple[list[int], list[Board]]:
    """Parse the drawn numbers and the boards."""
    head, sep, rest = content.rstrip().partition("\n\n")
    if not sep:
        raise ValueError("expected drawn numbers followed by boards")
    numbers = [int(token) for token in head.split(",")]
    return numbers, [_parse_board(text) for text in rest.split("\n\n")]


def winning_scores(content: str) -> Iterator[tuple[int, int, int]]:
    """Yield (board number, unmarked sum, score) for each board as it wins."""
    numbers, boards = parse_bingo(content)
    for number in numbers:
        for index, board in enumerate(boards, 1):
            if not board.has_won and board.mark(number):
                yield index, board.unmarked_sum, number * board.unmarked_sum


def part1(content: str) -> tuple[int, int, int] | None:
    """The first board to win, or None if none does."""
    return next(winning_scores(content), None)


def part2(content: str) -> tuple[int, int, int] | None:
    """The last board to win, or None if none does."""
    last = None
    for last in winning_scores(content):
        pass
    return last


def _describe(win: tuple[int, int, int] | None) -> str:
    if win is None:
        return "no board wins"
    board, unmarked, score = win
    return f"Board {board} wins; unmarked sum == {unmarked}; score == {score}"


def _report(content: str) -> str:
    return f"first: {_describe(part1(content))}\nlast: {_describe(part2(content))}"


def main(argv=None) -> int:
    return run(_report, argv, "../inputs/day04_input.txt")