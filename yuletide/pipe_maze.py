"""Pipe maze: trace the loop of pipes through the start tile and find what it encloses."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from yuletide.runner import run

Point = tuple[int, int]

_UP: Point = (-1, 0)
_DOWN: Point = (1, 0)
_LEFT: Point = (0, -1)
_RIGHT: Point = (0, 1)

# (pipe, direction of travel on entering it) -> direction of travel on leaving it
_TURNS: dict[tuple[str, Point], Point] = {
    ("|", _UP): _UP,
    ("J", _RIGHT): _UP,
    ("L", _LEFT): _UP,
    ("|", _DOWN): _DOWN,
    ("7", _RIGHT): _DOWN,
    ("F", _LEFT): _DOWN,
    ("-", _LEFT): _LEFT,
    ("7", _UP): _LEFT,
    ("J", _DOWN): _LEFT,
    ("-", _RIGHT): _RIGHT,
    ("F", _UP): _RIGHT,
    ("L", _DOWN): _RIGHT,
}

_BOX_DRAWING = str.maketrans({"|": "│", "-": "─", "7": "╮", "F": "╭", "J": "╯", "L": "╰"})


class _Side(Enum):
    OUTSIDE = "outside"
    INSIDE = "inside"
    TOP_LINE = "top line"
    BOTTOM_LINE = "bottom line"


_CROSSINGS: dict[tuple[str, _Side], _Side] = {
    ("|", _Side.OUTSIDE): _Side.INSIDE,
    ("|", _Side.INSIDE): _Side.OUTSIDE,
    ("F", _Side.OUTSIDE): _Side.TOP_LINE,
    ("F", _Side.INSIDE): _Side.BOTTOM_LINE,
    ("L", _Side.OUTSIDE): _Side.BOTTOM_LINE,
    ("L", _Side.INSIDE): _Side.TOP_LINE,
    ("7", _Side.TOP_LINE): _Side.OUTSIDE,
    ("7", _Side.BOTTOM_LINE): _Side.INSIDE,
    ("J", _Side.TOP_LINE): _Side.INSIDE,
    ("J", _Side.BOTTOM_LINE): _Side.OUTSIDE,
}


def parse_grid(content: str) -> list[str]:
    """Parse the maze, surrounding it with a border of ground tiles."""
    rows = ["." + line + "." for line in content.splitlines() if line]
    if not rows:
        raise ValueError("the maze is empty")
    border = "." * len(rows[0])
    return [border, *rows, border]


def _at(grid: Sequence[str], i: int, j: int) -> str:
    if 0 <= i < len(grid) and 0 <= j < len(grid[i]):
        return grid[i][j]
    return "."


def _find_start(grid: Sequence[str]) -> Point:
    for i, row in enumerate(grid):
        j = row.find("S")
        if j >= 0:
            return i, j
    raise ValueError("the maze has no start tile 'S'")


def trace_loop(grid: Sequence[str]) -> list[Point]:
    """The tiles of the loop in travel order, beginning with the start tile."""
    start = _find_start(grid)
    si, sj = start
    if _at(grid, si - 1, sj) in "|7F":
        direction = _UP
    elif _at(grid, si + 1, sj) in "|JL":
        direction = _DOWN
    elif _at(grid, si, sj - 1) in "-7J":
        direction = _LEFT
    elif _at(grid, si, sj + 1) in "-FL":
        direction = _RIGHT
    else:
        raise ValueError(f"no pipe connects to the start tile at {start}")

    limit = sum(len(row) for row in grid)
    path = [start]
    pos = (si + direction[0], sj + direction[1])
    while pos != start:
        if len(path) > limit:
            raise ValueError("the pipes never lead back to the start tile")
        path.append(pos)
        try:
            direction = _TURNS[(_at(grid, *pos), direction)]
        except KeyError:
            raise ValueError(f"the pipe loop breaks at {pos}") from None
        pos = (pos[0] + direction[0], pos[1] + direction[1])
    return path


def _cross(ch: str, side: _Side, start_up: bool, start_down: bool) -> _Side:
    if ch != "S":
        return _CROSSINGS.get((ch, side), side)
    if side not in (_Side.OUTSIDE, _Side.INSIDE):
        return side
    outside = side is _Side.OUTSIDE
    if start_up and start_down:
        return _Side.INSIDE if outside else _Side.OUTSIDE
    if start_up:
        return _Side.BOTTOM_LINE if outside else _Side.TOP_LINE
    if start_down:
        return _Side.TOP_LINE if outside else _Side.BOTTOM_LINE
    return side


def enclosed_tiles(grid: Sequence[str], path: Sequence[Point]) -> set[Point]:
    """Tiles inside the loop, found by scanning each row for loop crossings."""
    if not path:
        raise ValueError("the loop is empty")
    on_loop = set(path)
    si, sj = path[0]
    start_up = _at(grid, si - 1, sj) in "|7F"
    start_down = _at(grid, si + 1, sj) in "|JL"

    enclosed: set[Point] = set()
    for i, row in enumerate(grid):
        side = _Side.OUTSIDE
        for j, ch in enumerate(row):
            if (i, j) in on_loop:
                side = _cross(ch, side, start_up, start_down)
            elif side is _Side.INSIDE:
                enclosed.add((i, j))
            elif side is not _Side.OUTSIDE:
                raise ValueError(f"tile {(i, j)} lies on an unfinished stretch of the loop")
    return enclosed


def part1(content: str) -> int:
    """Steps to the point of the loop farthest from the start."""
    return len(set(trace_loop(parse_grid(content)))) // 2


def part2(content: str) -> int:
    """Number of tiles enclosed by the loop."""
    grid = parse_grid(content)
    return len(enclosed_tiles(grid, trace_loop(grid)))


def _render(grid: Sequence[str], path: Sequence[Point], enclosed: set[Point]) -> str:
    on_loop = set(path)
    start = path[0]
    lines = []
    for i, row in enumerate(grid):
        cells = []
        for j, ch in enumerate(row):
            if (i, j) == start:
                cells.append(f"\x1b[42;1m{ch}\x1b[m")
            elif (i, j) in on_loop:
                cells.append(f"\x1b[44;1m{ch.translate(_BOX_DRAWING)}\x1b[m")
            elif (i, j) in enclosed:
                cells.append(f"\x1b[45;1m{ch}\x1b[m")
            else:
                cells.append(ch)
        lines.append("".join(cells))
    return "\n".join(lines)


def _report(content: str) -> str:
    grid = parse_grid(content)
    path = trace_loop(grid)
    enclosed = enclosed_tiles(grid, path)
    length = len(set(path))
    return (
        f"{_render(grid, path, enclosed)}\n"
        f"length = {length}; half-way = {length // 2}\n"
        f"enclosed area = {len(enclosed)}"
    )


def main(argv=None) -> int:
    return run(_report, argv, "input1.txt")