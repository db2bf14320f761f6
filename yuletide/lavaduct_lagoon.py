"""Lavaduct lagoon: measure the lagoon dug out along a trench plan."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence
from enum import Enum, IntEnum
from pathlib import Path

from yuletide.runner import run

SVG_PATH = "part2_lagoon_shape.svg"
SVG_NAMESPACE = "http://www.w3.org/2000/svg"
_SVG_SCALE = 5000.0
_SVG_MARGIN = 10.0

Point = tuple[int, int]
Step = tuple["Direction", int]


class Direction(Enum):
    """A digging direction, valued by the letter the plan uses for it."""

    UP = "U"
    RIGHT = "R"
    DOWN = "D"
    LEFT = "L"

    @property
    def delta(self) -> Point:
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
}

_HEX_DIRECTIONS = {
    "0": Direction.RIGHT,
    "1": Direction.DOWN,
    "2": Direction.LEFT,
    "3": Direction.UP,
}


class _Segment(IntEnum):
    # The order matters: points on a row are sorted by column, then by this.
    UP_RIGHT = 0
    UP_LEFT = 1
    DOWN_RIGHT = 2
    DOWN_LEFT = 3
    VERTICAL = 4


class _Side(Enum):
    OUTSIDE = "outside"
    INSIDE = "inside"
    TOP_LINE = "top line"
    BOTTOM_LINE = "bottom line"


_TRANSITIONS: dict[tuple[_Segment, _Side], _Side] = {
    (_Segment.DOWN_RIGHT, _Side.OUTSIDE): _Side.TOP_LINE,
    (_Segment.UP_RIGHT, _Side.INSIDE): _Side.TOP_LINE,
    (_Segment.DOWN_RIGHT, _Side.INSIDE): _Side.BOTTOM_LINE,
    (_Segment.UP_RIGHT, _Side.OUTSIDE): _Side.BOTTOM_LINE,
    (_Segment.VERTICAL, _Side.OUTSIDE): _Side.INSIDE,
    (_Segment.DOWN_LEFT, _Side.BOTTOM_LINE): _Side.INSIDE,
    (_Segment.UP_LEFT, _Side.TOP_LINE): _Side.INSIDE,
    (_Segment.VERTICAL, _Side.INSIDE): _Side.OUTSIDE,
    (_Segment.DOWN_LEFT, _Side.TOP_LINE): _Side.OUTSIDE,
    (_Segment.UP_LEFT, _Side.BOTTOM_LINE): _Side.OUTSIDE,
}

# (direction now, direction before) -> kind of corner at the turn
_CORNERS: dict[tuple[Direction, Direction], _Segment] = {
    (Direction.UP, Direction.RIGHT): _Segment.UP_LEFT,
    (Direction.UP, Direction.LEFT): _Segment.UP_RIGHT,
    (Direction.RIGHT, Direction.UP): _Segment.DOWN_RIGHT,
    (Direction.RIGHT, Direction.DOWN): _Segment.UP_RIGHT,
    (Direction.DOWN, Direction.RIGHT): _Segment.DOWN_LEFT,
    (Direction.DOWN, Direction.LEFT): _Segment.DOWN_RIGHT,
    (Direction.LEFT, Direction.UP): _Segment.DOWN_LEFT,
    (Direction.LEFT, Direction.DOWN): _Segment.UP_LEFT,
}


def _lines(content: str) -> list[str]:
    return content.rstrip().splitlines()


def parse_plan(content: str) -> list[Step]:
    """Parse lines such as ``R 6 (#70c710)`` using the letter and the distance."""
    plan = []
    for line in _lines(content):
        words = line.split()
        if len(words) < 2:
            raise ValueError(f"malformed plan line: {line!r}")
        try:
            direction = Direction(words[0])
        except ValueError:
            raise ValueError(f"unknown direction {words[0]!r} in {line!r}") from None
        try:
            distance = int(words[1])
        except ValueError:
            raise ValueError(f"bad distance in {line!r}") from None
        plan.append((direction, distance))
    return plan


def parse_hex_plan(content: str) -> list[Step]:
    """Parse the plan from the hexadecimal codes: five digits of distance, one of direction."""
    plan = []
    for line in _lines(content):
        _, sep, code = line.partition("#")
        if not sep or len(code) < 6:
            raise ValueError(f"no colour code in {line!r}")
        try:
            direction = _HEX_DIRECTIONS[code[5]]
        except KeyError:
            raise ValueError(f"unknown direction digit {code[5]!r} in {line!r}") from None
        try:
            distance = int(code[:5], 16)
        except ValueError:
            raise ValueError(f"bad hexadecimal distance in {line!r}") from None
        plan.append((direction, distance))
    return plan


def _dig(plan: Iterable[Step]) -> set[Point]:
    i = j = 0
    trench = {(i, j)}
    for direction, distance in plan:
        di, dj = direction.delta
        for _ in range(distance):
            i, j = i + di, j + dj
            trench.add((i, j))
    return trench


def flood_area(plan: Iterable[Step]) -> int:
    """Lagoon area found by flooding the ground outside the trench."""
    trench = _dig(plan)
    min_i = min(i for i, _ in trench)
    max_i = max(i for i, _ in trench)
    min_j = min(j for _, j in trench)
    max_j = max(j for _, j in trench)

    ring = {(i, min_j - 1) for i in range(min_i - 1, max_i + 2)}
    ring |= {(i, max_j + 1) for i in range(min_i - 1, max_i + 2)}
    ring |= {(min_i - 1, j) for j in range(min_j - 1, max_j + 2)}
    ring |= {(max_i + 1, j) for j in range(min_j - 1, max_j + 2)}

    outside = set(ring)
    frontier = list(ring)
    while frontier:
        i, j = frontier.pop()
        for di, dj in _DELTAS.values():
            pt = (i + di, j + dj)
            if (
                min_i <= pt[0] <= max_i
                and min_j <= pt[1] <= max_j
                and pt not in outside
                and pt not in trench
            ):
                outside.add(pt)
                frontier.append(pt)

    total = (max_i - min_i + 3) * (max_j - min_j + 3)
    return total - len(outside)


def _corner(direction: Direction, previous: Direction) -> _Segment:
    try:
        return _CORNERS[(direction, previous)]
    except KeyError:
        raise ValueError(
            f"the plan turns from {previous.name} to {direction.name}, which is not a corner"
        ) from None


def scanline_area(plan: Sequence[Step]) -> int:
    """Lagoon area found by scanning only the rows where the outline changes."""
    if not plan:
        raise ValueError("the plan is empty")
    rows: defaultdict[int, list[tuple[int, _Segment]]] = defaultdict(list)
    verticals: list[tuple[int, int, int]] = []
    i = j = 0
    previous = plan[-1][0]
    for direction, distance in plan:
        rows[i].append((j, _corner(direction, previous)))
        if direction is Direction.UP:
            rows[i - distance + 1].append((j, _Segment.VERTICAL))
            verticals.append((i - distance + 2, i - 1, j))
            i -= distance
        elif direction is Direction.DOWN:
            rows[i + 1].append((j, _Segment.VERTICAL))
            verticals.append((i + 2, i + distance - 1, j))
            i += distance
        elif direction is Direction.RIGHT:
            j += distance
        else:
            j -= distance
        previous = direction

    # A row after each changing row carries the verticals down to the next change.
    for row in list(rows):
        rows[row + 1]
    for row, points in rows.items():
        points.extend((vj, _Segment.VERTICAL) for top, bottom, vj in verticals if top <= row <= bottom)

    order = sorted(rows)
    prev_i = order[0] - 1
    prev_row_area = 0
    area = 0
    for row in order:
        area += (row - prev_i - 1) * prev_row_area
        side = _Side.OUTSIDE
        start_j = 0
        row_area = 0
        for pj, segment in sorted(rows[row]):
            if side is _Side.OUTSIDE:
                start_j = pj
            try:
                side = _TRANSITIONS[(segment, side)]
            except KeyError:
                raise ValueError(f"the outline is inconsistent on row {row}") from None
            if side is _Side.OUTSIDE:
                row_area += pj - start_j + 1
        if side is not _Side.OUTSIDE:
            raise ValueError(f"row {row} does not close the outline")
        area += row_area
        prev_row_area = row_area
        prev_i = row
    return area


def _fmt(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)


def lagoon_svg(plan: Iterable[Step]) -> str:
    """Draw the trench outline as an SVG polygon, scaled down and with north up."""
    polygon: list[tuple[float, float]] = []
    i = j = 0.0
    min_i = min_j = max_i = max_j = 0.0
    for direction, distance in plan:
        step = distance / _SVG_SCALE
        polygon.append((i, j))
        if direction is Direction.DOWN:
            i -= step
            min_i = min(min_i, i)
        elif direction is Direction.RIGHT:
            j += step
            max_j = max(max_j, j)
        elif direction is Direction.UP:
            i += step
            max_i = max(max_i, i)
        else:
            j -= step
            min_j = min(min_j, j)

    view = " ".join(
        _fmt(v)
        for v in (
            min_j - _SVG_MARGIN,
            min_i - _SVG_MARGIN,
            max_j - min_j + 2 * _SVG_MARGIN,
            max_i - min_i + 2 * _SVG_MARGIN,
        )
    )
    points = " ".join(f"{_fmt(pj)},{_fmt(pi)}" for pi, pj in polygon)
    return (
        '<?xml version="1.0" encoding="UTF-8" ?>\n'
        f'<svg viewBox="{view}" xmlns="{SVG_NAMESPACE}">\n'
        f'<polygon points="{points}" fill="#C0D8FF" stroke="black" stroke-width="1"/>\n'
        "</svg>\n"
    )


def part1(content: str) -> int:
    """Area dug out following the letter-and-distance plan."""
    return flood_area(parse_plan(content))


def part2(content: str) -> int:
    """Area dug out following the plan hidden in the colour codes."""
    return scanline_area(parse_hex_plan(content))


def _report(content: str) -> str:
    hex_plan = parse_hex_plan(content)
    try:
        Path(SVG_PATH).write_text(lagoon_svg(hex_plan), encoding="utf-8")
    except OSError as err:
        print(f"cannot write {SVG_PATH}: {err}")
    return f"part 1: area = {part1(content)}\npart 2: area = {scanline_area(hex_plan)}"


def main(argv=None) -> int:
    return run(_report, argv, "input1.txt")