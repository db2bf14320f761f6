import math

import pytest

from yuletide.blizzard_basin import Basin, Blizzard, parse_basin, part1, part2, travel

COMPLEX = """\
#.######
#>>.<^<#
#.<..<<#
#>v.><>#
#<^v^^>#
######.#
"""

SIMPLE = """\
#.#####
#.....#
#>....#
#.....#
#...v.#
#.....#
#####.#
"""


def _positions(basin):
    return [(b.i, b.j) for b in basin.blizzards]


def test_parse_counts_blizzards():
    basin = parse_basin(COMPLEX)
    assert len(basin.blizzards) == sum(ch in "<>^v" for ch in COMPLEX)
    assert basin.height == len(COMPLEX.splitlines())
    assert basin.width == len(COMPLEX.splitlines()[0])


def test_entrance_and_exit_are_open():
    basin = parse_basin(COMPLEX)
    assert basin.is_open(*basin.start)
    assert basin.is_open(*basin.end)


def test_walls_and_outside_are_closed():
    basin = parse_basin(COMPLEX)
    assert not basin.is_open(0, 0)
    assert not basin.is_open(-1, 1)
    assert not basin.is_open(basin.height, basin.width - 2)


def test_blizzard_tile_is_closed():
    basin = parse_basin(SIMPLE)
    assert not basin.is_open(2, 1)
    assert basin.is_open(1, 1)


def test_blizzards_return_after_period():
    basin = parse_basin(COMPLEX)
    before = _positions(basin)
    for _ in range(math.lcm(basin.width - 2, basin.height - 2)):
        basin.step()
    assert _positions(basin) == before


def test_horizontal_blizzard_cycles_across_width():
    basin = parse_basin(SIMPLE)
    horizontal = next(b for b in basin.blizzards if b.delta_j)
    origin = (horizontal.i, horizontal.j)
    for _ in range(basin.width - 2):
        basin.step()
        assert horizontal.i == origin[0]
    assert (horizontal.i, horizontal.j) == origin


def test_blizzards_stay_inside():
    basin = parse_basin(COMPLEX)
    for _ in range(30):
        basin.step()
        assert all(0 < i < basin.height - 1 and 0 < j < basin.width - 1 for i, j in _positions(basin))
    assert basin.time == 30


def test_part1_example():
    assert part1(COMPLEX) == 18


def test_part2_example():
    assert part2(COMPLEX) == 54


def test_travel_is_at_least_the_distance():
    basin = parse_basin(SIMPLE)
    (si, sj), (ei, ej) = basin.start, basin.end
    minutes = travel(basin, basin.start, basin.end)
    assert minutes >= abs(ei - si) + abs(ej - sj)
    assert basin.time == minutes


def test_round_trip_takes_longer_than_one_way():
    assert part2(COMPLEX) > part1(COMPLEX)


def test_too_small_basin_is_rejected():
    with pytest.raises(ValueError):
        parse_basin("#.#\n#.#\n")
    with pytest.raises(ValueError):
        parse_basin("")


def test_blizzard_outside_basin_is_rejected():
    with pytest.raises(ValueError):
        Basin(5, 5, [Blizzard(0, 2, 1, 0)])
    with pytest.raises(ValueError):
        parse_basin("#.###\n>...#\n###.#\n")