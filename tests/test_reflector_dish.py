import pytest

from yuletide.reflector_dish import (
    north_load,
    parse_platform,
    part1,
    part2,
    rotate,
    slide_north,
    spin_cycle,
)

EXAMPLE = """\
O....#....
O.OO#....#
.....##...
OO.#O....O
.O.....O#.
O.#..O.#.#
..O..#O..O
.......O..
#....###..
#OO..#....
"""


def test_example_part1():
    assert part1(EXAMPLE) == 136


def test_example_part2():
    assert part2(EXAMPLE) == 64


def test_four_rotations_are_identity():
    platform = parse_platform(EXAMPLE)
    result = platform
    for _ in range(4):
        result = rotate(result)
    assert result == platform


def test_rotation_swaps_dimensions():
    platform = ("O.#", "..O")
    turned = rotate(platform)
    assert len(turned) == len(platform[0])
    assert len(turned[0]) == len(platform)
    assert rotate(rotate(rotate(turned))) == platform


def test_slide_is_idempotent_and_keeps_rocks():
    platform = parse_platform(EXAMPLE)
    tilted = slide_north(platform)
    assert slide_north(tilted) == tilted
    assert "".join(tilted).count("O") == "".join(platform).count("O")
    for before, after in zip(platform, tilted):
        assert [i for i, ch in enumerate(before) if ch == "#"] == [
            i for i, ch in enumerate(after) if ch == "#"
        ]


def test_slide_never_lowers_load():
    platform = parse_platform(EXAMPLE)
    assert north_load(slide_north(platform)) >= north_load(platform)


def test_spin_cycle_keeps_rocks():
    platform = parse_platform(EXAMPLE)
    assert "".join(spin_cycle(platform)).count("O") == "".join(platform).count("O")


def test_part2_matches_explicit_spins():
    platform = parse_platform(EXAMPLE)
    for cycles in range(0, 25):
        assert part2(EXAMPLE, cycles) == north_load(platform)
        platform = spin_cycle(platform)


def test_unknown_symbol_raises():
    with pytest.raises(ValueError):
        parse_platform("O.x\n...\n")


def test_ragged_platform_raises():
    with pytest.raises(ValueError):
        parse_platform("O..\n..\n")