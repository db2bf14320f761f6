import pytest

from yuletide.point_of_incidence import find_reflection, parse_pattern, summarize

PATTERN_A = """\
#.##..##.
..#.##.#.
##......#
##......#
..#.##.#.
..##..###
#.##..##.
"""

PATTERN_B = """\
#...##..#
#....#..#
..##..###
#####.##.
#####.##.
..##..###
#....#..#
"""

EXAMPLE = PATTERN_A + "\n" + PATTERN_B


def test_parse_rows_and_columns_agree():
    rows, cols = parse_pattern(PATTERN_A)
    lines = PATTERN_A.splitlines()
    assert len(rows) == len(lines)
    assert len(cols) == len(lines[0])
    for i, line in enumerate(lines):
        for j, ch in enumerate(line):
            rock = ch == "#"
            assert bool(rows[i] >> j & 1) == rock
            assert bool(cols[j] >> i & 1) == rock


def test_mirrored_sequence_reflects_at_middle():
    half = [5, 9, 3, 12]
    numbers = half + half[::-1]
    assert find_reflection(numbers, False) == len(half)


def test_single_smudge_found_only_when_smudged():
    half = [5, 9, 3, 12]
    numbers = half + half[::-1]
    numbers[0] ^= 1 << 4
    assert find_reflection(numbers, True) == len(half)
    assert find_reflection(numbers, False) != len(half)


def test_no_reflection_gives_zero():
    numbers = [1, 2, 4, 8]
    assert find_reflection(numbers, False) == 0


def test_summarize_is_additive_over_blocks():
    for smudged in (False, True):
        assert summarize(EXAMPLE, smudged) == summarize(PATTERN_A, smudged) + summarize(
            PATTERN_B, smudged
        )


def test_ragged_pattern_raises():
    with pytest.raises(ValueError):
        parse_pattern("#..\n#.\n")


def test_empty_pattern_raises():
    with pytest.raises(ValueError):
        parse_pattern("\n\n")