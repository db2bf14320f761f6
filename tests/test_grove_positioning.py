import pytest

from yuletide.grove_positioning import (
    DECRYPTION_KEY,
    grove_coordinates,
    main,
    mix,
    parse_numbers,
    part1,
    part2,
)

EXAMPLE = "1\n2\n-3\n3\n-2\n0\n4\n"


def test_parse_numbers_skips_non_integers():
    assert parse_numbers("1\n\nabc\n-3\n") == [1, -3]


def test_example_part1():
    assert part1(EXAMPLE) == (4, -3, 2)


def test_example_part2_sum():
    assert sum(part2(EXAMPLE)) == 1623178306


def test_mix_is_a_permutation():
    numbers = parse_numbers(EXAMPLE)
    assert sorted(mix(numbers, 1)) == sorted(numbers)
    keyed = [n * DECRYPTION_KEY for n in numbers]
    assert sorted(mix(keyed, 10)) == sorted(keyed)


def test_zeros_do_not_move():
    assert mix([0, 0, 0], 3) == [0, 0, 0]


def test_mix_empty():
    assert mix([], 1) == []


def test_mix_single_number_raises():
    with pytest.raises(ValueError):
        mix([5], 1)


def test_coordinates_need_a_zero():
    with pytest.raises(ValueError):
        grove_coordinates([1, 2, 3])


def test_coordinates_wrap_around():
    numbers = [0, 7, 8, 9]
    assert grove_coordinates(numbers) == (numbers[1000 % 4], numbers[2000 % 4], numbers[3000 % 4])


def test_main_reports_sum(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text(EXAMPLE)
    assert main([str(path)]) == 0
    assert f"sum = {sum(part1(EXAMPLE))}" in capsys.readouterr().out