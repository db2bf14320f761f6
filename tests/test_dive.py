import pytest

from yuletide.dive import main, parse_commands, part1, part2

EXAMPLE = "forward 5\ndown 5\nforward 8\nup 3\ndown 8\nforward 2\n"


def test_parse_commands():
    assert parse_commands("forward 5\nup 3") == [("forward", 5), ("up", 3)]


def test_example_part1():
    assert part1(EXAMPLE) == (15, 10)


def test_example_part2():
    assert part2(EXAMPLE) == (15, 60)


def test_horizontal_position_agrees_between_parts():
    assert part1(EXAMPLE)[0] == part2(EXAMPLE)[0]


def test_unknown_direction_goes_down_in_part1():
    assert part1("sideways 4") == (0, 4)


def test_unknown_direction_goes_forward_in_part2():
    assert part2("down 2\nsideways 4") == (4, 8)


def test_missing_amount_raises():
    with pytest.raises(ValueError):
        parse_commands("forward")


def test_main_reports_product(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text(EXAMPLE)
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    x, depth = part1(EXAMPLE)
    assert f"x=={x}, depth=={depth}, product={x * depth}" in out