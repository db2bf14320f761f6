import pytest

from yuletide.not_enough_minerals import (
    Blueprint,
    State,
    main,
    max_geodes,
    parse_blueprints,
    part1,
    part2,
)

EXAMPLE = (
    "Blueprint 1: Each ore robot costs 4 ore. Each clay robot costs 2 ore. "
    "Each obsidian robot costs 3 ore and 14 clay. "
    "Each geode robot costs 2 ore and 7 obsidian."
)

CHEAP = (
    "Blueprint 1: Each ore robot costs 1 ore. Each clay robot costs 1 ore. "
    "Each obsidian robot costs 1 ore and 1 clay. "
    "Each geode robot costs 1 ore and 1 obsidian."
)


def test_parse_example_fields():
    (bp,) = parse_blueprints(EXAMPLE)
    assert bp == Blueprint(1, 4, 2, 3, 14, 2, 7)
    assert bp.obsidian_robot_clay == 14
    assert bp.geode_robot_obsidian == 7


def test_parse_skips_blank_lines():
    blueprints = parse_blueprints("\n" + EXAMPLE + "\n\n" + CHEAP.replace("Blueprint 1", "Blueprint 2") + "\n")
    assert [bp.number for bp in blueprints] == [1, 2]


def test_parse_rejects_wrong_count():
    with pytest.raises(ValueError):
        parse_blueprints("Blueprint 1: Each ore robot costs 4 ore.")


def test_state_ordering_ranks_geodes_first():
    assert State(geodes=1) > State(ore=100, ore_bots=5, clay=50)
    assert State(geode_bots=1) > State(obsidian=9)


def test_geodes_need_seven_minutes_on_cheap_blueprint():
    (bp,) = parse_blueprints(CHEAP)
    assert max_geodes(bp, 6, 63) == 0
    assert max_geodes(bp, 7, 63) == 1


def test_more_time_never_hurts_cheap_blueprint():
    (bp,) = parse_blueprints(CHEAP)
    results = [max_geodes(bp, minutes, 63) for minutes in range(6, 16)]
    assert results == sorted(results)


def test_part1_is_quality_weighted():
    (bp,) = parse_blueprints(CHEAP)
    geodes = max_geodes(bp, 24, 63)
    assert geodes > 0
    assert part1(CHEAP) == geodes
    content = CHEAP + "\n" + CHEAP.replace("Blueprint 1", "Blueprint 3")
    assert part1(content) == 4 * geodes


def test_part2_is_product_of_geodes():
    (bp,) = parse_blueprints(CHEAP)
    geodes = max_geodes(bp, 32, 648)
    assert geodes > max_geodes(bp, 24, 63)
    content = CHEAP + "\n" + CHEAP.replace("Blueprint 1", "Blueprint 2")
    assert part2(content) == geodes * geodes


def test_empty_input_totals():
    assert part1("") == 0
    assert part2("") == 1


def test_main_reports_sum(tmp_path, capsys):
    source = tmp_path / "blueprints.txt"
    source.write_text(CHEAP + "\n", encoding="utf-8")
    assert main([str(source)]) == 0
    out = capsys.readouterr().out
    assert f"sum = {part1(CHEAP)}" in out
    assert f"product = {part2(CHEAP)}" in out