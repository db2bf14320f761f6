import pytest

from yuletide.monkey_math import (
    Expression,
    Operation,
    evaluate,
    graph_dot,
    parse_monkeys,
    part1,
    part2,
    solve_for_human,
)

EXAMPLE = """\
root: pppw + sjmn
dbpl: 5
cczh: sllz + lgvd
zczc: 2
ptdq: humn - dvpt
dvpt: 3
lfqf: 4
humn: 5
ljgn: 2
sjmn: drzm * dbpl
sllz: 4
pppw: cczh / lfqf
lgvd: ljgn * ptdq
drzm: hmdt - zczc
hmdt: 32
"""


def test_parse_monkeys():
    monkeys = parse_monkeys(EXAMPLE)
    assert monkeys["root"] == Expression(Operation.ADD, "pppw", "sjmn")
    assert monkeys["dbpl"] == 5
    assert len(monkeys) == len(EXAMPLE.splitlines())


def test_part1_example():
    assert part1(EXAMPLE) == 152


def test_part2_example():
    assert part2(EXAMPLE) == 301


def test_division_truncates_toward_zero():
    assert part1("root: a / b\na: 7\nb: -2\n") == -3


def test_dependents_follow_human_branch():
    _, dependents = evaluate(parse_monkeys(EXAMPLE))
    assert {"humn", "root"} <= dependents
    assert "sjmn" not in dependents
    assert "dbpl" not in dependents


@pytest.mark.parametrize(
    "content",
    [
        EXAMPLE,
        "root: x + y\nx: humn * c\nc: 4\ny: 20\nhumn: 1\n",
        "root: x + y\nx: c - humn\nc: 30\ny: 12\nhumn: 1\n",
        "root: x + y\nx: humn - c\nc: 30\ny: 12\nhumn: 1\n",
        "root: x + y\nx: c / humn\nc: 36\ny: 4\nhumn: 1\n",
        "root: x + y\nx: humn / c\nc: 3\ny: 7\nhumn: 1\n",
        "root: y + x\nx: humn + c\nc: 3\ny: 11\nhumn: 1\n",
    ],
)
def test_answer_balances_root(content):
    monkeys = parse_monkeys(content)
    results, dependents = evaluate(monkeys)
    answer = solve_for_human(monkeys, results, dependents)
    monkeys["humn"] = answer
    balanced, _ = evaluate(monkeys)
    root = monkeys["root"]
    assert balanced[root.left] == balanced[root.right]


@pytest.mark.parametrize(
    "content",
    ["root: a % b\n", "aaaa: 1 2\n", "aaaa: x\n", "   \n"],
)
def test_parse_rejects_malformed_lines(content):
    with pytest.raises(ValueError):
        parse_monkeys(content)


def test_missing_root_is_an_error():
    with pytest.raises(ValueError):
        evaluate(parse_monkeys("aaaa: 1\n"))


def test_unknown_child_is_an_error():
    with pytest.raises(ValueError):
        evaluate(parse_monkeys("root: a + b\na: 1\n"))


def test_division_by_zero_is_an_error():
    with pytest.raises(ValueError):
        part1("root: a / b\na: 1\nb: 0\n")


def test_solve_requires_expression_root():
    monkeys = parse_monkeys("root: 4\n")
    results, dependents = evaluate(monkeys)
    with pytest.raises(ValueError):
        solve_for_human(monkeys, results, dependents)


def test_graph_dot_format():
    monkeys = parse_monkeys(EXAMPLE)
    _, dependents = evaluate(monkeys)
    dot = graph_dot(monkeys, dependents)
    assert dot.startswith("digraph {\n  overlap=false\n")
    assert dot.endswith("}\n")
    assert '  root [label="root:+",style="filled",fillcolor="red"]' in dot
    assert '  humn [label="humn:5",style="filled",fillcolor="green"]' in dot
    assert '  pppw [label="pppw:/",style="filled",fillcolor="yellow"]' in dot
    assert '  dbpl [label="dbpl:5",style="filled",fillcolor="white"]' in dot
    assert "  root -> pppw" in dot.splitlines()
    assert "  root -> sjmn" in dot.splitlines()