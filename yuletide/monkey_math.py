"""Monkey math: evaluate a tree of shouting monkeys and solve for the human's number."""

from __future__ import annotations

import subprocess
from collections import deque
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union

from yuletide.runner import run

ROOT = "root"
HUMAN = "humn"


class Operation(Enum):
    """An arithmetic operation, valued by its symbol."""

    ADD = "+"
    MULTIPLY = "*"
    SUBTRACT = "-"
    DIVIDE = "/"


@dataclass(frozen=True)
class Expression:
    """A monkey that combines the numbers of two other monkeys."""

    op: Operation
    left: str
    right: str


Monkey = Union[int, Expression]


def _truncating_div(a: int, b: int) -> int:
    if b == 0:
        raise ValueError("division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _apply(op: Operation, a: int, b: int) -> int:
    if op is Operation.ADD:
        return a + b
    if op is Operation.MULTIPLY:
        return a * b
    if op is Operation.SUBTRACT:
        return a - b
    return _truncating_div(a, b)


def parse_monkeys(content: str) -> dict[str, Monkey]:
    """Parse lines such as ``root: pppw + sjmn`` or ``dbpl: 5``."""
    monkeys: dict[str, Monkey] = {}
    for line in content.splitlines():
        if not line:
            continue
        words = line.split()
        if not words:
            raise ValueError(f"malformed monkey line: {line!r}")
        name = words[0].rstrip(":")
        rest = words[1:]
        if len(rest) == 1:
            try:
                monkeys[name] = int(rest[0])
            except ValueError:
                raise ValueError(f"bad number in {line!r}") from None
        elif len(rest) == 3 and rest[1] in {op.value for op in Operation}:
            monkeys[name] = Expression(Operation(rest[1]), rest[0], rest[2])
        else:
            raise ValueError(f"malformed monkey line: {line!r}")
    return monkeys


def _lookup(monkeys: Mapping[str, Monkey], name: str) -> Monkey:
    try:
        return monkeys[name]
    except KeyError:
        raise ValueError(f"unknown monkey {name!r}") from None


def evaluate(monkeys: Mapping[str, Monkey]) -> tuple[dict[str, int], set[str]]:
    """Evaluate everything ``root`` needs.

    Returns the value of each evaluated monkey and the set of monkeys whose
    value depends on the human.
    """
    results: dict[str, int] = {}
    dependents: set[str] = set()
    stack = deque([ROOT])
    while stack:
        name = stack.popleft()
        if name == HUMAN:
            dependents.add(name)
        monkey = _lookup(monkeys, name)
        if not isinstance(monkey, Expression):
            results[name] = monkey
            continue
        left, right = monkey.left, monkey.right
        if left in results and right in results:
            results[name] = _apply(monkey.op, results[left], results[right])
            if left in dependents or right in dependents:
                dependents.add(name)
        else:
            stack.appendleft(name)
            if left not in results:
                stack.appendleft(left)
            if right not in results:
                stack.appendleft(right)
    return results, dependents


def solve_for_human(
    monkeys: Mapping[str, Monkey],
    results: Mapping[str, int],
    dependents: set[str],
) -> int:
    """The number the human must shout so that both sides of ``root`` are equal.

    Assumes the monkeys form a tree, so only one branch leads to the human.
    """
    root = _lookup(monkeys, ROOT)
    if not isinstance(root, Expression):
        raise ValueError("root must combine two monkeys")
    if root.left in dependents:
        current, target = root.left, results[root.right]
    else:
        current, target = root.right, results[root.left]

    while isinstance(expr := _lookup(monkeys, current), Expression):
        from_left = expr.left in dependents
        known = results[expr.right] if from_left else results[expr.left]
        if expr.op is Operation.ADD:
            target -= known
        elif expr.op is Operation.MULTIPLY:
            target = _truncating_div(target, known)
        elif expr.op is Operation.SUBTRACT:
            target = target + known if from_left else known - target
        else:
            target = target * known if from_left else _truncating_div(known, target)
        current = expr.left if from_left else expr.right
    return target


def graph_dot(monkeys: Mapping[str, Monkey], dependents: set[str]) -> str:
    """Render the monkeys as a Graphviz digraph, highlighting the human's branch."""
    lines = ["digraph {", "  overlap=false"]
    for name, monkey in monkeys.items():
        if name == ROOT:
            colour = "red"
        elif name == HUMAN:
            colour = "green"
        elif name in dependents:
            colour = "yellow"
        else:
            colour = "white"
        shown = monkey.op.value if isinstance(monkey, Expression) else monkey
        lines.append(
            f'  {name} [label="{name}:{shown}",style="filled",fillcolor="{colour}"]'
        )
    for name, monkey in monkeys.items():
        if isinstance(monkey, Expression):
            lines.append(f"  {name} -> {monkey.left}")
            lines.append(f"  {name} -> {monkey.right}")
    lines.append("}")
    return "\n".join(lines) + "\n"


def part1(content: str) -> int:
    """The number ``root`` shouts."""
    results, _ = evaluate(parse_monkeys(content))
    return results[ROOT]


def part2(content: str) -> int:
    """The number the human must shout to balance ``root``."""
    monkeys = parse_monkeys(content)
    results, dependents = evaluate(monkeys)
    return solve_for_human(monkeys, results, dependents)


def _render_graph(monkeys: Mapping[str, Monkey], dependents: set[str]) -> None:
    path = Path("graph.dot")
    try:
        path.write_text(graph_dot(monkeys, dependents), encoding="utf-8")
    except OSError as err:
        print(f"graphviz... cannot write {path}: {err}")
        return
    try:
        result = subprocess.run(
            ["dot", "-Tpdf", "-O", str(path)], capture_output=True, check=False
        )
    except OSError as err:
        print(f"graphviz... {err}")
    else:
        print(f"graphviz... exit status {result.returncode}")


def _report(content: str) -> str:
    monkeys = parse_monkeys(content)
    results, dependents = evaluate(monkeys)
    human = solve_for_human(monkeys, results, dependents)
    _render_graph(monkeys, dependents)
    return f"(part 1) root = {results[ROOT]}\n(part 2) humn = {human}"


def main(argv=None) -> int:
    return run(_report, argv, "input1.txt")