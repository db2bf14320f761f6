"""Not enough minerals: plan robot construction to crack as many geodes as possible."""

from __future__ import annotations

import math
import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import NamedTuple

from yuletide.runner import run

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Blueprint:
    """Robot costs for one blueprint."""

    number: int
    ore_robot_ore: int
    clay_robot_ore: int
    obsidian_robot_ore: int
    obsidian_robot_clay: int
    geode_robot_ore: int
    geode_robot_obsidian: int


class State(NamedTuple):
    """Stock and robots; field order makes tuple comparison rank geodes first."""

    geodes: int = 0
    geode_bots: int = 0
    obsidian: int = 0
    obsidian_bots: int = 0
    clay: int = 0
    clay_bots: int = 0
    ore: int = 0
    ore_bots: int = 0


def parse_blueprints(content: str) -> list[Blueprint]:
    """Parse one blueprint per non-empty line from the integers it mentions."""
    blueprints = []
    for line in content.splitlines():
        if not line:
            continue
        numbers = [int(token) for token in re.split(r"[ :]", line) if _INTEGER.fullmatch(token)]
        if len(numbers) != 7:
            raise ValueError(f"expected 7 numbers in blueprint line: {line!r}")
        blueprints.append(Blueprint(*numbers))
    return blueprints


def _successors(state: State, bp: Blueprint) -> Iterator[State]:
    grown = state._replace(
        ore=state.ore + state.ore_bots,
        clay=state.clay + state.clay_bots,
        obsidian=state.obsidian + state.obsidian_bots,
        geodes=state.geodes + state.geode_bots,
    )
    if state.obsidian >= bp.geode_robot_obsidian and state.ore >= bp.geode_robot_ore:
        yield grown._replace(
            obsidian=grown.obsidian - bp.geode_robot_obsidian,
            ore=grown.ore - bp.geode_robot_ore,
            geode_bots=grown.geode_bots + 1,
        )
    if state.clay >= bp.obsidian_robot_clay and state.ore >= bp.obsidian_robot_ore:
        yield grown._replace(
            clay=grown.clay - bp.obsidian_robot_clay,
            ore=grown.ore - bp.obsidian_robot_ore,
            obsidian_bots=grown.obsidian_bots + 1,
        )
    if state.ore >= bp.clay_robot_ore:
        yield grown._replace(ore=grown.ore - bp.clay_robot_ore, clay_bots=grown.clay_bots + 1)
    if state.ore >= bp.ore_robot_ore:
        yield grown._replace(ore=grown.ore - bp.ore_robot_ore, ore_bots=grown.ore_bots + 1)
    yield grown


def max_geodes(blueprint: Blueprint, minutes: int, beam_width: int) -> int:
    """Geodes opened after ``minutes``, keeping the ``beam_width`` best states each minute."""
    states = [State(ore_bots=1)]
    for _ in range(minutes):
        successors = [new for state in states for new in _successors(state, blueprint)]
        states = sorted(successors, reverse=True)[:beam_width]
    return states[0].geodes


def _geodes(content: str, minutes: int, beam_width: int) -> list[tuple[Blueprint, int]]:
    return [(bp, max_geodes(bp, minutes, beam_width)) for bp in parse_blueprints(content)]


def part1(content: str) -> int:
    """Sum of quality levels (blueprint number times geodes in 24 minutes)."""
    return sum(bp.number * geodes for bp, geodes in _geodes(content, 24, 63))


def part2(content: str) -> int:
    """Product of geodes opened in 32 minutes over every blueprint."""
    return math.prod(geodes for _, geodes in _geodes(content, 32, 648))


def _report(content: str) -> str:
    lines = []
    total = 0
    for bp, geodes in _geodes(content, 24, 63):
        quality = bp.number * geodes
        total += quality
        lines.append(f"blueprint {bp.number}: geodes = {geodes}, quality = {quality}")
    lines.append(f"sum = {total}")
    product = 1
    for bp, geodes in _geodes(content, 32, 648):
        product *= geodes
        lines.append(f"blueprint {bp.number}: geodes = {geodes}")
    lines.append(f"product = {product}")
    return "\n".join(lines)


def main(argv=None) -> int:
    return run(_report, argv, "input2.txt")