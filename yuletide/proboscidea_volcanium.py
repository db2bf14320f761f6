"""Proboscidea volcanium: release as much pressure as possible from a valve network."""

from __future__ import annotations

import subprocess
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import NamedTuple

from yuletide.runner import run

START_VALVE = "AA"
_NOWHERE = -1


@dataclass
class Valve:
    """A valve with its flow rate and the tunnels leading from it."""

    index: int
    name: str
    flow_rate: int
    tunnels: list[str]
    neighbours: list[int] = field(default_factory=list)


class _Solo(NamedTuple):
    location: int
    last: int
    valves_on: int
    flow_rate: int
    pressure: int


class _Pair(NamedTuple):
    locations: tuple[int, int]
    lasts: tuple[int, int]
    valves_on: int
    flow_rate: int
    pressure: int


def _parse_rate(spec: str, line: str) -> int:
    text = spec
    while text.startswith("rate="):
        text = text[len("rate="):]
    try:
        return int(text.rstrip(";"))
    except ValueError:
        raise ValueError(f"bad flow rate in {line!r}") from None


def parse_valves(content: str) -> list[Valve]:
    """Parse lines such as ``Valve AA has flow rate=0; tunnels lead to valves DD, II``."""
    valves = []
    for index, line in enumerate(line for line in content.splitlines() if line):
        words = line.split()
        if len(words) < 9:
            raise ValueError(f"malformed valve line: {line!r}")
        valves.append(
            Valve(
                index=index,
                name=words[1],
                flow_rate=_parse_rate(words[4], line),
                tunnels=[word.rstrip(",") for word in words[9:]],
            )
        )
    indexes = {valve.name: valve.index for valve in valves}
    for valve in valves:
        try:
            valve.neighbours = [indexes[name] for name in valve.tunnels]
        except KeyError as err:
            raise ValueError(f"valve {valve.name} leads to unknown valve {err.args[0]}") from None
    return valves


def _start_index(valves: Sequence[Valve]) -> int:
    indexes = {valve.name: valve.index for valve in valves}
    try:
        return indexes[START_VALVE]
    except KeyError:
        raise ValueError(f"no valve named {START_VALVE}") from None


def _prune(states: list, beam_width: int) -> list:
    ranked = sorted(states, key=lambda s: (s.pressure, s.flow_rate), reverse=True)
    return ranked[:beam_width]


def part1(content: str, beam_width: int = 100) -> int:
    """Most pressure one explorer can release in 30 minutes (beam search)."""
    valves = parse_valves(content)
    states = [_Solo(_start_index(valves), _NOWHERE, 0, 0, 0)]
    for minute in range(1, 31):
        successors = []
        for state in states:
            valve = valves[state.location]
            bit = 1 << state.location
            released = state.pressure + state.flow_rate
            if valve.flow_rate > 0 and not state.valves_on & bit:
                successors.append(
                    _Solo(
                        state.location,
                        _NOWHERE,
                        state.valves_on | bit,
                        state.flow_rate + valve.flow_rate,
                        released,
                    )
                )
            successors.extend(
                _Solo(n, state.location, state.valves_on, state.flow_rate, released)
                for n in valve.neighbours
                if n != state.last
            )
        states = _prune(successors, beam_width)
        if not states:
            raise ValueError(f"no moves left at minute {minute}")
    return states[0].pressure


def _first_moves(state: _Pair, valves: Sequence[Valve]) -> Iterable[_Pair]:
    here, other = state.locations
    last_here, last_other = state.lasts
    valve = valves[here]
    bit = 1 << here
    if valve.flow_rate > 0 and not state.valves_on & bit:
        yield _Pair(
            state.locations,
            (_NOWHERE, last_other),
            state.valves_on | bit,
            state.flow_rate + valve.flow_rate,
            state.pressure,
        )
    for n in valve.neighbours:
        if n != last_here:
            yield _Pair((n, other), (here, last_other), state.valves_on, state.flow_rate, state.pressure)


def part2(content: str, beam_width: int = 1000) -> int:
    """Most pressure two explorers working together can release in 26 minutes."""
    valves = parse_valves(content)
    start = _start_index(valves)
    states = [_Pair((start, start), (_NOWHERE, _NOWHERE), 0, 0, 0)]
    for minute in range(1, 27):
        successors = []
        for state in states:
            second = state.locations[1]
            valve = valves[second]
            bit = 1 << second
            released = state.pressure + state.flow_rate
            for half in _first_moves(state, valves):
                if valve.flow_rate > 0 and not half.valves_on & bit:
                    successors.append(
                        _Pair(
                            half.locations,
                            (half.lasts[0], _NOWHERE),
                            half.valves_on | bit,
                            half.flow_rate + valve.flow_rate,
                            released,
                        )
                    )
                successors.extend(
                    _Pair(
                        (half.locations[0], n),
                        (half.lasts[0], second),
                        half.valves_on,
                        half.flow_rate,
                        released,
                    )
                    for n in valve.neighbours
                    if n != state.lasts[1]
                )
        states = _prune(successors, beam_width)
        if not states:
            raise ValueError(f"no moves left at minute {minute}")
    return states[0].pressure


def graph_dot(valves: Iterable[Valve]) -> str:
    """Render the valve network as an undirected Graphviz graph."""
    valves = list(valves)
    lines = ["graph {", "  overlap=false"]
    for valve in valves:
        colour, pen = ("gray", 1) if valve.flow_rate == 0 else ("blue", 2)
        lines.append(
            f'  {valve.name} [label="{valve.name} ({valve.flow_rate})",'
            f'color="{colour}",penwidth={pen}]'
        )
    for valve in valves:
        lines.extend(f"  {valve.name} -- {name}" for name in valve.tunnels)
    lines.append("}")
    return "\n".join(lines) + "\n"


def _render_graph(valves: Sequence[Valve]) -> None:
    path = Path("graph.dot")
    try:
        path.write_text(graph_dot(valves), encoding="utf-8")
    except OSError as err:
        print(f"graphviz... cannot write {path}: {err}")
        return
    try:
        result = subprocess.run(
            ["neato", "-Tpdf", "-O", str(path)], capture_output=True, check=False
        )
    except OSError as err:
        print(f"graphviz... {err}")
    else:
        print(f"graphviz... exit status {result.returncode}")


def _report(content: str) -> str:
    _render_graph(parse_valves(content))
    return f"part 1: max = {part1(content)}\npart 2: max = {part2(content)}"


def main(argv=None) -> int:
    return run(_report, argv, "input.txt")