# yuletide

Solvers for a collection of Advent-style programming puzzles: sonar sweeps,
submarine navigation, bingo against a giant squid, calorie counting, valve
networks, robot factories, shouting monkeys, spreading elves, blizzard-filled
valleys, pipe mazes, lagoons, lens boxes, expanding galaxies, damaged springs,
mirrors and tilting platforms.

Every puzzle lives in its own module. Each one can be imported and called with
the text of a puzzle input, or run from the command line. There are no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

Each puzzle has its own command. Pass the path of the puzzle input as the only
argument; when it is left out, the command falls back to its default input
file. The answers are printed, followed by the time the solver took.

```
yuletide-sonar-sweep input.txt
yuletide-dive input.txt
yuletide-binary-diagnostic input.txt
yuletide-giant-squid input.txt
yuletide-calorie-counting < input.txt
yuletide-snafu input.txt
yuletide-grove-positioning input.txt
yuletide-proboscidea-volcanium input.txt
yuletide-not-enough-minerals input.txt
yuletide-monkey-math input.txt
yuletide-unstable-diffusion input.txt
yuletide-blizzard-basin input.txt
yuletide-pipe-maze input.txt
yuletide-lavaduct-lagoon input.txt
yuletide-lens-library input.txt
yuletide-cosmic-expansion input.txt
yuletide-hot-springs input.txt
yuletide-point-of-incidence input.txt
yuletide-reflector-dish input.txt
```

The calorie counter reads its input from standard input and prints every
elf's total, the richest elf and the top three; it does not report a time.
The others read a file. If the file cannot be read, the command says so and
exits with status 1; a malformed input is reported as `ERROR: ...`.

A few commands also write files into the current directory:

- `yuletide-proboscidea-volcanium` writes `graph.dot` and runs Graphviz's
  `neato` on it to make a PDF.
- `yuletide-monkey-math` writes `graph.dot` and runs Graphviz's `dot` on it.
- `yuletide-lavaduct-lagoon` writes `part2_lagoon_shape.svg`.

If Graphviz is not installed, the command says so and carries on.

## Library use

Most modules offer `part1(content)` and `part2(content)`, which take the whole
puzzle input as a string and return the answer:

```python
from yuletide import sonar_sweep, lens_library

depths = "199\n200\n208\n210\n200\n207\n240\n269\n260\n263\n"
sonar_sweep.part1(depths)

lens_library.holiday_hash("HASH")
```

Lower-level building blocks are public too, for example:

- `sonar_sweep.count_increases(depths, window)` counts increases between
  sliding windows of depth readings.
- `snafu.snafu_to_int(text)` and `snafu.int_to_snafu(number)` convert between
  balanced base-five numerals and integers.
- `grove_positioning.mix(numbers, rounds)` mixes an encrypted list.
- `unstable_diffusion.simulate(elves)` yields the elves' positions round by
  round.
- `blizzard_basin.travel(basin, start, end)` finds the quickest crossing of a
  `Basin`.
- `hot_springs.count_arrangements(springs, groups)` counts the ways damaged
  springs can fit a record.
- `reflector_dish.spin_cycle(platform)` tilts a platform north, west, south
  and east in turn.
- `cosmic_expansion.distance_sum(content, growth)` and
  `point_of_incidence.summarize(content, smudged)` take the puzzle variant as
  a parameter instead of splitting it into two parts.
- `calorie_counting.elf_totals(lines)`, `richest_elf(totals)` and
  `top_three(totals)` work on any iterable of lines.

The searches in `proboscidea_volcanium` and `not_enough_minerals` are beam
searches: they keep only the most promising states at each minute. The
`beam_width` arguments of `proboscidea_volcanium.part1`/`part2` and
`not_enough_minerals.max_geodes` set how many; larger values are slower but
safer.

Some modules can also describe their puzzle as a picture:
`proboscidea_volcanium.graph_dot(valves)` and `monkey_math.graph_dot(monkeys,
dependents)` produce Graphviz source, and `lavaduct_lagoon.lagoon_svg(plan)`
produces an SVG outline of the dig plan.

## What is not included

The package has no solver for the light-beam puzzle (beams bouncing off
mirrors and splitters across a contraption); there is neither a module nor a
command for it.