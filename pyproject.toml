[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yuletide"
version = "0.1.0"
description = "Solvers for a collection of Advent-style programming puzzles, usable as a library or from the command line."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "algorithms", "simulation", "path-finding"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
yuletide-sonar-sweep = "yuletide.sonar_sweep:main"
yuletide-dive = "yuletide.dive:main"
yuletide-binary-diagnostic = "yuletide.binary_diagnostic:main"
yuletide-giant-squid = "yuletide.giant_squid:main"
yuletide-calorie-counting = "yuletide.calorie_counting:main"
yuletide-snafu = "yuletide.snafu:main"
yuletide-grove-positioning = "yuletide.grove_positioning:main"
yuletide-proboscidea-volcanium = "yuletide.proboscidea_volcanium:main"
yuletide-not-enough-minerals = "yuletide.not_enough_minerals:main"
yuletide-monkey-math = "yuletide.monkey_math:main"
yuletide-unstable-diffusion = "yuletide.unstable_diffusion:main"
yuletide-blizzard-basin = "yuletide.blizzard_basin:main"
yuletide-pipe-maze = "yuletide.pipe_maze:main"
yuletide-lavaduct-lagoon = "yuletide.lavaduct_lagoon:main"
yuletide-lens-library = "yuletide.lens_library:main"
yuletide-cosmic-expansion = "yuletide.cosmic_expansion:main"
yuletide-hot-springs = "yuletide.hot_springs:main"
yuletide-point-of-incidence = "yuletide.point_of_incidence:main"
yuletide-reflector-dish = "yuletide.reflector_dish:main"

[tool.hatch.build.targets.wheel]
packages = ["yuletide"]

[tool.hatch.build.targets.sdist]
include = ["yuletide", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
