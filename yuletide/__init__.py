"""Solvers for a collection of Advent-style programming puzzles, one module per puzzle."""

__version__ = "0.1.0"