"""Shared command-line driver: read a puzzle input file, solve it, report timing."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable, Sequence


def _format_elapsed(seconds: float) -> str:
    if seconds >= 1.0:
        return f"{seconds:.3f}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.3f}ms"
    return f"{seconds * 1e6:.3f}µs"


def run(
    solver: Callable[[str], str | None],
    argv: Sequence[str] | None,
    default_path: str,
) -> int:
    """Solve the file named by the first argument (or ``default_path``).

    The solver receives the file's text and returns the report to print.
    A ``ValueError`` from the solver is reported as an error. Returns an
    exit status.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    path = args[0] if args else default_path
    try:
        with open(path, encoding="utf-8") as handle:
            content = handle.read()
    except (OSError, UnicodeDecodeError) as err:
        print(f"Cannot read '{path}': {err}")
        return 1

    start = time.perf_counter()
    status = 0
    try:
        report = solver(content)
    except ValueError as err:
        print(f"ERROR: {err}")
        status = 1
    else:
        if report:
            print(report)
    print(f"---\ntime: {_format_elapsed(time.perf_counter() - start)}")
    return status