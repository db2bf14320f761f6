"""SNAFU numbers: balanced base five with digits = - 0 1 2."""

from __future__ import annotations

from yuletide.runner import run

_DIGITS = "=-012"
_VALUES = {digit: value - 2 for value, digit in enumerate(_DIGITS)}


def snafu_to_int(text: str) -> int:
    """Convert a SNAFU numeral to an integer."""
    number = 0
    for ch in text:
        try:
            number = number * 5 + _VALUES[ch]
        except KeyError:
            raise ValueError(f"invalid SNAFU digit {ch!r} in {text!r}") from None
    return number


def int_to_snafu(number: int) -> str:
    """Convert a positive integer to SNAFU; non-positive values give an empty string."""
    digits = []
    while number > 0:
        number, remainder = divmod(number + 2, 5)
        digits.append(_DIGITS[remainder])
    return "".join(reversed(digits))


def total(content: str) -> int:
    """Sum the SNAFU numerals given one per line."""
    return sum(snafu_to_int(line) for line in content.rstrip().splitlines())


def _report(content: str) -> str:
    value = total(content)
    return f"Decimal: {value}\nSNAFU: {int_to_snafu(value)}"


def main(argv=None) -> int:
    return run(_report, argv, "input1.txt")