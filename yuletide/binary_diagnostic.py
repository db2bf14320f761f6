"""Binary diagnostic: power consumption and life-support ratings."""

from __future__ import annotations

from yuletide.runner import run


def _lines(content: str) -> list[str]:
    return content.rstrip().splitlines()


def power_rates(content: str) -> tuple[int, int]:
    """Return (gamma, epsilon) from the most and least common bit in each column."""
    lines = _lines(content)
    counts: dict[int, int] = {}
    for line in lines:
        for bit, ch in enumerate(reversed(line)):
            if ch == "1":
                counts[bit] = counts.get(bit, 0) + 1
    width = len(lines[-1]) if lines else 0
    gamma = epsilon = 0
    for bit in range(width):
        if counts.get(bit, 0) * 2 >= len(lines):
            gamma |= 1 << bit
        else:
            epsilon |= 1 << bit
    return gamma, epsilon


def _narrow(values: list[int], bit: int, most_common: bool) -> list[int]:
    if len(values) <= 1:
        return values
    balance = sum(1 if (value >> bit) & 1 else -1 for value in values)
    wanted = int(balance >= 0) if most_common else int(balance < 0)
    return [value for value in values if (value >> bit) & 1 == wanted]


def life_support_ratings(content: str) -> tuple[int, int]:
    """Return (oxygen generator rating, CO2 scrubber rating)."""
    values = [
        sum(1 << bit for bit, ch in enumerate(reversed(line)) if ch == "1")
        for line in _lines(content)
    ]
    if not values or max(values) == 0:
        raise ValueError("no set bits in the diagnostic report")
    oxygen = co2 = values
    for bit in range(max(values).bit_length() - 1, -1, -1):
        oxygen = _narrow(oxygen, bit, most_common=True)
        co2 = _narrow(co2, bit, most_common=False)
    if not oxygen or not co2:
        raise ValueError("bit criteria eliminated every value")
    return oxygen[0], co2[0]


def _report(content: str) -> str:
    gamma, epsilon = power_rates(content)
    oxygen, co2 = life_support_ratings(content)
    return (
        f"gamma=={gamma}, epsilon=={epsilon}, product=={gamma * epsilon}\n"
        f"oxygen=={oxygen}, co2=={co2}, life_support_rating=={oxygen * co2}"
    )


def main(argv=None) -> int:
    return run(_report, argv, "../inputs/day03_input.txt")