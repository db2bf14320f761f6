"""Lens library: the HASH algorithm and the lens-arranging HASHMAP procedure."""

from __future__ import annotations

from yuletide.runner import run

BOX_COUNT = 256


def holiday_hash(text: str) -> int:
    """Hash a string to 0..255, ignoring newlines."""
    value = 0
    for byte in text.encode("utf-8"):
        if byte != ord("\n"):
            value = (value + byte) * 17 % BOX_COUNT
    return value


def _steps(content: str) -> list[str]:
    return content.strip().split(",")


def arrange_lenses(content: str) -> list[dict[str, int]]:
    """Apply every step; each box maps lens labels to focal lengths in slot order."""
    boxes: list[dict[str, int]] = [{} for _ in range(BOX_COUNT)]
    for step in _steps(content):
        if step.endswith("-"):
            label = step[:-1]
            boxes[holiday_hash(label)].pop(label, None)
            continue
        label, sep, focal = step.partition("=")
        if not sep:
            raise ValueError(f"malformed step: {step!r}")
        try:
            length = int(focal)
        except ValueError:
            raise ValueError(f"bad focal length in {step!r}") from None
        if not 0 <= length <= 255:
            raise ValueError(f"focal length out of range in {step!r}")
        # Updating an existing key keeps its slot; a new key goes to the back.
        boxes[holiday_hash(label)][label] = length
    return boxes


def part1(content: str) -> int:
    """Sum of the hashes of every step."""
    return sum(holiday_hash(step) for step in _steps(content))


def part2(content: str) -> int:
    """Total focusing power of the lenses after arranging them."""
    return sum(
        box_n * slot * length
        for box_n, box in enumerate(arrange_lenses(content), 1)
        for slot, length in enumerate(box.values(), 1)
    )


def _report(content: str) -> str:
    lines = [f"step='{step}', hash={holiday_hash(step)}" for step in _steps(content)]
    lines.append(f"sum = {part1(content)}")
    lines.append(f"focusing power = {part2(content)}")
    return "\n".join(lines)


def main(argv=None) -> int:
    return run(_report, argv, "input1.txt")