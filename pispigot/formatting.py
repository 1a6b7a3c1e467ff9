"""
Caller-side helpers for realising and laying out digit streams.
"""

from __future__ import annotations

from itertools import islice
from typing import Iterable, List


def take(source: Iterable[str], count: int) -> str:
    """
    Realise the next ``count`` characters of ``source`` as a string.
    """

    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    return "".join(islice(source, count))


def format_digits(text: str, group_size: int = 10, groups_per_line: int = 0) -> str:
    """
    Split the fractional digits of ``text`` into space separated groups.

    The integer part and the decimal point are left alone.  When
    ``groups_per_line`` is positive the groups wrap onto further lines that
    are indented to line up with the first fractional digit.
    """

    if group_size < 0 or groups_per_line < 0:
        raise ValueError("group_size and groups_per_line must be non-negative")

    head, point, fraction = text.partition(".")
    if not point or group_size == 0:
        return text

    groups = [fraction[i : i + group_size] for i in range(0, len(fraction), group_size)]
    if groups_per_line == 0:
        return f"{head}{point}{' '.join(groups)}"

    indent = " " * (len(head) + len(point))
    lines: List[str] = []
    for i in range(0, len(groups), groups_per_line):
        prefix = f"{head}{point}" if not lines else indent
        lines.append(prefix + " ".join(groups[i : i + groups_per_line]))
    if not lines:
        lines.append(f"{head}{point}")
    return "\n".join(lines)
