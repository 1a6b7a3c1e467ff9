import pytest

from pispigot import PiDigits
from pispigot.formatting import format_digits, take


def test_take_consumes_from_shared_iterator() -> None:
    engine = PiDigits()
    assert take(engine, 3) == "3.1"
    assert take(engine, 3) == "415"
    assert engine.position == 6


def test_take_rejects_negative_count() -> None:
    with pytest.raises(ValueError):
        take(PiDigits(), -1)


def test_format_groups_fraction_only() -> None:
    assert format_digits("3.14159265358979", group_size=5) == "3.14159 26535 8979"


def test_format_wraps_lines_with_indent() -> None:
    text = "3.141592653589793238"
    formatted = format_digits(text, group_size=3, groups_per_line=2)
    assert formatted.splitlines() == [
        "3.141 592",
        "  653 589",
        "  793 238",
    ]


def test_format_leaves_text_without_fraction_alone() -> None:
    assert format_digits("3", group_size=4) == "3"
    assert format_digits("", group_size=4) == ""
    assert format_digits("3.", group_size=4, groups_per_line=2) == "3."


def test_format_group_size_zero_disables_grouping() -> None:
    assert format_digits("3.14159", group_size=0, groups_per_line=3) == "3.14159"


def test_format_rejects_negative_layout() -> None:
    with pytest.raises(ValueError):
        format_digits("3.14", group_size=-1)
