"""Tests for fixed-width column centering and joining."""

from __future__ import annotations

import pytest

from ascii_weather.ui import columns


@pytest.mark.parametrize("text", ["", "a", "ab", "High 75", "Sunday October 13", "x" * 25])
def test_center_fills_width_and_keeps_text_contiguous(text: str) -> None:
    result = columns.center(text, 25)
    assert len(result) == 25
    assert text in result
    assert result.strip() == text.strip()


def test_center_puts_odd_leftover_space_on_the_right() -> None:
    assert columns.center("ab", 5) == " ab  "
    assert columns.center("abc", 6) == " abc  "


def test_center_clamps_negative_padding_for_oversized_text() -> None:
    text = "x" * 30
    assert columns.center(text, 25) == text


def test_center_uses_declared_width_over_text_length() -> None:
    result = columns.center("Unknown weather code", 25, display_width=1)
    assert result == " " * 12 + "Unknown weather code" + " " * 12


@pytest.mark.parametrize("count", [1, 2, 7])
def test_line_length_matches_columns_and_separators(count: int) -> None:
    items = [f"day {i}" for i in range(count)]
    result = columns.line(items, 25, str)
    assert len(result) == count * 25 + (count - 1) * 3
    assert result.count(" | ") == count - 1


def test_line_accepts_declared_width_pairs() -> None:
    result = columns.line([("abc", 1)], 5, lambda cell: cell)
    assert result == "  abc  "
