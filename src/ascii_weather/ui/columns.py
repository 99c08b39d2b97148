"""Fixed-width column helpers for the forecast strip."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

T = TypeVar("T")

SEPARATOR = " | "

CellText = str | tuple[str, int]


def pad_widths(size: int, width: int) -> tuple[int, int]:
    """Left/right space counts that center ``size`` characters in ``width``.

    An odd leftover space goes on the right. Both counts are clamped to zero
    when ``size`` exceeds ``width``.
    """
    left = max((width - size) // 2, 0)
    right = max(width - size - left, 0)
    return left, right


def center(text: str, width: int, display_width: int | None = None) -> str:
    """Center ``text`` in ``width`` columns.

    ``display_width`` overrides ``len(text)`` in the padding math; the weather
    glyph rows rely on that.
    """
    size = len(text) if display_width is None else display_width
    left, right = pad_widths(size, width)
    return " " * left + text + " " * right


def line(items: Iterable[T], width: int, to_text: Callable[[T], CellText]) -> str:
    """Center each item's text in its own column and join with ``" | "``."""
    chunks: list[str] = []
    for item in items:
        cell = to_text(item)
        if isinstance(cell, tuple):
            text, display_width = cell
            chunks.append(center(text, width, display_width))
        else:
            chunks.append(center(cell, width))
    return SEPARATOR.join(chunks)
