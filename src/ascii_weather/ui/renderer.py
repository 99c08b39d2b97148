"""ASCII forecast strip: one fixed-width column per forecast day."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from typing import NamedTuple

from rich.text import Text

from ..location import Location
from ..weather import codes
from ..weather.models import DailyForecast, ForecastSet, parse_day
from . import columns
from .models import RenderTheme

DEFAULT_COLUMN_WIDTH = 25


class _Cell(NamedTuple):
    text: str
    width: int
    style: str | None = None


def format_day(day: date | None) -> str:
    if day is None:
        return ""
    return f"{day:%A} {day:%B} {day.day}"


def format_date(date_text: str) -> str:
    """``"2024-10-13"`` -> ``"Sunday October 13"``; anything not ``YYYY-MM-DD`` -> ``""``."""
    return format_day(parse_day(date_text))


def _format_temperature(label: str, value: float | None) -> str:
    if value is None:
        return f"{label} --"
    return f"{label} {value:.0f}"


class ForecastRenderer:
    """Lay out a :class:`ForecastSet` as nine aligned text rows plus a header.

    Row order: dates, blank, three glyph rows, blank, description, highs, lows.
    Glyph rows are centered on the catalog's declared width, not their
    actual length.
    """

    def __init__(
        self,
        *,
        width: int = DEFAULT_COLUMN_WIDTH,
        theme: RenderTheme | None = None,
    ) -> None:
        self.width = width
        self.theme = theme or RenderTheme()

    def header_lines(self, location: Location) -> list[str]:
        return [
            f"Weather for {location.city}, {location.region}",
            f"Latitude: {location.latitude}, Longitude: {location.longitude}",
        ]

    def render(self, location: Location, forecast: ForecastSet) -> str:
        """Header, a blank line, then the forecast block, as plain text."""
        return "\n".join([*self.header_lines(location), "", self.render_block(forecast.days)])

    def render_block(self, days: Sequence[DailyForecast]) -> str:
        return "\n".join(
            columns.line(row, self.width, lambda cell: (cell.text, cell.width))
            for row in self._rows(days)
        )

    def render_text(self, location: Location, forecast: ForecastSet) -> Text:
        """Styled equivalent of :meth:`render`; ``.plain`` matches it exactly."""
        text = Text(no_wrap=True, overflow="ignore")
        for header in self.header_lines(location):
            text.append(header, style=self.theme.title)
            text.append("\n")
        text.append("\n")
        for index, row in enumerate(self._rows(forecast.days)):
            if index:
                text.append("\n")
            for position, cell in enumerate(row):
                if position:
                    text.append(columns.SEPARATOR)
                left, right = columns.pad_widths(cell.width, self.width)
                text.append(" " * left)
                text.append(cell.text, style=cell.style)
                text.append(" " * right)
        return text

    def _rows(self, days: Sequence[DailyForecast]) -> list[list[_Cell]]:
        blank = [_Cell("", 0) for _ in days]
        return [
            [self._plain(format_day(day.day)) for day in days],
            blank,
            *(
                [self._glyph(day.weather_code, row) for day in days]
                for row in range(1, codes.GLYPH_ROWS + 1)
            ),
            blank,
            [self._plain(codes.description(day.weather_code)) for day in days],
            [self._plain(_format_temperature("High", day.temperature_max)) for day in days],
            [self._plain(_format_temperature("Low", day.temperature_min)) for day in days],
        ]

    @staticmethod
    def _plain(text: str) -> _Cell:
        return _Cell(text, len(text))

    def _glyph(self, code: int | None, row: int) -> _Cell:
        text, declared = codes.glyph_row(code, row)
        style = self.theme.glyph_style(codes.weather_class(code), row)
        return _Cell(text, declared, style)
