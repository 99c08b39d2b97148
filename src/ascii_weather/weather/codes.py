"""Weather code lookup tables: descriptions and three-row ASCII glyphs."""

from __future__ import annotations

from enum import Enum

UNKNOWN_DESCRIPTION = "Unknown weather code"
UNKNOWN_GLYPH_WIDTH = 1


class WeatherClass(str, Enum):
    SUNNY = "Sunny"
    CLOUDY = "Cloudy"
    FOG = "Fog"
    RAIN = "Rain"
    SNOW = "Snow"
    THUNDERSTORM = "Thunderstorm"


_CLASS_CODES: dict[WeatherClass, frozenset[int]] = {
    WeatherClass.SUNNY: frozenset({0}),
    WeatherClass.CLOUDY: frozenset({1, 2, 3}),
    WeatherClass.FOG: frozenset({45, 48}),
    WeatherClass.RAIN: frozenset(
        {51, 53, 55, 56, 57, 61, 63, 65, 66, 67, 80, 81, 82}
    ),
    WeatherClass.SNOW: frozenset({71, 73, 75, 77, 85, 86}),
    WeatherClass.THUNDERSTORM: frozenset({95, 96, 99}),
}

_CODE_INDEX: dict[int, WeatherClass] = {
    code: weather_class
    for weather_class, codes in _CLASS_CODES.items()
    for code in codes
}

# (text, declared display width). The declared width drives centering even
# where it disagrees with len(text).
_GLYPHS: dict[WeatherClass, tuple[tuple[str, int], ...]] = {
    WeatherClass.SUNNY: (
        ("\\ | /", len("\\ | /")),
        ("-- O --", len("-- O --")),
        ("/ | \\", len("/ | \\")),
    ),
    WeatherClass.CLOUDY: (
        ("  ____", len("    __")),
        ("_(    )", len("   (  )")),
        ("(____)___)", len("(____)___)")),
    ),
    WeatherClass.FOG: (
        ("o o o", len("o o o")),
        ("o o o o", len("o o o o")),
        ("o o o", len("o o o")),
    ),
    WeatherClass.RAIN: (
        ("/ / /", len("/ / /")),
        ("/ / / /", len("/ / / /")),
        ("/ /  /", len("/ /  /")),
    ),
    WeatherClass.SNOW: (
        ("* * * *", len("* * * *")),
        (" * * *", len(" * * *")),
        ("* * * *", len("* * * *")),
    ),
    WeatherClass.THUNDERSTORM: (
        ("(   ( )", len("(   ( )")),
        ("(   (   )", len("(   (   )")),
        ("/ / / /", len("/ / / /")),
    ),
}

GLYPH_ROWS = 3


def weather_class(code: int | None) -> WeatherClass | None:
    """Return the class bucket for ``code``, or None when it is not catalogued."""
    if code is None:
        return None
    return _CODE_INDEX.get(code)


def description(code: int | None) -> str:
    """Human-readable label for a weather code."""
    bucket = weather_class(code)
    if bucket is None:
        return UNKNOWN_DESCRIPTION
    return bucket.value


def glyph_row(code: int | None, row: int) -> tuple[str, int]:
    """Return one pictogram row (1-based) and its declared display width."""
    if not 1 <= row <= GLYPH_ROWS:
        return "Unkown", 9
    bucket = weather_class(code)
    if bucket is None:
        return UNKNOWN_DESCRIPTION, UNKNOWN_GLYPH_WIDTH
    return _GLYPHS[bucket][row - 1]
