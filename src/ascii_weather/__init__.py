"""Terminal multi-day weather forecast with ASCII-art weather glyphs."""

__version__ = "0.1.0"
