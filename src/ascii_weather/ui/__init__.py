"""Terminal presentation: column layout, forecast strip, interactive loop."""

from .app import TerminalApp
from .models import RenderTheme, ViewState
from .renderer import ForecastRenderer, format_date

__all__ = ["ForecastRenderer", "RenderTheme", "TerminalApp", "ViewState", "format_date"]
