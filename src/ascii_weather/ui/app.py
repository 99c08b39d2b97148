"""Interactive terminal loop: read a key, reduce, redraw."""

from __future__ import annotations

import logging
from collections.abc import Callable

import readchar
from rich.console import Console
from rich.live import Live
from rich.text import Text

from ..service import ForecastService
from .models import ViewState
from .renderer import ForecastRenderer
from .state import handle_key

PROMPT = (
    "Enter a city and state (e.g., Los Angeles, CA) to get weather "
    "or type 'quit' to exit: "
)


class TerminalApp:
    """Redraws the forecast view after every keypress until the user quits.

    Network lookups run synchronously inside :func:`handle_key`, so the view
    does not respond to input while a lookup is in flight.
    """

    def __init__(
        self,
        *,
        console: Console,
        renderer: ForecastRenderer,
        service: ForecastService,
        logger: logging.Logger,
        read_key: Callable[[], str] = readchar.readkey,
    ) -> None:
        self.console = console
        self.renderer = renderer
        self.service = service
        self.logger = logger
        self._read_key = read_key

    def view(self, state: ViewState) -> Text:
        current = state.current
        text = Text("\n", no_wrap=True, overflow="ignore")
        text.append_text(self.renderer.render_text(current.location, current.forecast))
        text.append("\n\n\n")
        text.append(PROMPT)
        text.append("\n")
        text.append(state.input)
        if state.message:
            text.append("\n")
            text.append(state.message, style=self.renderer.theme.message)
        return text

    def run(self, initial: ViewState) -> ViewState:
        state = initial
        self._log_forecast(state)
        with Live(
            self.view(state),
            console=self.console,
            auto_refresh=False,
            transient=False,
        ) as live:
            while not state.quit:
                try:
                    key = self._read_key()
                except KeyboardInterrupt:
                    key = readchar.key.CTRL_C
                previous = state.current
                state = handle_key(state, key, self.service)
                if state.current is not previous:
                    self._log_forecast(state)
                live.update(self.view(state), refresh=True)
        self.logger.info("Quit requested; exiting.")
        return state

    def _log_forecast(self, state: ViewState) -> None:
        location = state.current.location
        self.logger.info(
            "Showing %d-day forecast for %s, %s",
            len(state.current.forecast),
            location.city,
            location.region,
            extra={"latitude": location.latitude, "longitude": location.longitude},
        )
