"""Keystroke reducer for the interactive view: ``(state, key) -> state``."""

from __future__ import annotations

from typing import Protocol

from readchar import key as keys

from ..service import LocationForecast
from .models import ViewState

QUIT_COMMAND = "quit"
MISSING_STATE_MESSAGE = "Please enter both a city and a state (e.g., Los Angeles, CA)"

SUBMIT_KEYS = frozenset({keys.ENTER, keys.CR, keys.LF})
ERASE_KEYS = frozenset({keys.BACKSPACE, keys.CTRL_H})
INTERRUPT_KEYS = frozenset({keys.CTRL_C})


class CityStateLookup(Protocol):
    def for_city_state(self, city: str, state: str) -> LocationForecast: ...


def parse_city_state(text: str) -> tuple[str, str] | None:
    """Split ``"City, ST"``; anything after a second comma is ignored."""
    parts = text.split(",")
    if len(parts) < 2:
        return None
    return parts[0].strip(), parts[1].strip()


def is_quit(text: str) -> bool:
    return text.lower() == QUIT_COMMAND


def handle_key(state: ViewState, key: str, service: CityStateLookup) -> ViewState:
    """Apply one keypress. Only Enter on a city/state line touches the network."""
    if state.quit:
        return state
    if key in INTERRUPT_KEYS:
        return state.evolve(quit=True)
    if key in SUBMIT_KEYS:
        return submit(state, service)
    if key in ERASE_KEYS:
        return state.evolve(input=state.input[:-1])
    if len(key) == 1 and key.isprintable():
        return state.evolve(input=state.input + key)
    return state


def submit(state: ViewState, service: CityStateLookup) -> ViewState:
    if is_quit(state.input):
        return state.evolve(quit=True)

    parsed = parse_city_state(state.input)
    if parsed is None:
        return state.evolve(input="", message=MISSING_STATE_MESSAGE)

    city, region = parsed
    return ViewState(current=service.for_city_state(city, region))
