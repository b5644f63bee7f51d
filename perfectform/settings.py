"""Window, simulation and colour settings shared across the game."""

from __future__ import annotations

from typing import NamedTuple

DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = 720

SIMULATION_STEP_RATE_MS = 10

FULL_CHANNEL = 1.0
EMPTY_CHANNEL = 0.0
ALPHA_OPAQUE = 1.0

RED = (FULL_CHANNEL, EMPTY_CHANNEL, EMPTY_CHANNEL, ALPHA_OPAQUE)
GREEN = (EMPTY_CHANNEL, FULL_CHANNEL, EMPTY_CHANNEL, ALPHA_OPAQUE)
BLUE = (EMPTY_CHANNEL, EMPTY_CHANNEL, FULL_CHANNEL, ALPHA_OPAQUE)
BLACK = (EMPTY_CHANNEL, EMPTY_CHANNEL, EMPTY_CHANNEL, ALPHA_OPAQUE)


class Dimensions(NamedTuple):
    """Width and height of the window in pixels."""

    width: int
    height: int


_window = {"dimensions": Dimensions(DEFAULT_WIDTH, DEFAULT_HEIGHT)}


def window_dimensions() -> Dimensions:
    """Return the current window dimensions."""
    return _window["dimensions"]


def set_window_dimensions(dimensions: tuple[int, int]) -> None:
    """Record the actual window dimensions."""
    _window["dimensions"] = Dimensions(*dimensions)