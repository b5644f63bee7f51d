"""Application loop: window setup, fixed-step simulation and drawing."""

from __future__ import annotations

import argparse
import enum
import logging
from dataclasses import dataclass

import pygame

from perfectform.exceptions import RenderError
from perfectform.game import PLAYER_TEXTURE_PATH, Game
from perfectform.settings import (
    BLACK,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    SIMULATION_STEP_RATE_MS,
    set_window_dimensions,
)

logger = logging.getLogger(__name__)

APP_NAME = "Perfect Form"
APP_VERSION = "0.1"


class AppResult(enum.Enum):
    """Whether the application keeps running, and how it ended."""

    CONTINUE = enum.auto()
    SUCCESS = enum.auto()
    FAILURE = enum.auto()


def _report(exc: BaseException) -> AppResult:
    logger.error("%s", exc)
    return AppResult.FAILURE


def _to_rgb(colour: tuple[float, float, float, float]) -> tuple[int, int, int]:
    return tuple(round(channel * 255) for channel in colour[:3])


@dataclass
class App:
    """A running game bound to the surface it draws on."""

    surface: pygame.Surface
    game: Game
    last_step: int = 0

    def _is_display(self) -> bool:
        return pygame.display.get_init() and pygame.display.get_surface() is self.surface

    def iterate(self, now: int) -> AppResult:
        """Run any due simulation steps up to now (ms), then draw a frame."""
        try:
            while now - self.last_step >= SIMULATION_STEP_RATE_MS:
                self.game.update(now - self.last_step)
                self.last_step += SIMULATION_STEP_RATE_MS

            try:
                self.surface.fill(_to_rgb(BLACK))
            except pygame.error as exc:
                raise RenderError("Failed to clear renderer.", str(exc)) from exc

            self.game.render(self.surface)

            if self._is_display():
                try:
                    pygame.display.flip()
                except pygame.error as exc:
                    raise RenderError("Failed to present renderer.", str(exc)) from exc
        except Exception as exc:  # noqa: BLE001 - any failure ends the app
            return _report(exc)
        return AppResult.CONTINUE

    def handle_event(self, event) -> AppResult:
        """Stop on a quit event; otherwise hand the event to the game."""
        if event.type == pygame.QUIT:
            return AppResult.SUCCESS
        try:
            self.game.handle_event(event)
        except Exception as exc:  # noqa: BLE001 - any failure ends the app
            return _report(exc)
        return AppResult.CONTINUE


def _create_app(texture_path) -> App:
    pygame.init()
    if not pygame.display.get_init():
        raise RenderError("Couldn't initialize SDL.")
    try:
        surface = pygame.display.set_mode((DEFAULT_WIDTH, DEFAULT_HEIGHT))
    except pygame.error as exc:
        raise RenderError("Failed to create window and renderer.", str(exc)) from exc
    pygame.display.set_caption(APP_NAME)
    set_window_dimensions(surface.get_size())

    game = Game(texture_path)
    app = App(surface, game, pygame.time.get_ticks())
    logger.info("Application initialized successfully.")
    return app


def _run(app: App) -> AppResult:
    result = AppResult.CONTINUE
    while result is AppResult.CONTINUE:
        for event in pygame.event.get():
            result = app.handle_event(event)
            if result is not AppResult.CONTINUE:
                break
        else:
            result = app.iterate(pygame.time.get_ticks())
    return result


def main(argv=None) -> int:
    """Start the game window; return 0 on a normal quit, 1 on failure."""
    parser = argparse.ArgumentParser(prog="perfectform", description=f"{APP_NAME} {APP_VERSION}")
    parser.add_argument(
        "--texture",
        default=str(PLAYER_TEXTURE_PATH),
        help="image used for the player cell",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    try:
        try:
            app = _create_app(args.texture)
        except Exception as exc:  # noqa: BLE001 - report and fail
            result = _report(exc)
        else:
            result = _run(app)
    finally:
        pygame.quit()
        logger.info("Application quit successfully.")
    return 0 if result is AppResult.SUCCESS else 1