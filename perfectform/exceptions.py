"""Errors raised by the game."""

from __future__ import annotations

import pygame


class GameError(RuntimeError):
    """A failure in the game's own logic."""


class RenderError(RuntimeError):
    """A failure reported by the graphics layer."""

    def __init__(self, message: str, detail: str | None = None) -> None:
        if detail is None:
            detail = pygame.get_error()
        self.message = message
        self.detail = detail
        super().__init__(f"SDL Exception: {message}\n  {detail}")