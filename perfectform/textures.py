"""Loading and keeping image textures."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import pygame

from perfectform.exceptions import RenderError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Texture:
    """An image loaded from a file, ready for drawing."""

    surface: pygame.Surface

    @classmethod
    def load(cls, file_path: str | Path) -> Texture:
        """Load an image file; a missing file raises FileNotFoundError."""
        canonical = Path(file_path).resolve(strict=True)
        try:
            surface = pygame.image.load(str(canonical))
        except pygame.error as exc:
            raise RenderError(f"Couldn't load image file: {file_path}", str(exc)) from exc

        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            try:
                surface = surface.convert_alpha()
            except pygame.error as exc:
                raise RenderError(
                    f"Couldn't create texture from surface: {file_path}", str(exc)
                ) from exc
        return cls(surface)


class TextureManager:
    """An indexed collection of loaded textures."""

    def __init__(self) -> None:
        self._textures: list[Texture] = []

    def add_texture(self, file_path: str | Path) -> int:
        """Load a texture and return its index."""
        self._textures.append(Texture.load(file_path))
        logger.info("Texture added from file: %s", file_path)
        return len(self._textures) - 1

    def __getitem__(self, index: int) -> Texture:
        if not 0 <= index < len(self._textures):
            raise IndexError("Texture index out of range")
        return self._textures[index]

    def __len__(self) -> int:
        return len(self._textures)