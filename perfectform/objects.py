"""Base class for everything drawn and updated in the game world."""

from __future__ import annotations

from abc import ABC, abstractmethod

import pygame

from perfectform.enums import PlayerIntention
from perfectform.exceptions import RenderError
from perfectform.textures import TextureManager


class GameObject(ABC):
    """A textured object with a position and a scale."""

    def __init__(self, texture_index: int, src_rect, position, size: float) -> None:
        self.texture_index = texture_index
        self.src_rect = pygame.Rect(src_rect)
        self.position = pygame.math.Vector2(position)
        self.size = float(size)

    @abstractmethod
    def update(self, step_ms: int) -> None:
        """Advance the object by step_ms milliseconds."""

    def handle_event(self, intention: PlayerIntention) -> None:
        """React to a player intention; ignored by default."""

    def should_remove(self) -> bool:
        """Whether the object should leave the world."""
        return False

    def spawn_child_object(self) -> GameObject | None:
        """Return a new object to add to the world, if any."""
        return None

    def destination_rect(self) -> tuple[float, float, float, float]:
        """Return (x, y, width, height) of the drawn area, centred on the position."""
        width = self.src_rect.width * self.size
        height = self.src_rect.height * self.size
        return (
            self.position.x - width / 2,
            self.position.y - height / 2,
            width,
            height,
        )

    def render(self, surface: pygame.Surface, textures: TextureManager) -> None:
        """Draw the object onto surface."""
        self._draw(surface, textures)

    def _draw(
        self, surface: pygame.Surface, textures: TextureManager, angle: float = 0.0
    ) -> None:
        texture = textures[self.texture_index]
        x, y, width, height = self.destination_rect()
        try:
            region = texture.surface.subsurface(self.src_rect)
            image = pygame.transform.scale(
                region, (max(0, round(width)), max(0, round(height)))
            )
            if angle:
                # Positive angles turn clockwise on screen.
                image = pygame.transform.rotate(image, -angle)
                centre = (x + width / 2, y + height / 2)
                target = image.get_rect(center=(round(centre[0]), round(centre[1])))
                surface.blit(image, target)
            else:
                surface.blit(image, (round(x), round(y)))
        except (pygame.error, ValueError) as exc:
            raise RenderError("Failed to render texture", str(exc)) from exc