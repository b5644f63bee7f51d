"""Base class for a screen of the game."""

from __future__ import annotations

from abc import ABC, abstractmethod

from perfectform.textures import TextureManager


class Scene(ABC):
    """A self-contained screen that updates, reacts to events and draws itself."""

    def __init__(self, textures: TextureManager) -> None:
        self._textures = textures

    @property
    def textures(self) -> TextureManager:
        """The textures this scene draws with."""
        return self._textures

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError(f"{type(self).__name__} cannot be copied")

    @abstractmethod
    def update(self, step_ms: int) -> None:
        """Advance the scene by step_ms milliseconds."""

    @abstractmethod
    def handle_event(self, event) -> None:
        """React to an input event."""

    @abstractmethod
    def render(self) -> None:
        """Draw the scene."""