"""The game world: the player, its attacks and the input that drives them."""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

from perfectform.enums import PlayerIntention, to_string
from perfectform.objects import GameObject
from perfectform.player import Player, RandomSource
from perfectform.settings import DEFAULT_HEIGHT, DEFAULT_WIDTH
from perfectform.textures import TextureManager

logger = logging.getLogger(__name__)

PLAYER_TEXTURE_PATH = Path("assets") / "BaseCell_64x64.png"
PLAYER_SRC_WIDTH = 64
PLAYER_SRC_HEIGHT = 64
PLAYER_START_SIZE = 1.0

_KEY_DOWN_INTENTIONS = {
    pygame.K_UP: PlayerIntention.MOVE_UP,
    pygame.K_DOWN: PlayerIntention.MOVE_DOWN,
    pygame.K_LEFT: PlayerIntention.MOVE_LEFT,
    pygame.K_RIGHT: PlayerIntention.MOVE_RIGHT,
    pygame.K_q: PlayerIntention.ATTACK,
}

_KEY_UP_INTENTIONS = {
    pygame.K_UP: PlayerIntention.MOVE_STOP_UP,
    pygame.K_DOWN: PlayerIntention.MOVE_STOP_DOWN,
    pygame.K_LEFT: PlayerIntention.MOVE_STOP_LEFT,
    pygame.K_RIGHT: PlayerIntention.MOVE_STOP_RIGHT,
    pygame.K_q: PlayerIntention.ATTACK_STOP,
}


def _key_name(key) -> str:
    if key is None:
        return ""
    try:
        return pygame.key.name(key)
    except (pygame.error, TypeError, ValueError):
        return str(key)


def intention_from_event(event) -> PlayerIntention:
    """Translate a keyboard event into what the player intends to do."""
    if event.type == pygame.KEYDOWN:
        table = _KEY_DOWN_INTENTIONS
    elif event.type == pygame.KEYUP:
        table = _KEY_UP_INTENTIONS
    else:
        return PlayerIntention.NONE

    key = getattr(event, "key", None)
    intention = table.get(key, PlayerIntention.NONE)
    logger.info(
        "Player intention: %s - from event: %s | 0x%x",
        to_string(intention),
        _key_name(key),
        event.type,
    )
    return intention


class Game:
    """Owns the textures and every object in the world."""

    def __init__(
        self,
        texture_path: str | Path = PLAYER_TEXTURE_PATH,
        *,
        rng: RandomSource | None = None,
    ) -> None:
        self._textures = TextureManager()
        self._objects: list[GameObject] = []
        self._player = self._create_player(texture_path, rng)

    def _create_player(self, texture_path: str | Path, rng: RandomSource | None) -> Player:
        src_rect = (0, 0, PLAYER_SRC_WIDTH, PLAYER_SRC_HEIGHT)
        position = (DEFAULT_WIDTH / 2.0, DEFAULT_HEIGHT / 2.0)
        texture_index = self._textures.add_texture(texture_path)
        player = Player(texture_index, src_rect, position, PLAYER_START_SIZE, rng=rng)
        self._objects.append(player)
        return player

    @property
    def textures(self) -> TextureManager:
        """The textures loaded for this game."""
        return self._textures

    @property
    def player(self) -> Player:
        """The player-controlled object."""
        return self._player

    @property
    def objects(self) -> tuple[GameObject, ...]:
        """Every object currently in the world, in update order."""
        return tuple(self._objects)

    def update(self, step_ms: int) -> None:
        """Advance all objects, drop finished ones and add newly spawned ones."""
        for obj in self._objects:
            obj.update(step_ms)

        self._objects = [obj for obj in self._objects if not obj.should_remove()]

        spawned = [obj.spawn_child_object() for obj in self._objects]
        self._objects.extend(child for child in spawned if child is not None)

    def handle_event(self, event) -> None:
        """Pass the intention behind an input event to every object."""
        intention = intention_from_event(event)
        for obj in self._objects:
            obj.handle_event(intention)

    def render(self, surface: pygame.Surface) -> None:
        """Draw every object onto surface."""
        for obj in self._objects:
            obj.render(surface, self._textures)