"""The player-controlled cell and the attacks it throws."""

from __future__ import annotations

import enum
import math
import random
from typing import Protocol

import pygame

from perfectform.enums import PlayerIntention
from perfectform.exceptions import GameError
from perfectform.objects import GameObject
from perfectform.textures import TextureManager

ANGLE_INCREMENT = 0.0007
ATTACK_ANGLE_INCREMENT = 0.005
SCALE_FACTOR = 0.05
SCALE_ANGLE_MULTIPLIER = 7.0
VELOCITY = 2.0
MIN_VELOCITY_THRESHOLD = 0.001
ATTACK_SIZE_FACTOR = 0.3333
ATTACK_VELOCITY_MULTIPLIER = 2.0
ATTACK_DECELERATION = 0.025
COS_ANGLE_MULTIPLIER = 1.33
POSITION_OFFSET = 0.5
ATTACK_SIZE_OSCILLATION = 0.005
ATTACK_SIZE_DECAY = 0.00005
MIN_ATTACK_SIZE = 0.02
DIAGONAL_FACTOR = 0.7071  # 1/sqrt(2) for diagonal movement
ATTACK_COOLDOWN_MS = 100
DEFAULT_DECELERATION = 0.025


class RandomSource(Protocol):
    """Anything that yields floats in [0, 1) from random()."""

    def random(self) -> float: ...


class _State(enum.Enum):
    """Movement states carry their (dx, dy) direction; ATTACKING is an action."""

    IDLE = (0, 0)
    MOVING_UP = (0, -1)
    MOVING_DOWN = (0, 1)
    MOVING_LEFT = (-1, 0)
    MOVING_RIGHT = (1, 0)
    MOVING_UP_LEFT = (-1, -1)
    MOVING_UP_RIGHT = (1, -1)
    MOVING_DOWN_LEFT = (-1, 1)
    MOVING_DOWN_RIGHT = (1, 1)
    ATTACKING = "attacking"


def _velocity_for(state: _State) -> pygame.math.Vector2:
    if not isinstance(state.value, tuple):
        raise GameError("Invalid player movement state")
    dx, dy = state.value
    speed = VELOCITY * DIAGONAL_FACTOR if dx and dy else VELOCITY
    return pygame.math.Vector2(dx * speed, dy * speed)


class Player(GameObject):
    """The cell the player steers around and attacks with."""

    def __init__(
        self,
        texture_index: int,
        src_rect,
        position,
        size: float,
        *,
        rng: RandomSource | None = None,
    ) -> None:
        super().__init__(texture_index, src_rect, position, size)
        self._rng: RandomSource = rng if rng is not None else random
        self._clock = 0
        self._movement_state = _State.IDLE
        self._action_state = _State.IDLE
        self._need_to_spawn_attack = False
        self._last_attack_time = 0
        self.angle = 0.0
        self.velocity = pygame.math.Vector2(0.0, 0.0)
        self.last_velocity = pygame.math.Vector2(0.0, 0.0)

    def update(self, step_ms: int) -> None:
        """Advance movement, attack timing and pulsing size by step_ms."""
        self._clock += step_ms

        if self._movement_state is _State.IDLE:
            if self.velocity.length_squared() >= VELOCITY:
                self.last_velocity = pygame.math.Vector2(self.velocity)
            self.velocity = pygame.math.Vector2(0.0, 0.0)
        else:
            self.velocity = _velocity_for(self._movement_state)

        if self._action_state is _State.IDLE:
            self._need_to_spawn_attack = False
            self._last_attack_time = 0
        elif self._action_state is _State.ATTACKING:
            self._need_to_spawn_attack = (
                self._clock - self._last_attack_time >= ATTACK_COOLDOWN_MS
            )
        else:
            raise GameError("Invalid player action state")

        self.angle += step_ms * ANGLE_INCREMENT
        self.position += self.velocity
        self.size = 1.0 + math.sin(self.angle * SCALE_ANGLE_MULTIPLIER) * SCALE_FACTOR

    def _direction(self) -> tuple[int, int]:
        value = self._movement_state.value
        return value if isinstance(value, tuple) else (0, 0)

    def is_moving_up(self) -> bool:
        return self._direction()[1] < 0

    def is_moving_down(self) -> bool:
        return self._direction()[1] > 0

    def is_moving_left(self) -> bool:
        return self._direction()[0] < 0

    def is_moving_right(self) -> bool:
        return self._direction()[0] > 0

    def _set_vertical(self, dy: int) -> None:
        dx, _ = self._direction()
        self._movement_state = _State((dx, dy))

    def _set_horizontal(self, dx: int) -> None:
        _, dy = self._direction()
        self._movement_state = _State((dx, dy))

    def handle_event(self, intention: PlayerIntention) -> None:
        """Change movement or attack state according to the intention."""
        match intention:
            case PlayerIntention.ATTACK:
                self._action_state = _State.ATTACKING
            case PlayerIntention.ATTACK_STOP:
                self._action_state = _State.IDLE
            case PlayerIntention.MOVE_UP:
                self._set_vertical(-1)
            case PlayerIntention.MOVE_DOWN:
                self._set_vertical(1)
            case PlayerIntention.MOVE_LEFT:
                self._set_horizontal(-1)
            case PlayerIntention.MOVE_RIGHT:
                self._set_horizontal(1)
            case PlayerIntention.MOVE_STOP_UP | PlayerIntention.MOVE_STOP_DOWN:
                self._set_vertical(0)
            case PlayerIntention.MOVE_STOP_LEFT | PlayerIntention.MOVE_STOP_RIGHT:
                self._set_horizontal(0)
            case _:
                pass

    def spawn_child_object(self) -> GameObject | None:
        """Return a new Attack when one is due, otherwise None."""
        if not self._need_to_spawn_attack:
            return None
        self._need_to_spawn_attack = False
        self._last_attack_time = self._clock
        return self._spawn_attack()

    def _spawn_attack(self) -> Attack:
        velocity = pygame.math.Vector2(self.velocity)
        if velocity.length_squared() < MIN_VELOCITY_THRESHOLD:
            velocity = pygame.math.Vector2(self.last_velocity)

        attack = Attack(
            self.texture_index,
            self.src_rect,
            self.position,
            self.size * ATTACK_SIZE_FACTOR,
            rng=self._rng,
        )
        velocity.x *= ATTACK_VELOCITY_MULTIPLIER * (0.6 + self._rng.random() * 0.4)
        velocity.y *= ATTACK_VELOCITY_MULTIPLIER * (0.6 + self._rng.random() * 0.4)
        attack.velocity = velocity
        return attack


class Attack(GameObject):
    """A spinning, shrinking projectile thrown by the player."""

    def __init__(
        self,
        texture_index: int,
        src_rect,
        position,
        size: float,
        *,
        velocity=(0.0, 0.0),
        rng: RandomSource | None = None,
    ) -> None:
        super().__init__(texture_index, src_rect, position, size)
        self._rng: RandomSource = rng if rng is not None else random
        self.angle = 0.0
        self.velocity = pygame.math.Vector2(velocity)
        self.deceleration = DEFAULT_DECELERATION

    @staticmethod
    def _decelerate(component: float, amount: float) -> float:
        if component > MIN_VELOCITY_THRESHOLD:
            return component - amount
        if component < -MIN_VELOCITY_THRESHOLD:
            return component + amount
        return 0.0

    def update(self, step_ms: int) -> None:
        """Wobble along the velocity, slow down and shrink."""
        self.angle += step_ms * ATTACK_ANGLE_INCREMENT * self._rng.random()
        sin_angle = math.sin(self.angle)
        cos_angle = math.cos(COS_ANGLE_MULTIPLIER * self.angle)

        self.position.x += self.velocity.x * (1 + sin_angle) + POSITION_OFFSET * sin_angle
        self.position.y += self.velocity.y * (1 + cos_angle) + POSITION_OFFSET * cos_angle

        self.velocity.x = self._decelerate(self.velocity.x, self.deceleration)
        self.velocity.y = self._decelerate(self.velocity.y, self.deceleration)

        self.size = (
            self.size
            + math.sin(self.angle * 3) * ATTACK_SIZE_OSCILLATION
            - ATTACK_SIZE_DECAY * self.angle
        )

    def should_remove(self) -> bool:
        return self.size < MIN_ATTACK_SIZE

    def render(self, surface: pygame.Surface, textures: TextureManager) -> None:
        """Draw the attack rotated by its current angle."""
        self._draw(surface, textures, angle=self.angle * 180.0)