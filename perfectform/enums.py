"""Player intentions derived from input events."""

from __future__ import annotations

import enum

UNKNOWN_INTENTION_NAME = "UNKNOWN_PLAYER_INTENTION"


class PlayerIntention(enum.Enum):
    """What the player wants to do, independent of the input device."""

    NONE = enum.auto()
    MOVE_UP = enum.auto()
    MOVE_DOWN = enum.auto()
    MOVE_LEFT = enum.auto()
    MOVE_RIGHT = enum.auto()
    MOVE_STOP_UP = enum.auto()
    MOVE_STOP_DOWN = enum.auto()
    MOVE_STOP_LEFT = enum.auto()
    MOVE_STOP_RIGHT = enum.auto()
    ATTACK = enum.auto()
    ATTACK_STOP = enum.auto()

    def __str__(self) -> str:
        return self.name


def to_string(intention: object) -> str:
    """Return the name of an intention, or a marker for anything unknown."""
    if isinstance(intention, PlayerIntention):
        return intention.name
    return UNKNOWN_INTENTION_NAME