import random

import pygame
import pytest

from perfectform.enums import PlayerIntention
from perfectform.game import Game, intention_from_event
from perfectform.player import Attack, Player

RED = (255, 0, 0)


@pytest.fixture
def texture_file(tmp_path):
    image = pygame.Surface((64, 64))
    image.fill(RED)
    path = tmp_path / "cell.bmp"
    pygame.image.save(image, str(path))
    return path


@pytest.fixture
def game(texture_file):
    return Game(texture_file, rng=random.Random(7))


def key_event(kind, key):
    return pygame.event.Event(kind, key=key)


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        (pygame.K_UP, PlayerIntention.MOVE_UP),
        (pygame.K_DOWN, PlayerIntention.MOVE_DOWN),
        (pygame.K_LEFT, PlayerIntention.MOVE_LEFT),
        (pygame.K_RIGHT, PlayerIntention.MOVE_RIGHT),
        (pygame.K_q, PlayerIntention.ATTACK),
        (pygame.K_a, PlayerIntention.NONE),
    ],
)
def test_key_down_intentions(key, expected):
    assert intention_from_event(key_event(pygame.KEYDOWN, key)) is expected


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        (pygame.K_UP, PlayerIntention.MOVE_STOP_UP),
        (pygame.K_DOWN, PlayerIntention.MOVE_STOP_DOWN),
        (pygame.K_LEFT, PlayerIntention.MOVE_STOP_LEFT),
        (pygame.K_RIGHT, PlayerIntention.MOVE_STOP_RIGHT),
        (pygame.K_q, PlayerIntention.ATTACK_STOP),
        (pygame.K_a, PlayerIntention.NONE),
    ],
)
def test_key_up_intentions(key, expected):
    assert intention_from_event(key_event(pygame.KEYUP, key)) is expected


def test_non_key_event_has_no_intention():
    event = pygame.event.Event(pygame.MOUSEMOTION, pos=(1, 2))
    assert intention_from_event(event) is PlayerIntention.NONE


def test_game_starts_with_player_in_window_centre(game):
    assert len(game.objects) == 1
    assert isinstance(game.objects[0], Player)
    assert game.player is game.objects[0]
    assert (game.player.position.x, game.player.position.y) == (640.0, 360.0)
    assert len(game.textures) == 1


def test_missing_texture_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Game(tmp_path / "absent.png")


def test_key_events_reach_player(game):
    game.handle_event(key_event(pygame.KEYDOWN, pygame.K_UP))
    game.handle_event(key_event(pygame.KEYDOWN, pygame.K_LEFT))
    assert game.player.is_moving_up()
    assert game.player.is_moving_left()
    game.handle_event(key_event(pygame.KEYUP, pygame.K_UP))
    assert not game.player.is_moving_up()
    assert game.player.is_moving_left()


def test_moving_player_changes_position(game):
    start_y = game.player.position.y
    game.handle_event(key_event(pygame.KEYDOWN, pygame.K_DOWN))
    game.update(10)
    assert game.player.position.y > start_y


def test_attack_spawns_after_cooldown(game):
    game.handle_event(key_event(pygame.KEYDOWN, pygame.K_q))
    game.update(10)
    assert len(game.objects) == 1
    game.update(100)
    assert len(game.objects) == 2
    assert game.objects[0] is game.player
    assert isinstance(game.objects[1], Attack)


def test_attacks_are_removed_once_shrunk(game):
    game.handle_event(key_event(pygame.KEYDOWN, pygame.K_RIGHT))
    game.handle_event(key_event(pygame.KEYDOWN, pygame.K_q))
    game.update(100)
    game.handle_event(key_event(pygame.KEYUP, pygame.K_q))
    assert any(isinstance(obj, Attack) for obj in game.objects)
    for _ in range(5000):
        game.update(10)
        if len(game.objects) == 1:
            break
    assert game.objects == (game.player,)


def test_render_draws_player_at_centre(game):
    surface = pygame.Surface((1280, 720))
    game.render(surface)
    assert surface.get_at((640, 360)) == pygame.Color(*RED)
    assert surface.get_at((0, 0)) == pygame.Color(0, 0, 0)