import pygame
import pytest

from star_shooter.app import StarShooter, default_settings
from star_shooter.constants import (
    BACKGROUND_COLOR,
    PANEL_COLOR,
    PLAYER_COLOR,
    SPAWN_ENEMY_EVENT,
    WINDOW_SIZE,
)
from star_shooter.scenes.shooter import GamePhase


@pytest.fixture
def game():
    game = StarShooter()
    yield game
    game._scene.spawn_timer.cancel()


def post(event_type, **attrs):
    pygame.event.post(pygame.event.Event(event_type, **attrs))


def test_default_settings_match_constants():
    settings = default_settings()

    assert (settings["window"]["width"], settings["window"]["height"]) == WINDOW_SIZE
    assert settings["spawn"]["interval_ms"] == 1000
    assert settings["fps"] == 60


def test_spawn_event_adds_enemy(game):
    game._scene.start()
    pygame.event.clear()

    post(SPAWN_ENEMY_EVENT)
    game.handle_events()

    assert len(game._scene.world.enemies) == 1


def test_key_events_update_intent(game):
    game._scene.start()
    pygame.event.clear()

    post(pygame.KEYDOWN, key=pygame.K_RIGHT)
    game.handle_events()
    assert game._scene.world.intent.right

    post(pygame.KEYUP, key=pygame.K_RIGHT)
    game.handle_events()
    assert not game._scene.world.intent.right


def test_restart_key_only_after_game_over(game):
    scene = game._scene
    scene.start()
    pygame.event.clear()

    post(pygame.KEYDOWN, key=pygame.K_r)
    game.handle_events()
    assert scene.phase == GamePhase.RUNNING

    scene.world.score = 20
    scene.set_game_over()
    post(pygame.KEYDOWN, key=pygame.K_RETURN)
    game.handle_events()

    assert scene.phase == GamePhase.RUNNING
    assert scene.score == 0


def test_escape_quits(game):
    game._scene.start()
    pygame.event.clear()

    post(pygame.KEYDOWN, key=pygame.K_ESCAPE)
    game.handle_events()

    assert not game._carry_on


def test_draw_stuff_renders_frame_then_game_over_panel(game):
    scene = game._scene
    scene.start()
    game._screen.fill((9, 9, 9))

    game.draw_stuff()

    assert tuple(game._screen.get_at((400, 560)))[:3] == PLAYER_COLOR
    assert tuple(game._screen.get_at((222, 212)))[:3] == BACKGROUND_COLOR

    scene.set_game_over()
    game.draw_stuff()

    assert tuple(game._screen.get_at((222, 212)))[:3] == PANEL_COLOR
    assert not scene.frame_scheduled
