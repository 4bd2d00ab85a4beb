import pygame

from star_shooter.constants import (
    BACKGROUND_COLOR,
    BULLET_COLOR,
    ENEMY_COLOR,
    PANEL_COLOR,
    PLAYER_COLOR,
)
from star_shooter.entities import create_bullet, create_enemy
from star_shooter.scenes.shooter import RenderSystem


def rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


def test_render_draws_entities_as_flat_rects(ctx):
    surface = pygame.Surface((800, 600))
    surface.fill((9, 9, 9))
    ctx.surface = surface
    ctx.world.bullets = [create_bullet(600, 300)]
    enemy = create_enemy((800, 600))
    enemy.x, enemy.y = 100, 200
    ctx.world.enemies = [enemy]

    RenderSystem().step(ctx)

    assert rgb(surface, (400, 560)) == PLAYER_COLOR
    assert rgb(surface, (602, 305)) == BULLET_COLOR
    assert rgb(surface, (115, 215)) == ENEMY_COLOR
    assert rgb(surface, (790, 590)) == BACKGROUND_COLOR


def test_render_writes_score(ctx):
    surface = pygame.Surface((800, 600))
    ctx.surface = surface

    RenderSystem().step(ctx)

    region = [
        rgb(surface, (x, y)) for x in range(10, 120) for y in range(10, 30)
    ]
    assert any(pixel != BACKGROUND_COLOR for pixel in region)


def test_render_without_surface_is_noop(ctx):
    RenderSystem().step(ctx)


def test_frame_renders_through_scene(scene):
    surface = pygame.Surface((800, 600))
    scene.start()

    scene.frame(surface)

    assert rgb(surface, (400, 560)) == PLAYER_COLOR


def test_game_over_panel(scene):
    surface = pygame.Surface((800, 600))
    scene.start()
    player = scene.world.player
    enemy = create_enemy(scene.viewport)
    enemy.x, enemy.y = player.x, player.y
    scene.world.enemies.append(enemy)
    scene.frame(surface)

    scene.draw_game_over(surface)

    assert rgb(surface, (222, 212)) == PANEL_COLOR
