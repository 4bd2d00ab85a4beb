"""
Constants for the game.
"""

from __future__ import annotations

import pygame

FPS = 60
WINDOW_SIZE = (800, 600)
TITLE = "Star Shooter"

BACKGROUND_COLOR = (0, 0, 0)
TEXT_COLOR = (255, 255, 255)
PANEL_COLOR = (40, 40, 40)

PLAYER_WIDTH = 40
PLAYER_HEIGHT = 40
PLAYER_SPEED = 5
PLAYER_BOTTOM_MARGIN = 20
PLAYER_COLOR = (0, 255, 255)

BULLET_WIDTH = 5
BULLET_HEIGHT = 15
BULLET_SPEED = 7
BULLET_COLOR = (255, 255, 0)
BULLET_COOLDOWN_FRAMES = 10

ENEMY_WIDTH = 35
ENEMY_HEIGHT = 35
ENEMY_SPEED = 2
ENEMY_SPEED_JITTER = 1.0
ENEMY_COLOR = (255, 0, 0)
ENEMY_SPAWN_RATE = 1000  # ms

SCORE_PER_KILL = 10

SPAWN_ENEMY_EVENT = pygame.USEREVENT + 1

# logical key identity per physical key
KEY_BINDINGS = {
    pygame.K_LEFT: "left",
    pygame.K_a: "left",
    pygame.K_RIGHT: "right",
    pygame.K_d: "right",
    pygame.K_SPACE: "fire",
}
RESTART_KEYS = (pygame.K_r, pygame.K_RETURN)
