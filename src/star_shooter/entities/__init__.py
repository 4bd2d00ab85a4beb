"""
Star Shooter entities
"""

from __future__ import annotations

import random
from dataclasses import dataclass

import pygame

from star_shooter.constants import (
    BULLET_COLOR,
    BULLET_HEIGHT,
    BULLET_SPEED,
    BULLET_WIDTH,
    ENEMY_COLOR,
    ENEMY_HEIGHT,
    ENEMY_SPEED,
    ENEMY_SPEED_JITTER,
    ENEMY_WIDTH,
    PLAYER_BOTTOM_MARGIN,
    PLAYER_COLOR,
    PLAYER_HEIGHT,
    PLAYER_SPEED,
    PLAYER_WIDTH,
)

Color = tuple[int, int, int]


@dataclass
class Box:
    """
    Axis-aligned rectangle with a constant speed.
    """

    x: float
    y: float
    width: float
    height: float
    speed: float
    color: Color
    alive: bool = True

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)

    @property
    def rect(self) -> pygame.Rect:
        """Integer rect used for drawing."""
        return pygame.Rect(
            round(self.x), round(self.y), round(self.width), round(self.height)
        )


@dataclass
class Player(Box):
    """
    Player ship
    """


@dataclass
class Bullet(Box):
    """
    Bullet entity, travels up
    """


@dataclass
class Enemy(Box):
    """
    Enemy entity, travels down
    """


def create_player(viewport: tuple[float, float]) -> Player:
    """
    Create the player centered near the bottom of the playfield.

    :param viewport: (width, height) of the playfield
    :type viewport: tuple

    :return: Player
    :rtype: Player
    """
    vw, vh = viewport
    return Player(
        x=vw / 2 - PLAYER_WIDTH / 2,
        y=vh - PLAYER_HEIGHT - PLAYER_BOTTOM_MARGIN,
        width=PLAYER_WIDTH,
        height=PLAYER_HEIGHT,
        speed=PLAYER_SPEED,
        color=PLAYER_COLOR,
    )


def create_bullet(x: float, y: float) -> Bullet:
    return Bullet(
        x=x,
        y=y,
        width=BULLET_WIDTH,
        height=BULLET_HEIGHT,
        speed=BULLET_SPEED,
        color=BULLET_COLOR,
    )


def create_enemy(viewport: tuple[float, float], rng=random) -> Enemy:
    """
    Create an enemy just above the top edge at a random column.

    :param viewport: (width, height) of the playfield
    :type viewport: tuple

    :param rng: Source of randomness, anything with ``random()``
    :type rng: random.Random

    :return: Enemy
    :rtype: Enemy
    """
    vw, _ = viewport
    return Enemy(
        x=rng.random() * (vw - ENEMY_WIDTH),
        y=-ENEMY_HEIGHT,
        width=ENEMY_WIDTH,
        height=ENEMY_HEIGHT,
        speed=ENEMY_SPEED + rng.random() * ENEMY_SPEED_JITTER,
        color=ENEMY_COLOR,
    )
