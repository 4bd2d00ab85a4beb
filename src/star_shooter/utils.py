"""
Star Shooter utils
"""

from __future__ import annotations

import logging

import pygame

logger = logging.getLogger("star_shooter")


def configure_logging(level: int = logging.INFO) -> None:
    """
    Configure the root handler for the game.

    :param level: Logging level
    :type level: int
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if value < lo else hi if value > hi else value


def rects_overlap(
    a: tuple[float, float, float, float], b: tuple[float, float, float, float]
) -> bool:
    """
    Strict AABB overlap test. Rectangles that only touch do not overlap.

    :param a: (x, y, width, height)
    :type a: tuple

    :param b: (x, y, width, height)
    :type b: tuple

    :return: True if the rectangles overlap
    :rtype: bool
    """
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def set_screen(caption: str, width: int, height: int) -> pygame.Surface:
    """
    Set the screen

    :param caption: Caption of the screen
    :type caption: str

    :param width: Width of the screen
    :type width: int

    :param height: Height of the screen
    :type height: int

    :raise pygame.error: If the display cannot be opened

    :return: pygame.Surface
    """
    try:
        screen = pygame.display.set_mode((width, height))
    except pygame.error as e:
        logger.error(f"Failed to open a {width}x{height} window: {e}")
        raise
    pygame.display.set_caption(caption)

    return screen
