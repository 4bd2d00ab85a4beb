import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pygame
import pytest

from star_shooter.scenes.shooter import ShooterScene, ShooterTickContext, ShooterWorld
from star_shooter.entities import create_player

VIEWPORT = (800, 600)


@pytest.fixture(scope="session", autouse=True)
def pygame_session():
    pygame.init()
    yield
    pygame.quit()


class FakeTimer:
    """Records start/cancel calls instead of touching the SDL timer."""

    def __init__(self):
        self.active = False
        self.starts = 0
        self.cancels = 0

    def start(self):
        self.starts += 1
        self.active = True

    def cancel(self):
        if not self.active:
            return False
        self.cancels += 1
        self.active = False
        return True


@pytest.fixture
def timer():
    return FakeTimer()


@pytest.fixture
def scene(timer):
    return ShooterScene(viewport=VIEWPORT, spawn_timer=timer, rng=random.Random(1234))


@pytest.fixture
def world():
    return ShooterWorld(viewport=VIEWPORT, player=create_player(VIEWPORT))


@pytest.fixture
def ctx(world):
    return ShooterTickContext(world=world)
