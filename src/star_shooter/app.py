"""
Main application for Star Shooter using the pygame backend.
"""

from __future__ import annotations

import logging

import pygame

from star_shooter.constants import (
    BACKGROUND_COLOR,
    ENEMY_SPAWN_RATE,
    FPS,
    RESTART_KEYS,
    SPAWN_ENEMY_EVENT,
    TITLE,
    WINDOW_SIZE,
)
from star_shooter.scenes.shooter import GamePhase, ShooterScene, SpawnTimer
from star_shooter.utils import configure_logging, logger, set_screen


class Game:
    """
    Game class
    """

    def __init__(self, settings: dict):
        """
        :param settings: Window settings, see ``default_settings``
        :type settings: dict
        """
        self._settings = settings
        self._name = settings["window"]["title"]
        self._carry_on = True
        logger.debug(f"Initializing {self._name}")
        pygame.init()
        self._clock = pygame.time.Clock()

    def _set_screen(self, width: int, height: int) -> pygame.Surface:
        logger.debug("Setting screen")

        return set_screen(self._name, width, height)

    def handle_events(self):
        """
        Handle the events

        :raise NotImplementedError: Subclasses must implement this method
        """
        raise NotImplementedError("Subclasses must implement this method")

    def draw_stuff(self):
        """
        Draw the stuff

        :raise NotImplementedError: Subclasses must implement this method
        """
        raise NotImplementedError("Subclasses must implement this method")

    def quit(self):
        logger.info(f"Quitting {self._name}")
        self._carry_on = False


class StarShooter(Game):
    """
    Star Shooter class
    """

    def __init__(self, settings: dict | None = None):
        super().__init__(settings or default_settings())

        window = self._settings["window"]
        self._screen = self._set_screen(window["width"], window["height"])
        self._scene = ShooterScene(
            viewport=(window["width"], window["height"]),
            spawn_timer=SpawnTimer(
                SPAWN_ENEMY_EVENT, self._settings["spawn"]["interval_ms"]
            ),
        )

    def handle_events(self):
        """
        Handle the events
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.quit()
            elif event.type == SPAWN_ENEMY_EVENT:
                self._scene.spawn_enemy()
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.quit()
                elif (
                    event.key in RESTART_KEYS
                    and self._scene.phase == GamePhase.GAME_OVER
                ):
                    self._scene.restart()
                else:
                    self._scene.handle_key(event.key, True)
            elif event.type == pygame.KEYUP:
                self._scene.handle_key(event.key, False)

    def draw_stuff(self):
        """
        Run the scheduled frame, or the game over panel once frames stop.
        """
        if self._scene.frame_scheduled:
            self._scene.frame(self._screen)
        if self._scene.phase == GamePhase.GAME_OVER:
            self._scene.draw_game_over(self._screen)

        pygame.display.flip()

    def run(self):
        """
        Run the game
        """
        logger.info(f"Starting {self._name}...")
        self._screen.fill(self._settings["renderer"]["background_color"])
        self._scene.start()

        fps = self._settings["fps"]
        while self._carry_on:
            self._clock.tick(fps)
            self.handle_events()
            self.draw_stuff()

        self._scene.spawn_timer.cancel()
        pygame.quit()


def default_settings() -> dict:
    # NOTE: kept as a dictionary so yaml or cli overrides can be layered on.
    w_width, w_height = WINDOW_SIZE
    return {
        "window": {"width": w_width, "height": w_height, "title": TITLE},
        "renderer": {"background_color": BACKGROUND_COLOR},
        "spawn": {"interval_ms": ENEMY_SPAWN_RATE},
        "fps": FPS,
    }


def run():
    """
    Main entry point for Star Shooter.

    - Configures logging.
    - Opens the game window with the default settings.
    - Runs until the window is closed or Escape is pressed.
    """
    configure_logging(logging.INFO)
    settings = default_settings()
    logger.info(settings)
    StarShooter(settings).run()


if __name__ == "__main__":
    run()
