"""
Star Shooter Scene
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

import pygame
from mini_arcade_core.scenes.systems.phases import SystemPhase
from mini_arcade_core.scenes.systems.system_pipeline import SystemPipeline

from star_shooter.constants import (
    BACKGROUND_COLOR,
    BULLET_COOLDOWN_FRAMES,
    BULLET_WIDTH,
    ENEMY_SPAWN_RATE,
    KEY_BINDINGS,
    PANEL_COLOR,
    SCORE_PER_KILL,
    SPAWN_ENEMY_EVENT,
    TEXT_COLOR,
    WINDOW_SIZE,
)
from star_shooter.entities import (
    Bullet,
    Enemy,
    Player,
    create_bullet,
    create_enemy,
    create_player,
)
from star_shooter.utils import clamp, logger, rects_overlap


class GamePhase(str, Enum):
    INITIALIZING = "initializing"
    RUNNING = "running"
    GAME_OVER = "game_over"


class InvalidTransitionError(RuntimeError):
    """
    Raised when the game is asked to move between phases it cannot.
    """


@dataclass
class ShooterIntent:
    """
    Logical input flags, held state (not edges).
    """

    left: bool = False
    right: bool = False
    fire: bool = False


@dataclass
class ShooterWorld:
    """
    Star Shooter World
    """

    viewport: tuple[float, float]
    player: Player
    bullets: list[Bullet] = field(default_factory=list)
    enemies: list[Enemy] = field(default_factory=list)
    score: int = 0
    fire_cooldown: int = 0
    intent: ShooterIntent = field(default_factory=ShooterIntent)


@dataclass
class ShooterTickContext:
    """
    Everything a system may touch during one frame.
    """

    world: ShooterWorld
    surface: pygame.Surface | None = None
    on_game_over: Callable[[], None] | None = None
    game_over: bool = False


@dataclass
class PlayerSystem:
    """
    Move the player from intent and fire bullets on cooldown.
    """

    name: str = "star_shooter_player"
    phase: int = SystemPhase.SIMULATION
    order: int = 10

    def step(self, ctx: ShooterTickContext):
        """Move, clamp, then fire."""
        world = ctx.world
        vw, _ = world.viewport
        player = world.player

        if world.intent.left:
            player.x -= player.speed
        if world.intent.right:
            player.x += player.speed
        player.x = clamp(player.x, 0.0, vw - player.width)

        if world.intent.fire and world.fire_cooldown <= 0:
            bullet = create_bullet(
                player.x + player.width / 2 - BULLET_WIDTH / 2, player.y
            )
            world.bullets.append(bullet)
            world.fire_cooldown = BULLET_COOLDOWN_FRAMES
            logger.debug(f"Shooting bullet at {bullet.x:.1f}, {bullet.y:.1f}")

        if world.fire_cooldown > 0:
            world.fire_cooldown -= 1


@dataclass
class BulletSystem:
    """Moves bullets up and removes the ones past the top edge."""

    name: str = "star_shooter_bullets"
    phase: int = SystemPhase.SIMULATION
    order: int = 20

    def step(self, ctx: ShooterTickContext):
        alive: list[Bullet] = []
        for b in ctx.world.bullets:
            b.y -= b.speed
            if b.y + b.height < 0:
                continue
            alive.append(b)

        ctx.world.bullets = alive


@dataclass
class EnemySystem:
    """Moves enemies down and removes the ones past the bottom edge."""

    name: str = "star_shooter_enemies"
    phase: int = SystemPhase.SIMULATION
    order: int = 30

    def step(self, ctx: ShooterTickContext):
        _, vh = ctx.world.viewport

        alive: list[Enemy] = []
        for e in ctx.world.enemies:
            e.y += e.speed
            if e.y > vh:
                continue
            alive.append(e)

        ctx.world.enemies = alive


@dataclass
class BulletEnemyCollisionSystem:
    """
    Each bullet destroys at most one enemy, the first it overlaps in list
    order.
    """

    name: str = "star_shooter_bullet_enemy_collision"
    phase: int = SystemPhase.SIMULATION
    order: int = 40
    points: int = SCORE_PER_KILL

    def step(self, ctx: ShooterTickContext):
        world = ctx.world
        if not world.bullets or not world.enemies:
            return

        for b in world.bullets:
            for e in world.enemies:
                if not e.alive:
                    continue

                if rects_overlap(b.bounds, e.bounds):
                    b.alive = False
                    e.alive = False
                    world.score += self.points
                    logger.debug(f"Hit! Score: {world.score}")
                    break

        world.bullets = [b for b in world.bullets if b.alive]
        world.enemies = [e for e in world.enemies if e.alive]


@dataclass
class EnemyPlayerCollisionSystem:
    """Ends the game on the first enemy touching the player."""

    name: str = "star_shooter_enemy_player_collision"
    phase: int = SystemPhase.SIMULATION
    order: int = 50

    def step(self, ctx: ShooterTickContext):
        if ctx.game_over:
            return

        player = ctx.world.player
        for e in ctx.world.enemies:
            if rects_overlap(player.bounds, e.bounds):
                ctx.game_over = True
                if ctx.on_game_over is not None:
                    ctx.on_game_over()
                break


@dataclass
class RenderSystem:
    """
    Clear the surface, draw every entity as a flat rectangle and the score.
    """

    name: str = "star_shooter_render"
    phase: int = SystemPhase.RENDERING
    order: int = 90
    font_size: int = 28
    _font: pygame.font.Font | None = field(default=None, repr=False)

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.Font(None, self.font_size)
        return self._font

    def step(self, ctx: ShooterTickContext):
        surface = ctx.surface
        if surface is None:
            return

        world = ctx.world
        surface.fill(BACKGROUND_COLOR)

        pygame.draw.rect(surface, world.player.color, world.player.rect)
        for b in world.bullets:
            pygame.draw.rect(surface, b.color, b.rect)
        for e in world.enemies:
            pygame.draw.rect(surface, e.color, e.rect)

        text = self.font.render(f"Score: {world.score}", True, TEXT_COLOR)
        surface.blit(text, (10, 10))


class SpawnTimer:
    """
    Wall-clock enemy spawn timer backed by a pygame custom event.
    """

    def __init__(
        self, event_type: int = SPAWN_ENEMY_EVENT, interval: int = ENEMY_SPAWN_RATE
    ):
        """
        :param event_type: Event posted on every tick
        :type event_type: int

        :param interval: Milliseconds between ticks
        :type interval: int
        """
        self.event_type = event_type
        self.interval = interval
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def start(self):
        pygame.time.set_timer(self.event_type, self.interval)
        self._active = True

    def cancel(self) -> bool:
        """
        Stop the timer.

        :return: False if the timer was not running
        :rtype: bool
        """
        if not self._active:
            return False
        pygame.time.set_timer(self.event_type, 0)
        self._active = False
        return True


class ShooterScene:
    """
    Owns the world and drives the INITIALIZING -> RUNNING -> GAME_OVER
    state machine.
    """

    def __init__(
        self,
        viewport: tuple[float, float] = WINDOW_SIZE,
        spawn_timer: SpawnTimer | None = None,
        rng=random,
    ):
        """
        :param viewport: (width, height) of the playfield
        :type viewport: tuple

        :param spawn_timer: Timer started and cancelled with the game
        :type spawn_timer: SpawnTimer

        :param rng: Randomness for enemy spawns
        :type rng: random.Random
        """
        self.viewport = viewport
        self.spawn_timer = spawn_timer if spawn_timer is not None else SpawnTimer()
        self.rng = rng
        self.phase = GamePhase.INITIALIZING
        self.world: ShooterWorld | None = None
        self.frame_scheduled = False
        self.pipeline: SystemPipeline[ShooterTickContext] = SystemPipeline()
        self.pipeline.extend(
            [
                PlayerSystem(),
                BulletSystem(),
                EnemySystem(),
                BulletEnemyCollisionSystem(),
                EnemyPlayerCollisionSystem(),
                RenderSystem(),
            ]
        )
        self._overlay_fonts: dict[int, pygame.font.Font] = {}

    @property
    def score(self) -> int:
        return self.world.score if self.world is not None else 0

    def start(self):
        """
        Reset the world, start spawning and request the first frame.

        :raise InvalidTransitionError: If the game is not initializing
        """
        if self.phase != GamePhase.INITIALIZING:
            raise InvalidTransitionError(f"Cannot start while {self.phase.value}")

        self.world = ShooterWorld(
            viewport=self.viewport, player=create_player(self.viewport)
        )

        # a stale timer would double the spawn rate
        if self.spawn_timer.active:
            self.spawn_timer.cancel()
        self.spawn_timer.start()

        self.phase = GamePhase.RUNNING
        self.request_frame()
        logger.info("Game started")

    def restart(self):
        """
        :raise InvalidTransitionError: If the game is not over
        """
        if self.phase != GamePhase.GAME_OVER:
            raise InvalidTransitionError(f"Cannot restart while {self.phase.value}")

        logger.info("Restarting the game")
        self.phase = GamePhase.INITIALIZING
        self.start()

    def request_frame(self):
        self.frame_scheduled = True

    def frame(self, surface: pygame.Surface | None = None):
        """
        Run one update -> collide -> render pass.

        :param surface: Surface to draw on, None to skip drawing
        :type surface: pygame.Surface
        """
        self.frame_scheduled = False
        if self.phase != GamePhase.RUNNING:
            return

        ctx = ShooterTickContext(
            world=self.world, surface=surface, on_game_over=self.set_game_over
        )
        self.pipeline.step(ctx)

        if self.phase == GamePhase.RUNNING:
            self.request_frame()

    def set_game_over(self):
        """
        :raise InvalidTransitionError: If the game is not running
        """
        if self.phase != GamePhase.RUNNING:
            raise InvalidTransitionError(
                f"Cannot end the game while {self.phase.value}"
            )

        self.phase = GamePhase.GAME_OVER
        self.spawn_timer.cancel()
        logger.info(f"Game over! Final score: {self.score}")

    def spawn_enemy(self) -> Enemy | None:
        if self.phase != GamePhase.RUNNING:
            return None

        enemy = create_enemy(self.viewport, self.rng)
        self.world.enemies.append(enemy)
        logger.debug(f"Spawned enemy at x={enemy.x:.1f} speed={enemy.speed:.2f}")
        return enemy

    def handle_key(self, key: int, pressed: bool) -> bool:
        """
        Update the held-key intent.

        :param key: pygame key code
        :type key: int

        :param pressed: True on key down, False on key up
        :type pressed: bool

        :return: True if the key is bound to an action
        :rtype: bool
        """
        action = KEY_BINDINGS.get(key)
        if action is None or self.world is None:
            return False
        setattr(self.world.intent, action, pressed)
        return True

    def _overlay_font(self, size: int) -> pygame.font.Font:
        if size not in self._overlay_fonts:
            self._overlay_fonts[size] = pygame.font.Font(None, size)
        return self._overlay_fonts[size]

    def draw_game_over(self, surface: pygame.Surface):
        """Opaque panel with the final score and the restart hint."""
        vw, vh = surface.get_size()
        panel = pygame.Rect(0, 0, 360, 180)
        panel.center = (vw // 2, vh // 2)
        pygame.draw.rect(surface, PANEL_COLOR, panel)

        lines = [
            (self._overlay_font(56), "GAME OVER"),
            (self._overlay_font(32), f"Final score: {self.score}"),
            (self._overlay_font(24), "Press R or Enter to restart"),
        ]
        y = panel.top + 25
        for font, message in lines:
            text = font.render(message, True, TEXT_COLOR)
            surface.blit(text, text.get_rect(midtop=(panel.centerx, y)))
            y += text.get_height() + 18
