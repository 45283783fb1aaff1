"""Lightweight data models used across the game."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    PLAYER_START_X, PLAYER_START_Y, PLAYER_WIDTH, PLAYER_HEIGHT,
    PLAYER_SPEED, PLAYER_HEALTH,
    BULLET_WIDTH, BULLET_HEIGHT, BULLET_SPEED,
    BOSS_WIDTH, BOSS_HEIGHT, BOSS_START_Y, BOSS_HEALTH, BOSS_SPEED,
)


@dataclass
class Player:
    """
    The player sprite.

    Attributes
    ----------
    x, y : float
        Top-left corner on the playfield.
    width, height : int
        Hitbox size, also used as the drawn size.
    speed : float
        Pixels moved per frame per held direction.
    health : int
        Hit points. Not clamped; the game ends once it drops to 0 or below.
    """
    x: float = PLAYER_START_X
    y: float = PLAYER_START_Y
    width: int = PLAYER_WIDTH
    height: int = PLAYER_HEIGHT
    speed: float = PLAYER_SPEED
    health: int = PLAYER_HEALTH

    @property
    def center(self) -> tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2


@dataclass
class Bullet:
    """A projectile travelling straight up at a constant speed."""
    x: float
    y: float
    width: int = BULLET_WIDTH
    height: int = BULLET_HEIGHT
    speed: float = BULLET_SPEED


@dataclass
class Boss:
    """
    The boss encounter.

    ``speed`` is signed: positive moves down, negative moves up. It flips
    whenever the boss crosses the top or bottom of the field.
    """
    x: float
    y: float = BOSS_START_Y
    width: int = BOSS_WIDTH
    height: int = BOSS_HEIGHT
    health: int = BOSS_HEALTH
    speed: float = BOSS_SPEED

    @property
    def dead(self) -> bool:
        return self.health <= 0


@dataclass(frozen=True)
class GameEvent:
    """
    Something that happened during a frame.

    Attributes
    ----------
    kind : str
        One of ``shot``, ``zombie_killed``, ``level_up``, ``boss_spawned``,
        ``boss_defeated`` or ``game_over``.
    detail : str
        Human readable context for the log.
    pos : tuple[float, float] | None
        Where on the field it happened, if anywhere in particular.
    """
    kind: str
    detail: str = ""
    pos: tuple[float, float] | None = None
