from __future__ import annotations

import random

from .constants import (
    ZOMBIE_WIDTH, ZOMBIES_PER_LEVEL, ZOMBIE_BASE_SPEED, ZOMBIE_SPEED_PER_LEVEL,
    ZOMBIE_BASE_HEALTH, ZOMBIE_HEALTH_PER_LEVEL, ZOMBIE_SPAWN_DEPTH, BOSS_WIDTH,
)
from .models import Boss
from .zombie import Zombie


class Spawner:
    """
    Builds zombie waves and the boss for a given level.

    Notes
    - Wave size, zombie speed and zombie health all scale with level.
    - Uses its own ``random.Random`` so a seed gives a reproducible wave.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def wave_size(self, level: int) -> int:
        return level * ZOMBIES_PER_LEVEL

    def zombie_speed(self, level: int) -> float:
        return ZOMBIE_BASE_SPEED + level * ZOMBIE_SPEED_PER_LEVEL

    def zombie_health(self, level: int) -> int:
        return ZOMBIE_BASE_HEALTH + level * ZOMBIE_HEALTH_PER_LEVEL

    def spawn_wave(self, level: int, field_width: int) -> list[Zombie]:
        """
        Create a fresh wave above the top edge of the field.

        Parameters
        ----------
        level : int
            Level the wave belongs to
        field_width : int
            Current playfield width; zombies stay fully inside horizontally

        Returns
        -------
        list[Zombie]
            ``level * ZOMBIES_PER_LEVEL`` new zombies
        """
        speed = self.zombie_speed(level)
        health = self.zombie_health(level)
        span = max(0, field_width - ZOMBIE_WIDTH)
        return [
            Zombie(
                x=self.rng.random() * span,
                y=-self.rng.random() * ZOMBIE_SPAWN_DEPTH,
                speed=speed,
                health=health,
            )
            for _ in range(self.wave_size(level))
        ]

    def spawn_boss(self, field_width: int) -> Boss:
        """Place a fresh boss horizontally centered near the top."""
        return Boss(x=field_width / 2 - BOSS_WIDTH / 2)
