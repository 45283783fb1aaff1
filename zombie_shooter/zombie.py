from __future__ import annotations

# enables forward references and delayed evaluation of type annotations.

import os
import random
import pygame

from .constants import (
    ZOMBIE_WIDTH, ZOMBIE_HEIGHT, ZOMBIE_SPAWN_DEPTH, ZOMBIE_HIT_FLASH_MS,
    ZOMBIE_IMAGE_PATH, ZOMBIE_COLOR, FLASH_COLOR,
)

class Zombie:
    """
    One zombie falling towards the bottom of the field.

    Lifecycle:
    - FALLING:  moves down by ``speed`` every frame.
    - WRAPPED:  once fully past the bottom edge it re-enters above the top
                edge at a random column.
    - DEAD:     health dropped to 0 or below; the world removes it and scores.

    The sprite is shared by all zombies and loaded on first draw, so zombies
    can be created and updated without a display.
    """

    sprite_image = None
    sprites_loaded = False
    sprite_load_attempted = False

    @classmethod
    def load_sprite(cls) -> None:
        """Load the zombie sprite from assets, if present."""
        if cls.sprite_load_attempted:
            return
        cls.sprite_load_attempted = True

        if os.path.exists(ZOMBIE_IMAGE_PATH):
            try:
                original = pygame.image.load(ZOMBIE_IMAGE_PATH).convert_alpha()
                cls.sprite_image = pygame.transform.scale(original, (ZOMBIE_WIDTH, ZOMBIE_HEIGHT))
                cls.sprites_loaded = True
            except Exception as e:
                print(f"Failed to load zombie sprite: {e}")
                cls.sprites_loaded = False
        else:
            print(f"Zombie sprite not found: {ZOMBIE_IMAGE_PATH}")
            cls.sprites_loaded = False

    def __init__(self, x: float, y: float, speed: float, health: int,
                 width: int = ZOMBIE_WIDTH, height: int = ZOMBIE_HEIGHT) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.speed = speed
        self.health = health
        self.hit_time: int | None = None

    def __repr__(self) -> str:
        return f"Zombie(x={self.x:.1f}, y={self.y:.1f}, health={self.health})"

    # ------------------------------- Update & State ----------------------------------

    @property
    def dead(self) -> bool:
        return self.health <= 0

    def update(self, field_width: int, field_height: int, rng: random.Random) -> None:
        """Advance one frame; wrap back above the field after leaving the bottom."""
        self.y += self.speed
        if self.y > field_height:
            self.y = -rng.random() * ZOMBIE_SPAWN_DEPTH
            self.x = rng.random() * max(0, field_width - self.width)

    def take_damage(self, amount: int, now_ms: int) -> None:
        self.health -= amount
        self.hit_time = now_ms

    # ------------------------------- Rendering ---------------------------------------

    def draw(self, surf: pygame.Surface, now_ms: int) -> None:
        """
        Draw the sprite, or a flat rectangle when the sprite is unavailable.
        Recently hit zombies get a short additive flash.
        """
        if not Zombie.sprite_load_attempted:
            Zombie.load_sprite()

        rect = pygame.Rect(int(self.x), int(self.y), self.width, self.height)
        if Zombie.sprites_loaded and Zombie.sprite_image is not None:
            sprite = Zombie.sprite_image
        else:
            sprite = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
            sprite.fill(ZOMBIE_COLOR)

        if self.hit_time is not None and now_ms - self.hit_time < ZOMBIE_HIT_FLASH_MS:
            flash_sprite = sprite.copy()
            # Fades out over the flash window
            flash_alpha = int(180 * (1.0 - (now_ms - self.hit_time) / ZOMBIE_HIT_FLASH_MS))
            flash_surface = pygame.Surface(flash_sprite.get_size(), pygame.SRCALPHA)
            flash_surface.fill((*FLASH_COLOR, flash_alpha))
            flash_sprite.blit(flash_surface, (0, 0), special_flags=pygame.BLEND_ADD)
            sprite = flash_sprite

        surf.blit(sprite, rect)

    def draw_hitbox(self, surf: pygame.Surface) -> None:
        """Outline the hitbox for debugging."""
        rect = pygame.Rect(int(self.x), int(self.y), self.width, self.height)
        pygame.draw.rect(surf, (0, 255, 0), rect, 2)
