"""Draws the playfield: player, zombies, boss, bullets and kill sparks."""

from __future__ import annotations

import math
import os
import random
import pygame

from .constants import (
    BG_COLOR, TEXT_COLOR, FONT_NAME, FONT_SIZE_MEDIUM,
    PLAYER_COLOR, BULLET_COLOR, BOSS_COLOR, KILL_SPARK_COLOR,
    PLAYER_IMAGE_PATH, BULLET_IMAGE_PATH,
)
from .world import World


def load_image(path: str, size: tuple[int, int]) -> pygame.Surface | None:
    """Load and scale an optional sprite; None when missing or unreadable."""
    if not os.path.exists(path):
        print(f"Image not found: {path}")
        return None
    try:
        img = pygame.image.load(path).convert_alpha()
        return pygame.transform.scale(img, size)
    except Exception as e:
        print(f"Failed to load image {path}: {e}")
        return None


class Renderer:
    """
    Composes the frame: background → player → zombies → boss → bullets → sparks.

    Sprites that cannot be loaded are replaced by flat-color rectangles.
    """

    def __init__(self, world: World) -> None:
        self.world = world
        self.font = pygame.font.Font(FONT_NAME, FONT_SIZE_MEDIUM)
        self.player_img = load_image(PLAYER_IMAGE_PATH, (world.player.width, world.player.height))
        self.bullet_img: pygame.Surface | None = None
        self.bullet_img_checked = False
        self.kill_effects = []
        self.show_hitboxes = False

    def draw_sprite(self, surf: pygame.Surface, entity, image: pygame.Surface | None,
                    color: tuple[int, int, int]) -> None:
        rect = pygame.Rect(int(entity.x), int(entity.y), entity.width, entity.height)
        if image is not None:
            surf.blit(image, rect)
        else:
            pygame.draw.rect(surf, color, rect)

    def draw_player(self, surf: pygame.Surface) -> None:
        self.draw_sprite(surf, self.world.player, self.player_img, PLAYER_COLOR)

    def draw_zombies(self, surf: pygame.Surface, now_ms: int) -> None:
        for zombie in self.world.zombies:
            zombie.draw(surf, now_ms)
            if self.show_hitboxes:
                zombie.draw_hitbox(surf)

    def draw_boss(self, surf: pygame.Surface) -> None:
        boss = self.world.boss
        if boss is None:
            return
        pygame.draw.rect(surf, BOSS_COLOR, (int(boss.x), int(boss.y), boss.width, boss.height))
        health_text = self.font.render(f"Boss Health: {boss.health}", True, TEXT_COLOR)
        surf.blit(health_text, (10, 80))

    def draw_bullets(self, surf: pygame.Surface) -> None:
        if not self.bullet_img_checked and self.world.bullets:
            first = self.world.bullets[0]
            self.bullet_img = load_image(BULLET_IMAGE_PATH, (first.width, first.height))
            self.bullet_img_checked = True
        for bullet in self.world.bullets:
            self.draw_sprite(surf, bullet, self.bullet_img, BULLET_COLOR)

    # --------------------------------- Effects --------------------------------------

    def create_kill_effect(self, pos: tuple[float, float]) -> None:
        """Burst of sparks where a zombie died."""
        for _ in range(8):
            angle = random.uniform(0, 2 * math.pi)
            speed = random.uniform(1, 3)
            effect = {
                'x': pos[0],
                'y': pos[1],
                'dx': math.cos(angle) * speed,
                'dy': math.sin(angle) * speed,
                'life': random.randint(80, 120),
                'max_life': 120,
                'alpha': 255,
                'size': random.randint(3, 6),
            }
            self.kill_effects.append(effect)

    def update_kill_effects(self) -> None:
        for effect in self.kill_effects[:]:
            effect['life'] -= 16  # 16ms per frame at 60fps
            if effect['life'] <= 0:
                self.kill_effects.remove(effect)
            else:
                effect['x'] += effect['dx']
                effect['y'] += effect['dy']
                effect['alpha'] = int(255 * (effect['life'] / effect['max_life']))
                effect['dy'] += 0.3

    def draw_kill_effects(self, surf: pygame.Surface) -> None:
        for effect in self.kill_effects:
            if effect['alpha'] > 0:
                particle_surf = pygame.Surface((effect['size'], effect['size']), pygame.SRCALPHA)
                color = (*KILL_SPARK_COLOR, effect['alpha'])
                pygame.draw.circle(particle_surf, color, (effect['size']//2, effect['size']//2), effect['size']//2)
                surf.blit(particle_surf, (effect['x'] - effect['size']//2, effect['y'] - effect['size']//2))

    def draw(self, surf: pygame.Surface, now_ms: int) -> None:
        surf.fill(BG_COLOR)
        self.draw_player(surf)
        self.draw_zombies(surf, now_ms)
        self.draw_boss(surf)
        self.draw_bullets(surf)
        self.draw_kill_effects(surf)
