"""HUD, buttons and Game Over screen"""

import pygame

from zombie_shooter.constants import (
    HUD_PADDING, TEXT_COLOR, FONT_NAME, FONT_SIZE_SMALL,
)

class Button:
    """Rectangular button that reacts to mouse clicks and touch taps."""

    def __init__(self, label: str, size: tuple[int, int] = (200, 50)) -> None:
        self.label = label
        self.rect = pygame.Rect((0, 0), size)

    def place(self, center: tuple[int, int]) -> None:
        self.rect.center = center

    def hit(self, pos: tuple[float, float]) -> bool:
        return self.rect.collidepoint(pos)

    def draw(self, surf: pygame.Surface, font: pygame.font.Font, hovered: bool = False) -> None:
        color = (100, 150, 100) if hovered else (60, 80, 60)
        pygame.draw.rect(surf, color, self.rect)
        pygame.draw.rect(surf, TEXT_COLOR, self.rect, 2)
        text = font.render(self.label, True, TEXT_COLOR)
        surf.blit(text, text.get_rect(center=self.rect.center))


class HUD:
    """Score and level overlay in the top-left corner, status flags on the right."""

    def __init__(self, font: pygame.font.Font) -> None:
        self.font = font
        self.small_font = pygame.font.Font(FONT_NAME, FONT_SIZE_SMALL)

    def draw(self, surf: pygame.Surface, score: int, level: int, health: int,
             paused: bool = False, muted: bool = False) -> None:
        """Render score, level and health plus PAUSED / MUTED indicators."""
        current_width = surf.get_width()
        current_height = surf.get_height()

        surf.blit(self.font.render(f"Score: {score}", True, TEXT_COLOR), (HUD_PADDING, 20))
        surf.blit(self.font.render(f"Level: {level}", True, TEXT_COLOR), (HUD_PADDING, 50))

        health_text = self.small_font.render(f"HP: {max(0, health)}", True, TEXT_COLOR)
        right_x = current_width - health_text.get_width() - HUD_PADDING
        right_y = 20
        surf.blit(health_text, (right_x, right_y))
        right_y += health_text.get_height() + 4

        if muted:
            muted_text = self.small_font.render("MUTED", True, (255, 150, 150))
            surf.blit(muted_text, (current_width - muted_text.get_width() - HUD_PADDING, right_y))

        if paused:
            pause_text = self.font.render("PAUSED", True, (255, 255, 100))
            pause_y = max(80, int(current_height * 0.15))  # 15% from top, minimum 80px
            text_rect = pause_text.get_rect(center=(current_width//2, pause_y))
            # Semi-transparent background
            bg_rect = text_rect.inflate(20, 10)
            bg_surf = pygame.Surface(bg_rect.size, pygame.SRCALPHA)
            bg_surf.fill((0, 0, 0, 128))
            surf.blit(bg_surf, bg_rect)
            surf.blit(pause_text, text_rect)


class GameOverScreen:
    """Game over screen with final score and a retry button."""
    def __init__(self, font_big: pygame.font.Font, font_small: pygame.font.Font):
        self.font_big = font_big
        self.font_small = font_small
        self.retry_button = Button("RETRY")

    def draw(self, surf: pygame.Surface, score: int, mouse_pos: tuple[int, int] = (-1, -1)) -> None:
        """
        Draw game over screen.
        """
        current_width = surf.get_width()
        current_height = surf.get_height()

        # Semi-transparent overlay
        overlay = pygame.Surface((current_width, current_height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 180))
        surf.blit(overlay, (0, 0))

        game_over_text = self.font_big.render("GAME OVER", True, (255, 100, 100))
        title_y = max(80, int(current_height * 0.25))  # 25% from top, minimum 80px
        surf.blit(game_over_text, game_over_text.get_rect(center=(current_width//2, title_y)))

        score_text = self.font_small.render(f"Your score: {score}", True, TEXT_COLOR)
        score_y = title_y + 60
        surf.blit(score_text, score_text.get_rect(center=(current_width // 2, score_y)))

        self.retry_button.place((current_width // 2, score_y + 70))
        self.retry_button.draw(surf, self.font_small, self.retry_button.hit(mouse_pos))

        inst_text = self.font_small.render("Press R to retry or ESC to quit", True, (150, 150, 150))
        inst_rect = inst_text.get_rect(center=(current_width // 2, self.retry_button.rect.bottom + 30))
        surf.blit(inst_text, inst_rect)
