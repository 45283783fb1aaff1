"""Keyboard and touch input collected between frames."""

from __future__ import annotations

import pygame

from .constants import WIDTH, HEIGHT, SHOOT_DELAY_MS

# Action name -> key code
KEY_BINDINGS = {
    "up": pygame.K_UP,
    "down": pygame.K_DOWN,
    "left": pygame.K_LEFT,
    "right": pygame.K_RIGHT,
    "shoot": pygame.K_g,
}


class Controls:
    """
    Records key-down state and pending touch input.

    Event handlers only write into this object; the world reads it once per
    frame through ``is_active`` and the ``consume_*`` methods.
    """

    def __init__(self, field_width: int = WIDTH, field_height: int = HEIGHT,
                 shoot_delay_ms: int = SHOOT_DELAY_MS) -> None:
        self.keys: dict[int, bool] = {}
        self.field_width = field_width
        self.field_height = field_height
        self.shoot_delay_ms = shoot_delay_ms
        self.last_shot: int | None = None
        self.drag_target: tuple[float, float] | None = None
        self.tap_pending = False

    def reset(self) -> None:
        self.release()
        self.last_shot = None

    def release(self) -> None:
        """Drop held keys and pending touches; the shot cooldown is kept."""
        self.keys.clear()
        self.drag_target = None
        self.tap_pending = False

    def set_field_size(self, width: int, height: int) -> None:
        self.field_width = width
        self.field_height = height

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Record a keyboard or touch event.

        Returns
        -------
        bool
            True if the event was consumed as game input
        """
        if event.type == pygame.KEYDOWN:
            self.keys[event.key] = True
            return event.key in KEY_BINDINGS.values()
        if event.type == pygame.KEYUP:
            self.keys[event.key] = False
            return event.key in KEY_BINDINGS.values()
        if event.type == pygame.FINGERMOTION:
            # Touch coordinates are normalized to 0..1
            self.drag_target = (event.x * self.field_width, event.y * self.field_height)
            return True
        if event.type == pygame.FINGERDOWN:
            self.tap_pending = True
            return True
        return False

    def is_active(self, action: str) -> bool:
        return self.keys.get(KEY_BINDINGS[action], False)

    def consume_drag(self) -> tuple[float, float] | None:
        target, self.drag_target = self.drag_target, None
        return target

    def consume_tap(self) -> bool:
        tapped, self.tap_pending = self.tap_pending, False
        return tapped

    def can_shoot(self, now_ms: int) -> bool:
        if self.last_shot is None:
            return True
        return now_ms - self.last_shot > self.shoot_delay_ms

    def mark_shot(self, now_ms: int) -> None:
        self.last_shot = now_ms
