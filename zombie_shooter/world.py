"""Game state and per-frame simulation.

``World`` is the single mutable state object of a session. Each call to
``step`` runs one frame: movement from input, entity motion, combat,
wave/boss progression and the game-over check. It never touches the display
or the mixer; everything observable that happened during the frame is
returned as a list of ``GameEvent`` for the caller to turn into sound, log
rows and effects.
"""

from __future__ import annotations

import random

from .collision import collides
from .constants import (
    WIDTH, HEIGHT, START_LEVEL, MAX_LEVEL,
    BULLET_OFFSET_X, BULLET_ZOMBIE_DAMAGE, BULLET_BOSS_DAMAGE,
    ZOMBIE_CONTACT_DAMAGE, ZOMBIE_KILL_SCORE, BOSS_CONTACT_DAMAGE,
)
from .controls import Controls
from .models import Player, Bullet, Boss, GameEvent
from .spawner import Spawner
from .zombie import Zombie


class World:
    """
    Entity store plus the update, combat and progression rules.

    Attributes
    ----------
    player : Player
    zombies : list[Zombie]
    bullets : list[Bullet]
    boss : Boss | None
        Present iff ``boss_active`` is set.
    score, level : int
    running : bool
        Cleared on game over; ``step`` is a no-op while False.
    game_over : bool
    """

    def __init__(self, field_width: int = WIDTH, field_height: int = HEIGHT,
                 rng: random.Random | None = None, max_level: int = MAX_LEVEL) -> None:
        self.field_width = field_width
        self.field_height = field_height
        self.rng = rng or random.Random()
        self.spawner = Spawner(self.rng)
        self.max_level = max_level

        self.player = Player()
        self.zombies: list[Zombie] = []
        self.bullets: list[Bullet] = []
        self.boss: Boss | None = None
        self.boss_active = False
        self.boss_level: int | None = None      # level the last boss was spawned for
        self.score = 0
        self.level = START_LEVEL
        self.running = False
        self.game_over = False
        self.events: list[GameEvent] = []

    def reset(self) -> None:
        """Start a fresh session: new player, level 1 wave, no boss."""
        self.player = Player()
        self.bullets = []
        self.boss = None
        self.boss_active = False
        self.boss_level = None
        self.score = 0
        self.level = START_LEVEL
        self.zombies = self.spawner.spawn_wave(self.level, self.field_width)
        self.running = True
        self.game_over = False
        self.events = []

    def resize(self, field_width: int, field_height: int) -> None:
        self.field_width = field_width
        self.field_height = field_height
        # A shrinking field must not strand the player or the boss outside it
        for entity in (self.player, self.boss):
            if entity is None:
                continue
            entity.x = max(0, min(entity.x, field_width - entity.width))
            entity.y = max(0, min(entity.y, field_height - entity.height))

    # --------------------------------- Frame ----------------------------------------

    def step(self, controls: Controls, now_ms: int) -> list[GameEvent]:
        """
        Advance the session by one frame.

        Parameters
        ----------
        controls : Controls
            Input collected since the previous frame
        now_ms : int
            Current game time in milliseconds, used for the shot cooldown

        Returns
        -------
        list[GameEvent]
            Events raised during this frame, in order
        """
        self.events = []
        if not self.running or self.game_over:
            return self.events

        self.move_player(controls)
        tapped = controls.consume_tap()
        if controls.is_active("shoot") or tapped:
            self.try_shoot(controls, now_ms)

        self.move_zombies()
        self.move_bullets()
        if self.boss_active:
            self.move_boss()

        self.resolve_combat(now_ms)
        self.remove_dead_zombies()
        self.check_boss_defeated()
        self.check_progression()
        self.check_game_over()
        return self.events

    # --------------------------------- Update ---------------------------------------

    def move_player(self, controls: Controls) -> None:
        p = self.player

        target = controls.consume_drag()
        if target is not None:
            # Touch drag centers the player on the finger
            p.x = target[0] - p.width / 2
            p.y = target[1] - p.height / 2

        if controls.is_active("up") and p.y > 0:
            p.y -= p.speed
        if controls.is_active("down") and p.y < self.field_height - p.height:
            p.y += p.speed
        if controls.is_active("left") and p.x > 0:
            p.x -= p.speed
        if controls.is_active("right") and p.x < self.field_width - p.width:
            p.x += p.speed

    def try_shoot(self, controls: Controls, now_ms: int) -> bool:
        """Fire a bullet from the player if the cooldown allows it."""
        if not controls.can_shoot(now_ms):
            return False
        p = self.player
        self.bullets.append(Bullet(x=p.x + p.width / 2 - BULLET_OFFSET_X, y=p.y))
        controls.mark_shot(now_ms)
        self.events.append(GameEvent("shot", f"from ({p.x:.0f}, {p.y:.0f})"))
        return True

    def move_zombies(self) -> None:
        for zombie in self.zombies:
            zombie.update(self.field_width, self.field_height, self.rng)

    def move_bullets(self) -> None:
        for bullet in self.bullets:
            bullet.y -= bullet.speed
        self.bullets = [b for b in self.bullets if b.y >= 0]

    def move_boss(self) -> None:
        boss = self.boss
        boss.y += boss.speed
        if boss.y > self.field_height - boss.height:
            boss.speed = -abs(boss.speed)
        elif boss.y < 0:
            boss.speed = abs(boss.speed)

    # --------------------------------- Combat ---------------------------------------

    def resolve_combat(self, now_ms: int) -> None:
        for zombie in self.zombies:
            if collides(self.player, zombie):
                self.player.health -= ZOMBIE_CONTACT_DAMAGE

        remaining: list[Bullet] = []
        for bullet in self.bullets:
            target = next((z for z in self.zombies if not z.dead and collides(bullet, z)), None)
            if target is not None:
                target.take_damage(BULLET_ZOMBIE_DAMAGE, now_ms)
                continue
            if self.boss_active and collides(bullet, self.boss):
                self.boss.health -= BULLET_BOSS_DAMAGE
                continue
            remaining.append(bullet)
        self.bullets = remaining

        if self.boss_active and collides(self.player, self.boss):
            self.player.health -= BOSS_CONTACT_DAMAGE

    def remove_dead_zombies(self) -> None:
        alive: list[Zombie] = []
        for zombie in self.zombies:
            if zombie.dead:
                self.score += ZOMBIE_KILL_SCORE
                self.events.append(GameEvent(
                    "zombie_killed",
                    f"at ({zombie.x:.0f}, {zombie.y:.0f}) - score {self.score}",
                    (zombie.x + zombie.width / 2, zombie.y + zombie.height / 2),
                ))
            else:
                alive.append(zombie)
        self.zombies = alive

    # ------------------------------- Progression ------------------------------------

    def level_up(self) -> None:
        self.level += 1
        self.zombies = self.spawner.spawn_wave(self.level, self.field_width)
        self.events.append(GameEvent("level_up", f"Reached level {self.level} - {len(self.zombies)} zombies"))

    def start_boss(self) -> None:
        self.boss = self.spawner.spawn_boss(self.field_width)
        self.boss_active = True
        self.boss_level = self.level
        self.events.append(GameEvent("boss_spawned", f"Boss at level {self.level}"))

    def check_boss_defeated(self) -> None:
        if self.boss_active and self.boss.dead:
            self.boss = None
            self.boss_active = False
            self.events.append(GameEvent("boss_defeated", f"Boss defeated at level {self.level}"))
            self.level_up()

    def check_progression(self) -> None:
        if not self.zombies and not self.boss_active:
            self.level_up()
        if self.level > self.max_level and not self.boss_active and self.boss_level != self.level:
            self.start_boss()

    def check_game_over(self) -> None:
        if self.player.health <= 0 and not self.game_over:
            self.game_over = True
            self.running = False
            self.events.append(GameEvent("game_over", f"Final score {self.score} at level {self.level}"))
