import random

import pygame
import pytest

from zombie_shooter.constants import (
    HEIGHT, MAX_LEVEL, PLAYER_HEALTH, ZOMBIE_KILL_SCORE,
)
from zombie_shooter.models import Boss, Bullet, Player
from zombie_shooter.world import World
from zombie_shooter.zombie import Zombie


def kinds(events):
    return [e.kind for e in events]


def press(controls, key):
    controls.handle_event(pygame.event.Event(pygame.KEYDOWN, key=key))


def test_reset_starts_level_one_wave(world):
    assert world.running and not world.game_over
    assert world.level == 1
    assert world.score == 0
    assert len(world.zombies) == 5
    assert world.player.health == PLAYER_HEALTH
    assert world.boss is None and not world.boss_active


def test_step_is_noop_before_reset(controls):
    world = World()
    assert world.step(controls, 0) == []
    assert world.level == 1


# ------------------------------- Movement ------------------------------------------

def test_arrow_keys_move_player(world, controls):
    press(controls, pygame.K_LEFT)
    press(controls, pygame.K_UP)
    world.step(controls, 0)

    assert world.player.x == 160 - 5
    assert world.player.y == 580 - 5


def test_player_does_not_move_past_field_edges(world, controls):
    world.player = Player(x=0, y=0)
    press(controls, pygame.K_LEFT)
    press(controls, pygame.K_UP)
    world.step(controls, 0)

    assert (world.player.x, world.player.y) == (0, 0)


def test_touch_drag_centers_player(world, controls):
    controls.handle_event(pygame.event.Event(pygame.FINGERMOTION, x=0.5, y=0.5, dx=0.0, dy=0.0))
    world.step(controls, 0)

    assert world.player.center == (180, 320)


def test_bullets_travel_up_and_leave_the_field(world, controls):
    world.zombies = [Zombie(x=0, y=0, speed=0, health=20)]
    world.bullets = [Bullet(x=300, y=3), Bullet(x=300, y=200)]
    world.step(controls, 0)

    assert [b.y for b in world.bullets] == [193]


def test_boss_reflects_at_bottom_and_top(world):
    world.boss = Boss(x=0, y=HEIGHT - 200 - 1, speed=2)
    world.boss_active = True
    world.move_boss()
    assert world.boss.speed == -2

    world.boss.y = 1
    world.move_boss()
    world.move_boss()
    assert world.boss.speed == 2


def test_boss_below_the_field_heads_back_up(world):
    world.boss = Boss(x=0, y=HEIGHT + 50, speed=-2)
    world.boss_active = True
    for _ in range(3):
        world.move_boss()
    assert world.boss.speed == -2
    assert world.boss.y == HEIGHT + 50 - 6


def test_leaving_fullscreen_keeps_boss_reachable(controls):
    world = World(1920, 1080, rng=random.Random(7))
    world.reset()
    world.zombies = []
    world.boss = Boss(x=860, y=800)
    world.boss_active = True
    world.boss_level = world.level
    world.player.health = 10 ** 6

    world.resize(360, 640)
    for now in range(0, 300 * 16, 16):
        world.step(controls, now)
        assert 0 <= world.boss.x <= 360 - world.boss.width
        assert world.boss.y <= 640 - world.boss.height + abs(world.boss.speed)
    assert world.running and world.boss_active


# ------------------------------- Shooting ------------------------------------------

def test_shooting_is_rate_limited(world, controls):
    press(controls, pygame.K_g)
    shots = 0
    for now in (0, 100, 250, 301, 400, 602):
        shots += kinds(world.step(controls, now)).count("shot")
    assert shots == 3


def test_bullet_spawns_at_player_center(world, controls):
    world.zombies = [Zombie(x=0, y=0, speed=0, health=20)]
    press(controls, pygame.K_g)
    world.step(controls, 0)

    bullet = world.bullets[0]
    assert bullet.x == 160 + 70 / 2 - 5
    assert bullet.y == 580 - bullet.speed


def test_touch_tap_shoots(world, controls):
    controls.handle_event(pygame.event.Event(pygame.FINGERDOWN, x=0.5, y=0.5))
    assert "shot" in kinds(world.step(controls, 0))


# -------------------------------- Combat -------------------------------------------

def test_killing_a_zombie_removes_it_and_scores(world, controls):
    target = Zombie(x=0, y=0, speed=0, health=20)
    bystander = Zombie(x=200, y=0, speed=0, health=20)
    world.zombies = [target, bystander]
    world.bullets = [Bullet(x=10, y=50)]

    events = world.step(controls, 0)

    assert world.zombies == [bystander]
    assert world.score == ZOMBIE_KILL_SCORE
    assert kinds(events).count("zombie_killed") == 1
    assert world.bullets == []


def test_bullet_damages_only_one_zombie(world, controls):
    first = Zombie(x=0, y=0, speed=0, health=40)
    second = Zombie(x=0, y=0, speed=0, health=40)
    world.zombies = [first, second]
    world.bullets = [Bullet(x=10, y=50)]
    world.step(controls, 0)

    assert sorted(z.health for z in world.zombies) == [20, 40]
    assert world.score == 0


def test_zombie_contact_damages_player_every_frame(world, controls):
    world.zombies = [Zombie(x=150, y=560, speed=0, health=100)]
    world.step(controls, 0)
    world.step(controls, 16)
    assert world.player.health == PLAYER_HEALTH - 20


def test_bullets_damage_boss(world, controls):
    world.boss = Boss(x=0, y=100, speed=0)
    world.boss_active = True
    world.zombies = [Zombie(x=260, y=0, speed=0, health=20)]
    world.bullets = [Bullet(x=50, y=250)]
    world.step(controls, 0)

    assert world.boss.health == 490
    assert world.bullets == []


# ------------------------------ Progression ----------------------------------------

def test_cleared_wave_levels_up(world, controls):
    world.zombies = []
    events = world.step(controls, 0)

    assert world.level == 2
    assert len(world.zombies) == 10
    assert kinds(events).count("level_up") == 1


def test_no_level_up_while_zombies_remain(world, controls):
    world.step(controls, 0)
    assert world.level == 1


def test_no_level_up_during_boss_fight(world, controls):
    world.zombies = []
    world.boss = Boss(x=0, y=0)
    world.boss_active = True
    world.boss_level = world.level

    for now in range(0, 160, 16):
        world.step(controls, now)

    assert world.level == 1
    assert world.boss_active


def test_boss_spawns_once_past_max_level(world, controls):
    world.level = MAX_LEVEL
    world.zombies = []

    spawned = 0
    for now in range(0, 80, 16):
        spawned += kinds(world.step(controls, now)).count("boss_spawned")

    assert world.level == MAX_LEVEL + 1
    assert spawned == 1
    assert world.boss_active and world.boss is not None


def test_boss_defeat_advances_level(world, controls):
    world.level = MAX_LEVEL
    world.zombies = []
    world.step(controls, 0)
    assert world.boss_active

    world.boss.health = 0
    events = world.step(controls, 16)

    assert "boss_defeated" in kinds(events)
    assert world.level == MAX_LEVEL + 2
    assert len(world.zombies) == (MAX_LEVEL + 2) * 5
    # The next level past the maximum brings its own boss
    assert world.boss_level == MAX_LEVEL + 2
    assert world.boss.health > 0


def test_no_boss_at_or_below_max_level(world, controls):
    world.level = MAX_LEVEL - 1
    world.zombies = []
    world.step(controls, 0)

    assert world.level == MAX_LEVEL
    assert not world.boss_active


# ------------------------------- Game over -----------------------------------------

def test_game_over_happens_exactly_once(world, controls):
    world.player.health = 10
    world.zombies = [Zombie(x=150, y=560, speed=0, health=100)]

    first = world.step(controls, 0)
    second = world.step(controls, 16)

    assert kinds(first).count("game_over") == 1
    assert second == []
    assert world.game_over and not world.running
    assert world.player.health == 0


def test_health_is_not_clamped(world, controls):
    world.player.health = 5
    world.zombies = [Zombie(x=150, y=560, speed=0, health=100)]
    world.step(controls, 0)
    assert world.player.health == -5
    assert world.game_over


def test_reset_after_game_over_starts_new_session(world, controls):
    world.player.health = 0
    world.step(controls, 0)
    assert world.game_over

    world.reset()
    assert world.running and not world.game_over
    assert world.score == 0 and world.level == 1


@pytest.mark.parametrize("size", [(360, 640), (1280, 720)])
def test_resize_keeps_waves_inside_field(size):
    world = World(rng=random.Random(5))
    world.resize(*size)
    world.reset()
    assert all(0 <= z.x <= size[0] - z.width for z in world.zombies)
