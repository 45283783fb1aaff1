import pygame

from zombie_shooter.controls import Controls


def key_event(kind, key):
    return pygame.event.Event(kind, key=key)


def test_key_state_follows_down_and_up():
    controls = Controls()
    assert not controls.is_active("left")

    assert controls.handle_event(key_event(pygame.KEYDOWN, pygame.K_LEFT))
    assert controls.is_active("left")

    controls.handle_event(key_event(pygame.KEYUP, pygame.K_LEFT))
    assert not controls.is_active("left")


def test_shoot_binding_is_g():
    controls = Controls()
    controls.handle_event(key_event(pygame.KEYDOWN, pygame.K_g))
    assert controls.is_active("shoot")


def test_unbound_keys_are_not_consumed():
    controls = Controls()
    assert not controls.handle_event(key_event(pygame.KEYDOWN, pygame.K_q))


def test_cooldown():
    controls = Controls(shoot_delay_ms=300)
    assert controls.can_shoot(0)
    controls.mark_shot(1000)
    assert not controls.can_shoot(1200)
    assert not controls.can_shoot(1300)
    assert controls.can_shoot(1301)


def test_touch_drag_is_scaled_to_field_and_consumed_once():
    controls = Controls(360, 640)
    controls.handle_event(pygame.event.Event(pygame.FINGERMOTION, x=0.5, y=0.25, dx=0.0, dy=0.0))

    assert controls.consume_drag() == (180.0, 160.0)
    assert controls.consume_drag() is None


def test_touch_tap_is_consumed_once():
    controls = Controls()
    controls.handle_event(pygame.event.Event(pygame.FINGERDOWN, x=0.1, y=0.1))

    assert controls.consume_tap()
    assert not controls.consume_tap()


def test_reset_clears_everything():
    controls = Controls()
    controls.handle_event(key_event(pygame.KEYDOWN, pygame.K_UP))
    controls.mark_shot(500)
    controls.reset()

    assert not controls.is_active("up")
    assert controls.can_shoot(501)


def test_release_keeps_shot_cooldown():
    controls = Controls(shoot_delay_ms=300)
    controls.handle_event(key_event(pygame.KEYDOWN, pygame.K_g))
    controls.handle_event(pygame.event.Event(pygame.FINGERDOWN, x=0.1, y=0.1))
    controls.mark_shot(1000)
    controls.release()

    assert not controls.is_active("shoot")
    assert not controls.consume_tap()
    assert not controls.can_shoot(1100)
    assert controls.can_shoot(1301)
