import pygame
import pytest

from zombie_shooter import audio
from zombie_shooter.audio import SoundEffect


@pytest.fixture
def no_assets(tmp_path, monkeypatch):
    for name in ("MUSIC_PATH", "ATTACK_SFX_PATH", "ZOMBIE_DEATH_SFX_PATH", "GAME_OVER_SFX_PATH"):
        monkeypatch.setattr(audio, name, str(tmp_path / f"{name.lower()}.mp3"))
    yield
    pygame.mixer.quit()


class FakeSound:
    def __init__(self):
        self.plays = 0

    def play(self):
        self.plays += 1


def play_everything(sfx):
    sfx.playBackgroundMusic()
    sfx.playAttackSound()
    sfx.playZombieDeathSound()
    sfx.playGameOverSound()
    sfx.stopBackgroundMusic()
    sfx.toggleMute()


def test_missing_files_turn_sounds_into_noops(no_assets):
    sfx = SoundEffect()

    assert not sfx.music_loaded
    assert sfx.attackSound is None
    assert sfx.zombieDeathSound is None
    assert sfx.gameOverSound is None
    play_everything(sfx)
    assert sfx.muted


def test_unavailable_mixer_turns_sounds_into_noops(no_assets, monkeypatch):
    def broken_init(*args, **kwargs):
        raise pygame.error("no audio device")

    monkeypatch.setattr(pygame.mixer, "init", broken_init)
    sfx = SoundEffect()

    assert not sfx.mixer_ready
    assert sfx.load_sound(audio.ATTACK_SFX_PATH) is None
    play_everything(sfx)


def test_mute_silences_effects(no_assets):
    sfx = SoundEffect()
    sfx.attackSound = FakeSound()

    sfx.playAttackSound()
    sfx.toggleMute()
    sfx.playAttackSound()
    sfx.toggleMute()
    sfx.playAttackSound()

    assert sfx.attackSound.plays == 2


def test_stopping_music_rewinds_it(no_assets, monkeypatch):
    calls = []
    monkeypatch.setattr(pygame.mixer.music, "stop", lambda: calls.append("stop"))
    monkeypatch.setattr(pygame.mixer.music, "rewind", lambda: calls.append("rewind"))
    sfx = SoundEffect()
    sfx.music_loaded = True

    sfx.stopBackgroundMusic()

    assert calls == ["stop", "rewind"]
