# Sound effects

from __future__ import annotations

import os
import pygame

from .constants import (
    MUSIC_PATH, ATTACK_SFX_PATH, ZOMBIE_DEATH_SFX_PATH, GAME_OVER_SFX_PATH,
)

class SoundEffect:
    """
    Background music and one-shot effects.

    Every asset is optional: a missing file or an unavailable mixer leaves the
    matching ``play_*`` call as a no-op.
    """

    def __init__(self, bgm_volume: float = 0.5, sfx_volume: float = 0.7):
        self.muted = False
        self.music_loaded = False
        self.mixer_ready = False

        # Volume settings (0.0 to 1.0)
        self.bgm_volume = bgm_volume
        self.sfx_volume = sfx_volume

        try:
            pygame.mixer.init(frequency=22050, size=-16, channels=2, buffer=512)
            self.mixer_ready = True
        except Exception as e:
            print(f"Audio unavailable: {e}")

        if self.mixer_ready and os.path.exists(MUSIC_PATH):
            try:
                pygame.mixer.music.load(MUSIC_PATH)
                pygame.mixer.music.set_volume(self.bgm_volume)
                self.music_loaded = True
            except Exception as e:
                print(f"Failed to load background music: {e}")
        else:
            print(f"Background music file not found: {MUSIC_PATH}")

        self.attackSound = self.load_sound(ATTACK_SFX_PATH)
        self.zombieDeathSound = self.load_sound(ZOMBIE_DEATH_SFX_PATH)
        self.gameOverSound = self.load_sound(GAME_OVER_SFX_PATH)

    def load_sound(self, path: str) -> pygame.mixer.Sound | None:
        if not self.mixer_ready:
            return None
        if not os.path.exists(path):
            print(f"Sound effect file not found: {path}")
            return None
        try:
            sound = pygame.mixer.Sound(path)
            sound.set_volume(self.sfx_volume)
            return sound
        except Exception as e:
            print(f"Failed to load sound effect {path}: {e}")
            return None

    def play(self, sound: pygame.mixer.Sound | None) -> None:
        if self.muted or sound is None:
            return
        try:
            sound.play()
        except Exception as e:
            print(f"Failed to play sound: {e}")

    def playBackgroundMusic(self):
        if not self.music_loaded:
            return
        try:
            pygame.mixer.music.play(-1)
            pygame.mixer.music.set_volume(0.0 if self.muted else self.bgm_volume)
        except Exception as e:
            print(f"Failed to play background music: {e}")

    def stopBackgroundMusic(self):
        """Pause and rewind, so the next game starts the track from the top."""
        if not self.music_loaded:
            return
        try:
            pygame.mixer.music.stop()
            pygame.mixer.music.rewind()
        except Exception as e:
            print(f"Failed to reset background music: {e}")

    def toggleMute(self):
        self.muted = not self.muted
        if self.music_loaded:
            pygame.mixer.music.set_volume(0.0 if self.muted else self.bgm_volume)

    def playAttackSound(self):
        self.play(self.attackSound)

    def playZombieDeathSound(self):
        self.play(self.zombieDeathSound)

    def playGameOverSound(self):
        self.play(self.gameOverSound)

