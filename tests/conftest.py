import os
import random

# Headless pygame for the whole test session
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from zombie_shooter.controls import Controls
from zombie_shooter.world import World


@pytest.fixture
def controls():
    return Controls()


@pytest.fixture
def screen():
    pygame.init()
    surf = pygame.display.set_mode((360, 640))
    yield surf
    pygame.quit()


@pytest.fixture
def world():
    w = World(rng=random.Random(1234))
    w.reset()
    return w
