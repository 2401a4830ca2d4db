import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame
import pytest

from orbit_canvas.core.config import SIM_CFG
from orbit_canvas.core.simulation import new_state


@pytest.fixture
def surface():
    return pygame.Surface((SIM_CFG.width, SIM_CFG.height))


@pytest.fixture
def state():
    return new_state()
