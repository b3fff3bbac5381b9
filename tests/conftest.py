import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from flocksim.core.config import StepParameters


@pytest.fixture
def quiet_params():
    """100x100 arena, no velocity noise, generous max speed."""
    return StepParameters(width=100.0, height=100.0, max_speed=4.0, neighbor_radius=10.0,
                          predator_radius=10.0, perturbation=0.0)
