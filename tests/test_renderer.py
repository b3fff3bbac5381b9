import pygame
import pytest

from flocksim.core.agents import Agent
from flocksim.core.config import SimulationConfig
from flocksim.core.state import SimulationState
from flocksim.simulation.renderer import draw_frame, draw_stats


@pytest.fixture
def surface():
    pygame.font.init()
    return pygame.Surface((100, 100))


def sample_state():
    return SimulationState(frame=3,
                           boids=(Agent(20, 20, 1, 0),),
                           predators=(Agent(70, 70, 0, 1),),
                           areas=(Agent(50, 20),))


def test_draw_frame_paints_each_species(surface):
    config = SimulationConfig(screenWidth=100, screenHeight=100)
    state = sample_state()
    draw_frame(surface, state, [10.0], config)

    assert tuple(surface.get_at((20, 20)))[:3] == tuple(config.boidColor)
    assert tuple(surface.get_at((70, 70)))[:3] == tuple(config.predatorColor)
    assert tuple(surface.get_at((50, 20)))[:3] == tuple(config.areaColor)
    assert tuple(surface.get_at((5, 95)))[:3] == tuple(config.backgroundColor)
    assert state == sample_state()


def ring_pixels(surface, center, radius, background):
    cx, cy = center
    return [(x, y) for x in range(cx - radius - 2, cx + radius + 3)
            for y in range(cy - radius - 2, cy + radius + 3)
            if radius - 2 <= ((x - cx) ** 2 + (y - cy) ** 2) ** 0.5 <= radius + 1
            and tuple(surface.get_at((x, y)))[:3] != background]


def test_draw_frame_radius_ring_toggle(surface):
    config = SimulationConfig(screenWidth=100, screenHeight=100)
    background = tuple(config.backgroundColor)
    draw_frame(surface, sample_state(), [10.0], config, show_radii=True)
    assert ring_pixels(surface, (50, 20), 10, background)

    draw_frame(surface, sample_state(), [10.0], config, show_radii=False)
    assert not ring_pixels(surface, (50, 20), 10, background)


def test_draw_stats_renders_text(surface):
    surface.fill((255, 255, 255))
    draw_stats(surface, ["Frame: 3", "Boids: 1"])
    pixels = {tuple(surface.get_at((x, y)))[:3] for x in range(10, 80) for y in range(10, 50)}
    assert pixels != {(255, 255, 255)}
