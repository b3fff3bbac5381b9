"""
Pygame drawing of a simulation snapshot.
"""

from typing import Sequence

import pygame

from ..core.config import SimulationConfig


def draw_frame(surface: pygame.Surface, state, area_radius: Sequence[float],
               config: SimulationConfig, show_radii: bool = True) -> None:
    """
    Draw areas, boids and predators of one snapshot.

    Args:
        surface: Pygame surface to draw on
        state: SimulationState to draw (read only)
        area_radius: Radius per area
        config: Colors and sizes
        show_radii: Draw the avoidance ring of each area
    """
    surface.fill(config.backgroundColor)

    for area, radius in zip(state.areas, area_radius):
        center = (int(area.x), int(area.y))
        if show_radii and radius >= 1:
            pygame.draw.circle(surface, (180, 180, 180), center, int(radius), 1)
        pygame.draw.circle(surface, config.areaColor, center, 5)

    for boid in state.boids:
        pos = boid.position
        pygame.draw.circle(surface, config.boidColor, (int(pos.x), int(pos.y)), 2)
        vel = boid.velocity
        if vel.length() > 0:
            end_pos = pos + vel.normalize() * 6
            pygame.draw.line(surface, config.boidColor, pos, end_pos, 1)

    for predator in state.predators:
        center = (int(predator.x), int(predator.y))
        pygame.draw.circle(surface, config.predatorColor, center, 6)
        pygame.draw.circle(surface, (120, 0, 0), center, 6, 2)


def draw_stats(surface: pygame.Surface, lines: Sequence[str]) -> None:
    """Draw a statistics overlay in the top-left corner."""
    font = pygame.font.Font(None, 24)
    y_offset = 10
    for text in lines:
        rendered = font.render(text, True, (60, 60, 60))
        surface.blit(rendered, (10, y_offset))
        y_offset += 25
