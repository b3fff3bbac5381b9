"""
Interactive simulation with pygame GUI.
"""

import random
import sys
from typing import Optional

import pygame

from ..analysis.export import save_snapshot
from ..analysis.metrics import collect_metrics
from ..core.boundary import get_boundary_policy
from ..core.config import BOUNDARY_POLICIES, SimulationConfig
from ..core.initializer import initial_state
from ..core.state import advance
from .renderer import draw_frame, draw_stats


class Simulation:
    """
    Interactive flocking simulation with pygame visualization.

    The window only renders snapshots; all state changes go through the
    same `advance` transition as the headless driver.
    """

    def __init__(self, config: Optional[SimulationConfig] = None):
        """
        Initialize the simulation.

        Args:
            config: Simulation configuration (uses defaults if None)
        """
        self.config = config if config else SimulationConfig()
        self.config.validate()

        pygame.init()
        width = self.config.screenWidth
        height = self.config.screenHeight
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Flocking Simulation - Predators & Poor Areas")
        self.clock = pygame.time.Clock()

        self.rng = random.Random(self.config.seed)
        self.state, self.area_radius = initial_state(self.config, self.rng)
        self.params = self.config.step_parameters(self.area_radius)
        self.boundary = get_boundary_policy(self.config.boundaryPolicy, self.config.reboundDamping)

        self.running = True
        self.paused = False
        self.stats = collect_metrics(self.state)

    def update(self) -> None:
        """Update simulation state for one frame."""
        self.state = advance(self.state, self.params, self.rng, self.boundary,
                             self.config.mobileAreas)
        self.stats = collect_metrics(self.state)

    def draw(self) -> None:
        """Render the current frame."""
        draw_frame(self.screen, self.state, self.area_radius, self.config,
                   self.config.showAreaRadius)
        draw_stats(self.screen, [
            f"FPS: {int(self.clock.get_fps())}",
            f"Frame: {self.state.frame}",
            f"Boids: {len(self.state.boids)}",
            f"Boundary: {self.boundary.name}",
            f"Avg Speed: {self.stats['avg_speed']:.2f}",
            f"Cohesion: {self.stats['cohesion']:.1f}",
            f"Polarization: {self.stats['polarization']:.2f}",
        ] + (["PAUSED"] if self.paused else []))
        pygame.display.flip()

    def save_snapshot(self) -> None:
        """Save the current snapshot to JSON."""
        try:
            save_snapshot(self.state, self.area_radius, self.config.to_dict(),
                          self.config.snapshotOutputFile)
            print(f"Snapshot saved to {self.config.snapshotOutputFile}")
        except OSError as e:
            print(f"Error saving snapshot: {e}")

    def run(self) -> None:
        """Run the simulation main loop."""
        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN:
                    self._handle_keydown(event.key)

            if not self.paused:
                self.update()
            self.draw()
            self.clock.tick(self.config.fpsTarget)

        pygame.quit()
        sys.exit()

    def _handle_keydown(self, key: int) -> None:
        """Handle keyboard input."""
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_SPACE:
            self.paused = not self.paused
        elif key == pygame.K_b:
            current_idx = BOUNDARY_POLICIES.index(self.config.boundaryPolicy)
            self.config.boundaryPolicy = BOUNDARY_POLICIES[(current_idx + 1) % len(BOUNDARY_POLICIES)]
            self.boundary = get_boundary_policy(self.config.boundaryPolicy, self.config.reboundDamping)
            print(f"Boundary policy: {self.config.boundaryPolicy.upper()}")
        elif key == pygame.K_r:
            self.config.showAreaRadius = not self.config.showAreaRadius
        elif key == pygame.K_s:
            self.save_snapshot()
