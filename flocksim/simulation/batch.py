"""
Headless batch simulation for generating traces and metrics.
"""

import random
import time
from typing import Dict, List, Optional, Any

import cv2
import numpy as np
import pygame

from ..analysis.metrics import collect_metrics
from ..core.boundary import get_boundary_policy
from ..core.config import SimulationConfig
from ..core.initializer import initial_state
from ..core.state import SimulationState, advance
from .renderer import draw_frame, draw_stats


PROGRESS_INTERVAL = 100


class BatchSimulation:
    """
    Headless simulation driver.

    Threads immutable snapshots through the steppers for a fixed number of
    ticks, collecting metrics and, on request, the full trajectory and an
    MP4 recording.
    """

    def __init__(self, config: SimulationConfig, record_trajectory: bool = False,
                 metrics_interval: int = 1, enable_video: bool = False,
                 video_filename: Optional[str] = None, video_fps: int = 30,
                 verbose: bool = True):
        """
        Initialize batch simulation.

        Args:
            config: Simulation configuration, validated before anything runs
            record_trajectory: Keep every snapshot for export
            metrics_interval: Collect metrics every N frames
            enable_video: Whether to record video
            video_filename: Output video filename
            video_fps: Video frame rate
            verbose: Print progress lines
        """
        config.validate()

        self.config = config
        self.verbose = verbose
        self.metrics_interval = max(1, metrics_interval)
        self.rng = random.Random(config.seed)

        self.state, self.area_radius = initial_state(config, self.rng)
        self.params = config.step_parameters(self.area_radius)
        self.boundary = get_boundary_policy(config.boundaryPolicy, config.reboundDamping)

        self.record_trajectory = record_trajectory
        self.trajectory: List[SimulationState] = [self.state] if record_trajectory else []
        self.metrics: List[Dict[str, float]] = [collect_metrics(self.state)]

        # Video recording
        self.video_writer = None
        self.surface = None
        if enable_video and video_filename:
            pygame.font.init()
            size = (int(config.screenWidth), int(config.screenHeight))
            self.surface = pygame.Surface(size)
            fourcc = cv2.VideoWriter_fourcc(*'mp4v')
            self.video_writer = cv2.VideoWriter(video_filename, fourcc, video_fps, size)
            self._log(f"  Recording video to: {video_filename}")

        self.start_time = time.time()

    def _log(self, message: str) -> None:
        if self.verbose:
            print(message)

    @property
    def frame_count(self) -> int:
        return self.state.frame

    def update(self) -> None:
        """Advance the simulation by one tick."""
        self.state = advance(self.state, self.params, self.rng, self.boundary,
                             self.config.mobileAreas)

        if self.record_trajectory:
            self.trajectory.append(self.state)
        if self.frame_count % self.metrics_interval == 0:
            self.metrics.append(collect_metrics(self.state))

    def run(self, steps: Optional[int] = None) -> Dict[str, Any]:
        """
        Run for a number of ticks.

        Args:
            steps: Number of ticks (config.steps if None)

        Returns:
            Results dictionary with summary statistics
        """
        steps = self.config.steps if steps is None else steps
        target = self.frame_count + steps
        self._log(f"Running simulation for {steps} frames...")

        if self.video_writer:
            self._capture_frame()

        while self.frame_count < target:
            self.update()

            if self.video_writer:
                self._capture_frame()

            if self.frame_count % PROGRESS_INTERVAL == 0:
                elapsed = time.time() - self.start_time
                progress = (self.frame_count / target) * 100
                self._log(f"  Progress: {progress:.1f}% ({self.frame_count}/{target} frames, "
                          f"{elapsed:.1f}s elapsed, cohesion {self.metrics[-1]['cohesion']:.1f})")

        if self.video_writer:
            self.video_writer.release()
            self.video_writer = None
            self._log("  Video saved successfully!")

        return self.get_results()

    def _capture_frame(self) -> None:
        """Render the current snapshot and append it to the video."""
        draw_frame(self.surface, self.state, self.area_radius, self.config,
                   self.config.showAreaRadius)
        draw_stats(self.surface, [f"Frame: {self.frame_count}", f"Boids: {len(self.state.boids)}"])
        frame = pygame.surfarray.array3d(self.surface)
        frame = np.transpose(frame, (1, 0, 2))
        frame = cv2.cvtColor(frame, cv2.COLOR_RGB2BGR)
        self.video_writer.write(frame)

    def get_results(self) -> Dict[str, Any]:
        """
        Get run results.

        Returns:
            Dictionary containing final and time-averaged metrics
        """
        elapsed = time.time() - self.start_time
        final = self.metrics[-1]
        cohesion = [m["cohesion"] for m in self.metrics]
        polar = [m["polarization"] for m in self.metrics]

        return {
            "frames": self.frame_count,
            "seed": self.config.seed,
            "elapsed_time_seconds": elapsed,
            "boid_count": len(self.state.boids),
            "predator_count": len(self.state.predators),
            "area_count": len(self.state.areas),
            "area_radius": list(self.area_radius),
            "final_cohesion": final["cohesion"],
            "final_polarization": final["polarization"],
            "final_avg_speed": final["avg_speed"],
            "final_nearest_neighbor": final["nearest_neighbor"],
            "avg_cohesion": sum(cohesion) / len(cohesion),
            "avg_polarization": sum(polar) / len(polar),
            "metrics_over_time": self.metrics,
        }
