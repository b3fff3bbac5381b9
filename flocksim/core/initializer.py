"""
Random initial placement of boids, predators and poor-quality areas.
"""

import random
from typing import Sequence, Tuple

from .agents.base import Agent, Population
from .config import ConfigurationError, SimulationConfig
from .state import SimulationState


def spawn_population(count: int, width: float, height: float, velocity_range: float,
                     rng: random.Random) -> Population:
    """
    Spawn agents uniformly over the arena.

    Args:
        count: Number of agents
        width: Arena width
        height: Arena height
        velocity_range: Velocity components are drawn from [-range, range]
        rng: Random source

    Returns:
        Tuple of new agents
    """
    if count < 0:
        raise ConfigurationError(f"Population size must be non-negative, got {count}")

    # Column by column: every x first, then y, vx, vy
    xs = [rng.uniform(0, width) for _ in range(count)]
    ys = [rng.uniform(0, height) for _ in range(count)]
    vxs = [rng.uniform(-velocity_range, velocity_range) for _ in range(count)]
    vys = [rng.uniform(-velocity_range, velocity_range) for _ in range(count)]
    return tuple(Agent(x, y, vx, vy) for x, y, vx, vy in zip(xs, ys, vxs, vys))


def draw_area_radii(count: int, width: float, radius_range: Sequence[float],
                    rng: random.Random) -> Tuple[float, ...]:
    """
    Draw one avoidance radius per area as round(width / U(low, high)).

    Larger divisors give smaller areas.
    """
    if count < 0:
        raise ConfigurationError(f"Area count must be non-negative, got {count}")
    low, high = radius_range
    return tuple(float(round(width / rng.uniform(low, high))) for _ in range(count))


def initial_state(config: SimulationConfig, rng: random.Random) -> Tuple[SimulationState, Tuple[float, ...]]:
    """
    Build the starting snapshot for a run.

    Args:
        config: Simulation configuration (validated here)
        rng: Random source

    Returns:
        Tuple of (frame-0 state, area radii)
    """
    config.validate()
    width = config.screenWidth
    height = config.screenHeight

    area_radius = draw_area_radii(config.areaCount, width, config.areaRadiusRange, rng)
    boids = spawn_population(config.boidCount, width, height, config.boidVelocityRange, rng)
    predators = spawn_population(config.predatorCount, width, height, config.predatorVelocityRange, rng)
    areas = spawn_population(config.areaCount, width, height, config.areaVelocityRange, rng)

    return SimulationState(0, boids, predators, areas), area_radius
