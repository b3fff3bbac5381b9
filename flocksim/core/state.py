"""
Simulation state snapshot and the per-tick transition.
"""

import random
from dataclasses import dataclass
from typing import Optional

from .agents.area import step_areas
from .agents.base import Population
from .agents.boid import step_boids
from .agents.predator import step_predators
from .boundary import BoundaryPolicy, DEFAULT_BOUNDARY
from .config import StepParameters


@dataclass(frozen=True)
class SimulationState:
    """Immutable snapshot of every population at one frame."""

    frame: int
    boids: Population
    predators: Population
    areas: Population

    def to_dict(self) -> dict:
        return {
            "frame": self.frame,
            "boids": [b.to_dict() for b in self.boids],
            "predators": [p.to_dict() for p in self.predators],
            "areas": [a.to_dict() for a in self.areas],
        }


def advance(state: SimulationState, params: StepParameters, rng: Optional[random.Random] = None,
            boundary: BoundaryPolicy = DEFAULT_BOUNDARY, mobile_areas: bool = False) -> SimulationState:
    """
    Run one tick: boids first, then predators chasing the updated boids.

    Args:
        state: Snapshot before the tick
        params: Immutable parameter set
        rng: Random source for the boid velocity perturbation
        boundary: Arena edge policy shared by all populations
        mobile_areas: Move areas along their velocities after the agents

    Returns:
        Snapshot after the tick
    """
    boids = step_boids(state.boids, state.predators, state.areas, params, rng, boundary)
    predators = step_predators(state.predators, boids, params, boundary)
    areas = step_areas(state.areas, params, boundary) if mobile_areas else state.areas
    return SimulationState(state.frame + 1, boids, predators, areas)
