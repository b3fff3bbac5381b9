"""
Predator stepper implementing nearest-boid pursuit.
"""

import math
from typing import Optional, Sequence, Tuple

import pygame

from .base import Agent, Population, integrate
from ..boundary import BoundaryPolicy, DEFAULT_BOUNDARY
from ..config import StepParameters
from ..vector import limit


class PredatorStepper:
    """
    Advances a predator population by one tick.

    Each predator nudges its velocity toward the nearest boid by a fixed
    amount. There is no averaging or steering stage, only the final speed
    clamp at `max_speed * pred_rel_speed`.
    """

    def __init__(self, params: StepParameters, boundary: BoundaryPolicy = DEFAULT_BOUNDARY):
        self.params = params
        self.boundary = boundary

    def step(self, predators: Sequence[Agent], boids: Sequence[Agent]) -> Population:
        """
        Compute the next predator population.

        Args:
            predators: Current predator snapshot
            boids: Boid snapshot to chase (normally the one just produced)

        Returns:
            New predator tuple with the same size and order
        """
        boid_positions = [b.position for b in boids]
        return tuple(self.update_predator(pred, boid_positions) for pred in predators)

    def update_predator(self, predator: Agent, boid_positions: Sequence[pygame.Vector2]) -> Agent:
        p = self.params
        position = predator.position
        velocity = predator.velocity

        target, dist = self.nearest_boid(position, boid_positions)
        if target is not None and dist > 0:
            velocity += (boid_positions[target] - position) / dist * p.pursuit_strength

        velocity = limit(velocity, p.predator_max_speed)
        return integrate(position, velocity, self.boundary, p.width, p.height)

    @staticmethod
    def nearest_boid(position: pygame.Vector2,
                     boid_positions: Sequence[pygame.Vector2]) -> Tuple[Optional[int], float]:
        """
        Find the closest boid.

        Ties keep the first boid encountered, i.e. the lowest index.

        Args:
            position: Predator position
            boid_positions: Boid positions in population order

        Returns:
            Tuple of (boid index, distance) or (None, inf) without boids
        """
        closest = None
        closest_dist = math.inf
        for j, other in enumerate(boid_positions):
            dist = position.distance_to(other)
            if dist < closest_dist:
                closest = j
                closest_dist = dist
        return closest, closest_dist


def step_predators(predators: Sequence[Agent], boids: Sequence[Agent], params: StepParameters,
                   boundary: BoundaryPolicy = DEFAULT_BOUNDARY) -> Population:
    """
    Advance a predator population by one tick.

    Args:
        predators: Current predator snapshot
        boids: Boid snapshot to chase
        params: Immutable parameter set
        boundary: Arena edge policy

    Returns:
        New predator tuple with the same size and order
    """
    return PredatorStepper(params, boundary).step(predators, boids)
