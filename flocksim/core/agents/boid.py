"""
Boid (prey) stepper implementing flocking behavior.
"""

import random
from typing import List, Optional, Sequence

import pygame

from .base import Agent, Population, integrate
from ..boundary import BoundaryPolicy, DEFAULT_BOUNDARY
from ..config import StepParameters
from ..vector import limit, steer, unit_away


class FlockStepper:
    """
    Advances a boid population by one tick.

    Implements Reynolds' boid rules over an exhaustive pairwise scan:
    - Separation: Steer away from neighbors
    - Alignment: Steer toward average heading of neighbors
    - Cohesion: Steer toward average position of neighbors

    Also includes predator and poor-quality area avoidance. Every boid
    reads the pre-tick snapshot only, so update order never matters.
    """

    def __init__(self, params: StepParameters, rng: Optional[random.Random] = None,
                 boundary: BoundaryPolicy = DEFAULT_BOUNDARY):
        """
        Initialize the stepper.

        Args:
            params: Immutable parameter set
            rng: Random source for the velocity perturbation (unseeded if None)
            boundary: Arena edge policy
        """
        self.params = params
        self.rng = rng if rng is not None else random.Random()
        self.boundary = boundary

    def step(self, boids: Sequence[Agent], predators: Sequence[Agent],
             areas: Sequence[Agent]) -> Population:
        """
        Compute the next boid population.

        Args:
            boids: Current boid snapshot
            predators: Current predator snapshot
            areas: Current poor-quality area snapshot

        Returns:
            New boid tuple with the same size and order
        """
        self.params.check_areas(areas)

        positions = [b.position for b in boids]
        velocities = [b.velocity for b in boids]
        predator_positions = [p.position for p in predators]
        area_positions = [a.position for a in areas]

        return tuple(
            self.update_boid(i, positions, velocities, predator_positions, area_positions)
            for i in range(len(boids))
        )

    def update_boid(self, i: int, positions: List[pygame.Vector2], velocities: List[pygame.Vector2],
                    predator_positions: List[pygame.Vector2],
                    area_positions: List[pygame.Vector2]) -> Agent:
        """
        Compute the next state of boid `i` from the pre-tick vectors.

        Returns:
            Updated Agent
        """
        p = self.params
        position = positions[i]
        velocity = velocities[i]
        neighbors = self.find_neighbors(i, positions)

        sep = self.separation(i, neighbors, positions, velocity)
        ali = self.alignment(neighbors, velocities, velocity)
        coh = self.cohesion(neighbors, positions, position, velocity)
        pred = self.avoid(position, velocity, predator_positions,
                          [p.predator_radius] * len(predator_positions))
        area = self.avoid(position, velocity, area_positions, p.area_radius)

        new_velocity = (velocity
                        + sep * p.separation_weight
                        + ali * p.alignment_weight
                        + coh * p.cohesion_weight
                        + pred * p.predator_avoid_weight
                        + area * p.area_avoid_weight)
        new_velocity += self.perturbation()
        new_velocity = limit(new_velocity, p.max_speed)

        return integrate(position, new_velocity, self.boundary, p.width, p.height)

    def find_neighbors(self, i: int, positions: List[pygame.Vector2]) -> List[int]:
        """
        Indices of all other boids strictly inside the neighbor radius.

        Coincident boids (distance 0) are neighbors too.
        """
        origin = positions[i]
        radius = self.params.neighbor_radius
        return [j for j, other in enumerate(positions)
                if j != i and origin.distance_to(other) < radius]

    def separation(self, i: int, neighbors: List[int], positions: List[pygame.Vector2],
                   velocity: pygame.Vector2) -> pygame.Vector2:
        """
        Calculate separation steering away from neighbors.

        Each neighbor adds the unit vector pointing away from it. Coincident
        neighbors have no direction and are left out of the average.

        Returns:
            Separation steering force
        """
        steering = pygame.Vector2(0, 0)
        total = 0

        for j in neighbors:
            if positions[i].distance_to(positions[j]) == 0:
                continue
            steering += unit_away(positions[i], positions[j])
            total += 1

        if total > 0:
            steering /= total
            steering = steer(steering, velocity, self.params.max_speed, self.params.steering_bound)
        return steering

    def alignment(self, neighbors: List[int], velocities: List[pygame.Vector2],
                  velocity: pygame.Vector2) -> pygame.Vector2:
        """
        Calculate alignment steering toward the average neighbor heading.

        Returns:
            Alignment steering force
        """
        steering = pygame.Vector2(0, 0)
        if not neighbors:
            return steering

        for j in neighbors:
            steering += velocities[j]
        steering /= len(neighbors)
        return steer(steering, velocity, self.params.max_speed, self.params.steering_bound)

    def cohesion(self, neighbors: List[int], positions: List[pygame.Vector2],
                 position: pygame.Vector2, velocity: pygame.Vector2) -> pygame.Vector2:
        """
        Calculate cohesion steering toward the average neighbor position.

        Returns:
            Cohesion steering force
        """
        center = pygame.Vector2(0, 0)
        if not neighbors:
            return center

        for j in neighbors:
            center += positions[j]
        center /= len(neighbors)
        desired = center - position
        return steer(desired, velocity, self.params.max_speed, self.params.steering_bound)

    def avoid(self, position: pygame.Vector2, velocity: pygame.Vector2,
              threats: List[pygame.Vector2], radii: Sequence[float]) -> pygame.Vector2:
        """
        Calculate avoidance steering away from predators or areas.

        Unit vectors from every threat inside its radius are summed, not
        averaged, so several close threats compound.

        Args:
            position: Boid position
            velocity: Boid velocity
            threats: Threat positions
            radii: One avoidance radius per threat

        Returns:
            Avoidance steering force
        """
        steering = pygame.Vector2(0, 0)
        for threat, radius in zip(threats, radii):
            if position.distance_to(threat) < radius:
                steering += unit_away(position, threat)

        if steering.length() > 0:
            steering = steer(steering, velocity, self.params.max_speed, self.params.steering_bound)
        return steering

    def perturbation(self) -> pygame.Vector2:
        """Uniform velocity noise in [-perturbation, perturbation] per component."""
        amount = self.params.perturbation
        if amount <= 0:
            return pygame.Vector2(0, 0)
        return pygame.Vector2(self.rng.uniform(-amount, amount), self.rng.uniform(-amount, amount))


def step_boids(boids: Sequence[Agent], predators: Sequence[Agent], areas: Sequence[Agent],
               params: StepParameters, rng: Optional[random.Random] = None,
               boundary: BoundaryPolicy = DEFAULT_BOUNDARY) -> Population:
    """
    Advance a boid population by one tick.

    Args:
        boids: Current boid snapshot
        predators: Current predator snapshot
        areas: Current area snapshot, one entry per `params.area_radius`
        params: Immutable parameter set
        rng: Random source for the velocity perturbation
        boundary: Arena edge policy

    Returns:
        New boid tuple with the same size and order
    """
    return FlockStepper(params, rng, boundary).step(boids, predators, areas)
