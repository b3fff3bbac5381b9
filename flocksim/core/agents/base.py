"""
Base Agent record shared by boids, predators and poor-quality areas.
"""

from dataclasses import dataclass
from typing import Tuple

import pygame


@dataclass(frozen=True)
class Agent:
    """
    Immutable state of one agent for one tick.

    Agents carry no identity beyond their index in a population, so a
    population is simply a tuple of Agent records.
    """

    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0

    @classmethod
    def from_vectors(cls, position: pygame.Vector2, velocity: pygame.Vector2) -> "Agent":
        """
        Build an agent from position and velocity vectors.

        Args:
            position: Position vector
            velocity: Velocity vector

        Returns:
            New Agent
        """
        return cls(float(position.x), float(position.y), float(velocity.x), float(velocity.y))

    @property
    def position(self) -> pygame.Vector2:
        return pygame.Vector2(self.x, self.y)

    @property
    def velocity(self) -> pygame.Vector2:
        return pygame.Vector2(self.vx, self.vy)

    @property
    def speed(self) -> float:
        return self.velocity.length()

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "vx": self.vx, "vy": self.vy}


Population = Tuple[Agent, ...]


def integrate(position: pygame.Vector2, velocity: pygame.Vector2, boundary,
              width: float, height: float) -> Agent:
    """
    Move an agent by its new velocity and resolve the arena edges.

    Args:
        position: Position before the move
        velocity: Velocity for this tick
        boundary: BoundaryPolicy applied after the move
        width: Arena width
        height: Arena height

    Returns:
        Agent after the move
    """
    position = position + velocity
    position, velocity = boundary.apply(position, velocity, width, height)
    return Agent.from_vectors(position, velocity)
