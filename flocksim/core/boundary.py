"""
Boundary policies resolving agents that leave the arena.
"""

from typing import Tuple

import pygame

from .config import BOUNDARY_POLICIES, ConfigurationError


class BoundaryPolicy:
    """
    Base class for arena edge handling.

    Each axis is resolved independently, so an agent crossing a corner
    has both velocity components handled in the same tick.
    """

    name = "base"

    def apply(self, position: pygame.Vector2, velocity: pygame.Vector2,
              width: float, height: float) -> Tuple[pygame.Vector2, pygame.Vector2]:
        """
        Resolve a position/velocity pair against the arena edges.

        Args:
            position: Position after integration
            velocity: Velocity used for the integration
            width: Arena width
            height: Arena height

        Returns:
            Tuple of (position, velocity), both new vectors
        """
        x, vx = self.resolve_axis(position.x, velocity.x, width)
        y, vy = self.resolve_axis(position.y, velocity.y, height)
        return pygame.Vector2(x, y), pygame.Vector2(vx, vy)

    def resolve_axis(self, coord: float, vel: float, extent: float) -> Tuple[float, float]:
        raise NotImplementedError


class ReboundBoundary(BoundaryPolicy):
    """Hard elastic rebound: reverse the component and clamp onto the wall."""

    name = "rebound"

    def resolve_axis(self, coord, vel, extent):
        if coord < 0 or coord > extent:
            return max(0.0, min(extent, coord)), -vel
        return coord, vel


class DampedReboundBoundary(ReboundBoundary):
    """Rebound that loses speed on every wall hit."""

    name = "damped"

    def __init__(self, damping: float = 0.9):
        if not 0.0 <= damping <= 1.0:
            raise ConfigurationError(f"damping must be within [0, 1], got {damping!r}")
        self.damping = damping

    def resolve_axis(self, coord, vel, extent):
        if coord < 0 or coord > extent:
            return max(0.0, min(extent, coord)), -vel * self.damping
        return coord, vel


class WrapBoundary(BoundaryPolicy):
    """Toroidal arena: leaving one edge re-enters from the opposite one."""

    name = "wrap"

    def resolve_axis(self, coord, vel, extent):
        if extent <= 0:
            return 0.0, vel
        if coord < 0 or coord > extent:
            coord = coord % extent
        return coord, vel


def get_boundary_policy(name: str = "rebound", damping: float = 0.9) -> BoundaryPolicy:
    """
    Select a boundary policy by its configuration name.

    Args:
        name: One of "rebound", "damped" or "wrap"
        damping: Velocity factor for the damped policy

    Returns:
        BoundaryPolicy instance
    """
    if name == "rebound":
        return ReboundBoundary()
    if name == "damped":
        return DampedReboundBoundary(damping)
    if name == "wrap":
        return WrapBoundary()
    raise ConfigurationError(f"Unknown boundary policy {name!r}, expected one of {BOUNDARY_POLICIES}")


DEFAULT_BOUNDARY = ReboundBoundary()
