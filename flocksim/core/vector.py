"""
Vector helpers shared by the boid and predator steppers.
"""

import pygame


def limit(vec: pygame.Vector2, bound: float) -> pygame.Vector2:
    """
    Clamp a vector's magnitude.

    Args:
        vec: Vector to clamp
        bound: Maximum allowed magnitude

    Returns:
        A new vector, rescaled to `bound` if it was longer
    """
    result = pygame.Vector2(vec)
    mag = result.length()
    if mag > bound:
        result = result / mag * bound
    return result


def unit_away(origin: pygame.Vector2, other: pygame.Vector2) -> pygame.Vector2:
    """
    Unit vector pointing from `other` to `origin`.

    Coincident points have no direction and give the zero vector.
    """
    diff = origin - other
    dist = diff.length()
    if dist == 0:
        return pygame.Vector2(0, 0)
    return diff / dist


def steer(desired: pygame.Vector2, velocity: pygame.Vector2,
          max_speed: float, bound: float) -> pygame.Vector2:
    """
    Convert a desired vector into a steering force.

    Limits the desired vector to `max_speed`, subtracts the current
    velocity and limits the result to `bound`.
    """
    steering = limit(desired, max_speed) - velocity
    return limit(steering, bound)
