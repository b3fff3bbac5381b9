"""
Kinematics for mobile poor-quality areas.
"""

from typing import Sequence

from .base import Agent, Population, integrate
from ..boundary import BoundaryPolicy, DEFAULT_BOUNDARY
from ..config import StepParameters


def step_areas(areas: Sequence[Agent], params: StepParameters,
               boundary: BoundaryPolicy = DEFAULT_BOUNDARY) -> Population:
    """
    Move every area along its velocity and resolve the arena edges.

    Areas do not steer and have no speed limit; their radii stay fixed.
    """
    return tuple(integrate(a.position, a.velocity, boundary, params.width, params.height)
                 for a in areas)
