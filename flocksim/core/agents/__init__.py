"""
Agent record and stepper classes for the flocking simulation.
"""

from .base import Agent
from .boid import FlockStepper, step_boids
from .predator import PredatorStepper, step_predators
from .area import step_areas

__all__ = ['Agent', 'FlockStepper', 'step_boids', 'PredatorStepper', 'step_predators', 'step_areas']
