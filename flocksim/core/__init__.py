"""
Core module containing configuration, agent records and the per-tick steppers.
"""

from .config import (SimulationConfig, StepParameters, ConfigurationError,
                     DEFAULT_CONFIG, load_config, save_config)
from .boundary import BoundaryPolicy, get_boundary_policy
from .state import SimulationState, advance
from .initializer import initial_state

__all__ = ['SimulationConfig', 'StepParameters', 'ConfigurationError',
           'DEFAULT_CONFIG', 'load_config', 'save_config',
           'BoundaryPolicy', 'get_boundary_policy',
           'SimulationState', 'advance', 'initial_state']
