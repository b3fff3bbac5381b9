"""
Simulation module containing the headless and interactive drivers.
"""

from .batch import BatchSimulation
from .interactive import Simulation

__all__ = ['BatchSimulation', 'Simulation']
