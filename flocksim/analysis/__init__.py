"""
Analysis module for metrics, plotting and exporting simulation traces.
"""

from .metrics import collect_metrics, flock_cohesion, polarization
from .plotting import plot_metrics, plot_snapshot, save_animation_gif
from .export import export_trajectory_to_csv, export_metrics_to_csv

__all__ = [
    'collect_metrics',
    'flock_cohesion',
    'polarization',
    'plot_metrics',
    'plot_snapshot',
    'save_animation_gif',
    'export_trajectory_to_csv',
    'export_metrics_to_csv'
]
