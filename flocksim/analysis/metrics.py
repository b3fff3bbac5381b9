"""
Quantitative summaries of a population snapshot.
"""

from typing import Dict, Sequence

import numpy as np

from ..core.agents.base import Agent


NN_BLOCK_SIZE = 512


def _positions(agents: Sequence[Agent]) -> np.ndarray:
    return np.array([[a.x, a.y] for a in agents], dtype=float).reshape(-1, 2)


def _velocities(agents: Sequence[Agent]) -> np.ndarray:
    return np.array([[a.vx, a.vy] for a in agents], dtype=float).reshape(-1, 2)


def flock_cohesion(agents: Sequence[Agent]) -> float:
    """
    Average distance to the flock centroid.

    Lower values mean tighter grouping.
    """
    if not agents:
        return 0.0
    pos = _positions(agents)
    centroid = pos.mean(axis=0)
    return float(np.linalg.norm(pos - centroid, axis=1).mean())


def polarization(agents: Sequence[Agent]) -> float:
    """
    Order parameter: length of the mean unit heading.

    1.0 when every agent moves the same way, near 0.0 for random headings.
    Stationary agents are ignored.
    """
    vel = _velocities(agents)
    speeds = np.linalg.norm(vel, axis=1)
    moving = speeds > 0
    if not moving.any():
        return 0.0
    headings = vel[moving] / speeds[moving][:, None]
    return float(np.linalg.norm(headings.mean(axis=0)))


def average_speed(agents: Sequence[Agent]) -> float:
    if not agents:
        return 0.0
    return float(np.linalg.norm(_velocities(agents), axis=1).mean())


def mean_nearest_neighbor_distance(agents: Sequence[Agent]) -> float:
    """Mean distance from each agent to its closest other agent."""
    if len(agents) < 2:
        return 0.0
    pos = _positions(agents)
    nearest = np.empty(len(pos))
    # Row blocks keep the distance matrix small for large flocks
    for start in range(0, len(pos), NN_BLOCK_SIZE):
        block = pos[start:start + NN_BLOCK_SIZE]
        dist = np.linalg.norm(block[:, None, :] - pos[None, :, :], axis=-1)
        rows = np.arange(len(block))
        dist[rows, rows + start] = np.inf
        nearest[start:start + len(block)] = dist.min(axis=1)
    return float(nearest.mean())


def collect_metrics(state) -> Dict[str, float]:
    """
    Compute all metrics for one SimulationState.

    Returns:
        Dictionary keyed by metric name, including the frame number
    """
    return {
        "frame": state.frame,
        "cohesion": flock_cohesion(state.boids),
        "polarization": polarization(state.boids),
        "avg_speed": average_speed(state.boids),
        "nearest_neighbor": mean_nearest_neighbor_distance(state.boids),
        "avg_predator_speed": average_speed(state.predators),
    }
