"""
Export functions for saving simulation traces to CSV and JSON.
"""

import csv
import json
import math
from typing import Dict, List, Any, Iterable, Sequence


TRAJECTORY_FIELDS = ['frame', 'species', 'index', 'x', 'y', 'vx', 'vy']
METRIC_FIELDS = ['frame', 'cohesion', 'polarization', 'avg_speed',
                 'nearest_neighbor', 'avg_predator_speed']


def export_trajectory_to_csv(states: Iterable, filename: str = "flock_trajectory.csv") -> str:
    """
    Export every agent of every recorded frame to CSV.

    Args:
        states: SimulationState snapshots in frame order
        filename: Output filename

    Returns:
        Path to saved CSV file
    """
    with open(filename, 'w', newline='') as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=TRAJECTORY_FIELDS)
        writer.writeheader()

        for state in states:
            for species, population in (("boid", state.boids),
                                        ("predator", state.predators),
                                        ("area", state.areas)):
                for index, agent in enumerate(population):
                    writer.writerow({
                        'frame': state.frame,
                        'species': species,
                        'index': index,
                        'x': agent.x,
                        'y': agent.y,
                        'vx': agent.vx,
                        'vy': agent.vy,
                    })

    print(f"  Trajectory saved to: {filename}")
    return filename


def export_metrics_to_csv(metrics: Sequence[Dict[str, float]],
                          filename: str = "flock_metrics.csv") -> str:
    """
    Export the per-frame metrics time series to CSV.

    Args:
        metrics: One dictionary per frame, as returned by collect_metrics
        filename: Output filename

    Returns:
        Path to saved CSV file
    """
    with open(filename, 'w', newline='') as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=METRIC_FIELDS, extrasaction='ignore')
        writer.writeheader()
        for row in metrics:
            writer.writerow({
                'frame': row['frame'],
                'cohesion': f"{row['cohesion']:.4f}",
                'polarization': f"{row['polarization']:.4f}",
                'avg_speed': f"{row['avg_speed']:.4f}",
                'nearest_neighbor': f"{row['nearest_neighbor']:.4f}",
                'avg_predator_speed': f"{row['avg_predator_speed']:.4f}",
            })

    print(f"  Metrics time-series saved to: {filename}")
    return filename


def export_report(results: Dict[str, Any], filename: str = "flock_report.json") -> str:
    """
    Export a full run or trials report to JSON.

    Args:
        results: Report dictionary
        filename: Output filename

    Returns:
        Path to saved JSON file
    """
    with open(filename, 'w') as f:
        json.dump(results, f, indent=2)

    print(f"\nReport saved to: {filename}")
    return filename


def save_snapshot(state, area_radius: Sequence[float], config: Dict[str, Any],
                  filename: str = "flock_snapshot.json") -> str:
    """
    Save one simulation snapshot with its area radii and config to JSON.

    Returns:
        Path to saved JSON file
    """
    data = state.to_dict()
    data["area_radius"] = list(area_radius)
    data["config"] = config
    with open(filename, 'w') as f:
        json.dump(data, f, indent=4)
    return filename


def calculate_aggregate_stats(trial_results: List[Dict]) -> Dict[str, float]:
    """
    Calculate mean and standard deviation across trials.

    Args:
        trial_results: List of result dictionaries from multiple trials

    Returns:
        Dictionary with mean and std for each metric
    """
    if not trial_results:
        return {}

    metrics = [
        "final_cohesion", "final_polarization", "final_avg_speed",
        "final_nearest_neighbor", "avg_cohesion", "avg_polarization",
        "elapsed_time_seconds"
    ]

    aggregates = {}

    for metric in metrics:
        values = [r[metric] for r in trial_results if metric in r and r[metric] is not None]
        if values:
            mean = sum(values) / len(values)
            aggregates[f"{metric}_mean"] = mean
            if len(values) > 1:
                variance = sum((x - mean) ** 2 for x in values) / (len(values) - 1)
                aggregates[f"{metric}_std"] = math.sqrt(variance)
            else:
                aggregates[f"{metric}_std"] = 0

    return aggregates
