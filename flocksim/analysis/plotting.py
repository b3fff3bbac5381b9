"""
Plotting functions for visualizing flock traces.
"""

from typing import Dict, List, Sequence

import matplotlib.pyplot as plt
from matplotlib import animation


BOID_COLOR = 'blue'
PREDATOR_COLOR = 'red'
AREA_COLOR = 'black'


def plot_metrics(metrics: List[Dict[str, float]], output_file: str = "flock_metrics.png",
                 show: bool = False) -> str:
    """
    Create a multi-panel plot of the flock metrics over time.

    Args:
        metrics: One dictionary per frame, as returned by collect_metrics
        output_file: Output filename for the plot
        show: Open an interactive window after saving

    Returns:
        Path to saved plot file
    """
    fig, axes = plt.subplots(2, 2, figsize=(14, 10))
    axes = axes.flatten()

    panels = [
        ("cohesion", "Cohesion (avg dist to centroid)", '#FF6B6B'),
        ("polarization", "Polarization (order parameter)", '#4ECDC4'),
        ("avg_speed", "Average boid speed", '#FFB347'),
        ("nearest_neighbor", "Mean nearest-neighbor distance", '#95E1D3'),
    ]

    frames = [m["frame"] for m in metrics]
    for ax, (key, label, color) in zip(axes, panels):
        values = [m[key] for m in metrics]
        ax.plot(frames, values, linewidth=2, color=color)
        ax.set_xlabel('Frame Number', fontsize=10)
        ax.set_ylabel(label, fontsize=10)
        ax.grid(True, alpha=0.3, linestyle='--')
        if values:
            ax.annotate(f'{values[-1]:.2f}', xy=(frames[-1], values[-1]),
                        xytext=(5, 0), textcoords='offset points',
                        fontsize=8, color=color)

    fig.suptitle('Flock Metrics Over Time', fontsize=14, fontweight='bold')
    fig.tight_layout()
    fig.savefig(output_file, dpi=150, bbox_inches='tight')
    print(f"\nMetrics plot saved to: {output_file}")

    if show:
        plt.show()
    plt.close(fig)
    return output_file


def _draw_state(ax, state, area_radius: Sequence[float], width: float, height: float) -> None:
    ax.clear()
    for area, radius in zip(state.areas, area_radius):
        ax.add_patch(plt.Circle((area.x, area.y), radius, color=AREA_COLOR, fill=False, alpha=0.3))
    if state.areas:
        ax.scatter([a.x for a in state.areas], [a.y for a in state.areas], c=AREA_COLOR, s=20)
    if state.boids:
        ax.scatter([b.x for b in state.boids], [b.y for b in state.boids], c=BOID_COLOR, s=2)
    if state.predators:
        ax.scatter([p.x for p in state.predators], [p.y for p in state.predators], c=PREDATOR_COLOR, s=20)
    ax.set_xlim(0, width)
    ax.set_ylim(0, height)
    ax.set_aspect('equal')
    ax.set_axis_off()
    ax.set_title(f'Frame {state.frame}', fontsize=10)


def plot_snapshot(state, area_radius: Sequence[float], width: float, height: float,
                  output_file: str = "flock_snapshot.png") -> str:
    """
    Scatter plot of one snapshot: boids blue, predators red, areas black.

    Returns:
        Path to saved plot file
    """
    fig, ax = plt.subplots(figsize=(8, 8 * height / width if width else 8))
    _draw_state(ax, state, area_radius, width, height)
    fig.savefig(output_file, dpi=150, bbox_inches='tight')
    plt.close(fig)
    print(f"  Snapshot plot saved to: {output_file}")
    return output_file


def save_animation_gif(states: Sequence, area_radius: Sequence[float], width: float, height: float,
                       output_file: str = "flock.gif", interval: int = 100) -> str:
    """
    Render recorded snapshots into an animated GIF.

    Args:
        states: SimulationState snapshots in frame order
        area_radius: Area radii, fixed for the run
        width: Arena width
        height: Arena height
        output_file: Output GIF filename
        interval: Delay between frames in milliseconds

    Returns:
        Path to saved GIF file
    """
    if not states:
        raise ValueError("No recorded frames to animate")

    fig, ax = plt.subplots(figsize=(6, 6))

    def update(i):
        _draw_state(ax, states[i], area_radius, width, height)
        return []

    anim = animation.FuncAnimation(fig, update, frames=len(states), interval=interval, blit=False)
    anim.save(output_file, writer=animation.PillowWriter(fps=max(1, 1000 // interval)))
    plt.close(fig)
    print(f"  Animation saved to: {output_file}")
    return output_file
