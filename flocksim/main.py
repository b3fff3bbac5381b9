"""
Main entry point for the flocking simulation.

Run with:
    python -m flocksim.main                       # Interactive simulation
    python -m flocksim.main --headless --plot     # Batch run with metrics plot
    python -m flocksim.main --headless --trials 10
"""

import os
import sys
from dataclasses import replace
from typing import Optional


# Set dummy video driver for headless runs
def set_headless():
    """Enable headless mode for batch runs."""
    os.environ["SDL_VIDEODRIVER"] = "dummy"


def build_config(args):
    """Build the run configuration from defaults, a JSON file and CLI flags."""
    from .core.config import SimulationConfig, load_config

    config = load_config(args.config) if args.config else SimulationConfig()
    if args.steps is not None:
        config.steps = args.steps
    if args.seed is not None:
        config.seed = args.seed
    if args.boundary is not None:
        config.boundaryPolicy = args.boundary
    config.validate()
    return config


def run_interactive(config):
    """Run the interactive simulation with GUI."""
    from .simulation.interactive import Simulation

    print("=" * 60)
    print("Flocking Simulation with Predators & Poor-Quality Areas")
    print("=" * 60)
    print("\nControls:")
    print("  ESC   - Quit")
    print("  SPACE - Pause / resume")
    print("  B     - Cycle boundary policy (rebound/damped/wrap)")
    print("  R     - Toggle area radius rings")
    print("  S     - Save snapshot to JSON")
    print("\nStarting simulation...")

    sim = Simulation(config)
    sim.run()


def run_headless(config, export_csv: bool = False, gif_file: Optional[str] = None,
                 video_file: Optional[str] = None, plot: bool = False):
    """
    Run one headless simulation and write the requested outputs.

    Args:
        config: Simulation configuration
        export_csv: Write trajectory and metrics CSV files
        gif_file: Animated GIF output path
        video_file: MP4 output path
        plot: Save a metrics plot

    Returns:
        Results dictionary
    """
    set_headless()

    from .simulation.batch import BatchSimulation
    from .analysis.export import export_trajectory_to_csv, export_metrics_to_csv
    from .analysis.plotting import plot_metrics, save_animation_gif

    print("=" * 60)
    print("HEADLESS FLOCKING RUN")
    print("=" * 60)
    print(f"Boids: {config.boidCount}  Predators: {config.predatorCount}  Areas: {config.areaCount}")
    print(f"Duration: {config.steps} frames  Seed: {config.seed}  Boundary: {config.boundaryPolicy}")
    print()

    record = export_csv or gif_file is not None
    sim = BatchSimulation(config, record_trajectory=record,
                          enable_video=video_file is not None, video_filename=video_file)
    results = sim.run()

    if export_csv:
        export_trajectory_to_csv(sim.trajectory, config.trajectoryOutputFile)
        export_metrics_to_csv(sim.metrics, config.metricsOutputFile)
    if gif_file:
        save_animation_gif(sim.trajectory, sim.area_radius,
                           config.screenWidth, config.screenHeight, gif_file)
    if plot:
        plot_metrics(sim.metrics)

    print("\n" + "=" * 60)
    print("RUN SUMMARY")
    print("=" * 60)
    print(f"   Final Cohesion: {results['final_cohesion']:.2f}")
    print(f"   Final Polarization: {results['final_polarization']:.3f}")
    print(f"   Final Avg Speed: {results['final_avg_speed']:.3f}")
    print(f"   Elapsed: {results['elapsed_time_seconds']:.1f}s")
    return results


def run_trials(config, num_trials: int):
    """
    Run repeated seeded batch simulations and aggregate their statistics.

    Args:
        config: Base configuration; trial k uses seed config.seed + k
        num_trials: Number of trials
    """
    set_headless()

    from .simulation.batch import BatchSimulation
    from .analysis.export import calculate_aggregate_stats, export_report

    print("=" * 60)
    print(f"FLOCKING TRIALS ({num_trials} x {config.steps} frames)")
    print("=" * 60)

    results = []
    for trial in range(num_trials):
        print(f"\nTrial {trial + 1}/{num_trials}")
        trial_config = replace(config, seed=config.seed + trial)
        result = BatchSimulation(trial_config).run()
        result["trial"] = trial + 1
        result.pop("metrics_over_time")
        results.append(result)

    aggregates = calculate_aggregate_stats(results)
    export_report({
        "config": config.to_dict(),
        "trial_results": results,
        "aggregates": aggregates,
    })

    print("\n" + "=" * 60)
    print("TRIALS SUMMARY")
    print("=" * 60)
    print(f"   Cohesion: {aggregates.get('final_cohesion_mean', 0):.2f} ± {aggregates.get('final_cohesion_std', 0):.2f}")
    print(f"   Polarization: {aggregates.get('final_polarization_mean', 0):.3f} ± {aggregates.get('final_polarization_std', 0):.3f}")
    return results, aggregates


def main(argv=None):
    """Main entry point."""
    import argparse

    from .core.config import BOUNDARY_POLICIES

    parser = argparse.ArgumentParser(description="Boids flocking with predators and poor-quality areas")
    parser.add_argument("--headless", action="store_true", help="Run without a window")
    parser.add_argument("--config", help="JSON file of config overrides")
    parser.add_argument("--steps", type=int, help="Simulation duration in frames")
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument("--boundary", choices=BOUNDARY_POLICIES, help="Boundary policy")
    parser.add_argument("--trials", type=int, default=0, help="Number of seeded headless trials")
    parser.add_argument("--export-csv", action="store_true", help="Export trajectory and metrics CSV")
    parser.add_argument("--gif", help="Save an animated GIF to this file")
    parser.add_argument("--video", help="Record an MP4 video to this file")
    parser.add_argument("--plot", action="store_true", help="Save a metrics plot")

    args = parser.parse_args(argv)

    try:
        config = build_config(args)
    except (ValueError, OSError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(2)

    if args.trials > 0:
        run_trials(config, args.trials)
    elif args.headless:
        run_headless(config, export_csv=args.export_csv, gif_file=args.gif,
                     video_file=args.video, plot=args.plot)
    else:
        run_interactive(config)


if __name__ == "__main__":
    main()
