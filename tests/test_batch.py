import pytest

from flocksim.core.config import ConfigurationError, SimulationConfig
from flocksim.simulation.batch import BatchSimulation


def small_config(**overrides):
    values = dict(screenWidth=200, screenHeight=200, boidCount=25, predatorCount=2,
                  areaCount=2, maxSpeed=3.0, neighborRadius=30.0, predatorRadius=25.0,
                  steps=12, seed=9)
    values.update(overrides)
    return SimulationConfig(**values)


def test_run_collects_metrics_and_trajectory():
    sim = BatchSimulation(small_config(), record_trajectory=True, verbose=False)
    results = sim.run()

    assert results["frames"] == 12
    assert len(sim.metrics) == 13
    assert len(sim.trajectory) == 13
    assert [s.frame for s in sim.trajectory] == list(range(13))
    assert results["boid_count"] == 25
    assert len(results["area_radius"]) == 2
    assert 0.0 <= results["final_polarization"] <= 1.0 + 1e-9


def test_runs_are_reproducible_per_seed():
    a = BatchSimulation(small_config(), verbose=False)
    b = BatchSimulation(small_config(), verbose=False)
    a.run()
    b.run()
    assert a.state == b.state

    c = BatchSimulation(small_config(seed=10), verbose=False)
    c.run()
    assert c.state != a.state


def test_invariants_hold_over_run():
    config = small_config(boundaryPolicy="damped", mobileAreas=True, steps=30)
    sim = BatchSimulation(config, record_trajectory=True, verbose=False)
    sim.run()
    pred_limit = config.maxSpeed * config.predRelSpeed
    for state in sim.trajectory[1:]:
        for b in state.boids:
            assert b.speed <= config.maxSpeed + 1e-9
            assert 0 <= b.x <= config.screenWidth and 0 <= b.y <= config.screenHeight
        for p in state.predators:
            assert p.speed <= pred_limit + 1e-9
            assert 0 <= p.x <= config.screenWidth and 0 <= p.y <= config.screenHeight


def test_metrics_interval():
    sim = BatchSimulation(small_config(steps=10), metrics_interval=5, verbose=False)
    sim.run()
    assert [m["frame"] for m in sim.metrics] == [0, 5, 10]


def test_bad_config_rejected_before_run():
    with pytest.raises(ConfigurationError):
        BatchSimulation(small_config(maxSpeed=float("nan")), verbose=False)


def test_damped_boundary_keeps_speed_limits():
    config = small_config(screenWidth=50, screenHeight=50, boundaryPolicy="damped",
                          reboundDamping=1.0, steps=60)
    sim = BatchSimulation(config, record_trajectory=True, verbose=False)
    sim.run()
    for state in sim.trajectory[1:]:
        assert max(b.speed for b in state.boids) <= config.maxSpeed + 1e-9
        assert max(p.speed for p in state.predators) <= config.maxSpeed * config.predRelSpeed + 1e-9


def test_damping_above_one_rejected_before_run():
    with pytest.raises(ConfigurationError):
        BatchSimulation(small_config(boundaryPolicy="damped", reboundDamping=1.5), verbose=False)


def test_video_recording_writes_file(tmp_path):
    video = tmp_path / "run.mp4"
    sim = BatchSimulation(small_config(steps=5), enable_video=True,
                          video_filename=str(video), video_fps=10, verbose=False)
    results = sim.run()

    assert results["frames"] == 5
    assert sim.video_writer is None
    assert video.exists()
    assert video.stat().st_size > 0
