import pytest

from flocksim.analysis.metrics import (average_speed, collect_metrics, flock_cohesion,
                                       mean_nearest_neighbor_distance, polarization)
from flocksim.core.agents.base import Agent
from flocksim.core.state import SimulationState


def test_empty_population():
    assert flock_cohesion(()) == 0.0
    assert polarization(()) == 0.0
    assert average_speed(()) == 0.0
    assert mean_nearest_neighbor_distance(()) == 0.0


def test_cohesion():
    assert flock_cohesion((Agent(0, 0), Agent(2, 0))) == pytest.approx(1.0)


def test_polarization():
    aligned = (Agent(0, 0, 1, 0), Agent(5, 5, 3, 0))
    opposed = (Agent(0, 0, 1, 0), Agent(5, 5, -2, 0))
    assert polarization(aligned) == pytest.approx(1.0)
    assert polarization(opposed) == pytest.approx(0.0)
    assert polarization((Agent(0, 0),)) == 0.0


def test_average_speed():
    assert average_speed((Agent(0, 0, 3, 4), Agent(0, 0, 0, 1))) == pytest.approx(3.0)


def test_nearest_neighbor_distance():
    agents = (Agent(0, 0), Agent(1, 0), Agent(3, 0))
    assert mean_nearest_neighbor_distance(agents) == pytest.approx(4.0 / 3.0)


def test_collect_metrics_keys():
    state = SimulationState(7, (Agent(0, 0, 1, 0), Agent(1, 0, 1, 0)), (Agent(5, 5, 0, 2),), ())
    metrics = collect_metrics(state)
    assert metrics["frame"] == 7
    assert metrics["avg_predator_speed"] == pytest.approx(2.0)
    assert metrics["nearest_neighbor"] == pytest.approx(1.0)
