from flocksim.analysis.metrics import collect_metrics
from flocksim.analysis.plotting import plot_metrics, plot_snapshot, save_animation_gif
from flocksim.core.agents.base import Agent
from flocksim.core.state import SimulationState


def make_states(count=3):
    return [SimulationState(i, (Agent(10 + i, 10, 1, 0), Agent(20, 20 + i, 0, 1)),
                            (Agent(50, 50),), (Agent(70, 70),))
            for i in range(count)]


def test_plot_metrics(tmp_path):
    out = tmp_path / "metrics.png"
    plot_metrics([collect_metrics(s) for s in make_states()], str(out))
    assert out.exists()


def test_plot_snapshot(tmp_path):
    out = tmp_path / "snap.png"
    plot_snapshot(make_states(1)[0], [8.0], 100, 100, str(out))
    assert out.exists()


def test_save_animation_gif(tmp_path):
    out = tmp_path / "flock.gif"
    save_animation_gif(make_states(), [8.0], 100, 100, str(out))
    assert out.exists()
    assert out.read_bytes()[:3] == b"GIF"
