import json

import pytest

from flocksim.main import main


def write_config(tmp_path, **overrides):
    values = {
        "screenWidth": 120, "screenHeight": 120, "boidCount": 10, "predatorCount": 1,
        "areaCount": 1, "maxSpeed": 2.0, "neighborRadius": 25.0, "steps": 4,
        "trajectoryOutputFile": str(tmp_path / "traj.csv"),
        "metricsOutputFile": str(tmp_path / "metrics.csv"),
    }
    values.update(overrides)
    path = tmp_path / "config.json"
    path.write_text(json.dumps(values))
    return str(path)


def test_headless_run_exports(tmp_path):
    main(["--headless", "--config", write_config(tmp_path), "--export-csv", "--seed", "3"])
    assert (tmp_path / "traj.csv").exists()
    assert (tmp_path / "metrics.csv").exists()


def test_trials_report(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    main(["--trials", "2", "--config", write_config(tmp_path, steps=2)])
    report = json.loads((tmp_path / "flock_report.json").read_text())
    assert len(report["trial_results"]) == 2
    assert [r["seed"] for r in report["trial_results"]] == [42, 43]
    assert "final_cohesion_mean" in report["aggregates"]


def test_bad_config_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--headless", "--config", write_config(tmp_path, boidCount=-3)])
    assert exc.value.code == 2
    assert "Configuration error" in capsys.readouterr().err
