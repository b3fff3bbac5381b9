import json
import math

import pytest

from flocksim.core.config import (DEFAULT_CONFIG, ConfigurationError, SimulationConfig, StepParameters,
                                  load_config, save_config)


def test_defaults_validate():
    DEFAULT_CONFIG.validate()


@pytest.mark.parametrize("overrides", [
    {"boidCount": -1},
    {"predatorCount": -2},
    {"areaCount": 1.5},
    {"maxSpeed": float("nan")},
    {"neighborRadius": float("inf")},
    {"separationWeight": -0.1},
    {"boundaryPolicy": "bounce"},
    {"steeringLimit": "maxAccel"},
    {"areaRadiusRange": (30.0, 10.0)},
    {"reboundDamping": 1.5},
    {"reboundDamping": -0.5},
    {"predatorRadius": -1.0},
])
def test_invalid_config_rejected(overrides):
    with pytest.raises(ConfigurationError):
        SimulationConfig(**overrides).validate()


def test_step_parameters_from_config():
    config = SimulationConfig(maxSpeed=3.0, steeringLimit="maxForce", maxForce=0.2)
    params = config.step_parameters([12.0, 20.0])
    assert params.area_radius == (12.0, 20.0)
    assert params.steering_bound == 0.2
    assert params.predator_max_speed == pytest.approx(3.0 * config.predRelSpeed)


def test_steering_bound_defaults_to_max_speed():
    params = StepParameters(width=10, height=10, max_speed=7.0, max_force=0.1)
    assert params.steering_bound == 7.0


def test_step_parameters_reject_non_finite():
    with pytest.raises(ConfigurationError):
        StepParameters(width=math.nan, height=10, max_speed=1)
    with pytest.raises(ConfigurationError):
        StepParameters(width=10, height=10, max_speed=1, area_radius=(5.0, math.inf))


def test_check_areas():
    params = StepParameters(width=10, height=10, max_speed=1, area_radius=(1.0, 2.0))
    params.check_areas([object(), object()])
    with pytest.raises(ConfigurationError):
        params.check_areas([object()])


def test_from_dict_ignores_unknown_keys():
    config = SimulationConfig.from_dict({"boidCount": 12, "notAField": 3, "areaRadiusRange": [5, 8]})
    assert config.boidCount == 12
    assert config.areaRadiusRange == (5, 8)


def test_save_and_load_config(tmp_path):
    path = tmp_path / "config.json"
    save_config(SimulationConfig(boidCount=33, boundaryPolicy="wrap"), str(path))
    loaded = load_config(str(path))
    assert loaded.boidCount == 33
    assert loaded.boundaryPolicy == "wrap"


def test_load_config_rejects_bad_values(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"areaCount": -4}))
    with pytest.raises(ConfigurationError):
        load_config(str(path))

    path.write_text(json.dumps([1, 2, 3]))
    with pytest.raises(ConfigurationError):
        load_config(str(path))


@pytest.mark.parametrize("overrides", [
    {"max_speed": -1.0},
    {"max_force": -0.05},
    {"pred_rel_speed": -1.5},
    {"neighbor_radius": -10.0},
])
def test_step_parameters_reject_negative_bounds(overrides):
    values = dict(width=10, height=10, max_speed=1.0)
    values.update(overrides)
    with pytest.raises(ConfigurationError):
        StepParameters(**values)


def test_radii_follow_screen_width_by_default():
    params = SimulationConfig(screenWidth=600).step_parameters([])
    assert params.neighbor_radius == pytest.approx(60.0)
    assert params.predator_radius == 30.0

    default = DEFAULT_CONFIG.step_parameters([])
    assert default.neighbor_radius == pytest.approx(100.0)
    assert default.predator_radius == 50.0


def test_explicit_radii_override_width_defaults():
    params = SimulationConfig(screenWidth=600, neighborRadius=25.0,
                              predatorRadius=12.0).step_parameters([])
    assert params.neighbor_radius == 25.0
    assert params.predator_radius == 12.0


def test_config_with_defaulted_radii_round_trips(tmp_path):
    path = tmp_path / "config.json"
    save_config(SimulationConfig(), str(path))
    loaded = load_config(str(path))
    assert loaded.neighborRadius is None
    assert loaded.predatorRadius is None
