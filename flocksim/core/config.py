"""
Configuration classes and defaults for the flocking simulation.
"""

import json
import math
from dataclasses import dataclass, field, fields, asdict
from typing import List, Literal, Optional, Sequence, Tuple


BOUNDARY_POLICIES = ("rebound", "damped", "wrap")
STEERING_LIMITS = ("maxSpeed", "maxForce")

# Rule weights (used across modules)
SEPARATION_WEIGHT = 1.0
ALIGNMENT_WEIGHT = 0.1
COHESION_WEIGHT = 0.1
PREDATOR_AVOID_WEIGHT = 1.5
AREA_AVOID_WEIGHT = 1.0

# Fixed pursuit nudge and velocity noise half-width
PURSUIT_STRENGTH = 0.05
PERTURBATION = 0.05

# StepParameters fields that bound lengths or scale speeds
NON_NEGATIVE_PARAMETERS = ("width", "height", "max_speed", "max_force", "neighbor_radius",
                           "predator_radius", "pred_rel_speed", "pursuit_strength",
                           "perturbation")


class ConfigurationError(ValueError):
    """Raised when a configuration cannot start a simulation run."""


def _check_finite(name: str, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ConfigurationError(f"{name} must be finite, got {value!r}")


def _check_non_negative(name: str, value: float) -> None:
    _check_finite(name, value)
    if value < 0:
        raise ConfigurationError(f"{name} must be non-negative, got {value!r}")


@dataclass
class SimulationConfig:
    """Configuration for the flocking simulation."""

    # Arena settings
    screenWidth: int = 1000
    screenHeight: int = 1000

    # Agent counts
    boidCount: int = 500
    predatorCount: int = 10
    areaCount: int = 10

    # Movement parameters
    maxSpeed: float = 20.0
    maxForce: float = 0.05
    steeringLimit: Literal["maxSpeed", "maxForce"] = "maxSpeed"
    perturbation: float = PERTURBATION

    # Neighbor detection (None derives the radius from screenWidth)
    neighborRadius: Optional[float] = None
    predatorRadius: Optional[float] = None
    areaRadiusRange: Tuple[float, float] = (10.0, 30.0)

    # Predator parameters
    predRelSpeed: float = 1.5
    pursuitStrength: float = PURSUIT_STRENGTH

    # Initial velocity half-ranges
    boidVelocityRange: float = 1.0
    predatorVelocityRange: float = 0.5
    areaVelocityRange: float = 0.5
    mobileAreas: bool = False

    # Boundary handling
    boundaryPolicy: Literal["rebound", "damped", "wrap"] = "rebound"
    reboundDamping: float = 0.9

    # Run control
    seed: int = 42
    steps: int = 300

    # Visualization
    fpsTarget: int = 30
    showAreaRadius: bool = True
    backgroundColor: List[int] = field(default_factory=lambda: [255, 255, 255])
    boidColor: List[int] = field(default_factory=lambda: [0, 0, 255])
    predatorColor: List[int] = field(default_factory=lambda: [255, 0, 0])
    areaColor: List[int] = field(default_factory=lambda: [0, 0, 0])

    # Output
    snapshotOutputFile: str = "flock_snapshot.json"
    trajectoryOutputFile: str = "flock_trajectory.csv"
    metricsOutputFile: str = "flock_metrics.csv"

    # Rule weights
    separationWeight: float = SEPARATION_WEIGHT
    alignmentWeight: float = ALIGNMENT_WEIGHT
    cohesionWeight: float = COHESION_WEIGHT
    predatorAvoidWeight: float = PREDATOR_AVOID_WEIGHT
    areaAvoidWeight: float = AREA_AVOID_WEIGHT

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        data = asdict(self)
        data["areaRadiusRange"] = list(self.areaRadiusRange)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "SimulationConfig":
        """Create config from dictionary."""
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}
        if "areaRadiusRange" in values:
            values["areaRadiusRange"] = tuple(values["areaRadiusRange"])
        return cls(**values)

    def validate(self) -> None:
        """
        Reject configurations that cannot start a run.

        Raises:
            ConfigurationError: On negative counts, non-finite or negative
                numeric values, or unknown policy names
        """
        for name in ("boidCount", "predatorCount", "areaCount", "steps"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise ConfigurationError(f"{name} must be non-negative, got {value}")

        for name in ("screenWidth", "screenHeight", "maxSpeed", "maxForce",
                     "perturbation", "predRelSpeed", "pursuitStrength", "boidVelocityRange",
                     "predatorVelocityRange", "areaVelocityRange",
                     "reboundDamping", "separationWeight", "alignmentWeight",
                     "cohesionWeight", "predatorAvoidWeight", "areaAvoidWeight"):
            _check_non_negative(name, getattr(self, name))

        for name in ("neighborRadius", "predatorRadius"):
            if getattr(self, name) is not None:
                _check_non_negative(name, getattr(self, name))

        if self.reboundDamping > 1:
            raise ConfigurationError(
                f"reboundDamping must be within [0, 1], got {self.reboundDamping!r}")

        if self.boundaryPolicy not in BOUNDARY_POLICIES:
            raise ConfigurationError(
                f"boundaryPolicy must be one of {BOUNDARY_POLICIES}, got {self.boundaryPolicy!r}")
        if self.steeringLimit not in STEERING_LIMITS:
            raise ConfigurationError(
                f"steeringLimit must be one of {STEERING_LIMITS}, got {self.steeringLimit!r}")

        if len(self.areaRadiusRange) != 2:
            raise ConfigurationError("areaRadiusRange must hold exactly two values")
        low, high = self.areaRadiusRange
        _check_finite("areaRadiusRange", low)
        _check_finite("areaRadiusRange", high)
        if low <= 0 or high < low:
            raise ConfigurationError(
                f"areaRadiusRange must satisfy 0 < low <= high, got {self.areaRadiusRange}")

    def resolved_neighbor_radius(self) -> float:
        """Neighbor radius, defaulting to a tenth of the arena width."""
        if self.neighborRadius is None:
            return self.screenWidth / 10
        return float(self.neighborRadius)

    def resolved_predator_radius(self) -> float:
        """Predator threat radius, defaulting to a twentieth of the arena width."""
        if self.predatorRadius is None:
            return float(round(self.screenWidth / 20))
        return float(self.predatorRadius)

    def step_parameters(self, area_radius: Sequence[float]) -> "StepParameters":
        """
        Freeze this config into the parameter set consumed by the steppers.

        Args:
            area_radius: One avoidance radius per area

        Returns:
            Immutable StepParameters
        """
        self.validate()
        return StepParameters(
            width=float(self.screenWidth),
            height=float(self.screenHeight),
            max_speed=float(self.maxSpeed),
            max_force=float(self.maxForce),
            steering_limit=self.steeringLimit,
            neighbor_radius=self.resolved_neighbor_radius(),
            predator_radius=self.resolved_predator_radius(),
            area_radius=tuple(float(r) for r in area_radius),
            separation_weight=float(self.separationWeight),
            alignment_weight=float(self.alignmentWeight),
            cohesion_weight=float(self.cohesionWeight),
            predator_avoid_weight=float(self.predatorAvoidWeight),
            area_avoid_weight=float(self.areaAvoidWeight),
            pred_rel_speed=float(self.predRelSpeed),
            pursuit_strength=float(self.pursuitStrength),
            perturbation=float(self.perturbation),
        )


@dataclass(frozen=True)
class StepParameters:
    """Immutable parameter set for one simulation run."""

    width: float
    height: float
    max_speed: float
    max_force: float = 0.05
    steering_limit: str = "maxSpeed"
    neighbor_radius: float = 100.0
    predator_radius: float = 50.0
    area_radius: Tuple[float, ...] = ()
    separation_weight: float = SEPARATION_WEIGHT
    alignment_weight: float = ALIGNMENT_WEIGHT
    cohesion_weight: float = COHESION_WEIGHT
    predator_avoid_weight: float = PREDATOR_AVOID_WEIGHT
    area_avoid_weight: float = AREA_AVOID_WEIGHT
    pred_rel_speed: float = 1.5
    pursuit_strength: float = PURSUIT_STRENGTH
    perturbation: float = PERTURBATION

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "steering_limit":
                if value not in STEERING_LIMITS:
                    raise ConfigurationError(
                        f"steering_limit must be one of {STEERING_LIMITS}, got {value!r}")
            elif f.name == "area_radius":
                for radius in value:
                    _check_non_negative("area_radius", radius)
            elif f.name in NON_NEGATIVE_PARAMETERS:
                _check_non_negative(f.name, value)
            else:
                _check_finite(f.name, value)

    @property
    def steering_bound(self) -> float:
        """Bound used by the second clamp of the steer sequence."""
        if self.steering_limit == "maxForce":
            return self.max_force
        return self.max_speed

    @property
    def predator_max_speed(self) -> float:
        return self.max_speed * self.pred_rel_speed

    def check_areas(self, areas: Sequence) -> None:
        """Raise ConfigurationError unless there is one radius per area."""
        if len(self.area_radius) != len(areas):
            raise ConfigurationError(
                f"area_radius has {len(self.area_radius)} entries for {len(areas)} areas")


def load_config(path: str) -> SimulationConfig:
    """
    Load a config from a JSON file of overrides.

    Args:
        path: JSON file path

    Returns:
        Validated SimulationConfig
    """
    with open(path) as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path} must contain a JSON object")
    config = SimulationConfig.from_dict(data)
    config.validate()
    return config


def save_config(config: SimulationConfig, path: str) -> str:
    """Write a config to a JSON file and return the path."""
    with open(path, 'w') as f:
        json.dump(config.to_dict(), f, indent=4)
    return path


# Default configuration for interactive simulation
DEFAULT_CONFIG = SimulationConfig()
