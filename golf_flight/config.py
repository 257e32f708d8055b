"""
Physical Configuration
======================
Single immutable set of constants shared by the force model, the
trajectory integrator and the air-density helpers.

Defaults describe a regulation golf ball in standard sea-level air,
integrated with a 1 ms fixed timestep.
"""

import numpy as np
from dataclasses import dataclass, replace


# ── Standard values ───────────────────────────────────────────────────────
GRAVITY                 = 9.81        # m/s²
STANDARD_AIR_DENSITY    = 1.225       # kg/m³  (sea level)
AIR_VISCOSITY           = 1.81e-5     # Pa·s
BALL_MASS               = 0.0459      # kg
BALL_RADIUS             = 0.0213      # m
BASE_DRAG_COEFFICIENT   = 0.05
BASE_LIFT_COEFFICIENT   = 0.25
DRAG_CRISIS_REYNOLDS    = 1e5
TIME_STEP               = 0.001       # s
MAX_POINTS              = 10000


@dataclass(frozen=True)
class FlightConfig:
    """
    Constants of the ball-flight model.

    Every field can be overridden at construction or afterwards through
    `with_overrides`, which returns a new instance.
    """
    gravity: float = GRAVITY
    air_density: float = STANDARD_AIR_DENSITY
    air_viscosity: float = AIR_VISCOSITY
    ball_mass: float = BALL_MASS
    ball_radius: float = BALL_RADIUS
    drag_coefficient: float = BASE_DRAG_COEFFICIENT
    lift_coefficient: float = BASE_LIFT_COEFFICIENT
    drag_crisis_reynolds: float = DRAG_CRISIS_REYNOLDS
    time_step: float = TIME_STEP
    max_points: int = MAX_POINTS

    def __post_init__(self):
        if self.ball_mass <= 0:
            raise ValueError(f"ball_mass must be positive, got {self.ball_mass}")
        if self.ball_radius <= 0:
            raise ValueError(f"ball_radius must be positive, got {self.ball_radius}")
        if self.time_step <= 0:
            raise ValueError(f"time_step must be positive, got {self.time_step}")
        if self.max_points < 2:
            raise ValueError(
                f"max_points must allow the launch point plus one step, "
                f"got {self.max_points}"
            )

    @property
    def ball_diameter(self) -> float:
        return 2.0 * self.ball_radius

    @property
    def ball_area(self) -> float:
        """Frontal (reference) area π r² in m²."""
        return np.pi * self.ball_radius ** 2

    def with_overrides(self, **kwargs) -> "FlightConfig":
        return replace(self, **kwargs)


DEFAULT_CONFIG = FlightConfig()
