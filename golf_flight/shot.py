"""
Shot Definition & Forces
========================
Launch conditions for a single shot and the total acceleration acting on
the ball:
  - Gravity
  - Aerodynamic drag (Reynolds-, speed- and height-adjusted)
  - Magnus lift from spin
  - Wind (velocity relative to the air mass, headwind amplification)

Coordinate system:
  x = downrange (horizontal)
  y = height    (vertical, up positive)
"""

import numpy as np
from dataclasses import dataclass

from .config import FlightConfig, DEFAULT_CONFIG
from .aerodynamics import aerodynamic_acceleration
from .wind import relative_velocity


@dataclass
class LaunchConditions:
    """
    Launch parameters of a single shot.
    """
    initial_speed: float = 0.0        # m/s
    launch_angle: float = 0.0         # degrees above horizontal
    spin_rate: float = 0.0            # rpm, positive = backspin (lift)
    wind_speed: float = 0.0           # m/s
    wind_angle: float = 0.0           # degrees

    def initial_velocity_vector(self) -> np.ndarray:
        """Convert launch speed + angle to [vx, vy]."""
        angle = np.radians(self.launch_angle)
        return np.array([
            self.initial_speed * np.cos(angle),
            self.initial_speed * np.sin(angle),
        ])


def compute_acceleration(height: float, vx: float, vy: float,
                         conditions: LaunchConditions,
                         config: FlightConfig = DEFAULT_CONFIG) -> np.ndarray:
    """
    Total acceleration [ax, ay] (m/s²) on the ball.

    Parameters
    ----------
    height : current y (m)
    vx, vy : ground-frame velocity (m/s)
    conditions : LaunchConditions instance
    config : FlightConfig instance
    """
    rel_vx, rel_vy = relative_velocity(vx, vy, conditions.wind_speed,
                                       conditions.wind_angle)

    ax, ay = aerodynamic_acceleration(
        rel_vx, rel_vy, height,
        conditions.initial_speed, conditions.spin_rate,
        conditions.wind_speed, conditions.wind_angle,
        config,
    )
    return np.array([ax, ay - config.gravity])
