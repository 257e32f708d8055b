"""
Wind Models
===========
Two independent wind models live here. They use different sign
conventions and must not be merged:

1. `relative_velocity` — feeds the force-based integrator. The wind
   vector is (w cos θ, w sin θ) and is subtracted from the ball velocity
   to give the velocity relative to the air mass.

2. `apply_wind_displacement` / `Wind` — a positional nudge applied to a
   3D point. Its x component is −w cos θ (direction the wind blows
   *from*), its y component is +w sin θ, and the displacement shrinks as
   the ball gets faster.

With θ = 0 the first model moves air toward +x while the second pushes
the point toward −x.
"""

import numpy as np
from dataclasses import dataclass
from typing import Tuple


DISPLACEMENT_SCALE = 0.1


def relative_velocity(vx: float, vy: float, wind_speed: float,
                      wind_angle: float) -> Tuple[float, float]:
    """
    Ball velocity relative to the air mass (m/s).

    Parameters
    ----------
    vx, vy : float
        Ground-frame ball velocity (m/s)
    wind_speed : float
        Wind speed (m/s)
    wind_angle : float
        Wind direction (degrees)
    """
    angle = np.radians(wind_angle)
    wind_vx = wind_speed * np.cos(angle)
    wind_vy = wind_speed * np.sin(angle)
    return float(vx - wind_vx), float(vy - wind_vy)


@dataclass(frozen=True)
class Point3D:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


def apply_wind_displacement(position: Point3D, ball_velocity: float,
                            wind_speed: float, wind_direction: float) -> Point3D:
    """
    Nudge a position by the wind.

    The relative effect w / (v + w + 1) is 0 in calm air and tends to 1 as
    the wind dominates the ball speed; the +1 keeps the ratio finite when
    both are zero. z is left untouched.
    """
    direction = np.radians(wind_direction)
    relative_effect = wind_speed / (ball_velocity + wind_speed + 1.0)

    wind_x = -wind_speed * np.cos(direction)
    wind_y = wind_speed * np.sin(direction)

    return Point3D(
        x=float(position.x + wind_x * relative_effect * DISPLACEMENT_SCALE),
        y=float(position.y + wind_y * relative_effect * DISPLACEMENT_SCALE),
        z=position.z,
    )


class Wind:
    """Constant wind of a given speed (m/s) and direction (degrees, 0 = North)."""

    def __init__(self, speed: float, direction: float):
        self._speed = speed
        self.direction = direction

    @property
    def speed(self) -> float:
        return self._speed

    def apply_wind_effect(self, position: Point3D, ball_velocity: float) -> Point3D:
        return apply_wind_displacement(position, ball_velocity,
                                       self._speed, self.direction)

    def __repr__(self):
        return f"Wind(speed={self._speed!r}, direction={self.direction!r})"
