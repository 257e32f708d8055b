"""
Aerodynamic Force Model
=======================
Drag and Magnus (spin-induced lift) forces on a spinning golf ball.

Drag coefficient adjustments:
- Drag crisis: above Re = 1e5 the boundary layer turns turbulent and the
  base Cd is halved.
- Speed factor (0.8 + 0.4 v/v0): drag eases as the ball slows down.
- Height factor exp(−y/100): drag falls off with height.

Magnus lift follows the rotating-cylinder formulation

    F_L = ½ ρ Cl A v² · (2π r n / v)       n = spin (rev/s)

and acts perpendicular to the relative velocity. A headwind (cos θ > 0)
amplifies drag by up to 50 % and lift by up to 30 %.
"""

import numpy as np
from typing import Tuple

from .config import FlightConfig, DEFAULT_CONFIG


MIN_RELATIVE_SPEED = 0.001    # m/s  below this only gravity acts


def reynolds_number(rel_v: float, config: FlightConfig = DEFAULT_CONFIG) -> float:
    """Re = ρ v d / μ for the ball diameter."""
    return config.air_density * rel_v * config.ball_diameter / config.air_viscosity


def adjusted_drag_coefficient(rel_v: float, initial_speed: float, height: float,
                              config: FlightConfig = DEFAULT_CONFIG) -> float:
    """Base Cd corrected for drag crisis, current speed and height."""
    cd = config.drag_coefficient
    if reynolds_number(rel_v, config) > config.drag_crisis_reynolds:
        cd *= 0.5

    speed_factor = rel_v / initial_speed if initial_speed > 0 else 0.0
    height_factor = np.exp(-height / 100.0)
    return cd * (0.8 + 0.4 * speed_factor) * height_factor


def drag_force(rel_v: float, cd: float, config: FlightConfig = DEFAULT_CONFIG) -> float:
    """Drag magnitude ½ ρ Cd A v² (N)."""
    return 0.5 * config.air_density * cd * config.ball_area * rel_v ** 2


def magnus_force(rel_v: float, spin_rate: float,
                 config: FlightConfig = DEFAULT_CONFIG) -> float:
    """
    Magnus lift magnitude (N). Signed: negative spin pushes the ball down.

    Parameters
    ----------
    rel_v : float
        Speed relative to the air (m/s), must be non-zero
    spin_rate : float
        Spin (rpm)
    """
    spin_rps = spin_rate / 60.0
    magnus_factor = (2.0 * np.pi * config.ball_radius * spin_rps) / rel_v
    return (0.5 * config.air_density * config.lift_coefficient
            * config.ball_area * rel_v ** 2 * magnus_factor)


def headwind_amplification(wind_speed: float, wind_angle: float) -> Tuple[float, float]:
    """(drag_factor, lift_factor) for the headwind component of the wind."""
    if wind_speed > 0:
        headwind = np.cos(np.radians(wind_angle))
        if headwind > 0:
            return 1.0 + 0.5 * headwind, 1.0 + 0.3 * headwind
    return 1.0, 1.0


def aerodynamic_acceleration(rel_vx: float, rel_vy: float, height: float,
                             initial_speed: float, spin_rate: float,
                             wind_speed: float, wind_angle: float,
                             config: FlightConfig = DEFAULT_CONFIG) -> Tuple[float, float]:
    """
    Combined drag + Magnus acceleration (m/s²), gravity excluded.

    Returns (0, 0) when the relative speed is at or below
    MIN_RELATIVE_SPEED, which keeps the unit vector below well defined.
    """
    rel_v = np.hypot(rel_vx, rel_vy)
    if rel_v <= MIN_RELATIVE_SPEED:
        return 0.0, 0.0

    cd = adjusted_drag_coefficient(rel_v, initial_speed, height, config)
    lift = magnus_force(rel_v, spin_rate, config)
    drag = drag_force(rel_v, cd, config)

    drag_factor, lift_factor = headwind_amplification(wind_speed, wind_angle)
    drag *= drag_factor
    lift *= lift_factor

    # Drag opposes the relative velocity; lift is that direction rotated +90°
    ux, uy = rel_vx / rel_v, rel_vy / rel_v
    m = config.ball_mass
    ax = (-drag * ux - lift * uy) / m
    ay = (-drag * uy + lift * ux) / m
    return float(ax), float(ay)
