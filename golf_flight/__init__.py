"""
Golf Ball Flight Simulator
==========================
Time-stepped simulation of a spinning golf ball through air, from launch
to ground impact, incorporating:
  - Gravity
  - Reynolds-adjusted aerodynamic drag (drag crisis, speed, height)
  - Magnus lift from spin
  - Wind relative to the air mass, with headwind amplification

Produces the discretised flight path plus total distance and apex.
Weather-derived air density and a simple positional wind-displacement
model are provided as standalone helpers.
"""

from .config import FlightConfig, DEFAULT_CONFIG
from .atmosphere import (
    WeatherData, air_density, wind_adjusted_speed, saturation_vapor_pressure,
)
from .wind import relative_velocity, apply_wind_displacement, Point3D, Wind
from .aerodynamics import (
    reynolds_number, adjusted_drag_coefficient, drag_force, magnus_force,
    headwind_amplification, aerodynamic_acceleration,
)
from .shot import LaunchConditions, compute_acceleration
from .integrator import (
    TrajectoryPoint, TrajectoryResult,
    calculate_trajectory, simulate, simulate_euler, simulate_rk4,
)
from .validation import (
    validate_against_vacuum, vacuum_apex, vacuum_range, ValidationResult,
)

__version__ = "1.0.0"
__all__ = [
    'FlightConfig', 'DEFAULT_CONFIG',
    'WeatherData', 'air_density', 'wind_adjusted_speed', 'saturation_vapor_pressure',
    'relative_velocity', 'apply_wind_displacement', 'Point3D', 'Wind',
    'reynolds_number', 'adjusted_drag_coefficient', 'drag_force', 'magnus_force',
    'headwind_amplification', 'aerodynamic_acceleration',
    'LaunchConditions', 'compute_acceleration',
    'TrajectoryPoint', 'TrajectoryResult',
    'calculate_trajectory', 'simulate', 'simulate_euler', 'simulate_rk4',
    'validate_against_vacuum', 'vacuum_apex', 'vacuum_range', 'ValidationResult',
]
