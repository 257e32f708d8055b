"""
Numerical Integration Engine
=============================
Fixed-step time integration of the ball flight from launch to ground
impact:

1. **Euler Method** (1st order) — velocity is advanced first, then the
   position with the updated velocity. This is the reference integrator.
2. **Runge-Kutta 4th Order (RK4)** — same inputs, outputs and
   termination rules, higher accuracy per step.

Both record one (x, y) point per step, stop when the ball drops below
the ground or the point cap of the configuration is reached, and replace
the final point with the linearly interpolated ground crossing (x*, 0).

Output: TrajectoryResult dataclass with the point sequence, distance and
apex.
"""

import logging
import numpy as np
from dataclasses import dataclass
from typing import List

from .config import FlightConfig, DEFAULT_CONFIG
from .shot import LaunchConditions, compute_acceleration


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrajectoryPoint:
    """Ball position at one time sample (m)."""
    x: float
    y: float


@dataclass
class TrajectoryResult:
    """Complete trajectory output."""
    points: List[TrajectoryPoint]
    apex: float                      # maximum height (m)
    conditions: LaunchConditions
    method: str                      # 'euler' or 'rk4'
    dt: float                        # timestep used
    flight_time: float               # s
    landed: bool                     # False when the point cap stopped the run

    @property
    def distance(self) -> float:
        """Horizontal distance at the final point (m)."""
        return self.points[-1].x

    @property
    def x(self) -> np.ndarray:
        return np.array([p.x for p in self.points])

    @property
    def y(self) -> np.ndarray:
        return np.array([p.y for p in self.points])

    def __len__(self) -> int:
        return len(self.points)

    def summary(self) -> str:
        """Human-readable summary string."""
        c = self.conditions
        status = "ground" if self.landed else "point cap"
        lines = [
            f"╔══════════════════════════════════════════════╗",
            f"║  TRAJECTORY SUMMARY — {self.method.upper():<23s}║",
            f"╠══════════════════════════════════════════════╣",
            f"║  Launch speed : {c.initial_speed:>10.1f} m/s{'':<15s}║",
            f"║  Launch angle : {c.launch_angle:>10.1f} °{'':<17s}║",
            f"║  Spin         : {c.spin_rate:>10.0f} rpm{'':<15s}║",
            f"║  Wind         : {c.wind_speed:>5.1f} m/s @ {c.wind_angle:>6.1f} °{'':<9s}║",
            f"╠══════════════════════════════════════════════╣",
            f"║  Distance     : {self.distance:>10.2f} m{'':<17s}║",
            f"║  Apex         : {self.apex:>10.2f} m{'':<17s}║",
            f"║  Flight time  : {self.flight_time:>10.3f} s{'':<17s}║",
            f"║  Points       : {len(self):>10d} ({status}){'':<{9 - len(status)}s}║",
            f"╚══════════════════════════════════════════════╝",
        ]
        return '\n'.join(lines)


def simulate_euler(conditions: LaunchConditions,
                   config: FlightConfig = DEFAULT_CONFIG) -> TrajectoryResult:
    """
    Explicit Euler integration.

    v_{n+1} = v_n + a(y_n, v_n) * dt
    x_{n+1} = x_n + v_{n+1} * dt
    """
    dt = config.time_step
    vx, vy = conditions.initial_velocity_vector()
    x, y = 0.0, 0.0

    points = [TrajectoryPoint(0.0, 0.0)]
    apex = 0.0
    steps = 0

    while True:
        prev_x, prev_y = x, y

        ax, ay = compute_acceleration(y, vx, vy, conditions, config)
        vx += ax * dt
        vy += ay * dt

        x += vx * dt
        y += vy * dt
        steps += 1

        points.append(TrajectoryPoint(float(x), float(y)))
        if y > apex:
            apex = float(y)

        if y < 0.0 or len(points) >= config.max_points:
            break

    return _finish(points, apex, steps, prev_x, prev_y, conditions, 'euler', config)


def simulate_rk4(conditions: LaunchConditions,
                 config: FlightConfig = DEFAULT_CONFIG) -> TrajectoryResult:
    """
    4th-order Runge-Kutta integration.

    State is [x, y, vx, vy]; termination and ground interpolation match
    `simulate_euler`.
    """
    dt = config.time_step

    def deriv(s):
        a = compute_acceleration(s[1], s[2], s[3], conditions, config)
        return np.array([s[2], s[3], a[0], a[1]])

    state = np.concatenate(([0.0, 0.0], conditions.initial_velocity_vector()))

    points = [TrajectoryPoint(0.0, 0.0)]
    apex = 0.0
    steps = 0

    while True:
        prev_x, prev_y = float(state[0]), float(state[1])

        k1 = deriv(state)
        k2 = deriv(state + 0.5 * dt * k1)
        k3 = deriv(state + 0.5 * dt * k2)
        k4 = deriv(state + dt * k3)
        state = state + (dt / 6.0) * (k1 + 2*k2 + 2*k3 + k4)
        steps += 1

        x, y = float(state[0]), float(state[1])
        points.append(TrajectoryPoint(x, y))
        if y > apex:
            apex = y

        if y < 0.0 or len(points) >= config.max_points:
            break

    return _finish(points, apex, steps, prev_x, prev_y, conditions, 'rk4', config)


INTEGRATORS = {
    'euler': simulate_euler,
    'rk4': simulate_rk4,
}


def simulate(conditions: LaunchConditions, method: str = 'euler',
             config: FlightConfig = DEFAULT_CONFIG) -> TrajectoryResult:
    """Run the integrator named by `method` ('euler' or 'rk4')."""
    if method not in INTEGRATORS:
        raise ValueError(
            f"Unknown integration method '{method}'. "
            f"Available: {list(INTEGRATORS.keys())}"
        )
    return INTEGRATORS[method](conditions, config)


def calculate_trajectory(initial_speed: float, launch_angle: float,
                         spin_rate: float, wind_speed: float, wind_angle: float,
                         config: FlightConfig = DEFAULT_CONFIG) -> TrajectoryResult:
    """
    Simulate one shot with the Euler integrator.

    Parameters
    ----------
    initial_speed : float
        Launch speed (m/s)
    launch_angle : float
        Degrees above horizontal
    spin_rate : float
        Spin (rpm); positive spin lifts the ball
    wind_speed : float
        Wind speed (m/s)
    wind_angle : float
        Wind direction (degrees)
    """
    conditions = LaunchConditions(
        initial_speed=initial_speed,
        launch_angle=launch_angle,
        spin_rate=spin_rate,
        wind_speed=wind_speed,
        wind_angle=wind_angle,
    )
    return simulate_euler(conditions, config)


def _finish(points, apex, steps, prev_x, prev_y, conditions, method, config):
    """Apply ground interpolation and build the TrajectoryResult."""
    dt = config.time_step
    last = points[-1]

    if last.y < 0.0:
        # prev_y >= 0 > last.y, so the denominator is strictly positive
        frac = prev_y / (prev_y - last.y)
        ground_x = prev_x + frac * (last.x - prev_x)
        points[-1] = TrajectoryPoint(float(ground_x), 0.0)
        flight_time = (steps - 1 + frac) * dt
        landed = True
    else:
        flight_time = steps * dt
        landed = False
        logger.debug("%s integration stopped at the %d point cap (y=%.3f m)",
                     method, config.max_points, last.y)

    return TrajectoryResult(
        points=points,
        apex=apex,
        conditions=conditions,
        method=method,
        dt=dt,
        flight_time=flight_time,
        landed=landed,
    )
