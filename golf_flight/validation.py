"""
Validation Against Vacuum Ballistics
====================================
With drag and lift switched off the simulator must reproduce the
closed-form projectile formulas:

    apex  = v² sin²θ / (2g)
    range = v² sin(2θ) / g

Each launch angle is simulated with a drag-free copy of the
configuration and compared against these references.
"""

import numpy as np
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .config import FlightConfig, DEFAULT_CONFIG
from .shot import LaunchConditions
from .integrator import simulate


DEFAULT_ANGLES = (15.0, 30.0, 45.0, 60.0, 75.0)


def vacuum_apex(speed: float, launch_angle: float, gravity: float = DEFAULT_CONFIG.gravity) -> float:
    """Peak height (m) of a drag-free shot."""
    return float(speed ** 2 * np.sin(np.radians(launch_angle)) ** 2 / (2.0 * gravity))


def vacuum_range(speed: float, launch_angle: float, gravity: float = DEFAULT_CONFIG.gravity) -> float:
    """Carry (m) of a drag-free shot landing at launch height."""
    return float(speed ** 2 * np.sin(2.0 * np.radians(launch_angle)) / gravity)


@dataclass
class ValidationResult:
    """Result of one validation comparison."""
    launch_angle: float
    ref_range: float        # analytic range (m)
    sim_range: float        # simulated range (m)
    range_error_pct: float  # % error
    ref_apex: float
    sim_apex: float
    apex_error_pct: float


def _pct_error(sim: float, ref: float) -> float:
    return 100.0 * (sim - ref) / ref if ref != 0 else 0.0


def validate_against_vacuum(speed: float, angles: Sequence[float] = DEFAULT_ANGLES,
                            config: Optional[FlightConfig] = None,
                            method: str = 'euler',
                            verbose: bool = True) -> List[ValidationResult]:
    """
    Simulate each launch angle without aerodynamic forces and compare
    against the vacuum formulas.

    Returns list of ValidationResult for each angle.
    """
    base = config if config is not None else DEFAULT_CONFIG
    vacuum = base.with_overrides(drag_coefficient=0.0, lift_coefficient=0.0)

    if verbose:
        print(f"\n{'='*66}")
        print(f"  VALIDATION: drag-free flight at {speed:.1f} m/s ({method.upper()})")
        print(f"{'='*66}")
        print(f"{'Angle°':>7} {'Ref R (m)':>10} {'Sim R (m)':>10} {'Err %':>7} "
              f"{'Ref Apex':>9} {'Sim Apex':>9} {'Err %':>7}")
        print("-" * 66)

    results = []
    for angle in angles:
        traj = simulate(LaunchConditions(initial_speed=speed, launch_angle=angle),
                        method=method, config=vacuum)

        ref_range = vacuum_range(speed, angle, vacuum.gravity)
        ref_apex = vacuum_apex(speed, angle, vacuum.gravity)

        vr = ValidationResult(
            launch_angle=angle,
            ref_range=ref_range,
            sim_range=traj.distance,
            range_error_pct=_pct_error(traj.distance, ref_range),
            ref_apex=ref_apex,
            sim_apex=traj.apex,
            apex_error_pct=_pct_error(traj.apex, ref_apex),
        )
        results.append(vr)

        if verbose:
            print(f"{angle:>7.1f} {ref_range:>10.2f} {traj.distance:>10.2f} "
                  f"{vr.range_error_pct:>+7.2f} "
                  f"{ref_apex:>9.2f} {traj.apex:>9.2f} {vr.apex_error_pct:>+7.2f}")

    if verbose:
        avg_range_err = np.mean([abs(r.range_error_pct) for r in results])
        avg_apex_err = np.mean([abs(r.apex_error_pct) for r in results])
        print("-" * 66)
        print(f"  Mean absolute errors — Range: {avg_range_err:.2f}% | "
              f"Apex: {avg_apex_err:.2f}%")
        status = "✓ PASS" if avg_range_err < 1.0 else "✗ CHECK TIMESTEP"
        print(f"  Status: {status}")
        print(f"{'='*66}\n")

    return results


if __name__ == "__main__":
    validate_against_vacuum(30.0, verbose=True)
    validate_against_vacuum(30.0, method='rk4', verbose=True)
