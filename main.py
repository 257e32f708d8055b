#!/usr/bin/env python3
"""
═══════════════════════════════════════════════════════════════════════════════
  GOLF BALL FLIGHT SIMULATOR — Main Runner
═══════════════════════════════════════════════════════════════════════════════

  Executes the simulation pipeline:
    1. Weather-derived air density table
    2. Reference shot (Euler)
    3. Wind effects (calm / against / along the flight)
    4. Spin effects on apex and distance
    5. Euler vs RK4 comparison
    6. Validation against drag-free ballistics
    7. Positional wind-displacement model

  Usage:
    python main.py              # Run everything
    python main.py --quick      # Skip the RK4 comparison (faster)
═══════════════════════════════════════════════════════════════════════════════
"""

import sys
import time

from golf_flight.atmosphere import WeatherData, air_density, wind_adjusted_speed
from golf_flight.shot import LaunchConditions
from golf_flight.integrator import calculate_trajectory, simulate_euler, simulate_rk4
from golf_flight.validation import validate_against_vacuum
from golf_flight.wind import Point3D, Wind


def section(title):
    print(f"\n{'─'*60}")
    print(f"  {title}")
    print(f"{'─'*60}")


def main():
    start_time = time.time()
    quick = '--quick' in sys.argv

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 1: Air density from weather
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 1: Air Density vs Weather")
    print(f"  {'T (°C)':>7} {'P (hPa)':>8} {'RH (%)':>7} {'ρ (kg/m³)':>10} {'10 m/s wind':>12}")
    for t, p, rh in [(0, 1013.25, 50), (15, 1013.25, 0), (30, 1013.25, 80), (20, 850.0, 40)]:
        w = WeatherData(temperature=t, pressure=p, humidity=rh)
        print(f"  {t:>7.1f} {p:>8.2f} {rh:>7.0f} {air_density(w):>10.4f} "
              f"{wind_adjusted_speed(10.0, w):>10.2f} m/s")

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 2: Reference shot
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 2: Reference Shot (70 m/s, 12°, 2800 rpm)")
    reference = LaunchConditions(initial_speed=70.0, launch_angle=12.0, spin_rate=2800.0)
    result = simulate_euler(reference)
    print(result.summary())

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 3: Wind effects
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 3: Wind Effects (5 m/s)")
    for label, speed, angle in [("Calm", 0.0, 0.0),
                                ("Air against flight (180°)", 5.0, 180.0),
                                ("Air along flight (0°)", 5.0, 0.0),
                                ("Crosswind (90°)", 5.0, 90.0)]:
        r = calculate_trajectory(70.0, 12.0, 2800.0, speed, angle)
        print(f"  {label:<28s}  Distance: {r.distance:>7.2f} m  Apex: {r.apex:>6.2f} m")

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 4: Spin effects
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 4: Spin Effects")
    for spin in [-1000.0, 0.0, 1500.0, 3000.0, 4500.0]:
        r = calculate_trajectory(70.0, 12.0, spin, 0.0, 0.0)
        print(f"  {spin:>7.0f} rpm  Distance: {r.distance:>7.2f} m  Apex: {r.apex:>6.2f} m  "
              f"Points: {len(r)}")

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 5: Euler vs RK4
    # ══════════════════════════════════════════════════════════════════════
    if not quick:
        section("PHASE 5: Euler vs RK4")
        rk4 = simulate_rk4(reference)
        print(f"  Euler  — Distance: {result.distance:.3f} m  |  Apex: {result.apex:.3f} m")
        print(f"  RK4    — Distance: {rk4.distance:.3f} m  |  Apex: {rk4.apex:.3f} m")
        print(f"  Δ Distance: {result.distance - rk4.distance:+.4f} m")
    else:
        section("PHASE 5: RK4 comparison SKIPPED (--quick mode)")

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 6: Validation
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 6: Validation — Drag-Free Ballistics")
    validate_against_vacuum(30.0)

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 7: Positional wind displacement
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 7: Wind Displacement Model")
    origin = Point3D(0.0, 0.0, 0.0)
    for direction in [0.0, 90.0, 180.0, 270.0]:
        p = Wind(5.0, direction).apply_wind_effect(origin, ball_velocity=40.0)
        print(f"  From {direction:>5.0f}°  →  dx = {p.x:+.4f} m  dy = {p.y:+.4f} m")

    elapsed = time.time() - start_time
    section("COMPLETE")
    print(f"\n  Total runtime: {elapsed:.1f} seconds\n")


if __name__ == "__main__":
    main()
