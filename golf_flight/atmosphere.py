"""
Weather-Derived Air Density
===========================
Converts surface weather observations (temperature, pressure, humidity)
into an air density, and scales speeds by the resulting density ratio.

    ρ = P / (R_specific × T) × (1 − 0.378 e / P)

where e is the actual vapour pressure from a Tetens-style saturation
curve. These helpers stand alone: the trajectory integrator always flies
through `FlightConfig.air_density`.
"""

import numpy as np
from dataclasses import dataclass
from typing import Optional

from .config import FlightConfig, DEFAULT_CONFIG


R_SPECIFIC      = 287.058     # J/(kg·K)  specific gas constant for dry air
CELSIUS_TO_K    = 273.15
HPA_TO_PA       = 100.0


@dataclass
class WeatherData:
    """Surface weather observation."""
    temperature: float = 15.0     # °C
    pressure: float = 1013.25     # hPa
    humidity: float = 0.0         # % relative humidity (0–100)


def saturation_vapor_pressure(temperature: float) -> float:
    """Saturation vapour pressure (hPa) at the given temperature (°C)."""
    return 6.1078 * np.exp((17.27 * temperature) / (temperature + 237.3))


def air_density(weather: Optional[WeatherData] = None,
                config: FlightConfig = DEFAULT_CONFIG) -> float:
    """
    Air density (kg/m³) for the given weather.

    Without weather data the standard density of `config` is returned.
    """
    if weather is None:
        return config.air_density

    temp_k = weather.temperature + CELSIUS_TO_K
    pressure = weather.pressure * HPA_TO_PA
    density = pressure / (R_SPECIFIC * temp_k)

    # Vapour pressure stays in hPa against P in Pa, so the humidity
    # correction is a small perturbation.
    vapor_pressure = (weather.humidity / 100.0) * saturation_vapor_pressure(weather.temperature)
    density *= (1.0 - 0.378 * vapor_pressure / pressure)

    return float(density)


def wind_adjusted_speed(speed: float, weather: Optional[WeatherData] = None,
                        config: FlightConfig = DEFAULT_CONFIG) -> float:
    """
    Scale a speed by sqrt(ρ / ρ_standard).

    Denser air makes a given wind speed push harder, thinner air less.
    """
    if weather is None:
        return speed
    density_ratio = air_density(weather, config) / config.air_density
    return float(speed * np.sqrt(density_ratio))


if __name__ == "__main__":
    print("Air Density vs Weather")
    print("=" * 50)
    print(f"{'T (°C)':>8} {'P (hPa)':>9} {'RH (%)':>8} {'ρ (kg/m³)':>11}")
    print("-" * 50)
    for t, p, rh in [(0, 1013.25, 50), (15, 1013.25, 0), (15, 1013.25, 100),
                     (30, 1013.25, 50), (20, 850.0, 40)]:
        rho = air_density(WeatherData(t, p, rh))
        print(f"{t:>8.1f} {p:>9.2f} {rh:>8.0f} {rho:>11.5f}")
