from __future__ import annotations

import random
from dataclasses import dataclass

from firespot.providers.weather import WeatherReading


FORECAST_HOURS = 24
TEMPERATURE_SPREAD_C = 2.5
HUMIDITY_SPREAD_PCT = 5.0


@dataclass(frozen=True)
class ForecastSample:
    time_label: str
    temperature_c: float
    humidity_pct: float


def synthesize_hourly(
    reading: WeatherReading,
    *,
    rng: random.Random | None = None,
    hours: int = FORECAST_HOURS,
    clamp_humidity: bool = True,
) -> list[ForecastSample]:
    """Build a placeholder hourly series by jittering the current reading.

    Temperature moves within ±2.5 °C and humidity within ±5 points of the
    reading. With ``clamp_humidity`` the humidity stays inside [0, 100].
    """
    if hours <= 0:
        return []

    source = rng if rng is not None else random.Random()
    samples: list[ForecastSample] = []
    for hour in range(hours):
        temperature = reading.temperature_c + source.uniform(-TEMPERATURE_SPREAD_C, TEMPERATURE_SPREAD_C)
        humidity = reading.humidity_pct + source.uniform(-HUMIDITY_SPREAD_PCT, HUMIDITY_SPREAD_PCT)
        if clamp_humidity:
            humidity = min(max(humidity, 0.0), 100.0)
        samples.append(ForecastSample(time_label=f"{hour}:00", temperature_c=temperature, humidity_pct=humidity))
    return samples
