from __future__ import annotations

from functools import lru_cache

from firespot.core.config import get_settings
from firespot.providers.fire_spots import CsvFireSpotProvider, FireSpotProvider, StaticFireSpotProvider
from firespot.providers.weather import OpenWeatherProvider, WeatherProvider


@lru_cache(maxsize=1)
def get_weather_provider() -> WeatherProvider:
    settings = get_settings()
    return OpenWeatherProvider(
        api_key=settings.openweather_api_key,
        base_url=settings.openweather_base_url,
        timeout_seconds=settings.openweather_timeout_seconds,
    )


@lru_cache(maxsize=1)
def get_fire_spot_provider() -> FireSpotProvider:
    settings = get_settings()
    if settings.fire_spots_csv_path is not None:
        return CsvFireSpotProvider(csv_path=settings.fire_spots_csv_path)
    return StaticFireSpotProvider(delay_seconds=settings.fire_spots_delay_seconds)
