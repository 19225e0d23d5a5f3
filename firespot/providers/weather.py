from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone

import requests
from pydantic import BaseModel, ConfigDict, ValidationError

from firespot.core.errors import FetchFailure


LOGGER = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Weather data fetch failed"


@dataclass(frozen=True)
class WeatherReading:
    temperature_c: float
    humidity_pct: float
    wind_speed_ms: float
    latitude: float | None = None
    longitude: float | None = None
    fetched_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class OpenWeatherMain(BaseModel):
    model_config = ConfigDict(extra="ignore")

    temp: float
    humidity: float


class OpenWeatherWind(BaseModel):
    model_config = ConfigDict(extra="ignore")

    speed: float


class OpenWeatherPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    main: OpenWeatherMain
    wind: OpenWeatherWind


def to_weather_reading(payload: OpenWeatherPayload, *, latitude: float, longitude: float) -> WeatherReading:
    return WeatherReading(
        temperature_c=payload.main.temp,
        humidity_pct=payload.main.humidity,
        wind_speed_ms=payload.wind.speed,
        latitude=latitude,
        longitude=longitude,
    )


class WeatherProvider:
    def get_current(self, *, latitude: float, longitude: float) -> WeatherReading:
        raise NotImplementedError


class OpenWeatherProvider(WeatherProvider):
    """Current conditions from the OpenWeather ``/weather`` endpoint.

    One request per call: no retry and no caching. Coordinates are passed
    through as given and the upstream decides whether they are acceptable.
    """

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = "https://api.openweathermap.org/data/2.5/weather",
        timeout_seconds: float = 10,
        session: requests.Session | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    def get_current(self, *, latitude: float, longitude: float) -> WeatherReading:
        params = {
            "lat": str(latitude),
            "lon": str(longitude),
            "appid": self.api_key,
            "units": "metric",
        }
        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout_seconds)
        except requests.RequestException as exc:
            LOGGER.warning("OpenWeather request failed lat=%s lon=%s error=%s", latitude, longitude, exc)
            raise FetchFailure(FETCH_FAILED_MESSAGE) from exc

        if not 200 <= response.status_code < 300:
            body_preview = (getattr(response, "text", "") or "").strip().replace("\n", " ")
            if len(body_preview) > 240:
                body_preview = f"{body_preview[:240]}..."
            LOGGER.warning(
                "OpenWeather request non-2xx lat=%s lon=%s status=%s body=%s",
                latitude,
                longitude,
                response.status_code,
                body_preview,
            )
            raise FetchFailure(FETCH_FAILED_MESSAGE, status_code=response.status_code)

        try:
            payload = response.json()
            parsed = OpenWeatherPayload.model_validate(payload)
        except (ValueError, ValidationError) as exc:
            LOGGER.warning("OpenWeather payload parse failed lat=%s lon=%s", latitude, longitude)
            raise FetchFailure("Weather data response was malformed") from exc

        return to_weather_reading(parsed, latitude=latitude, longitude=longitude)


async def fetch_current_weather(provider: WeatherProvider, latitude: float, longitude: float) -> WeatherReading:
    return await asyncio.to_thread(provider.get_current, latitude=latitude, longitude=longitude)
