from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from firespot.api.deps import get_weather_provider
from firespot.api.presenters import to_forecast_items, to_reading_response
from firespot.core.config import get_settings
from firespot.core.errors import FetchFailure
from firespot.providers.weather import WeatherProvider, WeatherReading
from firespot.schemas.api import ForecastResponse, WeatherReadingResponse
from firespot.services.forecast import synthesize_hourly


router = APIRouter(prefix="/weather", tags=["weather"])
LOGGER = logging.getLogger(__name__)


def _fetch_or_502(provider: WeatherProvider, *, lat: float, lon: float) -> WeatherReading:
    try:
        return provider.get_current(latitude=lat, longitude=lon)
    except FetchFailure as exc:
        LOGGER.debug("event=api.weather.response found=false reason=%s status=%s", exc.message, exc.status_code)
        raise HTTPException(status_code=502, detail=exc.message) from exc


@router.get("/current", response_model=WeatherReadingResponse)
def get_current_weather(
    lat: float = Query(...),
    lon: float = Query(...),
    provider: WeatherProvider = Depends(get_weather_provider),
) -> WeatherReadingResponse:
    LOGGER.debug("event=api.weather_current.request lat=%.6f lon=%.6f", lat, lon)
    reading = _fetch_or_502(provider, lat=lat, lon=lon)
    return to_reading_response(reading)


@router.get("/forecast", response_model=ForecastResponse)
def get_forecast(
    lat: float = Query(...),
    lon: float = Query(...),
    provider: WeatherProvider = Depends(get_weather_provider),
) -> ForecastResponse:
    LOGGER.debug("event=api.weather_forecast.request lat=%.6f lon=%.6f", lat, lon)
    reading = _fetch_or_502(provider, lat=lat, lon=lon)
    samples = synthesize_hourly(reading, clamp_humidity=get_settings().forecast_clamp_humidity)
    LOGGER.debug("event=api.weather_forecast.response rows_returned=%s", len(samples))
    return ForecastResponse(reading=to_reading_response(reading), samples=to_forecast_items(samples))
