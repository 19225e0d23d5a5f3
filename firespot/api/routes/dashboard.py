from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query

from firespot.api.deps import get_fire_spot_provider, get_weather_provider
from firespot.api.presenters import to_dashboard_response
from firespot.core.config import get_settings
from firespot.providers.fire_spots import FireSpotProvider
from firespot.providers.weather import WeatherProvider
from firespot.schemas.api import DashboardResponse
from firespot.services.dashboard import DashboardController, ViewPoint


router = APIRouter(tags=["dashboard"])
LOGGER = logging.getLogger(__name__)


# curl -X GET "http://localhost:8000/api/v1/dashboard?lat=37.7749&lon=-122.4194&zoom=3"
@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(
    lat: float | None = Query(default=None),
    lon: float | None = Query(default=None),
    zoom: float | None = Query(default=None),
    weather_provider: WeatherProvider = Depends(get_weather_provider),
    fire_spot_provider: FireSpotProvider = Depends(get_fire_spot_provider),
) -> DashboardResponse:
    settings = get_settings()
    viewpoint = ViewPoint(
        latitude=settings.default_latitude if lat is None else lat,
        longitude=settings.default_longitude if lon is None else lon,
        zoom=settings.default_zoom if zoom is None else zoom,
    )
    LOGGER.debug(
        "event=api.dashboard.request lat=%.6f lon=%.6f zoom=%s",
        viewpoint.latitude,
        viewpoint.longitude,
        viewpoint.zoom,
    )

    controller = DashboardController(
        weather_provider=weather_provider,
        fire_spot_provider=fire_spot_provider,
        viewpoint=viewpoint,
        clamp_humidity=settings.forecast_clamp_humidity,
    )
    await controller.mount()
    view = controller.snapshot()

    LOGGER.debug(
        "event=api.dashboard.response status=%s risk=%s markers=%s",
        view.status,
        view.risk.value if view.risk is not None else None,
        len(view.markers),
    )
    return to_dashboard_response(view)
