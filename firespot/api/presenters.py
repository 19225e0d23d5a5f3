from __future__ import annotations

from firespot.providers.fire_spots import FireSpot
from firespot.providers.weather import WeatherReading
from firespot.schemas.api import (
    CameraState,
    DashboardResponse,
    FireSpotItem,
    ForecastSampleItem,
    RiskResponse,
    WeatherReadingResponse,
)
from firespot.services.dashboard import DashboardView, MarkerDescriptor, ViewPoint, build_markers
from firespot.services.forecast import ForecastSample
from firespot.services.risk import RiskLevel, advisory, alert_color_class, risk_score


def to_camera(viewpoint: ViewPoint) -> CameraState:
    return CameraState(latitude=viewpoint.latitude, longitude=viewpoint.longitude, zoom=viewpoint.zoom)


def to_risk_response(temperature: float, humidity: float, level: RiskLevel) -> RiskResponse:
    return RiskResponse(
        temperature_c=temperature,
        humidity_pct=humidity,
        score=risk_score(temperature, humidity),
        level=level,
        alert_class=alert_color_class(level),
        advisory=advisory(level),
    )


def to_reading_response(reading: WeatherReading) -> WeatherReadingResponse:
    return WeatherReadingResponse(
        latitude=reading.latitude,
        longitude=reading.longitude,
        fetched_at=reading.fetched_at,
        temperature_c=reading.temperature_c,
        humidity_pct=reading.humidity_pct,
        wind_speed_ms=reading.wind_speed_ms,
    )


def to_forecast_items(samples: list[ForecastSample]) -> list[ForecastSampleItem]:
    return [
        ForecastSampleItem(
            time_label=sample.time_label,
            temperature_c=sample.temperature_c,
            humidity_pct=sample.humidity_pct,
        )
        for sample in samples
    ]


def to_marker_items(markers: list[MarkerDescriptor]) -> list[FireSpotItem]:
    return [
        FireSpotItem(
            id=marker.id,
            latitude=marker.latitude,
            longitude=marker.longitude,
            risk=marker.risk,
            color_class=marker.color_class,
        )
        for marker in markers
    ]


def to_fire_spot_items(spots: list[FireSpot]) -> list[FireSpotItem]:
    return to_marker_items(build_markers(spots))


def to_dashboard_response(view: DashboardView) -> DashboardResponse:
    reading = view.reading
    return DashboardResponse(
        status=view.status,
        error=view.error,
        camera=to_camera(view.viewpoint),
        reading=to_reading_response(reading) if reading is not None else None,
        risk=(
            to_risk_response(reading.temperature_c, reading.humidity_pct, view.risk)
            if reading is not None and view.risk is not None
            else None
        ),
        forecast=to_forecast_items(view.forecast),
        markers=to_marker_items(view.markers),
    )
