from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from firespot.services.risk import RiskLevel


class HealthResponse(BaseModel):
    status: str
    time_utc: datetime


class CameraState(BaseModel):
    latitude: float
    longitude: float
    zoom: float


class MapConfigResponse(BaseModel):
    access_token: str
    style: str
    camera: CameraState


class RiskResponse(BaseModel):
    temperature_c: float
    humidity_pct: float
    score: float
    level: RiskLevel
    alert_class: str
    advisory: str


class WeatherReadingResponse(BaseModel):
    latitude: float | None
    longitude: float | None
    fetched_at: datetime
    temperature_c: float
    humidity_pct: float
    wind_speed_ms: float


class ForecastSampleItem(BaseModel):
    time_label: str
    temperature_c: float
    humidity_pct: float


class ForecastResponse(BaseModel):
    reading: WeatherReadingResponse
    samples: list[ForecastSampleItem]


class FireSpotItem(BaseModel):
    id: int
    latitude: float
    longitude: float
    risk: RiskLevel
    color_class: str


class FireSpotsResponse(BaseModel):
    items: list[FireSpotItem]


class DashboardResponse(BaseModel):
    status: Literal["loading", "error", "empty", "ready"]
    error: str | None = None
    camera: CameraState
    reading: WeatherReadingResponse | None = None
    risk: RiskResponse | None = None
    forecast: list[ForecastSampleItem] = Field(default_factory=list)
    markers: list[FireSpotItem] = Field(default_factory=list)
