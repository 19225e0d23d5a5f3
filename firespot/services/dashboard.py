from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from firespot.core.errors import FetchFailure
from firespot.providers.fire_spots import FireSpot, FireSpotProvider, fetch_fire_spots
from firespot.providers.weather import WeatherProvider, WeatherReading, fetch_current_weather
from firespot.services.forecast import ForecastSample, synthesize_hourly
from firespot.services.risk import RiskLevel, classify, marker_color_class


LOGGER = logging.getLogger(__name__)


class FetchStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class FetchState:
    status: FetchStatus = FetchStatus.IDLE
    value: Any = None
    error: str | None = None

    @property
    def settled(self) -> bool:
        return self.status in {FetchStatus.SUCCESS, FetchStatus.FAILED}


@dataclass(frozen=True)
class ViewPoint:
    latitude: float
    longitude: float
    zoom: float


@dataclass(frozen=True)
class MarkerDescriptor:
    id: int
    latitude: float
    longitude: float
    risk: RiskLevel
    color_class: str


@dataclass(frozen=True)
class DashboardView:
    status: str
    viewpoint: ViewPoint
    error: str | None = None
    reading: WeatherReading | None = None
    risk: RiskLevel | None = None
    forecast: list[ForecastSample] = field(default_factory=list)
    markers: list[MarkerDescriptor] = field(default_factory=list)


def build_markers(spots: list[FireSpot]) -> list[MarkerDescriptor]:
    return [
        MarkerDescriptor(
            id=spot.id,
            latitude=spot.latitude,
            longitude=spot.longitude,
            risk=spot.risk,
            color_class=marker_color_class(spot.risk),
        )
        for spot in spots
    ]


class DashboardController:
    """Fetch orchestration and loading/error state for one dashboard instance.

    Weather and fire spots load concurrently on ``mount``. Every viewpoint
    change invalidates the current reading and starts a new weather fetch
    tagged with a generation number; a response that comes back after a newer
    fetch has started is dropped.
    """

    def __init__(
        self,
        *,
        weather_provider: WeatherProvider,
        fire_spot_provider: FireSpotProvider,
        viewpoint: ViewPoint,
        rng: random.Random | None = None,
        clamp_humidity: bool = True,
    ):
        self.weather_provider = weather_provider
        self.fire_spot_provider = fire_spot_provider
        self.viewpoint = viewpoint
        self.rng = rng or random.Random()
        self.clamp_humidity = clamp_humidity
        self.weather_state = FetchState()
        self.fire_spot_state = FetchState()
        self.forecast: list[ForecastSample] = []
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    async def mount(self) -> None:
        generation = self._begin_weather_fetch()
        await asyncio.gather(self._load_weather(generation), self._load_fire_spots())

    async def move_to(self, viewpoint: ViewPoint) -> None:
        self.viewpoint = viewpoint
        generation = self._begin_weather_fetch()
        await self._load_weather(generation)

    async def refresh_fire_spots(self) -> None:
        await self._load_fire_spots()

    def current_risk(self) -> RiskLevel | None:
        reading = self.current_reading()
        if reading is None:
            return None
        return classify(reading.temperature_c, reading.humidity_pct)

    def current_reading(self) -> WeatherReading | None:
        if self.weather_state.status != FetchStatus.SUCCESS:
            return None
        return self.weather_state.value

    def snapshot(self) -> DashboardView:
        if not (self.weather_state.settled and self.fire_spot_state.settled):
            return DashboardView(status="loading", viewpoint=self.viewpoint)

        for state in (self.weather_state, self.fire_spot_state):
            if state.status == FetchStatus.FAILED:
                return DashboardView(status="error", viewpoint=self.viewpoint, error=state.error or "")

        reading = self.current_reading()
        if reading is None:
            return DashboardView(status="empty", viewpoint=self.viewpoint)

        return DashboardView(
            status="ready",
            viewpoint=self.viewpoint,
            reading=reading,
            risk=self.current_risk(),
            forecast=list(self.forecast),
            markers=build_markers(self.fire_spot_state.value or []),
        )

    def _begin_weather_fetch(self) -> int:
        self._generation += 1
        self.weather_state = FetchState(status=FetchStatus.LOADING)
        self.forecast = []
        return self._generation

    async def _load_weather(self, generation: int) -> None:
        viewpoint = self.viewpoint
        try:
            reading = await fetch_current_weather(self.weather_provider, viewpoint.latitude, viewpoint.longitude)
        except FetchFailure as exc:
            if generation != self._generation:
                LOGGER.info("Discarding stale weather failure generation=%s current=%s", generation, self._generation)
                return
            self.weather_state = FetchState(status=FetchStatus.FAILED, error=exc.message)
            return

        if generation != self._generation:
            LOGGER.info(
                "Discarding stale weather reading generation=%s current=%s lat=%s lon=%s",
                generation,
                self._generation,
                viewpoint.latitude,
                viewpoint.longitude,
            )
            return

        self.weather_state = FetchState(status=FetchStatus.SUCCESS, value=reading)
        self.forecast = synthesize_hourly(reading, rng=self.rng, clamp_humidity=self.clamp_humidity)

    async def _load_fire_spots(self) -> None:
        self.fire_spot_state = FetchState(status=FetchStatus.LOADING)
        try:
            spots = await fetch_fire_spots(self.fire_spot_provider)
        except FetchFailure as exc:
            self.fire_spot_state = FetchState(status=FetchStatus.FAILED, error=exc.message)
            return
        self.fire_spot_state = FetchState(status=FetchStatus.SUCCESS, value=spots)
