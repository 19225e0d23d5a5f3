from __future__ import annotations

import asyncio
from pathlib import Path

import pytest
import requests

from firespot.core.config import ROOT_DIR
from firespot.core.errors import FetchFailure
from firespot.providers.fire_spots import (
    SIMULATED_FIRE_SPOTS,
    CsvFireSpotProvider,
    FireSpot,
    StaticFireSpotProvider,
    fetch_fire_spots,
)
from firespot.providers.weather import OpenWeatherProvider, fetch_current_weather
from firespot.services.risk import RiskLevel


class _FakeResponse:
    def __init__(self, status_code: int, payload: object, text: str = ""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self) -> object:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class _FakeSession:
    def __init__(self, responses: list[_FakeResponse | Exception]):
        self.responses = responses
        self.calls = 0
        self.request_args: list[tuple] = []
        self.request_kwargs: list[dict] = []

    def get(self, *args, **kwargs):  # noqa: ANN002, ANN003
        self.request_args.append(args)
        self.request_kwargs.append(kwargs)
        response = self.responses[min(self.calls, len(self.responses) - 1)]
        self.calls += 1
        if isinstance(response, Exception):
            raise response
        return response


def _sample_payload(*, temp: float = 25.0, humidity: float = 60, speed: float = 3.6) -> dict:
    return {
        "coord": {"lon": -122.4194, "lat": 37.7749},
        "weather": [{"id": 800, "main": "Clear"}],
        "main": {"temp": temp, "feels_like": temp, "pressure": 1014, "humidity": humidity},
        "wind": {"speed": speed, "deg": 250},
        "name": "San Francisco",
        "cod": 200,
    }


def _provider(session: _FakeSession, *, api_key: str = "test-key") -> OpenWeatherProvider:
    return OpenWeatherProvider(
        api_key=api_key,
        base_url="https://api.openweathermap.org/data/2.5/weather",
        session=session,  # type: ignore[arg-type]
    )


def test_openweather_provider_maps_payload_to_reading() -> None:
    session = _FakeSession([_FakeResponse(200, _sample_payload())])

    reading = _provider(session).get_current(latitude=37.7749, longitude=-122.4194)

    assert reading.temperature_c == 25.0
    assert reading.humidity_pct == 60.0
    assert reading.wind_speed_ms == 3.6
    assert reading.latitude == 37.7749
    assert session.request_args[0] == ("https://api.openweathermap.org/data/2.5/weather",)
    assert session.request_kwargs[0]["params"] == {
        "lat": "37.7749",
        "lon": "-122.4194",
        "appid": "test-key",
        "units": "metric",
    }


def test_openweather_provider_does_not_retry_non_2xx() -> None:
    session = _FakeSession([_FakeResponse(401, {"cod": 401, "message": "Invalid API key"}), _FakeResponse(200, _sample_payload())])

    with pytest.raises(FetchFailure) as excinfo:
        _provider(session, api_key="").get_current(latitude=37.7749, longitude=-122.4194)

    assert excinfo.value.message == "Weather data fetch failed"
    assert excinfo.value.status_code == 401
    assert session.calls == 1


def test_openweather_provider_wraps_network_errors() -> None:
    session = _FakeSession([requests.ConnectionError("boom")])

    with pytest.raises(FetchFailure):
        _provider(session).get_current(latitude=0.0, longitude=0.0)

    assert session.calls == 1


@pytest.mark.parametrize(
    "payload",
    [
        {"main": {"humidity": 40}, "wind": {"speed": 1.0}},
        {"main": {"temp": 20.0, "humidity": 40}},
        {"main": {"temp": "hot", "humidity": 40}, "wind": {"speed": 1.0}},
        ValueError("not json"),
    ],
)
def test_openweather_provider_rejects_malformed_payload(payload: object) -> None:
    session = _FakeSession([_FakeResponse(200, payload)])

    with pytest.raises(FetchFailure) as excinfo:
        _provider(session).get_current(latitude=10.0, longitude=10.0)

    assert "malformed" in excinfo.value.message


def test_fetch_current_weather_runs_provider_off_loop() -> None:
    session = _FakeSession([_FakeResponse(200, _sample_payload(temp=31.0))])

    reading = asyncio.run(fetch_current_weather(_provider(session), 1.0, 2.0))

    assert reading.temperature_c == 31.0
    assert (reading.latitude, reading.longitude) == (1.0, 2.0)


def test_static_provider_returns_simulated_spots_in_order() -> None:
    spots = asyncio.run(fetch_fire_spots(StaticFireSpotProvider()))

    assert [spot.id for spot in spots] == [1, 2, 3]
    assert [spot.risk for spot in spots] == [RiskLevel.HIGH, RiskLevel.MEDIUM, RiskLevel.LOW]
    assert spots == list(SIMULATED_FIRE_SPOTS)


def test_static_provider_drops_duplicate_ids() -> None:
    provider = StaticFireSpotProvider(
        spots=[
            FireSpot(id=7, latitude=1.0, longitude=1.0, risk=RiskLevel.LOW),
            FireSpot(id=7, latitude=2.0, longitude=2.0, risk=RiskLevel.HIGH),
            FireSpot(id=8, latitude=3.0, longitude=3.0, risk=RiskLevel.MEDIUM),
        ]
    )

    first = provider.get_fire_spots()
    second = provider.get_fire_spots()

    assert [spot.id for spot in first] == [7, 8]
    assert first[0].latitude == 1.0
    assert first == second


def test_csv_provider_reads_rows_and_skips_invalid(tmp_path: Path) -> None:
    csv_path = tmp_path / "fire_spots.csv"
    csv_path.write_text(
        "id,lat,lon,risk\n"
        "10,37.77,-122.42,High\n"
        "11,34.05,-118.24,medium\n"
        "12,not-a-number,-74.0,Low\n"
        "13,40.71,-74.0,\n"
        "10,1.0,1.0,Low\n"
        "14,40.71,-74.0,Extreme\n",
        encoding="utf-8",
    )

    spots = CsvFireSpotProvider(csv_path=csv_path).get_fire_spots()

    assert [spot.id for spot in spots] == [10, 11]
    assert spots[0].risk is RiskLevel.HIGH
    assert spots[1].risk is RiskLevel.MEDIUM


def test_csv_provider_missing_file_is_fetch_failure(tmp_path: Path) -> None:
    provider = CsvFireSpotProvider(csv_path=tmp_path / "missing.csv")

    with pytest.raises(FetchFailure):
        provider.get_fire_spots()


def test_csv_provider_reads_bundled_example() -> None:
    csv_path = ROOT_DIR / "data" / "fire_spots.example.csv"

    spots = CsvFireSpotProvider(csv_path=csv_path).get_fire_spots()

    assert spots == list(SIMULATED_FIRE_SPOTS)
