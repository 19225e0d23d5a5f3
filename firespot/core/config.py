from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


@dataclass(frozen=True)
class Settings:
    openweather_api_key: str
    openweather_base_url: str
    openweather_timeout_seconds: float
    mapbox_access_token: str
    map_style: str
    default_latitude: float
    default_longitude: float
    default_zoom: float
    fire_spots_csv_path: Path | None
    fire_spots_delay_seconds: float
    forecast_clamp_humidity: bool
    log_level: str
    cors_origins: list[str]


ROOT_DIR = Path(__file__).resolve().parents[2]


def _to_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _resolve_path(raw: str) -> Path:
    path = Path(raw)
    return path if path.is_absolute() else (ROOT_DIR / path).resolve()


def _normalize_log_level(value: str | None) -> str:
    level = (value or "INFO").strip().upper()
    valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    if level not in valid_levels:
        raise ValueError(f"LOG_LEVEL must be one of {sorted(valid_levels)}; got {level}")
    return level


def _to_float(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number; got {raw!r}") from None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    cors_raw = os.getenv("CORS_ORIGINS", "http://localhost:3000")
    cors_origins = [item.strip() for item in cors_raw.split(",") if item.strip()]

    fire_spots_csv_raw = (os.getenv("FIRE_SPOTS_CSV_PATH") or "").strip()
    fire_spots_csv_path = _resolve_path(fire_spots_csv_raw) if fire_spots_csv_raw else None

    return Settings(
        openweather_api_key=os.getenv("OPENWEATHER_API_KEY", "").strip(),
        openweather_base_url=os.getenv(
            "OPENWEATHER_BASE_URL",
            "https://api.openweathermap.org/data/2.5/weather",
        ).rstrip("/"),
        openweather_timeout_seconds=_to_float("OPENWEATHER_TIMEOUT_SECONDS", "10"),
        mapbox_access_token=os.getenv("MAPBOX_ACCESS_TOKEN", "").strip(),
        map_style=os.getenv("MAP_STYLE", "mapbox://styles/mapbox/dark-v10"),
        default_latitude=_to_float("DEFAULT_LATITUDE", "37.7749"),
        default_longitude=_to_float("DEFAULT_LONGITUDE", "-122.4194"),
        default_zoom=_to_float("DEFAULT_ZOOM", "3"),
        fire_spots_csv_path=fire_spots_csv_path,
        fire_spots_delay_seconds=max(_to_float("FIRE_SPOTS_DELAY_SECONDS", "0"), 0.0),
        forecast_clamp_humidity=_to_bool(os.getenv("FORECAST_CLAMP_HUMIDITY"), True),
        log_level=_normalize_log_level(os.getenv("LOG_LEVEL")),
        cors_origins=cors_origins,
    )
