from __future__ import annotations

import asyncio
import csv
import logging
import time
from dataclasses import dataclass
from pathlib import Path

from firespot.core.errors import FetchFailure
from firespot.services.risk import RiskLevel, parse_risk_level


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class FireSpot:
    id: int
    latitude: float
    longitude: float
    risk: RiskLevel


SIMULATED_FIRE_SPOTS: tuple[FireSpot, ...] = (
    FireSpot(id=1, latitude=37.7749, longitude=-122.4194, risk=RiskLevel.HIGH),
    FireSpot(id=2, latitude=34.0522, longitude=-118.2437, risk=RiskLevel.MEDIUM),
    FireSpot(id=3, latitude=40.7128, longitude=-74.006, risk=RiskLevel.LOW),
)


def unique_by_id(spots: list[FireSpot]) -> list[FireSpot]:
    seen: set[int] = set()
    unique: list[FireSpot] = []
    for spot in spots:
        if spot.id in seen:
            LOGGER.warning("Dropping duplicate fire spot id=%s", spot.id)
            continue
        seen.add(spot.id)
        unique.append(spot)
    return unique


class FireSpotProvider:
    def get_fire_spots(self) -> list[FireSpot]:
        raise NotImplementedError


class StaticFireSpotProvider(FireSpotProvider):
    def __init__(self, *, spots: tuple[FireSpot, ...] | list[FireSpot] = SIMULATED_FIRE_SPOTS, delay_seconds: float = 0.0):
        self.spots = list(spots)
        self.delay_seconds = delay_seconds

    def get_fire_spots(self) -> list[FireSpot]:
        if self.delay_seconds > 0:
            time.sleep(self.delay_seconds)
        return unique_by_id(self.spots)


def _pick(row: dict[str, str], *keys: str) -> str | None:
    for key in keys:
        value = row.get(key)
        if value is not None and str(value).strip():
            return str(value).strip()
    return None


class CsvFireSpotProvider(FireSpotProvider):
    """Reads markers from a CSV export with ``id,latitude,longitude,risk`` columns."""

    def __init__(self, *, csv_path: Path):
        self.csv_path = csv_path

    def get_fire_spots(self) -> list[FireSpot]:
        if not self.csv_path.exists():
            raise FetchFailure(f"Fire spot source not found: {self.csv_path}")

        spots: list[FireSpot] = []
        with self.csv_path.open("r", encoding="utf-8", newline="") as fh:
            reader = csv.DictReader(fh)
            for row in reader:
                spot_id = _pick(row, "id", "spot_id")
                lat_raw = _pick(row, "latitude", "lat")
                lon_raw = _pick(row, "longitude", "lon")
                risk_raw = _pick(row, "risk", "risk_level")
                if spot_id is None or lat_raw is None or lon_raw is None or risk_raw is None:
                    LOGGER.warning("Skipping incomplete fire spot row id=%s", spot_id)
                    continue

                try:
                    spots.append(
                        FireSpot(
                            id=int(spot_id),
                            latitude=float(lat_raw),
                            longitude=float(lon_raw),
                            risk=parse_risk_level(risk_raw),
                        )
                    )
                except ValueError:
                    LOGGER.warning("Skipping invalid fire spot row id=%s", spot_id)

        return unique_by_id(spots)


async def fetch_fire_spots(provider: FireSpotProvider) -> list[FireSpot]:
    return await asyncio.to_thread(provider.get_fire_spots)
