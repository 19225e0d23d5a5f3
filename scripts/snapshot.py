#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from firespot.api.deps import get_fire_spot_provider, get_weather_provider
from firespot.api.presenters import to_dashboard_response
from firespot.core.config import get_settings
from firespot.services.dashboard import DashboardController, ViewPoint


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Print the fire risk dashboard for one map point as JSON.")
    parser.add_argument("--lat", type=float, default=settings.default_latitude, help="Latitude of the query point.")
    parser.add_argument("--lon", type=float, default=settings.default_longitude, help="Longitude of the query point.")
    parser.add_argument("--zoom", type=float, default=settings.default_zoom, help="Map zoom level.")
    return parser


async def run_snapshot(*, controller: DashboardController) -> str:
    await controller.mount()
    return to_dashboard_response(controller.snapshot()).model_dump_json(indent=2)


def main() -> None:
    args = build_parser().parse_args()
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    controller = DashboardController(
        weather_provider=get_weather_provider(),
        fire_spot_provider=get_fire_spot_provider(),
        viewpoint=ViewPoint(latitude=args.lat, longitude=args.lon, zoom=args.zoom),
        clamp_humidity=settings.forecast_clamp_humidity,
    )
    print(asyncio.run(run_snapshot(controller=controller)))


if __name__ == "__main__":
    main()
