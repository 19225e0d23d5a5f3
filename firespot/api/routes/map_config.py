from __future__ import annotations

from fastapi import APIRouter

from firespot.core.config import get_settings
from firespot.schemas.api import CameraState, MapConfigResponse


router = APIRouter(prefix="/config", tags=["config"])


@router.get("/map", response_model=MapConfigResponse)
def get_map_config() -> MapConfigResponse:
    settings = get_settings()
    return MapConfigResponse(
        access_token=settings.mapbox_access_token,
        style=settings.map_style,
        camera=CameraState(
            latitude=settings.default_latitude,
            longitude=settings.default_longitude,
            zoom=settings.default_zoom,
        ),
    )
