from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from firespot.api.deps import get_fire_spot_provider
from firespot.api.presenters import to_fire_spot_items
from firespot.core.errors import FetchFailure
from firespot.providers.fire_spots import FireSpotProvider
from firespot.schemas.api import FireSpotsResponse


router = APIRouter(tags=["fire-spots"])
LOGGER = logging.getLogger(__name__)


@router.get("/fire-spots", response_model=FireSpotsResponse)
def get_fire_spots(provider: FireSpotProvider = Depends(get_fire_spot_provider)) -> FireSpotsResponse:
    LOGGER.debug("event=api.fire_spots.request")
    try:
        spots = provider.get_fire_spots()
    except FetchFailure as exc:
        raise HTTPException(status_code=502, detail=exc.message) from exc
    LOGGER.debug("event=api.fire_spots.response rows_returned=%s", len(spots))
    return FireSpotsResponse(items=to_fire_spot_items(spots))
