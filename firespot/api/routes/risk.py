from __future__ import annotations

import logging

from fastapi import APIRouter, Query

from firespot.api.presenters import to_risk_response
from firespot.schemas.api import RiskResponse
from firespot.services.risk import classify


router = APIRouter(tags=["risk"])
LOGGER = logging.getLogger(__name__)


# curl -X GET "http://localhost:8000/api/v1/risk?temperature=40&humidity=10"
@router.get("/risk", response_model=RiskResponse)
def get_risk(
    temperature: float = Query(...),
    humidity: float = Query(...),
) -> RiskResponse:
    response = to_risk_response(temperature, humidity, classify(temperature, humidity))
    LOGGER.debug(
        "event=api.risk.response temperature=%s humidity=%s score=%s level=%s",
        temperature,
        humidity,
        response.score,
        response.level.value,
    )
    return response
