from fastapi import APIRouter

from firespot.api.routes.dashboard import router as dashboard_router
from firespot.api.routes.fire_spots import router as fire_spots_router
from firespot.api.routes.health import router as health_router
from firespot.api.routes.map_config import router as map_config_router
from firespot.api.routes.risk import router as risk_router
from firespot.api.routes.weather import router as weather_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(health_router)
api_router.include_router(map_config_router)
api_router.include_router(risk_router)
api_router.include_router(weather_router)
api_router.include_router(fire_spots_router)
api_router.include_router(dashboard_router)
