from __future__ import annotations

from fastapi import APIRouter

from app.api.system import router as system_router
from app.api.districts import router as districts_router
from app.api.weather import router as weather_router
from app.api.favorites import router as favorites_router

api_router = APIRouter()
api_router.include_router(system_router)
api_router.include_router(districts_router)
api_router.include_router(weather_router)
api_router.include_router(favorites_router)
