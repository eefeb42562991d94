from __future__ import annotations

import httpx
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.clients.models import WeatherData
from app.database import get_session
from app.schemas.weather import CoordinatesResponse, ReverseGeocodeResponse, WeatherResponse
from app.services.geocoding_service import GeocodingService
from app.services.weather_service import (
    WeatherService,
    get_weather_icon_url,
    is_tomorrow_midnight,
)

router = APIRouter(tags=["weather"])


def _to_response(data: WeatherData) -> WeatherResponse:
    resp = WeatherResponse.model_validate(data)
    if resp.current.icon:
        resp.current.icon_url = get_weather_icon_url(resp.current.icon)
    for hour in resp.hourly:
        hour.is_tomorrow = is_tomorrow_midnight(hour.time, data.timestamp)
    return resp


def _upstream_error(e: httpx.HTTPError) -> HTTPException:
    return HTTPException(status_code=502, detail=f"날씨 정보를 가져오는데 실패했습니다 {e}")


@router.get(
    "/weather",
    response_model=WeatherResponse,
    summary="좌표로 날씨 조회",
    description="현재 날씨와 24시간(3시간 간격 8개) 예보를 반환합니다. "
                "5분 메모리 캐시 → API → DB 캐시 순으로 조회합니다.",
)
async def get_weather(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    session: AsyncSession = Depends(get_session),
):
    svc = WeatherService(session)
    try:
        data = await svc.get_weather(lat, lon)
    except httpx.HTTPError as e:
        raise _upstream_error(e)
    return _to_response(data)


@router.get(
    "/weather/by-address",
    response_model=WeatherResponse,
    summary="주소로 날씨 조회",
    description="주소를 좌표로 변환한 뒤 날씨를 조회합니다. 변환 실패 시 404를 반환합니다.",
)
async def get_weather_by_address(
    address: str = Query(..., min_length=1),
    session: AsyncSession = Depends(get_session),
):
    svc = WeatherService(session)
    try:
        data = await svc.get_weather_by_address(address)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except httpx.HTTPError as e:
        raise _upstream_error(e)
    return _to_response(data)


@router.get(
    "/geocode",
    response_model=CoordinatesResponse,
    summary="주소 → 좌표 변환",
)
async def geocode(address: str = Query(..., min_length=1)):
    try:
        coords = await GeocodingService().geocode_address(address)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return CoordinatesResponse.model_validate(coords)


@router.get(
    "/geocode/reverse",
    response_model=ReverseGeocodeResponse,
    summary="좌표 → 주소 변환",
)
async def reverse_geocode(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
):
    address = await GeocodingService().reverse_geocode(lat, lon)
    return ReverseGeocodeResponse(lat=lat, lon=lon, address=address)
