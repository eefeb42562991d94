"""날씨 데이터 서비스 (메모리 TTL 캐시 + DB 영속 캐시)."""

from __future__ import annotations

import asyncio
import dataclasses
import logging
import math
import time
from datetime import datetime, timedelta, timezone
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.clients.models import Coordinates, CurrentWeather, HourlyWeather, WeatherData
from app.clients.openweather import OpenWeatherClient, get_weather_client
from app.config import settings
from app.services.geocoding_service import GeocodingService

logger = logging.getLogger(__name__)

KST = timezone(timedelta(hours=9))

# 예보 목록 중 화면에 쓰는 개수 (3시간 × 8 = 24시간)
HOURLY_COUNT = 8

_ICON_SIZE_SUFFIX = {"1x": "", "2x": "@2x", "4x": "@4x"}

# 메모리 TTL 캐시: {(lat, lon): (WeatherData, timestamp)}
_weather_cache: dict[tuple[float, float], tuple[WeatherData, float]] = {}


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _cache_key(lat: float, lon: float) -> tuple[float, float]:
    # 약 11m 정밀도로 묶어서 캐시 적중률 확보
    return (round(lat, 4), round(lon, 4))


def _remember(key: tuple[float, float], data: WeatherData, now: float) -> None:
    """메모리 캐시에 저장. 최대 개수를 넘으면 가장 오래 저장된 항목부터 제거."""
    _weather_cache.pop(key, None)
    _weather_cache[key] = (data, now)
    while len(_weather_cache) > settings.weather_cache_max_entries:
        del _weather_cache[next(iter(_weather_cache))]


def get_weather_icon_url(icon_code: str, size: str = "2x") -> str:
    """OpenWeatherMap 아이콘 URL.

    >>> get_weather_icon_url("01d")
    'https://openweathermap.org/img/wn/01d@2x.png'
    """
    return f"https://openweathermap.org/img/wn/{icon_code}{_ICON_SIZE_SUFFIX[size]}.png"


def is_tomorrow_midnight(hour_timestamp: int, base_timestamp: int) -> bool:
    """예보 시각이 기준 시각 다음 날의 자정(KST 0시)인지 판별."""
    hour_dt = datetime.fromtimestamp(hour_timestamp, KST)
    base_dt = datetime.fromtimestamp(base_timestamp, KST)
    return hour_dt.hour == 0 and hour_dt.day != base_dt.day


def map_response_to_weather_data(
    location: str, current: dict[str, Any], forecast: dict[str, Any]
) -> WeatherData:
    """현재 날씨 + 예보 원본 응답을 WeatherData로 가공한다."""
    hourly: list[HourlyWeather] = []
    for item in forecast.get("list", [])[:HOURLY_COUNT]:
        condition = (item.get("weather") or [{}])[0]
        pop = item.get("pop")
        hourly.append(
            HourlyWeather(
                time=item["dt"],
                time_text=datetime.fromtimestamp(item["dt"], KST).strftime("%H:%M"),
                temp=_round_half_up(item["main"]["temp"]),
                description=condition.get("description", ""),
                icon=condition.get("icon", ""),
                pop=_round_half_up(pop * 100) if pop else None,
            )
        )

    main = current["main"]
    condition = (current.get("weather") or [{}])[0]
    return WeatherData(
        location=location,
        coordinates=Coordinates(lat=current["coord"]["lat"], lon=current["coord"]["lon"]),
        current=CurrentWeather(
            temp=_round_half_up(main["temp"]),
            feels_like=_round_half_up(main["feels_like"]),
            temp_min=_round_half_up(main["temp_min"]),
            temp_max=_round_half_up(main["temp_max"]),
            humidity=main["humidity"],
            description=condition.get("description", ""),
            icon=condition.get("icon", ""),
            sunrise=current["sys"]["sunrise"],
            sunset=current["sys"]["sunset"],
        ),
        hourly=hourly,
        timestamp=current["dt"],
    )


class WeatherService:

    def __init__(
        self,
        session: AsyncSession | None = None,
        client: OpenWeatherClient | None = None,
    ):
        self.session = session
        self.client = client or get_weather_client()

    async def get_weather(self, lat: float, lon: float) -> WeatherData:
        """날씨 조회 (메모리 캐시 → API → DB 저장)."""
        key = _cache_key(lat, lon)
        now = time.monotonic()

        # 1) 메모리 캐시 확인
        cached = _weather_cache.get(key)
        if cached and (now - cached[1]) < settings.weather_cache_ttl:
            return cached[0]

        # 2) API에서 현재 날씨 + 예보 동시 조회
        try:
            current, forecast = await asyncio.gather(
                self.client.fetch_current_weather(lat, lon),
                self.client.fetch_hourly_forecast(lat, lon),
            )
            data = map_response_to_weather_data(current.get("name", ""), current, forecast)
            _remember(key, data, now)

            # 3) DB 캐시에 저장 (session이 있을 때만)
            if self.session:
                await self._save_to_db(key, data)

            return data

        except Exception as e:
            logger.warning("날씨 API 조회 실패 (%s, %s): %s", lat, lon, e)

            # 4) API 실패 시 DB 캐시에서 복원
            if self.session:
                db_data = await self._load_from_db(key)
                if db_data:
                    return db_data

            # 5) 메모리 캐시에 만료된 데이터라도 있으면 반환
            if cached:
                return cached[0]

            raise

    async def get_weather_by_address(self, address: str) -> WeatherData:
        """주소를 좌표로 바꾼 뒤 날씨를 조회한다. location은 입력 주소로 표시."""
        coords = await GeocodingService(self.client).geocode_address(address)
        data = await self.get_weather(coords.lat, coords.lon)
        return dataclasses.replace(data, location=address)

    async def _save_to_db(self, key: tuple[float, float], data: WeatherData) -> None:
        from app.services.weather_cache_service import WeatherCacheService
        try:
            await WeatherCacheService(self.session).upsert(key[0], key[1], data)
        except Exception as e:
            logger.warning("날씨 DB 캐시 저장 실패 %s: %s", key, e)

    async def _load_from_db(self, key: tuple[float, float]) -> WeatherData | None:
        from app.services.weather_cache_service import WeatherCacheService
        try:
            data = await WeatherCacheService(self.session).load(key[0], key[1])
        except Exception as e:
            logger.warning("날씨 DB 캐시 조회 실패 %s: %s", key, e)
            return None
        if data:
            logger.info("DB 캐시에서 날씨 복원: %s", key)
        return data
