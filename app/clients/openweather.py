"""OpenWeatherMap HTTP client (weather + geocoding)."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from app.config import settings

logger = logging.getLogger(__name__)

CURRENT_WEATHER_PATH = "/weather"
FORECAST_PATH = "/forecast"
GEO_DIRECT_PATH = "/direct"
GEO_REVERSE_PATH = "/reverse"


class OpenWeatherClient:
    """Low-level HTTP client for the OpenWeatherMap API."""

    def __init__(self, api_key: str | None = None):
        self._client: httpx.AsyncClient | None = None
        self._api_key = settings.weather_api_key if api_key is None else api_key

    async def open(self):
        self._client = httpx.AsyncClient(timeout=10.0)

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _get(self, url: str, params: dict[str, Any]) -> Any:
        if not self._client:
            await self.open()
        resp = await self._client.get(url, params={"appid": self._api_key, **params})
        if not resp.is_success:
            logger.error("OpenWeatherMap GET 오류 [%s] %s: %s", resp.status_code, url, resp.text)
        resp.raise_for_status()
        return resp.json()

    def _weather_params(self, lat: float, lon: float) -> dict[str, Any]:
        return {
            "lat": lat,
            "lon": lon,
            "units": settings.weather_units,
            "lang": settings.weather_lang,
        }

    async def fetch_current_weather(self, lat: float, lon: float) -> dict[str, Any]:
        """현재 날씨 원본 응답."""
        return await self._get(
            settings.weather_api_base_url + CURRENT_WEATHER_PATH,
            self._weather_params(lat, lon),
        )

    async def fetch_hourly_forecast(self, lat: float, lon: float) -> dict[str, Any]:
        """3시간 단위 예보 원본 응답."""
        return await self._get(
            settings.weather_api_base_url + FORECAST_PATH,
            self._weather_params(lat, lon),
        )

    async def geocode_direct(self, query: str) -> list[dict[str, Any]]:
        """주소 → 좌표 후보 목록 (최대 1건)."""
        return await self._get(
            settings.geo_api_base_url + GEO_DIRECT_PATH,
            {"q": query, "limit": 1},
        )

    async def geocode_reverse(self, lat: float, lon: float) -> list[dict[str, Any]]:
        """좌표 → 지명 후보 목록 (최대 1건)."""
        return await self._get(
            settings.geo_api_base_url + GEO_REVERSE_PATH,
            {"lat": lat, "lon": lon, "limit": 1},
        )


_client: OpenWeatherClient | None = None


def get_weather_client() -> OpenWeatherClient:
    """프로세스 공용 클라이언트 인스턴스."""
    global _client
    if _client is None:
        if not settings.is_api_key_valid():
            logger.warning("WEATHER_API_KEY가 설정되지 않았습니다. 날씨 조회가 실패할 수 있습니다.")
        _client = OpenWeatherClient()
    return _client


async def close_weather_client():
    global _client
    if _client is not None:
        await _client.close()
        _client = None
