"""주소 ↔ 좌표 변환 서비스 (OpenWeatherMap Geocoding)."""

from __future__ import annotations

import logging

from app.clients.models import Coordinates
from app.clients.openweather import OpenWeatherClient, get_weather_client

logger = logging.getLogger(__name__)

UNKNOWN_LOCATION = "알 수 없는 위치"
NO_LOCATION_INFO = "위치 정보 없음"

# 지오코딩 API가 인식하지 못하는 긴 행정구역 명칭 → 축약형
_ADDRESS_ABBREVIATIONS = [
    ("특별자치도", "도"),
    ("특별자치시", "시"),
]


def normalize_address(address: str) -> str:
    """'특별자치도/특별자치시'를 '도/시'로 축약한다.

    >>> normalize_address("제주특별자치도 제주시")
    '제주도 제주시'
    """
    normalized = address
    for long_form, short_form in _ADDRESS_ABBREVIATIONS:
        normalized = normalized.replace(long_form, short_form)
    return normalized


class GeocodingService:

    def __init__(self, client: OpenWeatherClient | None = None):
        self.client = client or get_weather_client()

    async def _fetch_coords(self, query: str) -> Coordinates | None:
        """단일 질의 시도. 실패나 빈 결과는 None."""
        try:
            data = await self.client.geocode_direct(f"{query},KR")
        except Exception as e:
            logger.warning("지오코딩 요청 실패 (%s): %s", query, e)
            return None
        if not data:
            return None
        return Coordinates(lat=data[0]["lat"], lon=data[0]["lon"])

    async def geocode_address(self, address: str) -> Coordinates:
        """주소를 좌표로 변환한다.

        원문 → 축약형(특별자치도/시) → 마지막 공백 구분 토큰 순으로 시도한다.

        Raises:
            ValueError: 모든 시도가 실패한 경우
        """
        coords = await self._fetch_coords(address)

        if coords is None:
            normalized = normalize_address(address)
            if normalized != address:
                coords = await self._fetch_coords(normalized)

        if coords is None and " " in address:
            segments = address.split()
            if len(segments) > 1:
                coords = await self._fetch_coords(segments[-1])

        if coords is None:
            raise ValueError("해당 주소를 찾을 수 없습니다.")

        logger.debug("지오코딩 완료: %s → (%s, %s)", address, coords.lat, coords.lon)
        return coords

    async def reverse_geocode(self, lat: float, lon: float) -> str:
        """좌표를 한국어 지명으로 변환한다. 실패해도 예외 대신 안내 문구를 반환."""
        try:
            data = await self.client.geocode_reverse(lat, lon)
        except Exception as e:
            logger.error("역지오코딩 실패 (%s, %s): %s", lat, lon, e)
            return NO_LOCATION_INFO

        if not data:
            return UNKNOWN_LOCATION

        location = data[0]
        local_names = location.get("local_names") or {}
        return local_names.get("ko") or location.get("name") or UNKNOWN_LOCATION
