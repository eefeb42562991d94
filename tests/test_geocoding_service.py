"""GeocodingService 테스트: 주소 축약/마지막 토큰 폴백, 역지오코딩 기본값."""

from __future__ import annotations

from unittest.mock import AsyncMock

import httpx
import pytest

from app.clients.models import Coordinates
from app.services.geocoding_service import GeocodingService, normalize_address


def _client_with(responses: dict[str, list | Exception]):
    """질의 문자열별 응답을 돌려주는 mock 클라이언트."""
    client = AsyncMock()

    async def _direct(query):
        result = responses.get(query, [])
        if isinstance(result, Exception):
            raise result
        return result

    client.geocode_direct.side_effect = _direct
    return client


def test_normalize_address():
    assert normalize_address("제주특별자치도 제주시") == "제주도 제주시"
    assert normalize_address("세종특별자치시") == "세종시"
    assert normalize_address("서울특별시 강남구") == "서울특별시 강남구"


@pytest.mark.asyncio
async def test_geocode_direct_hit():
    client = _client_with({"서울특별시 강남구,KR": [{"lat": 37.5, "lon": 127.04}]})
    coords = await GeocodingService(client).geocode_address("서울특별시 강남구")
    assert coords == Coordinates(lat=37.5, lon=127.04)
    assert client.geocode_direct.await_count == 1


@pytest.mark.asyncio
async def test_geocode_falls_back_to_abbreviated_address():
    client = _client_with({"제주도 제주시,KR": [{"lat": 33.5, "lon": 126.5}]})
    coords = await GeocodingService(client).geocode_address("제주특별자치도 제주시")
    assert coords == Coordinates(lat=33.5, lon=126.5)
    queries = [c.args[0] for c in client.geocode_direct.await_args_list]
    assert queries == ["제주특별자치도 제주시,KR", "제주도 제주시,KR"]


@pytest.mark.asyncio
async def test_geocode_falls_back_to_last_segment():
    client = _client_with(
        {
            "서울특별시 강남구 역삼동,KR": httpx.ConnectError("boom"),
            "역삼동,KR": [{"lat": 37.49, "lon": 127.03}],
        }
    )
    coords = await GeocodingService(client).geocode_address("서울특별시 강남구 역삼동")
    assert coords == Coordinates(lat=37.49, lon=127.03)
    queries = [c.args[0] for c in client.geocode_direct.await_args_list]
    # 축약형이 원문과 같으면 두 번째 시도는 생략
    assert queries == ["서울특별시 강남구 역삼동,KR", "역삼동,KR"]


@pytest.mark.asyncio
async def test_geocode_not_found_raises():
    client = _client_with({})
    with pytest.raises(ValueError, match="해당 주소를 찾을 수 없습니다"):
        await GeocodingService(client).geocode_address("없는동네")
    assert client.geocode_direct.await_count == 1


@pytest.mark.asyncio
async def test_reverse_geocode_prefers_korean_name():
    client = AsyncMock()
    client.geocode_reverse.return_value = [
        {"name": "Gangnam-gu", "local_names": {"ko": "강남구", "en": "Gangnam-gu"}}
    ]
    assert await GeocodingService(client).reverse_geocode(37.5, 127.0) == "강남구"


@pytest.mark.asyncio
async def test_reverse_geocode_fallbacks():
    client = AsyncMock()
    client.geocode_reverse.return_value = [{"name": "Gangnam-gu"}]
    svc = GeocodingService(client)
    assert await svc.reverse_geocode(37.5, 127.0) == "Gangnam-gu"

    client.geocode_reverse.return_value = []
    assert await svc.reverse_geocode(37.5, 127.0) == "알 수 없는 위치"

    client.geocode_reverse.side_effect = httpx.ConnectError("down")
    assert await svc.reverse_geocode(37.5, 127.0) == "위치 정보 없음"
