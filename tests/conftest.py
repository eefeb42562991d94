"""테스트 공통 설정: 인메모리 SQLite 세션, 소형 행정구역 데이터, 날씨 캐시 초기화."""

from __future__ import annotations

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.database import init_db
from app.schemas.common import DistrictLevel
from app.search.base import District
from app.search.gazetteer import Gazetteer
from app.services import weather_service


@pytest.fixture
async def session():
    """각 테스트마다 독립적인 인메모리 DB 세션 제공."""
    engine = create_async_engine("sqlite+aiosqlite://", echo=False)

    await init_db(engine)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as sess:
        yield sess

    await engine.dispose()


@pytest.fixture(autouse=True)
def _clear_weather_cache():
    """모듈 전역 메모리 캐시가 테스트 사이에 공유되지 않도록 비운다."""
    weather_service._weather_cache.clear()
    yield
    weather_service._weather_cache.clear()


def make_district(
    id: str,
    name: str,
    full_name: str,
    level: DistrictLevel = DistrictLevel.SIGUNGU,
    sido: str = "서울특별시",
    sigungu: str | None = None,
    eupmyeondong: str | None = None,
) -> District:
    if level != DistrictLevel.SIDO and sigungu is None:
        sigungu = name if level == DistrictLevel.SIGUNGU else "강남구"
    if level == DistrictLevel.EUPMYEONDONG and eupmyeondong is None:
        eupmyeondong = name
    return District(
        id=id,
        name=name,
        full_name=full_name,
        level=level,
        sido=sido,
        sigungu=sigungu,
        eupmyeondong=eupmyeondong,
    )


@pytest.fixture
def districts() -> list[District]:
    """검색 테스트용 소형 행정구역 목록 (원본 순서 의미 있음)."""
    return [
        make_district("11", "서울특별시", "서울특별시", level=DistrictLevel.SIDO),
        make_district("11680", "강남구", "서울특별시 강남구"),
        make_district("11650", "서초구", "서울특별시 서초구"),
        make_district("11140", "중구", "서울특별시 중구"),
        make_district("26140", "중구", "부산광역시 중구", sido="부산광역시"),
        make_district(
            "1168010100", "역삼동", "서울특별시 강남구 역삼동",
            level=DistrictLevel.EUPMYEONDONG,
        ),
        make_district(
            "1168010500", "삼성동", "서울특별시 강남구 삼성동",
            level=DistrictLevel.EUPMYEONDONG,
        ),
        make_district("50", "제주특별자치도", "제주특별자치도", level=DistrictLevel.SIDO, sido="제주특별자치도"),
    ]


@pytest.fixture
def gazetteer(districts) -> Gazetteer:
    return Gazetteer(districts)
