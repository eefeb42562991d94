"""날씨 캐시 DB 영속화 서비스."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.clients.models import WeatherData
from app.models.weather_cache import WeatherCache


class WeatherCacheService:

    def __init__(self, session: AsyncSession):
        self.session = session

    async def upsert(self, lat: float, lon: float, data: WeatherData) -> WeatherCache:
        """날씨 데이터를 DB에 저장 (있으면 갱신, 없으면 생성)."""
        cache = await self.get(lat, lon)

        if cache is None:
            cache = WeatherCache(lat=lat, lon=lon, payload={})
            self.session.add(cache)

        cache.payload = data.to_dict()
        cache.updated_at = datetime.now(timezone.utc)

        await self.session.commit()
        return cache

    async def get(self, lat: float, lon: float) -> WeatherCache | None:
        result = await self.session.execute(
            select(WeatherCache).where(
                WeatherCache.lat == lat,
                WeatherCache.lon == lon,
            )
        )
        return result.scalar_one_or_none()

    async def load(self, lat: float, lon: float) -> WeatherData | None:
        """캐시된 날씨 데이터를 복원. 없으면 None."""
        cache = await self.get(lat, lon)
        if cache is None:
            return None
        return WeatherData.from_dict(cache.payload)
