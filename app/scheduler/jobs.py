from __future__ import annotations

import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler

from app.config import settings

logger = logging.getLogger(__name__)


async def refresh_favorite_weather():
    """즐겨찾기 장소의 날씨를 미리 조회하여 캐시를 갱신."""
    from app.database import async_session
    from app.services.favorite_service import FavoriteService
    from app.services.weather_service import WeatherService

    async with async_session() as session:
        favorites = await FavoriteService(session).list_all()
        if not favorites:
            return
        svc = WeatherService(session)
        refreshed = 0
        for favorite in favorites:
            try:
                await svc.get_weather_by_address(favorite.address)
                refreshed += 1
            except Exception as e:
                logger.warning("즐겨찾기 날씨 갱신 실패 (%s): %s", favorite.address, e)
        logger.info("즐겨찾기 날씨 갱신: %d/%d건", refreshed, len(favorites))


def register_jobs(scheduler: AsyncIOScheduler):
    scheduler.add_job(
        refresh_favorite_weather,
        "interval",
        minutes=settings.favorite_refresh_minutes,
        id="refresh_favorite_weather",
        replace_existing=True,
    )
