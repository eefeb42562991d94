"""스케줄러 수명 관리 및 작업 등록 테스트."""

from __future__ import annotations

from datetime import timedelta

import pytest
from apscheduler.schedulers.asyncio import AsyncIOScheduler

from app.config import settings
from app.scheduler import scheduler as scheduler_module
from app.scheduler.jobs import refresh_favorite_weather, register_jobs
from app.scheduler.scheduler import shutdown_scheduler, start_scheduler


def test_register_jobs_uses_configured_interval(monkeypatch):
    monkeypatch.setattr(settings, "favorite_refresh_minutes", 7)
    scheduler = AsyncIOScheduler(timezone="Asia/Seoul")
    register_jobs(scheduler)

    job = scheduler.get_job("refresh_favorite_weather")
    assert job is not None
    assert job.func is refresh_favorite_weather
    assert job.trigger.interval == timedelta(minutes=7)


@pytest.mark.asyncio
async def test_start_and_shutdown_scheduler():
    scheduler = start_scheduler()
    try:
        assert scheduler.running
        assert start_scheduler() is scheduler
        assert [job.id for job in scheduler.get_jobs()] == ["refresh_favorite_weather"]
    finally:
        shutdown_scheduler()

    assert not scheduler.running
    assert scheduler_module._scheduler is None
    # 이미 멈춘 상태에서 다시 호출해도 문제없음
    shutdown_scheduler()
