"""즐겨찾기 날씨 갱신 스케줄러 수명 관리."""

from __future__ import annotations

import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler

logger = logging.getLogger(__name__)

_scheduler: AsyncIOScheduler | None = None


def start_scheduler() -> AsyncIOScheduler:
    """작업을 등록하고 스케줄러를 시작한다. 이미 실행 중이면 그대로 반환."""
    global _scheduler
    if _scheduler is not None and _scheduler.running:
        return _scheduler

    from app.scheduler.jobs import register_jobs
    _scheduler = AsyncIOScheduler(timezone="Asia/Seoul")
    register_jobs(_scheduler)
    _scheduler.start()
    logger.info("Scheduler started (jobs=%s)", [job.id for job in _scheduler.get_jobs()])
    return _scheduler


def shutdown_scheduler() -> None:
    """실행 중인 스케줄러를 멈추고 인스턴스를 버린다."""
    global _scheduler
    if _scheduler is None:
        return
    if _scheduler.running:
        _scheduler.shutdown(wait=False)
        logger.info("Scheduler stopped")
    _scheduler = None
