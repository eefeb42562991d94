from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config import settings
from app.search.gazetteer import Gazetteer

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting weather-lookup (api_key=%s)", settings.is_api_key_valid())

    # 행정구역 데이터는 1회 로드 후 읽기 전용으로 공유
    app.state.gazetteer = Gazetteer.load(settings.districts_path)

    from app.database import init_db
    await init_db()

    from app.scheduler.scheduler import start_scheduler
    start_scheduler()

    yield

    # Shutdown
    from app.scheduler.scheduler import shutdown_scheduler
    from app.clients.openweather import close_weather_client
    from app.database import dispose_db
    shutdown_scheduler()
    await close_weather_client()
    await dispose_db()
    logger.info("Shutdown complete")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Weather Lookup",
        version="0.1.0",
        lifespan=lifespan,
    )

    # API routes
    from app.api.router import api_router
    app.include_router(api_router, prefix="/api")

    return app


app = create_app()
