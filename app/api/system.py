from __future__ import annotations

from fastapi import APIRouter, Request

from app.config import settings

router = APIRouter(tags=["system"])


@router.get(
    "/health",
    summary="헬스 체크",
    description="서버 구동 상태, 로드된 행정구역 수, 날씨 API 키 설정 여부를 반환합니다.",
)
async def health(request: Request):
    gazetteer = getattr(request.app.state, "gazetteer", None)
    return {
        "status": "ok",
        "districts": len(gazetteer) if gazetteer is not None else 0,
        "weather_api_key": settings.is_api_key_valid(),
        "version": "0.1.0",
    }
