from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from app.config import settings
from app.schemas.common import DistrictLevel
from app.schemas.district import (
    DistrictResponse,
    DistrictSearchResponse,
    HighlightSpanResponse,
)
from app.search.base import SearchOptions
from app.search.engine import search_districts
from app.search.gazetteer import Gazetteer
from app.search.highlight import highlight_text

router = APIRouter(prefix="/districts", tags=["districts"])


def get_gazetteer(request: Request) -> Gazetteer:
    """앱 시작 시 로드된 행정구역 저장소."""
    return request.app.state.gazetteer


@router.get(
    "/search",
    response_model=list[DistrictSearchResponse],
    summary="행정구역 검색",
    description="시/도, 시/군/구, 읍/면/동 이름을 검색합니다. 공백·대소문자를 무시하며 "
                "초성 검색(예: 'ㄱㄴㄱ' → 강남구)을 지원합니다. "
                "정확 일치 > 접두 일치 > 부분 일치 > 초성 일치 순으로 정렬됩니다.",
)
async def search(
    q: str = Query("", description="검색어"),
    limit: int | None = Query(None, ge=0, le=100, description="최대 결과 수 (기본 20)"),
    level: list[DistrictLevel] | None = Query(None, description="허용 레벨 (반복 지정 가능)"),
    gazetteer: Gazetteer = Depends(get_gazetteer),
):
    options = SearchOptions(
        query=q,
        limit=settings.search_default_limit if limit is None else limit,
        level=tuple(level) if level else None,
    )
    results = search_districts(gazetteer.districts, options)
    return [
        DistrictSearchResponse(
            district=DistrictResponse.model_validate(r.district),
            matched_text=r.matched_text,
            score=r.score,
            highlights=[
                HighlightSpanResponse.model_validate(span)
                for span in highlight_text(r.district.full_name, q)
            ],
        )
        for r in results
    ]


@router.get(
    "/{district_id}",
    response_model=DistrictResponse,
    summary="행정구역 단건 조회",
)
async def get_district(
    district_id: str,
    gazetteer: Gazetteer = Depends(get_gazetteer),
):
    district = gazetteer.get(district_id)
    if district is None:
        raise HTTPException(status_code=404, detail="District not found")
    return DistrictResponse.model_validate(district)
