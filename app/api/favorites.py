from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_session
from app.schemas.favorite import (
    FavoriteCreate,
    FavoriteResponse,
    FavoriteToggle,
    FavoriteToggleResponse,
    FavoriteUpdate,
)
from app.services.favorite_service import FavoriteService

router = APIRouter(prefix="/favorites", tags=["favorites"])


@router.get("", response_model=list[FavoriteResponse], summary="즐겨찾기 목록")
async def list_favorites(session: AsyncSession = Depends(get_session)):
    svc = FavoriteService(session)
    return [FavoriteResponse.model_validate(f) for f in await svc.list_all()]


@router.post(
    "",
    response_model=FavoriteResponse,
    status_code=201,
    summary="즐겨찾기 추가",
    description="이미 추가된 주소이거나 최대 개수(기본 6개)를 넘으면 409를 반환합니다.",
)
async def add_favorite(
    req: FavoriteCreate,
    session: AsyncSession = Depends(get_session),
):
    svc = FavoriteService(session)
    try:
        favorite = await svc.add(req.address, req.display_name)
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return FavoriteResponse.model_validate(favorite)


@router.post("/toggle", response_model=FavoriteToggleResponse, summary="즐겨찾기 토글")
async def toggle_favorite(
    req: FavoriteToggle,
    session: AsyncSession = Depends(get_session),
):
    svc = FavoriteService(session)
    try:
        favorite = await svc.toggle(req.address)
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return FavoriteToggleResponse(
        is_favorite=favorite is not None,
        favorite=FavoriteResponse.model_validate(favorite) if favorite else None,
    )


@router.patch("/{favorite_id}", response_model=FavoriteResponse, summary="표시 이름 변경")
async def rename_favorite(
    favorite_id: int,
    req: FavoriteUpdate,
    session: AsyncSession = Depends(get_session),
):
    if not req.display_name.strip():
        raise HTTPException(status_code=400, detail="이름을 입력해주세요.")
    svc = FavoriteService(session)
    try:
        favorite = await svc.rename(favorite_id, req.display_name)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return FavoriteResponse.model_validate(favorite)


@router.delete("/{favorite_id}", summary="즐겨찾기 삭제")
async def delete_favorite(
    favorite_id: int,
    session: AsyncSession = Depends(get_session),
):
    svc = FavoriteService(session)
    try:
        await svc.remove(favorite_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"status": "deleted"}
