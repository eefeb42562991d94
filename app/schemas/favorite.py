from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class FavoriteCreate(BaseModel):
    address: str = Field(..., min_length=1, max_length=200, description="장소 주소 (예: '서울특별시 강남구')")
    display_name: str | None = Field(None, max_length=100, description="표시 이름. 생략 시 주소 사용")


class FavoriteUpdate(BaseModel):
    display_name: str = Field(..., min_length=1, max_length=100, description="새 표시 이름")


class FavoriteToggle(BaseModel):
    address: str = Field(..., min_length=1, max_length=200, description="토글할 장소 주소")


class FavoriteResponse(BaseModel):
    id: int = Field(..., description="즐겨찾기 ID")
    address: str = Field(..., description="장소 주소")
    display_name: str = Field(..., description="표시 이름")
    created_at: datetime = Field(..., description="추가 시각 (UTC)")

    model_config = {"from_attributes": True}


class FavoriteToggleResponse(BaseModel):
    is_favorite: bool = Field(..., description="토글 후 즐겨찾기 여부")
    favorite: FavoriteResponse | None = Field(None, description="추가된 항목 (삭제 시 null)")
