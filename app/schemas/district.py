from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.schemas.common import DistrictLevel


class DistrictRecord(BaseModel):
    """번들 데이터셋의 행정구역 한 행 (로드 시 검증용)."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(..., min_length=1, description="행정구역 고유 ID")
    name: str = Field(..., min_length=1, description="짧은 이름 (예: '강남구')")
    full_name: str = Field(..., min_length=1, alias="fullName", description="전체 이름 (예: '서울특별시 강남구')")
    level: DistrictLevel = Field(..., description="행정구역 레벨 (sido/sigungu/eupmyeondong)")
    sido: str = Field(..., min_length=1, description="시/도 이름")
    sigungu: str | None = Field(None, description="시/군/구 이름")
    eupmyeondong: str | None = Field(None, description="읍/면/동 이름")

    @model_validator(mode="after")
    def _check_ancestry(self) -> DistrictRecord:
        if not self.full_name.strip():
            raise ValueError("fullName이 비어 있습니다")
        if self.level == DistrictLevel.SIDO:
            if self.sigungu or self.eupmyeondong:
                raise ValueError("sido 레벨에는 sigungu/eupmyeondong이 없어야 합니다")
        elif self.level == DistrictLevel.SIGUNGU:
            if not self.sigungu or self.eupmyeondong:
                raise ValueError("sigungu 레벨에는 sigungu만 있어야 합니다")
        elif not self.sigungu or not self.eupmyeondong:
            raise ValueError("eupmyeondong 레벨에는 sigungu와 eupmyeondong이 모두 필요합니다")
        return self


class DistrictResponse(BaseModel):
    id: str = Field(..., description="행정구역 고유 ID")
    name: str = Field(..., description="짧은 이름")
    full_name: str = Field(..., description="전체 이름")
    level: DistrictLevel = Field(..., description="행정구역 레벨")
    sido: str = Field(..., description="시/도 이름")
    sigungu: str | None = Field(None, description="시/군/구 이름")
    eupmyeondong: str | None = Field(None, description="읍/면/동 이름")

    model_config = {"from_attributes": True}


class HighlightSpanResponse(BaseModel):
    text: str = Field(..., description="구간 문자열 (원문 슬라이스)")
    highlight: bool = Field(..., description="검색어 매칭 구간 여부")

    model_config = {"from_attributes": True}


class DistrictSearchResponse(BaseModel):
    district: DistrictResponse = Field(..., description="매칭된 행정구역")
    matched_text: str = Field(..., description="점수 계산 대상 문자열 (항상 full_name)")
    score: int = Field(..., description="매칭 점수 (높을수록 정확)")
    highlights: list[HighlightSpanResponse] = Field(
        default_factory=list, description="full_name의 하이라이트 구간"
    )
