"""행정구역 검색 도메인 타입."""

from __future__ import annotations

from dataclasses import dataclass

from app.schemas.common import DistrictLevel

DEFAULT_SEARCH_LIMIT = 20


@dataclass(frozen=True)
class District:
    id: str
    name: str
    full_name: str
    level: DistrictLevel
    sido: str
    sigungu: str | None = None
    eupmyeondong: str | None = None


@dataclass(frozen=True)
class SearchOptions:
    query: str
    limit: int = DEFAULT_SEARCH_LIMIT
    level: tuple[DistrictLevel, ...] | None = None


@dataclass(frozen=True)
class SearchResult:
    district: District
    matched_text: str
    score: int


@dataclass(frozen=True)
class HighlightSpan:
    text: str
    highlight: bool
