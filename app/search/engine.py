"""행정구역 검색 엔진: 점수 계산, 레벨 필터, 정렬 및 개수 제한."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from app.search.base import District, SearchOptions, SearchResult
from app.search.hangul_util import extract_chosung, normalize_query


class _MatchFields:
    """한 행정구역에 대해 비교에 쓰이는 필드 묶음."""

    __slots__ = ("name", "full_name", "chosung")

    def __init__(self, district: District):
        self.name = normalize_query(district.name)
        self.full_name = normalize_query(district.full_name)
        # 초성은 정규화 전 원본 full_name 기준
        self.chosung = extract_chosung(district.full_name)


# 우선순위 순서대로 평가, 처음 만족하는 단계의 점수를 반환
_MATCH_TIERS: list[tuple[Callable[[_MatchFields, str], bool], int]] = [
    (lambda f, q: f.name == q, 1000),
    (lambda f, q: f.full_name == q, 900),
    (lambda f, q: f.name.startswith(q), 800),
    (lambda f, q: f.full_name.startswith(q), 700),
    (lambda f, q: q in f.name, 600),
    (lambda f, q: q in f.full_name, 500),
    (lambda f, q: q in f.chosung, 400),
]


def calculate_match_score(district: District, normalized_query: str) -> int:
    """정규화된 검색어에 대한 매칭 점수. 0이면 매칭 실패."""
    fields = _MatchFields(district)
    for predicate, score in _MATCH_TIERS:
        if predicate(fields, normalized_query):
            return score
    return 0


def search_districts(
    districts: Sequence[District], options: SearchOptions
) -> list[SearchResult]:
    """행정구역을 검색한다.

    점수가 0인 항목은 제외되고, 레벨 필터는 점수 계산 뒤에 적용된다.
    동점은 원본 데이터 순서를 유지한다 (안정 정렬).
    level이 빈 목록이면 허용 레벨이 없으므로 결과도 없다.
    """
    if not options.query.strip():
        return []

    normalized_query = normalize_query(options.query)

    results: list[SearchResult] = []
    for district in districts:
        score = calculate_match_score(district, normalized_query)
        if score == 0:
            continue
        results.append(
            SearchResult(district=district, matched_text=district.full_name, score=score)
        )

    if options.level is not None:
        results = [r for r in results if r.district.level in options.level]

    results.sort(key=lambda r: r.score, reverse=True)
    return results[: max(options.limit, 0)]
