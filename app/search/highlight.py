"""검색어 하이라이트 분할."""

from __future__ import annotations

from app.search.base import HighlightSpan
from app.search.hangul_util import normalize_query


def highlight_text(text: str, query: str) -> list[HighlightSpan]:
    """text에서 검색어가 처음 나타나는 부분을 하이라이트 구간으로 분리한다.

    검색어는 공백 제거 + 소문자화, text는 소문자화만 한 뒤 비교한다.
    따라서 text 내부 공백을 가로지르는 검색어("서울 강남" → "서울강남")는
    "서울특별시 강남구" 같은 원문에서 매칭되지 않는다. 반환 구간은 항상
    원문 text의 슬라이스이다.
    """
    if not query.strip():
        return [HighlightSpan(text=text, highlight=False)]

    normalized_query = normalize_query(query)
    index = text.lower().find(normalized_query)

    if index == -1:
        return [HighlightSpan(text=text, highlight=False)]

    end = index + len(normalized_query)
    parts = [
        HighlightSpan(text=text[:index], highlight=False),
        HighlightSpan(text=text[index:end], highlight=True),
        HighlightSpan(text=text[end:], highlight=False),
    ]
    return [part for part in parts if part.text]
