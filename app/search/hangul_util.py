"""한글 초성 추출 및 검색어 정규화: 순수 유니코드 연산"""

from __future__ import annotations

import re

# 한글 음절 범위: '가'(0xAC00)부터 11,172자
_HANGUL_BASE = 0xAC00
_HANGUL_SYLLABLE_COUNT = 11172

# 초성 19자 (유니코드 순서)
_CHOSUNG_LIST = [
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ",
    "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
]

# 중성 개수 = 21, 종성 개수 = 28
_JUNGSUNG_COUNT = 21
_JONGSUNG_COUNT = 28

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_query(text: str) -> str:
    """공백을 모두 제거하고 소문자로 변환한다.

    >>> normalize_query("  서울 특별시 ")
    '서울특별시'
    >>> normalize_query("Seoul City")
    'seoulcity'
    """
    return _WHITESPACE_RE.sub("", text).lower()


def extract_chosung(text: str) -> str:
    """한글 음절은 초성으로 바꾸고, 그 외 문자는 그대로 둔다.

    >>> extract_chosung("강남구")
    'ㄱㄴㄱ'
    >>> extract_chosung("서울 2동")
    'ㅅㅇ 2ㄷ'
    """
    result: list[str] = []
    for ch in text:
        code = ord(ch) - _HANGUL_BASE
        if 0 <= code < _HANGUL_SYLLABLE_COUNT:
            result.append(_CHOSUNG_LIST[code // (_JUNGSUNG_COUNT * _JONGSUNG_COUNT)])
        else:
            result.append(ch)
    return "".join(result)
