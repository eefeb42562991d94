"""초성 추출 및 검색어 정규화 테스트."""

from __future__ import annotations

import pytest

from app.search.hangul_util import extract_chosung, normalize_query


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("서울 특별시", "서울특별시"),
        ("  Seoul\tCity\n", "seoulcity"),
        ("", ""),
        ("   ", ""),
        ("강남구", "강남구"),
    ],
)
def test_normalize_query(text, expected):
    assert normalize_query(text) == expected


def test_extract_chosung_syllables():
    assert extract_chosung("강남구") == "ㄱㄴㄱ"
    assert extract_chosung("서울특별시") == "ㅅㅇㅌㅂㅅ"


def test_extract_chosung_double_consonants():
    """쌍자음 초성도 19자 표에서 그대로 선택."""
    assert extract_chosung("까치산") == "ㄲㅊㅅ"
    assert extract_chosung("쌍문동") == "ㅆㅁㄷ"


def test_extract_chosung_passes_through_non_hangul():
    """한글 음절이 아닌 문자(영문, 숫자, 공백, 자모)는 그대로 유지."""
    assert extract_chosung("서울 2동") == "ㅅㅇ 2ㄷ"
    assert extract_chosung("LG화학!") == "LGㅎㅎ!"
    assert extract_chosung("ㄱㄴ") == "ㄱㄴ"


def test_extract_chosung_block_boundaries():
    """'가'(0xAC00)와 '힣'(0xD7A3)은 포함, 그 바깥은 통과."""
    assert extract_chosung("가") == "ㄱ"
    assert extract_chosung("힣") == "ㅎ"
    assert extract_chosung(chr(0xABFF)) == chr(0xABFF)
    assert extract_chosung(chr(0xD7A4)) == chr(0xD7A4)
