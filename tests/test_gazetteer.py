"""행정구역 데이터 로드 및 검증 테스트."""

from __future__ import annotations

import json

import pytest

from app.config import settings
from app.schemas.common import DistrictLevel
from app.search.base import SearchOptions
from app.search.engine import search_districts
from app.search.gazetteer import Gazetteer


def _row(**overrides):
    row = {
        "id": "11680",
        "name": "강남구",
        "fullName": "서울특별시 강남구",
        "level": "sigungu",
        "sido": "서울특별시",
        "sigungu": "강남구",
    }
    row.update(overrides)
    return row


def test_bundled_dataset_loads():
    gazetteer = Gazetteer.load(settings.districts_path)
    assert len(gazetteer) > 0
    gangnam = gazetteer.get("11680")
    assert gangnam is not None
    assert gangnam.full_name == "서울특별시 강남구"
    assert gangnam.level == DistrictLevel.SIGUNGU


def test_bundled_dataset_search_scenarios():
    gazetteer = Gazetteer.load(settings.districts_path)
    top = search_districts(gazetteer.districts, SearchOptions(query="강남구"))[0]
    assert top.district.id == "11680"
    assert top.score == 1000


def test_load_from_file(tmp_path):
    path = tmp_path / "districts.json"
    path.write_text(json.dumps([_row()], ensure_ascii=False), encoding="utf-8")
    gazetteer = Gazetteer.load(path)
    assert [d.id for d in gazetteer] == ["11680"]


def test_load_rejects_non_array(tmp_path):
    path = tmp_path / "districts.json"
    path.write_text(json.dumps({"id": "1"}), encoding="utf-8")
    with pytest.raises(ValueError, match="배열"):
        Gazetteer.load(path)


def test_duplicate_id_rejected():
    with pytest.raises(ValueError, match="중복"):
        Gazetteer.from_records([_row(), _row(name="서초구")])


@pytest.mark.parametrize(
    "row",
    [
        _row(fullName=""),
        _row(fullName="   "),
        _row(level="ri"),
        _row(level="sido"),
        _row(level="sigungu", sigungu=None),
        _row(level="eupmyeondong"),
        _row(level="sigungu", eupmyeondong="역삼동"),
    ],
)
def test_invalid_rows_rejected(row):
    with pytest.raises(ValueError, match="0번 행"):
        Gazetteer.from_records([row])


def test_missing_required_field_rejected():
    row = _row()
    del row["fullName"]
    with pytest.raises(ValueError):
        Gazetteer.from_records([row])


def test_valid_levels_accepted():
    gazetteer = Gazetteer.from_records(
        [
            {"id": "11", "name": "서울특별시", "fullName": "서울특별시", "level": "sido", "sido": "서울특별시"},
            _row(),
            _row(
                id="1168010100", name="역삼동", fullName="서울특별시 강남구 역삼동",
                level="eupmyeondong", eupmyeondong="역삼동",
            ),
        ]
    )
    assert [d.level for d in gazetteer] == [
        DistrictLevel.SIDO,
        DistrictLevel.SIGUNGU,
        DistrictLevel.EUPMYEONDONG,
    ]
    assert gazetteer.get("없음") is None


def test_districts_are_immutable(gazetteer):
    district = gazetteer.districts[0]
    with pytest.raises(AttributeError):
        district.name = "변경"
    assert isinstance(gazetteer.districts, tuple)
