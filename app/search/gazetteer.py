"""행정구역 데이터 저장소: 앱 시작 시 1회 로드, 이후 읽기 전용."""

from __future__ import annotations

import json
import logging
import pathlib
from collections.abc import Iterable, Iterator

from pydantic import ValidationError

from app.schemas.district import DistrictRecord
from app.search.base import District

logger = logging.getLogger(__name__)


def _to_district(record: DistrictRecord) -> District:
    return District(
        id=record.id,
        name=record.name,
        full_name=record.full_name,
        level=record.level,
        sido=record.sido,
        sigungu=record.sigungu,
        eupmyeondong=record.eupmyeondong,
    )


class Gazetteer:
    """불변 행정구역 컬렉션. 원본 순서를 유지한다."""

    def __init__(self, districts: Iterable[District]):
        self._districts: tuple[District, ...] = tuple(districts)
        self._by_id: dict[str, District] = {}
        for district in self._districts:
            if district.id in self._by_id:
                raise ValueError(f"중복된 행정구역 ID: {district.id}")
            self._by_id[district.id] = district

    @classmethod
    def from_records(cls, rows: Iterable[dict]) -> Gazetteer:
        """원시 dict 목록을 검증하여 Gazetteer를 만든다."""
        districts: list[District] = []
        for idx, row in enumerate(rows):
            try:
                record = DistrictRecord.model_validate(row)
            except ValidationError as e:
                raise ValueError(f"행정구역 데이터 {idx}번 행 검증 실패: {e}") from e
            districts.append(_to_district(record))
        return cls(districts)

    @classmethod
    def load(cls, path: pathlib.Path | str) -> Gazetteer:
        """JSON 배열 파일에서 행정구역 데이터를 로드한다.

        기본 경로의 번들 파일(app/data/korea_districts.json)은 시/도, 시/군/구,
        읍/면/동 일부만 담은 샘플이다. 전국 데이터(수만 건)는 DISTRICTS_PATH로 지정한다.
        """
        path = pathlib.Path(path)
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, list):
            raise ValueError(f"행정구역 데이터는 배열이어야 합니다: {path}")
        gazetteer = cls.from_records(data)
        logger.info("행정구역 데이터 로드 완료: %d건 (%s)", len(gazetteer), path.name)
        return gazetteer

    @property
    def districts(self) -> tuple[District, ...]:
        return self._districts

    def get(self, district_id: str) -> District | None:
        return self._by_id.get(district_id)

    def __len__(self) -> int:
        return len(self._districts)

    def __iter__(self) -> Iterator[District]:
        return iter(self._districts)
