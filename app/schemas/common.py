from __future__ import annotations

from enum import Enum


class DistrictLevel(str, Enum):
    SIDO = "sido"
    SIGUNGU = "sigungu"
    EUPMYEONDONG = "eupmyeondong"
