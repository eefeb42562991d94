from __future__ import annotations

from pydantic import BaseModel, Field


class CoordinatesResponse(BaseModel):
    lat: float = Field(..., description="위도")
    lon: float = Field(..., description="경도")

    model_config = {"from_attributes": True}


class CurrentWeatherResponse(BaseModel):
    temp: int = Field(..., description="현재 기온 (°C)")
    feels_like: int = Field(..., description="체감 기온 (°C)")
    temp_min: int = Field(..., description="최저 기온 (°C)")
    temp_max: int = Field(..., description="최고 기온 (°C)")
    humidity: int = Field(..., description="습도 (%)")
    description: str = Field("", description="날씨 설명")
    icon: str = Field("", description="아이콘 코드")
    icon_url: str | None = Field(None, description="아이콘 이미지 URL")
    sunrise: int = Field(0, description="일출 (unix)")
    sunset: int = Field(0, description="일몰 (unix)")

    model_config = {"from_attributes": True}


class HourlyWeatherResponse(BaseModel):
    time: int = Field(..., description="예보 시각 (unix)")
    time_text: str = Field(..., description="예보 시각 (HH:MM, KST)")
    temp: int = Field(..., description="기온 (°C)")
    description: str = Field("", description="날씨 설명")
    icon: str = Field("", description="아이콘 코드")
    pop: int | None = Field(None, description="강수 확률 (%)")
    is_tomorrow: bool = Field(False, description="다음 날 자정 여부 (날짜 구분선 표시용)")

    model_config = {"from_attributes": True}


class WeatherResponse(BaseModel):
    location: str = Field(..., description="위치 이름")
    coordinates: CoordinatesResponse
    current: CurrentWeatherResponse
    hourly: list[HourlyWeatherResponse] = Field(default_factory=list)
    timestamp: int = Field(..., description="관측 시각 (unix)")

    model_config = {"from_attributes": True}


class ReverseGeocodeResponse(BaseModel):
    lat: float
    lon: float
    address: str = Field(..., description="지명 (실패 시 안내 문구)")
