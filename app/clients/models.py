"""OpenWeatherMap 응답 가공 결과 데이터 클래스."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass
class Coordinates:
    lat: float
    lon: float


@dataclass
class CurrentWeather:
    temp: int
    feels_like: int
    temp_min: int
    temp_max: int
    humidity: int
    description: str = ""
    icon: str = ""
    sunrise: int = 0
    sunset: int = 0


@dataclass
class HourlyWeather:
    time: int
    time_text: str
    temp: int
    description: str = ""
    icon: str = ""
    pop: int | None = None


@dataclass
class WeatherData:
    location: str
    coordinates: Coordinates
    current: CurrentWeather
    hourly: list[HourlyWeather] = field(default_factory=list)
    timestamp: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WeatherData:
        return cls(
            location=data["location"],
            coordinates=Coordinates(**data["coordinates"]),
            current=CurrentWeather(**data["current"]),
            hourly=[HourlyWeather(**h) for h in data.get("hourly", [])],
            timestamp=data.get("timestamp", 0),
        )
