from __future__ import annotations

import logging
import pathlib

from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

# 번들된 행정구역 데이터 (앱 시작 시 1회 로드)
_DEFAULT_DISTRICTS_PATH = pathlib.Path(__file__).parent / "data" / "korea_districts.json"

# .env 예시 파일에 들어있는 자리표시자 키
_PLACEHOLDER_API_KEY = "your_api_key_here"


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # OpenWeatherMap
    weather_api_key: str = ""
    weather_api_base_url: str = "https://api.openweathermap.org/data/2.5"
    geo_api_base_url: str = "https://api.openweathermap.org/geo/1.0"
    weather_units: str = "metric"
    weather_lang: str = "kr"
    weather_cache_ttl: int = 300  # seconds
    weather_cache_max_entries: int = 1000

    # District search
    districts_path: pathlib.Path = _DEFAULT_DISTRICTS_PATH
    search_default_limit: int = 20

    # Favorites
    max_favorites: int = 6
    favorite_refresh_minutes: int = 10

    # Database
    database_url: str = "sqlite+aiosqlite:///./weather.db"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    def is_api_key_valid(self) -> bool:
        """API 키가 설정되어 있고 자리표시자가 아닌지 확인."""
        return bool(self.weather_api_key) and self.weather_api_key != _PLACEHOLDER_API_KEY


settings = Settings()
