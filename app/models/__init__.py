from app.models.favorite import Favorite
from app.models.weather_cache import WeatherCache
from app.models.base import Base

__all__ = [
    "Base",
    "Favorite",
    "WeatherCache",
]
