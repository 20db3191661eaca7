"""
Модуль погоды
"""
from .client import WeatherClient, describe_weather_code, WEATHER_FALLBACK

__all__ = [
    'WeatherClient',
    'describe_weather_code',
    'WEATHER_FALLBACK'
]
