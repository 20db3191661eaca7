"""
Клиент погоды Open-Meteo
"""
import asyncio
import logging
import math
from typing import Any, Dict, Optional, Tuple

import aiohttp

import config
from core.utils import round_half_up

logger = logging.getLogger(__name__)

WEATHER_FALLBACK = "Weather data is not available right now."
UNSETTLED_CONDITIONS = "unsettled conditions"

# Диапазоны кодов WMO (включительно) и их описания
WEATHER_CODE_RANGES: Tuple[Tuple[int, int, str], ...] = (
    (0, 0, "clear sky"),
    (1, 3, "partly to mostly cloudy"),
    (45, 48, "foggy"),
    (51, 55, "light to dense drizzle"),
    (56, 57, "freezing drizzle"),
    (61, 65, "light to heavy rain"),
    (66, 67, "freezing rain"),
    (71, 77, "light to heavy snow"),
    (80, 82, "rain showers"),
    (85, 86, "snow showers"),
    (95, 99, "thunderstorms"),
)


def describe_weather_code(code: int) -> str:
    """Описание погоды по коду WMO"""
    for low, high, phrase in WEATHER_CODE_RANGES:
        if low <= code <= high:
            return phrase
    return UNSETTLED_CONDITIONS


class WeatherClient:
    """Асинхронный клиент текущей погоды для фиксированной точки"""

    def __init__(
        self,
        api_url: str = config.WEATHER_API_URL,
        latitude: float = config.WEATHER_LATITUDE,
        longitude: float = config.WEATHER_LONGITUDE,
        location_name: str = config.WEATHER_LOCATION_NAME,
    ):
        self.api_url = api_url
        self.latitude = latitude
        self.longitude = longitude
        self.location_name = location_name

    def _build_params(self) -> Dict[str, Any]:
        return {
            "latitude": str(self.latitude),
            "longitude": str(self.longitude),
            "current": "temperature_2m,weather_code",
            "temperature_unit": "fahrenheit",
            "timezone": "auto",
        }

    async def _fetch_current(self) -> Optional[Dict[str, Any]]:
        """Блок current из ответа API или None при любой ошибке"""
        try:
            async with aiohttp.ClientSession() as session:
                async with session.get(self.api_url, params=self._build_params()) as response:
                    if response.status < 200 or response.status >= 300:
                        logger.warning(f"Погода недоступна: HTTP {response.status}")
                        return None
                    data = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError, ValueError) as e:
            logger.warning(f"Ошибка при получении погоды: {e}")
            return None

        current = data.get("current") if isinstance(data, dict) else None
        if not isinstance(current, dict):
            logger.warning("В ответе погоды нет блока current")
            return None
        return current

    async def get_weather_summary(self) -> str:
        """
        Одно предложение о текущей погоде

        Никогда не выбрасывает исключения: при любой проблеме
        возвращается WEATHER_FALLBACK
        """
        current = await self._fetch_current()
        if current is None:
            return WEATHER_FALLBACK

        temperature = current.get("temperature_2m")
        code = current.get("weather_code")
        if temperature is None or code is None:
            logger.warning(f"Неполные данные о погоде: {current}")
            return WEATHER_FALLBACK

        try:
            code = float(code)
            temperature = float(temperature)
            if not (math.isfinite(code) and math.isfinite(temperature)):
                raise ValueError(f"нечисловые значения: {code}, {temperature}")
            phrase = describe_weather_code(int(code))
            temp = round_half_up(temperature)
        except (TypeError, ValueError, OverflowError) as e:
            logger.warning(f"Некорректные данные о погоде: {e}")
            return WEATHER_FALLBACK

        return f"{phrase}, about {temp}°F in {self.location_name}."
