"""
Конфигурация приложения
"""
import os
from dataclasses import dataclass
from typing import List, Optional
from pathlib import Path

from core.exceptions import ConfigurationError

# Базовые настройки приложения
APP_NAME = "Asteria Daily Ritual API"
APP_VERSION = "1.0.0"
APP_DESCRIPTION = "Сервис, который собирает ежедневный ритуал и отправляет его в Craft"

# Настройки сервера
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8081"))
DEBUG = os.getenv("DEBUG", "true").lower() == "true"
WORKERS = int(os.getenv("WORKERS", "1"))

# Настройки логирования
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))

# Создаем директорию для логов, если она не существует
LOG_DIR.mkdir(exist_ok=True)

# Часовой пояс для подписи даты в документе
DAILY_TIMEZONE = os.getenv("DAILY_TIMEZONE", "America/Chicago")

# Настройки погоды (Хантсвилл, Алабама)
WEATHER_API_URL = "https://api.open-meteo.com/v1/forecast"
WEATHER_LOCATION_NAME = "Huntsville"
WEATHER_LATITUDE = 34.7304
WEATHER_LONGITUDE = -86.5861

# Страница Craft, в конец которой добавляются блоки
CRAFT_TARGET_PAGE_ID = "8D3E5F1A-7C42-4B9E-A1D6-2F0C9B7E4A13"

# Имена переменных окружения
CRAFT_API_BASE_URL_ENV = "CRAFT_API_BASE_URL"
CRAFT_API_TOKEN_ENV = "CRAFT_API_TOKEN"
DAILY_TASKS_URL_ENV = "DAILY_TASKS_URL"


@dataclass(frozen=True)
class CraftSettings:
    """Настройки доступа к Craft API"""
    base_url: str
    token: str


def load_craft_settings() -> CraftSettings:
    """
    Чтение настроек Craft из окружения в момент вызова

    :raises ConfigurationError: если не заданы обязательные переменные
    """
    base_url = os.getenv(CRAFT_API_BASE_URL_ENV, "").strip()
    token = os.getenv(CRAFT_API_TOKEN_ENV, "").strip()

    missing: List[str] = []
    if not base_url:
        missing.append(CRAFT_API_BASE_URL_ENV)
    if not token:
        missing.append(CRAFT_API_TOKEN_ENV)
    if missing:
        raise ConfigurationError(missing)

    return CraftSettings(base_url=base_url, token=token)


def get_daily_tasks_url() -> Optional[str]:
    """Ссылка на внешний список задач, если она настроена"""
    return os.getenv(DAILY_TASKS_URL_ENV, "").strip() or None

