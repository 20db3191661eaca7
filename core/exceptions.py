"""
Кастомные исключения для API
"""
import logging
from typing import Iterable

from fastapi import Request
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)


class DailyRitualError(Exception):
    """Базовое исключение для ошибок ежедневного ритуала"""
    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ConfigurationError(DailyRitualError):
    """Не заданы обязательные переменные окружения"""

    def __init__(self, missing: Iterable[str]):
        self.missing = list(missing)
        super().__init__(
            f"Missing required environment variables: {', '.join(self.missing)}"
        )


class UpstreamError(DailyRitualError):
    """Craft API ответил статусом вне диапазона 2xx"""
    status_code = 502

    def __init__(self, status: int, body: str):
        self.status = status
        self.body = body
        super().__init__(f"Craft API responded with status {status}: {body}")


class TransportError(DailyRitualError):
    """Запрос к Craft API не удалось выполнить"""

    def __init__(self, message: str):
        super().__init__(f"Failed to reach Craft API: {message}")


async def daily_ritual_exception_handler(request: Request, exc: DailyRitualError) -> PlainTextResponse:
    """Обработчик исключений ритуала: текстовый ответ с кодом из исключения"""
    request.state.ritual_error = exc
    logger.error(
        f"{request.method} {request.url.path} завершился ошибкой "
        f"{type(exc).__name__} ({exc.status_code}): {exc.message}"
    )
    return PlainTextResponse(exc.message, status_code=exc.status_code)
