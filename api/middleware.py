"""
Middleware для API
"""
import logging
import time
import uuid

from fastapi import Request

logger = logging.getLogger(__name__)


def describe_failure(request: Request) -> str:
    """Краткое описание ошибки ритуала, которую обработчик сохранил в state"""
    error = getattr(request.state, "ritual_error", None)
    if error is None:
        return ""
    details = type(error).__name__
    upstream_status = getattr(error, "status", None)
    if upstream_status is not None:
        details += f", Craft: {upstream_status}"
    return f" - Ошибка: {details}"


async def log_request_middleware(request: Request, call_next):
    """Логирование запросов: id, статус, время и причина ошибки"""
    start_time = time.time()
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex[:12]
    request.state.request_id = request_id

    # Получаем IP клиента (обычно это планировщик)
    client_host = request.client.host if request.client else "unknown"

    response = await call_next(request)
    process_time = time.time() - start_time

    level = logging.INFO if response.status_code < 400 else logging.WARNING
    logger.log(
        level,
        f"[{request_id}] {request.method} {request.url.path} от {client_host} "
        f"- Статус: {response.status_code} - Время: {process_time:.4f}s"
        f"{describe_failure(request)}"
    )

    response.headers["X-Process-Time"] = str(process_time)
    response.headers["X-Request-ID"] = request_id
    return response
