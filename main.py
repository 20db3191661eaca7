"""
Asteria Daily Ritual API - Main Application
"""
import logging
from contextlib import asynccontextmanager
import sys

from fastapi import FastAPI

import config
from api.v1 import health, daily
from api.middleware import log_request_middleware
from core.exceptions import DailyRitualError, daily_ritual_exception_handler
from modules.daily_ritual import DailyRitualService

# Настройка логирования
logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.FileHandler(f"{config.LOG_DIR}/app.log"),
        logging.StreamHandler(sys.stdout)
    ]
)
logger = logging.getLogger(__name__)

# ================= APPLICATION =================

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"Старт {config.APP_NAME} v{config.APP_VERSION}...")

    # Настройки Craft читаются при каждом запросе, здесь только предупреждаем
    try:
        config.load_craft_settings()
    except DailyRitualError as e:
        logger.warning(f"{e.message}. Запросы к /api/daily будут завершаться ошибкой 500.")

    app.state.daily_ritual_service = DailyRitualService()

    yield

    # Shutdown
    logger.info(f"Выключение {config.APP_NAME}...")

# Создание FastAPI приложения
app = FastAPI(
    title=config.APP_NAME,
    description=config.APP_DESCRIPTION,
    version=config.APP_VERSION,
    docs_url="/docs" if config.DEBUG else None,
    redoc_url="/redoc" if config.DEBUG else None,
    lifespan=lifespan
)

# Middleware для логирования запросов
app.middleware("http")(log_request_middleware)

# Ошибки настройки и Craft отдаются простым текстом
app.add_exception_handler(DailyRitualError, daily_ritual_exception_handler)

# ================= ROUTES =================

app.include_router(health.router, tags=["health"])
app.include_router(daily.router, tags=["daily"])

# ================= ENTRY POINT =================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=config.HOST,
        port=config.PORT,
        reload=config.DEBUG,
        log_level=config.LOG_LEVEL.lower()
    )
