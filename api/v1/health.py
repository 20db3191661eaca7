"""
Эндпоинты проверки здоровья сервиса
"""
from datetime import datetime

from fastapi import APIRouter

import config

router = APIRouter()

@router.get("/health")
async def health_check():
    """Проверка здоровья сервиса"""
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat()
    }

@router.get("/")
async def root():
    """Корневой эндпоинт"""
    return {
        "service": config.APP_NAME,
        "version": config.APP_VERSION,
        "status": "active",
        "endpoints": {
            "daily": "/api/daily",
            "health": "/health"
        }
    }
