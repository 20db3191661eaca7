"""
Эндпоинт ежедневного ритуала
"""
import logging

from fastapi import APIRouter, Depends, Request

from modules.daily_ritual import DailyRitualResponse, DailyRitualService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def get_daily_ritual_service(request: Request) -> DailyRitualService:
    """Получение сервиса из state приложения"""
    return request.app.state.daily_ritual_service


@router.get("/daily", response_model=DailyRitualResponse)
async def create_daily_ritual(service: DailyRitualService = Depends(get_daily_ritual_service)):
    """
    Сборка документа на сегодня и отправка его в Craft

    Ошибки настройки и Craft превращаются в текстовые ответы 500/502
    обработчиком daily_ritual_exception_handler
    """
    logger.info("Запуск сборки ежедневного ритуала")
    return await service.run()
