"""
Сервис ежедневного ритуала
"""
import logging
from datetime import datetime, timezone
from typing import Callable, Optional

import config
from core.utils import build_preview, format_date_label
from modules.cards import CardSelector
from modules.moon_phase import get_moon_info
from modules.weather import WeatherClient
from .markdown import build_markdown_sections
from .models import DailyRitualResponse
from .publisher import CraftPublisher

logger = logging.getLogger(__name__)

PublisherFactory = Callable[[config.CraftSettings], CraftPublisher]


def default_publisher_factory(settings: config.CraftSettings) -> CraftPublisher:
    return CraftPublisher(base_url=settings.base_url, token=settings.token)


class DailyRitualService:
    """Сборка документа дня и его отправка в Craft"""

    def __init__(
        self,
        weather_client: Optional[WeatherClient] = None,
        card_selector: Optional[CardSelector] = None,
        publisher_factory: PublisherFactory = default_publisher_factory,
        timezone_name: str = config.DAILY_TIMEZONE,
    ):
        self.weather_client = weather_client or WeatherClient()
        self.card_selector = card_selector or CardSelector()
        self.publisher_factory = publisher_factory
        self.timezone_name = timezone_name

    async def run(self, now: Optional[datetime] = None) -> DailyRitualResponse:
        """
        Полный цикл: настройки, луна, погода, карты, markdown, публикация

        :raises ConfigurationError: до любых сетевых запросов
        :raises UpstreamError: Craft ответил статусом вне 2xx
        :raises TransportError: Craft недоступен
        """
        settings = config.load_craft_settings()
        now = now or datetime.now(timezone.utc)

        date_label = format_date_label(now, self.timezone_name)
        moon = get_moon_info(now)
        weather = await self.weather_client.get_weather_summary()
        tarot, lenormand = self.card_selector.pick()

        sections = build_markdown_sections(
            date_label=date_label,
            moon=moon,
            tarot=tarot,
            lenormand=lenormand,
            weather=weather,
            tasks_url=config.get_daily_tasks_url(),
        )

        publisher = self.publisher_factory(settings)
        craft_response = await publisher.publish(sections)
        logger.info(f"Ритуал на {date_label} опубликован ({moon.phase_name})")

        return DailyRitualResponse(
            created_at=now.isoformat(),
            date_label=date_label,
            moon=moon,
            weather=weather,
            tarot=tarot,
            lenormand=lenormand,
            preview=build_preview(sections.as_list()),
            craft_response=craft_response,
        )
