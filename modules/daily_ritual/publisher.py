"""
Публикация блоков в Craft API
"""
import asyncio
import json
import logging
from typing import Any, List

import aiohttp

import config
from core.exceptions import TransportError, UpstreamError
from .models import BlockTarget, ContentBlock, MarkdownSections, PublishRequest

logger = logging.getLogger(__name__)

TASKS_CARD_COLOR = "#FFFFFF"


def build_blocks(sections: MarkdownSections) -> List[ContentBlock]:
    """Пять блоков в порядке документа; блок задач оформлен карточкой-выноской"""
    base_style = {"font": "system", "text_alignment": "left"}
    return [
        ContentBlock(markdown=sections.intro, **base_style),
        ContentBlock(
            markdown=sections.tasks,
            layout="card",
            list_style="task",
            decorations=["callout"],
            color=TASKS_CARD_COLOR,
            **base_style,
        ),
        ContentBlock(markdown=sections.movement, **base_style),
        ContentBlock(markdown=sections.journal, **base_style),
        ContentBlock(markdown=sections.link, **base_style),
    ]


def build_publish_request(
    sections: MarkdownSections,
    page_id: str = config.CRAFT_TARGET_PAGE_ID,
) -> PublishRequest:
    return PublishRequest(
        blocks=build_blocks(sections),
        position=BlockTarget(page_id=page_id),
    )


class CraftPublisher:
    """
    Асинхронный клиент Craft API

    Ошибки разделены на два вида: UpstreamError, если API ответил статусом
    вне 2xx, и TransportError, если запрос не удалось выполнить вовсе
    """

    def __init__(self, base_url: str, token: str, page_id: str = config.CRAFT_TARGET_PAGE_ID):
        """
        :param base_url: базовый URL Craft API
        :param token: bearer-токен
        :param page_id: идентификатор страницы, куда добавляются блоки
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.page_id = page_id

    @property
    def blocks_url(self) -> str:
        return f"{self.base_url}/blocks"

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/json",
        }

    async def publish(self, sections: MarkdownSections) -> Any:
        """
        Отправка документа в конец целевой страницы

        :return: JSON ответа, либо сырой текст, если он не разбирается
        :raises UpstreamError: статус ответа вне 2xx
        :raises TransportError: сетевая ошибка
        """
        payload = build_publish_request(sections, self.page_id).to_payload()
        logger.info(f"Отправка {len(payload['blocks'])} блоков в {self.blocks_url}")

        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(
                    self.blocks_url,
                    json=payload,
                    headers=self._headers(),
                ) as response:
                    status = response.status
                    body = await response.text()
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as e:
            logger.error(f"Ошибка соединения с Craft API: {e}")
            raise TransportError(str(e) or type(e).__name__)

        if status < 200 or status >= 300:
            logger.error(f"Craft API вернул статус {status}: {body[:200]}")
            raise UpstreamError(status, body)

        try:
            return json.loads(body)
        except ValueError:
            logger.warning("Ответ Craft API не является JSON, возвращаю текст")
            return body
