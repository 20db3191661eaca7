"""
Модели данных для ежедневного ритуала
"""
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from modules.cards import Card
from modules.moon_phase import MoonInfo


class CamelModel(BaseModel):
    """Базовая модель с camelCase-именами в JSON"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MarkdownSections(BaseModel):
    """Пять markdown-фрагментов документа в порядке вывода"""
    intro: str
    tasks: str
    movement: str
    journal: str
    link: str

    def as_list(self) -> List[str]:
        return [self.intro, self.tasks, self.movement, self.journal, self.link]


class BlockStyle(CamelModel):
    """Атрибуты оформления блока Craft"""
    font: Optional[Literal["system", "serif", "mono", "rounded"]] = None
    text_alignment: Optional[Literal["left", "center", "right", "justify"]] = None
    layout: Optional[Literal["regular", "card", "page"]] = None
    list_style: Optional[Literal["none", "bullet", "numbered", "task", "toggle"]] = None
    decorations: Optional[List[Literal["callout", "quote", "focus"]]] = None
    color: Optional[str] = Field(None, pattern=r"^#[0-9A-Fa-f]{6}$")


class ContentBlock(BlockStyle):
    """Текстовый блок с markdown-содержимым"""
    type: Literal["text"] = "text"
    markdown: str


class BlockTarget(CamelModel):
    """Куда вставлять блоки"""
    position: Literal["end"] = "end"
    page_id: str


class PublishRequest(CamelModel):
    """Тело запроса POST /blocks"""
    blocks: List[ContentBlock]
    position: BlockTarget

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class DailyRitualResponse(CamelModel):
    """Сводка, которую эндпоинт возвращает вызывающей стороне"""
    status: Literal["ok"] = "ok"
    created_at: str = Field(..., description="Время создания в ISO-8601")
    date_label: str
    moon: MoonInfo
    weather: str
    tarot: Card
    lenormand: Card
    preview: str
    craft_response: Any = None
