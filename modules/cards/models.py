"""
Модели данных для карт
"""
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class Card(BaseModel):
    """Карта Таро или Ленорман"""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Название карты")
    paragraph: str = Field(..., description="Толкование карты на день")
    keywords: Tuple[str, ...] = Field(..., description="Ключевые слова в порядке каталога")
