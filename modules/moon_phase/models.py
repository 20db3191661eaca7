"""
Модели данных для фазы луны
"""
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MoonInfo(BaseModel):
    """Фаза луны на момент времени"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    phase: float = Field(..., ge=0, lt=1, description="Доля лунного цикла")
    phase_name: str = Field(..., description="Название фазы")
    illumination_percent: int = Field(..., ge=0, le=100, description="Освещенность в процентах")
