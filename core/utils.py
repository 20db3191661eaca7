"""
Вспомогательные функции
"""
import datetime
import math
from typing import Optional, Sequence
from zoneinfo import ZoneInfo

WEEKDAYS_EN = [
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"
]

MONTHS_EN = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December"
]

PREVIEW_SEPARATOR = "\n\n---\n\n"
PREVIEW_LIMIT = 300


def format_date_label(dt_obj: datetime.datetime, tz_name: Optional[str] = None) -> str:
    """Форматирование даты в длинном английском формате: Monday, October 19, 2026"""
    if tz_name:
        if dt_obj.tzinfo is None:
            dt_obj = dt_obj.replace(tzinfo=datetime.timezone.utc)
        dt_obj = dt_obj.astimezone(ZoneInfo(tz_name))
    return (
        f"{WEEKDAYS_EN[dt_obj.weekday()]}, {MONTHS_EN[dt_obj.month - 1]} "
        f"{dt_obj.day}, {dt_obj.year}"
    )


def round_half_up(value: float) -> int:
    """Округление как Math.round: половина всегда вверх"""
    return math.floor(value + 0.5)


def build_preview(sections: Sequence[str]) -> str:
    """Склейка фрагментов и обрезка до PREVIEW_LIMIT символов с многоточием"""
    joined = PREVIEW_SEPARATOR.join(sections)
    return joined[:PREVIEW_LIMIT] + "..."
