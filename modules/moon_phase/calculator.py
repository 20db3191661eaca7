"""
Приближенный расчет фазы луны по синодическому месяцу
"""
from datetime import datetime, timezone
from typing import Optional, Tuple

from core.utils import round_half_up
from .models import MoonInfo

# Опорное новолуние
REFERENCE_NEW_MOON = datetime(2000, 1, 6, 18, 14, tzinfo=timezone.utc)
SYNODIC_MONTH_DAYS = 29.53058867
SECONDS_PER_DAY = 86400.0

NEW_MOON = "New Moon"
WAXING_CRESCENT = "Waxing Crescent"
FIRST_QUARTER = "First Quarter"
WAXING_GIBBOUS = "Waxing Gibbous"
FULL_MOON = "Full Moon"
WANING_GIBBOUS = "Waning Gibbous"
LAST_QUARTER = "Last Quarter"
WANING_CRESCENT = "Waning Crescent"

# Верхние границы (не включительно) для фаз по порядку
PHASE_BOUNDARIES: Tuple[Tuple[float, str], ...] = (
    (0.03, NEW_MOON),
    (0.22, WAXING_CRESCENT),
    (0.28, FIRST_QUARTER),
    (0.47, WAXING_GIBBOUS),
    (0.53, FULL_MOON),
    (0.72, WANING_GIBBOUS),
    (0.78, LAST_QUARTER),
)


def get_moon_phase(when: Optional[datetime] = None) -> float:
    """
    Доля текущего лунного цикла в диапазоне [0, 1)

    :param when: момент времени; naive datetime считается UTC
    """
    if when is None:
        when = datetime.now(timezone.utc)
    elif when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)

    days = (when - REFERENCE_NEW_MOON).total_seconds() / SECONDS_PER_DAY
    lunations = days / SYNODIC_MONTH_DAYS
    phase = lunations % 1.0
    # float-остаток может дать ровно 1.0 для крошечных отрицательных значений
    if phase >= 1.0:
        phase = 0.0
    return phase


def phase_name_for(phase: float) -> str:
    """Название фазы для доли цикла"""
    for upper, name in PHASE_BOUNDARIES:
        if phase < upper:
            return name
    if phase <= 0.97:
        return WANING_CRESCENT
    return NEW_MOON


def get_moon_info(when: Optional[datetime] = None) -> MoonInfo:
    """Фаза, ее название и освещенность для момента времени"""
    phase = get_moon_phase(when)
    return MoonInfo(
        phase=phase,
        phase_name=phase_name_for(phase),
        illumination_percent=round_half_up(phase * 100),
    )
