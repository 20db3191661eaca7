"""
Модуль расчета фазы луны
"""
from .models import MoonInfo
from .calculator import get_moon_info, get_moon_phase, phase_name_for

__all__ = [
    'MoonInfo',
    'get_moon_info',
    'get_moon_phase',
    'phase_name_for'
]
