"""
Модуль для работы с картами Таро и Ленорман
"""
from .models import Card
from .data import TAROT_CARDS, LENORMAND_CARDS
from .selector import CardSelector

__all__ = [
    'Card',
    'TAROT_CARDS',
    'LENORMAND_CARDS',
    'CardSelector'
]
