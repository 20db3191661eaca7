"""
Случайный выбор карт на день
"""
import logging
import random
from typing import Optional, Sequence, Tuple

from .data import TAROT_CARDS, LENORMAND_CARDS
from .models import Card

logger = logging.getLogger(__name__)


class CardSelector:
    """Равновероятный выбор одной карты из каждого каталога"""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        tarot_cards: Sequence[Card] = TAROT_CARDS,
        lenormand_cards: Sequence[Card] = LENORMAND_CARDS,
    ):
        """
        :param rng: источник случайности; в тестах передается Random с seed
        :param tarot_cards: каталог Таро
        :param lenormand_cards: каталог Ленорман
        """
        if not tarot_cards or not lenormand_cards:
            raise ValueError("Каталоги карт не могут быть пустыми")
        self.rng = rng or random.Random()
        self.tarot_cards = tuple(tarot_cards)
        self.lenormand_cards = tuple(lenormand_cards)

    def _pick(self, cards: Tuple[Card, ...]) -> Card:
        return cards[self.rng.randrange(len(cards))]

    def pick_tarot(self) -> Card:
        return self._pick(self.tarot_cards)

    def pick_lenormand(self) -> Card:
        return self._pick(self.lenormand_cards)

    def pick(self) -> Tuple[Card, Card]:
        """Пара (Таро, Ленорман), выбранная независимо"""
        tarot = self.pick_tarot()
        lenormand = self.pick_lenormand()
        logger.info(f"Карты дня: {tarot.name} / {lenormand.name}")
        return tarot, lenormand
