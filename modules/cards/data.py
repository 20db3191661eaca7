"""
Каталоги карт Таро и Ленорман
"""
from typing import Tuple

from .models import Card

TAROT_CARDS: Tuple[Card, ...] = (
    Card(
        name="The Star",
        paragraph=(
            "The Star arrives after the storm. Today is for quiet renewal: "
            "pour a little care back into yourself and trust that small, "
            "steady hope is enough to move you forward."
        ),
        keywords=("hope", "renewal", "healing", "inspiration"),
    ),
    Card(
        name="The Empress",
        paragraph=(
            "The Empress asks you to tend what is growing. Nourish your body, "
            "make something with your hands, and let comfort be part of the "
            "plan instead of the reward at the end of it."
        ),
        keywords=("abundance", "nurturing", "creativity", "comfort"),
    ),
    Card(
        name="Strength",
        paragraph=(
            "Strength is gentle persistence rather than force. Meet whatever "
            "feels wild today with patience and a soft hand; your calm is "
            "the thing that tames it."
        ),
        keywords=("courage", "patience", "compassion", "resilience"),
    ),
)

LENORMAND_CARDS: Tuple[Card, ...] = (
    Card(
        name="Clover",
        paragraph=(
            "Clover brings a small, brief piece of luck. Say yes to the easy "
            "opening and the pleasant surprise; not everything has to be earned "
            "the hard way."
        ),
        keywords=("luck", "opportunity", "lightness"),
    ),
    Card(
        name="Sun",
        paragraph=(
            "The Sun is warmth, success and energy. Whatever you focus on "
            "today has a good chance of going well, so put your effort where "
            "it counts."
        ),
        keywords=("success", "vitality", "confidence"),
    ),
    Card(
        name="Key",
        paragraph=(
            "The Key points to an answer that is already in reach. Look for "
            "the simple solution you have been overlooking and use it."
        ),
        keywords=("solution", "certainty", "breakthrough"),
    ),
)
