from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .models import CardCategory

NUMBER_NAMES = (
    "Zero", "One", "Two", "Three", "Four", "Five", "Six",
    "Seven", "Eight", "Nine", "Ten", "Eleven", "Twelve",
)
BONUS_ADD_VALUES = (2, 4, 6, 8, 10)


@dataclass(frozen=True)
class CardDefinition:
    id: str
    name: str
    value: int
    category: CardCategory
    count: int
    description: Optional[str] = None

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError(f"Invalid deck count for {self.id}: {self.count}")

    @property
    def label(self) -> str:
        return card_label(self.id)


def _build_catalog() -> Tuple[CardDefinition, ...]:
    # A physical deck holds one 0, one 1 and n copies of every other number n.
    cards: List[CardDefinition] = [
        CardDefinition(str(value), name, value, CardCategory.NUMBER, count=max(value, 1))
        for value, name in enumerate(NUMBER_NAMES)
    ]
    cards.extend(
        [
            CardDefinition("freeze", "Freeze", 0, CardCategory.ACTION, 3, "Freezes an active player"),
            CardDefinition("flip_three", "Flip Three", 0, CardCategory.ACTION, 3, "Active player flips three cards"),
            CardDefinition("second_chance", "Second Chance", 0, CardCategory.ACTION, 3, "Keep this card for a second chance"),
            CardDefinition("x2", "x2", 0, CardCategory.BONUS_MULTIPLY, 1, "Doubles the sum of your number cards"),
        ]
    )
    cards.extend(
        CardDefinition(f"plus_{value}", f"+{value}", value, CardCategory.BONUS_ADD, 1, f"Adds {value} to the sum of your number cards")
        for value in BONUS_ADD_VALUES
    )
    return tuple(cards)


CARDS: Tuple[CardDefinition, ...] = _build_catalog()
CARDS_BY_ID: Dict[str, CardDefinition] = {card.id: card for card in CARDS}

# Order used by card pickers.
ALL_CARDS: Tuple[str, ...] = (
    tuple(str(value) for value in range(len(NUMBER_NAMES)))
    + tuple(f"plus_{value}" for value in BONUS_ADD_VALUES)
    + ("x2", "freeze", "flip_three", "second_chance")
)


def get_card(card_id: str) -> Optional[CardDefinition]:
    return CARDS_BY_ID.get(card_id)


def is_number_card(card_id: str) -> bool:
    card = CARDS_BY_ID.get(card_id)
    return card is not None and card.category == CardCategory.NUMBER


def card_label(card_id: str) -> str:
    if card_id == "x2":
        return "x2"
    if card_id == "freeze":
        return "Freeze"
    if card_id == "flip_three":
        return "Flip 3"
    if card_id == "second_chance":
        return "2nd Chance"
    if card_id.startswith("plus_"):
        return f"+{card_id[5:]}"
    return card_id


def deck_size() -> int:
    return sum(card.count for card in CARDS)
