from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from .cards import CARDS_BY_ID
from .models import DEFAULT_RULES, CardCategory, RulesConfig


@dataclass(frozen=True)
class ScoreBreakdown:
    number_sum: int
    number_count: int
    bonus_sum: int
    flip7_bonus: int
    multiplied: bool
    total: int


def number_count(cards: Iterable[str]) -> int:
    # Occurrences, not distinct values: duplicates each count.
    return sum(1 for card_id in cards if _category(card_id) == CardCategory.NUMBER)


def has_flip7(cards: Iterable[str], rules: RulesConfig = DEFAULT_RULES) -> bool:
    return number_count(cards) >= rules.flip7_card_count


def score_breakdown(cards: Sequence[str], rules: RulesConfig = DEFAULT_RULES) -> ScoreBreakdown:
    """Score a hand. Action cards and ids outside the catalog add nothing."""
    number_sum = 0
    numbers = 0
    bonus_sum = 0
    multiplied = False

    for card_id in cards:
        card = CARDS_BY_ID.get(card_id)
        if card is None:
            continue
        if card.category == CardCategory.NUMBER:
            number_sum += card.value
            numbers += 1
        elif card.category == CardCategory.BONUS_ADD:
            bonus_sum += card.value
        elif card.category == CardCategory.BONUS_MULTIPLY:
            multiplied = True

    flip7_bonus = rules.flip7_bonus if numbers >= rules.flip7_card_count else 0
    total = number_sum + bonus_sum + flip7_bonus
    # A single multiply regardless of how many x2 cards are held.
    if multiplied:
        total *= rules.multiplier

    return ScoreBreakdown(
        number_sum=number_sum,
        number_count=numbers,
        bonus_sum=bonus_sum,
        flip7_bonus=flip7_bonus,
        multiplied=multiplied,
        total=total,
    )


def compute_score(cards: Sequence[str], rules: RulesConfig = DEFAULT_RULES) -> int:
    return score_breakdown(cards, rules).total


def _category(card_id: str):
    card = CARDS_BY_ID.get(card_id)
    return card.category if card else None
