"""Flip 7 score tracking: card catalog, scoring and the game reducer."""

from .cards import ALL_CARDS, CARDS, CardDefinition, card_label, deck_size, get_card
from .game import (
    apply_action,
    can_start_game,
    collection_payload,
    find_game,
    find_player,
    is_card_selectable,
    new_id,
    standings,
)
from .models import Action, ActionType, CardCategory, Game, GameCollection, GameStatus, Player, RulesConfig
from .scoring import compute_score, has_flip7
from .store import GameStore, game_session, use_game

__all__ = [
    "ALL_CARDS",
    "CARDS",
    "CardDefinition",
    "card_label",
    "deck_size",
    "get_card",
    "apply_action",
    "can_start_game",
    "collection_payload",
    "find_game",
    "find_player",
    "is_card_selectable",
    "new_id",
    "standings",
    "Action",
    "ActionType",
    "CardCategory",
    "Game",
    "GameCollection",
    "GameStatus",
    "Player",
    "RulesConfig",
    "compute_score",
    "has_flip7",
    "GameStore",
    "game_session",
    "use_game",
]
