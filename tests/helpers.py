from __future__ import annotations

from typing import Iterable, Sequence, Tuple

from flip7.game import add_card, add_player, create_game, find_game, new_round, start_game
from flip7.models import Game, GameCollection


def create_collection(
    *,
    game_id: str = "G1",
    players: Sequence[str] = ("Alice", "Bob", "Carol"),
    started: bool = True,
) -> GameCollection:
    """Build a collection holding one game with players p0, p1, ..."""
    collection = create_game(GameCollection(), game_id)
    for idx, name in enumerate(players):
        collection = add_player(collection, game_id, f"p{idx}", name)
    if started:
        collection = start_game(collection, game_id)
    return collection


def deal_cards(
    collection: GameCollection,
    game_id: str,
    hands: Iterable[Tuple[str, Sequence[str]]],
) -> GameCollection:
    """Add each (player_id, cards) hand in order."""
    for player_id, cards in hands:
        for card_id in cards:
            collection = add_card(collection, game_id, player_id, card_id)
    return collection


def play_round(
    collection: GameCollection,
    game_id: str,
    hands: Iterable[Tuple[str, Sequence[str]]],
) -> GameCollection:
    collection = deal_cards(collection, game_id, hands)
    return new_round(collection, game_id)


def game_of(collection: GameCollection, game_id: str = "G1") -> Game:
    game = find_game(collection, game_id)
    assert game is not None
    return game
