from __future__ import annotations

import uuid
from dataclasses import replace
from typing import Callable, Dict, List, Optional

from .cards import CARDS_BY_ID, is_number_card
from .models import (
    DEFAULT_RULES,
    Action,
    ActionType,
    Game,
    GameCollection,
    GameStatus,
    Player,
    RulesConfig,
)
from .scoring import compute_score, has_flip7

# Every transition takes a collection and returns a new one. Nothing here
# mutates its input or does I/O; the store and the host own that.
# Unknown game, player or card ids hand the input collection back unchanged.


def new_id() -> str:
    return uuid.uuid4().hex


# Lookups ---------------------------------------------------------

def find_game(collection: GameCollection, game_id: str) -> Optional[Game]:
    for game in collection.games:
        if game.id == game_id:
            return game
    return None


def find_player(game: Game, player_id: str) -> Optional[Player]:
    for player in game.players:
        if player.id == player_id:
            return player
    return None


def _update_game(
    collection: GameCollection,
    game_id: str,
    fn: Callable[[Game], Game],
) -> GameCollection:
    changed = False
    games: List[Game] = []
    for game in collection.games:
        if game.id == game_id:
            updated = fn(game)
            changed = changed or updated is not game
            games.append(updated)
        else:
            games.append(game)
    if not changed:
        return collection
    return replace(collection, games=tuple(games))


def _update_player(
    game: Game,
    player_id: str,
    fn: Callable[[Player], Player],
) -> Game:
    changed = False
    players: List[Player] = []
    for player in game.players:
        if player.id == player_id:
            updated = fn(player)
            changed = changed or updated is not player
            players.append(updated)
        else:
            players.append(player)
    if not changed:
        return game
    return replace(game, players=tuple(players))


# Game and roster management --------------------------------------

def create_game(collection: GameCollection, game_id: str) -> GameCollection:
    game = Game(id=game_id, status=GameStatus.SETUP, players=(), round=1, winner=None)
    return replace(collection, games=collection.games + (game,))


def add_player(collection: GameCollection, game_id: str, player_id: str, name: str) -> GameCollection:
    player = Player(id=player_id, name=name)
    return _update_game(collection, game_id, lambda g: replace(g, players=g.players + (player,)))


def remove_player(collection: GameCollection, game_id: str, player_id: str) -> GameCollection:
    def drop(game: Game) -> Game:
        if find_player(game, player_id) is None:
            return game
        return replace(game, players=tuple(p for p in game.players if p.id != player_id))

    return _update_game(collection, game_id, drop)


def start_game(collection: GameCollection, game_id: str) -> GameCollection:
    # No player-count check here; callers gate on can_start_game().
    def start(game: Game) -> Game:
        if game.status == GameStatus.PLAYING:
            return game
        return replace(game, status=GameStatus.PLAYING)

    return _update_game(collection, game_id, start)


# Card tallies ----------------------------------------------------

def add_card(
    collection: GameCollection,
    game_id: str,
    player_id: str,
    card_id: str,
    rules: RulesConfig = DEFAULT_RULES,
) -> GameCollection:
    if card_id not in CARDS_BY_ID:
        return collection

    def append(player: Player) -> Player:
        cards = player.cards + (card_id,)
        return replace(player, cards=cards, round_score=compute_score(cards, rules))

    return _update_game(collection, game_id, lambda g: _update_player(g, player_id, append))


def remove_card(
    collection: GameCollection,
    game_id: str,
    player_id: str,
    card_id: str,
    rules: RulesConfig = DEFAULT_RULES,
) -> GameCollection:
    def remove_first(player: Player) -> Player:
        if card_id not in player.cards:
            return player
        idx = player.cards.index(card_id)
        cards = player.cards[:idx] + player.cards[idx + 1 :]
        return replace(player, cards=cards, round_score=compute_score(cards, rules))

    return _update_game(collection, game_id, lambda g: _update_player(g, player_id, remove_first))


# Round resolution ------------------------------------------------

def new_round(
    collection: GameCollection,
    game_id: str,
    rules: RulesConfig = DEFAULT_RULES,
) -> GameCollection:
    def resolve(game: Game) -> Game:
        players = tuple(
            replace(p, total_score=p.total_score + p.round_score, cards=(), round_score=0)
            for p in game.players
        )
        winner: Optional[str] = None
        if players:
            max_total = max(p.total_score for p in players)
            if max_total >= rules.win_threshold:
                winner = next(p.id for p in players if p.total_score == max_total)
        return replace(game, players=players, round=game.round + 1, winner=winner)

    return _update_game(collection, game_id, resolve)


def apply_action(
    collection: GameCollection,
    action: Action,
    rules: RulesConfig = DEFAULT_RULES,
) -> GameCollection:
    """Reduce one action onto the collection and return the next collection."""
    kind = action.type
    if kind == ActionType.CREATE_GAME:
        return create_game(collection, action.game_id)
    if kind == ActionType.ADD_PLAYER:
        assert action.player_id is not None and action.name is not None
        return add_player(collection, action.game_id, action.player_id, action.name)
    if kind == ActionType.REMOVE_PLAYER:
        assert action.player_id is not None
        return remove_player(collection, action.game_id, action.player_id)
    if kind == ActionType.START_GAME:
        return start_game(collection, action.game_id)
    if kind == ActionType.ADD_CARD:
        assert action.player_id is not None and action.card_id is not None
        return add_card(collection, action.game_id, action.player_id, action.card_id, rules)
    if kind == ActionType.REMOVE_CARD:
        assert action.player_id is not None and action.card_id is not None
        return remove_card(collection, action.game_id, action.player_id, action.card_id, rules)
    if kind == ActionType.NEW_ROUND:
        return new_round(collection, action.game_id, rules)
    raise ValueError(f"Unsupported action {kind}")


# Presentation helpers --------------------------------------------

def can_start_game(game: Game, rules: RulesConfig = DEFAULT_RULES) -> bool:
    return len(game.players) >= rules.min_players


def card_count(player: Player, card_id: str) -> int:
    return player.cards.count(card_id)


def is_card_selectable(player: Player, card_id: str) -> bool:
    # Number cards can only be held once per hand; everything else stacks.
    if card_id not in CARDS_BY_ID:
        return False
    return not (is_number_card(card_id) and card_count(player, card_id) > 0)


def standings(game: Game) -> List[Player]:
    return sorted(game.players, key=lambda p: p.total_score, reverse=True)


# Snapshot payloads -----------------------------------------------

def player_payload(player: Player, rules: RulesConfig = DEFAULT_RULES) -> Dict[str, object]:
    return {
        "id": player.id,
        "name": player.name,
        "cards": list(player.cards),
        "round_score": player.round_score,
        "total_score": player.total_score,
        "has_flip7": has_flip7(player.cards, rules),
    }


def game_payload(game: Game, rules: RulesConfig = DEFAULT_RULES) -> Dict[str, object]:
    return {
        "id": game.id,
        "status": game.status.value,
        "round": game.round,
        "winner": game.winner,
        "players": [player_payload(player, rules) for player in game.players],
    }


def collection_payload(collection: GameCollection, rules: RulesConfig = DEFAULT_RULES) -> Dict[str, object]:
    return {"games": [game_payload(game, rules) for game in collection.games]}
