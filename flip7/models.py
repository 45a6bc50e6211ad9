from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class CardCategory(str, Enum):
    NUMBER = "number"
    BONUS_ADD = "bonus-add"
    BONUS_MULTIPLY = "bonus-multiply"
    ACTION = "action"


class GameStatus(str, Enum):
    SETUP = "setup"
    PLAYING = "playing"


class ActionType(str, Enum):
    CREATE_GAME = "CREATE_GAME"
    ADD_PLAYER = "ADD_PLAYER"
    REMOVE_PLAYER = "REMOVE_PLAYER"
    START_GAME = "START_GAME"
    ADD_CARD = "ADD_CARD"
    REMOVE_CARD = "REMOVE_CARD"
    NEW_ROUND = "NEW_ROUND"


@dataclass(frozen=True)
class RulesConfig:
    win_threshold: int = 200
    flip7_bonus: int = 15
    flip7_card_count: int = 7
    multiplier: int = 2
    min_players: int = 2


DEFAULT_RULES = RulesConfig()


@dataclass(frozen=True)
class Player:
    id: str
    name: str
    cards: Tuple[str, ...] = ()
    round_score: int = 0
    total_score: int = 0


@dataclass(frozen=True)
class Game:
    id: str
    status: GameStatus = GameStatus.SETUP
    players: Tuple[Player, ...] = ()
    round: int = 1
    winner: Optional[str] = None


@dataclass(frozen=True)
class GameCollection:
    games: Tuple[Game, ...] = field(default_factory=tuple)


# Fields each action type needs on top of game_id.
_REQUIRED_FIELDS: Dict[ActionType, Tuple[str, ...]] = {
    ActionType.CREATE_GAME: (),
    ActionType.ADD_PLAYER: ("player_id", "name"),
    ActionType.REMOVE_PLAYER: ("player_id",),
    ActionType.START_GAME: (),
    ActionType.ADD_CARD: ("player_id", "card_id"),
    ActionType.REMOVE_CARD: ("player_id", "card_id"),
    ActionType.NEW_ROUND: (),
}

_PAYLOAD_ALIASES = {
    "game_id": ("game_id", "gameId"),
    "player_id": ("player_id", "playerId"),
    "card_id": ("card_id", "cardId"),
}


@dataclass(frozen=True)
class Action:
    type: ActionType
    game_id: str
    player_id: Optional[str] = None
    name: Optional[str] = None
    card_id: Optional[str] = None

    @classmethod
    def create_game(cls, game_id: str) -> "Action":
        return cls(ActionType.CREATE_GAME, game_id)

    @classmethod
    def add_player(cls, game_id: str, player_id: str, name: str) -> "Action":
        return cls(ActionType.ADD_PLAYER, game_id, player_id=player_id, name=name)

    @classmethod
    def remove_player(cls, game_id: str, player_id: str) -> "Action":
        return cls(ActionType.REMOVE_PLAYER, game_id, player_id=player_id)

    @classmethod
    def start_game(cls, game_id: str) -> "Action":
        return cls(ActionType.START_GAME, game_id)

    @classmethod
    def add_card(cls, game_id: str, player_id: str, card_id: str) -> "Action":
        return cls(ActionType.ADD_CARD, game_id, player_id=player_id, card_id=card_id)

    @classmethod
    def remove_card(cls, game_id: str, player_id: str, card_id: str) -> "Action":
        return cls(ActionType.REMOVE_CARD, game_id, player_id=player_id, card_id=card_id)

    @classmethod
    def new_round(cls, game_id: str) -> "Action":
        return cls(ActionType.NEW_ROUND, game_id)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "Action":
        """Build an action from its JSON form.

        ``ADD_PLAYER`` carries the player as ``{"player": {"id", "name"}}``;
        flat ``player_id``/``name`` keys are accepted too, as are the
        camelCase spellings used by browser clients.
        """
        if not isinstance(payload, dict):
            raise ValueError("Action payload must be an object")
        raw_type = payload.get("type")
        try:
            action_type = ActionType(raw_type)
        except ValueError:
            raise ValueError(f"Unsupported action {raw_type!r}") from None

        values: Dict[str, Any] = {}
        for name, keys in _PAYLOAD_ALIASES.items():
            for key in keys:
                if key in payload:
                    values[name] = payload[key]
                    break
        if "name" in payload:
            values["name"] = payload["name"]

        player = payload.get("player")
        if isinstance(player, dict):
            values.setdefault("player_id", player.get("id"))
            values.setdefault("name", player.get("name"))

        for name in ("game_id",) + _REQUIRED_FIELDS[action_type]:
            value = values.get(name)
            if not isinstance(value, str):
                raise ValueError(f"{action_type.value} requires {name}")

        return cls(
            action_type,
            values["game_id"],
            player_id=values.get("player_id"),
            name=values.get("name"),
            card_id=values.get("card_id"),
        )
