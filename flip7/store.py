from __future__ import annotations

import contextlib
import logging
from contextvars import ContextVar
from typing import Iterator, Optional

from .game import apply_action, find_game
from .models import DEFAULT_RULES, Action, Game, GameCollection, RulesConfig

LOGGER = logging.getLogger("flip7_store")

_CURRENT_STORE: ContextVar[Optional["GameStore"]] = ContextVar("flip7_store", default=None)


class GameStore:
    """Holds the latest collection snapshot and is its only writer."""

    def __init__(self, rules: RulesConfig = DEFAULT_RULES, initial: Optional[GameCollection] = None) -> None:
        self.rules = rules
        self._state = initial if initial is not None else GameCollection()
        self.dispatch_count = 0

    @property
    def state(self) -> GameCollection:
        return self._state

    def dispatch(self, action: Action) -> GameCollection:
        previous = self._state
        self._state = apply_action(previous, action, self.rules)
        self.dispatch_count += 1
        if self._state is previous:
            LOGGER.debug("No-op %s for game %s", action.type.value, action.game_id)
        else:
            LOGGER.debug("Applied %s to game %s", action.type.value, action.game_id)
        return self._state

    def game(self, game_id: str) -> Optional[Game]:
        return find_game(self._state, game_id)


@contextlib.contextmanager
def game_session(store: Optional[GameStore] = None) -> Iterator[GameStore]:
    # Nested sessions shadow the outer one until they exit.
    active = store if store is not None else GameStore()
    token = _CURRENT_STORE.set(active)
    try:
        yield active
    finally:
        _CURRENT_STORE.reset(token)


def use_game() -> GameStore:
    store = _CURRENT_STORE.get()
    if store is None:
        raise RuntimeError("use_game must be called within game_session")
    return store
