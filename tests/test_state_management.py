from flip7.game import (
    can_start_game,
    card_count,
    collection_payload,
    is_card_selectable,
    new_id,
    standings,
)
from flip7.models import Action, GameStatus, RulesConfig
from flip7.store import GameStore, game_session, use_game

from .helpers import create_collection, deal_cards, game_of, play_round


def test_store_dispatch_replaces_snapshot():
    store = GameStore()
    first = store.state
    store.dispatch(Action.create_game("G1"))
    assert store.state is not first
    assert first.games == ()
    assert store.game("G1").status == GameStatus.SETUP
    assert store.dispatch_count == 1


def test_store_no_op_keeps_snapshot_identity():
    store = GameStore(initial=create_collection())
    before = store.state
    store.dispatch(Action.add_card("G1", "ghost", "5"))
    assert store.state is before


def test_store_rules_drive_win_threshold():
    store = GameStore(RulesConfig(win_threshold=10), initial=create_collection())
    store.dispatch(Action.add_card("G1", "p1", "11"))
    store.dispatch(Action.new_round("G1"))
    assert store.game("G1").winner == "p1"


def test_game_session_exposes_store_and_restores_on_exit():
    outer = GameStore()
    with game_session(outer) as active:
        assert use_game() is outer is active
        with game_session() as inner:
            assert use_game() is inner
        assert use_game() is outer


def test_can_start_game_requires_two_players():
    assert not can_start_game(game_of(create_collection(players=("Solo",), started=False)))
    assert can_start_game(game_of(create_collection(players=("A", "B"), started=False)))
    assert can_start_game(game_of(create_collection(players=("Solo",))), RulesConfig(min_players=1))


def test_number_cards_are_selectable_once_per_hand():
    collection = deal_cards(create_collection(), "G1", [("p0", ["5", "plus_2", "freeze"])])
    player = game_of(collection).players[0]
    assert not is_card_selectable(player, "5")
    assert is_card_selectable(player, "6")
    assert is_card_selectable(player, "plus_2")
    assert is_card_selectable(player, "freeze")
    assert not is_card_selectable(player, "joker")
    assert card_count(player, "5") == 1
    assert card_count(player, "6") == 0


def test_standings_sort_by_total_and_keep_ties_in_order():
    collection = play_round(create_collection(), "G1", [("p0", ["2"]), ("p1", ["9"]), ("p2", ["2"])])
    assert [p.id for p in standings(game_of(collection))] == ["p1", "p0", "p2"]


def test_collection_payload_is_json_ready():
    collection = deal_cards(create_collection(players=("Alice",)), "G1", [("p0", [str(v) for v in range(7)])])
    payload = collection_payload(collection)
    game = payload["games"][0]
    assert game["status"] == "playing"
    assert game["round"] == 1
    assert game["winner"] is None
    assert game["players"][0] == {
        "id": "p0",
        "name": "Alice",
        "cards": ["0", "1", "2", "3", "4", "5", "6"],
        "round_score": 36,
        "total_score": 0,
        "has_flip7": True,
    }


def test_new_id_is_unique_hex():
    ids = {new_id() for _ in range(100)}
    assert len(ids) == 100
    assert all(len(value) == 32 for value in ids)
