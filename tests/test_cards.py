import pytest

from flip7.cards import ALL_CARDS, CARDS, CARDS_BY_ID, CardDefinition, card_label, deck_size, get_card, is_number_card
from flip7.models import CardCategory


def test_catalog_covers_every_card_id_once():
    assert len(CARDS) == 22
    assert set(ALL_CARDS) == set(CARDS_BY_ID)
    assert len(ALL_CARDS) == len(set(ALL_CARDS))


def test_catalog_categories_and_values():
    for value in range(13):
        card = get_card(str(value))
        assert card is not None
        assert card.category == CardCategory.NUMBER
        assert card.value == value

    for value in (2, 4, 6, 8, 10):
        card = get_card(f"plus_{value}")
        assert card.category == CardCategory.BONUS_ADD
        assert card.value == value

    assert get_card("x2").category == CardCategory.BONUS_MULTIPLY
    for card_id in ("freeze", "flip_three", "second_chance"):
        card = get_card(card_id)
        assert card.category == CardCategory.ACTION
        assert card.value == 0


def test_picker_order_matches_deck_layout():
    assert ALL_CARDS[:13] == tuple(str(v) for v in range(13))
    assert ALL_CARDS[13:] == ("plus_2", "plus_4", "plus_6", "plus_8", "plus_10", "x2", "freeze", "flip_three", "second_chance")


def test_deck_counts():
    assert get_card("0").count == 1
    assert get_card("1").count == 1
    assert get_card("12").count == 12
    assert get_card("freeze").count == 3
    assert get_card("plus_8").count == 1
    assert deck_size() == 94


def test_card_labels():
    assert card_label("x2") == "x2"
    assert card_label("freeze") == "Freeze"
    assert card_label("flip_three") == "Flip 3"
    assert card_label("second_chance") == "2nd Chance"
    assert card_label("plus_10") == "+10"
    assert card_label("7") == "7"
    assert get_card("plus_6").label == "+6"


def test_unknown_card_lookup():
    assert get_card("13") is None
    assert not is_number_card("13")
    assert not is_number_card("plus_2")
    assert is_number_card("0")


def test_card_definition_rejects_empty_deck_count():
    with pytest.raises(ValueError, match="Invalid deck count"):
        CardDefinition("99", "Ninety-nine", 99, CardCategory.NUMBER, count=0)
