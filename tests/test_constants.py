import pytest

from colorless_memory.constants import (
    DeckType,
    GameState,
    IconType,
    START_PLAYER_ICON_INDEX,
    deck_card_count,
    deck_grid,
    deck_label,
)


@pytest.mark.parametrize(
    "deck, count",
    [
        (DeckType.DECK_3X2, 6),
        (DeckType.DECK_7X2, 14),
        (DeckType.DECK_6X5, 30),
        (DeckType.DECK_7X6, 42),
        (DeckType.DECK_10X5, 50),
    ],
)
def test_deck_card_count(deck, count):
    assert deck_card_count(deck) == count


@pytest.mark.parametrize(
    "deck, label",
    [
        (DeckType.DECK_3X2, "3x2"),
        (DeckType.DECK_7X2, "7x2"),
        (DeckType.DECK_6X5, "6x5"),
        (DeckType.DECK_7X6, "7x6"),
        (DeckType.DECK_10X5, "10x5"),
    ],
)
def test_deck_label(deck, label):
    assert deck_label(deck) == label


@pytest.mark.parametrize("deck", list(DeckType))
def test_grid_matches_count_and_is_even(deck):
    columns, rows = deck_grid(deck)
    assert columns * rows == deck_card_count(deck)
    assert deck_card_count(deck) % 2 == 0


def test_deck_accepts_plain_int():
    assert deck_grid(4) == deck_grid(DeckType.DECK_10X5)


def test_unknown_deck_label():
    assert deck_label(99) == "Unknown"


def test_unknown_deck_raises():
    with pytest.raises(ValueError):
        deck_card_count(99)
    with pytest.raises(ValueError):
        deck_grid(-1)


def test_icons_start_at_player_icon_index():
    assert IconType(START_PLAYER_ICON_INDEX) is IconType.ICON1
    assert IconType(START_PLAYER_ICON_INDEX + 4) is IconType.ICON5
    with pytest.raises(ValueError):
        IconType(START_PLAYER_ICON_INDEX + 5)
    with pytest.raises(ValueError):
        IconType(START_PLAYER_ICON_INDEX - 1)


@pytest.mark.parametrize("state", list(GameState))
def test_game_state_round_trips_by_value(state):
    assert GameState(state.value) is state


def test_unknown_game_state_raises():
    with pytest.raises(ValueError):
        GameState(object())