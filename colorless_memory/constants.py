"""Shared game constants: card and icon indices, player icons, decks and client states."""

from enum import Enum, IntEnum, auto

UNKNOWN_ICON_INDEX = -1
DEFAULT_ICON_INDEX = 0
START_PLAYER_ICON_INDEX = 20
UNKNOWN_CARD_INDEX = -1
EMPTY_CLIENT_ID = -1


class IconType(IntEnum):
    """Icons a player can choose; values are card icon indices."""

    ICON1 = START_PLAYER_ICON_INDEX
    ICON2 = START_PLAYER_ICON_INDEX + 1
    ICON3 = START_PLAYER_ICON_INDEX + 2
    ICON4 = START_PLAYER_ICON_INDEX + 3
    ICON5 = START_PLAYER_ICON_INDEX + 4


class DeckType(IntEnum):
    """Deck layouts, named columns x rows."""

    DECK_3X2 = 0
    DECK_7X2 = 1
    DECK_6X5 = 2
    DECK_7X6 = 3
    DECK_10X5 = 4


class GameState(Enum):
    """Which screen the client is showing."""

    NONE = auto()
    MAIN_MENU = auto()
    LOBBY = auto()
    GAME = auto()


_DECK_GRIDS = {
    DeckType.DECK_3X2: (3, 2),
    DeckType.DECK_7X2: (7, 2),
    DeckType.DECK_6X5: (6, 5),
    DeckType.DECK_7X6: (7, 6),
    DeckType.DECK_10X5: (10, 5),
}


def deck_grid(deck_type):
    """Return (columns, rows) of the deck; raise ValueError for an unknown deck."""
    return _DECK_GRIDS[DeckType(deck_type)]


def deck_card_count(deck_type):
    """Return the number of cards in the deck; raise ValueError for an unknown deck."""
    columns, rows = deck_grid(deck_type)
    return columns * rows


def deck_label(deck_type):
    """Return the deck's "CxR" label, or "Unknown"."""
    try:
        columns, rows = deck_grid(deck_type)
    except ValueError:
        return "Unknown"
    return f"{columns}x{rows}"