"""Server-side state of lobbies and running games."""

from dataclasses import dataclass, field

from .constants import (
    EMPTY_CLIENT_ID,
    UNKNOWN_CARD_INDEX,
    DeckType,
    IconType,
    deck_card_count,
)
from .packets import LobbyInformationPacket
from .rng import random_int, shuffle
from .wire import PlayerName


def _empty_pair():
    return [EMPTY_CLIENT_ID, EMPTY_CLIENT_ID]


@dataclass
class Lobby:
    """Two seats waiting for a game; seat 0 is the host."""

    players: list = field(default_factory=_empty_pair)
    player_names: list = field(default_factory=lambda: [PlayerName(), PlayerName()])
    player_icons: list = field(default_factory=lambda: [IconType.ICON1, IconType.ICON1])
    chosen_deck_type: DeckType = DeckType.DECK_3X2

    def is_full(self):
        return all(player != EMPTY_CLIENT_ID for player in self.players)

    def is_empty(self):
        return all(player == EMPTY_CLIENT_ID for player in self.players)

    def is_in_lobby(self, client_id):
        return client_id in self.players

    def to_packet(self, is_host):
        """Describe the lobby to one of its players."""
        return LobbyInformationPacket(
            is_host=is_host,
            waiting_for_opponent=not self.is_full(),
            player1_name=self.player_names[0],
            player2_name=self.player_names[1],
            player1_icon=self.player_icons[0],
            player2_icon=self.player_icons[1],
            chosen_deck_type=self.chosen_deck_type,
        )

    def reset(self):
        self.players = _empty_pair()
        self.player_names = [PlayerName(), PlayerName()]
        self.player_icons = [IconType.ICON1, IconType.ICON1]
        self.chosen_deck_type = DeckType.DECK_3X2


class ServerGame:
    """A game in progress: the shuffled deck, whose turn it is and the scores."""

    def __init__(self, lobby=None):
        self.players = _empty_pair()
        self.cards = []
        self.current_turn = 0
        self.selected_cards = [UNKNOWN_CARD_INDEX, UNKNOWN_CARD_INDEX]
        self.scores = [0, 0]
        if lobby is not None:
            self.from_lobby(lobby)

    def select_card(self, index):
        """Put the card in the first free selection slot, unless already selected."""
        for slot, selected in enumerate(self.selected_cards):
            if selected == index:
                return
            if selected != UNKNOWN_CARD_INDEX:
                continue
            self.selected_cards[slot] = index
            return

    def unselect_cards(self):
        self.selected_cards = [UNKNOWN_CARD_INDEX, UNKNOWN_CARD_INDEX]

    def has_selected_two_cards(self):
        return all(selected != UNKNOWN_CARD_INDEX for selected in self.selected_cards)

    def is_game_over(self):
        return sum(self.scores) == len(self.cards) // 2

    def is_player_in_game(self, client_id):
        return client_id in self.players

    def reset(self):
        self.players = _empty_pair()
        self.cards = []
        self.current_turn = 0
        self.unselect_cards()
        self.scores = [0, 0]

    def from_lobby(self, lobby):
        """Seat the lobby's players, deal a shuffled deck of pairs and draw the first player."""
        self.players = list(lobby.players)
        pairs = deck_card_count(lobby.chosen_deck_type) // 2
        self.cards = [icon for icon in range(pairs) for _ in range(2)]
        shuffle(self.cards)
        self.current_turn = random_int(0, 1)
        self.unselect_cards()