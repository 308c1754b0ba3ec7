"""Client-side view of the player, the lobby and the game being played."""

from dataclasses import dataclass, field

from .constants import UNKNOWN_CARD_INDEX, DeckType, IconType
from .packets import (
    CardInformationPacket,
    JoinLobbyPacket,
    LobbyInformationPacket,
    StartGamePacket,
    TurnPacket,
)
from .wire import PlayerName


@dataclass
class PlayerInfo:
    """A player's name and chosen icon."""

    name: PlayerName = field(default_factory=PlayerName)
    icon_index: IconType = IconType.ICON1


@dataclass
class LobbyInfo:
    """What the client knows about its lobby."""

    is_host: bool = False
    waiting_for_opponent: bool = True
    deck_type: DeckType = DeckType.DECK_3X2
    player1: PlayerInfo = field(default_factory=PlayerInfo)
    player2: PlayerInfo = field(default_factory=PlayerInfo)


@dataclass
class GameInfo:
    """What the client knows about the running game."""

    deck_type: DeckType = DeckType.DECK_3X2
    card_index1: int = UNKNOWN_CARD_INDEX
    card_index2: int = UNKNOWN_CARD_INDEX
    player1_score: int = 0
    player2_score: int = 0
    is_first_player: bool = False
    your_turn: bool = False

    def reset(self, lobby):
        """Start a new game with the lobby's deck; scores go back to zero."""
        self.deck_type = lobby.deck_type
        self.player1_score = 0
        self.player2_score = 0
        self.is_first_player = lobby.is_host


class GameManager:
    """Keeps the client's game data in step with the packets from the server."""

    def __init__(self):
        self.player = PlayerInfo()
        self.lobby = LobbyInfo()
        self.game = GameInfo()

    def on_packet_received(self, packet):
        """Update the lobby or game data from a server packet."""
        if isinstance(packet, LobbyInformationPacket):
            self.lobby.is_host = packet.is_host
            self.lobby.waiting_for_opponent = packet.waiting_for_opponent
            self.lobby.player1.name = packet.player1_name
            self.lobby.player1.icon_index = packet.player1_icon
            self.lobby.player2.name = packet.player2_name
            self.lobby.player2.icon_index = packet.player2_icon
        elif isinstance(packet, StartGamePacket):
            self.lobby.deck_type = packet.chosen_deck_type
            self.game.reset(self.lobby)
            self.game.your_turn = packet.your_turn
        elif isinstance(packet, TurnPacket):
            self.game.your_turn = packet.your_turn
        elif isinstance(packet, CardInformationPacket):
            card_index = packet.card_index_in_deck
            if self.game.card_index1 in (UNKNOWN_CARD_INDEX, card_index):
                self.game.card_index1 = card_index
            elif self.game.card_index2 in (UNKNOWN_CARD_INDEX, card_index):
                self.game.card_index2 = card_index

    def join_lobby(self):
        self.lobby.is_host = True
        self.lobby.waiting_for_opponent = True

    def set_username(self, username):
        self.player.name = PlayerName(username)

    def set_player_icon(self, icon):
        self.player.icon_index = IconType(icon)

    def increase_score(self, player_index):
        """Add a point to player 1 for index 0, to player 2 otherwise."""
        if player_index == 0:
            self.game.player1_score += 1
        else:
            self.game.player2_score += 1

    def choose_a_card(self, card_index):
        """Select a card if it is the player's turn and the card is not selected yet.

        Return True if the card was selected.
        """
        game = self.game
        both_chosen = (
            game.card_index1 != UNKNOWN_CARD_INDEX and game.card_index2 != UNKNOWN_CARD_INDEX
        )
        if not game.your_turn or both_chosen:
            return False
        if card_index in (game.card_index1, game.card_index2):
            return False

        if game.card_index1 == UNKNOWN_CARD_INDEX:
            game.card_index1 = card_index
        elif game.card_index2 == UNKNOWN_CARD_INDEX:
            game.card_index2 = card_index
        return True

    def change_deck(self, deck_type):
        self.lobby.deck_type = DeckType(deck_type)

    def end_turn(self):
        """Forget both chosen cards."""
        self.game.card_index1 = UNKNOWN_CARD_INDEX
        self.game.card_index2 = UNKNOWN_CARD_INDEX

    def to_join_lobby_packet(self):
        return JoinLobbyPacket(self.player.name.as_string(), self.player.icon_index)