"""Game server logic: lobbies, games and their turns, driven by incoming packets."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from .constants import EMPTY_CLIENT_ID
from .packets import (
    CardInformationPacket,
    ChangeDeckPacket,
    JoinLobbyPacket,
    LeaveGamePacket,
    LeaveLobbyPacket,
    Packet,
    StartGamePacket,
    TurnPacket,
)
from .serverdata import Lobby, ServerGame

logger = logging.getLogger(__name__)


@dataclass
class PacketData:
    """A packet together with the client it came from or goes to."""

    packet: Optional[Packet] = None
    client: int = EMPTY_CLIENT_ID


class ServerNetworkInterface(ABC):
    """What the game server needs from its network layer."""

    @abstractmethod
    def pop_packet(self):
        """Return the next received PacketData, or None if there is none."""

    @abstractmethod
    def send_packet(self, packet, client_id):
        """Send a packet to one client."""

    @abstractmethod
    def pop_disconnected_client(self):
        """Return the id of the next disconnected client, or None if there is none."""


class Server:
    """Matches players into lobbies and referees their games."""

    def __init__(self, network):
        self._network = network
        self._lobbies = []
        self._games = []

    def update(self):
        """Handle every pending packet, then every pending disconnection."""
        while (packet_data := self._network.pop_packet()) is not None:
            self._on_receive_packet(packet_data)
        while (client_id := self._network.pop_disconnected_client()) is not None:
            self._on_disconnect(client_id)

    def _on_receive_packet(self, packet_data):
        client_id = packet_data.client
        packet = packet_data.packet

        if isinstance(packet, JoinLobbyPacket):
            logger.info(
                "Player %s aka %s joined the lobby", client_id, packet.name.as_string()
            )
            self._join_lobby(client_id, packet.name, packet.icon_index)
        elif isinstance(packet, ChangeDeckPacket):
            self._change_deck(client_id, packet.chosen_deck_type)
        elif isinstance(packet, LeaveLobbyPacket):
            logger.info("Player %s left the lobby", client_id)
            self._remove_from_lobby(client_id)
        elif isinstance(packet, StartGamePacket):
            logger.info("Player %s started the game", client_id)
            self._start_game(client_id)
        elif isinstance(packet, CardInformationPacket):
            self._select_card(client_id, packet.card_index_in_deck)
        elif isinstance(packet, LeaveGamePacket):
            logger.info("Player %s left the game", client_id)
            self._remove_from_game(client_id)

    def _on_disconnect(self, client_id):
        logger.info("Player %s disconnected", client_id)
        self._remove_from_lobby(client_id)
        self._remove_from_game(client_id)

    def _join_lobby(self, client_id, player_name, icon):
        for lobby in self._lobbies:
            if EMPTY_CLIENT_ID in lobby.players:
                self._add_to_lobby(lobby, client_id, player_name, icon)
                return
        lobby = Lobby()
        self._lobbies.append(lobby)
        self._add_to_lobby(lobby, client_id, player_name, icon)

    def _add_to_lobby(self, lobby, client_id, player_name, icon):
        if lobby.players[0] == EMPTY_CLIENT_ID:
            lobby.players[0] = client_id
            lobby.player_names[0] = player_name
            lobby.player_icons[0] = icon
            self._network.send_packet(lobby.to_packet(True), client_id)
        elif lobby.players[1] == EMPTY_CLIENT_ID:
            lobby.players[1] = client_id
            lobby.player_names[1] = player_name
            lobby.player_icons[1] = icon
            self._network.send_packet(lobby.to_packet(True), lobby.players[0])
            self._network.send_packet(lobby.to_packet(False), client_id)

    def _remove_from_lobby(self, client_id):
        for lobby in self._lobbies:
            if lobby.players[0] == client_id:
                if lobby.players[1] != EMPTY_CLIENT_ID:
                    remaining = (lobby.players[1], lobby.player_names[1], lobby.player_icons[1])
                    lobby.reset()
                    self._join_lobby(*remaining)
                else:
                    lobby.reset()
                return
            if lobby.players[1] == client_id:
                remaining = (lobby.players[0], lobby.player_names[0], lobby.player_icons[0])
                lobby.reset()
                self._join_lobby(*remaining)
                return

    def _remove_from_game(self, client_id):
        for game in self._games:
            if not game.is_player_in_game(client_id):
                continue
            first, second = game.players
            opponent = second if first == client_id else first
            self._network.send_packet(LeaveGamePacket(), opponent)
            game.reset()
            return

    def _change_deck(self, client_id, deck_type):
        for lobby in self._lobbies:
            if lobby.players[0] == client_id:  # only the host chooses the deck
                lobby.chosen_deck_type = deck_type
                return

    def _start_game(self, client_id):
        for lobby in self._lobbies:
            if lobby.is_empty() or not lobby.is_in_lobby(client_id):
                continue
            if lobby.players[0] != client_id:  # only the host starts the game
                return
            for game in self._games:
                if EMPTY_CLIENT_ID in game.players:
                    self._start_new_game(game, lobby)
                    return
            game = ServerGame(lobby)
            self._games.append(game)
            self._start_new_game(game, lobby)
            return

    def _start_new_game(self, game, lobby):
        game.reset()
        game.from_lobby(lobby)
        for seat, player in enumerate(lobby.players):
            self._network.send_packet(
                StartGamePacket(lobby.chosen_deck_type, game.current_turn == seat), player
            )
        lobby.reset()

    def _select_card(self, client_id, card_index):
        for game in self._games:
            if not game.is_player_in_game(client_id):
                continue
            requesting_seat = 0 if game.players[0] == client_id else 1
            if game.current_turn != requesting_seat:
                return
            if game.has_selected_two_cards():
                return
            if game.selected_cards[0] == card_index:
                return
            if not 0 <= card_index < len(game.cards):
                return

            game.select_card(card_index)
            icon = game.cards[card_index]
            for player in game.players:
                self._network.send_packet(CardInformationPacket(card_index, icon), player)

            if not game.has_selected_two_cards():
                return

            first, second = game.selected_cards
            if game.cards[first] != game.cards[second]:
                game.current_turn = 1 - game.current_turn
            else:
                game.scores[game.current_turn] += 1

            game.unselect_cards()

            if game.is_game_over():
                game.reset()
                return

            for seat, player in enumerate(game.players):
                self._network.send_packet(TurnPacket(game.current_turn == seat), player)
            return