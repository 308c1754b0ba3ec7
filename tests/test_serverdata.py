from collections import Counter

import pytest

from colorless_memory.constants import (
    EMPTY_CLIENT_ID,
    UNKNOWN_CARD_INDEX,
    DeckType,
    IconType,
    deck_card_count,
)
from colorless_memory.packets import LobbyInformationPacket
from colorless_memory.serverdata import Lobby, ServerGame
from colorless_memory.wire import PlayerName


def _full_lobby(deck=DeckType.DECK_3X2):
    lobby = Lobby()
    lobby.players = [3, 7]
    lobby.player_names = [PlayerName("Player1"), PlayerName("Player2")]
    lobby.player_icons = [IconType.ICON5, IconType.ICON3]
    lobby.chosen_deck_type = deck
    return lobby


def test_new_lobby_is_empty_and_not_full():
    lobby = Lobby()
    assert lobby.is_empty() is True
    assert lobby.is_full() is False
    assert lobby.players == [EMPTY_CLIENT_ID, EMPTY_CLIENT_ID]


def test_lobby_with_one_player_is_neither_empty_nor_full():
    lobby = Lobby()
    lobby.players[0] = 4
    assert lobby.is_empty() is False
    assert lobby.is_full() is False
    assert lobby.is_in_lobby(4) is True
    assert lobby.is_in_lobby(5) is False


def test_full_lobby():
    lobby = _full_lobby()
    assert lobby.is_full() is True
    assert lobby.is_in_lobby(7) is True


def test_to_packet_copies_lobby_fields():
    lobby = _full_lobby(DeckType.DECK_7X6)
    packet = lobby.to_packet(False)
    assert packet == LobbyInformationPacket(
        is_host=False,
        waiting_for_opponent=False,
        player1_name=PlayerName("Player1"),
        player2_name=PlayerName("Player2"),
        player1_icon=IconType.ICON5,
        player2_icon=IconType.ICON3,
        chosen_deck_type=DeckType.DECK_7X6,
    )


def test_to_packet_waits_for_opponent_when_not_full():
    lobby = Lobby()
    lobby.players[0] = 0
    packet = lobby.to_packet(True)
    assert packet.is_host is True
    assert packet.waiting_for_opponent is True


def test_lobby_reset_restores_defaults():
    lobby = _full_lobby(DeckType.DECK_10X5)
    lobby.reset()
    assert lobby == Lobby()


@pytest.mark.parametrize("deck", list(DeckType))
def test_game_from_lobby_deals_pairs(deck):
    lobby = _full_lobby(deck)
    game = ServerGame(lobby)
    count = deck_card_count(deck)
    assert len(game.cards) == count
    counts = Counter(game.cards)
    assert set(counts) == set(range(count // 2))
    assert set(counts.values()) == {2}
    assert game.players == [3, 7]
    assert game.current_turn in (0, 1)
    assert game.selected_cards == [UNKNOWN_CARD_INDEX, UNKNOWN_CARD_INDEX]


def test_game_players_are_a_copy_of_the_lobby():
    lobby = _full_lobby()
    game = ServerGame(lobby)
    lobby.reset()
    assert game.players == [3, 7]


def test_select_two_cards():
    game = ServerGame(_full_lobby())
    game.select_card(2)
    assert game.has_selected_two_cards() is False
    game.select_card(2)
    assert game.selected_cards == [2, UNKNOWN_CARD_INDEX]
    game.select_card(4)
    assert game.selected_cards == [2, 4]
    assert game.has_selected_two_cards() is True


def test_select_card_ignores_third_card():
    game = ServerGame(_full_lobby())
    game.select_card(0)
    game.select_card(1)
    game.select_card(5)
    assert game.selected_cards == [0, 1]


def test_unselect_cards():
    game = ServerGame(_full_lobby())
    game.select_card(0)
    game.select_card(1)
    game.unselect_cards()
    assert game.selected_cards == [UNKNOWN_CARD_INDEX, UNKNOWN_CARD_INDEX]
    assert game.has_selected_two_cards() is False


def test_game_over_when_all_pairs_scored():
    game = ServerGame(_full_lobby(DeckType.DECK_3X2))
    assert game.is_game_over() is False
    game.scores = [2, 1]
    assert game.is_game_over() is True


def test_is_player_in_game():
    game = ServerGame(_full_lobby())
    assert game.is_player_in_game(3) is True
    assert game.is_player_in_game(8) is False


def test_game_reset():
    game = ServerGame(_full_lobby())
    game.scores = [1, 1]
    game.select_card(1)
    game.reset()
    assert game.players == [EMPTY_CLIENT_ID, EMPTY_CLIENT_ID]
    assert game.cards == []
    assert game.scores == [0, 0]
    assert game.current_turn == 0
    assert game.selected_cards == [UNKNOWN_CARD_INDEX, UNKNOWN_CARD_INDEX]