import socket

import pytest

from colorless_memory.constants import DeckType, IconType
from colorless_memory.packets import (
    CardInformationPacket,
    ChangeDeckPacket,
    JoinLobbyPacket,
    LeaveGamePacket,
    LeaveLobbyPacket,
    LobbyInformationPacket,
    Packet,
    PacketType,
    StartGamePacket,
    TurnPacket,
    decode_packet,
    encode_packet,
    receive_packet,
    register_my_packets,
    register_packet_type,
    send_packet,
)
from colorless_memory.wire import PlayerName, WireError


def round_trip(packet):
    register_my_packets()
    return decode_packet(encode_packet(packet))


@pytest.mark.parametrize(
    "p1_name, p2_name, p1_icon, p2_icon, deck, is_host, waiting",
    [
        ("Player1", "Player2", IconType.ICON1, IconType.ICON2, DeckType.DECK_3X2, True, True),
        ("93  f43hs1", "Tutu top", IconType.ICON3, IconType.ICON4, DeckType.DECK_6X5, False, False),
        ("Player1", "Player2", IconType.ICON5, IconType.ICON1, DeckType.DECK_7X2, True, False),
        ("Player1", "Player2", IconType.ICON2, IconType.ICON3, DeckType.DECK_7X6, False, True),
    ],
)
def test_lobby_information(p1_name, p2_name, p1_icon, p2_icon, deck, is_host, waiting):
    packet = LobbyInformationPacket(
        is_host, waiting, PlayerName(p1_name), PlayerName(p2_name), p1_icon, p2_icon, deck
    )
    decoded = round_trip(packet)
    assert decoded.packet_type == PacketType.LOBBY_INFORMATION
    assert decoded.is_host == is_host
    assert decoded.waiting_for_opponent == waiting
    assert decoded.player1_name == PlayerName(p1_name)
    assert decoded.player2_name == PlayerName(p2_name)
    assert decoded.player1_icon == p1_icon
    assert decoded.player2_icon == p2_icon
    assert decoded.chosen_deck_type == deck


@pytest.mark.parametrize(
    "deck",
    [
        DeckType.DECK_3X2,
        DeckType.DECK_6X5,
        DeckType.DECK_7X2,
        DeckType.DECK_7X6,
        DeckType.DECK_10X5,
    ],
)
def test_change_deck(deck):
    decoded = round_trip(ChangeDeckPacket(deck))
    assert decoded.chosen_deck_type == deck


@pytest.mark.parametrize(
    "name, icon",
    [
        ("Player1", IconType.ICON1),
        ("Player2", IconType.ICON2),
        ("Player3", IconType.ICON3),
        ("Player4", IconType.ICON4),
        ("Player5", IconType.ICON5),
    ],
)
def test_join_lobby(name, icon):
    decoded = round_trip(JoinLobbyPacket(PlayerName(name).as_string(), icon))
    assert decoded.name == PlayerName(name)
    assert decoded.icon_index == icon


def test_leave_lobby():
    decoded = round_trip(LeaveLobbyPacket())
    assert decoded.packet_type == PacketType.LEAVE_LOBBY
    assert type(decoded) is LeaveLobbyPacket


@pytest.mark.parametrize("your_turn", [True, False])
def test_turn(your_turn):
    decoded = round_trip(TurnPacket(your_turn))
    assert decoded.your_turn == your_turn


@pytest.mark.parametrize("card_index, icon_index", [(0, 0), (1, 1), (2, 2), (3, 3), (4, 4)])
def test_card_information(card_index, icon_index):
    decoded = round_trip(CardInformationPacket(card_index, icon_index))
    assert decoded.card_index_in_deck == card_index
    assert decoded.icon_index == icon_index


def test_card_information_unknown_indices():
    packet = CardInformationPacket()
    assert encode_packet(packet) == bytes([PacketType.CARD_INFORMATION, 0xFF, 0xFF])
    decoded = round_trip(packet)
    assert decoded.card_index_in_deck == -1
    assert decoded.icon_index == -1


def test_start_game():
    decoded = round_trip(StartGamePacket())
    assert decoded.packet_type == PacketType.START_GAME
    assert decoded.chosen_deck_type == DeckType.DECK_3X2
    assert decoded.your_turn is False


def test_start_game_fields():
    decoded = round_trip(StartGamePacket(DeckType.DECK_10X5, True))
    assert decoded == StartGamePacket(DeckType.DECK_10X5, True)


def test_leave_game():
    decoded = round_trip(LeaveGamePacket())
    assert decoded.packet_type == PacketType.LEAVE_GAME
    assert type(decoded) is LeaveGamePacket


def test_turn_wire_bytes():
    assert encode_packet(TurnPacket(True)) == bytes([PacketType.TURN, 1])


def test_clone_is_equal_copy():
    packet = LobbyInformationPacket(True, False, PlayerName("A"), PlayerName("B"))
    clone = packet.clone()
    assert clone == packet
    assert clone is not packet


def test_join_lobby_accepts_string_name():
    assert JoinLobbyPacket("Alice").name == PlayerName("Alice")


def test_unregistered_type():
    register_my_packets()
    with pytest.raises(WireError):
        decode_packet(bytes([200]))


def test_truncated_packet():
    register_my_packets()
    with pytest.raises(WireError):
        decode_packet(bytes([PacketType.TURN]))


def test_invalid_enum_value():
    register_my_packets()
    with pytest.raises(WireError):
        decode_packet(bytes([PacketType.CHANGE_DECK, 9]))


def test_register_rejects_non_packet():
    with pytest.raises(TypeError):
        register_packet_type(int)


def test_register_rejects_conflicting_type():
    class OtherTurn(Packet):
        packet_type = PacketType.TURN

    register_my_packets()
    with pytest.raises(ValueError):
        register_packet_type(OtherTurn)


def test_send_and_receive_over_socket():
    register_my_packets()
    left, right = socket.socketpair()
    with left, right:
        send_packet(left, CardInformationPacket(5, 12))
        send_packet(left, TurnPacket(True))
        assert receive_packet(right) == CardInformationPacket(5, 12)
        assert receive_packet(right) == TurnPacket(True)


def test_receive_on_closed_socket():
    left, right = socket.socketpair()
    with right:
        left.close()
        with pytest.raises(ConnectionError):
            receive_packet(right)