"""Game packets, their registry and their encoding on the wire."""

import copy
import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar

from .constants import DeckType, IconType, UNKNOWN_CARD_INDEX, UNKNOWN_ICON_INDEX
from .wire import (
    PacketReader,
    PacketWriter,
    PlayerName,
    WireError,
    read_player_name,
    recv_frame,
    send_frame,
)

logger = logging.getLogger(__name__)


class PacketType(IntEnum):
    """Type byte that starts every packet."""

    INVALID = 0
    LOBBY_INFORMATION = 1
    CHANGE_DECK = 2
    JOIN_LOBBY = 3
    LEAVE_LOBBY = 4
    START_GAME = 5
    TURN = 6
    CARD_INFORMATION = 7
    LEAVE_GAME = 8
    COUNT = 9


def _read_enum(enum_class, reader):
    value = reader.read_uint8()
    try:
        return enum_class(value)
    except ValueError:
        raise WireError(f"invalid {enum_class.__name__} value: {value}") from None


def _read_int8(reader):
    value = reader.read_uint8()
    return value - 256 if value > 127 else value


def _write_int8(writer, value):
    writer.write_uint8(value & 0xFF)


@dataclass
class Packet:
    """Base of all packets; the type byte is written before the fields."""

    packet_type: ClassVar[PacketType] = PacketType.INVALID

    def write(self, writer):
        """Write the packet's fields."""

    def read(self, reader):
        """Read the packet's fields."""

    def clone(self):
        return copy.copy(self)


@dataclass
class InvalidPacket(Packet):
    packet_type: ClassVar[PacketType] = PacketType.INVALID


@dataclass
class LobbyInformationPacket(Packet):
    packet_type: ClassVar[PacketType] = PacketType.LOBBY_INFORMATION

    is_host: bool = False
    waiting_for_opponent: bool = False
    player1_name: PlayerName = field(default_factory=PlayerName)
    player2_name: PlayerName = field(default_factory=PlayerName)
    player1_icon: IconType = IconType.ICON1
    player2_icon: IconType = IconType.ICON1
    chosen_deck_type: DeckType = DeckType.DECK_3X2

    def __post_init__(self):
        if isinstance(self.player1_name, str):
            self.player1_name = PlayerName(self.player1_name)
        if isinstance(self.player2_name, str):
            self.player2_name = PlayerName(self.player2_name)
        self.player1_icon = IconType(self.player1_icon)
        self.player2_icon = IconType(self.player2_icon)
        self.chosen_deck_type = DeckType(self.chosen_deck_type)

    def write(self, writer):
        writer.write_bool(self.is_host)
        writer.write_bool(self.waiting_for_opponent)
        self.player1_name.write_to(writer)
        self.player2_name.write_to(writer)
        writer.write_uint8(self.player1_icon)
        writer.write_uint8(self.player2_icon)
        writer.write_uint8(self.chosen_deck_type)

    def read(self, reader):
        self.is_host = reader.read_bool()
        self.waiting_for_opponent = reader.read_bool()
        self.player1_name = read_player_name(reader)
        self.player2_name = read_player_name(reader)
        self.player1_icon = _read_enum(IconType, reader)
        self.player2_icon = _read_enum(IconType, reader)
        self.chosen_deck_type = _read_enum(DeckType, reader)


@dataclass
class ChangeDeckPacket(Packet):
    packet_type: ClassVar[PacketType] = PacketType.CHANGE_DECK

    chosen_deck_type: DeckType = DeckType.DECK_3X2

    def __post_init__(self):
        self.chosen_deck_type = DeckType(self.chosen_deck_type)

    def write(self, writer):
        writer.write_uint8(self.chosen_deck_type)

    def read(self, reader):
        self.chosen_deck_type = _read_enum(DeckType, reader)


@dataclass
class JoinLobbyPacket(Packet):
    packet_type: ClassVar[PacketType] = PacketType.JOIN_LOBBY

    name: PlayerName = field(default_factory=PlayerName)
    icon_index: IconType = IconType.ICON1

    def __post_init__(self):
        if isinstance(self.name, str):
            self.name = PlayerName(self.name)
        self.icon_index = IconType(self.icon_index)

    def write(self, writer):
        self.name.write_to(writer)
        writer.write_uint8(self.icon_index)

    def read(self, reader):
        self.name = read_player_name(reader)
        self.icon_index = _read_enum(IconType, reader)


@dataclass
class LeaveLobbyPacket(Packet):
    packet_type: ClassVar[PacketType] = PacketType.LEAVE_LOBBY


@dataclass
class StartGamePacket(Packet):
    packet_type: ClassVar[PacketType] = PacketType.START_GAME

    chosen_deck_type: DeckType = DeckType.DECK_3X2
    your_turn: bool = False

    def __post_init__(self):
        self.chosen_deck_type = DeckType(self.chosen_deck_type)

    def write(self, writer):
        writer.write_uint8(self.chosen_deck_type)
        writer.write_bool(self.your_turn)

    def read(self, reader):
        self.chosen_deck_type = _read_enum(DeckType, reader)
        self.your_turn = reader.read_bool()


@dataclass
class TurnPacket(Packet):
    packet_type: ClassVar[PacketType] = PacketType.TURN

    your_turn: bool = False

    def write(self, writer):
        writer.write_bool(self.your_turn)

    def read(self, reader):
        self.your_turn = reader.read_bool()


@dataclass
class CardInformationPacket(Packet):
    packet_type: ClassVar[PacketType] = PacketType.CARD_INFORMATION

    card_index_in_deck: int = UNKNOWN_CARD_INDEX
    icon_index: int = UNKNOWN_ICON_INDEX

    def write(self, writer):
        _write_int8(writer, self.card_index_in_deck)
        _write_int8(writer, self.icon_index)

    def read(self, reader):
        self.card_index_in_deck = _read_int8(reader)
        self.icon_index = _read_int8(reader)


@dataclass
class LeaveGamePacket(Packet):
    packet_type: ClassVar[PacketType] = PacketType.LEAVE_GAME


_registry = {PacketType.INVALID: InvalidPacket}


def register_packet_type(packet_class):
    """Make a packet class known to the decoder under its packet type."""
    if not (isinstance(packet_class, type) and issubclass(packet_class, Packet)):
        raise TypeError(f"not a packet class: {packet_class!r}")
    existing = _registry.get(packet_class.packet_type)
    if existing is not None and existing is not packet_class:
        raise ValueError(
            f"packet type {packet_class.packet_type!r} already registered to {existing.__name__}"
        )
    _registry[packet_class.packet_type] = packet_class


def register_my_packets():
    """Register every game packet; calling it again is harmless."""
    for packet_class in (
        LobbyInformationPacket,
        ChangeDeckPacket,
        JoinLobbyPacket,
        LeaveLobbyPacket,
        StartGamePacket,
        TurnPacket,
        CardInformationPacket,
        LeaveGamePacket,
    ):
        register_packet_type(packet_class)


def encode_packet(packet):
    """Encode a packet: its type byte followed by its fields."""
    writer = PacketWriter()
    writer.write_uint8(packet.packet_type)
    packet.write(writer)
    return writer.to_bytes()


def decode_packet(data):
    """Decode a packet; raise WireError on an unknown type or bad data."""
    reader = PacketReader(data)
    type_value = reader.read_uint8()
    packet_class = _registry.get(type_value)
    if packet_class is None:
        raise WireError(f"unregistered packet type: {type_value}")
    packet = packet_class()
    packet.read(reader)
    return packet


def send_packet(sock, packet):
    """Send one packet over a stream socket."""
    send_frame(sock, encode_packet(packet))


def receive_packet(sock):
    """Receive one packet from a stream socket."""
    try:
        return decode_packet(recv_frame(sock))
    except (OSError, WireError) as error:
        logger.error("Could not receive packet: %s", error)
        raise