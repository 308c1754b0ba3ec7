"""Low-level packet encoding: byte writer and reader, player names and framing."""

import socket

PLAYER_NAME_SIZE = 10
_LENGTH_SIZE = 4


class WireError(Exception):
    """Raised when packet data is malformed or incomplete."""


class PacketWriter:
    """Accumulates packet fields as bytes."""

    def __init__(self):
        self._buffer = bytearray()

    def write_uint8(self, value):
        if not 0 <= value <= 0xFF:
            raise ValueError(f"value out of uint8 range: {value}")
        self._buffer.append(value)

    def write_bool(self, value):
        self._buffer.append(1 if value else 0)

    def to_bytes(self):
        return bytes(self._buffer)


class PacketReader:
    """Reads packet fields from bytes in order."""

    def __init__(self, data):
        self._data = bytes(data)
        self._position = 0

    def read_uint8(self):
        if self._position >= len(self._data):
            raise WireError("read past end of packet")
        value = self._data[self._position]
        self._position += 1
        return value

    def read_bool(self):
        return self.read_uint8() != 0


class PlayerName:
    """A player name stored as a fixed field of ten bytes, zero padded."""

    __slots__ = ("_data",)

    def __init__(self, name=""):
        encoded = name.encode("utf-8")[:PLAYER_NAME_SIZE]
        self._data = encoded.ljust(PLAYER_NAME_SIZE, b"\0")

    @classmethod
    def _from_raw(cls, raw):
        player_name = cls()
        player_name._data = bytes(raw[:PLAYER_NAME_SIZE]).ljust(PLAYER_NAME_SIZE, b"\0")
        return player_name

    @property
    def data(self):
        """The raw fixed-size bytes."""
        return self._data

    def as_string(self):
        return self._data.split(b"\0", 1)[0].decode("utf-8", errors="ignore")

    def write_to(self, writer):
        for byte in self._data:
            writer.write_uint8(byte)

    def __eq__(self, other):
        if not isinstance(other, PlayerName):
            return NotImplemented
        return self._data == other._data

    def __hash__(self):
        return hash(self._data)

    def __str__(self):
        return self.as_string()

    def __repr__(self):
        return f"PlayerName({self.as_string()!r})"


def read_player_name(reader):
    """Read a fixed-size player name."""
    return PlayerName._from_raw(bytes(reader.read_uint8() for _ in range(PLAYER_NAME_SIZE)))


def frame(payload):
    """Prefix a payload with its length as a 4-byte big-endian integer."""
    return len(payload).to_bytes(_LENGTH_SIZE, "big") + bytes(payload)


def send_frame(sock, payload):
    """Send one framed payload over a stream socket."""
    sock.sendall(frame(payload))


def _recv_exact(sock, size):
    chunks = bytearray()
    while len(chunks) < size:
        chunk = sock.recv(size - len(chunks))
        if not chunk:
            raise ConnectionError("connection closed")
        chunks.extend(chunk)
    return bytes(chunks)


def recv_frame(sock: socket.socket):
    """Receive one framed payload; raise ConnectionError if the peer closes."""
    size = int.from_bytes(_recv_exact(sock, _LENGTH_SIZE), "big")
    return _recv_exact(sock, size)