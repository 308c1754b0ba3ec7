"""Client network layer: a TCP connection to the server with send and receive threads."""

import logging
import queue
import socket
import threading
from abc import ABC, abstractmethod

from .packets import receive_packet, send_packet
from .wire import WireError

logger = logging.getLogger(__name__)

_JOIN_TIMEOUT_SECONDS = 1.0


class ClientNetworkInterface(ABC):
    """What the client game needs from its network layer."""

    @abstractmethod
    def pop_packet(self):
        """Return the next packet from the server, or None if there is none."""

    @abstractmethod
    def send_packet(self, packet):
        """Queue a packet for the server."""


class NetworkClientManager(ClientNetworkInterface):
    """Connects to the server and exchanges packets with it on background threads."""

    def __init__(self, host, port):
        self._received = queue.SimpleQueue()
        self._to_send = queue.SimpleQueue()
        self._running = threading.Event()
        self._running.set()
        self._lost_connection = False

        try:
            self._socket = socket.create_connection((host, port))
        except OSError as error:
            logger.error("Could not connect to server: %s", error)
            raise ConnectionError(f"could not connect to {host}:{port}") from error

        self._receiver = threading.Thread(target=self._receive_packets, daemon=True)
        self._sender = threading.Thread(target=self._send_packets, daemon=True)
        self._receiver.start()
        self._sender.start()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.stop()

    def pop_packet(self):
        """Return the next received packet or None.

        Raise ConnectionError once the connection is lost and every packet was taken.
        """
        try:
            return self._received.get_nowait()
        except queue.Empty:
            if self._lost_connection:
                raise ConnectionError("connection to server lost") from None
            return None

    def send_packet(self, packet):
        self._to_send.put(packet)

    def stop(self):
        """Stop the threads and close the connection."""
        self._running.clear()
        self._to_send.put(None)
        try:
            self._socket.shutdown(socket.SHUT_RDWR)
        except OSError:
            pass
        self._socket.close()
        for thread in (self._receiver, self._sender):
            if thread is not threading.current_thread():
                thread.join(timeout=_JOIN_TIMEOUT_SECONDS)

    def _receive_packets(self):
        while self._running.is_set():
            try:
                packet = receive_packet(self._socket)
            except (OSError, WireError):
                if self._running.is_set():
                    self._lost_connection = True
                    self._running.clear()
                    self._to_send.put(None)
                return
            self._received.put(packet)

    def _send_packets(self):
        while True:
            packet = self._to_send.get()
            if packet is None or not self._running.is_set():
                return
            try:
                send_packet(self._socket, packet)
            except OSError as error:
                logger.error("Could not send packet: %s", error)
                return