"""TCP network layer of the game server."""

import logging
import os
import queue
import socket
import threading

from .gameserver import PacketData, ServerNetworkInterface
from .packets import encode_packet, receive_packet
from .wire import WireError, send_frame

logger = logging.getLogger(__name__)

_ACCEPT_POLL_SECONDS = 0.2


class NetworkServerManager(ServerNetworkInterface):
    """Accepts clients, receives their packets on threads and queues them for the server."""

    MAX_CLIENTS = 100

    def __init__(self, port, host=""):
        self._running = threading.Event()
        self._running.set()
        self._packets = queue.SimpleQueue()
        self._disconnected = queue.SimpleQueue()
        self._clients = [None] * self.MAX_CLIENTS
        self._clients_lock = threading.Lock()

        self._listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            if os.name != "nt":
                self._listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            self._listener.bind((host, port))
            self._listener.listen()
        except OSError:
            self._listener.close()
            logger.error("Could not bind to port %s", port)
            raise
        self._listener.settimeout(_ACCEPT_POLL_SECONDS)
        self._port = self._listener.getsockname()[1]
        logger.info("Server is listening to port %s", self._port)

        self._acceptor = threading.Thread(target=self._accept_new_clients, daemon=True)
        self._acceptor.start()

    @property
    def port(self):
        """The port the server listens on."""
        return self._port

    @property
    def running(self):
        return self._running.is_set()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.stop()

    def pop_packet(self):
        try:
            return self._packets.get_nowait()
        except queue.Empty:
            return None

    def send_packet(self, packet, client_id):
        data = encode_packet(packet)
        with self._clients_lock:
            connection = self._clients[client_id] if 0 <= client_id < self.MAX_CLIENTS else None
            if connection is None:
                logger.error("No connected client with id %s", client_id)
                return
            try:
                send_frame(connection, data)
            except OSError as error:
                logger.error("Could not send packet to client %s: %s", client_id, error)

    def pop_disconnected_client(self):
        try:
            return self._disconnected.get_nowait()
        except queue.Empty:
            return None

    def stop(self):
        """Stop accepting clients and close every connection."""
        self._running.clear()
        self._listener.close()
        with self._clients_lock:
            connections = [connection for connection in self._clients if connection is not None]
        for connection in connections:
            try:
                connection.shutdown(socket.SHUT_RDWR)
            except OSError:
                pass
        if self._acceptor is not threading.current_thread():
            self._acceptor.join(timeout=1)

    def _add_client(self, connection):
        with self._clients_lock:
            for client_id, existing in enumerate(self._clients):
                if existing is None:
                    self._clients[client_id] = connection
                    return client_id
        return None

    def _accept_new_clients(self):
        while self._running.is_set():
            try:
                connection, _ = self._listener.accept()
            except socket.timeout:
                continue
            except OSError as error:
                if not self._running.is_set():
                    break
                logger.error("Could not accept connection: %s", error)
                continue

            connection.settimeout(None)
            client_id = self._add_client(connection)
            if client_id is None:
                logger.error("Max clients reached (%d)", self.MAX_CLIENTS)
                connection.close()
                continue

            logger.info("Client connected")
            threading.Thread(
                target=self._receive_from_client, args=(client_id, connection), daemon=True
            ).start()

    def _receive_from_client(self, client_id, connection):
        while self._running.is_set():
            try:
                packet = receive_packet(connection)
            except (OSError, WireError):
                break
            self._packets.put(PacketData(packet, client_id))

        self._disconnected.put(client_id)
        with self._clients_lock:
            if self._clients[client_id] is connection:
                self._clients[client_id] = None
        connection.close()