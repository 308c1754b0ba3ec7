"""Entry points: the client, the server, and both together in one window."""

import argparse
import functools
import logging
import os
import time
from dataclasses import dataclass

import pygame

from . import assets
from .game import Game
from .gamemanager import GameManager
from .gameserver import Server
from .gui.text import CustomText, Text, TextLine
from .netclient import NetworkClientManager
from .netserver import NetworkServerManager
from .packets import register_my_packets

WIDTH = 1920
HEIGHT = 1080
TITLE = "Colorless Memory"
FRAME_RATE = 60
DEFAULT_HOST = "localhost"
DEFAULT_PORT = 55001
GAME_COUNT = 2

logger = logging.getLogger(__name__)


def default_username(environ=None):
    """Player name from USERNAME (or "default"), with its first letter in upper case."""
    if environ is None:
        environ = os.environ
    username = environ.get("USERNAME", "default")
    return username[:1].upper() + username[1:]


@functools.cache
def _register_packets():
    register_my_packets()


def _port(value):
    port = int(value)
    if not 0 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"port out of range: {value}")
    return port


def _parse_args(argv, description, *, client, server):
    parser = argparse.ArgumentParser(description=description)
    if client:
        parser.add_argument("--host", default=DEFAULT_HOST, help="server to connect to")
        parser.add_argument("--data-dir", default=".", help="directory holding data/")
    if server and not client:
        parser.add_argument("--host", default="", help="address to listen on")
    parser.add_argument("--port", type=_port, default=DEFAULT_PORT, help="server port")
    return parser.parse_args(argv)


def _setup_logging():
    logging.basicConfig(level=logging.INFO, format="%(message)s")


@dataclass
class _Window:
    open: bool = True

    def close(self):
        self.open = False


def _open_window():
    pygame.init()
    surface = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    return surface


def _game_number_text(index):
    return Text((10, 10), [TextLine([CustomText(f"Game {index}", size=18)])], -1, False)


def run_client(argv=None):
    """Connect to a server and play in a window. Return the exit status."""
    args = _parse_args(argv, "Play Colorless Memory.", client=True, server=False)
    _setup_logging()
    _register_packets()

    try:
        network = NetworkClientManager(args.host, args.port)
    except ConnectionError as error:
        logger.error("%s", error)
        return 1

    try:
        assets.initialize(args.data_dir)
        surface = _open_window()
        window = _Window()

        game_manager = GameManager()
        game = Game(game_manager, network, WIDTH, HEIGHT)
        game.on_quit(window.close)
        game_manager.set_username(default_username())

        clock = pygame.time.Clock()
        while window.open:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    window.close()
                    break
                game.check_inputs(event)

            elapsed = clock.tick(FRAME_RATE) / 1000
            game.update(elapsed, pygame.mouse.get_pos())
            surface.fill((0, 0, 0))
            game.draw(surface)
            pygame.display.flip()
    except ConnectionError as error:
        logger.error("%s", error)
        return 1
    finally:
        network.stop()
        pygame.quit()
    return 0


def run_server(argv=None):
    """Serve lobbies and games until interrupted. Return the exit status."""
    args = _parse_args(argv, "Run the Colorless Memory server.", client=False, server=True)
    _setup_logging()
    _register_packets()

    try:
        network = NetworkServerManager(args.port, args.host)
    except OSError:
        return 1

    server = Server(network)
    try:
        while network.running:
            server.update()
            time.sleep(0.001)
    except KeyboardInterrupt:
        pass
    finally:
        network.stop()
    return 0


def run_all_in_one(argv=None):
    """Run a server and two clients in one window; Tab switches between the clients."""
    args = _parse_args(argv, "Run a server and two clients together.", client=True, server=True)
    _setup_logging()
    _register_packets()
    assets.initialize(args.data_dir)

    try:
        server_network = NetworkServerManager(args.port)
    except OSError:
        return 1
    server = Server(server_network)

    networks = []
    try:
        for _ in range(GAME_COUNT):
            networks.append(NetworkClientManager(args.host, server_network.port))

        surface = _open_window()
        window = _Window()

        game_managers = [GameManager() for _ in range(GAME_COUNT)]
        games = [
            Game(manager, network, WIDTH, HEIGHT)
            for manager, network in zip(game_managers, networks)
        ]
        for game in games:
            game.on_quit(window.close)

        username = default_username()
        for manager in game_managers:
            manager.set_username(username)

        clock = pygame.time.Clock()
        game_index = 0
        game_number = _game_number_text(game_index)

        while window.open:
            elapsed = clock.tick(FRAME_RATE) / 1000
            server.update()

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    window.close()
                    break
                if event.type == pygame.KEYDOWN and event.key == pygame.K_TAB:
                    game_index = (game_index + 1) % len(games)
                    game_number = _game_number_text(game_index)
                games[game_index].check_inputs(event)

            mouse_position = pygame.mouse.get_pos()
            for game in games:
                game.update(elapsed, mouse_position)

            surface.fill((0, 0, 0))
            games[game_index].draw(surface)
            game_number.draw(surface)
            pygame.display.flip()
    except ConnectionError as error:
        logger.error("%s", error)
        return 1
    finally:
        for network in networks:
            network.stop()
        server_network.stop()
        pygame.quit()
    return 0