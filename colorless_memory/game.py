"""The client game: switches screens and routes server packets to them."""

from . import assets
from .assets import TextureType
from .constants import GameState
from .gui.lobby import LobbyGui
from .gui.menu import MenuGui
from .gui.play import GameGui


class Game:
    """One client: its current screen, its game data and its link to the server."""

    def __init__(self, game_manager, network, width, height):
        self._game_manager = game_manager
        self._network = network
        self._width = width
        self._height = height
        self._gui = None
        self._state = GameState.NONE
        self._on_quit = None
        self._background = None

        if assets.is_initialized():
            self._background = assets.get_texture(TextureType.BACKGROUND_MENU)

        self.set_state(GameState.MAIN_MENU)

    @property
    def state(self):
        return self._state

    @property
    def gui(self):
        return self._gui

    def check_inputs(self, event):
        if self._gui is not None:
            self._gui.check_inputs(event)

    def update(self, elapsed, mouse_position):
        """Update the screen, then handle every packet waiting from the server."""
        if self._gui is not None:
            self._gui.update(elapsed, mouse_position)

        while (packet := self._network.pop_packet()) is not None:
            self._game_manager.on_packet_received(packet)
            if self._gui is not None:
                self._gui.on_packet_received(packet)

    def set_state(self, state):
        """Switch to another screen; entering the lobby asks the server for a seat."""
        if self._state == state:
            return

        if state == GameState.MAIN_MENU:
            self._gui = MenuGui(self, self._game_manager, self._width, self._height)
        elif state == GameState.LOBBY:
            self._gui = LobbyGui(self, self._game_manager, self._width, self._height)
            self._game_manager.join_lobby()
            self._network.send_packet(self._game_manager.to_join_lobby_packet())
        elif state == GameState.GAME:
            self._gui = GameGui(self, self._game_manager, self._width, self._height)
        else:
            self._gui = None

        self._state = state

    def draw(self, surface):
        if self._background is not None:
            surface.blit(self._background, (0, 0))
        if self._gui is not None:
            self._gui.draw(surface)

    def send_packet(self, packet):
        self._network.send_packet(packet)

    def quit(self):
        if self._on_quit is not None:
            self._on_quit()

    def on_quit(self, callback):
        self._on_quit = callback