"""Lobby screen: wait for an opponent, choose a deck and start the game."""

import functools

from ..constants import DeckType, GameState, deck_label
from ..deckicon import DeckIcon
from ..packets import (
    ChangeDeckPacket,
    LeaveLobbyPacket,
    LobbyInformationPacket,
    StartGamePacket,
)
from ..playerui import PlayerUi
from .base import Gui
from .button import Button
from .text import CustomText, Text, TextLine

WAITING_MESSAGE = "Waiting for opponent..."
READY_MESSAGE = "Ready to start !"

_LAUNCH_BUTTON = 0
_FIRST_DECK_BUTTON = 2
_DECK_ICON_SIZE = (210.0, 200.0)


class LobbyGui(Gui):
    """Shows both players; the host picks the deck and starts the game."""

    def __init__(self, game, game_manager, width, height):
        super().__init__()
        self._game = game
        self._game_manager = game_manager
        self._width = width
        self._height = height

        launch_button = Button((width / 2, height * 3 / 4), (300, 50), centered=True)
        launch_button.set_text([TextLine([CustomText("START GAME", size=30, bold=True)])])
        launch_button.set_on_click(self._launch)
        launch_button.disable()
        self.buttons.append(launch_button)

        leave_button = Button((width / 2, height - 100), (200, 50), centered=True)
        leave_button.set_text([TextLine([CustomText("LEAVE", size=24, bold=True)])])
        leave_button.set_on_click(self._leave)
        self.buttons.append(leave_button)

        self.texts.append(Text((width / 2, 100), [TextLine([CustomText("Lobby", size=50)])]))
        self.status_message = ""
        self.texts.append(Text())
        self._set_status(WAITING_MESSAGE)

        self.player1 = PlayerUi(True, (100, height / 2 - 200), False)
        self.player2 = PlayerUi(False, (width - 100, height / 2 - 200), False)

        icon_width, icon_height = _DECK_ICON_SIZE
        decks = list(DeckType)
        start_x = width / 2 - len(decks) * icon_width / 2
        start_y = height / 2 + 100
        self.deck_icons = []
        for i, deck in enumerate(decks):
            x = start_x + i * icon_width
            deck_icon = DeckIcon()
            deck_icon.set_texture(deck)
            deck_icon.set_position((x + icon_width / 2, start_y - 50))
            self.deck_icons.append(deck_icon)

            button = Button((x + icon_width / 2, start_y + icon_height / 2), (180, 50), centered=True)
            button.set_text([TextLine([CustomText(f"Deck {deck_label(deck)}", size=20)])])
            button.set_on_click(functools.partial(self._choose_deck, deck))
            if deck == game_manager.lobby.deck_type:
                button.toggle(True)
            button.disable()
            self.buttons.append(button)

    def _set_status(self, message):
        self.status_message = message
        self.texts[1] = Text(
            (self._width / 2, self._height / 2), [TextLine([CustomText(message, size=30)])]
        )

    def _launch(self):
        self._game.send_packet(StartGamePacket())
        launch_button = self.buttons[_LAUNCH_BUTTON]
        launch_button.set_text([TextLine([CustomText("STARTING...", size=30, bold=True)])])
        launch_button.set_on_click(lambda: None)

    def _leave(self):
        self._game.send_packet(LeaveLobbyPacket())
        self._game.set_state(GameState.MAIN_MENU)

    def _choose_deck(self, deck):
        self._game_manager.change_deck(deck)
        for position, button in enumerate(self.buttons[_FIRST_DECK_BUTTON:]):
            button.toggle(position == int(deck))
        self._game.send_packet(ChangeDeckPacket(deck))

    def on_packet_received(self, packet):
        if isinstance(packet, StartGamePacket):
            self._game.set_state(GameState.GAME)
        elif isinstance(packet, LobbyInformationPacket):
            lobby = self._game_manager.lobby
            if lobby.waiting_for_opponent:
                self.buttons[_LAUNCH_BUTTON].disable()
                self._set_status(WAITING_MESSAGE)
            else:
                host_controls = [self.buttons[_LAUNCH_BUTTON], *self.buttons[_FIRST_DECK_BUTTON:]]
                for button in host_controls:
                    if lobby.is_host:
                        button.enable()
                    else:
                        button.disable()
                self._set_status(READY_MESSAGE)

            self.player1.set_icon(lobby.player1.icon_index)
            self.player1.set_name(lobby.player1.name.as_string())
            self.player2.set_icon(lobby.player2.icon_index)
            self.player2.set_name(lobby.player2.name.as_string())

    def on_draw(self, surface):
        lobby = self._game_manager.lobby
        if lobby.player1.name.as_string():
            self.player1.draw(surface)
        if lobby.player2.name.as_string():
            self.player2.draw(surface)
        if lobby.is_host and not lobby.waiting_for_opponent:
            for deck_icon in self.deck_icons:
                deck_icon.draw(surface)