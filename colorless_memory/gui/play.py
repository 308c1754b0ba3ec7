"""Game screen: the board of cards, both players and whose turn it is."""

import functools

import pygame

from .. import assets
from ..constants import DEFAULT_ICON_INDEX, UNKNOWN_ICON_INDEX, GameState, deck_grid
from ..packets import CardInformationPacket, LeaveGamePacket
from ..playcard import PlayCard
from ..playerui import PlayerUi
from .base import Gui
from .button import Button
from .text import CustomText, Text, TextLine

YOUR_TURN_MESSAGE = "Your turn"
OPPONENT_TURN_MESSAGE = "Opponent's turn"
WIN_MESSAGE = "You win"
LOSE_MESSAGE = "You lose"
OPPONENT_LEFT_MESSAGE = "Other player leave"

_CARD_SPACING = 20.0
_FALLBACK_CARD_SIZE = (20.0, 20.0)
_SCORING_DELAY = 1.0
_MATCH_END_DELAY = 0.25
_MISMATCH_END_DELAY = 0.5


class GameGui(Gui):
    """Shows the cards, lets the player pick two per turn and keeps the score."""

    def __init__(self, game, game_manager, width, height):
        super().__init__()
        self._game = game
        self._game_manager = game_manager
        self._width = width
        self._height = height

        self.block_input = False
        self.game_over = False
        self._end_turn_timer = 0.0
        self._before_scoring_timer = 0.0

        game_data = game_manager.game
        columns, rows = deck_grid(game_data.deck_type)

        card_width, card_height = _FALLBACK_CARD_SIZE
        if assets.is_initialized():
            card_width, card_height = (
                float(v) for v in assets.get_card_icon(DEFAULT_ICON_INDEX).get_size()
            )
        x_offset = y_offset = _CARD_SPACING
        area_width = card_width * columns + x_offset * (columns - 1)
        area_height = card_height * rows + y_offset * (rows - 1)

        ratios = [
            limit / area
            for limit, area in ((width - 600, area_width), (height - 200, area_height))
            if area > 0
        ]
        scale = min(min(ratios, default=1.0), 1.0)

        card_width *= scale
        card_height *= scale
        x_offset *= scale
        y_offset *= scale
        area_width = card_width * columns + x_offset * (columns - 1)
        area_height = card_height * rows + y_offset * (rows - 1)

        start_x = (width - area_width) / 2
        start_y = (height - area_height) / 2
        if scale < 1:
            start_x -= x_offset

        self.play_cards = []
        for i in range(columns * rows):
            column, row = i % columns, i // columns
            card = PlayCard(game_data.deck_type, UNKNOWN_ICON_INDEX)
            card.set_position(
                (
                    start_x + column * (card_width + x_offset),
                    start_y + row * (card_height + y_offset),
                )
            )
            card.set_on_clicked(functools.partial(self._on_select_play_card, i))
            card.set_scale(scale)
            self.play_cards.append(card)

        self.texts.append(Text((width / 2, 100), [TextLine([CustomText("Game", size=50)])]))

        lobby = game_manager.lobby
        self.player1 = PlayerUi(True, (50, height / 2 - 200), True)
        self.player2 = PlayerUi(False, (width - 50, height / 2 - 200), True)
        self.player1.set_name(lobby.player1.name.as_string())
        self.player2.set_name(lobby.player2.name.as_string())
        self.player1.set_icon(lobby.player1.icon_index)
        self.player2.set_icon(lobby.player2.icon_index)
        self.player1.set_score(0)
        self.player2.set_score(0)

        self.your_turn = game_data.your_turn

        self.status_message = ""
        self.texts.append(Text())
        self._set_status(YOUR_TURN_MESSAGE if self.your_turn else OPPONENT_TURN_MESSAGE)

        leave_button = Button((width / 2, height - 100), (200, 50), centered=True)
        leave_button.set_text([TextLine([CustomText("LEAVE", size=30, bold=True)])])
        leave_button.set_on_click(self._leave)
        self.buttons.append(leave_button)

    def _set_status(self, message):
        self.status_message = message
        self.texts[1] = Text((self._width / 2, 150), [TextLine([CustomText(message, size=30)])])

    def _leave(self):
        self._game.send_packet(LeaveGamePacket())
        self._game.set_state(GameState.MAIN_MENU)

    def on_draw(self, surface):
        if not self.game_over:
            for card in self.play_cards:
                card.draw(surface)
        self.player1.draw(surface)
        self.player2.draw(surface)

    def on_check_inputs(self, event):
        if event.type != pygame.MOUSEBUTTONDOWN or getattr(event, "button", None) != 1:
            return
        for card in self.play_cards:
            if card.is_flipping():
                continue
            if card.is_hover() and not self.block_input:
                card.click()

    def on_update(self, elapsed, mouse_position):
        game_data = self._game_manager.game
        point = (int(mouse_position[0]), int(mouse_position[1]))
        for card in self.play_cards:
            card.update(elapsed)
            if card.is_flipping():
                continue
            if card.global_bounds().collidepoint(point):
                if not card.is_hover() and game_data.your_turn:
                    card.on_hover(True)
            elif card.is_hover():
                card.on_hover(False)

        self._update_scoring_timer(elapsed)
        self._update_end_timer(elapsed)

    def _update_scoring_timer(self, elapsed):
        if self._before_scoring_timer <= 0:
            return
        self._before_scoring_timer -= elapsed
        if self._before_scoring_timer > 0:
            return

        game_data = self._game_manager.game
        first = self.play_cards[game_data.card_index1]
        second = self.play_cards[game_data.card_index2]

        if first.icon_index() == second.icon_index():
            first.disable()
            second.disable()
            scorer_is_player1 = self.your_turn == game_data.is_first_player
            self._game_manager.increase_score(0 if scorer_is_player1 else 1)
            if scorer_is_player1:
                self.player1.set_score(game_data.player1_score)
            else:
                self.player2.set_score(game_data.player2_score)
            self._end_turn_timer = _MATCH_END_DELAY
        else:
            first.start_flip()
            second.start_flip()
            self._end_turn_timer = _MISMATCH_END_DELAY

    def _update_end_timer(self, elapsed):
        if self._end_turn_timer <= 0:
            return
        self._end_turn_timer -= elapsed
        if self._end_turn_timer > 0:
            return

        game_data = self._game_manager.game
        if game_data.player1_score + game_data.player2_score == len(self.play_cards) // 2:
            player1_win = game_data.player1_score > game_data.player2_score
            self._game_manager.end_turn()
            self.game_over = True
            won = player1_win == game_data.is_first_player
            self._set_status(WIN_MESSAGE if won else LOSE_MESSAGE)
        else:
            self._start_turn()

    def on_packet_received(self, packet):
        if isinstance(packet, CardInformationPacket):
            card_index = packet.card_index_in_deck
            self.play_cards[card_index].set_index(packet.icon_index)
            self._select_card(card_index)
        elif isinstance(packet, LeaveGamePacket):
            self.game_over = True
            self._set_status(OPPONENT_LEFT_MESSAGE)

    def _on_select_play_card(self, card_index):
        if self.play_cards[card_index].is_flipping():
            return
        if not self._game_manager.choose_a_card(card_index):
            return
        self._game.send_packet(CardInformationPacket(card_index, UNKNOWN_ICON_INDEX))

    def _select_card(self, card_index):
        self.play_cards[card_index].start_flip()
        if self._game_manager.game.card_index2 == card_index:
            self.block_input = True
            self._before_scoring_timer = _SCORING_DELAY

    def _start_turn(self):
        self.block_input = False
        self._game_manager.end_turn()
        self.your_turn = self._game_manager.game.your_turn

        if not self.your_turn:
            for card in self.play_cards:
                card.on_hover(False)

        if self.game_over:
            return
        self._set_status(YOUR_TURN_MESSAGE if self.your_turn else OPPONENT_TURN_MESSAGE)