"""Main menu: play, quit and choose an icon."""

import functools

from .. import assets
from ..assets import TextureType
from ..constants import DEFAULT_ICON_INDEX, GameState, IconType
from ..playerui import _TexturedRect
from .base import Gui
from .button import Button
from .text import CustomText, Text, TextLine

PLAYER_ICONS = tuple(IconType)
_FIRST_ICON_BUTTON = 2
_SHADOW_OFFSET = 5.0
_SHADOW_COLOR = (0, 0, 0, 100)


class MenuGui(Gui):
    """The first screen of the client."""

    def __init__(self, game, game_manager, width, height):
        super().__init__()
        self._game_manager = game_manager

        play_button = Button((width / 2, height * 3 / 4), (200, 50), centered=True)
        play_button.set_text([TextLine([CustomText("PLAY", size=24, bold=True)])])
        play_button.set_on_click(lambda: game.set_state(GameState.LOBBY))
        self.buttons.append(play_button)

        quit_button = Button((width / 2, height - 100), (200, 50), centered=True)
        quit_button.set_text([TextLine([CustomText("QUIT", size=24, bold=True)])])
        quit_button.set_on_click(game.quit)
        self.buttons.append(quit_button)

        width_space = width * 0.75
        x_start = width / 2 - width_space / 2 + 42
        step = width_space / len(PLAYER_ICONS)
        current_icon = game_manager.player.icon_index
        initialized = assets.is_initialized()
        if initialized:
            icon_size = tuple(float(v) for v in assets.get_card_icon(DEFAULT_ICON_INDEX).get_size())
        else:
            icon_size = (20.0, 20.0)

        self.icons = []
        self.icon_shadows = []
        self.backgrounds = []
        self.background_shadows = []

        for i, icon in enumerate(PLAYER_ICONS):
            button = Button(
                (x_start + i * step + icon_size[0] / 2, height / 2 + 100), (200, 50), centered=True
            )
            button.set_text([TextLine([CustomText(f"Icon {i + 1}", size=24)])])
            button.set_on_click(functools.partial(self._choose_icon, i))
            if current_icon == icon:
                button.toggle(True)
            self.buttons.append(button)

            if not initialized:
                for shapes in (self.icons, self.icon_shadows, self.backgrounds, self.background_shadows):
                    shapes.append(_TexturedRect())
                continue

            card_icon = assets.get_card_icon(icon)
            icon_background = assets.get_texture(TextureType.SIMPLE_ICON_BACKGROUND)
            x, y = x_start + i * step, height / 2 - 200
            self.icons.append(_TexturedRect(icon_size, (x, y), texture=card_icon))
            self.icon_shadows.append(
                _TexturedRect(
                    icon_size, (x, y + _SHADOW_OFFSET * 0.5), texture=card_icon, color=_SHADOW_COLOR
                )
            )
            self.backgrounds.append(_TexturedRect(icon_size, (x, y), texture=icon_background))
            self.background_shadows.append(
                _TexturedRect(
                    icon_size, (x, y + _SHADOW_OFFSET), texture=icon_background, color=_SHADOW_COLOR
                )
            )

        self.texts.append(
            Text((width / 2, 100), [TextLine([CustomText("Colorless Memory", size=50)])])
        )
        self.texts.append(
            Text((width / 2, height / 2 - 200), [TextLine([CustomText("Choose your icon", size=30)])])
        )

    def _choose_icon(self, chosen):
        for position, button in enumerate(self.buttons[_FIRST_ICON_BUTTON:]):
            button.toggle(position == chosen)
        self._game_manager.set_player_icon(PLAYER_ICONS[chosen])

    def on_draw(self, surface):
        for shapes in (self.background_shadows, self.backgrounds, self.icon_shadows, self.icons):
            for shape in shapes:
                shape.draw(surface)