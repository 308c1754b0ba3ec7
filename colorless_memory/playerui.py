"""A player's icon, name and score as shown in the lobby and the game."""

from dataclasses import dataclass
from typing import Optional

import pygame

from . import assets
from .assets import TextureType
from .constants import DEFAULT_ICON_INDEX
from .gui.text import CustomText, Text, TextLine
from .playcard import _tint

ICON_SIZE = (100.0, 100.0)
_SHADOW_OFFSET = 5.0
_SHADOW_COLOR = (0, 0, 0, 100)
_TEXT_SIZE = 20


@dataclass
class _TexturedRect:
    """A rectangle filled with a colour or a stretched, tinted texture."""

    size: tuple = (0.0, 0.0)
    position: tuple = (0.0, 0.0)
    scale: tuple = (1.0, 1.0)
    texture: Optional[pygame.Surface] = None
    color: tuple = (255, 255, 255, 255)

    def bounds(self):
        x0, y0 = self.position
        x1 = x0 + self.size[0] * self.scale[0]
        y1 = y0 + self.size[1] * self.scale[1]
        return pygame.Rect(
            round(min(x0, x1)), round(min(y0, y1)), round(abs(x1 - x0)), round(abs(y1 - y0))
        )

    def draw(self, surface):
        rect = self.bounds()
        if rect.width <= 0 or rect.height <= 0:
            return
        if self.texture is None:
            image = pygame.Surface(rect.size, pygame.SRCALPHA)
            image.fill(self.color)
        else:
            if self.texture.get_width() == 0 or self.texture.get_height() == 0:
                return
            image = pygame.transform.scale(self.texture, rect.size)
            image = pygame.transform.flip(image, self.scale[0] < 0, self.scale[1] < 0)
            image = _tint(image, self.color)
        surface.blit(image, rect.topleft)


def _label(position, text):
    return Text(position, [TextLine([CustomText(text, size=_TEXT_SIZE)])])


class PlayerUi:
    """Icon on its background with the name below; player 2 is mirrored leftwards."""

    def __init__(self, is_player1=True, position=(0.0, 0.0), display_score=False):
        x, y = float(position[0]), float(position[1])
        mirror = (1.0, 1.0) if is_player1 else (-1.0, 1.0)

        self.icon = _TexturedRect(ICON_SIZE, (x, y), mirror)
        self.icon_shadow = _TexturedRect(
            ICON_SIZE, (x, y + _SHADOW_OFFSET * 0.5), mirror, color=_SHADOW_COLOR
        )
        self.background = _TexturedRect(ICON_SIZE, (x, y), mirror)
        self.background_shadow = _TexturedRect(
            ICON_SIZE, (x, y + _SHADOW_OFFSET), mirror, color=_SHADOW_COLOR
        )

        icon_size = ICON_SIZE
        if assets.is_initialized():
            default_icon = assets.get_card_icon(DEFAULT_ICON_INDEX)
            background = assets.get_texture(
                TextureType.PLAYER1_ICON_BACKGROUND
                if is_player1
                else TextureType.PLAYER2_ICON_BACKGROUND
            )
            icon_size = tuple(float(v) for v in default_icon.get_size())
            self.icon.texture = default_icon
            self.icon_shadow.texture = default_icon
            self.background.texture = background
            self.background_shadow.texture = background

        width, height = icon_size
        name_x = x + width / 2
        if not is_player1:
            name_x -= width
        self._name_position = (name_x, y + height * 0.875)

        self._score_position = (0.0, 0.0)
        self.score_label = ""
        if display_score:
            score_x = x + width / 2
            if not is_player1:
                score_x -= width
            self._score_position = (score_x, y + height * 0.125)
            self.score_label = "0"

        self.name_label = ""
        self._name_text = _label(self._name_position, self.name_label)
        self._score_text = _label(self._score_position, self.score_label)

    def set_name(self, name):
        self.name_label = name
        self._name_text = _label(self._name_position, name)

    def set_score(self, score):
        self.score_label = f"Score: {score}"
        self._score_text = _label(self._score_position, self.score_label)

    def set_icon(self, icon_index):
        if not assets.is_initialized():
            return
        texture = assets.get_card_icon(icon_index)
        self.icon.texture = texture
        self.icon_shadow.texture = texture

    def draw(self, surface):
        self.background_shadow.draw(surface)
        self.background.draw(surface)
        self.icon_shadow.draw(surface)
        self.icon.draw(surface)
        self._name_text.draw(surface)
        self._score_text.draw(surface)