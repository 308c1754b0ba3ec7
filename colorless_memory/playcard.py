"""A card on the game board, with its flip animation."""

import pygame

from . import assets
from .constants import UNKNOWN_ICON_INDEX

REVEAL_DURATION = 0.5

_WHITE = (255, 255, 255, 255)
_IDLE_COLOR = (200, 200, 200, 255)
_SHADOW_COLOR = (0, 0, 0, 100)
_SHADOW_OFFSET = 5


def _empty_surface():
    return pygame.Surface((0, 0), pygame.SRCALPHA)


def _tint(image, color):
    """Multiply an image by an RGBA colour."""
    if tuple(color) == _WHITE:
        return image
    tinted = pygame.Surface(image.get_size(), pygame.SRCALPHA)
    tinted.blit(image, (0, 0))
    tinted.fill(color, special_flags=pygame.BLEND_RGBA_MULT)
    return tinted


def _blit_sprite(surface, texture, position, origin, scale, color):
    """Draw a texture scaled around an origin, the way a positioned sprite is drawn."""
    width, height = texture.get_size()
    scale_x, scale_y = scale
    scaled_width = round(abs(width * scale_x))
    scaled_height = round(abs(height * scale_y))
    if scaled_width == 0 or scaled_height == 0:
        return
    image = pygame.transform.scale(texture, (scaled_width, scaled_height))
    if scale_x < 0 or scale_y < 0:
        image = pygame.transform.flip(image, scale_x < 0, scale_y < 0)
    image = _tint(image, color)
    x = position[0] - origin[0] * scale_x
    y = position[1] - origin[1] * scale_y
    if scale_x < 0:
        x -= scaled_width
    if scale_y < 0:
        y -= scaled_height
    surface.blit(image, (round(x), round(y)))


class PlayCard:
    """A card that can be hovered, clicked and flipped to show its icon."""

    def __init__(self, deck_type, index):
        self._index = index
        self._position = (0.0, 0.0)
        self._scale = (1.0, 1.0)
        self.color = _IDLE_COLOR
        self._hover = False
        self._disabled = False
        self._revealed = False
        self._reveal_time = 0.0
        self._on_click = None

        self._hidden_texture = _empty_surface()
        self._card_texture = _empty_surface()
        self._icon_texture = _empty_surface()

        if not assets.is_initialized():
            return

        self._hidden_texture = assets.get_card_texture(deck_type, False)
        self._card_texture = assets.get_card_texture(deck_type, True)
        if index != UNKNOWN_ICON_INDEX:
            self._icon_texture = assets.get_card_icon(index)

    def update(self, elapsed):
        """Advance the flip animation by elapsed seconds."""
        if self._reveal_time <= 0:
            return
        self._reveal_time -= elapsed
        if self._reveal_time <= 0:
            self._reveal_time = 0.0
            self._revealed = not self._revealed
            self.on_hover(self._hover)

    def on_hover(self, hover):
        if self._disabled or self._revealed:
            return
        self._hover = bool(hover)
        self.color = _WHITE if hover else _IDLE_COLOR

    def set_index(self, index):
        self._index = index
        self._icon_texture = (
            _empty_surface() if index == UNKNOWN_ICON_INDEX else assets.get_card_icon(index)
        )

    def set_on_clicked(self, callback):
        self._on_click = callback

    def set_position(self, position):
        self._position = (float(position[0]), float(position[1]))

    def set_scale(self, scale):
        self._scale = (float(scale), float(scale))

    def start_flip(self):
        self._reveal_time = REVEAL_DURATION
        self.color = _WHITE

    def click(self):
        if self._on_click is not None:
            self._on_click()

    def disable(self):
        self._on_click = None
        self._disabled = True
        self.color = _WHITE

    def icon_index(self):
        return self._index

    def is_hover(self):
        return self._hover

    def is_revealed(self):
        return self._revealed

    def is_flipping(self):
        return self._reveal_time > 0

    def global_bounds(self):
        scale_x, scale_y = self._scale
        card_width, card_height = self._card_texture.get_size()
        left = (
            self._position[0]
            + self._hidden_texture.get_width() / 2
            - card_width / 2 * scale_x
        )
        return pygame.Rect(
            round(left),
            round(self._position[1]),
            round(card_width * scale_x),
            round(card_height * scale_y),
        )

    def draw(self, surface):
        half_width = self._hidden_texture.get_width() / 2
        anchor = (self._position[0] + half_width, self._position[1])
        origin = (half_width, 0.0)
        shadow_drop = _SHADOW_OFFSET * self._scale[1]

        in_animation = self._reveal_time > 0
        progress = 1 - self._reveal_time / REVEAL_DURATION
        scale = self._scale
        show_face = self._revealed
        if in_animation:
            scale_x = 1 - 2 * progress
            scale = (self._scale[0] * abs(scale_x), self._scale[1])
            if scale_x <= 0:
                show_face = not self._revealed

        texture = self._card_texture if show_face else self._hidden_texture
        _blit_sprite(
            surface, texture, (anchor[0], anchor[1] + shadow_drop), origin, scale, _SHADOW_COLOR
        )
        _blit_sprite(surface, texture, anchor, origin, scale, self.color)

        display_icon = self._index != UNKNOWN_ICON_INDEX
        if display_icon and self._revealed and in_animation and progress > 0.5:
            display_icon = False
        if display_icon and not self._revealed and (not in_animation or progress < 0.5):
            display_icon = False
        if not display_icon:
            return

        icon_half = self._icon_texture.get_width() / 2
        icon_anchor = (self._position[0] + icon_half, self._position[1])
        icon_origin = (icon_half, 0.0)
        _blit_sprite(
            surface,
            self._icon_texture,
            (icon_anchor[0], icon_anchor[1] + shadow_drop),
            icon_origin,
            scale,
            _SHADOW_COLOR,
        )
        _blit_sprite(surface, self._icon_texture, icon_anchor, icon_origin, scale, self.color)