"""Two stacked cards picturing a deck in the lobby."""

from . import assets
from .playerui import _TexturedRect

_SCALE = 0.3
_STACK_OFFSET = 3.0


class DeckIcon:
    """Two copies of a deck's card back, the second one offset behind the first."""

    def __init__(self):
        self.card1 = _TexturedRect()
        self.card2 = _TexturedRect()

    def set_texture(self, deck_type):
        if not assets.is_initialized():
            return
        texture = assets.get_card_texture(deck_type, False)
        size = tuple(float(v) for v in texture.get_size())
        for card in (self.card1, self.card2):
            card.texture = texture
            card.size = size
            card.scale = (_SCALE, _SCALE)

    def set_position(self, position):
        """Place the icon with its top edge centred on position."""
        x = position[0] - self.card1.size[0] / 2 * self.card1.scale[0]
        y = position[1]
        self.card1.position = (x, y)
        self.card2.position = (x + _STACK_OFFSET, y + _STACK_OFFSET)

    def draw(self, surface):
        self.card2.draw(surface)
        self.card1.draw(surface)