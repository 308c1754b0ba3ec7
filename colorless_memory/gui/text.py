"""Multi-line styled text laid out from a position."""

import dataclasses
from dataclasses import dataclass, field

import pygame

from .. import assets

WHITE = (255, 255, 255, 255)


@dataclass
class CustomText:
    """A run of text with one colour, size and style."""

    text: str = ""
    color: tuple = WHITE
    size: int = 12
    bold: bool = False
    italic: bool = False

    def render(self):
        """Render to a surface; without loaded assets there is nothing to show."""
        if not assets.is_initialized():
            return pygame.Surface((0, 0), pygame.SRCALPHA)
        font = assets.get_main_font(self.size)
        bold, italic = font.get_bold(), font.get_italic()
        font.set_bold(self.bold)
        font.set_italic(self.italic)
        try:
            return font.render(self.text, True, self.color)
        finally:
            font.set_bold(bold)
            font.set_italic(italic)


@dataclass
class TextLine:
    """Runs of text shown one after another on a line."""

    texts: list = field(default_factory=list)


@dataclass
class _Placed:
    text: CustomText
    surface: pygame.Surface
    position: tuple
    origin: tuple


class Text:
    """Lines of text; when centered, each run is centered on its position."""

    def __init__(self, position=(0, 0), lines=(), max_x=-1, centered=True):
        self.centered = centered
        self._placed = []

        x, y = position
        base_x = x
        for line in lines:
            max_height = 0
            for custom_text in line.texts:
                surface = custom_text.render()
                width, height = surface.get_size()
                origin = (width / 2, height * 0.75) if centered else (0, 0)

                if max_x > 0 and x - base_x + width > max_x:
                    x = base_x
                    y += max_height * 1.5

                self._placed.append(_Placed(custom_text, surface, (x, y), origin))
                x += width + custom_text.size // 5
                max_height = max(max_height, height)

            y += max_height * 1.5
            x = base_x

    def update(self, elapsed):
        """Hook for text that changes over time; plain text stays as it is."""

    def set_color(self, color):
        for placed in self._placed:
            placed.text = dataclasses.replace(placed.text, color=color)
            placed.surface = placed.text.render()

    def draw(self, surface):
        for placed in self._placed:
            x, y = placed.position
            ox, oy = placed.origin
            surface.blit(placed.surface, (round(x - ox), round(y - oy)))