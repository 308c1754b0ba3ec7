"""Clickable button with an animated hover highlight."""

import pygame

from .text import Text

HOVER_TIME = 0.15

WHITE = (255, 255, 255, 255)
YELLOW = (255, 255, 0, 255)


def lerp_color(start, end, ratio):
    """Blend two RGBA colours; each step towards end is truncated to an integer."""
    return tuple(s + int((e - s) * ratio) for s, e in zip(start, end))


class Button:
    """A rectangle with text, a hover animation and a click callback."""

    def __init__(self, position, size, centered=False):
        self.position = (float(position[0]), float(position[1]))
        self.size = (float(size[0]), float(size[1]))
        self.centered = centered

        self.background_color = (0, 0, 0, 120)
        self.hover_background_color = (0, 0, 0, 255)
        self.border_color = WHITE
        self.hover_border_color = WHITE
        self.selected_border_color = YELLOW
        self.border_thickness = -1.0
        self.hover_border_thickness = -2.0

        self.fill_color = self.background_color
        self.outline_color = self.border_color
        self.outline_thickness = self.border_thickness

        self.text = Text()
        self._hover = False
        self._disabled = False
        self._selected = False
        self._hover_time = 0.0
        self._on_click = None

    def update(self, elapsed):
        """Advance the hover animation by elapsed seconds."""
        if self._hover:
            self._hover_time = min(self._hover_time + elapsed, HOVER_TIME)
        else:
            self._hover_time = max(self._hover_time - elapsed, 0.0)

        ratio = self._hover_time / HOVER_TIME
        self.fill_color = lerp_color(self.background_color, self.hover_background_color, ratio)
        self.outline_thickness = (
            self.border_thickness + (self.hover_border_thickness - self.border_thickness) * ratio
        )
        if self._selected:
            self.outline_color = self.selected_border_color
        else:
            self.outline_color = lerp_color(self.border_color, self.hover_border_color, ratio)

    def on_click(self):
        if self._on_click is not None:
            self._on_click()

    def on_start_hover(self):
        self._hover = True

    def on_end_hover(self):
        self._hover = False

    def set_text(self, texts):
        x, y = self.position
        if not self.centered:
            x += self.size[0] / 2
            y += self.size[1] / 2
        self.text = Text((x, y), texts, self.size[0], self.centered)

    def global_bounds(self):
        x, y = self.position
        width, height = self.size
        if self.centered:
            x -= width / 2
            y -= height / 2
        return pygame.Rect(round(x), round(y), round(width), round(height))

    def is_hover(self):
        return self._hover

    def set_on_click(self, callback):
        self._on_click = callback

    def enable(self):
        self._disabled = False

    def disable(self):
        self._disabled = True

    def is_disabled(self):
        return self._disabled

    def toggle(self, value=None):
        """Select or unselect the button; with no value, flip the selection."""
        self._selected = (not self._selected) if value is None else bool(value)

    @property
    def selected(self):
        return self._selected

    def draw(self, surface):
        rect = self.global_bounds()
        if rect.width > 0 and rect.height > 0:
            fill = pygame.Surface(rect.size, pygame.SRCALPHA)
            fill.fill(self.fill_color)
            surface.blit(fill, rect.topleft)
            if self.outline_thickness:
                thickness = max(1, round(abs(self.outline_thickness)))
                pygame.draw.rect(surface, self.outline_color, rect, thickness)
        self.text.draw(surface)