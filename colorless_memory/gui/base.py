"""Base screen: buttons and texts, with hooks for the screens built on it."""

import pygame


class Gui:
    """A screen holding buttons and texts; subclasses draw and react through the hooks."""

    def __init__(self):
        self.buttons = []
        self.texts = []

    def draw(self, surface):
        """Draw the extra elements, then enabled buttons, then texts."""
        self.on_draw(surface)
        for button in self.buttons:
            if not button.is_disabled():
                button.draw(surface)
        for text in self.texts:
            text.draw(surface)

    def update(self, elapsed, mouse_position):
        """Animate enabled buttons and track which ones the mouse is over."""
        point = (int(mouse_position[0]), int(mouse_position[1]))
        for button in self.buttons:
            if button.is_disabled():
                continue
            button.update(elapsed)
            if button.global_bounds().collidepoint(point):
                if not button.is_hover():
                    button.on_start_hover()
            elif button.is_hover():
                button.on_end_hover()
        self.on_update(elapsed, mouse_position)

    def check_inputs(self, event):
        """Pass the event to the hook; a left click presses the first hovered button."""
        self.on_check_inputs(event)
        if event.type == pygame.MOUSEBUTTONDOWN and getattr(event, "button", None) == 1:
            for button in self.buttons:
                if button.is_hover() and not button.is_disabled():
                    button.on_click()
                    break

    def on_update(self, elapsed, mouse_position):
        """Hook called at the end of update."""

    def on_draw(self, surface):
        """Hook that draws extra elements before buttons and texts."""

    def on_check_inputs(self, event):
        """Hook called first for every input event."""

    def on_packet_received(self, packet):
        """Hook called for every packet from the server."""