import pygame

from colorless_memory.gui.base import Gui
from colorless_memory.gui.button import Button


class RecordingGui(Gui):
    def __init__(self):
        super().__init__()
        self.updates = []
        self.events = []
        self.drawn = 0

    def on_update(self, elapsed, mouse_position):
        self.updates.append((elapsed, mouse_position))

    def on_check_inputs(self, event):
        self.events.append(event.type)

    def on_draw(self, surface):
        self.drawn += 1


def _left_click():
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(100, 100))


def _gui_with_button(clicks, name="PLAY", position=(100, 100)):
    gui = RecordingGui()
    button = Button(position, (50, 20), centered=True)
    button.set_on_click(lambda: clicks.append(name))
    gui.buttons.append(button)
    return gui, button


def test_hover_follows_mouse():
    gui, button = _gui_with_button([])
    gui.update(0.01, (100, 100))
    assert button.is_hover() is True
    gui.update(0.01, (0, 0))
    assert button.is_hover() is False


def test_on_update_hook_receives_arguments():
    gui = RecordingGui()
    button = Button((3, 4), (10, 10), centered=True)
    gui.buttons.append(button)
    Gui.update(gui, 0.5, (3, 4))
    assert gui.updates == [(0.5, (3, 4))]
    assert button.is_hover() is True


def test_left_click_presses_hovered_button():
    clicks = []
    gui, _ = _gui_with_button(clicks)
    gui.update(0.01, (100, 100))
    gui.check_inputs(_left_click())
    assert clicks == ["PLAY"]
    assert gui.events == [pygame.MOUSEBUTTONDOWN]


def test_click_without_hover_does_nothing():
    clicks = []
    gui, _ = _gui_with_button(clicks)
    gui.update(0.01, (0, 0))
    gui.check_inputs(_left_click())
    assert clicks == []


def test_right_click_does_nothing():
    clicks = []
    gui, _ = _gui_with_button(clicks)
    gui.update(0.01, (100, 100))
    gui.check_inputs(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(100, 100)))
    assert clicks == []
    assert len(gui.events) == 1


def test_disabled_button_is_not_pressed():
    clicks = []
    gui, button = _gui_with_button(clicks)
    gui.update(0.01, (100, 100))
    button.disable()
    gui.check_inputs(_left_click())
    assert clicks == []


def test_only_first_hovered_button_is_pressed():
    clicks = []
    gui, _ = _gui_with_button(clicks, "first")
    second = Button((100, 100), (50, 20), centered=True)
    second.set_on_click(lambda: clicks.append("second"))
    gui.buttons.append(second)
    gui.update(0.01, (100, 100))
    gui.check_inputs(_left_click())
    assert clicks == ["first"]


def test_draw_skips_disabled_buttons():
    gui, button = _gui_with_button([])
    rect = button.global_bounds()

    canvas = pygame.Surface((200, 200))
    canvas.fill((0, 0, 0))
    gui.draw(canvas)
    assert canvas.get_at((rect.left, rect.centery)) == pygame.Color(255, 255, 255, 255)
    assert gui.drawn == 1

    button.disable()
    canvas.fill((0, 0, 0))
    gui.draw(canvas)
    assert canvas.get_at((rect.left, rect.centery)) == pygame.Color(0, 0, 0, 255)
    assert gui.drawn == 2