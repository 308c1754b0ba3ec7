"""Textures and the font of the client, loaded from the game's data directory."""

import logging
from enum import Enum, auto
from pathlib import Path

import pygame

from .constants import DeckType

logger = logging.getLogger(__name__)

CARD_ICON_COUNT = 25
_CARD_TEXTURE_COUNT = 10
_FONT_FILE = "data/font/Retro Gaming.ttf"


class TextureType(Enum):
    BACKGROUND_MENU = auto()
    SIMPLE_ICON_BACKGROUND = auto()
    PLAYER1_ICON_BACKGROUND = auto()
    PLAYER2_ICON_BACKGROUND = auto()


_TEXTURE_FILES = {
    TextureType.BACKGROUND_MENU: "data/textures/background.png",
    TextureType.SIMPLE_ICON_BACKGROUND: "data/textures/ui/0.png",
    TextureType.PLAYER1_ICON_BACKGROUND: "data/textures/ui/1.png",
    TextureType.PLAYER2_ICON_BACKGROUND: "data/textures/ui/2.png",
}


def _empty_surface():
    return pygame.Surface((0, 0), pygame.SRCALPHA)


class _Store:
    def __init__(self):
        self.reset()

    def reset(self):
        self.initialized = False
        self.base_dir = Path(".")
        self.textures = {texture_type: _empty_surface() for texture_type in TextureType}
        self.card_textures = [_empty_surface() for _ in range(_CARD_TEXTURE_COUNT)]
        self.card_icons = [_empty_surface() for _ in range(CARD_ICON_COUNT)]
        self.fonts = {}


_store = _Store()


def _reset():
    _store.reset()


def _load_image(path):
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError) as error:
        logger.warning("Could not load image %s: %s", path, error)
        return _empty_surface()


def initialize(base_dir="."):
    """Load every texture below base_dir; a missing file leaves an empty texture."""
    base = Path(base_dir)
    _store.reset()
    _store.base_dir = base
    _store.initialized = True

    for texture_type, relative in _TEXTURE_FILES.items():
        _store.textures[texture_type] = _load_image(base / relative)
    _store.card_textures = [
        _load_image(base / f"data/textures/cards/{i:02d}.png") for i in range(_CARD_TEXTURE_COUNT)
    ]
    _store.card_icons = [
        _load_image(base / f"data/textures/icons/{i:02d}.png") for i in range(CARD_ICON_COUNT)
    ]


def is_initialized():
    return _store.initialized


def get_main_font(size):
    """Return the main font at the given size, or pygame's default font if it is missing."""
    if not pygame.font.get_init():
        pygame.font.init()
    font = _store.fonts.get(size)
    if font is None:
        path = _store.base_dir / _FONT_FILE
        if _store.initialized and path.is_file():
            font = pygame.font.Font(str(path), size)
        else:
            font = pygame.font.Font(None, size)
        _store.fonts[size] = font
    return font


def get_texture(texture_type):
    return _store.textures[TextureType(texture_type)]


def get_card_texture(deck_type, is_revealed=False):
    """Return the back (or the revealed face) of a deck's cards."""
    return _store.card_textures[int(DeckType(deck_type)) * 2 + (1 if is_revealed else 0)]


def get_card_icon(index):
    if not 0 <= index < CARD_ICON_COUNT:
        raise IndexError(f"card icon index out of range: {index}")
    return _store.card_icons[index]