import pygame
import pytest

from colorless_memory import assets
from colorless_memory.assets import CARD_ICON_COUNT, TextureType
from colorless_memory.constants import DeckType


@pytest.fixture(autouse=True)
def clean_assets():
    assets._reset()
    yield
    assets._reset()


def _write_png(path, size):
    path.parent.mkdir(parents=True, exist_ok=True)
    pygame.image.save(pygame.Surface(size), str(path))


@pytest.fixture
def data_dir(tmp_path):
    sizes = {}
    textures = tmp_path / "data" / "textures"
    _write_png(textures / "background.png", (8, 6))
    for i in range(3):
        _write_png(textures / "ui" / f"{i}.png", (4 + i, 4))
    for i in range(10):
        size = (i + 1, 2)
        sizes[f"card{i}"] = size
        _write_png(textures / "cards" / f"{i:02d}.png", size)
    for i in range(CARD_ICON_COUNT):
        size = (2, i + 1)
        sizes[f"icon{i}"] = size
        _write_png(textures / "icons" / f"{i:02d}.png", size)
    return tmp_path, sizes


def test_not_initialized_gives_empty_textures():
    assert assets.is_initialized() is False
    assert assets.get_texture(TextureType.BACKGROUND_MENU).get_size() == (0, 0)
    assert assets.get_card_icon(0).get_size() == (0, 0)


def test_initialize_loads_textures(data_dir):
    base, sizes = data_dir
    assets.initialize(base)
    assert assets.is_initialized() is True
    assert assets.get_texture(TextureType.BACKGROUND_MENU).get_size() == (8, 6)
    assert assets.get_texture(TextureType.SIMPLE_ICON_BACKGROUND).get_size() == (4, 4)
    assert assets.get_texture(TextureType.PLAYER2_ICON_BACKGROUND).get_size() == (6, 4)


def test_card_textures_by_deck(data_dir):
    base, sizes = data_dir
    assets.initialize(base)
    assert assets.get_card_texture(DeckType.DECK_3X2, False).get_size() == sizes["card0"]
    assert assets.get_card_texture(DeckType.DECK_3X2, True).get_size() == sizes["card1"]
    assert assets.get_card_texture(DeckType.DECK_7X2, True).get_size() == sizes["card3"]
    assert assets.get_card_texture(DeckType.DECK_10X5, False).get_size() == sizes["card8"]


def test_card_icons(data_dir):
    base, sizes = data_dir
    assets.initialize(base)
    for i in range(CARD_ICON_COUNT):
        assert assets.get_card_icon(i).get_size() == sizes[f"icon{i}"]


@pytest.mark.parametrize("index", [-1, CARD_ICON_COUNT])
def test_card_icon_out_of_range(index):
    with pytest.raises(IndexError):
        assets.get_card_icon(index)


def test_missing_files_give_empty_textures(tmp_path):
    assets.initialize(tmp_path)
    assert assets.is_initialized() is True
    assert assets.get_texture(TextureType.PLAYER1_ICON_BACKGROUND).get_size() == (0, 0)
    assert assets.get_card_texture(DeckType.DECK_6X5, True).get_size() == (0, 0)


def test_main_font_is_cached(tmp_path):
    assets.initialize(tmp_path)
    font = assets.get_main_font(18)
    assert font is assets.get_main_font(18)
    assert font is not assets.get_main_font(30)
    assert font.get_height() > 0