import pygame
import pytest

from combokey.key_button import (
    FALLBACK_FRAME_HEIGHT,
    FALLBACK_FRAME_WIDTH,
    SHEETS_DIR,
    KeyButton,
)

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)


def _make_sheet(path, frame_w=10, frame_h=12):
    sheet = pygame.Surface((frame_w * 3, frame_h), pygame.SRCALPHA)
    for i, colour in enumerate((RED, GREEN, BLUE)):
        sheet.fill(colour, pygame.Rect(i * frame_w, 0, frame_w, frame_h))
    path.parent.mkdir(parents=True, exist_ok=True)
    pygame.image.save(sheet, str(path))
    return path


@pytest.fixture
def sheet(tmp_path):
    return _make_sheet(tmp_path / "sheet.png")


def test_load_sets_frame_size_from_sheet(sheet):
    button = KeyButton()
    button.load(sheet)
    assert button.texture is not None
    assert (button.frame_width, button.frame_height) == (10, 12)


def test_load_missing_file_uses_fallback(tmp_path):
    button = KeyButton()
    button.load(tmp_path / "missing.png")
    assert button.texture is None
    assert (button.frame_width, button.frame_height) == (
        FALLBACK_FRAME_WIDTH,
        FALLBACK_FRAME_HEIGHT,
    )


def test_load_missing_after_success_drops_texture(sheet, tmp_path):
    button = KeyButton()
    button.load(sheet)
    button.load(tmp_path / "missing.png")
    assert button.texture is None
    assert button.frame_width == FALLBACK_FRAME_WIDTH


def test_reload_texture_uses_name(tmp_path, monkeypatch):
    _make_sheet(tmp_path / SHEETS_DIR / "Q.png", frame_w=7, frame_h=9)
    monkeypatch.chdir(tmp_path)
    button = KeyButton(name="Q")
    button.reload_texture()
    assert button.texture is not None
    assert (button.frame_width, button.frame_height) == (7, 9)


def test_bounds_scale_frame_size(sheet):
    button = KeyButton(position=(10.0, 20.0), scale=2.0)
    button.load(sheet)
    x, y, w, h = button.bounds()
    assert (x, y) == (10.0, 20.0)
    assert w == button.frame_width * 2.0
    assert h == button.frame_height * 2.0


def test_update_click_inside(sheet):
    button = KeyButton(position=(10.0, 20.0), scale=2.0)
    button.load(sheet)
    assert button.update((10.0, 20.0), True, True) is True
    assert button.current_frame == 1


def test_update_hover_without_press(sheet):
    button = KeyButton(position=(10.0, 20.0), scale=2.0)
    button.load(sheet)
    assert button.update((15.0, 25.0), False, False) is False
    assert button.current_frame == 0


def test_update_right_edge_is_exclusive(sheet):
    button = KeyButton(position=(10.0, 20.0), scale=2.0)
    button.load(sheet)
    x, y, w, _ = button.bounds()
    assert button.update((x + w, y), True, True) is False
    assert button.current_frame == 0


def test_update_outside_resets_frame(sheet):
    button = KeyButton(position=(10.0, 20.0), scale=2.0)
    button.load(sheet)
    button.update((12.0, 22.0), True, False)
    assert button.current_frame == 1
    button.update((0.0, 0.0), True, False)
    assert button.current_frame == 0


def test_draw_uses_current_frame(sheet):
    button = KeyButton(position=(0.0, 0.0), scale=2.0)
    button.load(sheet)
    target = pygame.Surface((40, 40), pygame.SRCALPHA)
    button.draw(target)
    assert tuple(target.get_at((0, 0))) == RED
    button.current_frame = 1
    button.draw(target)
    assert tuple(target.get_at((19, 23))) == GREEN


def test_draw_scales_frame(sheet):
    button = KeyButton(position=(0.0, 0.0), scale=2.0)
    button.load(sheet)
    target = pygame.Surface((40, 40), pygame.SRCALPHA)
    button.draw(target)
    assert tuple(target.get_at((19, 23))) == RED
    assert tuple(target.get_at((20, 0)))[3] == 0


def test_unload_then_draw_leaves_surface_untouched(sheet):
    button = KeyButton()
    button.load(sheet)
    button.unload()
    assert button.texture is None
    target = pygame.Surface((40, 40), pygame.SRCALPHA)
    button.draw(target)
    assert tuple(target.get_at((0, 0)))[3] == 0