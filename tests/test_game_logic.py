import random

import pygame
import pytest

from combokey.game_logic import (
    ALLOWED_KEYS,
    KEY_SCALE,
    generate_random_sequence,
    random_key,
    setup_game_keys,
)
from combokey.key_button import FALLBACK_FRAME_HEIGHT, FALLBACK_FRAME_WIDTH, SHEETS_DIR


@pytest.mark.parametrize("current", ["A", "EMPTY1", "9", ""])
def test_random_key_differs_from_current(current):
    rng = random.Random(1234)
    for _ in range(300):
        key = random_key(current, rng)
        assert key != current
        assert key in ALLOWED_KEYS


def test_random_key_without_rng():
    assert random_key("A") in set(ALLOWED_KEYS) - {"A"}


def test_generated_keys_include_specials():
    seen = set(generate_random_sequence(3000, random.Random(7)))
    assert {"ARROWUP", "ARROWDOWN", "ARROWLEFT", "ARROWRIGHT", "EMPTY1"} <= seen
    assert seen <= set(ALLOWED_KEYS)
    assert len(ALLOWED_KEYS) == len(set(ALLOWED_KEYS))


@pytest.mark.parametrize("length", [0, 1, 7, 8])
def test_generate_sequence_length(length):
    sequence = generate_random_sequence(length, random.Random(5))
    assert len(sequence) == length
    assert all(key in ALLOWED_KEYS for key in sequence)


def test_generate_sequence_negative_is_empty():
    assert generate_random_sequence(-3, random.Random(5)) == []


def test_generate_sequence_is_seed_deterministic():
    first = generate_random_sequence(8, random.Random(42))
    second = generate_random_sequence(8, random.Random(42))
    assert first == second


def test_setup_game_keys_empty():
    assert setup_game_keys([], 756, 420) == []


def test_setup_game_keys_layout(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    sequence = ["A", "B", "C"]
    buttons = setup_game_keys(sequence, 756, 420)
    assert [b.name for b in buttons] == sequence
    assert all(b.scale == KEY_SCALE for b in buttons)
    assert all(b.current_frame == 0 for b in buttons)

    key_width = FALLBACK_FRAME_WIDTH * KEY_SCALE
    xs = [b.position[0] for b in buttons]
    assert [b - a for a, b in zip(xs, xs[1:])] == [key_width, key_width]
    left_margin = xs[0]
    right_margin = 756 - (xs[-1] + key_width)
    assert left_margin == pytest.approx(right_margin)


def test_setup_game_keys_vertical_position(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    buttons = setup_game_keys(["Z"], 756, 420)
    key_height = FALLBACK_FRAME_HEIGHT * KEY_SCALE
    assert buttons[0].position[1] == pytest.approx(420 / 2 - key_height / 2 + 15.0)
    assert len({b.position[1] for b in setup_game_keys(["A", "B"], 756, 420)}) == 1


def test_setup_game_keys_without_assets_uses_fallback(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    buttons = setup_game_keys(["A"], 756, 420)
    assert buttons[0].texture is None
    assert (buttons[0].frame_width, buttons[0].frame_height) == (
        FALLBACK_FRAME_WIDTH,
        FALLBACK_FRAME_HEIGHT,
    )


def test_setup_game_keys_loads_sheets(tmp_path, monkeypatch):
    sheet_path = tmp_path / SHEETS_DIR / "A.png"
    sheet_path.parent.mkdir(parents=True)
    pygame.image.save(pygame.Surface((78, 32)), str(sheet_path))
    monkeypatch.chdir(tmp_path)
    buttons = setup_game_keys(["A", "B"], 756, 420)
    assert buttons[0].texture is not None
    assert buttons[0].frame_width == 78 // 3
    assert buttons[1].texture is None