"""Sequence generation and layout for the key-combo game."""

from __future__ import annotations

import random
from collections.abc import Sequence

from combokey.key_button import FALLBACK_FRAME_HEIGHT, FALLBACK_FRAME_WIDTH, KeyButton

ALLOWED_KEYS: tuple[str, ...] = (
    *"ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    *"0123456789",
    "ARROWUP",
    "ARROWLEFT",
    "ARROWDOWN",
    "ARROWRIGHT",
    "EMPTY1",
)

KEY_SCALE = 3.0
KEY_SPACING = 0.0
VERTICAL_OFFSET = 15.0


def random_key(current_key: str, rng: random.Random | None = None) -> str:
    """Return a random allowed key that differs from ``current_key``."""
    chooser = rng if rng is not None else random
    while True:
        key = chooser.choice(ALLOWED_KEYS)
        if key != current_key:
            return key


def generate_random_sequence(length: int, rng: random.Random | None = None) -> list[str]:
    """Return ``length`` random keys (an empty list for non-positive lengths)."""
    return [random_key("", rng) for _ in range(length)]


def setup_game_keys(
    sequence: Sequence[str], screen_width: int, screen_height: int
) -> list[KeyButton]:
    """Build buttons for ``sequence``, centred horizontally on the screen."""
    if not sequence:
        return []

    key_width = FALLBACK_FRAME_WIDTH * KEY_SCALE
    key_height = FALLBACK_FRAME_HEIGHT * KEY_SCALE
    count = len(sequence)
    total_width = count * key_width + max(0, count - 1) * KEY_SPACING
    start_x = (screen_width - total_width) / 2.0
    y = screen_height / 2.0 - key_height / 2.0 + VERTICAL_OFFSET

    buttons = []
    for index, name in enumerate(sequence):
        button = KeyButton(
            name=name,
            position=(start_x + (key_width + KEY_SPACING) * index, y),
            scale=KEY_SCALE,
        )
        button.reload_texture()
        button.current_frame = 0
        buttons.append(button)
    return buttons