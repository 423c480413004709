"""Game state for the key-combo game: difficulty, fades and the combo round."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum, IntEnum

from combokey.game_logic import generate_random_sequence, setup_game_keys
from combokey.key_button import KeyButton

SCREEN_WIDTH = 756
SCREEN_HEIGHT = 420

TIME_BONUS = 1.0
MAX_SEQUENCE_LENGTH = 8
WILDCARD_KEY = "EMPTY1"
FADE_STEP = 0.02
ANIMATION_STEP = 0.05
PLUS_SPACING = 4.0

GREEN = (0, 228, 48)
ORANGE = (255, 161, 0)
RED = (230, 41, 55)


class Difficulty(IntEnum):
    """Difficulty levels, chosen with the "+" buttons on the menu."""

    EASY = 0
    MEDIUM = 1
    HARD = 2

    def max_time(self) -> float:
        """Seconds available on a full time bar at this difficulty."""
        return {Difficulty.EASY: 4.0, Difficulty.MEDIUM: 2.5, Difficulty.HARD: 1.0}[self]


class Outcome(Enum):
    """What a tick or a key press did to the round."""

    NONE = "none"
    HIT = "hit"
    COMBO = "combo"
    MISS = "miss"
    TIMEOUT = "timeout"


class DifficultyMenu:
    """The row of "+" buttons; each click adds one, the third click clears them."""

    def __init__(self, plus_button: KeyButton, screen_width: int = SCREEN_WIDTH) -> None:
        self.plus_button = plus_button
        self.screen_width = screen_width
        self.added: list[KeyButton] = []
        self.difficulty = Difficulty.EASY

    def _clear(self) -> None:
        for button in self.added:
            button.unload()
        self.added.clear()
        self.difficulty = Difficulty.EASY

    def _try_add_after(self, anchor: KeyButton, level: Difficulty) -> None:
        x, y, width, _ = anchor.bounds()
        button = KeyButton(
            name="PLUS",
            position=(x + width + PLUS_SPACING, y),
            scale=self.plus_button.scale,
        )
        button.reload_texture()
        new_x, _, new_width, _ = button.bounds()
        if new_x + new_width < self.screen_width:
            self.added.append(button)
            self.difficulty = level
        else:
            button.unload()

    def click(self) -> Difficulty:
        """Handle a click on any "+" button and return the new difficulty."""
        if self.difficulty is Difficulty.EASY:
            self._try_add_after(self.plus_button, Difficulty.MEDIUM)
        elif self.difficulty is Difficulty.MEDIUM:
            if len(self.added) != 1:
                self._clear()
            else:
                self._try_add_after(self.added[-1], Difficulty.HARD)
        else:
            self._clear()
        return self.difficulty

    def buttons(self) -> list[KeyButton]:
        """All "+" buttons currently shown, the permanent one first."""
        return [self.plus_button, *self.added]


@dataclass
class FadeTransition:
    """A black overlay that fades out to a scene change and back in."""

    fade: float = 0.0
    fading_out: bool = False
    fading_in: bool = False

    @property
    def busy(self) -> bool:
        return self.fading_out or self.fading_in

    def start_out(self) -> None:
        """Begin darkening the screen."""
        self.fading_out = True

    def start_in(self) -> None:
        """Jump to a black screen and begin revealing it."""
        self.fade = 1.0
        self.fading_in = True

    def step(self) -> bool:
        """Advance one frame; return True when a fade-out has just finished."""
        if self.fading_out:
            self.fade += FADE_STEP
            if self.fade >= 1.0:
                self.fade = 1.0
                self.fading_out = False
                self.fading_in = True
                return True
        elif self.fading_in:
            self.fade -= FADE_STEP
            if self.fade <= 0.0:
                self.fade = 0.0
                self.fading_in = False
        return False


@dataclass
class ComboGame:
    """One round of typing key sequences against a shrinking time bar."""

    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    rng: random.Random = field(default_factory=random.Random, repr=False)
    sequence: list[str] = field(default_factory=list)
    keys: list[KeyButton] = field(default_factory=list, repr=False)
    index: int = 0
    game_over: bool = False
    animating: bool = False
    animation_progress: float = 0.0
    max_time: float = Difficulty.EASY.max_time()
    current_time: float = Difficulty.EASY.max_time()
    combo_count: int = 0

    def _new_sequence(self, length: int) -> None:
        self.sequence = generate_random_sequence(length, self.rng)
        self.index = 0
        self.animating = True
        self.animation_progress = 0.0
        self.keys = setup_game_keys(self.sequence, self.screen_width, self.screen_height)

    def reset(self, difficulty: Difficulty, length: int | None = None) -> None:
        """Start a fresh round; without ``length`` the first sequence has 1 to 8 keys."""
        if length is None:
            length = 1 + self.rng.randrange(MAX_SEQUENCE_LENGTH)
        self.max_time = difficulty.max_time()
        self.current_time = self.max_time
        self.game_over = False
        self.combo_count = 0
        self._new_sequence(length)

    def tick(self, frame_time: float) -> Outcome:
        """Drain the time bar by ``frame_time`` seconds."""
        if self.game_over or self.animating:
            return Outcome.NONE
        self.current_time -= frame_time
        if self.current_time <= 0:
            self.current_time = 0.0
            self.game_over = True
            return Outcome.TIMEOUT
        return Outcome.NONE

    def press(self, key_name: str) -> Outcome:
        """Check ``key_name`` against the next key of the sequence."""
        if self.game_over or self.animating or self.index >= len(self.sequence):
            return Outcome.NONE

        expected = self.sequence[self.index]
        if expected != WILDCARD_KEY and key_name != expected:
            self.game_over = True
            return Outcome.MISS

        if self.index < len(self.keys):
            self.keys[self.index].current_frame = 1
        self.index += 1
        self.current_time = min(self.current_time + TIME_BONUS, self.max_time)

        if self.index >= len(self.sequence):
            self.combo_count += 1
            self._new_sequence(min(len(self.sequence) + 1, MAX_SEQUENCE_LENGTH))
            return Outcome.COMBO
        return Outcome.HIT

    def advance_animation(self) -> None:
        """Move the entry animation of a new sequence one frame forward."""
        if self.game_over or not self.animating:
            return
        self.animation_progress += ANIMATION_STEP
        if self.animation_progress >= 1.0:
            self.animation_progress = 1.0
            self.animating = False
            for key in self.keys:
                key.current_frame = 0

    def time_fraction(self) -> float:
        """Share of the time bar still left, from 0 to 1."""
        return self.current_time / self.max_time

    def time_bar_color(self) -> tuple[int, int, int]:
        """Colour of the time bar: red under a quarter, orange under half."""
        fraction = self.time_fraction()
        if fraction < 0.25:
            return RED
        if fraction < 0.5:
            return ORANGE
        return GREEN