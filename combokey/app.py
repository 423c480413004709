"""Window, input and drawing for the key-combo game."""

from __future__ import annotations

import argparse
import os
import random
from collections.abc import Iterable
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from combokey.game import (  # noqa: E402
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    ComboGame,
    DifficultyMenu,
    FadeTransition,
    Outcome,
)
from combokey.game_logic import random_key  # noqa: E402
from combokey.key_button import KeyButton  # noqa: E402

TITLE = "Combo Key"
TARGET_FPS = 60
SOUNDS_DIR = Path("assets/sounds")
BACKGROUND_PATH = Path("assets/others/bg.png")
ICON_PATH = Path("assets/keys/dark/keys/C.png")

MENU_START_X = 153.5
MENU_TITLE_Y = 80.0
MENU_SPACING = 52.0
MENU_KEY_SCALE = 2.5
MENU_BUTTON_SCALE = 4.0

RAYWHITE = (245, 245, 245)
WHITE = (255, 255, 255)
LIGHTGRAY = (200, 200, 200)
DARKGRAY = (80, 80, 80)
TEXT_RED = (230, 41, 55)
BLACK = (0, 0, 0)

_ARROWS = {
    pygame.K_RIGHT: "ARROWRIGHT",
    pygame.K_LEFT: "ARROWLEFT",
    pygame.K_DOWN: "ARROWDOWN",
    pygame.K_UP: "ARROWUP",
}
_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_DIGITS = "0123456789"
_KEY_NAMES = {
    **{pygame.K_a + offset: letter for offset, letter in enumerate(_LETTERS)},
    **{pygame.K_0 + offset: digit for offset, digit in enumerate(_DIGITS)},
    **_ARROWS,
}
_PRIORITY = [*_LETTERS, *_DIGITS, *_ARROWS.values()]


def key_name_for(key_code: int) -> str | None:
    """Name of the game key for a pygame key code, or None if it is not one."""
    return _KEY_NAMES.get(key_code)


def _pick_key(names: Iterable[str]) -> str | None:
    """Choose the key that counts when several are pressed in one frame."""
    return min(names, key=_PRIORITY.index, default=None)


class _Sounds:
    """Game sound effects; silent when audio or the files are unavailable."""

    NAMES = ("theme", "key_1", "key_2", "key_3", "combo", "start", "fail")

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng
        self._sounds: dict[str, pygame.mixer.Sound] = {}
        try:
            pygame.mixer.init()
        except pygame.error:
            return
        for name in self.NAMES:
            try:
                self._sounds[name] = pygame.mixer.Sound(os.fspath(SOUNDS_DIR / f"{name}.wav"))
            except (pygame.error, OSError):
                pass

    def play(self, name: str) -> None:
        sound = self._sounds.get(name)
        if sound is not None:
            sound.play()

    def play_key(self) -> None:
        self.play(self._rng.choice(("key_1", "key_2", "key_3")))

    def close(self) -> None:
        self._sounds.clear()
        if pygame.mixer.get_init():
            pygame.mixer.quit()


def _load_image(path: Path) -> pygame.Surface | None:
    try:
        return pygame.image.load(os.fspath(path))
    except (pygame.error, OSError):
        return None


def _menu_key(name: str, position: tuple[float, float], scale: float) -> KeyButton:
    button = KeyButton(name=name, position=position, scale=scale)
    button.reload_texture()
    return button


def _draw_frame(surface: pygame.Surface, key: KeyButton, frame: int, alpha: float) -> None:
    if key.texture is None:
        return
    src = pygame.Rect(frame * key.frame_width, 0, key.frame_width, key.frame_height)
    size = (round(key.frame_width * key.scale), round(key.frame_height * key.scale))
    image = pygame.transform.scale(key.texture.subsurface(src), size)
    if alpha < 1.0:
        image.set_alpha(round(alpha * 255))
    x, y = key.position
    surface.blit(image, (round(x), round(y)))


def _draw_centered_text(
    surface: pygame.Surface, font: pygame.font.Font, text: str, y: float, color
) -> None:
    rendered = font.render(text, True, color)
    surface.blit(rendered, (SCREEN_WIDTH // 2 - rendered.get_width() // 2, round(y)))


def _draw_round(surface: pygame.Surface, game: ComboGame, font: pygame.font.Font) -> None:
    bar_width = SCREEN_WIDTH * 0.6
    bar_height = 20.0
    bar_x = (SCREEN_WIDTH - bar_width) / 2.0
    bar_y = 20.0
    pygame.draw.rect(surface, LIGHTGRAY, pygame.Rect(bar_x, bar_y, bar_width, bar_height))
    filled = bar_width * game.time_fraction()
    pygame.draw.rect(surface, game.time_bar_color(), pygame.Rect(bar_x, bar_y, filled, bar_height))
    pygame.draw.rect(surface, DARKGRAY, pygame.Rect(bar_x, bar_y, bar_width, bar_height), 2)

    _draw_centered_text(surface, font, f"Combo: {game.combo_count}", bar_y + bar_height + 5, WHITE)

    for position, key in enumerate(game.keys):
        entering = game.animating and position >= game.index
        alpha = game.animation_progress if entering else 1.0
        if entering:
            frame = 0
        elif position < game.index:
            frame = 1
        else:
            frame = key.current_frame
        _draw_frame(surface, key, frame, alpha)


def _run() -> None:
    rng = random.Random()
    icon = _load_image(ICON_PATH)
    if icon is not None:
        pygame.display.set_icon(icon)
    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    pygame.display.set_caption(TITLE)

    sounds = _Sounds(rng)
    sounds.play("theme")

    background = _load_image(BACKGROUND_PATH)
    if background is not None:
        factor = SCREEN_WIDTH / background.get_width()
        size = (round(background.get_width() * factor), round(background.get_height() * factor))
        background = pygame.transform.smoothscale(background.convert(), size)

    big_font = pygame.font.Font(None, 48)
    font = pygame.font.Font(None, 24)
    clock = pygame.time.Clock()

    title_y = MENU_TITLE_Y + 10
    title_keys = [
        _menu_key(name, (MENU_START_X + MENU_SPACING * i, title_y), MENU_KEY_SCALE)
        for i, name in enumerate("COMBO")
    ] + [
        _menu_key(name, (MENU_START_X + MENU_SPACING * (i + 5) + 40.0, title_y), MENU_KEY_SCALE)
        for i, name in enumerate("KEY")
    ]
    enter_key = _menu_key(
        "ENTER",
        (MENU_START_X + MENU_SPACING * 5 + 16.0, MENU_TITLE_Y + 88),
        MENU_BUTTON_SCALE + 0.5,
    )
    backspace_key = _menu_key("BACKSPACE", (MENU_START_X, MENU_TITLE_Y + 88), MENU_BUTTON_SCALE)
    menu = DifficultyMenu(
        _menu_key("PLUS", (MENU_START_X, MENU_TITLE_Y + 199), MENU_KEY_SCALE), SCREEN_WIDTH
    )

    fade = FadeTransition()
    game = ComboGame(SCREEN_WIDTH, SCREEN_HEIGHT, rng)
    started = False

    try:
        while True:
            frame_time = clock.tick(TARGET_FPS) / 1000.0
            pressed: set[int] = set()
            mouse_pressed = False
            quit_requested = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    quit_requested = True
                elif event.type == pygame.KEYDOWN:
                    pressed.add(event.key)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    mouse_pressed = True
            if quit_requested:
                break
            mouse = pygame.mouse.get_pos()
            mouse_down = pygame.mouse.get_pressed()[0]

            if game.game_over:
                if pygame.K_RETURN in pressed:
                    game.reset(menu.difficulty)
                    fade.start_in()
                elif pygame.K_ESCAPE in pressed:
                    started = False
                    game.game_over = False
                    fade.start_in()
                    for key in game.keys:
                        key.unload()
                    game.keys.clear()
                elif pygame.K_BACKSPACE in pressed:
                    break
            elif not started:
                for key in title_keys:
                    if key.update(mouse, mouse_down, mouse_pressed):
                        key.name = random_key(key.name, rng)
                        key.reload_texture()
                        sounds.play_key()
                if enter_key.update(mouse, mouse_down, mouse_pressed) and not fade.busy:
                    sounds.play("start")
                    fade.start_out()
                if backspace_key.update(mouse, mouse_down, mouse_pressed):
                    break
                for button in menu.buttons():
                    if button.update(mouse, mouse_down, mouse_pressed):
                        sounds.play_key()
                        menu.click()

            if fade.step():
                started = True
                game.reset(menu.difficulty)

            if started and not game.game_over and not game.animating:
                if game.tick(frame_time) is Outcome.TIMEOUT:
                    sounds.play("fail")
                name = _pick_key(filter(None, map(key_name_for, pressed)))
                if name is not None:
                    outcome = game.press(name)
                    if outcome in (Outcome.HIT, Outcome.COMBO):
                        sounds.play_key()
                    if outcome is Outcome.COMBO:
                        sounds.play("combo")
                    elif outcome is Outcome.MISS:
                        sounds.play("fail")

            if started and not game.game_over and game.animating:
                game.advance_animation()

            screen.fill(RAYWHITE)
            if background is not None:
                screen.blit(background, (0, 0))

            if not started:
                for key in (*title_keys, enter_key, backspace_key, *menu.buttons()):
                    key.draw(screen)
            elif game.game_over:
                middle = SCREEN_HEIGHT / 2
                _draw_centered_text(screen, big_font, "GAME OVER", middle - 60, TEXT_RED)
                _draw_centered_text(screen, font, "Pressione ENTER para jogar novamente", middle, WHITE)
                _draw_centered_text(screen, font, "Pressione ESC para voltar ao menu", middle + 30, WHITE)
                _draw_centered_text(screen, font, "Pressione BACKSPACE para sair", middle + 60, WHITE)
            else:
                _draw_round(screen, game, font)

            if fade.fade > 0.0:
                overlay = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
                overlay.fill(BLACK)
                overlay.set_alpha(round(fade.fade * 255))
                screen.blit(overlay, (0, 0))

            pygame.display.flip()
    finally:
        for key in (*title_keys, *game.keys, enter_key, backspace_key, *menu.buttons()):
            key.unload()
        sounds.close()


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until the player quits."""
    parser = argparse.ArgumentParser(
        prog="combokey", description="Type the key sequence before the time runs out."
    )
    parser.parse_args(argv)
    pygame.init()
    try:
        _run()
    finally:
        pygame.quit()
    return 0