"""On-screen key button backed by a three-frame sprite sheet."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

SHEETS_DIR = "assets/keys/light/sheets"
FALLBACK_FRAME_WIDTH = 26
FALLBACK_FRAME_HEIGHT = 32
SHEET_FRAMES = 3


@dataclass
class KeyButton:
    """A clickable key drawn from a horizontal sprite sheet.

    Frame 0 is the normal look, frame 1 the pressed look.
    """

    name: str = ""
    position: tuple[float, float] = (0.0, 0.0)
    scale: float = 2.5
    frame_width: int = 0
    frame_height: int = 0
    current_frame: int = 0
    texture: pygame.Surface | None = field(default=None, repr=False)

    def load(self, path: str | os.PathLike[str]) -> None:
        """Load the sprite sheet at ``path``, falling back to default frame sizes."""
        self.unload()
        try:
            self.texture = pygame.image.load(os.fspath(path))
        except (pygame.error, OSError):
            self.texture = None

        if self.texture is not None:
            width, height = self.texture.get_size()
            self.frame_width = width // SHEET_FRAMES
            self.frame_height = height
        else:
            self.frame_width = FALLBACK_FRAME_WIDTH
            self.frame_height = FALLBACK_FRAME_HEIGHT

    def reload_texture(self) -> None:
        """Load the sheet that belongs to the button's current name."""
        self.load(Path(SHEETS_DIR) / f"{self.name}.png")

    def bounds(self) -> tuple[float, float, float, float]:
        """Return the on-screen rectangle as ``(x, y, width, height)``."""
        x, y = self.position
        return (x, y, self.frame_width * self.scale, self.frame_height * self.scale)

    def update(
        self,
        mouse_pos: tuple[float, float],
        mouse_down: bool,
        mouse_pressed: bool,
    ) -> bool:
        """Track hover and press state; return True when the button was clicked."""
        x, y, width, height = self.bounds()
        mx, my = mouse_pos
        hovered = x <= mx < x + width and y <= my < y + height
        self.current_frame = 1 if hovered and mouse_down else 0
        return hovered and mouse_pressed

    def draw(self, surface: pygame.Surface) -> None:
        """Blit the current frame, scaled, onto ``surface``."""
        if self.texture is None:
            return
        src = pygame.Rect(
            self.current_frame * self.frame_width, 0, self.frame_width, self.frame_height
        )
        frame = self.texture.subsurface(src)
        size = (round(self.frame_width * self.scale), round(self.frame_height * self.scale))
        scaled = pygame.transform.scale(frame, size)
        x, y = self.position
        surface.blit(scaled, (round(x), round(y)))

    def unload(self) -> None:
        """Release the loaded texture."""
        self.texture = None