"""Pygame preview window. Shows the canvas upscaled so 8px cells read as real squares."""

import os
from typing import Callable

# Keep pygame quiet on import; headless recording and tests load this module too
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame

from scanmatrix.canvas import Canvas

KeyFn = Callable[[str], None]


class Simulator:
    """Opens a window that displays the Canvas contents, upscaled to be visible."""

    def __init__(self, canvas: Canvas, scale: int = 5, title: str = "Scanner"):
        self.canvas = canvas
        self.scale = scale
        self.width = canvas.width * scale
        self.height = canvas.height * scale

        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        # Small surface at actual canvas resolution, then upscale
        self.surface = pygame.Surface((canvas.width, canvas.height))

    def update(self, on_key: KeyFn | None = None) -> bool:
        """Blit canvas to screen. Returns False if window was closed or Escape pressed."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                if on_key is not None:
                    on_key(pygame.key.name(event.key))

        # surfarray is indexed [x, y], the canvas buffer [y, x]
        pygame.surfarray.blit_array(self.surface, self.canvas.buffer.swapaxes(0, 1))

        pygame.transform.scale(self.surface, (self.width, self.height), self.screen)
        pygame.display.flip()
        return True

    def tick(self, fps: int = 30) -> None:
        """Limit framerate."""
        self.clock.tick(fps)

    def close(self) -> None:
        pygame.quit()
