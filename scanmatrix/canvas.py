"""RGB pixel buffer with the few drawing primitives the grid view needs."""

import numpy as np

from scanmatrix.palettes import Color


class Canvas:
    """RGB pixel buffer backed by a (height, width, 3) uint8 array.

    Pixel (x, y) lives at buffer[y, x]. Row-major, so get_buffer() yields
    [R0,G0,B0, R1,G1,B1, ...] exactly like a raw framebuffer.
    """

    def __init__(self, width: int = 160, height: int = 120):
        self.width = width
        self.height = height
        self.buffer = np.zeros((height, width, 3), dtype=np.uint8)

    def clear(self, color: Color = (0, 0, 0)) -> None:
        """Fill entire canvas with a color (default black)."""
        self.buffer[:, :] = color

    def set(self, x: int, y: int, color: Color) -> None:
        """Set a single pixel. Out-of-bounds writes are silently ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.buffer[y, x] = color

    def get(self, x: int, y: int) -> Color:
        """Get a pixel's color. Returns (0,0,0) for out-of-bounds."""
        if 0 <= x < self.width and 0 <= y < self.height:
            r, g, b = self.buffer[y, x]
            return (int(r), int(g), int(b))
        return (0, 0, 0)

    def rect(self, x: int, y: int, w: int, h: int, color: Color, filled: bool = True) -> None:
        """Draw a rectangle, clipped to the canvas. If filled=False, draws outline only."""
        x0, y0 = max(0, x), max(0, y)
        x1, y1 = min(self.width, x + w), min(self.height, y + h)
        if x0 >= x1 or y0 >= y1:
            return
        if filled:
            self.buffer[y0:y1, x0:x1] = color
            return
        if y == y0:
            self.buffer[y0, x0:x1] = color
        if y + h == y1:
            self.buffer[y1 - 1, x0:x1] = color
        if x == x0:
            self.buffer[y0:y1, x0] = color
        if x + w == x1:
            self.buffer[y0:y1, x1 - 1] = color

    @staticmethod
    def hex(color: int) -> Color:
        """Convert 0xRRGGBB integer to (R, G, B) tuple."""
        return ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)

    def get_buffer(self) -> bytes:
        """Get the entire pixel buffer as bytes."""
        return self.buffer.tobytes()
