"""Grid view - paints engine snapshots onto a Canvas as bordered, glowing, cross-fading cells."""

import numpy as np

from scanmatrix.canvas import Canvas
from scanmatrix.engine import GridDimensions, ScanState, band_at, color_at, is_glowing
from scanmatrix.palettes import PALETTES

# --- Fades (seconds) ---
FADE_S = 0.3
TRANSITION_FADE_S = 1.0

# --- Colors ---
BACKGROUND = (0, 0, 0)
CELL_BORDER = Canvas.hex(0x111827)   # gray-900
TRAIL_BORDER = (9, 12, 16)           # gray-800 at 30% over black
GLOW_ALPHA = 0x50 / 0xFF


def _ease(p: np.ndarray) -> np.ndarray:
    """Ease-in-out on [0, 1]."""
    return p * p * (3.0 - 2.0 * p)


class GridView:
    """Keeps the on-screen color of every column and eases it toward the engine's."""

    def __init__(self, grid: GridDimensions, cell_size: int = 8, palettes=PALETTES):
        if cell_size < 3:
            raise ValueError(f"cell_size must be at least 3, got {cell_size}")
        self.grid = grid
        self.cell_size = cell_size
        self.palettes = palettes
        w = grid.width
        self._from = np.zeros((w, 3))
        self._to = np.zeros((w, 3))
        self._shown = np.zeros((w, 3))
        self._elapsed = np.zeros(w)
        self._duration = np.full(w, FADE_S)
        self._glow = np.zeros(w, dtype=bool)
        self._trail = np.zeros(w, dtype=bool)
        self._primed = False

    @property
    def size(self) -> tuple[int, int]:
        """Canvas size in pixels needed to hold the grid."""
        return self.grid.width * self.cell_size, self.grid.height * self.cell_size

    def update(self, state: ScanState, dt: float) -> None:
        """Retarget columns whose color changed and step every fade by dt seconds."""
        w = self.grid.width
        target = np.zeros((w, 3))
        for x in range(w):
            color = color_at(x, state, self.palettes)
            self._trail[x] = color is not None
            self._glow[x] = is_glowing(band_at(x, state))
            if color is not None:
                target[x] = color

        if not self._primed:
            self._from[:] = self._to[:] = self._shown[:] = target
            self._elapsed[:] = self._duration
            self._primed = True
            return

        changed = np.any(target != self._to, axis=1)
        if changed.any():
            self._from[changed] = self._shown[changed]
            self._to[changed] = target[changed]
            self._elapsed[changed] = 0.0
            # Background cells always use the short fade
            slow = state.transitioning & self._trail
            self._duration[changed] = np.where(slow, TRANSITION_FADE_S, FADE_S)[changed]

        self._elapsed += dt
        p = np.clip(self._elapsed / self._duration, 0.0, 1.0)
        self._shown = self._from + (self._to - self._from) * _ease(p)[:, None]

    def shown(self, x: int) -> tuple[int, int, int]:
        """Color currently displayed for column x."""
        r, g, b = np.rint(self._shown[x]).astype(int)
        return (int(r), int(g), int(b))

    def glowing(self, x: int) -> bool:
        return bool(self._glow[x])

    def draw(self, canvas: Canvas) -> None:
        canvas.clear(BACKGROUND)
        cs = self.cell_size
        for x in range(self.grid.width):
            fill = self.shown(x)
            if self._glow[x]:
                border = tuple(int(c * GLOW_ALPHA) for c in fill)
            elif self._trail[x]:
                border = TRAIL_BORDER
            else:
                border = CELL_BORDER
            for y in range(self.grid.height):
                px, py = x * cs, y * cs
                canvas.rect(px, py, cs, cs, border, filled=False)
                canvas.rect(px + 1, py + 1, cs - 2, cs - 2, fill)
