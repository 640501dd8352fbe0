"""
Unit tests for Canvas and GridView.

Tests cover:
- Canvas pixel access, clipping and rectangles
- Grid view priming, cross-fade timing and transition-length fades
- Cell borders and glow tint when drawn to a canvas
"""

import unittest

import sys
from pathlib import Path

# Add parent directory to path to import modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from scanmatrix.canvas import Canvas
from scanmatrix.engine import GridDimensions, ScanState
from scanmatrix.palettes import PALETTES
from scanmatrix.view import CELL_BORDER, GLOW_ALPHA, TRAIL_BORDER, GridView

GREEN = PALETTES[0].colors
BLUE = PALETTES[1].colors


class TestCanvas(unittest.TestCase):

    def setUp(self):
        self.canvas = Canvas(8, 4)

    def test_set_and_get(self):
        self.canvas.set(3, 2, (10, 20, 30))
        self.assertEqual(self.canvas.get(3, 2), (10, 20, 30))
        self.assertEqual(self.canvas.get(2, 3), (0, 0, 0))

    def test_out_of_bounds_is_ignored(self):
        self.canvas.set(8, 0, (255, 255, 255))
        self.canvas.set(-1, 0, (255, 255, 255))
        self.assertEqual(self.canvas.get(8, 0), (0, 0, 0))
        self.assertEqual(self.canvas.get_buffer(), bytes(8 * 4 * 3))

    def test_buffer_is_row_major_rgb(self):
        self.canvas.set(1, 1, (1, 2, 3))
        offset = (1 * 8 + 1) * 3
        self.assertEqual(self.canvas.get_buffer()[offset:offset + 3], bytes([1, 2, 3]))

    def test_rect_outline(self):
        self.canvas.rect(0, 0, 4, 4, (9, 9, 9), filled=False)
        self.assertEqual(self.canvas.get(0, 0), (9, 9, 9))
        self.assertEqual(self.canvas.get(3, 3), (9, 9, 9))
        self.assertEqual(self.canvas.get(1, 1), (0, 0, 0))

    def test_rect_clips_to_canvas(self):
        self.canvas.rect(6, 2, 5, 5, (7, 7, 7))
        self.assertEqual(self.canvas.get(7, 3), (7, 7, 7))
        self.assertEqual(self.canvas.get(5, 3), (0, 0, 0))

    def test_clear(self):
        self.canvas.clear((4, 5, 6))
        self.assertEqual(self.canvas.get(7, 3), (4, 5, 6))

    def test_hex(self):
        self.assertEqual(Canvas.hex(0x111827), (17, 24, 39))


class TestGridView(unittest.TestCase):

    def setUp(self):
        self.grid = GridDimensions(20, 2)
        self.view = GridView(self.grid, cell_size=4)
        self.view.update(ScanState(position=0, direction=1), 0.0)

    def test_size(self):
        self.assertEqual(self.view.size, (80, 8))

    def test_first_update_shows_targets_immediately(self):
        self.assertEqual(self.view.shown(0), GREEN[0])
        self.assertEqual(self.view.shown(1), GREEN[0])
        self.assertEqual(self.view.shown(2), (0, 0, 0))
        self.assertTrue(self.view.glowing(0))
        self.assertFalse(self.view.glowing(2))

    def test_short_fade(self):
        self.view.update(ScanState(position=1, direction=1), 0.15)
        # Halfway through an ease-in-out is half the color
        r, g, b = self.view.shown(2)
        self.assertEqual((r, b), (0, 68))
        self.assertIn(g, (127, 128))
        self.view.update(ScanState(position=1, direction=1), 0.15)
        self.assertEqual(self.view.shown(2), GREEN[0])
        self.assertEqual(self.view.shown(0), GREEN[1])

    def test_transition_fade_is_slower(self):
        state = ScanState(position=0, direction=1, palette_index=1, transitioning=True)
        self.view.update(state, 0.5)
        self.assertNotEqual(self.view.shown(0), BLUE[0])
        self.view.update(state, 0.6)
        self.assertEqual(self.view.shown(0), BLUE[0])

    def test_background_uses_short_fade_during_transition(self):
        state = ScanState(position=10, direction=1, transitioning=True)
        self.view.update(state, 0.3)
        self.assertEqual(self.view.shown(0), (0, 0, 0))

    def test_cell_size_is_validated(self):
        with self.assertRaises(ValueError):
            GridView(self.grid, cell_size=2)


class TestGridViewDraw(unittest.TestCase):

    def setUp(self):
        self.view = GridView(GridDimensions(20, 2), cell_size=4)
        self.view.update(ScanState(position=10, direction=1), 0.0)
        self.canvas = Canvas(*self.view.size)
        self.view.draw(self.canvas)

    def test_cells_filled_in_every_row(self):
        for row in range(2):
            self.assertEqual(self.canvas.get(10 * 4 + 1, row * 4 + 1), GREEN[0])
            self.assertEqual(self.canvas.get(5 * 4 + 2, row * 4 + 2), GREEN[5])
            self.assertEqual(self.canvas.get(4 * 4 + 1, row * 4 + 1), (0, 0, 0))

    def test_glow_border_is_tinted(self):
        expected = tuple(int(c * GLOW_ALPHA) for c in GREEN[1])
        self.assertEqual(self.canvas.get(9 * 4, 0), expected)

    def test_plain_borders(self):
        self.assertEqual(self.canvas.get(6 * 4, 0), TRAIL_BORDER)
        self.assertEqual(self.canvas.get(0, 0), CELL_BORDER)


if __name__ == "__main__":
    unittest.main()
