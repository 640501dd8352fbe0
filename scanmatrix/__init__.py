"""Bouncing scanner bar with a fading trail, previewed in a pygame window."""

from scanmatrix.app import ScannerApp
from scanmatrix.canvas import Canvas
from scanmatrix.engine import GridDimensions, ScannerEngine, ScanState, color_at
from scanmatrix.run import run

__all__ = ["Canvas", "GridDimensions", "ScanState", "ScannerApp", "ScannerEngine", "color_at", "run"]
