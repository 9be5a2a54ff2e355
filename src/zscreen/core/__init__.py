"""Core data structures for the screen model."""

from zscreen.core.cell import Cell, Style
from zscreen.core.color import Theme, ZColor
from zscreen.core.grid import Grid
from zscreen.core.window import WindowState

__all__ = ["Cell", "Style", "Theme", "ZColor", "Grid", "WindowState"]
