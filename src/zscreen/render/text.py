"""Render screen grids to plain text (strip colours)."""

from zscreen.core.cell import Cell
from zscreen.core.grid import Grid
from zscreen.render.layout import screen_rows
from zscreen.screen.model import ScreenModel
from zscreen.screen.status import StatusLine


class TextRenderer:
    """Render a Grid to plain text without any styling."""

    def __init__(self, preserve_whitespace: bool = False):
        self.preserve_whitespace = preserve_whitespace

    def render_row(self, row: list[Cell]) -> str:
        line = ''.join(cell.char or ' ' for cell in row)
        if not self.preserve_whitespace:
            line = line.rstrip()
        return line

    def render(self, grid: Grid) -> str:
        """Render grid to plain text."""
        result = '\n'.join(self.render_row(row) for row in grid.rows())

        if not self.preserve_whitespace:
            # Remove trailing empty lines
            result = result.rstrip('\n')

        return result

    def render_screen(self, screen: ScreenModel, status: StatusLine | None = None) -> str:
        """Render the status line and both windows, overlay first."""
        result = '\n'.join(self.render_row(row) for row in screen_rows(screen, status))
        if not self.preserve_whitespace:
            result = result.rstrip('\n')
        return result
