"""Render screen grids to terminal-compatible escape sequences."""

from zscreen.core.cell import Cell, Style
from zscreen.core.color import Theme, hex_to_rgb
from zscreen.core.grid import Grid
from zscreen.render.layout import screen_rows
from zscreen.screen.model import ScreenModel
from zscreen.screen.status import StatusLine


class TerminalRenderer:
    """
    Render a Grid to 24-bit ANSI escape sequences for terminal display.

    Colours are resolved through the theme at render time (reverse video
    swaps them here, not in the grid). SGR codes are only emitted when
    attributes change.
    """

    def __init__(self, theme: Theme | None = None, reset_at_end: bool = True):
        self.theme = theme or Theme()
        self.reset_at_end = reset_at_end

    def _sgr(self, cell: Cell) -> str:
        fg, bg = self.theme.resolve_cell(cell)
        parts = ['0']
        if cell.style & Style.BOLD:
            parts.append('1')
        if cell.style & Style.ITALIC:
            parts.append('3')
        parts.append('38;2;{};{};{}'.format(*hex_to_rgb(fg)))
        parts.append('48;2;{};{};{}'.format(*hex_to_rgb(bg)))
        return f"\x1b[{';'.join(parts)}m"

    def render_row(self, row: list[Cell]) -> str:
        """Render one row, dropping trailing blank cells."""
        last_col = -1
        for x, cell in enumerate(row):
            if not cell.is_blank():
                last_col = x

        line_parts: list[str] = []
        last_sgr = None
        for cell in row[:last_col + 1]:
            sgr = self._sgr(cell)
            if sgr != last_sgr:
                line_parts.append(sgr)
                last_sgr = sgr
            line_parts.append(cell.char or ' ')

        # Reset at end of each line to prevent colour bleeding into clear-to-EOL
        if last_sgr is not None:
            line_parts.append('\x1b[0m')
        return ''.join(line_parts)

    def render(self, grid: Grid) -> str:
        """Render grid to ANSI string."""
        result = '\n'.join(self.render_row(row) for row in grid.rows())
        if self.reset_at_end:
            result += '\x1b[0m'
        return result

    def render_screen(self, screen: ScreenModel, status: StatusLine | None = None) -> str:
        """Render the status line and both windows, overlay first."""
        result = '\n'.join(self.render_row(row) for row in screen_rows(screen, status))
        if self.reset_at_end:
            result += '\x1b[0m'
        return result
