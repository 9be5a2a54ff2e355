"""Per-window cursor, style and colour state."""

from dataclasses import dataclass

from zscreen.core.cell import Cell
from zscreen.core.color import is_color_code


@dataclass
class WindowState:
    """
    Cursor position (1-based) and active text attributes of one window.

    New characters printed to the window take their style and colours
    from here.
    """
    cursor_row: int = 1
    cursor_col: int = 1
    style: int = 0
    fg: int = 1
    bg: int = 1

    def reset_cursor(self) -> None:
        """Move the cursor home to (1, 1)."""
        self.cursor_row = 1
        self.cursor_col = 1

    def set_style(self, bits: int) -> None:
        """Roman (0) clears all bits; anything else is OR'ed in."""
        if bits == 0:
            self.style = 0
        else:
            self.style |= bits

    def set_colors(self, fg: int, bg: int) -> None:
        """Replace the active colours; 0 or unknown codes leave them unchanged."""
        if fg != 0 and is_color_code(fg):
            self.fg = fg
        if bg != 0 and is_color_code(bg):
            self.bg = bg

    def make_cell(self, char: str) -> Cell:
        """Build a cell for char using the active attributes."""
        return Cell(char=char, fg=self.fg, bg=self.bg, style=self.style)

    def blank_cell(self) -> Cell:
        """Empty cell in the active background colour."""
        return Cell(char=' ', fg=self.fg, bg=self.bg, style=0)
