"""Cell - atomic unit of a screen window."""

from dataclasses import dataclass
from enum import IntFlag


class Style(IntFlag):
    """Text style bits as sent by the engine's set_text_style request."""
    ROMAN = 0
    REVERSE = 1
    BOLD = 2
    ITALIC = 4
    FIXED = 8


@dataclass(slots=True)
class Cell:
    """
    A single character cell with styling attributes.

    Colors are stored as engine colour codes (0/1 = current/default,
    2-9 = palette entries). Resolving them to display colours is the
    renderer's job.
    """
    char: str = ' '
    fg: int = 1    # Default foreground
    bg: int = 1    # Default background
    style: int = 0

    def copy(self) -> "Cell":
        """Create a copy of this cell."""
        return Cell(
            char=self.char,
            fg=self.fg,
            bg=self.bg,
            style=self.style,
        )

    def has_style(self, bit: int) -> bool:
        """Check whether a style bit is set on this cell."""
        return (self.style & bit) != 0

    def is_blank(self) -> bool:
        """Check if this cell shows nothing (space on the default background)."""
        return (
            self.char in (' ', '')
            and self.bg in (0, 1)
            and not self.style & Style.REVERSE
        )
