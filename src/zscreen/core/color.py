"""Engine colour codes and their render-time resolution."""

from dataclasses import dataclass
from enum import IntEnum

from zscreen.core.cell import Cell, Style


class ZColor(IntEnum):
    """Colour codes used by the engine's set_colour request."""
    CURRENT = 0
    DEFAULT = 1
    BLACK = 2
    RED = 3
    GREEN = 4
    YELLOW = 5
    BLUE = 6
    MAGENTA = 7
    CYAN = 8
    WHITE = 9


# Fixed 8-colour palette (codes 2-9)
PALETTE: dict[int, str] = {
    ZColor.BLACK: "#000000",
    ZColor.RED: "#ff5252",
    ZColor.GREEN: "#69f0ae",
    ZColor.YELLOW: "#ffff00",
    ZColor.BLUE: "#448aff",
    ZColor.MAGENTA: "#d02090",
    ZColor.CYAN: "#18ffff",
    ZColor.WHITE: "#ffffff",
}

# User-selectable default text colours (name, hex)
TEXT_COLORS: tuple[tuple[str, str], ...] = (
    ("Retro Green", "#b9f6ca"),
    ("Classic White", "#ffffff"),
    ("Dim White", "#b0bec5"),
    ("Amber", "#ffc107"),
    ("Cyan", "#18ffff"),
    ("Soft Pink", "#f48fb1"),
)


def is_color_code(code: int) -> bool:
    """Check if code is a colour the screen model may store (1-9)."""
    return ZColor.DEFAULT <= code <= ZColor.WHITE


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    """Convert '#rrggbb' to an (r, g, b) tuple."""
    value = value.lstrip('#')
    if len(value) != 6:
        raise ValueError(f"Expected #rrggbb colour, got {value!r}")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


@dataclass(frozen=True)
class Theme:
    """
    Maps engine colour codes to display colours.

    Codes 0 and 1 (and anything unknown) fall back to the theme's
    default foreground/background.
    """
    default_fg: str = TEXT_COLORS[0][1]
    default_bg: str = "#000000"

    def resolve(self, code: int, is_background: bool = False) -> str:
        """Resolve a colour code to a '#rrggbb' string."""
        if code in PALETTE:
            return PALETTE[code]
        return self.default_bg if is_background else self.default_fg

    def resolve_cell(self, cell: Cell) -> tuple[str, str]:
        """Resolve a cell to (fg, bg), applying reverse video."""
        fg = self.resolve(cell.fg, is_background=False)
        bg = self.resolve(cell.bg, is_background=True)
        if cell.style & Style.REVERSE:
            fg, bg = bg, fg
        return fg, bg


def theme_for_text_color(index: int) -> Theme:
    """Build a theme for one of the TEXT_COLORS entries."""
    if index < 0 or index >= len(TEXT_COLORS):
        index = 0
    return Theme(default_fg=TEXT_COLORS[index][1])
