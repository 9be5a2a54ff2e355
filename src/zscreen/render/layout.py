"""Stack the status line and both windows into display rows."""

from zscreen.core.cell import Cell, Style
from zscreen.screen.model import ScreenModel
from zscreen.screen.status import StatusLine


def status_row(status: StatusLine, width: int) -> list[Cell]:
    """The version 3 status line, drawn in reverse video."""
    return [Cell(char=char, style=Style.REVERSE) for char in status.render(width)]


def screen_rows(screen: ScreenModel, status: StatusLine | None = None) -> list[list[Cell]]:
    """Status line (if any), then the overlay rows, then the lower window."""
    rows: list[list[Cell]] = []
    if status is not None:
        rows.append(status_row(status, screen.cols))
    rows.extend(screen.window1.rows())
    rows.extend(screen.window0.rows())
    return rows


def render_screen(target, renderer) -> str:
    """
    Render a GameSession or a bare ScreenModel with any renderer.

    A session contributes its version 3 status line; a screen model has none.
    """
    screen = getattr(target, "screen", target)
    status = getattr(target, "status", None)
    return renderer.render_screen(screen, status)
