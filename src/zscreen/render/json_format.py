"""Render the screen to structured JSON.

Rows are run-length encoded: consecutive cells with the same colour
codes and style form one run. Colours stay as engine codes so a
snapshot is independent of the theme.

Example output:
{
  "status": null,
  "window1": {"height": 1, "rows": [
    {"y": 0, "runs": [{"chars": " West of House", "fg": 1, "bg": 1, "style": 1}]}
  ]},
  "window0": {"height": 2, "rows": [...]}
}
"""

import json
from typing import Any

from zscreen.core.cell import Cell
from zscreen.core.grid import Grid
from zscreen.screen.model import ScreenModel
from zscreen.screen.status import StatusLine


class JsonRenderer:
    """Render grids (or a whole screen) to run-length encoded JSON."""

    def __init__(self, indent: int | None = 2, trim: bool = True):
        """
        Args:
            indent: JSON indentation (None for compact)
            trim: Drop trailing blank cells from each row
        """
        self.indent = indent
        self.trim = trim

    def row_runs(self, row: list[Cell]) -> list[dict[str, Any]]:
        """Encode one row as runs of identical attributes."""
        cells = row
        if self.trim:
            end = len(row)
            while end > 0 and row[end - 1].is_blank():
                end -= 1
            cells = row[:end]

        runs: list[dict[str, Any]] = []
        for cell in cells:
            if runs and (runs[-1]["fg"], runs[-1]["bg"], runs[-1]["style"]) == (cell.fg, cell.bg, cell.style):
                runs[-1]["chars"] += cell.char or ' '
            else:
                runs.append({"chars": cell.char or ' ', "fg": cell.fg, "bg": cell.bg, "style": cell.style})
        return runs

    def grid_to_dict(self, grid: Grid) -> dict[str, Any]:
        return {
            "height": grid.height,
            "rows": [{"y": y, "runs": self.row_runs(row)} for y, row in enumerate(grid.rows())],
        }

    def to_dict(self, window1: Grid, window0: Grid, status: StatusLine | None = None) -> dict[str, Any]:
        return {
            "status": None if status is None else {"location": status.location, "right": status.right},
            "window1": self.grid_to_dict(window1),
            "window0": self.grid_to_dict(window0),
        }

    def render(self, grid: Grid) -> str:
        """Render a single grid to a JSON string."""
        return json.dumps(self.grid_to_dict(grid), indent=self.indent, ensure_ascii=False)

    def render_screen(self, screen: ScreenModel, status: StatusLine | None = None) -> str:
        """Render the status line and both windows to a JSON string."""
        data = self.to_dict(screen.window1, screen.window0, status)
        return json.dumps(data, indent=self.indent, ensure_ascii=False)
