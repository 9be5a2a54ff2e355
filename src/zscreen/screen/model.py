"""Two-window screen model driven by the engine's display commands."""

import logging

from zscreen.core.constants import (
    CLEAR_ALL,
    CLEAR_ALL_KEEP_SPLIT,
    LOWER_WINDOW,
    SCREEN_COLS,
    SCREEN_ROWS,
    UPPER_WINDOW,
)
from zscreen.core.grid import Grid
from zscreen.core.window import WindowState
from zscreen.screen.suppress import DuplicateSuppressionFilter

logger = logging.getLogger(__name__)


class ScreenModel:
    """
    Stateful screen with a scrolling lower window and a fixed-height overlay.

    Window 0 (lower) is an append-only transcript: text is written to its
    last row and newlines start a new row. Window 1 (upper) is an overlay
    of split_height rows that is overwritten in place at its cursor and
    never scrolls.

    Shrinking the overlay while recently printed overlay text is still on
    screen is deferred until the player next submits input, so quote
    boxes that a game opens and immediately closes stay readable.
    """

    def __init__(self, cols: int = SCREEN_COLS, rows: int = SCREEN_ROWS, version: int = 5):
        self.cols = cols
        self.rows = rows
        self.version = version

        self.window0 = Grid(width=cols, scrolling=True)
        self.window1 = Grid(width=cols)
        self.window0_state = WindowState()
        self.window1_state = WindowState()

        self.active_window = LOWER_WINDOW
        self.pending_shrink_height: int | None = None
        self.suppressor = DuplicateSuppressionFilter()

    # ----- state access -----

    @property
    def split_height(self) -> int:
        """Rows currently shown by the overlay (pre-shrink while deferred)."""
        return self.window1.height

    @property
    def active_state(self) -> WindowState:
        return self.window1_state if self.active_window == UPPER_WINDOW else self.window0_state

    def get_cursor(self) -> tuple[int, int]:
        """1-based (row, column) of the active window's cursor."""
        if self.active_window == UPPER_WINDOW:
            return self.window1_state.cursor_row, self.window1_state.cursor_col
        return max(1, self.window0.height), self.window0_state.cursor_col

    # ----- window selection and layout -----

    def select_window(self, window_id: int) -> None:
        """
        Make window_id the active window.

        Selecting the overlay homes its cursor. Selecting the lower window
        leaves its cursor alone; games switch back and forth mid-line.
        """
        if window_id not in (LOWER_WINDOW, UPPER_WINDOW):
            logger.debug("select_window: ignoring unknown window %d", window_id)
            return
        self.active_window = window_id
        if window_id == UPPER_WINDOW:
            self.window1_state.reset_cursor()

    def split(self, lines: int) -> None:
        """Set the overlay height, deferring shrinks while overlay text is live."""
        lines = max(0, min(lines, self.rows))
        current = self.window1.height

        if lines < current and self.suppressor.is_live:
            logger.debug("split: deferring shrink %d -> %d", current, lines)
            self.pending_shrink_height = lines
            return

        self.pending_shrink_height = None
        self._resize_window1(lines)

    def apply_pending_shrink(self) -> bool:
        """Materialize a deferred shrink. Returns True if one was applied."""
        if self.pending_shrink_height is None:
            return False
        lines = self.pending_shrink_height
        self.pending_shrink_height = None
        logger.debug("Applying deferred shrink %d -> %d", self.window1.height, lines)
        self._resize_window1(lines)
        self.suppressor.clear()
        return True

    def _resize_window1(self, lines: int) -> None:
        changed = lines != self.window1.height
        fill = self.window1_state.blank_cell()
        self.window1.resize(lines, fill)
        if self.version == 3 and changed:
            self.window1.clear(fill)
        state = self.window1_state
        state.cursor_row = min(state.cursor_row, max(1, lines))

    # ----- cursor -----

    def set_cursor(self, row: int, col: int) -> None:
        """Move the overlay cursor (ignored while the lower window is active)."""
        if self.active_window != UPPER_WINDOW:
            logger.debug("set_cursor(%d, %d) ignored: lower window active", row, col)
            return
        state = self.window1_state
        state.cursor_row = min(max(1, row), max(1, self.window1.height))
        state.cursor_col = min(max(1, col), self.cols)

    # ----- clearing -----

    def clear_screen(self, target: int = CLEAR_ALL) -> None:
        """Clear both windows (-1/-2), the lower window (0) or the overlay (1)."""
        if target in (CLEAR_ALL, CLEAR_ALL_KEEP_SPLIT):
            self.clear_all()
        elif target == LOWER_WINDOW:
            self.window0.clear(self.window0_state.blank_cell())
            self.window0_state.reset_cursor()
        elif target == UPPER_WINDOW:
            self.window1.clear(self.window1_state.blank_cell())
            self.window1_state.reset_cursor()
        else:
            logger.debug("clear_screen: ignoring unknown target %d", target)

    def clear_all(self) -> None:
        """Clear both windows, collapse the overlay and select the lower window."""
        self.window0.clear(self.window0_state.blank_cell())
        self.window1.clear(self.window1_state.blank_cell())
        self.window1.resize(0)
        self.pending_shrink_height = None
        self.active_window = LOWER_WINDOW
        self.window0_state.reset_cursor()
        self.window1_state.reset_cursor()

    def erase_to_end_of_line(self) -> None:
        """Blank the overlay from the cursor to the end of its row."""
        if self.active_window != UPPER_WINDOW or self.window1.height == 0:
            return
        state = self.window1_state
        self.window1.fill_row(state.cursor_row - 1, state.cursor_col - 1, state.blank_cell())

    # ----- attributes -----

    def set_style(self, bits: int) -> None:
        self.active_state.set_style(bits)

    def set_color(self, fg: int, bg: int) -> None:
        self.active_state.set_colors(fg, bg)

    # ----- text output -----

    def print(self, text: str, window: int | None = None) -> bool:
        """
        Print text to a window (the active one when window is None).

        Returns False if the text was dropped (unknown window, duplicate
        of recent overlay text, or collapsed overlay).
        """
        if window is None:
            window = self.active_window
        if window == LOWER_WINDOW:
            if self.suppressor.should_suppress(text):
                return False
            self._write_window0(text)
            return True
        if window == UPPER_WINDOW:
            return self._write_window1(text)
        logger.debug("print: ignoring text for unknown window %d", window)
        return False

    def append_to_window0(self, text: str) -> None:
        """Append interpreter-generated text to the lower window, unfiltered."""
        self._write_window0(text)

    def _write_window0(self, text: str) -> None:
        grid = self.window0
        state = self.window0_state
        for char in text:
            if char == '\r':
                continue
            if grid.height == 0:
                grid.append_row(state.blank_cell())
            if char == '\n':
                grid.append_row(state.blank_cell())
                state.cursor_col = 1
                continue
            if state.cursor_col > self.cols:
                # Soft wrap: the lower window scrolls rather than clamping
                grid.append_row(state.blank_cell())
                state.cursor_col = 1
            grid.write(grid.height - 1, state.cursor_col - 1, state.make_cell(char))
            state.cursor_col += 1
        state.cursor_row = max(1, grid.height)

    def _write_window1(self, text: str) -> bool:
        grid = self.window1
        if grid.height == 0:
            logger.debug("print: overlay collapsed, dropping %r", text)
            return False
        if grid.height > 1:
            self.suppressor.record(text)

        state = self.window1_state
        for char in text:
            if char == '\r':
                continue
            if char == '\n':
                state.cursor_row = min(state.cursor_row + 1, grid.height)
                state.cursor_col = 1
                continue
            grid.write(state.cursor_row - 1, state.cursor_col - 1, state.make_cell(char))
            state.cursor_col = min(state.cursor_col + 1, self.cols)
        return True

    # ----- convenience -----

    def window_text(self, window: int) -> list[str]:
        """Rows of a window as plain strings (trailing blanks kept)."""
        grid = self.window1 if window == UPPER_WINDOW else self.window0
        return [grid.row_text(i) for i in range(grid.height)]
