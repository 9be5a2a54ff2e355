"""Grid - 2D matrix of cells backing one screen window."""

from dataclasses import dataclass, field
from typing import Iterator

from zscreen.core.cell import Cell
from zscreen.errors import GridError


@dataclass
class Grid:
    """
    A fixed-width, growable-height grid of Cells.

    Scrolling grids (the lower window) only ever grow by appending rows.
    Overlay grids (the upper window) have a fixed number of rows and are
    overwritten in place. Coordinates are 0-based (row, col).
    """
    width: int = 80
    scrolling: bool = False
    _buffer: list[list[Cell]] = field(default_factory=list)

    def _blank_row(self, fill: Cell | None = None) -> list[Cell]:
        fill = fill or Cell()
        return [fill.copy() for _ in range(self.width)]

    def ensure_row(self, row: int, fill: Cell | None = None) -> None:
        """Ensure the buffer has at least row + 1 rows."""
        while len(self._buffer) <= row:
            self._buffer.append(self._blank_row(fill))

    def get(self, row: int, col: int) -> Cell:
        """Get the cell at (row, col)."""
        if col < 0 or col >= self.width:
            raise IndexError(f"col={col} out of bounds (width={self.width})")
        if row < 0 or row >= len(self._buffer):
            raise IndexError(f"row={row} out of bounds (height={len(self._buffer)})")
        return self._buffer[row][col]

    def write(self, row: int, col: int, cell: Cell) -> None:
        """
        Overwrite one cell.

        Columns past the right edge clamp to the last column rather than
        wrapping; the row bound grows as needed.
        """
        row = max(0, row)
        col = min(max(0, col), self.width - 1)
        self.ensure_row(row)
        self._buffer[row][col] = cell

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        """Get cell using indexing: grid[row, col]."""
        row, col = pos
        return self.get(row, col)

    def append_row(self, fill: Cell | None = None) -> int:
        """Append a row to a scrolling grid and return its index."""
        if not self.scrolling:
            raise GridError("append_row() is only valid on a scrolling grid")
        self._buffer.append(self._blank_row(fill))
        return len(self._buffer) - 1

    def fill_row(self, row: int, start: int, cell: Cell) -> None:
        """Overwrite cells from start to the end of a row with copies of cell."""
        self.ensure_row(row)
        for col in range(max(0, start), self.width):
            self._buffer[row][col] = cell.copy()

    def clear(self, fill: Cell | None = None) -> None:
        """
        Reset the grid to empty cells.

        fill is the caller's "current background" blank, so clearing keeps
        the active background colour. Scrolling grids drop all rows; overlay
        grids keep their height.
        """
        if self.scrolling:
            self._buffer.clear()
            return
        for row in self._buffer:
            for col in range(self.width):
                row[col] = (fill or Cell()).copy()

    def resize(self, height: int, fill: Cell | None = None) -> None:
        """Set the number of rows of an overlay grid (truncating or padding)."""
        height = max(0, height)
        del self._buffer[height:]
        while len(self._buffer) < height:
            self._buffer.append(self._blank_row(fill))

    @property
    def height(self) -> int:
        """Get the current number of rows in the buffer."""
        return len(self._buffer)

    def rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows."""
        yield from self._buffer

    def cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Iterate over all cells as (row, col, cell) tuples."""
        for y, row in enumerate(self._buffer):
            for x, cell in enumerate(row):
                yield y, x, cell

    def row_text(self, row: int) -> str:
        """Get the characters of one row as a string (no trimming)."""
        return ''.join(cell.char or ' ' for cell in self._buffer[row])
