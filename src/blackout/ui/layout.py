from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from blackout.constants import BOARD_X_ORIGIN, CELL_SIZE, GRID_COLS, GRID_ROWS


@dataclass(frozen=True, slots=True)
class CoordinateMapper:
    """Converts between pixel space and ``(row, col)`` board indices.

    Pixel y grows downward (window-system convention) while board row 0 sits at
    the bottom, so rows are flipped. Divisions truncate toward zero, never
    round, and the result is not clamped: clicks off the board map to
    out-of-range indices that callers must bounds-check.
    """

    cell_size: int = CELL_SIZE
    x_origin: int = BOARD_X_ORIGIN
    rows: int = GRID_ROWS

    def to_grid(self, pixel_x: float, pixel_y: float) -> Tuple[int, int]:
        col = int((pixel_x - self.x_origin) / self.cell_size)
        row = (self.rows - 1) - int(pixel_y / self.cell_size)
        return row, col

    def to_pixel(self, row: int, col: int) -> Tuple[float, float]:
        """Return the (left, top) pixel of a cell."""
        left = self.x_origin + col * self.cell_size
        top = (self.rows - 1 - row) * self.cell_size
        return float(left), float(top)

    def contains(self, pixel_x: float, pixel_y: float, cols: int = GRID_COLS) -> bool:
        if pixel_x < self.x_origin or pixel_x >= self.x_origin + cols * self.cell_size:
            return False
        return 0 <= pixel_y < self.rows * self.cell_size
