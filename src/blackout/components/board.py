from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from blackout.components.tile import Cell, TileColor
from blackout.errors import OutOfRange

Position = Tuple[int, int]


@dataclass(slots=True)
class Board:
    """Fixed-size grid of cells indexed ``cells[row][col]``.

    Row 0 is the bottom row on screen. The grid is allocated once and mutated
    in place for the lifetime of the world; ``reset`` empties it without
    reallocating. All accessors take ``(row, col)`` and raise ``OutOfRange``
    for coordinates outside the board, leaving the grid untouched.
    """
    rows: int
    cols: int
    cells: List[List[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [[Cell() for _ in range(self.cols)] for _ in range(self.rows)]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell_at(self, row: int, col: int) -> Cell:
        if not self.in_bounds(row, col):
            raise OutOfRange(row, col, self.rows, self.cols)
        return self.cells[row][col]

    def fill(self, row: int, col: int, color: TileColor) -> None:
        cell = self.cell_at(row, col)
        cell.color = color
        cell.filled = True

    def set_inert(self, row: int, col: int) -> None:
        self.cell_at(row, col).color = TileColor.BLACK

    def color_at(self, row: int, col: int) -> Optional[TileColor]:
        return self.cell_at(row, col).color

    def is_inert(self, row: int, col: int) -> bool:
        return self.cell_at(row, col).color is TileColor.BLACK

    def is_filled(self, row: int, col: int) -> bool:
        return self.cell_at(row, col).filled

    def swap(self, a: Position, b: Position) -> None:
        """Exchange the colors of two cells. Filled flags stay where they are.

        No legality checks beyond bounds; adjacency is the caller's concern.
        """
        cell_a = self.cell_at(*a)
        cell_b = self.cell_at(*b)
        cell_a.color, cell_b.color = cell_b.color, cell_a.color

    def reset(self) -> None:
        for row_cells in self.cells:
            for cell in row_cells:
                cell.color = None
                cell.filled = False

    def positions(self) -> Iterator[Position]:
        for row in range(self.rows):
            for col in range(self.cols):
                yield (row, col)

    def snapshot(self) -> Tuple[Tuple[Optional[TileColor], ...], ...]:
        return tuple(tuple(cell.color for cell in row_cells) for row_cells in self.cells)

    def describe(self) -> str:
        """Text dump of filled flags, one line per row, row 0 first."""
        return "\n".join(
            " ".join("1" if cell.filled else "0" for cell in row_cells)
            for row_cells in self.cells
        )
