"""Run detection for the board.

Both scans report only the first run they meet and stop there; a board with
several runs needs several turns to clear them.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from blackout.components.board import Board
from blackout.components.tile import TileColor
from blackout.constants import MATCH_LENGTH

Position = Tuple[int, int]


class Orientation(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True, slots=True)
class Match:
    """A run of MATCH_LENGTH cells starting at (row, col).

    Horizontal runs extend toward higher columns, vertical runs toward higher rows.
    """
    orientation: Orientation
    row: int
    col: int
    length: int = MATCH_LENGTH

    def positions(self) -> List[Position]:
        if self.orientation is Orientation.HORIZONTAL:
            return [(self.row, self.col + offset) for offset in range(self.length)]
        return [(self.row + offset, self.col) for offset in range(self.length)]


def _matchable_color(board: Board, row: int, col: int) -> Optional[TileColor]:
    cell = board.cell_at(row, col)
    if not cell.filled or cell.color is None or cell.color is TileColor.BLACK:
        return None
    return cell.color


def _scan_line(board: Board, line: List[Position]) -> Optional[int]:
    """Return the index in ``line`` where the first run starts, or None."""
    streak = 0
    last_color: Optional[TileColor] = None
    for index, (row, col) in enumerate(line):
        color = _matchable_color(board, row, col)
        if color is not None and color == last_color:
            streak += 1
        else:
            streak = 1 if color is not None else 0
            last_color = color
        if streak == MATCH_LENGTH:
            return index - (MATCH_LENGTH - 1)
    return None


def find_horizontal_match(board: Board) -> Optional[Match]:
    for row in range(board.rows):
        line = [(row, col) for col in range(board.cols)]
        start = _scan_line(board, line)
        if start is not None:
            return Match(Orientation.HORIZONTAL, row, start)
    return None


def find_vertical_match(board: Board) -> Optional[Match]:
    for col in range(board.cols):
        line = [(row, col) for row in range(board.rows)]
        start = _scan_line(board, line)
        if start is not None:
            return Match(Orientation.VERTICAL, start, col)
    return None
