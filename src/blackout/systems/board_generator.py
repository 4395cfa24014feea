from __future__ import annotations

import random
from typing import List

from blackout.components.board import Board
from blackout.components.tile import PALETTE, TileColor
from blackout.constants import MAX_COLOR_STREAK


def _draw_color_index(rng: random.Random, counters: List[int]) -> int:
    """Pick a palette index, redrawing once a color has been drawn MAX_COLOR_STREAK times running.

    ``counters`` holds one streak counter per palette color. Only the chosen
    color keeps counting; every other counter drops back to zero.
    """
    last = len(counters) - 1
    index = rng.randint(0, last)
    if counters[index] >= MAX_COLOR_STREAK:
        redraw = index
        while redraw == index:
            redraw = rng.randint(0, last)
        index = redraw
    counters[index] += 1
    for other in range(len(counters)):
        if other != index:
            counters[other] = 0
    return index


def generate_board(board: Board, rng: random.Random | None = None) -> None:
    """Fill every cell of ``board`` with a palette color.

    Cells are visited column-major (outer loop columns, inner loop rows from
    the bottom up) so that a seeded ``rng`` reproduces the same board. The
    streak limit only applies to that visiting order; four-in-a-row runs can
    still appear on the finished board.
    """
    rng = rng or random.Random()
    counters = [0] * len(PALETTE)
    for col in range(board.cols):
        for row in range(board.rows):
            color: TileColor = PALETTE[_draw_color_index(rng, counters)]
            board.fill(row, col, color)
