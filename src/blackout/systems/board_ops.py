from __future__ import annotations

from enum import Enum
from typing import List, Tuple

from esper import World

from blackout.components.board import Board
from blackout.components.score import Score
from blackout.constants import MATCH_SCORE
from blackout.errors import IllegalSwap
from blackout.systems.match import Match, find_horizontal_match, find_vertical_match

Position = Tuple[int, int]


class AdjacencyRule(Enum):
    """How two clicked cells are judged to be neighbours.

    STRICT is plain 4-neighbour adjacency. LINEAR compares ``col * rows + row``
    indices and accepts a difference of 1 or ``rows``; it also lets the top
    cell of one column pair with the bottom cell of the next.
    """
    STRICT = "strict"
    LINEAR = "linear"


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board component not found")


def linear_index(row: int, col: int, rows: int) -> int:
    return col * rows + row


def is_adjacent(a: Position, b: Position) -> bool:
    ar, ac = a
    br, bc = b
    return abs(ar - br) + abs(ac - bc) == 1


def is_linear_adjacent(a: Position, b: Position, rows: int) -> bool:
    diff = abs(linear_index(b[0], b[1], rows) - linear_index(a[0], a[1], rows))
    return diff in (1, rows)


def validate_swap(board: Board, src: Position, dst: Position, rule: AdjacencyRule = AdjacencyRule.STRICT) -> None:
    """Raise IllegalSwap unless src and dst may be exchanged."""
    if not (board.in_bounds(*src) and board.in_bounds(*dst)):
        raise IllegalSwap(src, dst, "out_of_range")
    if board.is_inert(*src) or board.is_inert(*dst):
        raise IllegalSwap(src, dst, "inert")
    if rule is AdjacencyRule.LINEAR:
        adjacent = is_linear_adjacent(src, dst, board.rows)
    else:
        adjacent = is_adjacent(src, dst)
    if not adjacent:
        raise IllegalSwap(src, dst, "not_adjacent")


def clear_match(board: Board, match: Match) -> List[Position]:
    positions = match.positions()
    for row, col in positions:
        board.set_inert(row, col)
    return positions


def resolve_matches(board: Board, score: Score) -> List[Match]:
    """Clear at most one horizontal and then one vertical run.

    The vertical scan runs on the board as left by the horizontal clear, so a
    cell already blacked out cannot be counted twice. Each clear is worth
    MATCH_SCORE. Nothing falls or refills afterwards.
    """
    resolved: List[Match] = []
    horizontal = find_horizontal_match(board)
    if horizontal is not None:
        clear_match(board, horizontal)
        score.add(MATCH_SCORE)
        resolved.append(horizontal)
    vertical = find_vertical_match(board)
    if vertical is not None:
        clear_match(board, vertical)
        score.add(MATCH_SCORE)
        resolved.append(vertical)
    return resolved
