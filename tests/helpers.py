from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, Tuple

from esper import World

from blackout.components.board import Board
from blackout.components.tile import PALETTE, TileColor
from blackout.events.bus import EventBus
from blackout.systems.board import BoardSystem
from blackout.systems.board_ops import AdjacencyRule
from blackout.systems.match_resolution import MatchResolutionSystem
from blackout.systems.session_system import SessionSystem
from blackout.world import create_world


class FakeClock:
    def __init__(self) -> None:
        self.value = 0.0

    def advance(self, amount: float) -> None:
        self.value += amount

    def __call__(self) -> float:
        return self.value


def paint_board(board: Board, overrides: Dict[Tuple[int, int], TileColor] | None = None) -> None:
    """Fill the board with a run-free pattern, then apply per-cell overrides.

    The base pattern steps two palette slots per column and one per row, so no
    two neighbours share a color in either direction.
    """
    for row in range(board.rows):
        for col in range(board.cols):
            board.fill(row, col, PALETTE[(row + 2 * col) % len(PALETTE)])
    for (row, col), color in (overrides or {}).items():
        board.fill(row, col, color)


@dataclass
class Session:
    bus: EventBus
    world: World
    clock: FakeClock
    board_system: BoardSystem
    match_system: MatchResolutionSystem
    session_system: SessionSystem

    @property
    def board(self) -> Board:
        return self.board_system.board


def build_session(
    *,
    seed: int = 7,
    adjacency: AdjacencyRule = AdjacencyRule.STRICT,
    painted: bool = True,
) -> Session:
    bus = EventBus()
    clock = FakeClock()
    world = create_world(bus, rng=random.Random(seed), clock=clock)
    session_system = SessionSystem(world, bus)
    board_system = BoardSystem(world, bus, adjacency=adjacency)
    match_system = MatchResolutionSystem(world, bus)
    if painted:
        paint_board(board_system.board)
    return Session(bus, world, clock, board_system, match_system, session_system)
