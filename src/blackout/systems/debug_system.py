from __future__ import annotations

import logging

from esper import World

from blackout.constants import KEY_DOWN, KEY_UP
from blackout.events.bus import EVENT_KEY_PRESS, EventBus
from blackout.systems.board_ops import get_board

logger = logging.getLogger(__name__)


class BoardDebugSystem:
    """Logs board state on key presses: Up dumps the grid, Down the bottom-left cell."""

    def __init__(self, world: World, event_bus: EventBus, *, cell: tuple[int, int] = (0, 0)) -> None:
        self.world = world
        self.event_bus = event_bus
        self.cell = cell
        self.event_bus.subscribe(EVENT_KEY_PRESS, self._on_key_press)

    def _on_key_press(self, sender, **payload) -> None:
        key = payload.get("key")
        if key == KEY_UP:
            logger.info("Board filled flags (row 0 first):\n%s", self.grid_report())
        elif key == KEY_DOWN:
            logger.info("%s", self.cell_report(*self.cell))

    def grid_report(self) -> str:
        return get_board(self.world).describe()

    def cell_report(self, row: int, col: int) -> str:
        board = get_board(self.world)
        if not board.in_bounds(row, col):
            return "Invalid indices"
        cell = board.cell_at(row, col)
        color = cell.color.value if cell.color is not None else "empty"
        return f"row: {row}, col: {col}, color: {color}, filled: {cell.filled}"
