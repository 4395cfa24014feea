import logging
import random
from typing import Optional, Tuple

from esper import World

from blackout.components.board import Board
from blackout.components.selection import SelectionState
from blackout.constants import GRID_COLS, GRID_ROWS
from blackout.errors import IllegalSwap, SessionExpired
from blackout.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_CLICK_REJECTED,
    EVENT_SESSION_STARTED,
    EVENT_TILE_CLICK,
    EVENT_TILE_DESELECTED,
    EVENT_TILE_SELECTED,
    EVENT_TILE_SWAP_FINALIZE,
    EVENT_TILE_SWAP_INVALID,
    EVENT_TILE_SWAP_VALID,
)
from blackout.systems.board_generator import generate_board
from blackout.systems.board_ops import AdjacencyRule, validate_swap
from blackout.utils.game_state import ensure_session_active

logger = logging.getLogger(__name__)


def _is_index(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class BoardSystem:
    """Owns the board entity and runs the two-click select/swap protocol.

    The first click on a cell marks it pending. The second click tries a swap
    with the pending cell and always returns to idle, then emits
    EVENT_TILE_SWAP_FINALIZE so the match check runs exactly once per attempt.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        rows: int = GRID_ROWS,
        cols: int = GRID_COLS,
        *,
        adjacency: AdjacencyRule = AdjacencyRule.STRICT,
        rng: Optional[random.Random] = None,
    ):
        self.world = world
        self.event_bus = event_bus
        self.adjacency = adjacency
        self._rng = rng or getattr(world, "random", None) or random.Random()
        self.board = Board(rows=rows, cols=cols)
        self.board_entity = self.world.create_entity(self.board)
        self.selection = SelectionState()
        self.event_bus.subscribe(EVENT_TILE_CLICK, self.on_tile_click)
        self.event_bus.subscribe(EVENT_SESSION_STARTED, self.on_session_started)
        self._init_board()

    @property
    def selected(self) -> Optional[Tuple[int, int]]:
        return self.selection.pending

    def _init_board(self):
        self.board.reset()
        generate_board(self.board, self._rng)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="generated", positions=list(self.board.positions()))

    def on_session_started(self, sender, **kwargs):
        prev = self.selection.clear()
        if prev is not None:
            self.event_bus.emit(EVENT_TILE_DESELECTED, reason="new_session", prev_row=prev[0], prev_col=prev[1])
        self._init_board()

    def on_tile_click(self, sender, **kwargs):
        row = kwargs.get('row')
        col = kwargs.get('col')
        if not (_is_index(row) and _is_index(col)):
            return
        try:
            ensure_session_active(self.world, self.event_bus)
        except SessionExpired:
            self._drop_selection("session_expired")
            self.event_bus.emit(EVENT_CLICK_REJECTED, row=row, col=col, reason="session_expired")
            return
        if self.selection.is_idle:
            if not self.board.in_bounds(row, col):
                self.event_bus.emit(EVENT_CLICK_REJECTED, row=row, col=col, reason="out_of_range")
                return
            self.selection.select(row, col)
            self.event_bus.emit(EVENT_TILE_SELECTED, row=row, col=col)
            return
        src = self.selection.clear()
        dst = (row, col)
        self.event_bus.emit(EVENT_TILE_DESELECTED, reason="swap_attempt", prev_row=src[0], prev_col=src[1])
        accepted = self.try_swap(src, dst)
        self.event_bus.emit(EVENT_TILE_SWAP_FINALIZE, src=src, dst=dst, accepted=accepted)

    def try_swap(self, src: Tuple[int, int], dst: Tuple[int, int]) -> bool:
        try:
            validate_swap(self.board, src, dst, self.adjacency)
        except IllegalSwap as exc:
            logger.info("Invalid click: %s", exc)
            self.event_bus.emit(EVENT_TILE_SWAP_INVALID, src=src, dst=dst, reason=exc.reason)
            return False
        self.board.swap(src, dst)
        logger.info("Swapped %s with %s", src, dst)
        self.event_bus.emit(EVENT_TILE_SWAP_VALID, src=src, dst=dst)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="swap", positions=[src, dst])
        return True

    def _drop_selection(self, reason: str):
        prev = self.selection.clear()
        if prev is not None:
            self.event_bus.emit(EVENT_TILE_DESELECTED, reason=reason, prev_row=prev[0], prev_col=prev[1])
