from __future__ import annotations

import math

from blackout.components.game_state import GameMode
from blackout.constants import GRID_COLS, MOUSE_BUTTON_LEFT
from blackout.events.bus import (
    EventBus,
    EVENT_MOUSE_PRESS,
    EVENT_TILE_CLICK,
)
from blackout.ui.layout import CoordinateMapper
from blackout.utils.game_state import get_game_state


class InputSystem:
    """Turns left clicks on the board into EVENT_TILE_CLICK(row, col).

    Presses arrive in top-down pixel space. Presses off the board, with other
    buttons, or after the session ended are dropped here.
    """

    def __init__(self, event_bus: EventBus, world=None, mapper: CoordinateMapper | None = None, cols: int = GRID_COLS):
        self.event_bus = event_bus
        self.world = world  # optional; without it every press is treated as in-session
        self.mapper = mapper or CoordinateMapper()
        self.cols = cols
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button', MOUSE_BUTTON_LEFT)
        if x is None or y is None:
            return
        try:
            xf = float(x)
            yf = float(y)
        except (TypeError, ValueError):
            return
        if not (math.isfinite(xf) and math.isfinite(yf)):
            return
        if button != MOUSE_BUTTON_LEFT:
            return
        if not self._playing():
            return
        if not self.mapper.contains(xf, yf, self.cols):
            return
        row, col = self.mapper.to_grid(xf, yf)
        if 0 <= row < self.mapper.rows and 0 <= col < self.cols:
            self.event_bus.emit(EVENT_TILE_CLICK, row=row, col=col)

    def _playing(self) -> bool:
        if self.world is None:
            return True
        return get_game_state(self.world).mode == GameMode.PLAYING
