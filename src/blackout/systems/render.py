from __future__ import annotations

from esper import World

from blackout.components.board import Board
from blackout.events.bus import (
    EventBus,
    EVENT_SESSION_STARTED,
    EVENT_TILE_DESELECTED,
    EVENT_TILE_SELECTED,
)
from blackout.rendering.board_renderer import BoardRenderer
from blackout.rendering.hud_renderer import HudRenderer
from blackout.systems.board_ops import get_board
from blackout.ui.layout import CoordinateMapper


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window, mapper: CoordinateMapper | None = None):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.mapper = mapper or CoordinateMapper()
        self.selected = None
        self._last_cell_rects = {}
        self.event_bus.subscribe(EVENT_TILE_SELECTED, self.on_tile_selected)
        self.event_bus.subscribe(EVENT_TILE_DESELECTED, self.on_tile_deselected)
        self.event_bus.subscribe(EVENT_SESSION_STARTED, self.on_tile_deselected)
        self._board_renderer = BoardRenderer(self)
        self._hud_renderer = HudRenderer(self)

    def board(self) -> Board:
        return get_board(self.world)

    def on_tile_selected(self, sender, **kwargs):
        self.selected = (kwargs.get('row'), kwargs.get('col'))

    def on_tile_deselected(self, sender, **kwargs):
        self.selected = None

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        self._board_renderer.render(arcade, headless)
        self._hud_renderer.render(arcade, headless)
