"""Entry point for the Blackout match-four puzzle.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, run, set_background_color, color
from blackout.world import create_world
from blackout.constants import KEY_ESCAPE, KEY_R, WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE
from blackout.events.bus import (
    EventBus,
    EVENT_TICK,
    EVENT_MOUSE_PRESS,
    EVENT_KEY_PRESS,
    EVENT_SESSION_START_REQUEST,
)
from blackout.systems.board import BoardSystem
from blackout.systems.debug_system import BoardDebugSystem
from blackout.systems.input import InputSystem
from blackout.systems.match_resolution import MatchResolutionSystem
from blackout.systems.render import RenderSystem
from blackout.systems.session_system import SessionSystem


class BlackoutWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus)
        self.session_system = SessionSystem(self.world, self.event_bus)
        self.board_system = BoardSystem(self.world, self.event_bus)
        self.match_resolution_system = MatchResolutionSystem(self.world, self.event_bus)
        self.input_system = InputSystem(self.event_bus, self.world)
        self.debug_system = BoardDebugSystem(self.world, self.event_bus)
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        # The world and BoardSystem already hold a live session: timer armed, board generated.
        set_background_color(color.BLACK)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        # Arcade's y axis points up; the board works in top-down pixels.
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=self.height - y, button=button)

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == KEY_ESCAPE:
            self.close()
            return
        if symbol == KEY_R and self.session_system.game_over:
            self.event_bus.emit(EVENT_SESSION_START_REQUEST, reason="restart")
            return
        self.event_bus.emit(EVENT_KEY_PRESS, key=symbol, modifiers=modifiers)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    window = BlackoutWindow()
    run()

if __name__ == "__main__":
    main()
