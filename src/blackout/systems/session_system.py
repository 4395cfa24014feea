"""Session driver: starts sessions and ends them when the timer runs out."""
from __future__ import annotations

import logging

from esper import World

from blackout.components.game_state import GameMode
from blackout.events.bus import (
    EVENT_GAME_OVER,
    EVENT_SCORE_CHANGED,
    EVENT_SESSION_START_REQUEST,
    EVENT_SESSION_STARTED,
    EVENT_TICK,
    EventBus,
)
from blackout.utils.game_state import (
    end_session_if_expired,
    get_game_state,
    get_score,
    get_timer,
    set_game_mode,
)

logger = logging.getLogger(__name__)


class SessionSystem:
    """Polls the session timer once per tick and handles restart requests."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.final_score: int | None = None
        self.event_bus.subscribe(EVENT_TICK, self._on_tick)
        self.event_bus.subscribe(EVENT_SESSION_START_REQUEST, self._on_start_request)
        self.event_bus.subscribe(EVENT_GAME_OVER, self._on_game_over)

    @property
    def game_over(self) -> bool:
        return get_game_state(self.world).mode == GameMode.GAME_OVER

    def start_session(self, reason: str | None = None) -> None:
        score = get_score(self.world)
        previous = score.value
        score.reset()
        timer = get_timer(self.world)
        timer.restart()
        self.final_score = None
        set_game_mode(self.world, self.event_bus, GameMode.PLAYING)
        logger.info("Session started (%s), %.0f seconds on the clock", reason or "request", timer.duration)
        self.event_bus.emit(EVENT_SESSION_STARTED, duration=timer.duration)
        if previous:
            self.event_bus.emit(EVENT_SCORE_CHANGED, score=0, delta=-previous)

    def _on_start_request(self, sender, **payload) -> None:
        self.start_session(reason=payload.get("reason"))

    def _on_tick(self, sender, **payload) -> None:
        end_session_if_expired(self.world, self.event_bus)

    def _on_game_over(self, sender, **payload) -> None:
        self.final_score = payload.get("score")
        logger.info("Game over! Final score: %s", self.final_score)
