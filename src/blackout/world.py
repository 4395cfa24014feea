from __future__ import annotations

import random
from typing import Callable

from esper import World

from blackout.components.game_state import GameMode, GameState
from blackout.components.game_timer import GameTimer
from blackout.components.score import Score
from blackout.constants import SESSION_DURATION
from blackout.events.bus import EventBus


def create_world(
    event_bus: EventBus,
    initial_mode: GameMode = GameMode.PLAYING,
    *,
    rng: random.Random | None = None,
    clock: Callable[[], float] | None = None,
    duration: float = SESSION_DURATION,
) -> World:
    """Build the world with the session singletons (state, score, timer).

    The board itself is created by BoardSystem, which owns its generation.
    """
    world = World()
    setattr(world, "random", rng or random.Random())

    world.create_entity(
        GameState(mode=initial_mode),
        Score(),
        GameTimer(duration=duration, clock=clock),
    )
    return world
