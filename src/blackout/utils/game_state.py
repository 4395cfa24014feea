from __future__ import annotations

from esper import World

from blackout.components.game_state import GameMode, GameState
from blackout.components.game_timer import GameTimer
from blackout.components.score import Score
from blackout.errors import SessionExpired
from blackout.events.bus import EVENT_GAME_MODE_CHANGED, EVENT_GAME_OVER, EventBus


def get_game_state(world: World) -> GameState:
    for _, state in world.get_component(GameState):
        return state
    state = GameState()
    world.create_entity(state)
    return state


def get_score(world: World) -> Score:
    for _, score in world.get_component(Score):
        return score
    raise RuntimeError("Score component not found")


def get_timer(world: World) -> GameTimer:
    for _, timer in world.get_component(GameTimer):
        return timer
    raise RuntimeError("GameTimer component not found")


def set_game_mode(world: World, event_bus: EventBus, mode: GameMode) -> bool:
    """Update the global game mode and emit a change event when it differs."""

    state = get_game_state(world)
    previous_mode = state.mode
    if previous_mode == mode:
        return False
    state.mode = mode
    event_bus.emit(
        EVENT_GAME_MODE_CHANGED,
        previous_mode=previous_mode,
        new_mode=mode,
    )
    return True


def end_session_if_expired(world: World, event_bus: EventBus) -> bool:
    """Enter GAME_OVER once the timer has run out. Returns True when the game is over.

    Emits EVENT_GAME_OVER exactly once per session, on the transition.
    """
    state = get_game_state(world)
    if state.mode == GameMode.GAME_OVER:
        return True
    timer = get_timer(world)
    if not timer.expired():
        return False
    set_game_mode(world, event_bus, GameMode.GAME_OVER)
    event_bus.emit(EVENT_GAME_OVER, score=get_score(world).value, elapsed=timer.elapsed())
    return True


def ensure_session_active(world: World, event_bus: EventBus) -> None:
    if end_session_if_expired(world, event_bus):
        raise SessionExpired("session is over; board is frozen")
