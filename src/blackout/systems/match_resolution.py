import logging
from typing import List

from esper import World

from blackout.components.game_state import GameMode
from blackout.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_MATCH_CLEARED,
    EVENT_MATCH_FOUND,
    EVENT_SCORE_CHANGED,
    EVENT_TILE_SWAP_FINALIZE,
)
from blackout.systems.board_ops import get_board, resolve_matches
from blackout.systems.match import Match
from blackout.utils.game_state import get_game_state, get_score

logger = logging.getLogger(__name__)


class MatchResolutionSystem:
    """Runs one match check after every finished swap attempt, accepted or not."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.last_matches: List[Match] = []
        self.event_bus.subscribe(EVENT_TILE_SWAP_FINALIZE, self.on_swap_finalize)

    def on_swap_finalize(self, sender, **kwargs):
        if get_game_state(self.world).mode != GameMode.PLAYING:
            return
        self.resolve(reason="swap")

    def resolve(self, reason: str) -> List[Match]:
        board = get_board(self.world)
        score = get_score(self.world)
        before = score.value
        matches = resolve_matches(board, score)
        self.last_matches = matches
        if not matches:
            return matches
        cleared = []
        for match in matches:
            positions = match.positions()
            cleared.extend(positions)
            logger.info("Cleared %s run at row %d col %d", match.orientation.value, match.row, match.col)
            self.event_bus.emit(EVENT_MATCH_FOUND, orientation=match.orientation.value, positions=positions)
        self.event_bus.emit(EVENT_MATCH_CLEARED, positions=cleared, matches=len(matches))
        logger.info("Current score: %d", score.value)
        self.event_bus.emit(EVENT_SCORE_CHANGED, score=score.value, delta=score.value - before)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason=reason, positions=cleared)
        return matches
