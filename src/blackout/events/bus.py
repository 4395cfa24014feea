from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"                  # payload: x, y (top-down pixels), button
EVENT_KEY_PRESS = "key_press"                      # payload: key=int, modifiers=int
EVENT_TILE_CLICK = "tile_click"                    # payload: row, col
EVENT_CLICK_REJECTED = "click_rejected"            # payload: row, col, reason=str


# ============================================================================
# SELECTION & SWAP
# ============================================================================
EVENT_TILE_SELECTED = "tile_selected"              # payload: row, col
EVENT_TILE_DESELECTED = "tile_deselected"          # payload: reason=str, prev_row, prev_col
EVENT_TILE_SWAP_VALID = "tile_swap_valid"          # payload: src=(r,c), dst=(r,c)
EVENT_TILE_SWAP_INVALID = "tile_swap_invalid"      # payload: src=(r,c), dst=(r,c), reason=str
EVENT_TILE_SWAP_FINALIZE = "tile_swap_finalize"    # payload: src=(r,c), dst=(r,c), accepted=bool


# ============================================================================
# MATCHES & SCORE
# ============================================================================
EVENT_MATCH_FOUND = "match_found"                  # payload: orientation=str, positions=[(r,c),...]
EVENT_MATCH_CLEARED = "match_cleared"              # payload: positions=[(r,c),...], matches=int
EVENT_SCORE_CHANGED = "score_changed"              # payload: score=int, delta=int
EVENT_BOARD_CHANGED = "board_changed"              # payload: reason=str, positions=list[(r,c)]


# ============================================================================
# SESSION
# ============================================================================
EVENT_SESSION_START_REQUEST = "session_start_request"  # payload: reason=str|None
EVENT_SESSION_STARTED = "session_started"              # payload: duration=float
EVENT_GAME_MODE_CHANGED = "game_mode_changed"          # payload: previous_mode=GameMode|None, new_mode=GameMode
EVENT_GAME_OVER = "game_over"                          # payload: score=int, elapsed=float
