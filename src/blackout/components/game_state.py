"""Game state resource describing the active session mode."""
from dataclasses import dataclass
from enum import Enum, auto


class GameMode(Enum):
    """PLAYING accepts clicks; GAME_OVER is terminal until a new session starts."""
    PLAYING = auto()
    GAME_OVER = auto()


@dataclass
class GameState:
    """Singleton component storing the current session mode."""
    mode: GameMode = GameMode.PLAYING
