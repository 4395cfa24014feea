from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class TileColor(Enum):
    """Symbolic cell colors. BLACK marks a cleared (inert) cell."""
    WHITE = "white"
    DARK_BLUE = "dark blue"
    LIGHT_BLUE = "light blue"
    LIGHT_ORANGE = "light orange"
    DARK_ORANGE = "dark orange"
    WHITE_ORANGE = "white orange"
    BLACK = "black"


# Draw order used by the generator: index i of a random draw maps to PALETTE[i].
PALETTE: Tuple[TileColor, ...] = (
    TileColor.WHITE,
    TileColor.DARK_BLUE,
    TileColor.LIGHT_BLUE,
    TileColor.LIGHT_ORANGE,
    TileColor.DARK_ORANGE,
    TileColor.WHITE_ORANGE,
)


@dataclass(slots=True)
class Cell:
    """One board slot.

    color is None while the cell is empty; filled flips to True once the
    generator (or a test) places a tile there. Clearing a run only recolors
    the cell to BLACK, it never unfills it.
    """
    color: Optional[TileColor] = None
    filled: bool = False
