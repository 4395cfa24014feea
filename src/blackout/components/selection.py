from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(slots=True)
class SelectionState:
    """First half of a two-click swap. ``pending is None`` means idle."""
    pending: Optional[Tuple[int, int]] = None

    @property
    def is_idle(self) -> bool:
        return self.pending is None

    def select(self, row: int, col: int) -> None:
        self.pending = (row, col)

    def clear(self) -> Optional[Tuple[int, int]]:
        previous = self.pending
        self.pending = None
        return previous
