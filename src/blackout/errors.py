"""Validation errors raised by the board model and the swap controller.

None of these are fatal to the game loop: systems catch them, emit a
rejection event and carry on with the board untouched.
"""
from __future__ import annotations

from typing import Tuple

Position = Tuple[int, int]


class BoardError(Exception):
    """Base class for board and session validation failures."""


class OutOfRange(BoardError, IndexError):
    """A coordinate outside the board was requested."""

    def __init__(self, row: int, col: int, rows: int, cols: int):
        super().__init__(f"cell ({row}, {col}) is outside a {rows}x{cols} board")
        self.row = row
        self.col = col


class IllegalSwap(BoardError):
    """Two cells cannot be swapped (off-board, inert, or not neighbours)."""

    def __init__(self, src: Position, dst: Position, reason: str):
        super().__init__(f"cannot swap {src} with {dst}: {reason}")
        self.src = src
        self.dst = dst
        self.reason = reason


class SessionExpired(BoardError):
    """The session timer ran out; the board no longer accepts mutations."""
