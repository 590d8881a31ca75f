"""Exception hierarchy for the Tic Tac Toe core.

All errors raised by the core derive from TicTacToeError. Suggestion service
failures never surface here: the controller absorbs them and plays a
fallback move instead.
"""

from typing import Optional

from .models import Move

__all__ = [
    "TicTacToeError",
    "IllegalMoveError",
    "NoLegalMoveError",
    "IndexOutOfRangeError",
    "ConfigurationError",
]


class TicTacToeError(Exception):
    """Base exception for all Tic Tac Toe errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class IllegalMoveError(TicTacToeError):
    """Move targets an occupied or out-of-range cell."""

    def __init__(self, message: str, move: Optional[Move] = None):
        super().__init__(message)
        self.move = move


class NoLegalMoveError(TicTacToeError):
    """No empty cell is left on the board."""


class IndexOutOfRangeError(TicTacToeError, IndexError):
    """History index outside the recorded history."""

    def __init__(self, index: int, length: int):
        super().__init__(f"History index {index} out of range (history has {length} entries)")
        self.index = index
        self.length = length


class ConfigurationError(TicTacToeError):
    """Invalid value in process configuration."""
