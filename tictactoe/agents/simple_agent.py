"""Fallback move selection for the computer player."""

from ..core import board
from ..core.exceptions import NoLegalMoveError
from ..core.models import BoardSnapshot, Move


def select_move(snapshot: BoardSnapshot) -> Move:
    """Pick the first empty cell in row-major order.

    Deterministic and deliberately simple; this is not a perfect player.

    Raises:
        NoLegalMoveError: if the board is full.
    """
    legal_moves = board.legal_moves(snapshot)
    if legal_moves:
        return legal_moves[0]

    raise NoLegalMoveError("No empty cell left on the board")
