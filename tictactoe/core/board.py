"""Board model: pure functions over immutable snapshots."""

from typing import List

from .exceptions import IllegalMoveError
from .models import BOARD_SIZE, BoardSnapshot, Mark, Move


def empty() -> BoardSnapshot:
    """Create empty board."""
    return BoardSnapshot(tuple(tuple(Mark.EMPTY for _ in range(BOARD_SIZE)) for _ in range(BOARD_SIZE)))


def is_legal(snapshot: BoardSnapshot, move: Move) -> bool:
    """Check if move is in range and targets an empty cell."""
    if not move.in_bounds():
        return False
    return snapshot.cell(move.row, move.col) is Mark.EMPTY


def apply(snapshot: BoardSnapshot, move: Move, mark: Mark) -> BoardSnapshot:
    """Return a new snapshot with `mark` placed at `move`.

    Raises:
        IllegalMoveError: if the move is out of range, the cell is taken,
            or `mark` is EMPTY.
    """
    if mark is Mark.EMPTY:
        raise IllegalMoveError("Cannot place an empty mark", move)
    if not move.in_bounds():
        raise IllegalMoveError(f"Move ({move.row}, {move.col}) is off the board", move)
    if snapshot.cell(move.row, move.col) is not Mark.EMPTY:
        raise IllegalMoveError(f"Cell ({move.row}, {move.col}) is already occupied", move)

    return BoardSnapshot(
        tuple(
            tuple(mark if (r, c) == (move.row, move.col) else cell for c, cell in enumerate(row))
            for r, row in enumerate(snapshot.cells)
        )
    )


def is_full(snapshot: BoardSnapshot) -> bool:
    """Check if board is full."""
    for row in snapshot.cells:
        if Mark.EMPTY in row:
            return False
    return True


def legal_moves(snapshot: BoardSnapshot) -> List[Move]:
    """Get all legal moves in row-major order."""
    moves = []
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            if snapshot.cell(row, col) is Mark.EMPTY:
                moves.append(Move(row, col))
    return moves
