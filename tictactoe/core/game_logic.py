"""Core Tic Tac Toe rules: outcome evaluation."""

from typing import Tuple

from . import board
from .models import BoardSnapshot, Mark, Outcome

Line = Tuple[Tuple[int, int], Tuple[int, int], Tuple[int, int]]

# Order matters: the first complete line is the one reported.
WINNING_LINES: Tuple[Line, ...] = (
    # rows
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    # columns
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    # diagonals
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)


def evaluate(snapshot: BoardSnapshot) -> Outcome:
    """Compute the outcome of a board.

    Returns ``Outcome.won`` for the first line in ``WINNING_LINES`` held
    entirely by one mark, ``Outcome.draw`` for a full board without such a
    line, and ``Outcome.in_progress`` otherwise.
    """
    for line in WINNING_LINES:
        (a, b), (c, d), (e, f) = line
        mark = snapshot.cell(a, b)
        if mark is not Mark.EMPTY and mark is snapshot.cell(c, d) and mark is snapshot.cell(e, f):
            return Outcome.won(mark, line)

    if board.is_full(snapshot):
        return Outcome.draw()
    return Outcome.in_progress()
