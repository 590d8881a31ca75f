"""Core data models for Tic Tac Toe."""

from typing import Iterable, Optional, Tuple
from dataclasses import dataclass
from enum import Enum

BOARD_SIZE = 3


class Mark(Enum):
    X = "X"  # First player
    O = "O"  # Second player
    EMPTY = "."

    @classmethod
    def coerce(cls, value) -> "Mark":
        """Convert a Mark, its character, or None/"" (empty) into a Mark."""
        if isinstance(value, Mark):
            return value
        if value is None or value == "":
            return cls.EMPTY
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Invalid cell value: {value!r}") from None

    def opponent(self) -> "Mark":
        if self is Mark.X:
            return Mark.O
        if self is Mark.O:
            return Mark.X
        raise ValueError("Empty cell has no opponent")


class GameMode(Enum):
    HUMAN_VS_HUMAN = "pvp"
    HUMAN_VS_COMPUTER = "pvc"


class OutcomeStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


class MoveSource(Enum):
    HUMAN = "human"
    SUGGESTION = "suggestion"  # Accepted from the move suggestion service
    FALLBACK = "fallback"  # Built-in first-empty-cell strategy


@dataclass(frozen=True)
class Move:
    row: int
    col: int

    def in_bounds(self) -> bool:
        """True iff both coordinates are ints in [0, BOARD_SIZE)."""
        for value in (self.row, self.col):
            if isinstance(value, bool) or not isinstance(value, int):
                return False
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE


@dataclass(frozen=True)
class BoardSnapshot:
    """Immutable 3x3 grid of marks."""

    cells: Tuple[Tuple[Mark, ...], ...]

    def __post_init__(self):
        if len(self.cells) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in self.cells):
            raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}")
        for row in self.cells:
            for cell in row:
                if not isinstance(cell, Mark):
                    raise ValueError(f"Invalid cell value: {cell!r}")

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable]) -> "BoardSnapshot":
        """Build a snapshot from rows of marks, mark characters or None."""
        return cls(tuple(tuple(Mark.coerce(cell) for cell in row) for row in rows))

    def cell(self, row: int, col: int) -> Mark:
        return self.cells[row][col]

    def count_marks(self) -> int:
        return sum(1 for row in self.cells for cell in row if cell is not Mark.EMPTY)


@dataclass(frozen=True)
class Outcome:
    status: OutcomeStatus
    winner: Optional[Mark] = None
    winning_line: Optional[Tuple[Tuple[int, int], ...]] = None

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls(OutcomeStatus.IN_PROGRESS)

    @classmethod
    def won(cls, winner: Mark, line: Iterable[Tuple[int, int]]) -> "Outcome":
        return cls(OutcomeStatus.WON, winner, tuple(tuple(pos) for pos in line))

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(OutcomeStatus.DRAW)

    @property
    def is_terminal(self) -> bool:
        return self.status is not OutcomeStatus.IN_PROGRESS


@dataclass(frozen=True)
class HistoryEntry:
    snapshot: BoardSnapshot
    move: Optional[Move] = None
    player: Optional[Mark] = None


@dataclass(frozen=True)
class SessionState:
    """Authoritative state of one game session."""

    history: Tuple[HistoryEntry, ...]
    current_index: int
    mode: GameMode
    generation: int = 0

    @property
    def current(self) -> HistoryEntry:
        return self.history[self.current_index]

    @property
    def turn(self) -> Mark:
        # X always moves first, so odd-numbered entries are O's moves
        return Mark.X if self.current_index % 2 == 0 else Mark.O


@dataclass(frozen=True)
class MoveResult:
    """Result of a controller mutation, carrying the re-evaluated outcome."""

    accepted: bool
    outcome: Outcome
    move: Optional[Move] = None
    player: Optional[Mark] = None
    source: Optional[MoveSource] = None
    reason: Optional[str] = None
