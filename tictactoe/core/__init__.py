from .models import (
    BOARD_SIZE,
    Mark,
    Move,
    BoardSnapshot,
    Outcome,
    OutcomeStatus,
    HistoryEntry,
    GameMode,
    MoveSource,
    MoveResult,
    SessionState,
)
from .exceptions import (
    TicTacToeError,
    IllegalMoveError,
    NoLegalMoveError,
    IndexOutOfRangeError,
    ConfigurationError,
)
from . import board
from .game_logic import WINNING_LINES, evaluate
from .prompt_formatters import (
    PromptFormatter,
    create_prompt_formatter,
    DashFormatter,
    StandardGridFormatter,
    NaturalLanguageFormatter,
    JSONFormatter,
)

__all__ = [
    "BOARD_SIZE",
    "Mark",
    "Move",
    "BoardSnapshot",
    "Outcome",
    "OutcomeStatus",
    "HistoryEntry",
    "GameMode",
    "MoveSource",
    "MoveResult",
    "SessionState",
    "TicTacToeError",
    "IllegalMoveError",
    "NoLegalMoveError",
    "IndexOutOfRangeError",
    "ConfigurationError",
    "board",
    "WINNING_LINES",
    "evaluate",
    "PromptFormatter",
    "create_prompt_formatter",
    "DashFormatter",
    "StandardGridFormatter",
    "NaturalLanguageFormatter",
    "JSONFormatter",
]
