"""
Tic Tac Toe AI - a Tic Tac Toe game core with an optional LLM-backed computer opponent.

This package provides the game state machine used by UI shells: board model,
outcome evaluation, history navigation ("time travel"), and computer moves
suggested by a language model with a deterministic fallback.

Quick Start:
    >>> import asyncio
    >>> from tictactoe import GameController, GameMode, create_default_suggester
    >>>
    >>> async def quick_game():
    ...     game = GameController(GameMode.HUMAN_VS_COMPUTER, suggester=create_default_suggester())
    ...     game.apply_human_move(1, 1)
    ...     if game.is_computer_turn:
    ...         await game.run_computer_turn()
    ...     print(game.status_text())
    ...
    >>> asyncio.run(quick_game())

Main Components:
    - agents: Move suggesters (LLM) and the fallback move selector
    - core: Core game models, errors, board model and outcome evaluation
    - llm: LLM client implementations
    - session: Game controller state machine
    - utils: Board and history formatters for shells
"""

from .core import (
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
    TicTacToeError,
    IllegalMoveError,
    NoLegalMoveError,
    IndexOutOfRangeError,
    ConfigurationError,
    evaluate,
)
from .agents import MoveSuggester, LLMMoveSuggester, select_move, create_default_suggester
from .config import Settings
from .llm import LLMClient, OpenAITicTacToeClient
from .session import GameController
from .utils import SimpleBoardFormatter, describe_history_entry, format_move_history

# fmt: off
__all__ = [
    # Core classes
    'Mark', 'Move', 'BoardSnapshot', 'Outcome', 'OutcomeStatus', 'HistoryEntry',
    'GameMode', 'MoveSource', 'MoveResult', 'SessionState', 'evaluate',

    # Errors
    'TicTacToeError', 'IllegalMoveError', 'NoLegalMoveError', 'IndexOutOfRangeError',
    'ConfigurationError',

    # Agents
    'MoveSuggester', 'LLMMoveSuggester', 'select_move', 'create_default_suggester',

    # Controller
    'GameController', 'Settings',

    # LLM clients
    'LLMClient', 'OpenAITicTacToeClient',

    # Utilities
    'SimpleBoardFormatter', 'describe_history_entry', 'format_move_history',
]
# fmt: on
