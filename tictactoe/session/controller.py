"""Game controller: the session state machine.

The controller owns the only mutable state of a game session. UI shells call
its mutation methods in response to user events and render the read
accessors; they never apply game rules themselves.

In human-vs-computer mode the human always plays X and the computer O. The
shell is expected to call ``run_computer_turn`` whenever
``is_computer_turn`` becomes true, and to disable board input while
``is_awaiting_computer_move`` is set.
"""

import asyncio
import dataclasses
import logging
from typing import Optional, Tuple, Union

from ..agents.base import MoveSuggester
from ..agents.simple_agent import select_move
from ..config import DEFAULT_SUGGESTION_TIMEOUT
from ..core import board
from ..core.exceptions import IndexOutOfRangeError
from ..core.game_logic import evaluate
from ..core.models import (
    BoardSnapshot,
    GameMode,
    HistoryEntry,
    Mark,
    Move,
    MoveResult,
    MoveSource,
    Outcome,
    OutcomeStatus,
    SessionState,
)

logger = logging.getLogger(__name__)

HUMAN_MARK = Mark.X
COMPUTER_MARK = Mark.O

FALLBACK_ADVISORY = "AI move failed, using fallback."


def _coerce_mode(mode: Union[GameMode, str]) -> GameMode:
    if isinstance(mode, GameMode):
        return mode
    return GameMode(mode)


def _initial_state(mode: GameMode, generation: int) -> SessionState:
    return SessionState(
        history=(HistoryEntry(board.empty()),),
        current_index=0,
        mode=mode,
        generation=generation,
    )


class GameController:
    """Orchestrates human moves, computer turns and history navigation."""

    def __init__(
        self,
        mode: Union[GameMode, str] = GameMode.HUMAN_VS_HUMAN,
        suggester: Optional[MoveSuggester] = None,
        suggestion_timeout: float = DEFAULT_SUGGESTION_TIMEOUT,
    ):
        """
        Args:
            mode: Initial game mode
            suggester: Optional move suggester for the computer player;
                without one the fallback strategy is always used
            suggestion_timeout: Seconds to wait for a suggestion
        """
        self.suggester = suggester
        self.suggestion_timeout = suggestion_timeout
        self.advisory: Optional[str] = None
        self._awaiting_computer_move = False
        self._set_state(_initial_state(_coerce_mode(mode), generation=0))

    # ------------------------------------------------------------------
    # Read accessors

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def mode(self) -> GameMode:
        return self._state.mode

    @property
    def history(self) -> Tuple[HistoryEntry, ...]:
        return self._state.history

    @property
    def current_index(self) -> int:
        return self._state.current_index

    @property
    def snapshot(self) -> BoardSnapshot:
        return self._state.current.snapshot

    @property
    def turn(self) -> Mark:
        return self._state.turn

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @property
    def is_awaiting_computer_move(self) -> bool:
        return self._awaiting_computer_move

    @property
    def is_computer_turn(self) -> bool:
        """True when the shell should call ``run_computer_turn``."""
        return self._computer_turn_rejection() is None

    def status_text(self) -> str:
        if self._outcome.status is OutcomeStatus.WON:
            return f"Winner: {self._outcome.winner.value}"
        if self._outcome.status is OutcomeStatus.DRAW:
            return "Draw!"
        return f"Next: {self.turn.value}"

    # ------------------------------------------------------------------
    # Mutations

    def apply_human_move(self, row: int, col: int) -> MoveResult:
        """Place the current player's mark at (row, col).

        Invalid requests are rejected without touching the session; the
        returned result has ``accepted=False`` and a reason.
        """
        move = Move(row, col)
        reason = self._human_move_rejection(move)
        if reason is not None:
            logger.debug(f"Rejected move ({row}, {col}): {reason}")
            return self._rejected(reason)
        return self._commit(move, MoveSource.HUMAN)

    async def run_computer_turn(self) -> MoveResult:
        """Choose and apply exactly one computer move.

        Uses the suggester when configured and falls back to the first empty
        cell on timeout, error or an illegal suggestion. A result that comes
        back after the session was reset, or after the history cursor moved,
        is discarded.
        """
        reason = self._computer_turn_rejection()
        if reason is not None:
            logger.debug(f"Rejected computer turn: {reason}")
            return self._rejected(reason)

        issued_state = self._state
        self._awaiting_computer_move = True
        self.advisory = None
        try:
            move, source, failure = await self._choose_computer_move(issued_state.current.snapshot)
        finally:
            if self._state.generation == issued_state.generation:
                self._awaiting_computer_move = False

        if self._state is not issued_state:
            logger.info("Discarding computer move computed for a superseded session state")
            return self._rejected("stale")

        if failure is not None:
            self.advisory = FALLBACK_ADVISORY
        return self._commit(move, source)

    def jump_to(self, index: int) -> MoveResult:
        """Move the history cursor without discarding any entries.

        Raises:
            IndexOutOfRangeError: if index is outside the recorded history.
        """
        length = len(self._state.history)
        if not 0 <= index < length:
            raise IndexOutOfRangeError(index, length)

        self._set_state(dataclasses.replace(self._state, current_index=index))
        logger.debug(f"Jumped to step {index}")
        return MoveResult(accepted=True, outcome=self._outcome)

    def reset(self, mode: Optional[Union[GameMode, str]] = None) -> MoveResult:
        """Start a fresh session, discarding all history."""
        new_mode = self._state.mode if mode is None else _coerce_mode(mode)
        self._set_state(_initial_state(new_mode, self._state.generation + 1))
        self._awaiting_computer_move = False
        self.advisory = None
        logger.info(f"New game started in {new_mode.value} mode")
        return MoveResult(accepted=True, outcome=self._outcome)

    def set_mode(self, mode: Union[GameMode, str]) -> MoveResult:
        """Change mode; always restarts the session."""
        return self.reset(mode)

    # ------------------------------------------------------------------
    # Internals

    def _set_state(self, state: SessionState):
        self._state = state
        self._outcome = evaluate(state.current.snapshot)

    def _rejected(self, reason: str) -> MoveResult:
        return MoveResult(accepted=False, outcome=self._outcome, reason=reason)

    def _human_move_rejection(self, move: Move) -> Optional[str]:
        if self._outcome.is_terminal:
            return "game over"
        if self._awaiting_computer_move:
            return "awaiting computer move"
        if self._state.mode is GameMode.HUMAN_VS_COMPUTER and self.turn is not HUMAN_MARK:
            return "not the human player's turn"
        if not move.in_bounds():
            return "out of range"
        if not board.is_legal(self.snapshot, move):
            return "cell occupied"
        return None

    def _computer_turn_rejection(self) -> Optional[str]:
        if self._state.mode is not GameMode.HUMAN_VS_COMPUTER:
            return "not in human-vs-computer mode"
        if self._outcome.is_terminal:
            return "game over"
        if self._awaiting_computer_move:
            return "computer move already in progress"
        if self.turn is not COMPUTER_MARK:
            return "not the computer's turn"
        return None

    async def _choose_computer_move(self, snapshot: BoardSnapshot) -> Tuple[Move, MoveSource, Optional[str]]:
        """Return (move, source, failure) where failure explains a fallback."""
        if self.suggester is None:
            return select_move(snapshot), MoveSource.FALLBACK, None

        try:
            suggestion = await asyncio.wait_for(
                self.suggester.suggest_move(snapshot, COMPUTER_MARK, self.suggestion_timeout),
                timeout=self.suggestion_timeout,
            )
        except asyncio.TimeoutError:
            failure = f"suggestion timed out after {self.suggestion_timeout}s"
        except Exception as e:
            failure = f"suggestion failed: {e}"
        else:
            if suggestion is None:
                failure = "no usable suggestion"
            elif not isinstance(suggestion, Move) or not board.is_legal(snapshot, suggestion):
                failure = f"illegal suggestion {suggestion!r}"
            else:
                return suggestion, MoveSource.SUGGESTION, None

        fallback = select_move(snapshot)
        logger.warning(f"{failure}, falling back to ({fallback.row}, {fallback.col})")
        return fallback, MoveSource.FALLBACK, failure

    def _commit(self, move: Move, source: MoveSource) -> MoveResult:
        state = self._state
        mark = state.turn
        snapshot = board.apply(state.current.snapshot, move, mark)
        # Moving after a jump back discards the recorded future
        history = state.history[: state.current_index + 1] + (HistoryEntry(snapshot, move, mark),)
        self._set_state(dataclasses.replace(state, history=history, current_index=len(history) - 1))

        logger.debug(f"{mark.value} played ({move.row}, {move.col}) [{source.value}]")
        return MoveResult(
            accepted=True,
            outcome=self._outcome,
            move=move,
            player=mark,
            source=source,
        )
