"""LLM-powered move suggester."""

import asyncio
import logging
import re
from typing import Optional

from ..config import Settings
from ..core.models import BoardSnapshot, Mark, Move
from ..core.prompt_formatters import create_prompt_formatter
from ..llm.interfaces import LLMClient
from ..llm.openai_client import OpenAITicTacToeClient
from .base import MoveSuggester

logger = logging.getLogger(__name__)

_MOVE_PATTERN = re.compile(r"\[\s*(\d+)\s*,\s*(\d+)\s*\]")


def parse_move_response(response: Optional[str]) -> Optional[Move]:
    """Extract the first ``[row, col]`` array from free-form LLM output.

    Range and emptiness are not checked here.
    """
    if not response:
        return None
    match = _MOVE_PATTERN.search(response)
    if match is None:
        return None
    return Move(int(match.group(1)), int(match.group(2)))


class LLMMoveSuggester(MoveSuggester):
    """Asks a text-generation service for the computer's next move."""

    def __init__(self, client: LLMClient, formatter: str = "dash"):
        self.llm_client = client
        self.formatter = create_prompt_formatter(formatter)
        self.system_prompt: str = self._get_default_system_prompt()

    def _get_default_system_prompt(self) -> str:
        """Get default system prompt for Tic Tac Toe gameplay."""
        return (
            "You are a perfect Tic Tac Toe player. The board is a 3x3 grid, indexed from 0 "
            "(top-left) to 2 (bottom-right). Given the board state, output the next best move "
            "as a JSON array [row, col] that refers to an empty cell. Do not output anything else."
        )

    def build_prompt(self, snapshot: BoardSnapshot, mark: Mark) -> str:
        board_str = self.formatter.format_board(snapshot)
        return (
            f"You play as \"{mark.value}\".\n"
            f"Board state ({mark.opponent().value}=opponent, {mark.value}=you, {self.formatter.empty_legend}):\n\n"
            f"{board_str}\n\n"
            "It is your turn."
        )

    async def suggest_move(self, snapshot: BoardSnapshot, mark: Mark, timeout: float) -> Optional[Move]:
        """Get a suggested move, or None if the service fails or answers nonsense."""
        messages = [
            {"role": "system", "content": self.system_prompt},
            {"role": "user", "content": self.build_prompt(snapshot, mark)},
        ]

        try:
            response = await asyncio.wait_for(self.llm_client.complete(messages), timeout=timeout)
        except asyncio.TimeoutError:
            logger.warning(f"Move suggestion timed out after {timeout}s")
            return None
        except Exception as e:
            logger.warning(f"Move suggestion failed: {e}")
            return None

        move = parse_move_response(response)
        if move is None:
            logger.warning(f"Could not parse move suggestion: {response!r}")
        else:
            logger.info(f"Move suggestion for {mark.value}: ({move.row}, {move.col})")
        return move


def create_default_suggester(settings: Optional[Settings] = None) -> Optional[MoveSuggester]:
    """Build the OpenAI-backed suggester, or None when no API key is configured."""
    if settings is None:
        settings = Settings.from_env()
    if not settings.suggestions_enabled:
        logger.info("No API key configured, computer moves use the fallback strategy")
        return None

    client = OpenAITicTacToeClient(
        api_key=settings.api_key,
        model=settings.model,
        endpoint=settings.endpoint,
        temperature=settings.temperature,
        max_tokens=settings.max_tokens,
        timeout=settings.suggestion_timeout,
    )
    return LLMMoveSuggester(client)
