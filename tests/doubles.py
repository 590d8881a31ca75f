"""Test doubles for the suggestion service and board builders."""

import asyncio
from typing import List, Optional

from tictactoe.agents.base import MoveSuggester
from tictactoe.core.models import BoardSnapshot, Mark, Move
from tictactoe.llm.interfaces import LLMClient


class FixedSuggester(MoveSuggester):
    """Always suggests the same move and records every call."""

    def __init__(self, move: Optional[Move]):
        self.move = move
        self.calls: List[BoardSnapshot] = []

    async def suggest_move(self, snapshot: BoardSnapshot, mark: Mark, timeout: float) -> Optional[Move]:
        self.calls.append(snapshot)
        return self.move


class FailingSuggester(MoveSuggester):
    async def suggest_move(self, snapshot, mark, timeout):
        raise RuntimeError("service down")


class SlowSuggester(MoveSuggester):
    async def suggest_move(self, snapshot, mark, timeout):
        await asyncio.sleep(10)
        return Move(0, 0)


class GatedSuggester(MoveSuggester):
    """Blocks until the test releases it, to observe in-flight behaviour."""

    def __init__(self, move: Move):
        self.move = move
        self.started = asyncio.Event()
        self.release = asyncio.Event()

    async def suggest_move(self, snapshot, mark, timeout):
        self.started.set()
        await self.release.wait()
        return self.move


class FakeLLMClient(LLMClient):
    """Returns a canned response, or raises/hangs on demand."""

    def __init__(self, response: str = "", error: Optional[Exception] = None, delay: float = 0.0):
        self.response = response
        self.error = error
        self.delay = delay
        self.messages = []

    async def complete(self, messages):
        self.messages.append(messages)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.response


def board(*rows: str) -> BoardSnapshot:
    """Build a snapshot from strings like "XX-", '-' meaning empty."""
    return BoardSnapshot.from_rows([[None if ch == "-" else ch for ch in row] for row in rows])
