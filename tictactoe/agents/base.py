"""Base move suggester class."""

from abc import ABC, abstractmethod
from typing import Optional
from ..core.models import BoardSnapshot, Mark, Move


class MoveSuggester(ABC):
    """Abstract base class for computer move suggesters."""

    @abstractmethod
    async def suggest_move(self, snapshot: BoardSnapshot, mark: Mark, timeout: float) -> Optional[Move]:
        """Return a candidate move for `mark`, or None when unavailable.

        Must resolve within `timeout` seconds. The returned move is only a
        candidate; callers validate it against the snapshot.
        """
        pass
