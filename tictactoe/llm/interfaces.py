"""LLM-specific interfaces."""

from abc import ABC, abstractmethod
from typing import List, Dict, Union


class LLMClientError(Exception):
    """Raised when the text-generation service call fails."""


class LLMClient(ABC):
    """Abstract interface for LLM clients."""

    @abstractmethod
    async def complete(self, messages: Union[str, List[Dict[str, str]]]) -> str:
        """
        Send messages to LLM and return response.

        Args:
            messages: Either a simple string prompt or a list of message dicts
                     Each message dict should have 'role' and 'content' keys:
                     - role: 'system', 'user', or 'assistant'
                     - content: The message content

        Returns:
            str: The LLM response

        Raises:
            LLMClientError: if the service call fails
        """
        pass
