from .interfaces import LLMClient, LLMClientError
from .openai_client import OpenAITicTacToeClient

__all__ = [
    'LLMClient',
    'LLMClientError',
    'OpenAITicTacToeClient',
]
