from .base import MoveSuggester
from .simple_agent import select_move
from .openai_llm_agent import LLMMoveSuggester, parse_move_response, create_default_suggester

__all__ = [
    "MoveSuggester",
    "select_move",
    "LLMMoveSuggester",
    "parse_move_response",
    "create_default_suggester",
]
