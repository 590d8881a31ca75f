"""Process configuration for the move suggestion service."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .core.exceptions import ConfigurationError

DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_TEMPERATURE = 0.2
DEFAULT_MAX_TOKENS = 10
DEFAULT_SUGGESTION_TIMEOUT = 5.0


def _read_number(environ: Mapping[str, str], name: str, default, cast):
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ConfigurationError(f"Invalid value for {name}: {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    """Suggestion service settings.

    Attributes:
        api_key: API credential; None disables the suggestion service
        model: Model name (e.g., "gpt-3.5-turbo", "gpt-4o-mini")
        endpoint: Custom API endpoint/base URL
        temperature: Sampling temperature
        max_tokens: Maximum tokens to generate
        suggestion_timeout: Seconds to wait for a suggestion before falling back
    """

    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    endpoint: Optional[str] = None
    temperature: float = DEFAULT_TEMPERATURE
    max_tokens: int = DEFAULT_MAX_TOKENS
    suggestion_timeout: float = DEFAULT_SUGGESTION_TIMEOUT

    @property
    def suggestions_enabled(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Load settings from environment variables.

        TICTACTOE_OPENAI_API_KEY takes precedence over OPENAI_API_KEY.

        Raises:
            ConfigurationError: if a numeric variable cannot be parsed.
        """
        if environ is None:
            environ = os.environ

        api_key = environ.get("TICTACTOE_OPENAI_API_KEY") or environ.get("OPENAI_API_KEY") or None
        timeout = _read_number(environ, "TICTACTOE_SUGGESTION_TIMEOUT", DEFAULT_SUGGESTION_TIMEOUT, float)
        if timeout <= 0:
            raise ConfigurationError(f"TICTACTOE_SUGGESTION_TIMEOUT must be positive, got {timeout}")

        return cls(
            api_key=api_key,
            model=environ.get("TICTACTOE_LLM_MODEL") or DEFAULT_MODEL,
            endpoint=environ.get("TICTACTOE_LLM_ENDPOINT") or None,
            temperature=_read_number(environ, "TICTACTOE_LLM_TEMPERATURE", DEFAULT_TEMPERATURE, float),
            max_tokens=_read_number(environ, "TICTACTOE_LLM_MAX_TOKENS", DEFAULT_MAX_TOKENS, int),
            suggestion_timeout=timeout,
        )
