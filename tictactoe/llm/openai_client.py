"""OpenAI LLM client implementation."""

from typing import Union, List, Dict, Optional
from openai import AsyncOpenAI
from openai import RateLimitError
from tenacity import retry, stop_after_attempt, wait_exponential, before_sleep_log, retry_if_exception_type
import logging
from .interfaces import LLMClient, LLMClientError

logger = logging.getLogger(__name__)


class OpenAITicTacToeClient(LLMClient):
    """OpenAI client for Tic Tac Toe move suggestions."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-3.5-turbo",
        endpoint: Optional[str] = None,
        temperature: float = 0.2,
        max_tokens: int = 10,
        timeout: float = 5.0,
        **kwargs,
    ):
        """
        Initialize OpenAI client for Tic Tac Toe move suggestions.

        Args:
            api_key: OpenAI API key
            model: Model name (e.g., "gpt-3.5-turbo", "gpt-4o-mini")
            endpoint: Custom API endpoint/base URL
            temperature: Sampling temperature (0.0-2.0)
            max_tokens: Maximum tokens to generate
            timeout: Request timeout in seconds
            **kwargs: Additional parameters for chat completion
        """
        client_kwargs = {"api_key": api_key}
        if endpoint:
            client_kwargs["base_url"] = endpoint
        self.client = AsyncOpenAI(**client_kwargs)
        self.model = model

        # Generation parameters
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout
        self.extra_kwargs = kwargs

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1.5, min=1, max=10),
        retry=retry_if_exception_type((RateLimitError,)),
        before_sleep=before_sleep_log(logger, logging.INFO),
        reraise=True,
    )
    async def _make_api_call(self, openai_messages: List[Dict[str, str]]) -> str:
        """Make the actual API call with retry logic for rate limits."""
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=openai_messages,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            timeout=self.timeout,
            **self.extra_kwargs,
        )
        return response.choices[0].message.content or ""

    async def complete(self, messages: Union[str, List[Dict[str, str]]]) -> str:
        """Send messages to OpenAI and return response."""
        if isinstance(messages, str):
            openai_messages = [{"role": "user", "content": messages}]
        else:
            openai_messages = messages

        try:
            return await self._make_api_call(openai_messages)
        except Exception as e:
            raise LLMClientError(f"OpenAI API error: {e}") from e
