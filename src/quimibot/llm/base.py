from abc import ABC, abstractmethod
from typing import Any

from .models import ChatMessage, LLMResponse


class LLMProvider(ABC):
    """Chat-completion backend used by QuimiBot.

    The rest of the package only sees this interface; which vendor answers,
    how its SDK is configured and how its failures look stay inside the
    implementation. Every failure leaves a provider as one of the
    ``quimibot.llm.errors`` classes.

    Providers are async context managers:
        async with create_llm_provider("groq", api_key=key) as provider:
            reply = await provider.chat_completion(messages)
    """

    @property
    @abstractmethod
    def model(self) -> str:
        """Model used when a request does not name one."""

    @abstractmethod
    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        """Answer the last message given the ones before it.

        Args:
            messages: System instruction (optional), history, then the question
            model: Model override
            temperature: Sampling temperature
            max_tokens: Reply length cap, None for the vendor default
            **kwargs: Extra vendor parameters

        Returns:
            The reply text and usage counters

        Raises:
            LLMAuthenticationError: Credentials rejected
            LLMRateLimitError: Quota or rate limit reached
            LLMServiceError: Any other failure
        """

    @abstractmethod
    async def close(self) -> None:
        """Release the underlying HTTP client."""

    async def __aenter__(self) -> "LLMProvider":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        # httpx can complain about a closed loop while shutting down
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
