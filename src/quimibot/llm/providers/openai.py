from typing import Any

import openai
from openai import AsyncOpenAI

from ..base import LLMProvider
from ..errors import LLMAuthenticationError, LLMError, LLMRateLimitError, LLMServiceError
from ..models import ChatMessage, LLMResponse

OPENAI_DEFAULT_MODEL = "gpt-4o-mini"


def translate_openai_error(error: openai.OpenAIError) -> LLMError:
    """Classify an OpenAI SDK exception by its type."""
    if isinstance(error, (openai.AuthenticationError, openai.PermissionDeniedError)):
        return LLMAuthenticationError()
    if isinstance(error, openai.RateLimitError):
        return LLMRateLimitError()
    return LLMServiceError(str(error) or None)


class OpenAIProvider(LLMProvider):
    """Chat completions over the OpenAI API.

    Works with any endpoint speaking the same protocol when ``base_url`` is
    given; the Groq provider is built on that.

    Hidden design decisions:
    - AsyncOpenAI client setup
    - Request payload layout
    - Mapping SDK exceptions onto ``quimibot.llm.errors``
    """

    def __init__(
        self,
        api_key: str,
        model: str = OPENAI_DEFAULT_MODEL,
        base_url: str | None = None,
        organization: str | None = None,
        **client_kwargs: Any
    ):
        """Create the provider.

        Args:
            api_key: API key for the endpoint
            model: Default model
            base_url: Alternative endpoint, None for api.openai.com
            organization: OpenAI organization id
            **client_kwargs: Passed to ``AsyncOpenAI``
        """
        self._model = model
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            organization=organization,
            **client_kwargs
        )

    @property
    def model(self) -> str:
        return self._model

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        model_name = model or self._model
        payload: dict[str, Any] = {
            "model": model_name,
            "messages": [msg.model_dump(include={"role", "content"}) for msg in messages],
            "temperature": temperature,
            **kwargs
        }
        if max_tokens is not None:
            payload["max_tokens"] = max_tokens

        try:
            completion = await self._client.chat.completions.create(**payload)
        except openai.OpenAIError as e:
            raise translate_openai_error(e) from e

        usage = None
        if completion.usage:
            usage = {
                "prompt_tokens": completion.usage.prompt_tokens,
                "completion_tokens": completion.usage.completion_tokens,
                "total_tokens": completion.usage.total_tokens,
            }

        text = completion.choices[0].message.content if completion.choices else None
        return LLMResponse(content=text or "", model=completion.model or model_name, usage=usage)

    async def close(self) -> None:
        await self._client.close()
