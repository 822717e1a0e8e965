"""Gemini chat completions through the google-genai SDK.

Gemini has no system role: the system message travels as
``system_instruction`` and assistant turns use the ``model`` role.
Responses can come back with no text (safety filters, transient backend
trouble), so an empty answer is requested again a few times.
"""

import asyncio
import logging
from typing import Any

from google import genai
from google.genai import errors, types

from ..base import LLMProvider
from ..errors import LLMAuthenticationError, LLMError, LLMRateLimitError, LLMServiceError
from ..models import ChatMessage, LLMResponse

logger = logging.getLogger(__name__)

GEMINI_DEFAULT_MODEL = "gemini-2.5-flash"
EMPTY_RETRY_DELAY = 0.5


def translate_gemini_error(error: errors.APIError) -> LLMError:
    """Classify a google-genai API error by its HTTP status code."""
    if error.code in (401, 403):
        return LLMAuthenticationError()
    if error.code == 429:
        return LLMRateLimitError()
    return LLMServiceError(str(error) or None)


def _response_text(response: Any) -> str:
    candidates = response.candidates or []
    if candidates and candidates[0].content and candidates[0].content.parts:
        text = "".join(part.text for part in candidates[0].content.parts if getattr(part, "text", None))
        if text:
            return text
    # .text raises on some blocked responses
    try:
        return response.text or ""
    except (ValueError, AttributeError):
        return ""


def _usage(response: Any) -> dict[str, int] | None:
    meta = response.usage_metadata
    if not meta:
        return None
    return {
        "prompt_tokens": meta.prompt_token_count or 0,
        "completion_tokens": meta.candidates_token_count or 0,
        "total_tokens": meta.total_token_count or 0,
    }


class GeminiProvider(LLMProvider):
    """Google Gemini provider.

    Hidden design decisions:
    - Role mapping onto Gemini contents
    - Re-asking after empty answers
    """

    def __init__(
        self,
        api_key: str,
        model: str = GEMINI_DEFAULT_MODEL,
        max_retries: int = 3,
        **client_kwargs: Any
    ):
        """Create the provider.

        Args:
            api_key: Google AI Studio key
            model: Default model
            max_retries: Attempts made while the answer is empty (at least one)
            **client_kwargs: Passed to ``genai.Client``
        """
        self._model = model
        self._max_retries = max(1, max_retries)
        self._client = genai.Client(api_key=api_key, **client_kwargs)

    @property
    def model(self) -> str:
        return self._model

    @staticmethod
    def convert_messages(messages: list[ChatMessage]) -> tuple[str | None, list[types.Content]]:
        """Split chat messages into a system instruction and Gemini contents."""
        system_instruction = None
        contents = []
        for msg in messages:
            if msg.role == "system":
                system_instruction = msg.content
                continue
            role = "model" if msg.role == "assistant" else "user"
            contents.append(types.Content(role=role, parts=[types.Part(text=msg.content)]))
        return system_instruction, contents

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        model_name = model or self._model
        system_instruction, contents = self.convert_messages(messages)

        config = types.GenerateContentConfig(
            temperature=temperature,
            system_instruction=system_instruction,
            **kwargs
        )
        if max_tokens is not None:
            config.max_output_tokens = max_tokens

        text = ""
        usage = None
        for attempt in range(1, self._max_retries + 1):
            try:
                response = await self._client.aio.models.generate_content(
                    model=model_name,
                    contents=contents,
                    config=config,
                )
            except errors.APIError as e:
                raise translate_gemini_error(e) from e

            usage = _usage(response) or usage
            text = _response_text(response)
            if text:
                break

            logger.debug("Gemini returned no text (attempt %d of %d)", attempt, self._max_retries)
            if attempt < self._max_retries:
                await asyncio.sleep(EMPTY_RETRY_DELAY * attempt)

        return LLMResponse(content=text, model=model_name, usage=usage)

    async def close(self) -> None:
        # genai.Client holds no connection that needs closing
        pass
