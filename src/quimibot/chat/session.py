"""Chat session: one conversation with the chat-completion provider.

Hides how a user question becomes a provider request (system prompt,
history, element context) and how the raw answer becomes the stored reply.
"""

import logging

from ..config import CHAT_MAX_TOKENS, CHAT_TEMPERATURE
from ..llm import ChatMessage, LLMError, LLMProvider, classify_error
from ..memory import ConversationMemory, InMemoryConversationMemory
from ..prompts import get_system_prompt
from ..replies import ShaperConfig, shape_reply
from .context import with_context

logger = logging.getLogger(__name__)


class ChatSession:
    """Send questions to a provider and keep the shaped answers in history.

    Usage:
        async with ChatSession(provider) as session:
            reply = await session.send("¿Qué es el oro?", element_context="Oro (Au)")
    """

    def __init__(
        self,
        provider: LLMProvider,
        memory: ConversationMemory | None = None,
        system_prompt: str | None = None,
        shaper_config: ShaperConfig | None = None,
        model: str | None = None,
        temperature: float = CHAT_TEMPERATURE,
        max_tokens: int | None = CHAT_MAX_TOKENS,
    ):
        """Initialize the session.

        Args:
            provider: Chat-completion provider
            memory: History backend (defaults to in-memory)
            system_prompt: Persona prompt (defaults to the packaged prompt)
            shaper_config: Limits applied to every reply
            model: Model override (None uses the provider default)
            temperature: Sampling temperature
            max_tokens: Maximum tokens per reply
        """
        self._provider = provider
        self._memory = memory or InMemoryConversationMemory()
        self._system_prompt = system_prompt if system_prompt is not None else get_system_prompt()
        self._shaper_config = shaper_config or ShaperConfig()
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens

    @property
    def model(self) -> str:
        return self._model or self._provider.model

    @property
    def memory(self) -> ConversationMemory:
        return self._memory

    async def history(self) -> list[ChatMessage]:
        """Ordered user/assistant messages exchanged so far."""
        return await self._memory.get_history()

    async def build_messages(self, message: str) -> list[ChatMessage]:
        """System prompt, then history, then the new user message."""
        messages = []
        if self._system_prompt:
            messages.append(ChatMessage(role="system", content=self._system_prompt))
        messages.extend(await self._memory.get_history())
        messages.append(ChatMessage(role="user", content=message))
        return messages

    async def send(self, message: str, element_context: str | None = None) -> str:
        """Ask a question and return the shaped reply.

        Nothing is stored when the provider fails.

        Args:
            message: User question
            element_context: Label of the element(s) the user is looking at

        Returns:
            Shaped reply text

        Raises:
            LLMError: Authentication, rate-limit or service failure
        """
        contextual = with_context(message, element_context)
        messages = await self.build_messages(contextual)
        logger.info("Sending %d messages to %s", len(messages), self.model)

        try:
            response = await self._provider.chat_completion(
                messages,
                model=self._model,
                temperature=self._temperature,
                max_tokens=self._max_tokens,
            )
        except LLMError as e:
            logger.warning("Chat request failed: %s", e)
            raise
        except Exception as e:
            error = classify_error(e)
            logger.warning("Chat request failed: %s", error)
            raise error from e

        reply = shape_reply(response.content, self._shaper_config)
        await self._memory.append_exchange(contextual, reply)
        logger.debug("Stored reply of %d chars (raw %d)", len(reply), len(response.content))
        return reply

    async def clear(self) -> None:
        """Forget the conversation history."""
        await self._memory.clear_history()

    async def close(self) -> None:
        await self._provider.close()
        await self._memory.disconnect()

    async def __aenter__(self) -> "ChatSession":
        await self._memory.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
