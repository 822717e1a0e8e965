"""Chat panel: the transcript shown to the user.

Turns session outcomes into bubbles. Provider failures never escape from
``submit``; they become an error bubble instead.
"""

import itertools
import logging
from collections.abc import Iterator

from ..llm import LLMError
from ..periodic import ChemicalElement
from ..replies import escape_html, render_markdown
from .context import compare_prompt, context_label
from .models import (
    ERROR_TEMPLATE,
    MISSING_KEY_MESSAGE,
    WELCOME_MESSAGE,
    DisplayMessage,
    DisplayRole,
    QuickAction,
)
from .session import ChatSession

logger = logging.getLogger(__name__)


class ChatPanel:
    """Transcript of a QuimiBot conversation.

    Message ids come from ``id_source``; by default each panel counts from
    zero on its own.
    """

    def __init__(
        self,
        session: ChatSession | None,
        id_source: Iterator[int] | None = None,
        missing_key_env: str = "GROQ_API_KEY",
    ):
        self._session = session
        self._ids = id_source if id_source is not None else itertools.count()
        self._missing_key_env = missing_key_env
        self._messages: list[DisplayMessage] = []
        self._add("bot", WELCOME_MESSAGE)

    @property
    def messages(self) -> list[DisplayMessage]:
        return list(self._messages)

    @property
    def has_provider(self) -> bool:
        return self._session is not None

    def _add(self, role: DisplayRole, text: str) -> DisplayMessage:
        message = DisplayMessage(id=next(self._ids), role=role, text=text)
        self._messages.append(message)
        return message

    async def submit(
        self,
        text: str,
        element: ChemicalElement | None = None,
        compare: tuple[ChemicalElement, ChemicalElement] | None = None,
    ) -> DisplayMessage | None:
        """Post a user question and append the bot answer.

        Args:
            text: Raw user input
            element: Element the user is looking at
            compare: Pair of elements being compared (wins over ``element``)

        Returns:
            The bot bubble appended, or None for blank input
        """
        question = text.strip()
        if not question:
            return None

        self._add("user", question)

        if self._session is None:
            return self._add("bot", MISSING_KEY_MESSAGE.format(env_var=self._missing_key_env))

        try:
            reply = await self._session.send(question, context_label(element, compare))
        except LLMError as e:
            logger.error("QuimiBot could not answer: %s", e)
            return self._add("bot", ERROR_TEMPLATE.format(message=e))
        return self._add("bot", reply)

    async def quick_action(self, action: QuickAction, element: ChemicalElement | None = None) -> DisplayMessage | None:
        """Send the canned question behind a quick-action button."""
        return await self.submit(action.prompt, element=element)

    async def compare(self, first: ChemicalElement, second: ChemicalElement) -> DisplayMessage | None:
        """Ask for a comparison of two elements."""
        return await self.submit(compare_prompt(first, second), compare=(first, second))

    async def clear(self) -> None:
        """Reset the transcript and the model history."""
        if self._session is not None:
            await self._session.clear()
        self._messages.clear()
        self._add("bot", WELCOME_MESSAGE)

    @staticmethod
    def render(message: DisplayMessage) -> str:
        """HTML for a bubble: markdown for the bot, plain text for the user."""
        if message.role == "bot":
            return render_markdown(message.text)
        return escape_html(message.text)
