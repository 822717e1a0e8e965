"""Interface for chat history storage.

Callers only append whole exchanges and read the ordered messages back;
where and how the messages are kept is up to the backend.
"""

from abc import ABC, abstractmethod

from ..llm.models import ChatMessage
from .models import ConversationState


class ConversationMemory(ABC):
    """Storage for the user/assistant messages of chat sessions.

    Every method takes an optional ``session_id``; None means the backend's
    default session.
    """

    @abstractmethod
    async def connect(self) -> None:
        """Prepare the backend for use."""

    @abstractmethod
    async def disconnect(self) -> None:
        """Release backend resources."""

    @abstractmethod
    async def get_state(self, session_id: str | None = None) -> ConversationState:
        """Full state of a session."""

    @abstractmethod
    async def append_exchange(
        self,
        user_content: str,
        assistant_content: str,
        session_id: str | None = None
    ) -> None:
        """Store a question and its answer together."""

    @abstractmethod
    async def get_history(
        self,
        limit: int | None = None,
        session_id: str | None = None
    ) -> list[ChatMessage]:
        """Messages in the order they were exchanged, optionally only the last ``limit``."""

    @abstractmethod
    async def clear_history(self, session_id: str | None = None) -> None:
        """Forget every message of a session."""

    @property
    @abstractmethod
    def backend_type(self) -> str:
        """Short backend name, e.g. ``"memory"``."""
