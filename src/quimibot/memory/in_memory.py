"""Process-local conversation memory.

Histories live in a dict keyed by session id and vanish with the process,
which is all the chat needs: conversations are never persisted.
"""

from uuid import uuid4

from ..llm.models import ChatMessage
from .base import ConversationMemory
from .models import ConversationState


class InMemoryConversationMemory(ConversationMemory):
    """Dict-backed histories, one per session id."""

    def __init__(self, default_session_id: str | None = None):
        self._default_session_id = default_session_id or str(uuid4())
        self._states: dict[str, ConversationState] = {}

    def _sid(self, session_id: str | None) -> str:
        return session_id or self._default_session_id

    async def connect(self) -> None:
        pass

    async def disconnect(self) -> None:
        pass

    async def get_state(self, session_id: str | None = None) -> ConversationState:
        """Return the state for a session, creating an empty one on first use."""
        sid = self._sid(session_id)
        state = self._states.get(sid)
        if state is None:
            state = self._states[sid] = ConversationState(session_id=sid)
        return state

    async def append_exchange(
        self,
        user_content: str,
        assistant_content: str,
        session_id: str | None = None
    ) -> None:
        state = await self.get_state(session_id)
        state.add_exchange(user_content, assistant_content)

    async def get_history(
        self,
        limit: int | None = None,
        session_id: str | None = None
    ) -> list[ChatMessage]:
        state = await self.get_state(session_id)
        return state.to_messages(limit)

    async def clear_history(self, session_id: str | None = None) -> None:
        """Drop every message of a session; unknown sessions are ignored."""
        sid = self._sid(session_id)
        if sid in self._states:
            self._states[sid] = ConversationState(session_id=sid)

    @property
    def backend_type(self) -> str:
        return "memory"
