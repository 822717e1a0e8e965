"""Data models for conversation memory.

The history is the ordered list of user/assistant messages sent back to the
chat model on every turn so it keeps the conversational context. The system
instruction is not part of it.
"""

from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel, Field

from ..llm.models import ChatMessage


def _now() -> datetime:
    return datetime.now(timezone.utc)


class ConversationState(BaseModel):
    """Complete conversation state for a chat session."""

    session_id: str = Field(default_factory=lambda: str(uuid4()))
    history: list[ChatMessage] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)

    def add_exchange(self, user_content: str, assistant_content: str) -> None:
        """Append a user message and the assistant reply to it.

        Args:
            user_content: Text sent by the user (including any context prefix)
            assistant_content: Shaped reply returned to the user
        """
        self.history.extend([
            ChatMessage(role="user", content=user_content),
            ChatMessage(role="assistant", content=assistant_content),
        ])
        self.updated_at = _now()

    def to_messages(self, limit: int | None = None) -> list[ChatMessage]:
        """Return the history, optionally only the last ``limit`` messages."""
        if limit is None:
            return list(self.history)
        return self.history[-limit:] if limit > 0 else []

    def __len__(self) -> int:
        return len(self.history)
