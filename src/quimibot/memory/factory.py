"""Factory for conversation memory backends."""

from typing import Any

from .base import ConversationMemory

SUPPORTED_BACKENDS = ("memory",)


def create_conversation_memory(
    backend: str = "memory",
    **kwargs: Any
) -> ConversationMemory:
    """Build a memory backend.

    Args:
        backend: Backend name, see ``SUPPORTED_BACKENDS``
        **kwargs: Backend constructor arguments

    Raises:
        ValueError: Unknown backend
    """
    if backend == "memory":
        from .in_memory import InMemoryConversationMemory
        return InMemoryConversationMemory(**kwargs)

    raise ValueError(
        f"Unsupported memory backend: {backend}. "
        f"Supported backends: {', '.join(SUPPORTED_BACKENDS)}"
    )
