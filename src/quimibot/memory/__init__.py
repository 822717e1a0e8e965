"""Conversation memory module for quimibot.

Keeps the ordered chat history that gives the model its context.
"""

from .base import ConversationMemory
from .factory import create_conversation_memory
from .in_memory import InMemoryConversationMemory
from .models import ConversationState

__all__ = [
    "ConversationMemory",
    "ConversationState",
    "InMemoryConversationMemory",
    "create_conversation_memory",
]
