"""Chat glue: conversation session, transcript panel and element context."""

from .context import compare_prompt, context_label, with_context
from .models import QUICK_ACTIONS, WELCOME_MESSAGE, DisplayMessage, QuickAction
from .panel import ChatPanel
from .session import ChatSession

__all__ = [
    "QUICK_ACTIONS",
    "WELCOME_MESSAGE",
    "ChatPanel",
    "ChatSession",
    "DisplayMessage",
    "QuickAction",
    "compare_prompt",
    "context_label",
    "with_context",
]
