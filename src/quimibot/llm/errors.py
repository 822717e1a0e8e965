"""Failure taxonomy for chat-completion providers.

Providers translate SDK exceptions into these classes so callers only deal
with three outcomes: bad credentials, exhausted quota, anything else.
Each class carries the message shown to the user in the chat panel.
"""

import re

_AUTH_HINT = re.compile(r"api key|permission|unauthorized|forbidden|invalid api key", re.IGNORECASE)
_QUOTA_HINT = re.compile(r"quota|429|rate", re.IGNORECASE)


class LLMError(Exception):
    """Base class for chat-completion failures."""

    user_message = "Ocurrió un error inesperado con el proveedor de IA."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.user_message)


class LLMAuthenticationError(LLMError):
    """The API key is missing, invalid or lacks permissions."""

    user_message = "API key inválida o sin permisos."


class LLMRateLimitError(LLMError):
    """The provider rejected the request because of quota or rate limits."""

    user_message = "Límite de cuota alcanzado. Espera un momento e inténtalo de nuevo."


class LLMServiceError(LLMError):
    """Any other provider or network failure."""


def classify_error(error: BaseException) -> LLMError:
    """Map an arbitrary exception onto the provider failure taxonomy.

    Already-classified errors are returned unchanged. Otherwise the
    exception text is inspected for credential and quota hints; the
    original message is kept for generic failures.

    Args:
        error: Exception raised while talking to the provider

    Returns:
        An LLMError subclass instance
    """
    if isinstance(error, LLMError):
        return error

    text = str(error)
    if _AUTH_HINT.search(text):
        return LLMAuthenticationError()
    if _QUOTA_HINT.search(text):
        return LLMRateLimitError()
    return LLMServiceError(text or None)
