from .base import LLMProvider
from .errors import (
    LLMAuthenticationError,
    LLMError,
    LLMRateLimitError,
    LLMServiceError,
    classify_error,
)
from .factory import SUPPORTED_PROVIDERS, create_llm_provider
from .models import ChatMessage, LLMResponse
from .providers import GeminiProvider, GroqProvider, OpenAIProvider

__all__ = [
    "LLMProvider",
    "create_llm_provider",
    "SUPPORTED_PROVIDERS",
    "ChatMessage",
    "LLMResponse",
    "LLMError",
    "LLMAuthenticationError",
    "LLMRateLimitError",
    "LLMServiceError",
    "classify_error",
    "GeminiProvider",
    "GroqProvider",
    "OpenAIProvider",
]
