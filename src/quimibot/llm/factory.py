from typing import Any

from .base import LLMProvider
from .providers import GeminiProvider, GroqProvider, OpenAIProvider

_PROVIDERS: dict[str, type[LLMProvider]] = {
    "groq": GroqProvider,
    "openai": OpenAIProvider,
    "gemini": GeminiProvider,
}

SUPPORTED_PROVIDERS = tuple(_PROVIDERS)


def create_llm_provider(provider: str, **config: Any) -> LLMProvider:
    """Build the chat provider registered under ``provider``.

    Args:
        provider: One of ``SUPPORTED_PROVIDERS``, case-insensitive
        **config: Constructor arguments; ``api_key`` is always required,
            ``model`` overrides the vendor default (groq:
            llama-3.1-8b-instant, openai: gpt-4o-mini, gemini:
            gemini-2.5-flash)

    Returns:
        Provider ready for ``chat_completion``

    Raises:
        ValueError: Unknown provider name
        TypeError: ``api_key`` missing

    Examples:
        >>> provider = create_llm_provider("groq", api_key="gsk_...")
    """
    name = provider.strip().lower()
    provider_cls = _PROVIDERS.get(name)
    if provider_cls is None:
        raise ValueError(
            f"Unsupported provider: {provider}. "
            f"Supported providers: {', '.join(SUPPORTED_PROVIDERS)}"
        )

    if "api_key" not in config:
        raise TypeError(f"{name.capitalize()} provider requires 'api_key' in config")

    return provider_cls(**config)
