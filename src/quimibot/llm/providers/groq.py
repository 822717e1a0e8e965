from typing import Any

from .openai import OpenAIProvider

GROQ_BASE_URL = "https://api.groq.com/openai/v1"
GROQ_DEFAULT_MODEL = "llama-3.1-8b-instant"


class GroqProvider(OpenAIProvider):
    """Groq provider using its OpenAI-compatible API.

    Hidden design decisions:
    - Groq endpoint and default model
    - Everything else is shared with the OpenAI provider
    """

    def __init__(
        self,
        api_key: str,
        model: str = GROQ_DEFAULT_MODEL,
        base_url: str = GROQ_BASE_URL,
        **client_kwargs: Any
    ):
        """Initialize Groq provider.

        Args:
            api_key: Groq API key
            model: Default model to use
            base_url: Groq API base URL (default: https://api.groq.com/openai/v1)
            **client_kwargs: Additional kwargs for AsyncOpenAI client
        """
        super().__init__(api_key=api_key, model=model, base_url=base_url, **client_kwargs)
