"""Provider factory functions for CLI.

Centralizes creation of the chat provider from environment variables.
Hides configuration details from command implementations.
"""

import os

from rich.console import Console

from ..config import API_KEY_ENV, DEFAULT_PROVIDER, MODEL_ENV, PROVIDER_ENV
from ..llm import SUPPORTED_PROVIDERS, LLMProvider, create_llm_provider

# Default console for output
_console = Console()


def provider_name() -> str:
    """Provider selected through ``LLM_PROVIDER`` (default: groq)."""
    return os.getenv(PROVIDER_ENV, DEFAULT_PROVIDER).strip().lower() or DEFAULT_PROVIDER


def api_key_env(provider: str | None = None) -> str:
    """Name of the environment variable holding the provider's API key."""
    return API_KEY_ENV.get(provider or provider_name(), API_KEY_ENV[DEFAULT_PROVIDER])


def get_llm(console: Console | None = None) -> LLMProvider | None:
    """Create LLM provider from environment variables.

    Args:
        console: Optional Rich console for output

    Returns:
        LLM provider instance, or None if not configured

    Environment variables:
        LLM_PROVIDER: Provider type (groq, openai, gemini; default: groq)
        GROQ_API_KEY / GROQ_MODEL: Groq credentials and model
        OPENAI_API_KEY / OPENAI_CHAT_MODEL: OpenAI credentials and model
        GEMINI_API_KEY / GEMINI_MODEL: Gemini credentials and model
    """
    con = console or _console
    name = provider_name()

    if name not in SUPPORTED_PROVIDERS:
        con.print(f"[red]Error: Unknown LLM provider: {name}[/red]")
        return None

    key_env = API_KEY_ENV[name]
    api_key = os.getenv(key_env, "").strip()
    if not api_key:
        con.print(f"[yellow]Warning: {key_env} not set, QuimiBot disabled[/yellow]")
        return None

    config = {"api_key": api_key}
    model = os.getenv(MODEL_ENV[name], "").strip()
    if model:
        config["model"] = model
    return create_llm_provider(name, **config)
