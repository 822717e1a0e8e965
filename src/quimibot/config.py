"""Configuration constants and logging setup.

Centralizes defaults and environment variable names so the CLI and the
chat session agree on them.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

# Chat request defaults
CHAT_TEMPERATURE = 0.35
CHAT_MAX_TOKENS = 900

# Provider selection
DEFAULT_PROVIDER = "groq"
PROVIDER_ENV = "LLM_PROVIDER"

# API key / model environment variables per provider
API_KEY_ENV = {
    "groq": "GROQ_API_KEY",
    "openai": "OPENAI_API_KEY",
    "gemini": "GEMINI_API_KEY",
}
MODEL_ENV = {
    "groq": "GROQ_MODEL",
    "openai": "OPENAI_CHAT_MODEL",
    "gemini": "GEMINI_MODEL",
}

# Logging
LOG_LEVEL_ENV = "QUIMIBOT_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_TIME_FORMAT = "[%H:%M:%S]"


def setup_logging(level: str | int = DEFAULT_LOG_LEVEL, console: Console | None = None) -> None:
    """Route the ``quimibot`` loggers through a Rich handler.

    Args:
        level: Level name ("debug", "INFO", ...) or numeric level
        console: Console to log to (defaults to stderr)
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        log_time_format=LOG_TIME_FORMAT,
    )
    logger = logging.getLogger("quimibot")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
