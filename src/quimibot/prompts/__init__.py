"""Persona prompt for QuimiBot.

The prompt text lives in ``system.txt`` next to this module. A
``prompts/system.txt`` in the working directory takes its place, so the
persona can be tuned without reinstalling the package.
"""

from functools import lru_cache
from pathlib import Path

PACKAGE_DIR = Path(__file__).parent
OVERRIDE_DIR = "prompts"
SYSTEM_PROMPT = "system"


def prompt_candidates(name: str) -> list[Path]:
    """Files that may hold prompt ``name``, highest priority first."""
    filename = f"{name}.txt"
    return [Path.cwd() / OVERRIDE_DIR / filename, PACKAGE_DIR / filename]


@lru_cache(maxsize=8)
def load_prompt(name: str) -> str:
    """Read a prompt by name.

    Args:
        name: File stem, e.g. ``"system"``

    Returns:
        Raw prompt text

    Raises:
        FileNotFoundError: When no candidate file exists
    """
    candidates = prompt_candidates(name)
    for path in candidates:
        if path.is_file():
            return path.read_text(encoding="utf-8")

    searched = ", ".join(str(path) for path in candidates)
    raise FileNotFoundError(f"No prompt named '{name}' (looked in {searched})")


def get_system_prompt() -> str:
    """Persona prompt sent ahead of every conversation, stripped."""
    return load_prompt(SYSTEM_PROMPT).strip()


def clear_cache() -> None:
    """Forget cached prompt text so edited files are read again."""
    load_prompt.cache_clear()


__all__ = [
    "clear_cache",
    "get_system_prompt",
    "load_prompt",
    "prompt_candidates",
]
