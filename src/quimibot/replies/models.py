"""Tunables for reply shaping.

Every limit, word list and marker used by the shaper lives here so callers
can swap them without touching the algorithm.
"""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_FILLER_PATTERNS = (
    r"¡?buena pregunta!?",
    r"mira,?\s*esto es interesante\.?",
)

DEFAULT_CONNECTORS = (
    "de", "del", "y", "e", "o", "u", "con", "para", "por", "en", "a", "que",
)


class ShaperConfig(BaseModel):
    """Limits and word lists that bound a chat reply."""

    model_config = ConfigDict(frozen=True)

    max_lines: int = Field(default=6, ge=1, description="Line cap in line mode")
    max_chars: int = Field(default=520, ge=1, description="Character cap in line mode")
    table_max_chars: int = Field(default=2400, ge=1, description="Character cap in table mode")
    sentence_floor_ratio: float = Field(
        default=0.55,
        ge=0.0,
        le=1.0,
        description="Earliest position (fraction of max_chars) where a sentence cut is accepted",
    )
    filler_patterns: tuple[str, ...] = Field(
        default=DEFAULT_FILLER_PATTERNS,
        description="Regex fragments for opening phrases stripped from the reply",
    )
    connectors: tuple[str, ...] = Field(
        default=DEFAULT_CONNECTORS,
        description="Short words that must not dangle at the end of a reply",
    )
    sentence_marks: str = Field(default=".!?;:", min_length=1)
    ellipsis: str = Field(default="…")
    empty_reply: str = Field(default="(sin respuesta)", min_length=1)
