"""Bound a raw model reply to a chat-bubble sized block.

Two policies exist. Replies carrying a markdown table get a generous
character ceiling and are cut on complete rows. Everything else is limited
to a few lines and cut on a sentence boundary.
"""

import logging
import math
import re
from functools import lru_cache

from .models import ShaperConfig

logger = logging.getLogger(__name__)

_TABLE_ROW = re.compile(r"^\|.+\|", re.MULTILINE)

_DEFAULT_CONFIG = ShaperConfig()


@lru_cache(maxsize=16)
def _filler_regexes(patterns: tuple[str, ...]) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(rf"^(?:{p})\s*", re.IGNORECASE) for p in patterns)


@lru_cache(maxsize=16)
def _connector_regex(connectors: tuple[str, ...]) -> re.Pattern[str] | None:
    if not connectors:
        return None
    words = "|".join(re.escape(word) for word in connectors)
    return re.compile(rf"\s+(?:{words})$", re.IGNORECASE)


def strip_filler(text: str, config: ShaperConfig | None = None) -> str:
    """Remove stock opening phrases, each pattern at most once, in order."""
    config = config or _DEFAULT_CONFIG
    for pattern in _filler_regexes(config.filler_patterns):
        text = pattern.sub("", text, count=1)
    return text.strip()


def trim_dangling_connector(text: str, config: ShaperConfig | None = None) -> str:
    """Drop a single trailing connector word ("y", "de", ...) and whitespace."""
    config = config or _DEFAULT_CONFIG
    regex = _connector_regex(config.connectors)
    if regex is not None:
        text = regex.sub("", text, count=1)
    return text.strip()


def _last_mark(chunk: str, marks: str) -> int:
    return max(chunk.rfind(mark) for mark in marks)


def _last_whitespace(chunk: str) -> int:
    for index in range(len(chunk) - 1, -1, -1):
        if chunk[index].isspace():
            return index
    return -1


def truncate_at_sentence_boundary(
    text: str,
    max_chars: int | None = None,
    config: ShaperConfig | None = None,
) -> str:
    """Cut text to max_chars, preferring the end of a sentence.

    A sentence mark is only used when it falls at or past
    ``sentence_floor_ratio`` of the ceiling; otherwise the text is cut on
    the last whitespace and the ellipsis marker is appended.

    Args:
        text: Text to bound
        max_chars: Ceiling (defaults to ``config.max_chars``)
        config: Shaper tunables

    Returns:
        Bounded text
    """
    config = config or _DEFAULT_CONFIG
    limit = config.max_chars if max_chars is None else max_chars

    if len(text) <= limit:
        return trim_dangling_connector(text, config)

    chunk = text[:limit].rstrip()
    last_mark = _last_mark(chunk, config.sentence_marks)

    if last_mark >= math.floor(limit * config.sentence_floor_ratio):
        return trim_dangling_connector(chunk[:last_mark + 1], config)

    last_space = _last_whitespace(chunk)
    if last_space > 0:
        return trim_dangling_connector(chunk[:last_space], config) + config.ellipsis

    return trim_dangling_connector(chunk, config) + config.ellipsis


def has_table(text: str) -> bool:
    """Check whether any line looks like a markdown table row."""
    return _TABLE_ROW.search(text) is not None


def _is_partial_row(line: str) -> bool:
    return line.startswith("|") and not line.rstrip().endswith("|")


def drop_partial_rows(text: str) -> str:
    """Remove trailing table rows that lost their closing pipe."""
    while True:
        cut = text.rfind("\n")
        if cut < 0 or not _is_partial_row(text[cut + 1:]):
            return text
        text = text[:cut]


def _shape_table(text: str, config: ShaperConfig) -> str:
    if len(text) <= config.table_max_chars:
        return drop_partial_rows(text)

    chunk = text[:config.table_max_chars]
    last_row_end = chunk.rfind("|\n")
    if last_row_end > 0:
        return chunk[:last_row_end + 1]
    return chunk


def _shape_lines(text: str, config: ShaperConfig) -> str:
    lines = [line.strip() for line in text.split("\n")]
    compact = "\n".join([line for line in lines if line][:config.max_lines])
    return truncate_at_sentence_boundary(compact, config.max_chars, config)


def shape_reply(raw_reply: str, config: ShaperConfig | None = None) -> str:
    """Turn a raw model reply into a concise chat reply.

    Args:
        raw_reply: Text returned by the chat model (may be empty)
        config: Shaper tunables (defaults to ``ShaperConfig()``)

    Returns:
        Reply bounded by the line/character limits of ``config``
    """
    config = config or _DEFAULT_CONFIG
    text = strip_filler(raw_reply.strip(), config) or config.empty_reply

    if has_table(text):
        logger.debug("Shaping %d chars in table mode", len(text))
        return _shape_table(text, config)

    logger.debug("Shaping %d chars in line mode", len(text))
    return _shape_lines(text, config)
