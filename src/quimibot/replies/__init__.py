"""Reply post-processing: shaping raw model output and rendering it as HTML."""

from .models import ShaperConfig
from .renderer import escape_html, render_markdown, render_table
from .shaper import (
    has_table,
    shape_reply,
    strip_filler,
    trim_dangling_connector,
    truncate_at_sentence_boundary,
)

__all__ = [
    "ShaperConfig",
    "escape_html",
    "has_table",
    "render_markdown",
    "render_table",
    "shape_reply",
    "strip_filler",
    "trim_dangling_connector",
    "truncate_at_sentence_boundary",
]
