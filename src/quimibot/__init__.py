"""
QuimiBot: periodic table browser logic and a chemistry chat assistant.

Raw replies from the chat model are shaped into short chat bubbles and
rendered from a small markdown subset into safe HTML.
"""

__version__ = "0.1.0"

from .replies import ShaperConfig, render_markdown, shape_reply

__all__ = [
    "ShaperConfig",
    "render_markdown",
    "shape_reply",
]
