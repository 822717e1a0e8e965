"""Periodic table browser logic: element model, lookups, layout and filters."""

from .catalog import MAX_COMPARE, ElementFilter, element_facts, load_elements, toggle_compare
from .layout import electron_shells, grid_position
from .models import ChemicalElement, ElementCategory, MatterState
from .theme import CATEGORY_COLORS, CATEGORY_LABELS, STATE_LABELS, STATE_SYMBOLS

__all__ = [
    "CATEGORY_COLORS",
    "CATEGORY_LABELS",
    "MAX_COMPARE",
    "STATE_LABELS",
    "STATE_SYMBOLS",
    "ChemicalElement",
    "ElementCategory",
    "ElementFilter",
    "MatterState",
    "electron_shells",
    "element_facts",
    "grid_position",
    "load_elements",
    "toggle_compare",
]
