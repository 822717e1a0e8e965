"""Immutable display lookups keyed by the closed category and state sets."""

from types import MappingProxyType

from .models import ElementCategory, MatterState

CATEGORY_COLORS = MappingProxyType({
    ElementCategory.ALKALI_METAL: "#00b4ff",
    ElementCategory.ALKALINE_EARTH: "#00ff88",
    ElementCategory.TRANSITION_METAL: "#00e5ff",
    ElementCategory.POST_TRANSITION: "#ffd600",
    ElementCategory.METALLOID: "#ff9800",
    ElementCategory.NONMETAL: "#76ff03",
    ElementCategory.HALOGEN: "#ff4081",
    ElementCategory.NOBLE_GAS: "#e040fb",
    ElementCategory.LANTHANIDE: "#ff6e40",
    ElementCategory.ACTINIDE: "#ff1744",
    ElementCategory.UNKNOWN: "#8ea3b9",
})

CATEGORY_LABELS = MappingProxyType({
    ElementCategory.ALKALI_METAL: "Alcalinos",
    ElementCategory.ALKALINE_EARTH: "Alcalinotérreos",
    ElementCategory.TRANSITION_METAL: "Transición",
    ElementCategory.POST_TRANSITION: "Post-transición",
    ElementCategory.METALLOID: "Metaloides",
    ElementCategory.NONMETAL: "No metales",
    ElementCategory.HALOGEN: "Halógenos",
    ElementCategory.NOBLE_GAS: "Gases nobles",
    ElementCategory.LANTHANIDE: "Lantánidos",
    ElementCategory.ACTINIDE: "Actínidos",
    ElementCategory.UNKNOWN: "Desconocido",
})

STATE_LABELS = MappingProxyType({
    MatterState.SOLID: "Sólido",
    MatterState.LIQUID: "Líquido",
    MatterState.GAS: "Gas",
    MatterState.UNKNOWN: "Desconocido",
})

STATE_SYMBOLS = MappingProxyType({
    MatterState.SOLID: "■",
    MatterState.LIQUID: "~",
    MatterState.GAS: "○",
    MatterState.UNKNOWN: "?",
})
