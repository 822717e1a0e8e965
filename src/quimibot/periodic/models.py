"""Element data model.

The dataset uses camelCase keys (``atomicNumber``, ``electronConfiguration``);
both those and the snake_case field names are accepted. Zero is used in the
dataset for unknown measurements and for the missing group of f-block
elements; those are normalised to ``None``.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ElementCategory(str, Enum):
    """Chemical family of an element."""

    ALKALI_METAL = "alkali-metal"
    ALKALINE_EARTH = "alkaline-earth"
    TRANSITION_METAL = "transition-metal"
    POST_TRANSITION = "post-transition"
    METALLOID = "metalloid"
    NONMETAL = "nonmetal"
    HALOGEN = "halogen"
    NOBLE_GAS = "noble-gas"
    LANTHANIDE = "lanthanide"
    ACTINIDE = "actinide"
    UNKNOWN = "unknown"


class MatterState(str, Enum):
    """State of matter at room temperature."""

    SOLID = "solid"
    LIQUID = "liquid"
    GAS = "gas"
    UNKNOWN = "unknown"


class ChemicalElement(BaseModel):
    """One row of the periodic table."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    atomic_number: int = Field(ge=1, le=118)
    symbol: str = Field(min_length=1, max_length=3)
    name: str
    atomic_mass: float = Field(ge=0)
    category: ElementCategory = ElementCategory.UNKNOWN
    group: int | None = Field(default=None, ge=1, le=18)
    period: int = Field(ge=1, le=7)
    state: MatterState = MatterState.UNKNOWN
    electronegativity: float | None = None
    melting_point: float | None = Field(default=None, description="Kelvin")
    boiling_point: float | None = Field(default=None, description="Kelvin")
    electron_configuration: str = ""
    discovered_by: str = ""
    year_discovered: int = 0
    description: str = ""
    uses: tuple[str, ...] = ()
    image_url: str | None = None

    @field_validator("group", "electronegativity", "melting_point", "boiling_point", mode="before")
    @classmethod
    def _zero_is_unknown(cls, value: object) -> object:
        return None if value == 0 else value

    @property
    def label(self) -> str:
        """Display label used in context chips, e.g. ``Oro (Au)``."""
        return f"{self.name} ({self.symbol})"
