"""Loading, filtering and comparing elements."""

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .models import ChemicalElement, ElementCategory, MatterState
from .theme import CATEGORY_LABELS

logger = logging.getLogger(__name__)

MAX_COMPARE = 2

_ELEMENT_LIST = TypeAdapter(list[ChemicalElement])


def load_elements(path: str | Path) -> list[ChemicalElement]:
    """Load elements from a JSON array, sorted by atomic number.

    Args:
        path: JSON file with one object per element

    Returns:
        Validated elements

    Raises:
        FileNotFoundError: If the file does not exist
        pydantic.ValidationError: If a row does not match the element model
    """
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    elements = sorted(_ELEMENT_LIST.validate_python(raw), key=lambda el: el.atomic_number)
    logger.debug("Loaded %d elements from %s", len(elements), path)
    return elements


class ElementFilter(BaseModel):
    """Search text plus optional category and state restrictions."""

    model_config = ConfigDict(frozen=True)

    search: str = Field(default="", description="Name, symbol or atomic number prefix")
    category: ElementCategory | None = None
    state: MatterState | None = None

    @property
    def query(self) -> str:
        return self.search.strip().lower()

    @property
    def is_active(self) -> bool:
        """True when any restriction is set."""
        return bool(self.query) or self.category is not None or self.state is not None

    def matches(self, element: ChemicalElement) -> bool:
        q = self.query
        search_ok = (
            not q
            or q in element.name.lower()
            or q in element.symbol.lower()
            or str(element.atomic_number).startswith(q)
        )
        category_ok = self.category is None or element.category == self.category
        state_ok = self.state is None or element.state == self.state
        return search_ok and category_ok and state_ok

    def apply(self, elements: Iterable[ChemicalElement]) -> list[ChemicalElement]:
        return [el for el in elements if self.matches(el)]


def toggle_compare(selected: tuple[int, ...], atomic_number: int) -> tuple[int, ...]:
    """Update the comparison selection after clicking an element.

    Clicking a selected element deselects it. With two already selected the
    oldest is dropped.
    """
    if atomic_number in selected:
        return tuple(n for n in selected if n != atomic_number)
    if len(selected) >= MAX_COMPARE:
        return (*selected[-(MAX_COMPARE - 1):], atomic_number)
    return (*selected, atomic_number)


def element_facts(element: ChemicalElement) -> list[str]:
    """Short generated facts shown in the "Curiosidades" tab."""
    family = CATEGORY_LABELS[element.category].lower()
    n = element.atomic_number
    facts = [
        f"{element.name} pertenece a la familia de los {family}, en el período {element.period}.",
        f"Con número atómico {n}, tiene {n} protones y generalmente {n} electrones en su forma neutra.",
        f'Su configuración electrónica "{element.electron_configuration}" determina su '
        "reactividad química y sus propiedades de enlace.",
    ]

    en = element.electronegativity
    if en:
        if en > 3:
            tendency = "atrae fuertemente los electrones en los enlaces"
        elif en > 2:
            tendency = "tiene tendencia moderada a atraer electrones"
        else:
            tendency = "suele ceder electrones en reacciones"
        facts.append(f"Con electronegatividad de {en:g} (Pauling), {tendency}.")
    else:
        facts.append(
            "Su electronegatividad no está bien documentada, común en metales "
            "de transición y elementos sintéticos."
        )
    return facts
