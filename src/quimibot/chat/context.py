"""Context labels and canned prompts derived from selected elements."""

from ..periodic import ChemicalElement

CONTEXT_PREFIX = "[Contexto: El usuario está viendo el elemento {label}] "


def context_label(
    element: ChemicalElement | None = None,
    compare: tuple[ChemicalElement, ChemicalElement] | None = None,
) -> str | None:
    """Text of the context chip; a comparison takes precedence."""
    if compare is not None:
        first, second = compare
        return f"{first.label} vs {second.label}"
    if element is not None:
        return element.label
    return None


def with_context(message: str, label: str | None) -> str:
    """Prefix a user message with the element the user is looking at."""
    if not label:
        return message
    return CONTEXT_PREFIX.format(label=label) + message


def compare_prompt(first: ChemicalElement, second: ChemicalElement) -> str:
    """Question sent automatically when two elements are compared."""
    return (
        f"Compara {first.name} ({first.symbol}, nº{first.atomic_number}) con "
        f"{second.name} ({second.symbol}, nº{second.atomic_number}): diferencias y "
        "similitudes en propiedades, reactividad, electronegatividad y usos."
    )
