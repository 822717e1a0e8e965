"""Position of elements in the 18-column display grid."""

from .models import ChemicalElement

GRID_COLUMNS = 18
LANTHANIDE_ROW = 9
ACTINIDE_ROW = 10

_SHELL_CAPACITIES = (2, 8, 18, 32, 32, 18, 8)
_MAX_DRAWN_SHELLS = 5


def grid_position(element: ChemicalElement) -> tuple[int, int]:
    """Return the 1-indexed ``(column, row)`` of an element.

    Lanthanides (57-71) and actinides (89-103) go to the two detached rows
    below the main table, starting at column 3.
    """
    n = element.atomic_number
    if 57 <= n <= 71:
        return n - 54, LANTHANIDE_ROW
    if 89 <= n <= 103:
        return n - 86, ACTINIDE_ROW
    return element.group or 1, element.period


def electron_shells(atomic_number: int) -> list[int]:
    """Fill shells in order for the simplified Bohr diagram.

    Only the first five shells are drawn.
    """
    remaining = atomic_number
    shells = []
    for capacity in _SHELL_CAPACITIES:
        if remaining <= 0:
            break
        electrons = min(remaining, capacity)
        shells.append(electrons)
        remaining -= electrons
    return shells[:_MAX_DRAWN_SHELLS]
