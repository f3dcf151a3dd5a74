"""
Deterministic ordering of rendered map entries.
"""

# std
from operator import attrgetter
from typing import NamedTuple


# ---------------------------------------------------------------------------- #
class MapEntry(NamedTuple):
    """Rendered key and element of a map, with optional type annotations."""

    key: str
    key_type: str
    elem: str
    elem_type: str

    def __str__(self):
        return f'{self.key_type}{self.key}: {self.elem_type}{self.elem}'


# ---------------------------------------------------------------------------- #

def sort_entries(entries):
    """
    Sort map entries by their rendered key text (without annotation). The sort
    is stable, so entries with identical key text keep their relative order.
    """
    return sorted(entries, key=attrgetter('key'))
