"""
Classify type descriptors into the shape categories that drive rendering.
"""

# std
from enum import Enum


# ---------------------------------------------------------------------------- #
class Shape(Enum):
    """Rendering-relevant shape of a type descriptor."""

    SCALAR = 'scalar'
    TEXT = 'text'
    SEQUENCE = 'sequence'
    MAPPING = 'mapping'
    RECORD = 'record'
    REFERENCE = 'reference'
    POLYMORPHIC = 'polymorphic'
    UNREPRESENTABLE = 'unrepresentable'


# shapes whose header already names the type
SELF_DESCRIBING = frozenset({Shape.SEQUENCE, Shape.MAPPING, Shape.RECORD,
                             Shape.POLYMORPHIC})

# ---------------------------------------------------------------------------- #


def classify(kind):
    """
    Map a type descriptor to its shape category.

    Parameters
    ----------
    kind : prettyformat.descriptors.Type
        Any type descriptor.

    Returns
    -------
    Shape
    """
    return kind.shape


def is_self_describing(kind):
    """
    Whether values of this type render with a header that names their type, so
    that they need no extra annotation when found inside a polymorphic slot.
    """
    return classify(kind) in SELF_DESCRIBING
