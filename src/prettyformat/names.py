"""
Canonical (Go-syntax) names for type descriptors.
"""

# std
import functools as ftl

# relative
from .descriptors import Array, Interface, Map, Pointer, Slice, Struct, Type


# ---------------------------------------------------------------------------- #
ANONYMOUS_STRUCT = '(anonymous struct)'
INTERFACE = 'interface{}'

# ---------------------------------------------------------------------------- #


@ftl.singledispatch
def type_name(kind):
    """
    Canonical name for type descriptor `kind`.

    Examples
    --------
    >>> type_name(Map(STRING, Slice(INT8)))
    'map[string][]int8'
    >>> type_name(Pointer(Struct('')))
    '*(anonymous struct)'
    """
    raise TypeError(f'Object of type {type(kind).__name__!r} is not a type '
                    f'descriptor.')


@type_name.register(Type)
def _(kind):
    # all remaining kinds are named by their primitive kind
    return kind.kind


@type_name.register(Array)
def _(kind):
    return f'[{kind.length}]{type_name(kind.elem)}'


@type_name.register(Slice)
def _(kind):
    return f'[]{type_name(kind.elem)}'


@type_name.register(Map)
def _(kind):
    return f'map[{type_name(kind.key)}]{type_name(kind.elem)}'


@type_name.register(Pointer)
def _(kind):
    return f'*{type_name(kind.elem)}'


@type_name.register(Struct)
def _(kind):
    return kind.name or ANONYMOUS_STRUCT


@type_name.register(Interface)
def _(kind):
    return INTERFACE
