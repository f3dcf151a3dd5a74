"""
Recursive pretty formatting of values.

Every value renders as a closed text fragment in a Go-like syntax: composite
values open with a header naming their type, list one child per line (each
followed by a comma) indented two spaces further than their parent, and close
on a line of their own. Children held in polymorphic slots are prefixed with
their concrete type name, unless their own header already names it.

Rendering never raises for unrepresentable values. Instead the returned
`Rendered` tuple carries the `ErrorKind` that stopped rendering, and no text.
"""

# std
import sys
import functools as ftl
from collections import abc
from typing import NamedTuple, Optional

# relative
from . import literals
from .config import CONFIG
from .infer import value_of
from .names import type_name
from .shapes import is_self_describing
from .errors import ErrorKind, FormatError
from .ordering import MapEntry, sort_entries
from .descriptors import (Array, Bool, Chan, Complex, Float, Func, Int,
                          Interface, Invalid, Map, Pointer, Slice, String,
                          Struct, Type, Uintptr, UnsafePointer, Value)


# ---------------------------------------------------------------------------- #
INDENT = 2
NIL = 'nil'
MISSING = object()

# ---------------------------------------------------------------------------- #


class Rendered(NamedTuple):
    """Rendered text for a value, or the kind of error that prevented it."""

    text: str = ''
    error: Optional[ErrorKind] = None

    @classmethod
    def fail(cls, kind):
        return cls('', ErrorKind(kind))

    @property
    def ok(self):
        return self.error is None


# ---------------------------------------------------------------------------- #

def format(obj):
    """
    Pretty format `obj`.

    Parameters
    ----------
    obj : object
        The value to format. Either a `Value`, or any python object, for which
        the type descriptor will be inferred.

    Returns
    -------
    Rendered
        Named tuple `(text, error)`. On success `error` is `None`, otherwise
        `text` is empty and `error` is the `ErrorKind` of the failure.

    Examples
    --------
    >>> print(format(['hello', 'world']).text)
    []string{
      "hello",
      "world",
    }
    """
    return render(obj)


def pformat(obj):
    """
    Pretty format `obj`, raising `FormatError` if it cannot be rendered.
    """
    text, error = render(obj)
    if error:
        raise FormatError(error, obj)
    return text


def pprint(obj, file=None):
    print(pformat(obj), file=file or sys.stdout)


def render(obj, indent=0, detect_cycles=None):
    """
    Render `obj` as a fragment whose first line starts at column `indent`.

    Parameters
    ----------
    obj : object
        `Value` or python object.
    indent : int
        Indentation of the line on which the fragment starts. Children are
        indented by a further `INDENT` spaces, closing braces by `indent`.
    detect_cycles : bool, optional
        Fail with `ErrorKind.CYCLIC_VALUE` for containers that contain
        themselves. Default from `CONFIG.render.detect_cycles`. Without cycle
        detection, cyclic values raise `RecursionError`.

    Returns
    -------
    Rendered
    """
    if indent < 0:
        raise ValueError(f'Indentation should be non-negative, not {indent!r}.')

    if detect_cycles is None:
        detect_cycles = CONFIG.render.detect_cycles

    value = value_of(obj)
    return _render(value.type, value.data, indent,
                   set() if detect_cycles else None)


# ---------------------------------------------------------------------------- #

def _resolve(declared, data):
    """
    Resolve the concrete type of `data` held in a slot of type `declared`.
    Slots are resolved dynamically if they are polymorphic, or if `data` does
    not fit the declared type. Values resolved this way are annotated with
    their type name, unless their own header names it.

    Returns
    -------
    kind : Type
    data : object
    annotation : str
    """
    if isinstance(data, Value) and data.type == declared:
        return declared, data.data, ''

    if not isinstance(declared, Interface) and declared.accepts(data):
        return declared, data, ''

    value = value_of(data)
    if is_self_describing(value.type):
        return value.type, value.data, ''

    return value.type, value.data, f'({type_name(value.type)})'


def _tracked(renderer):
    # Guard composite renderers against values that contain themselves
    @ftl.wraps(renderer)
    def wrapper(kind, data, indent, active):
        if active is None or data is None:
            return renderer(kind, data, indent, active)

        key = id(data)
        if key in active:
            return Rendered.fail(ErrorKind.CYCLIC_VALUE)

        active.add(key)
        try:
            return renderer(kind, data, indent, active)
        finally:
            active.discard(key)

    return wrapper


def _close(lines, indent):
    lines.append(f'{" " * indent}}}')
    return Rendered('\n'.join(lines))


# Dispatch
# ---------------------------------------------------------------------------- #

@ftl.singledispatch
def _render(kind, data, indent, active):
    raise TypeError(f'No renderer for object of type {type(kind).__name__!r}. '
                    'Expected a type descriptor.')


def _fails(error):
    def renderer(kind, data, indent, active):
        return Rendered.fail(error)

    renderer.__name__ = f'_fail_{error.name.lower()}'
    return renderer


_render.register(Invalid, _fails(ErrorKind.INVALID_TYPE))
_render.register(Uintptr, _fails(ErrorKind.ARBITRARY_POINTER_TYPE))
_render.register(UnsafePointer, _fails(ErrorKind.ARBITRARY_POINTER_TYPE))
_render.register(Func, _fails(ErrorKind.FUNCTION_TYPE))
_render.register(Chan, _fails(ErrorKind.CHAN_TYPE))
# a bare interface, not unwrapped by a container slot
_render.register(Interface, _fails(ErrorKind.INTERFACE_TYPE))


# Scalars
# ---------------------------------------------------------------------------- #

def _scalar(func):
    def renderer(kind, data, indent, active):
        if kind.accepts(data):
            return Rendered(func(kind, data))
        return Rendered.fail(ErrorKind.INVALID_TYPE)

    renderer.__name__ = func.__name__
    return renderer


@_render.register(Bool)
@_scalar
def _bool(kind, data):
    return literals.boolean(data)


@_render.register(Int)
@_scalar
def _int(kind, data):
    return literals.integer(data)


@_render.register(Float)
@_scalar
def _float(kind, data):
    return literals.floating(data, kind.bits)


@_render.register(Complex)
@_scalar
def _complex(kind, data):
    return literals.complex_(data, kind.bits)


@_render.register(String)
@_scalar
def _string(kind, data):
    return literals.quote(data)


# Composites
# ---------------------------------------------------------------------------- #

@_render.register(Array)
@_render.register(Slice)
@_tracked
def _sequence(kind, data, indent, active):
    if not kind.accepts(data):
        return Rendered.fail(ErrorKind.INVALID_TYPE)

    header = f'{type_name(kind)}{{'
    if data is None or len(data) == 0:
        return Rendered(f'{header}}}')

    lines = [header]
    pad = indent + INDENT
    for item in data:
        item_type, item, note = _resolve(kind.elem, item)
        text, error = _render(item_type, item, pad, active)
        if error:
            return Rendered.fail(error)

        lines.append(f'{" " * pad}{note}{text},')

    return _close(lines, indent)


@_render.register(Map)
@_tracked
def _map(kind, data, indent, active):
    if not kind.accepts(data):
        return Rendered.fail(ErrorKind.INVALID_TYPE)

    header = f'{type_name(kind)}{{'
    if not data:
        return Rendered(f'{header}}}')

    items = data.items() if isinstance(data, abc.Mapping) else \
        ((member, True) for member in data)

    entries = []
    pad = indent + INDENT
    for key, elem in items:
        key_type, key, key_note = _resolve(kind.key, key)
        key, error = _render(key_type, key, pad, active)
        if error:
            return Rendered.fail(error)

        elem_type, elem, elem_note = _resolve(kind.elem, elem)
        elem, error = _render(elem_type, elem, pad, active)
        if error:
            return Rendered.fail(error)

        entries.append(MapEntry(key, key_note, elem, elem_note))

    lines = [header]
    lines.extend(f'{" " * pad}{entry},' for entry in sort_entries(entries))
    return _close(lines, indent)


@_render.register(Struct)
@_tracked
def _struct(kind, data, indent, active):
    if not kind.accepts(data):
        return Rendered.fail(ErrorKind.INVALID_TYPE)

    lines = [f'{type_name(kind)}{{']
    pad = indent + INDENT
    for index, field in enumerate(kind.fields):
        if not field.exported:
            continue

        value = _get_field(data, field.name, index)
        if value is MISSING:
            return Rendered.fail(ErrorKind.INVALID_TYPE)

        field_type, value, note = _resolve(field.type, value)
        text, error = _render(field_type, value, pad, active)
        if error:
            return Rendered.fail(error)

        lines.append(f'{" " * pad}{field.name}: {note}{text},')

    if len(lines) == 1:
        # no exported fields
        return Rendered(f'{lines[0]}}}')

    return _close(lines, indent)


def _get_field(data, name, index):
    # struct data can be a mapping of field names, a sequence of field values
    # in declaration order, or an object with attributes
    if isinstance(data, abc.Mapping):
        return data.get(name, MISSING)

    if isinstance(data, abc.Sequence) and not isinstance(data, str):
        return data[index] if index < len(data) else MISSING

    return getattr(data, name, MISSING)


@_render.register(Pointer)
def _pointer(kind, data, indent, active):
    if data is None:
        return Rendered(NIL)

    elem = kind.elem
    if isinstance(elem, Interface):
        # pointee of a pointer to interface is rendered as its concrete value
        value = value_of(data)
        elem, data = value.type, value.data

    # dereferenced values stay at the same indentation
    text, error = _render(elem, data, indent, active)
    if error:
        return Rendered.fail(error)

    return Rendered(f'&{text}')


# ---------------------------------------------------------------------------- #

def _check_exhaustive():
    # every descriptor class needs a renderer
    missing = {kls.__name__ for kls in Type.__subclasses__()
               if _render.dispatch(kls) is _render.registry[object]}
    if missing:
        raise TypeError(f'No renderer registered for type descriptors: '
                        f'{", ".join(sorted(missing))}.')


_check_exhaustive()
