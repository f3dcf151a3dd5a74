"""
Infer type descriptors for native python objects and type hints.
"""

# std
import types
import queue
import typing
import asyncio
import ctypes
import numbers
import threading
import dataclasses
from collections import abc

# third-party
import numpy as np
import more_itertools as mit
from loguru import logger

# relative
from .config import CONFIG
from .descriptors import (ANY, BOOL, COMPLEX64, COMPLEX128, FLOAT32, FLOAT64,
                          FUNC, INT, INT8, INT16, INT32, INT64, INVALID, STRING,
                          UINT8, UINT16, UINT32, UINT64, UNSAFE_POINTER, Array,
                          Chan, Field, Map, Pointer, Slice, Struct, Type, Value)


# ---------------------------------------------------------------------------- #
SCALAR_TYPES = {bool:    BOOL,
                int:     INT,
                float:   FLOAT64,
                complex: COMPLEX128,
                str:     STRING}

NUMPY_TYPES = {np.dtype(dtype): kind for dtype, kind in {
    'bool':       BOOL,
    'int8':       INT8,
    'int16':      INT16,
    'int32':      INT32,
    'int64':      INT64,
    'uint8':      UINT8,
    'uint16':     UINT16,
    'uint32':     UINT32,
    'uint64':     UINT64,
    'float16':    FLOAT32,
    'float32':    FLOAT32,
    'float64':    FLOAT64,
    'complex64':  COMPLEX64,
    'complex128': COMPLEX128,
}.items()}

NUMPY_SCALARS = {dtype.type: kind for dtype, kind in NUMPY_TYPES.items()}

BYTES = Slice(UINT8)

# concurrency primitives are rendered (and refused) as channels
CONCURRENCY_TYPES = (
    queue.Queue, queue.SimpleQueue,
    asyncio.Queue, asyncio.Event, asyncio.Lock, asyncio.Condition,
    asyncio.Semaphore,
    threading.Event, threading.Condition, threading.Semaphore,
    type(threading.Lock()), type(threading.RLock())
)

ADDRESS_TYPES = (ctypes._Pointer, ctypes.c_void_p, memoryview)

# registry of struct descriptors for python classes
STRUCTS = {}

# ---------------------------------------------------------------------------- #


def typeof(obj):
    """Type descriptor for the python object `obj`."""
    return value_of(obj).type


def value_of(obj, homogeneous=None):
    """
    Pair the python object `obj` with an inferred type descriptor.

    Parameters
    ----------
    obj : object
        Any object. `Value` instances are returned unchanged.
    homogeneous : bool, optional
        Whether containers whose items all share a type get that type as their
        element type. Otherwise their items are held in polymorphic slots
        (`interface{}`). Default from `CONFIG.infer.homogeneous`.

    Returns
    -------
    Value
    """
    if isinstance(obj, Value):
        return obj

    if homogeneous is None:
        homogeneous = CONFIG.infer.homogeneous

    return Value(_infer(obj, homogeneous), obj)


def _infer(obj, homogeneous, active=frozenset()):
    if obj is None:
        return INVALID

    if isinstance(obj, Value):
        return obj.type

    if id(obj) in active:
        # container holds itself, the renderer reports the cycle
        return ANY

    if (kind := SCALAR_TYPES.get(type(obj))) is not None:
        return kind

    if isinstance(obj, np.generic):
        return NUMPY_TYPES.get(obj.dtype, INVALID)

    if isinstance(obj, (bytes, bytearray)):
        return BYTES

    if isinstance(obj, np.ndarray):
        return _infer_array(obj, homogeneous)

    # subclasses of builtin scalars, eg. IntEnum
    for base, kind in SCALAR_TYPES.items():
        if isinstance(obj, base):
            return kind

    if isinstance(obj, ADDRESS_TYPES):
        return UNSAFE_POINTER

    if isinstance(obj, CONCURRENCY_TYPES):
        return Chan()

    if _is_record_class(type(obj)):
        return struct_of(type(obj))

    active = active | {id(obj)}
    if isinstance(obj, abc.Mapping):
        return Map(_common(obj.keys(), homogeneous, active),
                   _common(obj.values(), homogeneous, active))

    if isinstance(obj, abc.Set):
        return Map(_common(obj, homogeneous, active), BOOL)

    if isinstance(obj, tuple):
        return Array(len(obj), _common(obj, homogeneous, active))

    if isinstance(obj, abc.Sequence):
        return Slice(_common(obj, homogeneous, active))

    if callable(obj) or isinstance(obj, type):
        return FUNC

    if isinstance(obj, types.SimpleNamespace):
        return Struct('', [Field(name, ANY) for name in vars(obj)])

    if hasattr(obj, '__dict__') or hasattr(type(obj), '__slots__'):
        return _struct_of_instance(obj)

    logger.debug('Could not infer type descriptor for object of type {}.',
                 type(obj).__name__)
    return INVALID


def _common(items, homogeneous, active):
    # element type shared by all `items`, or polymorphic if they differ
    if not homogeneous:
        return ANY

    kinds = [_infer(item, homogeneous, active) for item in items]
    if kinds and mit.all_equal(kinds) and kinds[0] != INVALID:
        return kinds[0]

    return ANY


def _infer_array(array, homogeneous):
    if array.ndim == 0:
        return NUMPY_TYPES.get(array.dtype, INVALID)

    elem = NUMPY_TYPES.get(array.dtype, ANY)
    for _ in range(array.ndim):
        elem = Slice(elem)
    return elem


# Structs
# ---------------------------------------------------------------------------- #

def _is_record_class(kls):
    return dataclasses.is_dataclass(kls) or _is_namedtuple_class(kls)


def _is_namedtuple_class(kls):
    return (isinstance(kls, type) and issubclass(kls, tuple)
            and hasattr(kls, '_fields'))


def _type_hints(kls):
    try:
        return typing.get_type_hints(kls)
    except (NameError, TypeError) as err:
        # unresolvable forward references
        logger.debug('Could not resolve type hints for {}: {}', kls, err)
        return {}


def struct_of(kls):
    """
    Struct descriptor for a dataclass or named tuple class. Field types are
    resolved from the class' type hints. Dataclass fields declared with
    `repr=False`, and fields with names starting with an underscore are not
    exported.
    """
    if kls in STRUCTS:
        return STRUCTS[kls]

    if not _is_record_class(kls):
        raise TypeError(f'Cannot create struct descriptor for {kls!r}. '
                        'Expected a dataclass or named tuple class.')

    # register before resolving fields so that self-referential classes resolve
    STRUCTS[kls] = struct = Struct(kls.__name__, [], kls)

    hints = _type_hints(kls)
    if dataclasses.is_dataclass(kls):
        fields = [(fld.name, (None if fld.repr else False))
                  for fld in dataclasses.fields(kls)]
    else:
        fields = [(name, None) for name in kls._fields]

    struct.fields.extend(Field(name, from_hint(hints.get(name, typing.Any)),
                               exported)
                         for name, exported in fields)

    logger.debug('Resolved struct descriptor for {} with {} fields.',
                 kls.__qualname__, len(struct.fields))
    return struct


def _struct_of_instance(obj):
    kls = type(obj)
    names = list(vars(obj)) if hasattr(obj, '__dict__') else \
        [name for name in _slots(kls) if hasattr(obj, name)]
    hints = _type_hints(kls)
    return Struct(kls.__name__,
                  [Field(name, from_hint(hints.get(name, typing.Any)))
                   for name in names],
                  kls)


def _slots(kls):
    for base in reversed(kls.__mro__):
        slots = base.__dict__.get('__slots__', ())
        yield from ((slots, ) if isinstance(slots, str) else slots)


# Type hints
# ---------------------------------------------------------------------------- #

def from_hint(hint):
    """
    Type descriptor corresponding to the type hint `hint`. Hints that have no
    fixed concrete shape resolve to `interface{}`.

    Examples
    --------
    >>> type_name(from_hint(dict[str, list[int]]))
    'map[string][]int'
    >>> type_name(from_hint(typing.Optional[float]))
    '*float64'
    """
    if isinstance(hint, Type):
        return hint

    if hint is None or hint is type(None):
        return INVALID

    if (kind := SCALAR_TYPES.get(hint)) is not None:
        return kind

    if hint in (bytes, bytearray):
        return BYTES

    if hint is typing.Any or hint is object:
        return ANY

    if (kind := NUMPY_SCALARS.get(hint)) is not None:
        return kind

    origin = typing.get_origin(hint)
    args = typing.get_args(hint)

    if origin in (typing.Union, getattr(types, 'UnionType', typing.Union)):
        return _from_union(args)

    if origin is tuple:
        return _from_tuple(args)

    if origin is not None and isinstance(origin, type):
        return _from_generic(origin, args)

    if _is_record_class(hint):
        return struct_of(hint)

    if isinstance(hint, type):
        return _from_class(hint)

    return ANY


def _from_union(args):
    # Optional[X] is a pointer to X, Optional[X | Y] a pointer to interface{}
    kinds = [arg for arg in args if arg is not type(None)]
    if len(kinds) == len(args):
        return ANY

    return Pointer(from_hint(kinds[0]) if len(kinds) == 1 else ANY)


def _from_tuple(args):
    if not args or args == ((), ):
        return ANY

    if len(args) == 2 and args[1] is Ellipsis:
        return Slice(from_hint(args[0]))

    kinds = [from_hint(arg) for arg in args]
    return Array(len(kinds), kinds[0] if mit.all_equal(kinds) else ANY)


def _from_generic(origin, args):
    if issubclass(origin, abc.Callable):
        return FUNC

    elems = [from_hint(arg) for arg in args] or [ANY, ANY]

    if issubclass(origin, abc.Mapping):
        key, elem = (elems + [ANY])[:2]
        return Map(key, elem)

    if issubclass(origin, abc.Set):
        return Map(elems[0], BOOL)

    if issubclass(origin, (abc.Sequence, abc.Iterable)) \
            and not issubclass(origin, (str, bytes)):
        return Slice(elems[0])

    return _from_class(origin)


def _from_class(kls):
    if issubclass(kls, abc.Callable) and kls is not type:
        return FUNC

    if issubclass(kls, CONCURRENCY_TYPES):
        return Chan()

    if issubclass(kls, ADDRESS_TYPES):
        return UNSAFE_POINTER

    for base, kind in SCALAR_TYPES.items():
        if issubclass(kls, base):
            return kind

    if issubclass(kls, numbers.Integral):
        return INT

    if issubclass(kls, abc.Mapping):
        return Map(ANY, ANY)

    if issubclass(kls, abc.Set):
        return Map(ANY, BOOL)

    if issubclass(kls, (list, abc.MutableSequence)):
        return Slice(ANY)

    return ANY
