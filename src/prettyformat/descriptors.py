"""
Type descriptors: a closed family of classes describing the static type of a
value, in the spirit of Go's type system. A `Value` pairs a descriptor with the
native python data it describes.
"""

# std
import numbers
from collections import abc
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional

# third-party
import numpy as np

# relative
from .shapes import Shape


# ---------------------------------------------------------------------------- #
__all__ = [
    'Type', 'Bool', 'Int', 'Float', 'Complex', 'String', 'Array', 'Slice',
    'Map', 'Field', 'Struct', 'Pointer', 'Interface', 'Func', 'Chan', 'Uintptr',
    'UnsafePointer', 'Invalid', 'Value',
    'BOOL', 'INT', 'INT8', 'INT16', 'INT32', 'INT64',
    'UINT', 'UINT8', 'UINT16', 'UINT32', 'UINT64',
    'FLOAT32', 'FLOAT64', 'COMPLEX64', 'COMPLEX128', 'STRING', 'ANY', 'FUNC',
    'UINTPTR', 'UNSAFE_POINTER', 'INVALID'
]

BOOL_TYPES = (bool, np.bool_)

# ---------------------------------------------------------------------------- #


class Type:
    """Base class for type descriptors."""

    __slots__ = ()

    shape: ClassVar[Shape]
    kind: ClassVar[str]

    def accepts(self, data):
        """Shallow check that `data` can be rendered as this type."""
        return True


def _is_sequence(data):
    return (isinstance(data, (abc.Sequence, np.ndarray))
            and not isinstance(data, str))


# Scalars
# ---------------------------------------------------------------------------- #

@dataclass(frozen=True)
class Bool(Type):
    shape = Shape.SCALAR
    kind = 'bool'

    def accepts(self, data):
        return isinstance(data, BOOL_TYPES)


@dataclass(frozen=True)
class Int(Type):
    """
    Integer type. `bits` of 0 denotes the native (unbounded) `int` / `uint`.
    """

    bits: int = 0
    signed: bool = True

    shape = Shape.SCALAR

    def __post_init__(self):
        if self.bits not in (0, 8, 16, 32, 64):
            raise ValueError(f'Invalid integer size: {self.bits!r}.')

    @property
    def kind(self):
        return f'{"" if self.signed else "u"}int{self.bits or ""}'

    @property
    def bounds(self):
        if not self.bits:
            return (None if self.signed else 0), None

        if self.signed:
            return -(1 << (self.bits - 1)), (1 << (self.bits - 1)) - 1

        return 0, (1 << self.bits) - 1

    def accepts(self, data):
        if not isinstance(data, numbers.Integral) or isinstance(data, BOOL_TYPES):
            return False

        lo, hi = self.bounds
        return (lo is None or data >= lo) and (hi is None or data <= hi)


@dataclass(frozen=True)
class Float(Type):
    bits: int = 64

    shape = Shape.SCALAR

    def __post_init__(self):
        if self.bits not in (32, 64):
            raise ValueError(f'Invalid float size: {self.bits!r}.')

    @property
    def kind(self):
        return f'float{self.bits}'

    def accepts(self, data):
        return isinstance(data, numbers.Real) and not isinstance(data, BOOL_TYPES)


@dataclass(frozen=True)
class Complex(Type):
    """Complex type. `bits` is the total width of both components."""

    bits: int = 128

    shape = Shape.SCALAR

    def __post_init__(self):
        if self.bits not in (64, 128):
            raise ValueError(f'Invalid complex size: {self.bits!r}.')

    @property
    def kind(self):
        return f'complex{self.bits}'

    def accepts(self, data):
        return (isinstance(data, numbers.Complex)
                and not isinstance(data, BOOL_TYPES))


@dataclass(frozen=True)
class String(Type):
    shape = Shape.TEXT
    kind = 'string'

    def accepts(self, data):
        return isinstance(data, str)


# Composites
# ---------------------------------------------------------------------------- #

@dataclass(frozen=True)
class Array(Type):
    """Fixed length sequence."""

    length: int
    elem: Type

    shape = Shape.SEQUENCE
    kind = 'array'

    def accepts(self, data):
        return _is_sequence(data) and len(data) == self.length


@dataclass(frozen=True)
class Slice(Type):
    """Variable length sequence. Nil slices are represented by `None`."""

    elem: Type

    shape = Shape.SEQUENCE
    kind = 'slice'

    def accepts(self, data):
        return data is None or _is_sequence(data)


@dataclass(frozen=True)
class Map(Type):
    """
    Mapping type. Data may be any mapping, a set (each member maps to `true`),
    or `None` for a nil map.
    """

    key: Type
    elem: Type

    shape = Shape.MAPPING
    kind = 'map'

    def accepts(self, data):
        return data is None or isinstance(data, (abc.Mapping, abc.Set))


@dataclass(frozen=True)
class Field:
    """
    Struct field. Fields are exported unless their name starts with an
    underscore, or `exported` is given explicitly.
    """

    name: str
    type: Type
    exported: Optional[bool] = None

    def __post_init__(self):
        if self.exported is None:
            object.__setattr__(self, 'exported', not self.name.startswith('_'))


@dataclass(frozen=True, eq=False)
class Struct(Type):
    """
    Record type with ordered, named fields. Struct descriptors compare by
    identity, since they may be self-referential. An empty `name` denotes an
    anonymous struct. `cls` optionally restricts the data to instances of a
    python class.
    """

    name: str
    fields: list = field(default_factory=list)
    cls: Optional[type] = None

    shape = Shape.RECORD
    kind = 'struct'

    def accepts(self, data):
        if self.cls is None:
            return data is not None
        return isinstance(data, self.cls)


@dataclass(frozen=True)
class Pointer(Type):
    """Reference to a value of type `elem`. Nil pointers are `None`."""

    elem: Type

    shape = Shape.REFERENCE
    kind = 'ptr'

    def accepts(self, data):
        return data is None or self.elem.accepts(data)


@dataclass(frozen=True)
class Interface(Type):
    """Polymorphic slot: the concrete type is known only from the held value."""

    shape = Shape.POLYMORPHIC
    kind = 'interface'


# Unrepresentable
# ---------------------------------------------------------------------------- #

@dataclass(frozen=True)
class Func(Type):
    shape = Shape.UNREPRESENTABLE
    kind = 'func'


@dataclass(frozen=True)
class Chan(Type):
    elem: Type = Interface()

    shape = Shape.UNREPRESENTABLE
    kind = 'chan'


@dataclass(frozen=True)
class Uintptr(Type):
    shape = Shape.UNREPRESENTABLE
    kind = 'uintptr'


@dataclass(frozen=True)
class UnsafePointer(Type):
    shape = Shape.UNREPRESENTABLE
    kind = 'unsafe.Pointer'


@dataclass(frozen=True)
class Invalid(Type):
    shape = Shape.UNREPRESENTABLE
    kind = 'invalid'


# ---------------------------------------------------------------------------- #
@dataclass(frozen=True)
class Value:
    """A datum paired with the descriptor of its type."""

    type: Type
    data: Any = None


# Predeclared types
# ---------------------------------------------------------------------------- #
BOOL = Bool()
INT, INT8, INT16, INT32, INT64 = (Int(bits) for bits in (0, 8, 16, 32, 64))
UINT, UINT8, UINT16, UINT32, UINT64 = (Int(bits, False)
                                       for bits in (0, 8, 16, 32, 64))
FLOAT32, FLOAT64 = Float(32), Float(64)
COMPLEX64, COMPLEX128 = Complex(64), Complex(128)
STRING = String()
ANY = Interface()
FUNC = Func()
UINTPTR = Uintptr()
UNSAFE_POINTER = UnsafePointer()
INVALID = Invalid()
