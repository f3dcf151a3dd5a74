"""
Error kinds for values that cannot be pretty formatted.
"""

# std
from enum import Enum


# ---------------------------------------------------------------------------- #
class ErrorKind(Enum):
    """Closed set of reasons for which a value cannot be rendered."""

    INVALID_TYPE = 'invalid type'
    ARBITRARY_POINTER_TYPE = 'arbitrary pointer types cannot be serialized reliably'
    FUNCTION_TYPE = 'functions cannot be serialized'
    INTERFACE_TYPE = 'interfaces cannot be serialized'
    CHAN_TYPE = 'channels cannot be serialized'
    CYCLIC_VALUE = 'cyclic values cannot be serialized'

    def __str__(self):
        return self.value


class FormatError(ValueError):
    """Raised by `pformat` when a value cannot be rendered."""

    def __init__(self, kind, obj=None):
        self.kind = ErrorKind(kind)
        self.obj = obj
        super().__init__(str(self.kind))
