"""
Deterministic, Go-syntax pretty formatting of arbitrary values 🔎.
"""

# std
from importlib.metadata import version

# third-party
from loguru import logger

# silence logging by default
logger.disable('prettyformat')

# relative
from .config import CONFIG
from .names import type_name
from .ordering import MapEntry, sort_entries
from .errors import ErrorKind, FormatError
from .shapes import Shape, classify, is_self_describing
from .infer import from_hint, struct_of, typeof, value_of
from .render import INDENT, Rendered, format, pformat, pprint, render
from .descriptors import *


# ---------------------------------------------------------------------------- #

# version
__version__ = version('prettyformat')
