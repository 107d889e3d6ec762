"""gen-util - keyed-collection access and safe projection of untyped data onto records"""

from . import keyval
from ._version import version as __version__
from .errors import ConfigError, GenUtilError, InvalidDate, KeyNotFound, RequiredFieldsUnsatisfied
from .records import Symbol, SymbolTable, build, build_or_raise, merge, merge_or_raise, record
from .result import Err, Found, NotFound, Ok


__all__ = [
    "ConfigError",
    "Err",
    "Found",
    "GenUtilError",
    "InvalidDate",
    "KeyNotFound",
    "NotFound",
    "Ok",
    "RequiredFieldsUnsatisfied",
    "Symbol",
    "SymbolTable",
    "__version__",
    "build",
    "build_or_raise",
    "keyval",
    "merge",
    "merge_or_raise",
    "record",
]
