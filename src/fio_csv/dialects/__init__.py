from .builtin import BUILTIN_DIALECTS, get_dialect
from .dialect import Dialect
from .dialect_library import DialectLibrary

__all__ = [
    "BUILTIN_DIALECTS",
    "Dialect",
    "DialectLibrary",
    "get_dialect",
]
