# Dialects
from .dialects import Dialect, DialectLibrary, get_dialect

# Errors
from .errors import CsvError, FormatError, IoError

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    CsvParser,
    Document,
    DocumentParser,
    Field,
    Header,
    ParserConfig,
    Record,
    RowError,
    parse,
    parse_file,
)

# Writers
from .writers import to_csv_string, write_document

__all__ = [
    # Dialects
    "Dialect",
    "DialectLibrary",
    "get_dialect",
    # Errors
    "CsvError",
    "FormatError",
    "IoError",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "CsvParser",
    "Document",
    "DocumentParser",
    "Field",
    "Header",
    "ParserConfig",
    "Record",
    "RowError",
    "parse",
    "parse_file",
    # Writers
    "to_csv_string",
    "write_document",
]
