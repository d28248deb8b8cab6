from .base import DocumentParser
from .config import ParserConfig
from .csv_parser import CsvParser, parse, parse_file
from .models import Document, Field, Header, Record, RowError

__all__ = [
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
]
