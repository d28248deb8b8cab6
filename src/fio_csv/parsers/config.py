# src/fio_csv/parsers/config.py

import codecs
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Literal

from fio_csv.dialects.dialect import Dialect

Mode = Literal["strict", "lenient"]

_LINE_TERMINATORS = ("\r", "\n")


@dataclass(frozen=True)
class ParserConfig:
    """Configuration for CSV parsing.

    Immutable. Explicit. No magic defaults from environment.

    mode:
        ``strict`` aborts on the first malformed row with ``FormatError``.
        ``lenient`` pads rows that are short of the expected field count
        with empty strings, and skips rows that are too long, carry an
        unterminated quote, or fail conversion, recording each one in
        ``Document.errors``.
    converters:
        Column name or index -> callable turning the raw string into
        ``Field.value``. ``ValueError``/``TypeError`` raised by a converter
        counts as a malformed row.
    skip_rows:
        Logical rows dropped before the header (or first data row).
    """

    delimiter: str = ","
    quotechar: str = '"'
    has_header: bool = True
    mode: Mode = "strict"
    encoding: str = "utf-8-sig"
    skip_rows: int = 0
    converters: Mapping[str | int, Callable[[str], Any]] = field(
        default_factory=dict, hash=False
    )

    def __post_init__(self) -> None:
        if len(self.delimiter) != 1:
            raise ValueError("delimiter must be a single character")
        if len(self.quotechar) != 1:
            raise ValueError("quotechar must be a single character")
        if self.delimiter == self.quotechar:
            raise ValueError("delimiter and quotechar must differ")
        if self.delimiter in _LINE_TERMINATORS or self.quotechar in _LINE_TERMINATORS:
            raise ValueError("delimiter and quotechar must not be line terminators")
        if self.mode not in ("strict", "lenient"):
            raise ValueError(f"Unknown parse mode: {self.mode}")
        if self.skip_rows < 0:
            raise ValueError("skip_rows must be >= 0")
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding: {self.encoding}") from exc
        object.__setattr__(self, "converters", MappingProxyType(dict(self.converters)))

    @property
    def strict(self) -> bool:
        return self.mode == "strict"

    @classmethod
    def from_dialect(cls, dialect: Dialect, **overrides: Any) -> "ParserConfig":
        params: dict[str, Any] = {
            "delimiter": dialect.delimiter,
            "quotechar": dialect.quotechar,
            "has_header": dialect.has_header,
            "encoding": dialect.encoding,
            "skip_rows": dialect.skip_rows,
        }
        params.update(overrides)
        return cls(**params)
