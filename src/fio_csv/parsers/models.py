# parsers/models.py

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Field:
    """A single cell: the raw text plus its converted value.

    ``value`` equals ``raw`` unless a converter is configured for the column.
    """

    raw: str
    value: Any


@dataclass(frozen=True)
class Header:
    """Column names of a document and their positions.

    Built once per document and shared by every record, so name lookups
    never copy the mapping per row.
    """

    names: tuple[str, ...]
    index: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "index",
            MappingProxyType({name: i for i, name in enumerate(self.names)}),
        )

    def __len__(self) -> int:
        return len(self.names)

    def __contains__(self, name: object) -> bool:
        return name in self.index

    def index_of(self, name: str) -> int:
        try:
            return self.index[name]
        except KeyError:
            logger.error("Column not found: %s", name)
            raise KeyError(f"Column '{name}' not found")


@dataclass(frozen=True)
class Record:
    """One logical row.

    Fields are addressable by position (``record[0]``) and, when the
    document has a header, by name (``record["Tag"]`` or ``record.Tag``).
    Indexing returns the converted value; use ``field()`` for the raw text.

    Attribute access only reaches a column when no Record attribute has the
    same name, so columns called ``values``, ``fields``, ``header``, ``get``,
    ``field``, ``line_number``, ``as_dict`` or ``raw_values`` must be read
    with ``record["name"]``.
    """

    fields: tuple[Field, ...]
    line_number: int
    header: Header | None = field(default=None, repr=False, compare=False)

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[Any]:
        return (f.value for f in self.fields)

    def __getitem__(self, key: int | str) -> Any:
        return self.field(key).value

    def __getattr__(self, name: str) -> Any:
        # Only called when normal attribute lookup fails.
        header = self.__dict__.get("header")
        if header is not None and name in header:
            return self.fields[header.index[name]].value
        raise AttributeError(
            f"{type(self).__name__!r} object has no attribute {name!r}"
        )

    def __str__(self) -> str:
        if self.header is None:
            body = ", ".join(repr(f.raw) for f in self.fields)
        else:
            body = ", ".join(
                f"{name}={f.raw!r}" for name, f in zip(self.header.names, self.fields)
            )
        return f"Record(line {self.line_number}: {body})"

    def field(self, key: int | str) -> Field:
        if isinstance(key, str):
            if self.header is None:
                raise KeyError(f"Column '{key}' not found: document has no header")
            return self.fields[self.header.index_of(key)]
        return self.fields[key]

    def get(self, name: str, default: Any = None) -> Any:
        if self.header is None or name not in self.header:
            return default
        return self.fields[self.header.index[name]].value

    @property
    def values(self) -> tuple[Any, ...]:
        return tuple(f.value for f in self.fields)

    @property
    def raw_values(self) -> tuple[str, ...]:
        return tuple(f.raw for f in self.fields)

    def as_dict(self) -> dict[str, Any]:
        if self.header is None:
            raise ValueError("Record has no header; use values instead")
        return {name: f.value for name, f in zip(self.header.names, self.fields)}


@dataclass(frozen=True)
class RowError:
    """A malformed row skipped in lenient mode."""

    line_number: int
    message: str
    text: str = ""


@dataclass(frozen=True)
class Document:
    """Result of one parse call.

    Immutable, holds no reference to the source it was read from.
    ``errors`` is always empty for strict-mode parses.
    """

    records: tuple[Record, ...]
    header: Header | None = None
    errors: tuple[RowError, ...] = ()
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __getitem__(self, index: int) -> Record:
        return self.records[index]

    @property
    def ok(self) -> bool:
        return not self.errors

    def column(self, key: int | str) -> list[Any]:
        if isinstance(key, str):
            if self.header is None:
                raise KeyError(f"Column '{key}' not found: document has no header")
            key = self.header.index_of(key)
        return [record.fields[key].value for record in self.records]
