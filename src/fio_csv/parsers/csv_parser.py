# parsers/csv_parser.py

import codecs
import logging
from collections.abc import Callable, Iterator
from os import PathLike
from time import monotonic
from typing import Any, BinaryIO, TextIO

from fio_csv.errors import CsvError, FormatError, IoError
from fio_csv.observability import names
from fio_csv.observability.base import MetricsHook, NoOpMetricsHook

from .base import DocumentParser, Source
from .config import ParserConfig
from .models import Document, Field, Header, Record, RowError
from .tokenizer import RawRow, iter_rows

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 64 * 1024


class CsvParser(DocumentParser):
    """
    Deterministic CSV parser.
    - Single pass over the source, reading it in chunks
    - Header names are resolved once per document
    - Strict mode raises on the first malformed row, lenient mode collects
      row errors on the Document

    Holds no per-call state, so one instance can serve several threads.
    """

    def __init__(
        self,
        config: ParserConfig = ParserConfig(),
        metrics_hook: MetricsHook = NoOpMetricsHook(),
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be > 0")
        self.config = config
        self.metrics_hook = metrics_hook
        self._chunk_size = chunk_size

    def _parse_stream(
        self, stream: TextIO | BinaryIO, *, source: str, source_type: str
    ) -> Document:
        start = monotonic()
        logger.info("Parsing CSV from %s (mode=%s)", source, self.config.mode)
        self.metrics_hook.increment(
            names.CSV_PARSE_REQUESTS_TOTAL, labels={"source": source_type}
        )
        try:
            document = self._build_document(
                self._read_chunks(stream), source=source, source_type=source_type
            )
        except CsvError as exc:
            self.metrics_hook.increment(
                names.CSV_PARSE_ERRORS_TOTAL, labels={"kind": type(exc).__name__}
            )
            raise

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.CSV_PARSE_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.CSV_ROWS_PARSED, len(document.records))
        if document.errors:
            self.metrics_hook.increment(
                names.CSV_ROW_ERRORS_TOTAL, len(document.errors)
            )
        logger.info(
            "Parsed %d records from %s (%d row errors)",
            len(document.records),
            source,
            len(document.errors),
        )
        return document

    def _read_chunks(self, stream: TextIO | BinaryIO) -> Iterator[str]:
        decoder = None
        first = True
        while True:
            try:
                chunk = stream.read(self._chunk_size)
            except UnicodeDecodeError as exc:
                raise FormatError(f"Cannot decode input: {exc.reason}") from exc
            except (OSError, ValueError) as exc:
                # ValueError covers reads from a stream closed under us.
                raise IoError(f"Failed to read CSV source: {exc}") from exc

            if isinstance(chunk, (bytes, bytearray)):
                if decoder is None:
                    decoder = codecs.getincrementaldecoder(self.config.encoding)()
                try:
                    text = decoder.decode(chunk, final=not chunk)
                except UnicodeDecodeError as exc:
                    raise FormatError(
                        f"Cannot decode input as {self.config.encoding}: {exc.reason}"
                    ) from exc
            else:
                text = chunk

            if first and text:
                first = False
                if text.startswith("\ufeff"):
                    text = text[1:]
            if text:
                yield text
            if not chunk:
                return

    def _build_document(
        self, chunks: Iterator[str], *, source: str, source_type: str
    ) -> Document:
        config = self.config
        header: Header | None = None
        expected: int | None = None
        converters: dict[int, Callable[[str], Any]] = (
            {} if config.has_header else self._resolve_converters(None)
        )
        records: list[Record] = []
        errors: list[RowError] = []
        skipped = 0

        rows = iter_rows(
            chunks, delimiter=config.delimiter, quotechar=config.quotechar
        )
        for row in rows:
            if skipped < config.skip_rows:
                skipped += 1
                logger.debug("Skipping leading row at line %d", row.line_number)
                continue

            if row.error is not None:
                self._reject(row, row.error, errors)
                continue

            if config.has_header and header is None:
                header = self._make_header(row)
                expected = len(header)
                converters = self._resolve_converters(header)
                continue

            if expected is None:
                expected = len(row.fields)

            values = row.fields
            if len(values) != expected:
                if len(values) < expected and not config.strict:
                    logger.debug(
                        "Padding row at line %d from %d to %d fields",
                        row.line_number,
                        len(values),
                        expected,
                    )
                    values = values + ("",) * (expected - len(values))
                else:
                    self._reject(
                        row,
                        f"expected {expected} fields, got {len(values)}",
                        errors,
                    )
                    continue

            try:
                fields = tuple(
                    Field(raw=v, value=converters[i](v) if i in converters else v)
                    for i, v in enumerate(values)
                )
            except (ValueError, TypeError) as exc:
                self._reject(row, f"conversion failed: {exc}", errors)
                continue

            records.append(
                Record(fields=fields, line_number=row.line_number, header=header)
            )

        if expected is not None:
            self.metrics_hook.record_gauge(names.CSV_COLUMNS, expected)

        return Document(
            records=tuple(records),
            header=header,
            errors=tuple(errors),
            metadata={
                "source_type": source_type,
                "source": source,
                "delimiter": config.delimiter,
                "mode": config.mode,
            },
        )

    def _make_header(self, row: RawRow) -> Header:
        seen: set[str] = set()
        for name in row.fields:
            if name in seen:
                raise FormatError(
                    f"duplicate header name {name!r}", line_number=row.line_number
                )
            seen.add(name)
        logger.debug("Header at line %d: %s", row.line_number, row.fields)
        return Header(names=row.fields)

    def _resolve_converters(
        self, header: Header | None
    ) -> dict[int, Callable[[str], Any]]:
        resolved: dict[int, Callable[[str], Any]] = {}
        for key, converter in self.config.converters.items():
            if isinstance(key, str):
                if header is None:
                    raise KeyError(
                        f"Converter for column '{key}' needs a header row"
                    )
                resolved[header.index_of(key)] = converter
            else:
                resolved[key] = converter
        return resolved

    def _reject(self, row: RawRow, message: str, errors: list[RowError]) -> None:
        if self.config.strict:
            raise FormatError(message, line_number=row.line_number)
        logger.warning(
            "Skipping malformed row at line %d: %s", row.line_number, message
        )
        errors.append(
            RowError(line_number=row.line_number, message=message, text=row.text)
        )


def parse(
    source: Source,
    config: ParserConfig = ParserConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Document:
    """Parse CSV text, bytes or an open stream.

    Example:
        >>> doc = parse("Tag,Qty\\nAAPL,10\\n")
        >>> doc[0].Tag
        'AAPL'
    """
    return CsvParser(config, metrics_hook).parse(source)


def parse_file(
    path: str | PathLike[str],
    config: ParserConfig = ParserConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Document:
    """Parse the CSV file at ``path``. See ``CsvParser.parse_file``."""
    return CsvParser(config, metrics_hook).parse_file(path)
