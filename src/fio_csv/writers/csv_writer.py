# writers/csv_writer.py

import io
import logging
from collections.abc import Iterable
from time import monotonic
from typing import TextIO

from fio_csv.observability import names
from fio_csv.observability.base import MetricsHook, NoOpMetricsHook
from fio_csv.parsers.config import ParserConfig
from fio_csv.parsers.models import Document

logger = logging.getLogger(__name__)


def write_document(
    document: Document,
    stream: TextIO,
    config: ParserConfig = ParserConfig(),
    *,
    line_terminator: str = "\n",
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> int:
    """Serialize ``document`` to ``stream`` using the dialect in ``config``.

    Raw field text is written, not converted values, so parsing the output
    with the same config yields the same records.

    Returns:
        Number of data rows written (the header is not counted).
    """
    start = monotonic()
    if document.header is not None:
        stream.write(_format_row(document.header.names, config) + line_terminator)

    written = 0
    for record in document.records:
        stream.write(_format_row(record.raw_values, config) + line_terminator)
        written += 1

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.CSV_WRITE_DURATION, elapsed_ms)
    metrics_hook.increment(names.CSV_ROWS_WRITTEN, written)
    logger.debug("Wrote %d rows", written)
    return written


def to_csv_string(
    document: Document,
    config: ParserConfig = ParserConfig(),
    *,
    line_terminator: str = "\n",
) -> str:
    buf = io.StringIO()
    write_document(document, buf, config, line_terminator=line_terminator)
    return buf.getvalue()


def _format_row(values: Iterable[str], config: ParserConfig) -> str:
    values = list(values)
    # A lone empty field would read back as a blank line.
    if len(values) == 1 and values[0] == "":
        return config.quotechar * 2
    return config.delimiter.join(_quote(v, config) for v in values)


def _quote(value: str, config: ParserConfig) -> str:
    q = config.quotechar
    if (
        config.delimiter in value
        or q in value
        or "\n" in value
        or "\r" in value
    ):
        return q + value.replace(q, q + q) + q
    return value
