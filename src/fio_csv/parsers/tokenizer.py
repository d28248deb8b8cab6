# parsers/tokenizer.py

"""Quote-aware splitting of a character stream into raw rows.

Rows end at ``\\n``, ``\\r\\n`` or a lone ``\\r`` outside quotes. Inside a
quoted field delimiters and line breaks are literal and a doubled quote
stands for one quote character. Blank lines never produce a row.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

# Tokenizer states
_START_FIELD = 0
_IN_FIELD = 1
_IN_QUOTED = 2
_QUOTE_IN_QUOTED = 3


@dataclass(frozen=True)
class RawRow:
    fields: tuple[str, ...]
    line_number: int
    text: str
    error: str | None = None


def iter_rows(
    chunks: Iterable[str],
    *,
    delimiter: str = ",",
    quotechar: str = '"',
) -> Iterator[RawRow]:
    """Yield one ``RawRow`` per logical row of ``chunks``.

    Malformed rows are still yielded, with ``error`` set; deciding whether
    that aborts the parse is up to the caller.
    """
    state = _START_FIELD
    fields: list[str] = []
    buf: list[str] = []
    raw: list[str] = []
    quoted = False
    error: str | None = None

    line = 1
    row_line = 1
    prev = ""
    skip_lf = False

    def finish_row() -> RawRow | None:
        fields.append("".join(buf))
        row = None
        # A line holding nothing at all is blank; `""` is a real empty field.
        if quoted or len(fields) > 1 or fields[0]:
            row = RawRow(
                fields=tuple(fields),
                line_number=row_line,
                text="".join(raw),
                error=error,
            )
        fields.clear()
        buf.clear()
        raw.clear()
        return row

    for chunk in chunks:
        for ch in chunk:
            if ch == "\n":
                if prev != "\r":
                    line += 1
            elif ch == "\r":
                line += 1
            prev = ch

            if skip_lf:
                skip_lf = False
                if ch == "\n":
                    continue

            if state == _IN_QUOTED:
                raw.append(ch)
                if ch == quotechar:
                    state = _QUOTE_IN_QUOTED
                else:
                    buf.append(ch)
                continue

            if ch == "\r" or ch == "\n":
                row = finish_row()
                if row is not None:
                    yield row
                state = _START_FIELD
                quoted = False
                error = None
                row_line = line
                skip_lf = ch == "\r"
                continue

            raw.append(ch)
            if ch == delimiter:
                fields.append("".join(buf))
                buf.clear()
                state = _START_FIELD
            elif state == _START_FIELD and ch == quotechar:
                state = _IN_QUOTED
                quoted = True
            elif state == _QUOTE_IN_QUOTED:
                if ch == quotechar:
                    buf.append(ch)
                    state = _IN_QUOTED
                else:
                    if error is None:
                        error = f"unexpected character {ch!r} after closing quote"
                    buf.append(ch)
                    state = _IN_FIELD
            else:
                buf.append(ch)
                state = _IN_FIELD

    if raw:
        if state == _IN_QUOTED and error is None:
            error = "unterminated quoted field"
        row = finish_row()
        if row is not None:
            yield row
