# src/fio_csv/errors.py


class CsvError(Exception):
    """Base class for every failure raised while reading CSV input."""


class FormatError(CsvError):
    """Structurally invalid CSV.

    Raised for unterminated quotes, stray characters after a closing quote,
    field counts that disagree with the header, duplicate header names and
    undecodable input.
    """

    def __init__(self, message: str, *, line_number: int | None = None) -> None:
        self.message = message
        self.line_number = line_number
        if line_number is not None:
            super().__init__(f"line {line_number}: {message}")
        else:
            super().__init__(message)


class IoError(CsvError):
    """The source could not be read (permission denied, closed stream, ...)."""
