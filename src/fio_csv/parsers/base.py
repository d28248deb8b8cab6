# parsers/base.py

import io
import logging
from abc import ABC, abstractmethod
from os import PathLike
from pathlib import Path
from typing import BinaryIO, TextIO

from fio_csv.errors import IoError

from .models import Document

logger = logging.getLogger(__name__)

Source = str | bytes | TextIO | BinaryIO


class DocumentParser(ABC):
    """Shared source acquisition for all parsers.

    ``parse`` and ``parse_file`` only differ in how the stream is obtained;
    both hand it to ``_parse_stream``.
    """

    def parse(self, source: Source) -> Document:
        """Parse in-memory text or bytes, or an open text/binary stream.

        A ``str`` is treated as CSV content, never as a path; use
        ``parse_file`` for paths.
        """
        if isinstance(source, str):
            return self._parse_stream(
                io.StringIO(source), source="<string>", source_type="stream"
            )
        if isinstance(source, (bytes, bytearray)):
            return self._parse_stream(
                io.BytesIO(source), source="<bytes>", source_type="stream"
            )
        name = getattr(source, "name", None)
        return self._parse_stream(
            source,
            source=str(name) if name is not None else "<stream>",
            source_type="stream",
        )

    def parse_file(self, path: str | PathLike[str]) -> Document:
        """Open ``path`` and parse its contents.

        Raises:
            FileNotFoundError: If ``path`` does not exist.
            IoError: If the file cannot be opened or read.
            FormatError: If the contents are not valid CSV.
        """
        path = Path(path)
        logger.debug("Opening CSV file: %s", path)
        try:
            f = open(path, "rb")
        except FileNotFoundError:
            logger.error("CSV file not found: %s", path)
            raise
        except OSError as exc:
            raise IoError(f"Cannot open {path}: {exc}") from exc

        with f:
            return self._parse_stream(f, source=str(path), source_type="file")

    @abstractmethod
    def _parse_stream(
        self, stream: TextIO | BinaryIO, *, source: str, source_type: str
    ) -> Document:
        """
        Parse a stream and return a freshly built, immutable Document.

        Requirements:
        - Deterministic output for same input
        - No reference to the stream is kept in the result
        - Read failures surface as IoError, never as raw OSError
        """
        raise NotImplementedError
