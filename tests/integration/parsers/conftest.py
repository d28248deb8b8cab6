from pathlib import Path

import pytest

from fio_csv.dialects import get_dialect
from fio_csv.parsers.config import ParserConfig
from fio_csv.parsers.csv_parser import CsvParser
from fio_csv.parsers.models import Document

TRADES_HEADER = [
    "Datum obchodu",
    "Směr",
    "Symbol",
    "Cena",
    "Počet",
    "Měna",
    "Objem v CZK",
    "Poplatky v CZK",
    "Tag",
]

TRADES_ROWS = [
    [
        "02.01.2024 09:15",
        "Nákup",
        "CEZ",
        "1010,50",
        "10",
        "CZK",
        "10105,00",
        "40,00",
        "",
    ],
    [
        "03.01.2024 10:02",
        "Prodej",
        "KOMB",
        "780,00",
        "5",
        "CZK",
        "3900,00",
        "40,00",
        "swing",
    ],
    [
        "05.01.2024 15:40",
        "Nákup",
        "AAPL",
        "185,20",
        "2",
        "USD",
        "8270,15",
        "60,00",
        'note "A; B"',
    ],
]


def _create_trades_csv(path: Path) -> None:
    """Fio-style export: BOM, semicolons, CRLF, one field needing quotes."""

    def quote(value: str) -> str:
        if ";" in value or '"' in value:
            return '"' + value.replace('"', '""') + '"'
        return value

    lines = [";".join(TRADES_HEADER)]
    lines += [";".join(quote(v) for v in row) for row in TRADES_ROWS]
    path.write_bytes(("\r\n".join(lines) + "\r\n\r\n").encode("utf-8-sig"))


def _create_malformed_csv(path: Path) -> None:
    path.write_text(
        "Tag,Qty\n"
        "ok,1\n"
        "too,many,fields\n"
        "short\n"
        'broken,"never closed\n'
        "lost,2\n",
        encoding="utf-8",
    )


@pytest.fixture(scope="module")
def csv_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Create all test CSV files once per module."""
    dir_path: Path = tmp_path_factory.mktemp("csv")

    _create_trades_csv(dir_path / "Obchody.csv")
    _create_malformed_csv(dir_path / "malformed.csv")
    (dir_path / "empty.csv").write_bytes(b"")
    (dir_path / "subdir").mkdir()

    return dir_path


@pytest.fixture(scope="module")
def fio_config() -> ParserConfig:
    return ParserConfig.from_dialect(get_dialect("fio"))


@pytest.fixture(scope="module")
def parsed_trades(csv_dir: Path, fio_config: ParserConfig) -> Document:
    """Parse the trades export once, reuse across tests."""
    return CsvParser(fio_config).parse_file(csv_dir / "Obchody.csv")


@pytest.fixture(scope="module")
def trades_header() -> list[str]:
    return list(TRADES_HEADER)


@pytest.fixture(scope="module")
def trades_rows() -> list[list[str]]:
    return [list(row) for row in TRADES_ROWS]
