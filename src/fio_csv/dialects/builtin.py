import logging

from .dialect import Dialect

logger = logging.getLogger(__name__)

EXCEL = Dialect(
    name="excel",
    description="Comma separated, double-quote quoting",
)

EXCEL_TAB = Dialect(
    name="excel-tab",
    description="Tab separated, double-quote quoting",
    delimiter="\t",
)

# Fio banka exports (account statements, trade lists) from the web banking UI.
FIO = Dialect(
    name="fio",
    description="Fio banka export: semicolon separated, UTF-8 with BOM",
    delimiter=";",
    encoding="utf-8-sig",
)

BUILTIN_DIALECTS: dict[str, Dialect] = {d.name: d for d in (EXCEL, EXCEL_TAB, FIO)}


def get_dialect(name: str) -> Dialect:
    try:
        return BUILTIN_DIALECTS[name]
    except KeyError:
        logger.error("Dialect not found: %s", name)
        raise KeyError(f"Dialect '{name}' not found")
