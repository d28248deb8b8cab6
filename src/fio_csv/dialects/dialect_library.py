import logging
from pathlib import Path

import yaml

from .builtin import BUILTIN_DIALECTS
from .dialect import Dialect

logger = logging.getLogger(__name__)


class DialectLibrary:
    """Dialects loaded from a directory of ``*.yaml`` files.

    Files override built-in dialects of the same name.
    """

    def __init__(self, directory: str | Path, include_builtins: bool = True) -> None:
        self._dialects: dict[str, Dialect] = (
            dict(BUILTIN_DIALECTS) if include_builtins else {}
        )
        logger.info("Initializing DialectLibrary from directory: %s", directory)
        self._load_all(Path(directory))
        logger.info("Loaded %d dialects", len(self._dialects))

    def get(self, name: str) -> Dialect:
        logger.debug("Getting dialect: %s", name)
        try:
            return self._dialects[name]
        except KeyError:
            logger.error("Dialect not found: %s", name)
            raise KeyError(f"Dialect '{name}' not found")

    def list(self) -> list[str]:
        return sorted(self._dialects)

    def _load_all(self, directory: Path) -> None:
        for file_path in sorted(directory.glob("*.yaml")):
            dialect = self._load_dialect(file_path)
            self._dialects[dialect.name] = dialect
            logger.debug("Loaded dialect: %s from %s", dialect.name, file_path)

    def _load_dialect(self, file_path: Path) -> Dialect:
        with open(file_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return Dialect(**data)
