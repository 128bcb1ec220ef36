"""Module for the TableSource interface class."""
import abc
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any

from table_translator.core.types import TableFormat, TranslationTable
from table_translator.exceptions import TableFormatError

logger = logging.getLogger(__name__)


class TableSourceInterface(abc.ABC):
    """Source of the translation table files."""

    @property
    @abc.abstractmethod
    def table_format(self) -> TableFormat:
        """Return the format handled by the table source."""

    @property
    @abc.abstractmethod
    def extension(self) -> str:
        """Return the file extension of the tables, including the dot."""

    @abc.abstractmethod
    def load_table(self, path: Path) -> TranslationTable:
        """Load the translation table stored at path.

        Returns:
            The translation table, empty when the file does not exist.

        Raises:
            TableFormatError: If the file is not a mapping of strings.
        """


class TableSourceBase(TableSourceInterface, abc.ABC):
    """Base class for file based table sources."""

    @abc.abstractmethod
    def _parse(self, content: str, path: Path) -> Any:
        """Parse the raw content of a table file.

        Raises:
            TableFormatError: If the content cannot be parsed.
        """

    def load_table(self, path: Path) -> TranslationTable:
        if not path.is_file():
            logger.debug("No translation table at %s", path)
            return MappingProxyType({})

        try:
            content = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise TableFormatError(str(e), path=path) from e

        document = self._parse(content, path)
        table = self._validate(document, path)
        logger.debug("Loaded %d translations from %s", len(table), path)
        return table

    @staticmethod
    def _validate(document: Any, path: Path) -> TranslationTable:
        """Check that the parsed document is a flat string to string mapping."""
        if document is None:
            return MappingProxyType({})

        if not isinstance(document, dict):
            raise TableFormatError(
                f"expected a mapping, got {type(document).__name__}", path=path
            )

        for key, value in document.items():
            if not isinstance(key, str):
                raise TableFormatError(f"key {key!r} is not a string", path=path)
            if not isinstance(value, str):
                raise TableFormatError(
                    f"translation of {key!r} is not a string", path=path
                )

        return MappingProxyType(dict(document))
