"""Module for the TableSourceFactory class."""
# pylint: disable=unused-import
import inspect
from typing import Generator

from table_translator.core.types import TableFormat
from table_translator.exceptions import UnsupportedTableFormatError
from table_translator.infrastructure.table_sources.json_table_source import (
    JsonTableSource,  # noqa: F401
)
from table_translator.infrastructure.table_sources.table_source import (
    TableSourceInterface,
)
from table_translator.infrastructure.table_sources.yaml_table_source import (
    YamlTableSource,  # noqa: F401
)


class TableSourceFactory:  # pylint: disable=too-few-public-methods
    """A class to create a table source."""

    @staticmethod
    def __get_concrete_table_sources_recursive(
        source_cls: type[TableSourceInterface],
    ) -> Generator[type[TableSourceInterface], None, None]:
        """Get all concrete table sources recursively."""
        for subclass in source_cls.__subclasses__():
            yield from TableSourceFactory.__get_concrete_table_sources_recursive(
                subclass
            )
            if not inspect.isabstract(subclass):
                yield subclass

    @staticmethod
    def create_table_source(table_format: TableFormat | str) -> TableSourceInterface:
        """Create the table source reading tables of the given format."""
        for source_cls in TableSourceFactory.__get_concrete_table_sources_recursive(
            TableSourceInterface  # type: ignore
        ):
            source = source_cls()
            if source.table_format == str(table_format).lower():
                return source

        raise UnsupportedTableFormatError(str(table_format))
