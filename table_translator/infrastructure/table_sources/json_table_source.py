"""Module for the JsonTableSource class."""
import json
from pathlib import Path
from typing import Any

from table_translator.core.types import TableFormat
from table_translator.exceptions import TableFormatError
from table_translator.infrastructure.table_sources.table_source import (
    TableSourceBase,
)


class JsonTableSource(TableSourceBase):
    """Translation tables stored as JSON objects."""

    @property
    def table_format(self) -> TableFormat:
        return TableFormat.JSON

    @property
    def extension(self) -> str:
        return ".json"

    def _parse(self, content: str, path: Path) -> Any:
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise TableFormatError(str(e), path=path) from e
