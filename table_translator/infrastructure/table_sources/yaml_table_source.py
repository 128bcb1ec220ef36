"""Module for the YamlTableSource class."""
from pathlib import Path
from typing import Any

import yaml

from table_translator.core.types import TableFormat
from table_translator.exceptions import TableFormatError
from table_translator.infrastructure.table_sources.table_source import (
    TableSourceBase,
)


class YamlTableSource(TableSourceBase):
    """Translation tables stored as YAML mappings."""

    @property
    def table_format(self) -> TableFormat:
        return TableFormat.YAML

    @property
    def extension(self) -> str:
        return ".yaml"

    def _parse(self, content: str, path: Path) -> Any:
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise TableFormatError(str(e), path=path) from e
