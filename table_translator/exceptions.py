"""Custom exception hierarchy for table translator."""

from pathlib import Path


class TableTranslatorError(Exception):
    """Base exception for all table translator errors."""


class TableFormatError(TableTranslatorError):
    """A translation table file is malformed or is not a string mapping."""

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(f"Invalid translation table {path}: {message}")
        self.path = path


class UnsupportedTableFormatError(TableTranslatorError):
    """No table source can handle this table format."""

    def __init__(self, table_format: str) -> None:
        super().__init__(f"Unsupported table format: {table_format!r}")
        self.table_format = table_format
