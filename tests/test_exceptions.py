"""Tests for the custom exception hierarchy."""

from pathlib import Path

import pytest

from table_translator.exceptions import (
    TableFormatError,
    TableTranslatorError,
    UnsupportedTableFormatError,
)


@pytest.mark.parametrize(
    "exception",
    [
        TableFormatError("not a mapping", path=Path("/tmp/fr-fr.json")),
        UnsupportedTableFormatError("xml"),
    ],
    ids=[
        "TableFormatError",
        "UnsupportedTableFormatError",
    ],
)
def test_all_inherit_from_base(exception: TableTranslatorError) -> None:
    """Every custom exception is a TableTranslatorError."""
    assert isinstance(exception, TableTranslatorError)


class TestTableFormatError:
    """Tests for TableFormatError."""

    def test_message_includes_path_and_reason(self) -> None:
        """Error message contains the table path and the reason."""
        path = Path("/srv/translations/fr-fr.json")
        error = TableFormatError("expected a mapping, got list", path=path)
        assert str(path) in str(error)
        assert "expected a mapping, got list" in str(error)

    def test_path_attribute(self) -> None:
        """The path attribute stores the table path."""
        path = Path("/srv/translations/fr-fr.json")
        error = TableFormatError("bad table", path=path)
        assert error.path == path


def test_unsupported_table_format_error_attribute() -> None:
    """The table_format attribute stores the requested format."""
    error = UnsupportedTableFormatError("xml")
    assert error.table_format == "xml"
    assert "'xml'" in str(error)
