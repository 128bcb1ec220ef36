"""Lightweight string translation through per-language translation tables."""

from table_translator.core.types import (
    DEFAULT_LANGUAGE,
    LanguageTag,
    PlaceholderValues,
    TableFormat,
    TranslationTable,
    normalize_language,
)
from table_translator.exceptions import (
    TableFormatError,
    TableTranslatorError,
    UnsupportedTableFormatError,
)
from table_translator.translator import Translator

__all__ = [
    "DEFAULT_LANGUAGE",
    "LanguageTag",
    "PlaceholderValues",
    "TableFormat",
    "TableFormatError",
    "TableTranslatorError",
    "TranslationTable",
    "Translator",
    "UnsupportedTableFormatError",
    "normalize_language",
]
