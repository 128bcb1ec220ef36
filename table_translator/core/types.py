"""Module containing custom types for the table_translator package."""
import enum
from typing import Mapping

LanguageTag = str
"""Language identifier such as ``en-gb``, normalized by :func:`normalize_language`."""

TranslationTable = Mapping[str, str]
"""Mapping from an original string to its translation."""

PlaceholderValues = Mapping[str, str]
"""Mapping from a placeholder token (e.g. ``:user``) to its replacement."""

DEFAULT_LANGUAGE: LanguageTag = "en-gb"


class TableFormat(enum.StrEnum):
    """File format of the translation tables."""

    JSON = enum.auto()
    YAML = enum.auto()


def normalize_language(language: str) -> LanguageTag:
    """Return the normalized form of a language tag.

    The tag is lowercased and spaces and underscores become hyphens, so
    ``"EN_US"``, ``"En Us"`` and ``"en-us"`` all normalize to ``"en-us"``.
    """
    return language.replace(" ", "-").replace("_", "-").lower()
