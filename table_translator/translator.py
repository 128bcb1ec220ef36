"""Translation of strings through per-language translation tables.

The :class:`Translator` looks a string up in the table of its target
language, falls back to the original string when no translation exists, and
replaces named placeholders in the result::

    translator = Translator(target="fr-fr", translations_path="translations")
    translator.translate("Welcome back, :user", {":user": username})

Tables are read lazily from ``<translations_path><language><extension>``
and cached for the lifetime of the translator. A missing table file is an
empty table, and is cached like any other.
"""

import logging
import os
import re
from pathlib import Path
from typing import Self

from table_translator.config import Config
from table_translator.core.types import (
    DEFAULT_LANGUAGE,
    LanguageTag,
    PlaceholderValues,
    TranslationTable,
    normalize_language,
)
from table_translator.infrastructure.table_sources.json_table_source import (
    JsonTableSource,
)
from table_translator.infrastructure.table_sources.table_source import (
    TableSourceInterface,
)
from table_translator.infrastructure.table_sources.table_source_factory import (
    TableSourceFactory,
)

logger = logging.getLogger(__name__)


class Translator:
    """Translate strings from a source language to a target language.

    The cache of loaded tables is owned by the instance and is not
    synchronized: callers sharing a translator across threads must guard the
    first load of each language themselves.
    """

    def __init__(
        self,
        source: str | None = None,
        target: str | None = None,
        translations_path: str | os.PathLike[str] | None = None,
        table_source: TableSourceInterface | None = None,
    ) -> None:
        """Initialize the translator.

        Args:
            source: Source language, defaults to ``en-gb``.
            target: Target language, defaults to ``en-gb``.
            translations_path: Directory of the translation table files.
            table_source: Reader of the table files (default: JSON tables).
        """
        self._source: LanguageTag = DEFAULT_LANGUAGE
        self._target: LanguageTag = DEFAULT_LANGUAGE
        self._translations_path: str | None = None
        self._table_source = (
            JsonTableSource() if table_source is None else table_source
        )
        self._cache: dict[LanguageTag, TranslationTable] = {}

        self.set_source(source)
        self.set_target(target)
        if translations_path:
            self.set_translations_path(translations_path)

    @classmethod
    def from_config(cls, config: Config) -> Self:
        """Create a translator from the application configuration."""
        return cls(
            source=config.source_language,
            target=config.target_language,
            translations_path=config.translations_path,
            table_source=TableSourceFactory.create_table_source(config.table_format),
        )

    @property
    def source(self) -> LanguageTag:
        """Return the source language."""
        return self._source

    @property
    def target(self) -> LanguageTag:
        """Return the target language."""
        return self._target

    @property
    def translations_path(self) -> str | None:
        """Return the translation tables directory, with a trailing separator."""
        return self._translations_path

    @property
    def table_source(self) -> TableSourceInterface:
        """Return the reader of the translation table files."""
        return self._table_source

    def get_source(self) -> LanguageTag:
        """Return the source language."""
        return self._source

    def set_source(self, language: str | None = None) -> LanguageTag:
        """Change the source language when one is given, return the current one."""
        if language:
            self._source = normalize_language(language)
        return self._source

    def get_target(self) -> LanguageTag:
        """Return the target language."""
        return self._target

    def set_target(self, language: str | None = None) -> LanguageTag:
        """Change the target language when one is given, return the current one."""
        if language:
            self._target = normalize_language(language)
        return self._target

    def set_translations_path(self, path: str | os.PathLike[str]) -> None:
        """Set the directory of the translation table files.

        The directory is not checked; a missing directory only results in
        empty tables at load time.
        """
        self._translations_path = os.fspath(path).rstrip(os.sep) + os.sep

    def load(self, language: LanguageTag) -> TranslationTable:
        """Return the translation table of a language.

        The language is used as given, callers are expected to pass a
        normalized tag. The table is read once, later calls return the
        cached table even if the file changed.

        Raises:
            TableFormatError: If the table file is malformed.
        """
        if language in self._cache:
            return self._cache[language]

        table_path = Path(
            f"{self._translations_path or ''}{language}{self._table_source.extension}"
        )
        logger.debug("Loading translation table %r from %s", language, table_path)
        table = self._table_source.load_table(table_path)

        self._cache[language] = table
        return table

    def get(self, string: str, target: LanguageTag | None = None) -> str:
        """Return the translation of a string, or the string itself.

        No placeholders are replaced.

        Args:
            string: Text to translate.
            target: Target language, defaults to the translator's target.
        """
        table = self.load(target or self._target)
        return table.get(string, string)

    def translate(
        self,
        string: str,
        values: PlaceholderValues | None = None,
        source: str | None = None,
    ) -> str:
        """Translate a string to the target language and replace placeholders.

        The lookup only happens when the source language differs from the
        target language. Each key of ``values`` is replaced by its value
        everywhere in the resulting string.

        Args:
            string: Text to translate.
            values: Placeholder replacements, e.g. ``{":user": "Ada"}``.
            source: Language of the text, defaults to the translator's source.
        """
        source_language = normalize_language(source) if source else self._source

        if source_language != self._target:
            string = self.get(string)

        if not values:
            return string
        return _replace_placeholders(string, values)


def _replace_placeholders(string: str, values: PlaceholderValues) -> str:
    """Replace every placeholder of ``values`` in a single pass.

    At a given position the longest matching placeholder wins and replaced
    text is not scanned again.
    """
    placeholders = sorted((key for key in values if key), key=len, reverse=True)
    if not placeholders:
        return string

    pattern = re.compile("|".join(re.escape(key) for key in placeholders))
    return pattern.sub(lambda match: str(values[match.group(0)]), string)
