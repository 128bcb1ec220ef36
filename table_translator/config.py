"""Module for the Config class."""
import logging
import logging.config
from pathlib import Path
from typing import Any

import yaml

from table_translator.core.types import (
    DEFAULT_LANGUAGE,
    LanguageTag,
    TableFormat,
    normalize_language,
)
from table_translator.exceptions import UnsupportedTableFormatError

logger = logging.getLogger(__name__)

LOG_DIRECTORY_NAME = "table-translator"


class Config:
    """A class to store the configuration."""

    def __init__(self) -> None:
        # Language config
        self.source_language: LanguageTag = DEFAULT_LANGUAGE
        self.target_language: LanguageTag = DEFAULT_LANGUAGE
        # Table config
        self.translations_path: Path | None = None
        self.table_format = TableFormat.JSON
        # Logging config, a logging.config.dictConfig mapping
        self.logging_config: dict[str, Any] | None = None

    def __parse_yaml(self, yaml_path: Path) -> None:
        """Parse a YAML configuration file."""
        with open(yaml_path, encoding="utf-8") as file:
            config = yaml.safe_load(file) or {}

        if not isinstance(config, dict):
            raise ValueError(f"Configuration file {yaml_path} is not a mapping")

        if source_language := config.get("source_language"):
            self.source_language = normalize_language(source_language)
        if target_language := config.get("target_language"):
            self.target_language = normalize_language(target_language)
        if translations_path := config.get("translations_path"):
            self.translations_path = Path(translations_path)
        if table_format := config.get("table_format"):
            self.table_format = self.__parse_table_format(table_format)
        if "logging" in config:
            self.logging_config = config["logging"]

    @staticmethod
    def __parse_table_format(value: str) -> TableFormat:
        """Convert a configured table format to a TableFormat."""
        try:
            return TableFormat(str(value).lower())
        except ValueError as e:
            raise UnsupportedTableFormatError(str(value)) from e

    def parse(self, config_path: Path) -> None:
        """Parse a configuration file."""
        if config_path.suffix == ".yaml":
            self.__parse_yaml(config_path)
        else:
            raise ValueError(f"Unsupported file format: '{config_path.suffix}'")

    def setup_logging(self) -> None:
        """Configure logging from the configuration.

        Without a logging configuration, logs go to a file in
        ``~/.local/share/table-translator``. An invalid configuration falls
        back to a basic console configuration.
        """
        if self.logging_config is None:
            log_directory = Path.home() / ".local" / "share" / LOG_DIRECTORY_NAME
            log_directory.mkdir(parents=True, exist_ok=True)
            logging.basicConfig(
                filename=log_directory / f"{LOG_DIRECTORY_NAME}.log",
                level=logging.INFO,
                format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            )
            return

        try:
            logging.config.dictConfig(self.logging_config)
        except (ValueError, TypeError, AttributeError, ImportError) as e:
            logging.basicConfig(level=logging.INFO)
            logger.warning("Invalid logging configuration, using defaults: %s", e)
