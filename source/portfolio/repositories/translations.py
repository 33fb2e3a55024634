"""This module provides the repository that loads the translation table."""

import json
from pathlib import Path

from portfolio.exceptions.site import TranslationLoadError
from portfolio.models.translations import TranslationTable
from portfolio.providers.config import Config, ConfigProvider
from portfolio.providers.logging import Logger, LoggingProvider
from pydantic import ValidationError


class TranslationRepository:
    """Reads the translation table from its JSON data file."""

    config: Config
    logger: Logger

    def __init__(self, config: Config | None = None) -> None:
        """Initializes the repository.

        Args:
            config: The configuration to use. A fresh one is loaded if omitted.
        """
        self.config = config or ConfigProvider.get_config()
        self.logger = LoggingProvider().get_logger()

    def load(self, path: Path | None = None) -> TranslationTable:
        """Loads and validates the translation table.

        Args:
            path: The JSON file to read. Defaults to `TRANSLATIONS_FILE`.

        Returns:
            The validated translation table.

        Raises:
            TranslationLoadError: If the file is missing, is not valid JSON,
                or does not have the `{language: {key: string}}` shape.
        """
        path = path or self.config.TRANSLATIONS_FILE
        try:
            raw = json.loads(Path(path).read_text(encoding="utf-8"))
            table = TranslationTable.model_validate(raw)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            self.logger.error(f"Could not load translations from {path}: {e}", exc_info=True)
            raise TranslationLoadError(f"Could not load translations from {path}") from e

        unsupported = set(self.config.SUPPORTED_LANGUAGES) - set(table.languages)
        if unsupported:
            self.logger.warning(f"Translation table has no entries for: {', '.join(sorted(unsupported))}")
        self.logger.info(f"Loaded translations for {len(table.languages)} languages from {path}")
        return table
