"""This module sets up a centralized, context-aware logging system.

It provides a `LoggingProvider` singleton that configures and dispenses a
logger. The `ContextualFilter` reads a context variable to inject a
`correlation_id` into every log message, so every line written while a
request is being served can be traced back to that request.
"""

from __future__ import annotations

import sys
from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar
from logging import Filter, Formatter, Logger, LogRecord, StreamHandler, _nameToLevel, getLogger

from portfolio.providers.config import ConfigProvider

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


class ContextualFilter(Filter):
    """A logging filter that makes a correlation ID available to the log formatter."""

    def filter(self, record: LogRecord) -> bool:
        """Adds the correlation ID of the current context to the log record.

        Args:
            record: The log record to be filtered.

        Returns:
            Always True to ensure the log record is processed.
        """
        record.correlation_id = _correlation_id.get() or "-"
        return True


class LoggingProvider:
    """Provides a configured logger instance for the application.

    This class uses a Singleton pattern to ensure that there is only one
    instance of the logger throughout the application's lifecycle, configured
    once based on settings from the config provider.
    """

    _instance: LoggingProvider | None = None
    _logger: Logger | None = None
    _is_configured: bool = False

    def __new__(cls) -> LoggingProvider:
        """Implements the Singleton pattern.

        Returns:
            The singleton instance of the LoggingProvider.
        """
        if not cls._instance:  # pragma: no cover
            cls._instance = super().__new__(cls)
        return cls._instance

    def _configure_logger(self, level_override: str | None = None) -> Logger:
        """Private method to configure the logger. This is called only once.

        Args:
            level_override: A log level name that takes precedence over the config.

        Returns:
            The configured logger instance.
        """
        logger = getLogger("portfolio")

        if self._is_configured:  # pragma: no cover
            return logger

        log_level_str = level_override or ConfigProvider.get_config().LOG_LEVEL
        numeric_level = _nameToLevel.get(log_level_str.upper(), _nameToLevel["INFO"])
        logger.setLevel(numeric_level)

        if not logger.handlers:
            handler = StreamHandler(sys.stderr)
            formatter = Formatter(
                "%(asctime)s - %(name)s - [%(levelname)s] [%(correlation_id)s] - " "%(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
            handler.setFormatter(formatter)
            handler.addFilter(ContextualFilter())
            logger.addHandler(handler)

        self._is_configured = True
        logger.debug(f"Logger configured with level: {log_level_str}")
        return logger

    def get_logger(self, level_override: str | None = None) -> Logger:
        """Returns the configured logger instance.

        The logger is configured lazily on first use so that importing a
        module never touches the environment.

        Args:
            level_override: Optional log level applied when the logger is
                first configured, or immediately if it already exists.

        Returns:
            The configured logger instance.
        """
        if not self._logger:
            self._logger = self._configure_logger(level_override)
        elif level_override:
            self._logger.setLevel(_nameToLevel.get(level_override.upper(), self._logger.level))
        return self._logger

    @contextmanager
    def set_correlation_id(self, correlation_id: str) -> Generator[None, None, None]:
        """A context manager to set and automatically clear the correlation ID.

        Args:
            correlation_id: The correlation ID to set for the context.

        Yields:
            None.
        """
        token = _correlation_id.set(correlation_id)
        try:
            yield
        finally:
            _correlation_id.reset(token)
