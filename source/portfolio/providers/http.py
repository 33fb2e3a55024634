"""This module provides a centralized HTTP client for fetching remote fragments."""

from typing import Any

import requests
from portfolio.providers.config import Config, ConfigProvider
from portfolio.providers.logging import Logger, LoggingProvider
from requests.exceptions import ConnectTimeout, ReadTimeout
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_random_exponential


class HttpProvider:
    """A centralized HTTP client that manages a requests.Session."""

    _session: requests.Session | None = None
    _config: Config
    _logger: Logger

    def __init__(self, config: Config | None = None) -> None:
        """Initializes the HttpProvider.

        Args:
            config: The configuration to use. A fresh one is loaded if omitted.
        """
        self._config = config or ConfigProvider.get_config()
        self._logger = LoggingProvider().get_logger()

    def _get_session(self) -> requests.Session:
        """Initializes and returns a requests.Session object.

        The session is configured to ignore system-level proxy settings by
        setting `trust_env` to `False`.

        Returns:
            A configured `requests.Session` instance.
        """
        if self._session is None:
            self._session = requests.Session()
            self._session.trust_env = False
            self._session.headers.update({"Accept": "text/html", "Connection": "close"})
        return self._session

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_random_exponential(multiplier=1, max=10),
        retry=(retry_if_exception_type(ConnectTimeout) | retry_if_exception_type(ReadTimeout)),
        reraise=True,
    )
    def get(self, url: str, **kwargs: Any) -> requests.Response:
        """Performs a GET request with a retry mechanism on timeouts.

        Args:
            url: The URL to request.
            **kwargs: Additional keyword arguments to pass to requests.get.

        Returns:
            The requests.Response object.
        """
        session = self._get_session()
        kwargs.setdefault("timeout", self._config.HTTP_TIMEOUT_SECONDS)
        self._logger.debug(f"Fetching URL: {url}")
        response = session.get(url, **kwargs)
        self._logger.debug(f"Request to {response.url} completed with status: {response.status_code}")
        return response

    def close(self) -> None:
        """Closes the session."""
        if self._session:
            self._session.close()
            self._session = None
