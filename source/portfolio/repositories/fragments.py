"""This module provides the repository that fetches fragment markup."""

import re
from pathlib import Path

import requests
from portfolio.exceptions.site import FragmentNotFoundError, InvalidFragmentNameError
from portfolio.providers.config import Config, ConfigProvider
from portfolio.providers.http import HttpProvider
from portfolio.providers.logging import Logger, LoggingProvider

FRAGMENT_NAME_PATTERN = re.compile(r"^[a-z0-9-]+$")


class FragmentRepository:
    """Fetches named HTML fragments from the partials directory or a remote base URL."""

    config: Config
    logger: Logger
    http: HttpProvider | None

    def __init__(self, config: Config | None = None, http: HttpProvider | None = None) -> None:
        """Initializes the repository.

        Args:
            config: The configuration to use. A fresh one is loaded if omitted.
            http: The HTTP provider used when `FRAGMENT_BASE_URL` is set.
        """
        self.config = config or ConfigProvider.get_config()
        self.logger = LoggingProvider().get_logger()
        self.http = http
        if self.config.FRAGMENT_BASE_URL and self.http is None:
            self.http = HttpProvider(self.config)

    @staticmethod
    def validate_name(name: str) -> str:
        """Checks that a fragment name is safe to turn into a path.

        Args:
            name: The fragment name.

        Returns:
            The same name.

        Raises:
            InvalidFragmentNameError: If the name contains anything but
                lowercase letters, digits and hyphens.
        """
        if not FRAGMENT_NAME_PATTERN.match(name):
            raise InvalidFragmentNameError(f"Invalid fragment name: {name!r}")
        return name

    def fetch(self, name: str) -> str:
        """Fetches the markup of a fragment.

        Args:
            name: The fragment name, without extension.

        Returns:
            The fragment markup.

        Raises:
            InvalidFragmentNameError: If the name is not a valid fragment name.
            FragmentNotFoundError: If the fragment cannot be fetched.
        """
        self.validate_name(name)
        if self.config.FRAGMENT_BASE_URL:
            return self._fetch_remote(name)
        return self._fetch_local(name)

    def exists(self, name: str) -> bool:
        """Checks whether a local fragment file exists.

        Args:
            name: The fragment name.

        Returns:
            True if the fragment is available locally.
        """
        if not FRAGMENT_NAME_PATTERN.match(name):
            return False
        return (Path(self.config.PARTIALS_DIR) / f"{name}.html").is_file()

    def list_names(self) -> list[str]:
        """Lists the fragments available in the partials directory.

        Returns:
            The sorted fragment names.
        """
        return sorted(path.stem for path in Path(self.config.PARTIALS_DIR).glob("*.html"))

    def _fetch_local(self, name: str) -> str:
        path = Path(self.config.PARTIALS_DIR) / f"{name}.html"
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise FragmentNotFoundError(name) from e
        except OSError as e:
            raise FragmentNotFoundError(name, f"could not be read: {e}") from e

    def _fetch_remote(self, name: str) -> str:
        assert self.http is not None  # nosec B101
        url = f"{self.config.FRAGMENT_BASE_URL.rstrip('/')}/{name}.html"
        try:
            response = self.http.get(url)
        except requests.RequestException as e:
            raise FragmentNotFoundError(name, f"could not be fetched: {e}") from e
        if response.status_code != 200:
            raise FragmentNotFoundError(name, f"returned HTTP {response.status_code}")
        return response.text
