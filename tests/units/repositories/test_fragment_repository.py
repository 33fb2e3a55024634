"""Unit tests for the FragmentRepository."""

from unittest.mock import MagicMock

import pytest
import requests
from portfolio.exceptions.site import FragmentNotFoundError, InvalidFragmentNameError
from portfolio.providers.config import Config
from portfolio.providers.http import HttpProvider
from portfolio.repositories.fragments import FragmentRepository


def test_fetch_local(fragment_repository: FragmentRepository) -> None:
    """Tests reading a fragment from the partials directory."""
    assert 'id="about"' in fragment_repository.fetch("hero")


def test_fetch_local_missing(fragment_repository: FragmentRepository) -> None:
    """Tests that a missing fragment raises FragmentNotFoundError."""
    with pytest.raises(FragmentNotFoundError):
        fragment_repository.fetch("nothing")


@pytest.mark.parametrize("name", ["../etc/passwd", "Hero", "hero.html", "", "a/b"])
def test_fetch_rejects_invalid_names(fragment_repository: FragmentRepository, name: str) -> None:
    """Tests that names outside [a-z0-9-] are rejected before touching the disk."""
    with pytest.raises(InvalidFragmentNameError):
        fragment_repository.fetch(name)


def test_exists_and_list_names(fragment_repository: FragmentRepository) -> None:
    """Tests the local listing helpers."""
    assert fragment_repository.exists("case-demo")
    assert not fragment_repository.exists("case-unknown")
    assert not fragment_repository.exists("../hero")
    assert fragment_repository.list_names() == ["brands", "case-demo", "footer", "header", "hero", "projects"]


def test_fetch_remote() -> None:
    """Tests fetching a fragment from a remote base URL."""
    http = MagicMock(spec=HttpProvider)
    http.get.return_value = MagicMock(status_code=200, text="<p>remote</p>")
    repository = FragmentRepository(Config(FRAGMENT_BASE_URL="https://cdn.example.com/partials/"), http=http)

    assert repository.fetch("hero") == "<p>remote</p>"
    http.get.assert_called_once_with("https://cdn.example.com/partials/hero.html")


@pytest.mark.parametrize(
    "outcome",
    [MagicMock(status_code=404, text=""), requests.ConnectionError("down")],
)
def test_fetch_remote_failures(outcome: object) -> None:
    """Tests that HTTP errors and connection failures raise FragmentNotFoundError."""
    http = MagicMock(spec=HttpProvider)
    if isinstance(outcome, Exception):
        http.get.side_effect = outcome
    else:
        http.get.return_value = outcome
    repository = FragmentRepository(Config(FRAGMENT_BASE_URL="https://cdn.example.com"), http=http)

    with pytest.raises(FragmentNotFoundError):
        repository.fetch("hero")
