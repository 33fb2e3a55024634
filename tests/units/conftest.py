"""This module contains shared fixtures for all unit tests."""

import os
from pathlib import Path

import pytest
from portfolio.models.translations import TranslationTable
from portfolio.providers.config import Config
from portfolio.repositories.fragments import FragmentRepository
from portfolio.services.site import SiteService

FRAGMENTS = {
    "header": '<header id="top"><span data-i18n="brand"></span>'
    '<a href="/language/pt" data-lang="pt">PT</a><a href="/language/en" data-lang="en">EN</a></header>',
    "footer": '<footer id="contact"><p data-i18n="contact"></p></footer>',
    "hero": '<section id="about"><h1 data-i18n="hi"></h1><p data-i18n-html="intro"></p></section>',
    "brands": '<section id="brands"><img src="a.svg" data-i18n-attr="alt:brand.logo"></section>',
    "projects": '<section id="projects"><h2 data-i18n="projects"></h2></section>',
    "case-demo": '<article class="case" id="case-demo"><h1 data-i18n="case.title"></h1></article>',
}


@pytest.fixture(scope="session", autouse=True)
def isolate_environment() -> None:
    """Unsets portfolio settings inherited from the environment for the whole session.

    This keeps unit tests independent of any local `.env` overrides.
    """
    for name in ("FRAGMENT_BASE_URL", "DEFAULT_LANGUAGE", "SUPPORTED_LANGUAGES", "PARTIALS_DIR", "TRANSLATIONS_FILE"):
        os.environ.pop(name, None)


@pytest.fixture
def table() -> TranslationTable:
    """A small translation table covering both languages.

    Returns:
        The translation table.
    """
    return TranslationTable.model_validate(
        {
            "pt": {
                "hi": "Olá",
                "brand": "Ana",
                "contact": "Fale comigo",
                "intro": "Designer <strong>de produto</strong>",
                "brand.logo": "Logotipo",
                "projects": "Projetos",
                "case.title": "Estudo de caso",
            },
            "en": {
                "hi": "Hello",
                "brand": "Ana",
                "contact": "Talk to me",
                "intro": "Product <strong>designer</strong>",
                "brand.logo": "Logo",
                "projects": "Projects",
            },
        }
    )


@pytest.fixture
def partials_dir(tmp_path: Path) -> Path:
    """Writes the test fragments to a temporary partials directory.

    Args:
        tmp_path: The pytest temporary directory.

    Returns:
        The partials directory.
    """
    directory = tmp_path / "partials"
    directory.mkdir()
    for name, markup in FRAGMENTS.items():
        (directory / f"{name}.html").write_text(markup, encoding="utf-8")
    return directory


@pytest.fixture
def config(partials_dir: Path) -> Config:
    """A configuration pointing at the temporary partials directory.

    Args:
        partials_dir: The partials directory fixture.

    Returns:
        The configuration.
    """
    return Config(PARTIALS_DIR=partials_dir, SCROLL_WAIT_TIMEOUT_SECONDS=1.0)


@pytest.fixture
def fragment_repository(config: Config) -> FragmentRepository:
    """A fragment repository reading the temporary partials directory.

    Args:
        config: The configuration fixture.

    Returns:
        The repository.
    """
    return FragmentRepository(config)


@pytest.fixture
def site_service(config: Config, table: TranslationTable, fragment_repository: FragmentRepository) -> SiteService:
    """A site service over the test table and fragments.

    Args:
        config: The configuration fixture.
        table: The translation table fixture.
        fragment_repository: The fragment repository fixture.

    Returns:
        The site service.
    """
    return SiteService(config=config, table=table, repository=fragment_repository)

