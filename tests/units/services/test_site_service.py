"""Unit tests for the SiteService."""

import asyncio

import pytest
from bs4 import BeautifulSoup
from portfolio.exceptions.site import FragmentNotFoundError, InvalidFragmentNameError, UnknownViewError
from portfolio.models.enums import NavigationAction, SlotMode
from portfolio.providers.config import Config
from portfolio.providers.preferences import PreferenceStore
from portfolio.services.site import SiteService


def test_resolve_language_falls_back_to_default(site_service: SiteService) -> None:
    """Tests that unknown or absent languages resolve to the default."""
    assert site_service.resolve_language("en") == "en"
    assert site_service.resolve_language("fr") == "pt"
    assert site_service.resolve_language(None) == "pt"


def test_views_lists_home_and_cases(site_service: SiteService) -> None:
    """Tests that one view exists per case fragment."""
    assert site_service.views() == ["home", "case:demo"]


def test_get_view_case_replaces_content(site_service: SiteService) -> None:
    """Tests that a case view fills the content region from the inside."""
    view = site_service.get_view("case:demo")

    content_slot = next(slot for slot in view.slots if slot.placeholder == "content")
    assert content_slot.fragment == "case-demo"
    assert content_slot.mode == SlotMode.INNER


@pytest.mark.parametrize("name", ["case:unknown", "about", "case:"])
def test_get_view_unknown_raises(site_service: SiteService, name: str) -> None:
    """Tests that unknown views are rejected."""
    with pytest.raises(UnknownViewError):
        site_service.get_view(name)


def test_render_home_is_composed_and_translated(site_service: SiteService) -> None:
    """Tests that the home view contains every fragment translated to the language."""
    page = asyncio.run(site_service.render("home", site_service.context_for("en")))
    soup = BeautifulSoup(page.html, "html.parser")

    assert page.failed_fragments == []
    assert soup.html["lang"] == "en"
    assert soup.find(id="about").h1.get_text() == "Hello"
    assert soup.find(id="contact").get_text(strip=True) == "Talk to me"
    assert soup.find(id="brands").img["alt"] == "Logo"
    assert soup.find(id="hero-placeholder") is None
    assert soup.find("a", attrs={"data-lang": "en"})["aria-current"] == "true"
    assert not soup.find("a", attrs={"data-lang": "pt"}).has_attr("aria-current")


def test_render_case_view(site_service: SiteService) -> None:
    """Tests that a case view replaces the home sections with the case fragment."""
    page = asyncio.run(site_service.render("case:demo", site_service.context_for("pt")))
    soup = BeautifulSoup(page.html, "html.parser")

    assert soup.find(id="case-demo").h1.get_text() == "Estudo de caso"
    assert soup.find(id="about") is None
    assert soup.body["data-view"] == "case:demo"


def test_render_resolves_pending_scroll(site_service: SiteService, config: Config) -> None:
    """Tests that a pending target present after loading is marked and consumed."""
    preferences = PreferenceStore(cookies={config.SCROLL_COOKIE_NAME: "projects"}, config=config)

    page = asyncio.run(site_service.render("home", site_service.context_for("pt"), preferences))
    soup = BeautifulSoup(page.html, "html.parser")

    assert page.scroll_target == "projects"
    assert soup.body["data-scroll-target"] == "projects"
    assert preferences.get_pending_scroll() is None


def test_render_ignores_pending_scroll_absent_from_view(site_service: SiteService, config: Config) -> None:
    """Tests that a pending target the view does not contain is dropped."""
    preferences = PreferenceStore(cookies={config.SCROLL_COOKIE_NAME: "projects"}, config=config)

    page = asyncio.run(site_service.render("case:demo", site_service.context_for("pt"), preferences))

    assert page.scroll_target is None
    assert "data-scroll-target" not in page.html


def test_render_reports_failed_fragments(site_service: SiteService, config: Config) -> None:
    """Tests that a missing fragment leaves its placeholder and is reported."""
    (config.PARTIALS_DIR / "brands.html").unlink()

    page = asyncio.run(site_service.render("home", site_service.context_for("pt")))

    assert page.failed_fragments == ["brands"]
    assert 'id="brands-placeholder"' in page.html


def test_render_fragment_translates(site_service: SiteService) -> None:
    """Tests rendering a single fragment for partial swaps."""
    html = asyncio.run(site_service.render_fragment("hero", site_service.context_for("pt")))

    assert "Olá" in html
    assert "<strong>de produto</strong>" in html


def test_render_fragment_errors(site_service: SiteService) -> None:
    """Tests that unknown and invalid fragment names raise."""
    context = site_service.context_for("pt")

    with pytest.raises(FragmentNotFoundError):
        asyncio.run(site_service.render_fragment("nothing", context))
    with pytest.raises(InvalidFragmentNameError):
        asyncio.run(site_service.render_fragment("../secrets", context))


def test_navigate_from_home_scrolls(site_service: SiteService, config: Config) -> None:
    """Tests that navigating to a home section from the home view scrolls."""
    preferences = PreferenceStore(cookies={}, config=config)

    outcome = asyncio.run(site_service.navigate("home", "projects", site_service.context_for("pt"), preferences))

    assert outcome.action == NavigationAction.SCROLL


def test_navigate_from_case_reloads(site_service: SiteService, config: Config) -> None:
    """Tests that navigating to a home section from a case view reloads once."""
    preferences = PreferenceStore(cookies={}, config=config)

    outcome = asyncio.run(site_service.navigate("case:demo", "projects", site_service.context_for("pt"), preferences))

    assert outcome.action == NavigationAction.RELOAD
    assert preferences.get_pending_scroll() == "projects"


def test_missing_translations(site_service: SiteService) -> None:
    """Tests that keys used in markup but absent from a language are reported."""
    missing = site_service.missing_translations()

    assert "case.title" in missing["en"]
    assert "pt" not in missing or "case.title" not in missing["pt"]
