"""This module provides the service that composes complete views of the site."""

import asyncio
from functools import partial
from pathlib import Path

from bs4 import BeautifulSoup
from jinja2 import Environment, FileSystemLoader, select_autoescape
from portfolio.exceptions.site import UnknownViewError
from portfolio.models.enums import SlotMode
from portfolio.models.translations import TranslationTable
from portfolio.models.views import FragmentSlot, NavigationOutcome, RenderContext, RenderedPage, ViewSpec
from portfolio.providers.config import Config, ConfigProvider
from portfolio.providers.logging import Logger, LoggingProvider
from portfolio.providers.preferences import PreferenceStore
from portfolio.repositories.fragments import FRAGMENT_NAME_PATTERN, FragmentRepository
from portfolio.repositories.translations import TranslationRepository
from portfolio.services.fragments import FragmentLoader
from portfolio.services.navigation import NavigationHelper
from portfolio.services.translation import TranslationApplier

TEMPLATES_PATH = Path(__file__).resolve().parent.parent / "web" / "templates"

HOME_VIEW = "home"
CASE_VIEW_PREFIX = "case:"
CASE_FRAGMENT_PREFIX = "case-"

_FRAME_SLOTS = [
    FragmentSlot(placeholder="header-placeholder", fragment="header"),
    FragmentSlot(placeholder="footer-placeholder", fragment="footer"),
]


class SiteService:
    """Composes, translates and navigates the views of the portfolio."""

    config: Config
    logger: Logger
    table: TranslationTable
    repository: FragmentRepository
    loader: FragmentLoader
    applier: TranslationApplier
    navigation: NavigationHelper

    def __init__(
        self,
        config: Config | None = None,
        table: TranslationTable | None = None,
        repository: FragmentRepository | None = None,
    ) -> None:
        """Initializes the service and loads the translation table.

        Args:
            config: The configuration to use. A fresh one is loaded if omitted.
            table: A preloaded translation table. Read from disk if omitted.
            repository: The fragment source. Built from the config if omitted.
        """
        self.config = config or ConfigProvider.get_config()
        self.logger = LoggingProvider().get_logger()
        self.table = table or TranslationRepository(self.config).load()
        self.repository = repository or FragmentRepository(self.config)
        self.loader = FragmentLoader(self.repository)
        self.applier = TranslationApplier()
        self.navigation = NavigationHelper(self.config)
        self.environment = Environment(
            loader=FileSystemLoader(TEMPLATES_PATH),
            autoescape=select_autoescape(["html"]),
        )

    def resolve_language(self, requested: str | None) -> str:
        """Picks the language to render with.

        Args:
            requested: The language asked for, usually from the cookie.

        Returns:
            The requested language if it is supported, otherwise the default.
        """
        if requested and requested in self.config.SUPPORTED_LANGUAGES and self.table.supports(requested):
            return requested
        return self.config.DEFAULT_LANGUAGE

    def context_for(self, requested: str | None) -> RenderContext:
        """Builds the render context for a requested language.

        Args:
            requested: The language asked for.

        Returns:
            A render context with a supported language.
        """
        return RenderContext(language=self.resolve_language(requested), table=self.table)

    def case_slugs(self) -> list[str]:
        """Lists the case pages available as fragments.

        Returns:
            The sorted case slugs.
        """
        return [
            name.removeprefix(CASE_FRAGMENT_PREFIX)
            for name in self.repository.list_names()
            if name.startswith(CASE_FRAGMENT_PREFIX)
        ]

    def views(self) -> list[str]:
        """Lists every view that can be rendered.

        Returns:
            The home view followed by one view per case page.
        """
        return [HOME_VIEW, *(f"{CASE_VIEW_PREFIX}{slug}" for slug in self.case_slugs())]

    def get_view(self, name: str) -> ViewSpec:
        """Returns the slot arrangement of a view.

        The home view fills the hero, brands and projects placeholders of the
        content region. A case view replaces the whole content region with
        its case fragment.

        Args:
            name: ``"home"`` or ``"case:<slug>"``.

        Returns:
            The slot arrangement of the view.

        Raises:
            UnknownViewError: If the name matches no view.
        """
        if name == HOME_VIEW:
            return ViewSpec(
                name=HOME_VIEW,
                slots=[
                    *_FRAME_SLOTS,
                    FragmentSlot(placeholder="hero-placeholder", fragment="hero"),
                    FragmentSlot(placeholder="brands-placeholder", fragment="brands"),
                    FragmentSlot(placeholder="projects-placeholder", fragment="projects"),
                ],
            )

        if name.startswith(CASE_VIEW_PREFIX):
            fragment = f"{CASE_FRAGMENT_PREFIX}{name.removeprefix(CASE_VIEW_PREFIX)}"
            remote = bool(self.config.FRAGMENT_BASE_URL) and FRAGMENT_NAME_PATTERN.match(fragment) is not None
            if remote or self.repository.exists(fragment):
                return ViewSpec(
                    name=name,
                    slots=[*_FRAME_SLOTS, FragmentSlot(placeholder="content", fragment=fragment, mode=SlotMode.INNER)],
                )

        raise UnknownViewError(f"Unknown view: {name!r}")

    def _shell(self, view: ViewSpec, context: RenderContext) -> BeautifulSoup:
        html = self.environment.get_template("index.html").render(
            site_title=self.config.SITE_TITLE,
            language=context.language,
            languages=self.config.SUPPORTED_LANGUAGES,
            view=view.name,
        )
        return BeautifulSoup(html, "html.parser")

    def _mark_active_language(self, document: BeautifulSoup, language: str) -> None:
        for link in document.find_all(attrs={"data-lang": True}):
            if link["data-lang"] == language:
                link["aria-current"] = "true"
            elif link.has_attr("aria-current"):
                del link["aria-current"]

    async def compose(self, view_name: str, context: RenderContext) -> tuple[BeautifulSoup, list[str]]:
        """Builds the translated document of a view.

        Args:
            view_name: The view to compose.
            context: The render context.

        Returns:
            The document and the names of fragments that failed to load.

        Raises:
            UnknownViewError: If the name matches no view.
        """
        view = self.get_view(view_name)
        document = self._shell(view, context)
        self.applier.apply(document, context)
        report = await self.loader.load(document, view.slots, on_loaded=[partial(self.applier.apply, context=context)])
        self._mark_active_language(document, context.language)
        return document, report.failed

    async def render(
        self,
        view_name: str,
        context: RenderContext,
        preferences: PreferenceStore | None = None,
    ) -> RenderedPage:
        """Renders a full view, resolving any pending scroll target.

        The pending target is only honoured after the fragment loader has
        signalled completion, and only if the target exists in the result.

        Args:
            view_name: The view to render.
            context: The render context.
            preferences: The visitor's preference slots, if any.

        Returns:
            The rendered page.

        Raises:
            UnknownViewError: If the name matches no view.
        """
        view = self.get_view(view_name)
        document = self._shell(view, context)
        self.applier.apply(document, context)

        loaded = asyncio.Event()
        load_task = asyncio.create_task(
            self.loader.load(
                document,
                view.slots,
                on_loaded=[partial(self.applier.apply, context=context)],
                loaded=loaded,
            )
        )

        scroll_target = None
        if preferences is not None:
            outcome = await self.navigation.resume(preferences, loaded)
            if outcome is not None:
                scroll_target = outcome.target

        report = await load_task
        self._mark_active_language(document, context.language)

        if scroll_target and document.find(id=scroll_target) is None:
            self.logger.info(f"Pending scroll target '#{scroll_target}' not in view '{view.name}', ignoring.")
            scroll_target = None
        if scroll_target and document.body is not None:
            document.body["data-scroll-target"] = scroll_target

        self.logger.info(f"Rendered view '{view.name}' in '{context.language}'")
        return RenderedPage(
            view=view.name,
            language=context.language,
            html=str(document),
            scroll_target=scroll_target,
            failed_fragments=report.failed,
        )

    async def render_fragment(self, name: str, context: RenderContext) -> str:
        """Renders one translated fragment, for partial page swaps.

        Args:
            name: The fragment name.
            context: The render context.

        Returns:
            The translated fragment markup.

        Raises:
            InvalidFragmentNameError: If the name is not a valid fragment name.
            FragmentNotFoundError: If the fragment cannot be fetched.
        """
        markup = await asyncio.to_thread(self.repository.fetch, name)
        fragment = BeautifulSoup(markup, "html.parser")
        self.applier.apply(fragment, context)
        self._mark_active_language(fragment, context.language)
        return str(fragment)

    async def navigate(
        self,
        view_name: str,
        target: str,
        context: RenderContext,
        preferences: PreferenceStore,
    ) -> NavigationOutcome:
        """Resolves navigation to a target from the given view.

        Args:
            view_name: The view the visitor is currently on.
            target: The id of the element to reach.
            context: The render context.
            preferences: The visitor's preference slots.

        Returns:
            The navigation outcome.

        Raises:
            UnknownViewError: If the name matches no view.
        """
        document, _ = await self.compose(view_name, context)
        return self.navigation.navigate(document, target, preferences)

    def used_keys(self) -> set[str]:
        """Collects the translation keys referenced by the shell and every fragment.

        Returns:
            The set of referenced keys.
        """
        view = ViewSpec(name=HOME_VIEW, slots=[])
        keys = self.applier.tagged_keys(self._shell(view, self.context_for(None)))
        for name in self.repository.list_names():
            keys |= self.applier.tagged_keys(BeautifulSoup(self.repository.fetch(name), "html.parser"))
        return keys

    def missing_translations(self) -> dict[str, set[str]]:
        """Reports referenced keys absent from each language of the table.

        Returns:
            A mapping of language code to missing keys, covering every
            supported language. Fully covered languages are omitted.
        """
        keys = self.used_keys()
        missing = {}
        for language in self.config.SUPPORTED_LANGUAGES:
            absent = keys - self.table.keys(language)
            if absent:
                missing[language] = absent
        return missing
