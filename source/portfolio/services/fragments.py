"""This module provides the service that splices fragments into placeholders."""

import asyncio
from collections.abc import Callable, Iterable

from bs4 import BeautifulSoup, Tag
from portfolio.exceptions.site import SiteError
from portfolio.models.enums import SlotMode
from portfolio.models.views import FragmentSlot, LoadReport
from portfolio.providers.logging import Logger, LoggingProvider
from portfolio.repositories.fragments import FragmentRepository

CompletionHook = Callable[[BeautifulSoup], object]


class FragmentLoader:
    """Fetches named fragments and splices them into a document.

    Completion hooks run after every batch, so anything registered here
    (typically the translation applier) sees the newly spliced content.
    """

    logger: Logger
    repository: FragmentRepository

    def __init__(self, repository: FragmentRepository | None = None) -> None:
        """Initializes the service.

        Args:
            repository: The source of fragment markup.
        """
        self.logger = LoggingProvider().get_logger()
        self.repository = repository or FragmentRepository()
        self._hooks: list[CompletionHook] = []

    def add_completion_hook(self, hook: CompletionHook) -> None:
        """Registers a callable run with the document after every load batch.

        Args:
            hook: The callable to register.
        """
        self._hooks.append(hook)

    async def load(
        self,
        document: BeautifulSoup,
        slots: Iterable[FragmentSlot],
        on_loaded: Iterable[CompletionHook] = (),
        loaded: asyncio.Event | None = None,
    ) -> LoadReport:
        """Fetches every slot's fragment concurrently and splices it in.

        A fragment that cannot be fetched, or whose placeholder is absent,
        leaves the document as it was for that slot and is reported as
        failed. The `loaded` event is set once the batch is done, even when
        it fails, so that nothing waiting on it hangs.

        Args:
            document: The document to modify in place.
            slots: The placeholders and the fragments that fill them.
            on_loaded: Extra hooks run after this batch only.
            loaded: An event set when the batch and its hooks are done.

        Returns:
            The names of the loaded and failed fragments.
        """
        slots = list(slots)
        report = LoadReport()
        try:
            results = await asyncio.gather(
                *(asyncio.to_thread(self.repository.fetch, slot.fragment) for slot in slots),
                return_exceptions=True,
            )
            for slot, result in zip(slots, results):
                if isinstance(result, SiteError):
                    self.logger.warning(f"Could not load fragment '{slot.fragment}': {result}")
                    report.failed.append(slot.fragment)
                    continue
                if isinstance(result, BaseException):
                    raise result
                if self.splice(document, slot, result):
                    report.loaded.append(slot.fragment)
                else:
                    report.failed.append(slot.fragment)

            for hook in [*self._hooks, *on_loaded]:
                hook(document)
        finally:
            if loaded is not None:
                loaded.set()

        self.logger.debug(f"Loaded fragments {report.loaded}, failed {report.failed}")
        return report

    def splice(self, document: BeautifulSoup, slot: FragmentSlot, markup: str) -> bool:
        """Splices fragment markup into the slot's placeholder.

        Args:
            document: The document to modify in place.
            slot: The slot describing the placeholder and the splice mode.
            markup: The fragment markup.

        Returns:
            True if the placeholder was found and filled.
        """
        placeholder = document.find(id=slot.placeholder)
        if not isinstance(placeholder, Tag):
            self.logger.warning(f"Placeholder '#{slot.placeholder}' not found for fragment '{slot.fragment}'")
            return False

        nodes = [node.extract() for node in list(BeautifulSoup(markup, "html.parser").contents)]
        if slot.mode == SlotMode.OUTER:
            if nodes:
                placeholder.replace_with(*nodes)
            else:
                placeholder.decompose()
        else:
            placeholder.clear()
            for node in nodes:
                placeholder.append(node)
        return True
